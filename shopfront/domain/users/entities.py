# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, TypeAlias

from shopfront.domain.cart.entities import CartEntry


@dataclass(slots=True)
class User:
    """Registered shopper. ``cart`` is mutated only through the cart manager."""

    username: str
    email: str
    password: str
    cart: list[CartEntry] = field(default_factory=list)

    def check_password(self, password: str) -> bool:
        return self.password == password


@dataclass(slots=True)
class AccessToken:

    owner: str
    token: str
    last_updated: datetime


@dataclass(slots=True, frozen=True)
class ByUsername:
    kind: ClassVar[str] = "username"

    username: str


@dataclass(slots=True, frozen=True)
class ByEmail:
    kind: ClassVar[str] = "email"

    email: str


LoginIdentity: TypeAlias = ByUsername | ByEmail
