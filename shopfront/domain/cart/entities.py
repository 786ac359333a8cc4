# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from shopfront.domain.catalog.entities import Product
from shopfront.domain.cart.exceptions import InvalidQuantityError


@dataclass(slots=True)
class CartEntry:

    product: Product
    quantity: int = 1

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise InvalidQuantityError()
