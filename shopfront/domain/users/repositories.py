# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import AccessToken, User


class UserRepository(Protocol):
    def find_by_username(self, username: str) -> User | None: ...
    def find_by_email(self, email: str) -> User | None: ...


class AccessTokenRepository(Protocol):
    def issue_or_refresh(self, username: str) -> AccessToken: ...
    def resolve(self, token: str | None) -> AccessToken | None: ...


class LoginAttemptTracker(Protocol):
    def is_blocked(self, key: str) -> bool: ...
    def record_failure(self, key: str) -> None: ...
    def record_success(self, key: str) -> None: ...
