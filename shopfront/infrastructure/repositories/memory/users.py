# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable

from shopfront.domain.users.entities import User
from shopfront.domain.users.repositories import UserRepository
from shopfront.shared.logging import logger


class InMemoryUserRegistry(UserRepository):
    def __init__(self, users: Iterable[User]) -> None:
        self._users: dict[str, User] = {}
        self._by_email: dict[str, User] = {}
        for user in users:
            if user.username in self._users:
                logger.warning(f"data.load: duplicate username={user.username} skipped")
                continue
            self._users[user.username] = user

            if user.email in self._by_email:
                logger.warning(
                    f"data.load: duplicate email={user.email} for user={user.username}, "
                    "login by email resolves to the first user"
                )
                continue
            self._by_email[user.email] = user

    def __len__(self) -> int:
        return len(self._users)

    def find_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def find_by_email(self, email: str) -> User | None:
        return self._by_email.get(email)
