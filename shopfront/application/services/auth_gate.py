# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shopfront.domain.users.entities import User
from shopfront.domain.users.exceptions import AccessDeniedError
from shopfront.domain.users.repositories import AccessTokenRepository, UserRepository
from shopfront.shared.logging import logger


class AuthGate:
    """Single enforcement point for routes that need a logged-in user."""

    def __init__(self, *, tokens: AccessTokenRepository, users: UserRepository) -> None:
        self._tokens = tokens
        self._users = users

    def authenticate(self, supplied_token: str | None) -> User:
        if not supplied_token:
            logger.debug("auth_gate: no access token supplied")
            raise AccessDeniedError()

        token = self._tokens.resolve(supplied_token)
        if token is None:
            logger.info("auth_gate: unknown or expired access token")
            raise AccessDeniedError()

        user = self._users.find_by_username(token.owner)
        if user is None:
            logger.error(f"auth_gate: token owner missing from registry user={token.owner}")
            raise AccessDeniedError()

        return user
