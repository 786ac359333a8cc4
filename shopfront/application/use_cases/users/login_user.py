# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shopfront.domain.users.entities import AccessToken, ByEmail, ByUsername, LoginIdentity
from shopfront.domain.users.exceptions import AccountLockedError, InvalidCredentialsError
from shopfront.domain.users.repositories import (
    AccessTokenRepository,
    LoginAttemptTracker,
    UserRepository,
)
from shopfront.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: AccessTokenRepository,
        attempts: LoginAttemptTracker,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._attempts = attempts

    def execute(self, identity: LoginIdentity, password: str) -> AccessToken:
        key = self._resolve_key(identity)

        if self._attempts.is_blocked(key):
            logger.warning(f"auth.login: blocked key={key} via={identity.kind}")
            raise AccountLockedError(identity.kind)

        user = self._users.find_by_username(key)
        if user is None or not user.check_password(password):
            self._attempts.record_failure(key)
            logger.info(f"auth.login: failed key={key} via={identity.kind}")
            raise InvalidCredentialsError(identity.kind)

        self._attempts.record_success(key)
        token = self._tokens.issue_or_refresh(user.username)
        logger.info(f"auth.login: ok user={user.username} via={identity.kind}")
        return token

    def _resolve_key(self, identity: LoginIdentity) -> str:
        """Map a login identity to the username that keys throttle and token state."""

        if isinstance(identity, ByUsername):
            return identity.username
        if isinstance(identity, ByEmail):
            user = self._users.find_by_email(identity.email)
            if user is None:
                logger.info("auth.login: unknown email")
                raise InvalidCredentialsError(identity.kind)
            return user.username
        raise TypeError(f"unsupported login identity: {identity!r}")


__all__ = ["LoginUserUseCase"]
