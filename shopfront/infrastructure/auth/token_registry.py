# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets
from collections.abc import Callable
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from threading import Lock
from typing import ClassVar

from shopfront.domain.users.entities import AccessToken
from shopfront.domain.users.repositories import AccessTokenRepository
from shopfront.shared.logging import logger

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


class TokenRegistry(AccessTokenRepository):
    """Bearer tokens keyed by owner, valid for a sliding window.

    Each username holds at most one token. Logging in again bumps
    ``last_updated`` on the existing token instead of minting a new one;
    resolving a token never does.
    """

    VALIDITY: ClassVar[timedelta] = timedelta(minutes=5)
    TOKEN_BYTES: ClassVar[int] = 16

    def __init__(self, validity: timedelta | None = None, *, clock: Clock | None = None) -> None:
        self._validity = validity or self.VALIDITY
        self._clock = clock or utcnow
        self._by_owner: dict[str, AccessToken] = {}
        self._by_token: dict[str, AccessToken] = {}
        self._lock = Lock()

    @property
    def validity(self) -> timedelta:
        return self._validity

    def issue_or_refresh(self, username: str) -> AccessToken:
        with self._lock:
            now = self._clock()
            current = self._by_owner.get(username)
            if current is not None:
                current.last_updated = now
                logger.info(f"tokens.refresh: user={username} tok={current.token[:6]}…")
                return replace(current)

            value = secrets.token_urlsafe(self.TOKEN_BYTES)
            while value in self._by_token:
                value = secrets.token_urlsafe(self.TOKEN_BYTES)

            token = AccessToken(owner=username, token=value, last_updated=now)
            self._by_owner[username] = token
            self._by_token[value] = token
            logger.info(
                f"tokens.issue: user={username} valid_for={self._validity.total_seconds():.0f}s "
                f"tok={value[:6]}…"
            )
            return replace(token)

    def resolve(self, token: str | None) -> AccessToken | None:
        if not token:
            return None
        with self._lock:
            found = self._by_token.get(token)
            if found is None:
                return None
            if self._clock() - found.last_updated >= self._validity:
                logger.debug(f"tokens.resolve: expired user={found.owner}")
                return None
            return replace(found)


__all__ = ["Clock", "TokenRegistry", "utcnow"]
