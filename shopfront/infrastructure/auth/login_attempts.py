# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from threading import Lock
from typing import ClassVar

from shopfront.domain.users.repositories import LoginAttemptTracker
from shopfront.shared.logging import logger


class LoginThrottle(LoginAttemptTracker):
    """Failed login counter per identity key.

    A key is blocked once its count reaches ``max_attempts``. Failures recorded
    while blocked leave the count unchanged, and only a successful login
    resets it.
    """

    MAX_ATTEMPTS: ClassVar[int] = 3

    def __init__(self, max_attempts: int | None = None) -> None:
        self._max_attempts = max_attempts or self.MAX_ATTEMPTS
        self._attempts: dict[str, int] = {}
        self._lock = Lock()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def is_blocked(self, key: str) -> bool:
        with self._lock:
            return self._attempts.setdefault(key, 0) >= self._max_attempts

    def record_failure(self, key: str) -> None:
        with self._lock:
            count = self._attempts.get(key, 0)
            if count >= self._max_attempts:
                return

            count += 1
            self._attempts[key] = count

            if count >= self._max_attempts:
                logger.warning(
                    f"login_throttle: BLOCKED key={key} failed_attempts={count}"
                )
            else:
                logger.info(f"login_throttle: failure key={key} failed_attempts={count}")

    def record_success(self, key: str) -> None:
        with self._lock:
            if self._attempts.get(key):
                logger.info(f"login_throttle: reset key={key}")
            self._attempts[key] = 0

    def attempts(self, key: str) -> int:
        with self._lock:
            return self._attempts.get(key, 0)


__all__ = ["LoginThrottle"]
