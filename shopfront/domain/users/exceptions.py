# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shopfront.shared.errors.base import ForbiddenError, UnauthorizedError


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self, identity_kind: str = "username") -> None:
        super().__init__(f"Invalid {identity_kind} or password", fields="POST body")
        self.identity_kind = identity_kind


class AccountLockedError(InvalidCredentialsError):
    """Raised for identities past the failed-attempt threshold.

    Clients receive the same 401 body as for a wrong password.
    """


class AccessDeniedError(ForbiddenError):
    def __init__(self) -> None:
        super().__init__(
            "Unauthorized - Missing or invalid accessToken, "
            "can only access cart if user is logged in",
            fields="query",
        )
