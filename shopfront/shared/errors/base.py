# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True)
class AppError(Exception):
    message: str
    status: HTTPStatus
    fields: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": int(self.status),
            "message": self.message,
            "fields": self.fields,
        }


class BadRequestError(AppError):
    def __init__(
        self, message: str = "Bad request", *, fields: str | None = None
    ) -> None:
        super().__init__(message=message, status=HTTPStatus.BAD_REQUEST, fields=fields)


class UnauthorizedError(AppError):
    def __init__(
        self, message: str = "Unauthorized", *, fields: str | None = None
    ) -> None:
        super().__init__(message=message, status=HTTPStatus.UNAUTHORIZED, fields=fields)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden", *, fields: str | None = None) -> None:
        super().__init__(message=message, status=HTTPStatus.FORBIDDEN, fields=fields)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not found", *, fields: str | None = None) -> None:
        super().__init__(message=message, status=HTTPStatus.NOT_FOUND, fields=fields)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict", *, fields: str | None = None) -> None:
        super().__init__(message=message, status=HTTPStatus.CONFLICT, fields=fields)


class InfrastructureError(AppError):
    def __init__(
        self,
        message: str = "Internal server error",
        *,
        status: HTTPStatus | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(message=message, status=resolved_status)


class ValidationError(BadRequestError):
    def __init__(
        self,
        message: str = "Incorrectly formatted request",
        *,
        fields: str | None = "POST body",
    ) -> None:
        super().__init__(message, fields=fields)
