# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, NoReturn

from pydantic import ValidationError as PydanticValidationError

from shopfront.shared.logging import logger

from .base import AppError, ValidationError


def format_pydantic_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    errors_list = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )
    return errors_list


def raise_validation_error(
    exc: PydanticValidationError, *, error: AppError | None = None
) -> NoReturn:
    logger.debug(f"validation: rejected {format_pydantic_errors(exc)}")
    raise (error or ValidationError()) from exc


__all__ = [
    "format_pydantic_errors",
    "raise_validation_error",
]
