# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import g, request

from shopfront.application.services.auth_gate import AuthGate
from shopfront.domain.users.exceptions import AccessDeniedError
from shopfront.shared.logging import logger

ACCESS_TOKEN_PARAM = "accessToken"


def auth_required(gate: AuthGate) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Resolve ``?accessToken=`` through ``gate`` and pass the user to the view."""

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        @wraps(view)
        def inner(*a, **kw):
            try:
                user = gate.authenticate(request.args.get(ACCESS_TOKEN_PARAM))
            except AccessDeniedError:
                logger.warning(
                    f"Auth failed (token missing/unknown/expired) on "
                    f"{request.method} {request.path}"
                )
                raise

            g.username = user.username
            logger.debug(f"Auth OK: user={user.username} {request.method} {request.path}")
            return view(*a, user=user, **kw)

        return inner

    return decorator


__all__ = ["ACCESS_TOKEN_PARAM", "auth_required"]
