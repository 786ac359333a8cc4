# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, request
from flask_cors import CORS

from shopfront.shared.config import SecurityConfig


def configure_cors(app: Flask, security: SecurityConfig) -> None:
    CORS(
        app,
        resources={r"/*": {"origins": security.allowed_origins}},
        allow_headers=security.allowed_headers,
        send_wildcard="*" in security.allowed_origins,
    )

    allowed_headers = ", ".join(security.allowed_headers)

    @app.before_request
    def _short_circuit_preflight():
        if request.method == "OPTIONS":
            return app.response_class(status=HTTPStatus.OK)
        return None

    @app.after_request
    def _add_cors_headers(resp):
        resp.headers.setdefault("Access-Control-Allow-Headers", allowed_headers)
        return resp


__all__ = ["configure_cors"]
