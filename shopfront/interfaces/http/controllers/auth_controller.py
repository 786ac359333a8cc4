# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from shopfront.application.use_cases.users.login_user import LoginUserUseCase
from shopfront.interfaces.http.dto.auth import AccessTokenDTO, LoginRequestDTO
from shopfront.shared.errors.validation import raise_validation_error
from shopfront.shared.logging import logger


class AuthController:
    def __init__(self, *, login_use_case: LoginUserUseCase) -> None:
        self._login_use_case = login_use_case

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        identity = dto.identity()
        token = self._login_use_case.execute(identity, dto.password)

        logger.info(f"auth.login: token issued via={identity.kind}")
        return jsonify(AccessTokenDTO.from_entity(token).to_payload()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
