from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from shopfront.application.use_cases.users.login_user import LoginUserUseCase
from shopfront.domain.users.entities import AccessToken, ByEmail, ByUsername, LoginIdentity
from shopfront.domain.users.exceptions import InvalidCredentialsError
from shopfront.interfaces.http.controllers.auth_controller import AuthController
from shopfront.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def test_login_returns_access_token(flask_app: Flask) -> None:
    login_called: dict[str, tuple[LoginIdentity, str]] = {}

    class StubLogin:
        def execute(self, identity: LoginIdentity, password: str) -> AccessToken:
            login_called["args"] = (identity, password)
            return AccessToken(
                owner="alice", token="token123", last_updated=datetime.now(UTC)
            )

    controller = AuthController(login_use_case=cast(LoginUserUseCase, StubLogin()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"username": "alice", "password": "secret"})

    assert response.status_code == 200
    assert response.get_json() == {"accessToken": "token123"}
    assert login_called["args"] == (ByUsername("alice"), "secret")


def test_login_by_email_passes_email_identity(flask_app: Flask) -> None:
    use_case = MagicMock()
    use_case.execute.return_value = AccessToken(
        owner="alice", token="token123", last_updated=datetime.now(UTC)
    )
    flask_app.register_blueprint(AuthController(login_use_case=use_case).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/login", json={"email": "alice@example.com", "password": "secret"}
        )

    assert response.status_code == 200
    use_case.execute.assert_called_once_with(ByEmail("alice@example.com"), "secret")


@pytest.mark.parametrize(
    "body",
    [
        {"username": "alice", "email": "alice@example.com", "password": "secret"},
        {"username": "alice"},
        {"email": "alice@example.com", "password": ""},
        {"password": "secret"},
        {},
        ["alice", "secret"],
    ],
)
def test_login_malformed_payload_returns_400(flask_app: Flask, body: object) -> None:
    use_case = MagicMock()
    flask_app.register_blueprint(AuthController(login_use_case=use_case).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json=body)

    assert response.status_code == 400
    assert response.get_json() == {
        "code": 400,
        "message": "Incorrectly formatted request",
        "fields": "POST body",
    }
    use_case.execute.assert_not_called()


def test_login_non_json_body_returns_400(flask_app: Flask) -> None:
    flask_app.register_blueprint(
        AuthController(login_use_case=MagicMock()).as_blueprint()
    )

    with flask_app.test_client() as client:
        response = client.post("/login", data="username=alice", content_type="text/plain")

    assert response.status_code == 400


def test_login_invalid_credentials_returns_401(flask_app: Flask) -> None:
    use_case = MagicMock()
    use_case.execute.side_effect = InvalidCredentialsError("email")
    flask_app.register_blueprint(AuthController(login_use_case=use_case).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/login", json={"email": "x@example.com", "password": "p"})

    assert response.status_code == 401
    assert response.get_json() == {
        "code": 401,
        "message": "Invalid email or password",
        "fields": "POST body",
    }
