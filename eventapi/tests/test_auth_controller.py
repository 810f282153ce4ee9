from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from eventapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from eventapi.domain.users.entities import User
from eventapi.domain.users.exceptions import (EmailAlreadyRegisteredError,
                                              InvalidCredentialsError)
from eventapi.interfaces.http.controllers.auth_controller import AuthController
from eventapi.shared.middleware.error_handler import configure_error_handling


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app)
    return app


def _user(email: str = "alice@example.com") -> User:
    return User(
        id=1,
        name="Alice",
        email=email,
        password_hash="hash",
        created_at=datetime.now(UTC),
    )


def _controller(**overrides) -> AuthController:
    kwargs = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "authenticate_use_case": MagicMock(),
    }
    kwargs.update(overrides)
    return AuthController(**kwargs)


def test_register_endpoint_returns_token(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
            register_called["args"] = (name, email, password)
            return _user(email), "token123"

    controller = _controller(register_use_case=cast(RegisterUserUseCase, StubRegister()))
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"name": "Alice", "email": "Alice@Example.com", "password": "secret123"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("Alice", "alice@example.com", "secret123")
    assert response.get_json() == {"message": "Register successfully", "token": "token123"}


def test_register_duplicate_email_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = EmailAlreadyRegisteredError()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"name": "Alice", "email": "alice@example.com", "password": "secret123"},
        )

    assert response.status_code == 409
    assert response.get_json() == {"error": "register_failed", "message": "Register failed"}


def test_register_short_password_returns_422(flask_app: Flask) -> None:
    register = MagicMock()
    flask_app.register_blueprint(_controller(register_use_case=register).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/register",
            json={"name": "Alice", "email": "alice@example.com", "password": "short"},
        )

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["context"]["fields"] == ["password"]
    register.execute.assert_not_called()


def test_login_invalid_payload_returns_422(flask_app: Flask) -> None:
    flask_app.register_blueprint(_controller().as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/api/login", json={"email": "not-an-email"})

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert set(payload["context"]["fields"]) == {"email", "password"}


def test_login_success_returns_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = (_user(), "fresh-token")
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/login", json={"email": "alice@example.com", "password": "secret123"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"message": "Login successfully", "token": "fresh-token"}
    login.execute.assert_called_once_with("alice@example.com", "secret123")


def test_login_bad_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    flask_app.register_blueprint(_controller(login_use_case=login).as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/api/login", json={"email": "alice@example.com", "password": "wrong-pass"}
        )

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"


def test_logout_requires_bearer_token(flask_app: Flask) -> None:
    logout = MagicMock()
    flask_app.register_blueprint(_controller(logout_use_case=logout).as_blueprint())

    with flask_app.test_client() as client:
        response = client.delete("/api/logout")

    assert response.status_code == 401
    assert response.get_json() == {"error": "unauthorized"}
    logout.execute.assert_not_called()


def test_logout_revokes_presented_token(flask_app: Flask) -> None:
    logout = MagicMock()
    authenticate = MagicMock()
    authenticate.execute.return_value = 1
    controller = _controller(logout_use_case=logout, authenticate_use_case=authenticate)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.delete("/api/logout", headers={"Authorization": "Bearer abc"})

    assert response.status_code == 200
    assert response.get_json() == {"message": "Logged out successfully"}
    authenticate.execute.assert_called_once_with("abc")
    logout.execute.assert_called_once_with("abc")
