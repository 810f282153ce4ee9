from __future__ import annotations

from datetime import UTC, datetime
from functools import partial

import pytest
from sqlalchemy.exc import OperationalError

from eventapi.app import create_app
from eventapi.application.services.password_hashing import \
    WerkzeugPasswordHasher
from eventapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from eventapi.domain.users.entities import User as DomainUser
from eventapi.infrastructure.db import SessionLocal
from eventapi.infrastructure.db.models import AccessToken, AuditLog, User
from eventapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyAccessTokenRepository, SqlAlchemyUserRepository, digest_token)
from eventapi.infrastructure.unit_of_work import unit_of_work_scope

CREDENTIALS = {"email": "alice@example.com", "password": "secret123"}


def test_register_login_logout_flow() -> None:
    app = create_app()

    with app.test_client() as client:
        register = client.post("/api/register", json={"name": "Alice", **CREDENTIALS})
        assert register.status_code == 201
        first_token = register.get_json()["token"]

        login = client.post("/api/login", json=CREDENTIALS)
        assert login.status_code == 200
        assert login.get_json()["message"] == "Login successfully"
        token = login.get_json()["token"]
        assert token != first_token

        stale = client.get("/api/events", headers={"Authorization": f"Bearer {first_token}"})
        assert stale.status_code == 401

        logout = client.delete("/api/logout", headers={"Authorization": f"Bearer {token}"})
        assert logout.status_code == 200

        after = client.get("/api/events", headers={"Authorization": f"Bearer {token}"})
        assert after.status_code == 401

    session = SessionLocal()
    try:
        assert session.query(User).count() == 1
        assert session.query(AccessToken).count() == 0
        actions = {row.action for row in session.query(AuditLog).all()}
        assert {"register", "login_success", "logout"} <= actions
    finally:
        session.close()


def test_tokens_are_stored_as_digests() -> None:
    app = create_app()

    with app.test_client() as client:
        token = client.post("/api/register", json={"name": "Alice", **CREDENTIALS}).get_json()[
            "token"
        ]

    session = SessionLocal()
    try:
        stored = session.query(AccessToken).one()
        assert stored.token_hash == digest_token(token)
        assert stored.token_hash != token
    finally:
        session.close()


def test_duplicate_registration_is_rejected() -> None:
    app = create_app()

    with app.test_client() as client:
        client.post("/api/register", json={"name": "Alice", **CREDENTIALS})
        again = client.post(
            "/api/register",
            json={"name": "Alice 2", "email": "ALICE@example.com", "password": "another123"},
        )

    assert again.status_code == 409
    assert again.get_json() == {"error": "register_failed", "message": "Register failed"}


def test_login_wrong_password_is_unauthorized() -> None:
    app = create_app()

    with app.test_client() as client:
        client.post("/api/register", json={"name": "Alice", **CREDENTIALS})
        response = client.post(
            "/api/login", json={"email": CREDENTIALS["email"], "password": "not-the-one"}
        )

    assert response.status_code == 401
    assert response.get_json()["error"] == "unauthorized"


def test_health_reports_database_ok() -> None:
    app = create_app()

    with app.test_client() as client:
        response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok"}
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"]


class _FailingTokenRepository:
    def replace_for_user(self, user_id: int):
        raise OperationalError("INSERT INTO access_tokens", {}, Exception("disk I/O error"))

    def resolve(self, token: str) -> int | None:
        return None

    def revoke(self, token: str) -> None:
        return None


def test_failed_token_issue_leaves_no_account() -> None:
    use_case = RegisterUserUseCase(
        users=SqlAlchemyUserRepository(SessionLocal),
        tokens=_FailingTokenRepository(),
        password_hasher=WerkzeugPasswordHasher(),
        transaction=partial(unit_of_work_scope, SessionLocal),
    )

    with pytest.raises(OperationalError):
        use_case.execute("Alice", CREDENTIALS["email"], CREDENTIALS["password"])

    session = SessionLocal()
    try:
        assert session.query(User).count() == 0
    finally:
        session.close()

    app = create_app()
    with app.test_client() as client:
        retry = client.post("/api/register", json={"name": "Alice", **CREDENTIALS})
    assert retry.status_code == 201


def test_nested_scopes_commit_once() -> None:
    users = SqlAlchemyUserRepository(SessionLocal)
    tokens = SqlAlchemyAccessTokenRepository(SessionLocal)

    with pytest.raises(RuntimeError):
        with unit_of_work_scope(SessionLocal):
            user = users.add(
                DomainUser(
                    id=0,
                    name="Alice",
                    email=CREDENTIALS["email"],
                    password_hash="hash",
                    created_at=datetime.now(UTC),
                )
            )
            tokens.replace_for_user(user.id)
            raise RuntimeError("abort")

    assert users.find_by_email(CREDENTIALS["email"]) is None
