# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from eventapi.domain.users.entities import AccessToken as DomainAccessToken
from eventapi.domain.users.entities import User as DomainUser
from eventapi.domain.users.exceptions import EmailAlreadyRegisteredError
from eventapi.domain.users.repositories import AccessTokenRepository, UserRepository
from eventapi.infrastructure.db.models import AccessToken, User
from eventapi.infrastructure.unit_of_work import unit_of_work_scope
from eventapi.shared.logging import logger
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session


def digest_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        name=row.name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(
                    name=user.name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                return _to_domain(row)
        except IntegrityError as exc:
            # concurrent registration with the same e-mail
            logger.warning("users.add: unique constraint violated")
            raise EmailAlreadyRegisteredError() from exc


class SqlAlchemyAccessTokenRepository(AccessTokenRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        ttl_days: int = 7,
        name: str = "auth_token",
    ) -> None:
        self._session_factory = session_factory
        self._ttl = timedelta(days=ttl_days)
        self._name = name

    def replace_for_user(self, user_id: int) -> DomainAccessToken:
        token_value = secrets.token_urlsafe(48)
        expires_at = datetime.now(UTC) + self._ttl
        with unit_of_work_scope(self._session_factory) as session:
            revoked = (
                session.query(AccessToken)
                .filter(AccessToken.user_id == user_id)
                .delete(synchronize_session=False)
            )
            session.add(
                AccessToken(
                    user_id=user_id,
                    name=self._name,
                    token_hash=digest_token(token_value),
                    expires_at=expires_at,
                )
            )
        logger.info(
            f"tokens.replace: issued for user={user_id} revoked={revoked} "
            f"exp={expires_at.isoformat()}"
        )
        return DomainAccessToken(user_id=user_id, token=token_value, expires_at=expires_at)

    def resolve(self, token: str) -> int | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(AccessToken.user_id)
                .filter(
                    AccessToken.token_hash == digest_token(token),
                    AccessToken.expires_at > datetime.now(UTC),
                )
                .first()
            )
        return row[0] if row else None

    def revoke(self, token: str) -> None:
        with unit_of_work_scope(self._session_factory) as session:
            session.query(AccessToken).filter(
                AccessToken.token_hash == digest_token(token)
            ).delete(synchronize_session=False)
