# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from datetime import UTC, datetime

from eventapi.domain.users.entities import User, normalize_email
from eventapi.domain.users.exceptions import EmailAlreadyRegisteredError
from eventapi.domain.users.repositories import (AccessTokenRepository,
                                                PasswordHasher, UserRepository)


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: AccessTokenRepository,
        password_hasher: PasswordHasher,
        transaction: Callable[[], AbstractContextManager[object]] = nullcontext,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._transaction = transaction

    def execute(self, name: str, email: str, password: str) -> tuple[User, str]:
        """Create the account and its first token; neither persists without the other."""

        email = normalize_email(email)
        if self._users.find_by_email(email):
            raise EmailAlreadyRegisteredError()
        hashed = self._password_hasher.hash(password)
        user = User(
            id=0,
            name=name.strip(),
            email=email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        with self._transaction():
            persisted = self._users.add(user)
            token = self._tokens.replace_for_user(persisted.id)
        return persisted, token.token
