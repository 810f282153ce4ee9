# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from eventapi.domain.users.entities import User, normalize_email
from eventapi.domain.users.exceptions import InvalidCredentialsError
from eventapi.domain.users.repositories import (AccessTokenRepository,
                                                PasswordHasher, UserRepository)


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: AccessTokenRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    @cached_property
    def _placeholder_hash(self) -> str:
        return self._password_hasher.hash("placeholder-password-for-unknown-users")

    def execute(self, email: str, password: str) -> tuple[User, str]:
        """Verify credentials and issue the user's only valid token.

        An unknown e-mail and a wrong password raise the same error, and both
        pay for one hash verification.
        """

        user = self._users.find_by_email(normalize_email(email))
        if user is None:
            self._password_hasher.verify(password, self._placeholder_hash)
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._tokens.replace_for_user(user.id)
        return user, token.token
