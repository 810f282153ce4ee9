# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for resolving a bearer token to the acting user id."""

from __future__ import annotations

from eventapi.domain.users.repositories import AccessTokenRepository


class AuthenticateTokenUseCase:
    def __init__(self, *, tokens: AccessTokenRepository) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> int | None:
        if not token:
            return None
        return self._tokens.resolve(token)
