# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Use-case for revoking access tokens."""

from __future__ import annotations

from eventapi.domain.users.repositories import AccessTokenRepository


class LogoutUserUseCase:
    def __init__(self, *, tokens: AccessTokenRepository) -> None:
        self._tokens = tokens

    def execute(self, token: str) -> None:
        if token:
            self._tokens.revoke(token)
