# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer token authentication for controller methods."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, Protocol, TypeVar

from flask import g, request

from eventapi.shared.errors import UnauthorizedError
from eventapi.shared.logging import logger

_F = TypeVar("_F", bound=Callable[..., Any])


class TokenAuthenticator(Protocol):
    def execute(self, token: str) -> int | None: ...


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    if auth[:7].lower() == "bearer ":
        return auth[7:].strip()
    return ""


def auth_required(f: _F) -> _F:
    """Resolve the bearer token and pass the actor id to the wrapped method.

    The owning controller must expose ``_authenticate`` implementing
    :class:`TokenAuthenticator`. The actor id is handed over explicitly as the
    ``actor_id`` keyword; ``flask.g.user_id`` is set for request logging only.
    """

    @wraps(f)
    def inner(self, *a, **kw):
        token = bearer_token()
        if not token:
            logger.warning(
                f"No Authorization header on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise UnauthorizedError()

        authenticator: TokenAuthenticator = self._authenticate
        user_id = authenticator.execute(token)
        if user_id is None:
            logger.warning(
                f"Auth failed (token not found/expired) on {request.method} {request.path}"
            )
            raise UnauthorizedError()

        g.user_id = user_id
        logger.debug(f"Auth OK: user={user_id} {request.method} {request.path}")
        return f(self, *a, actor_id=user_id, **kw)

    return inner  # type: ignore[return-value]
