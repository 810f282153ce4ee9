# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from eventapi.shared.errors.base import DomainError


class EmailAlreadyRegisteredError(DomainError):
    code = "register_failed"
    status = HTTPStatus.CONFLICT
    message = "Register failed"


class InvalidCredentialsError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED
    message = "Unauthorized"
