# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


def normalize_email(email: str) -> str:
    return email.strip().lower()


@dataclass(slots=True, frozen=True)
class User:

    id: int
    name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class AccessToken:
    """A freshly issued bearer token. The plain value is only known at issue time."""

    user_id: int
    token: str
    expires_at: datetime
