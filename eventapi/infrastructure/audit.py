# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Audit trail for authentication and event mutations.

Entries go to the application log and to the ``audit_logs`` table. Storage
problems are logged and swallowed so that auditing never changes the outcome
of the request being audited.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from eventapi.shared.logging import logger

_REDACTED = "***REDACTED***"
_SENSITIVE_KEYS = ("password", "token", "secret", "key", "email")


class AuditAction(str, Enum):
    REGISTER = "register"
    REGISTER_FAILED = "register_failed"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"

    EVENT_CREATED = "event_created"
    EVENT_UPDATED = "event_updated"
    EVENT_DELETED = "event_deleted"


def redact_details(details: dict[str, Any]) -> dict[str, Any]:
    return {
        key: _REDACTED if any(s in key.lower() for s in _SENSITIVE_KEYS) else value
        for key, value in details.items()
    }


@dataclass(slots=True, frozen=True)
class AuditEntry:
    action: AuditAction
    user_id: int | None = None
    ip_address: str | None = None
    success: bool = True
    details: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def describe(self) -> str:
        line = (
            f"AUDIT: {self.action.value} | user_id={self.user_id} | "
            f"ip={self.ip_address} | success={self.success}"
        )
        if self.details:
            line += f" | details={self.details}"
        return line


class AuditLogger:
    def log(self, entry: AuditEntry) -> None:
        if entry.success:
            logger.info(entry.describe())
        else:
            logger.warning(entry.describe())
        self._store(entry)

    @staticmethod
    def _store(entry: AuditEntry) -> None:
        from eventapi.infrastructure.db import session_scope
        from eventapi.infrastructure.db.models import AuditLog

        try:
            with session_scope() as session:
                session.add(
                    AuditLog(
                        timestamp=entry.timestamp,
                        action=entry.action.value,
                        user_id=entry.user_id,
                        ip_address=entry.ip_address,
                        success=entry.success,
                        details_json=json.dumps(entry.details, default=str)
                        if entry.details
                        else None,
                    )
                )
        except SQLAlchemyError as exc:
            logger.warning(f"audit: could not persist {entry.action.value} ({type(exc).__name__})")


audit = AuditLogger()


def audit_log(
    action: AuditAction,
    user_id: int | None = None,
    ip_address: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    audit.log(
        AuditEntry(
            action=action,
            user_id=user_id,
            ip_address=ip_address,
            success=success,
            details=redact_details(details) if details else {},
        )
    )


__all__ = [
    "AuditAction",
    "AuditEntry",
    "AuditLogger",
    "audit",
    "audit_log",
    "redact_details",
]
