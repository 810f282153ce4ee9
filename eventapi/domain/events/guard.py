# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import Enum, StrEnum

from .entities import Event


class EventAction(StrEnum):
    VIEW = "view"
    UPDATE = "update"
    DELETE = "delete"


class AccessDecision(Enum):
    ALLOWED = "allowed"
    GONE = "gone"
    FORBIDDEN = "forbidden"


def authorize(actor_id: int, event: Event, action: EventAction) -> AccessDecision:
    """Decide whether ``actor_id`` may perform ``action`` on ``event``.

    Deletion state is checked before ownership: a non-owner probing a deleted
    event only ever learns that it is gone.
    """

    if event.is_deleted:
        return AccessDecision.GONE
    if event.owner_id != actor_id:
        return AccessDecision.FORBIDDEN
    return AccessDecision.ALLOWED
