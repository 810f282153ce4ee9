# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from eventapi.domain.events.entities import Event
from eventapi.domain.events.exceptions import (EventForbiddenError,
                                               EventGoneError,
                                               EventNotFoundError)
from eventapi.domain.events.guard import AccessDecision, EventAction, authorize
from eventapi.domain.events.repositories import EventRepository


def load_authorized_event(
    events: EventRepository, event_id: int, actor_id: int, action: EventAction
) -> Event:
    """Fetch an event (soft-deleted included) and run the access guard on it.

    Precedence of failures is gone, then forbidden; a missing id is not found.
    """

    event = events.find_by_id(event_id, include_deleted=True)
    if event is None:
        raise EventNotFoundError(event_id)

    decision = authorize(actor_id, event, action)
    if decision is AccessDecision.GONE:
        raise EventGoneError(action)
    if decision is AccessDecision.FORBIDDEN:
        raise EventForbiddenError(action)
    return event
