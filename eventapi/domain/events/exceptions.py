# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from eventapi.shared.errors.base import DomainError

from .guard import EventAction

_PAST_TENSE = {
    EventAction.VIEW: "viewed",
    EventAction.UPDATE: "updated",
    EventAction.DELETE: "deleted",
}


class EventNotFoundError(DomainError):
    code = "event_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Event not found"

    def __init__(self, event_id: int) -> None:
        super().__init__(context={"event_id": event_id})


class EventGoneError(DomainError):
    code = "event_gone"
    status = HTTPStatus.GONE

    def __init__(self, action: EventAction) -> None:
        super().__init__(
            message=f"This event has been deleted and cannot be {_PAST_TENSE[action]}."
        )


class EventForbiddenError(DomainError):
    code = "event_forbidden"
    status = HTTPStatus.FORBIDDEN

    def __init__(self, action: EventAction) -> None:
        super().__init__(message=f"You are not authorized to {action.value} this event.")
