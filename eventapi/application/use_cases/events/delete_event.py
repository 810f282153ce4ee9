# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from eventapi.domain.events.exceptions import EventGoneError
from eventapi.domain.events.guard import EventAction
from eventapi.domain.events.repositories import EventRepository
from eventapi.shared.logging import logger

from eventapi.application.use_cases.events.access import load_authorized_event


def _utcnow() -> datetime:
    return datetime.now(UTC)


class DeleteEventUseCase:
    def __init__(
        self,
        *,
        events: EventRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._events = events
        self._clock = clock

    def execute(self, event_id: int, actor_id: int) -> None:
        load_authorized_event(self._events, event_id, actor_id, EventAction.DELETE)
        if not self._events.soft_delete(event_id, self._clock()):
            raise EventGoneError(EventAction.DELETE)
        logger.info(f"events.delete: ok (event_id={event_id}, actor={actor_id})")
