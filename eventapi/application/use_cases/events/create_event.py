# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from eventapi.domain.events.entities import Event, EventDraft
from eventapi.domain.events.repositories import EventRepository
from eventapi.shared.logging import logger


class CreateEventUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, actor_id: int, draft: EventDraft) -> Event:
        event = self._events.add(draft.to_event(owner_id=actor_id))
        logger.info(f"events.create: ok (event_id={event.id}, owner={actor_id})")
        return event
