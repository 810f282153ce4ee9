# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from eventapi.domain.events.entities import Event, EventPatch
from eventapi.domain.events.exceptions import EventGoneError
from eventapi.domain.events.guard import EventAction
from eventapi.domain.events.repositories import EventRepository
from eventapi.shared.logging import logger

from eventapi.application.use_cases.events.access import load_authorized_event


class UpdateEventUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, event_id: int, actor_id: int, patch: EventPatch) -> Event:
        current = load_authorized_event(self._events, event_id, actor_id, EventAction.UPDATE)
        if patch.is_empty():
            return current

        updated = self._events.update(patch.apply(current))
        if updated is None:
            # deleted between the guard check and the write
            raise EventGoneError(EventAction.UPDATE)

        changed = ",".join(name for name, _ in patch.provided())
        logger.info(f"events.update: ok (event_id={event_id}, fields={changed})")
        return updated
