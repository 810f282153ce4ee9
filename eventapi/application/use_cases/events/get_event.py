# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from eventapi.domain.events.entities import Event
from eventapi.domain.events.guard import EventAction
from eventapi.domain.events.repositories import EventRepository

from eventapi.application.use_cases.events.access import load_authorized_event


class GetEventUseCase:
    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, event_id: int, actor_id: int) -> Event:
        return load_authorized_event(self._events, event_id, actor_id, EventAction.VIEW)
