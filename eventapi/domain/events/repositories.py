# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Event, EventPage
from .filters import EventQuery


class EventRepository(Protocol):
    def add(self, event: Event) -> Event: ...

    def find_by_id(self, event_id: int, *, include_deleted: bool = False) -> Event | None: ...

    def update(self, event: Event) -> Event | None:
        """Persist the mutable fields. Returns ``None`` if the event is soft-deleted."""
        ...

    def soft_delete(self, event_id: int, deleted_at: datetime) -> bool:
        """Set the deletion marker unless already set. Returns whether it was set."""
        ...

    def paginate(self, query: EventQuery) -> EventPage: ...
