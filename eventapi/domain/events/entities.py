# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Event records and the value objects used to create, patch and page them."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field, fields, replace
from datetime import datetime

from eventapi.domain.exceptions import InvariantViolation


@dataclass(slots=True, frozen=True)
class Event:
    """A calendar event owned by the user who created it."""

    id: int
    owner_id: int
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    location: str
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None


@dataclass(slots=True, frozen=True)
class EventDraft:
    """Fields supplied when an event is created. All of them are required."""

    title: str
    description: str
    start_time: datetime
    end_time: datetime
    location: str

    def to_event(self, owner_id: int) -> Event:
        return Event(
            id=0,
            owner_id=owner_id,
            title=self.title,
            description=self.description,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
        )


@dataclass(slots=True, frozen=True)
class EventPatch:
    """Partial update of the mutable event fields.

    ``None`` means "leave unchanged". The owner and the soft-delete marker are
    not part of the patch, so an update can never reassign or undelete an event.
    """

    title: str | None = None
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = None

    def provided(self) -> Iterator[tuple[str, object]]:
        for fld in fields(self):
            value = getattr(self, fld.name)
            if value is not None:
                yield fld.name, value

    def is_empty(self) -> bool:
        return next(self.provided(), None) is None

    def apply(self, event: Event) -> Event:
        changes = dict(self.provided())
        if not changes:
            return event
        return replace(event, **changes)


@dataclass(slots=True, frozen=True)
class EventPage:
    items: list[Event] = field(default_factory=list)
    current_page: int = 1
    per_page: int = 2
    total: int = 0

    def __post_init__(self) -> None:
        if self.per_page < 1:
            raise InvariantViolation("page size must be positive", field="per_page")
        if self.total < 0:
            raise InvariantViolation("total must be non-negative", field="total")

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.per_page))
