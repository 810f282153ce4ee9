# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Translation of optional listing parameters into an executable query spec.

The composer is pure: it neither touches storage nor applies authorization.
Every predicate is ANDed with the others; the keyword predicate is itself an
OR over title and description. Soft-deleted events stay out of the result
unless ``include_deleted`` is requested explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from eventapi.domain.exceptions import InvariantViolation

from .entities import Event

DEFAULT_PER_PAGE = 2
MAX_PER_PAGE = 100


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(slots=True, frozen=True)
class EventFilters:
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = None
    keyword: str | None = None
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    include_deleted: bool = False

    def __post_init__(self) -> None:
        if self.page < 1:
            raise InvariantViolation("page must be a positive integer", field="page")
        if self.per_page < 1:
            raise InvariantViolation("per page must be a positive integer", field="per_page")


@dataclass(slots=True, frozen=True)
class EventQuery:
    start_from: datetime | None
    end_until: datetime | None
    location_contains: str | None
    keyword_contains: str | None
    page: int
    per_page: int
    include_deleted: bool = False

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page

    def is_unfiltered(self) -> bool:
        return (
            self.start_from is None
            and self.end_until is None
            and self.location_contains is None
            and self.keyword_contains is None
        )

    def matches(self, event: Event) -> bool:
        """Evaluate the predicate against an in-memory event.

        Text matching is case-insensitive, mirroring SQL ``LIKE`` on the
        default SQLite collation.
        """

        if event.is_deleted and not self.include_deleted:
            return False
        if self.start_from is not None and event.start_time < self.start_from:
            return False
        if self.end_until is not None and event.end_time > self.end_until:
            return False
        if self.location_contains is not None and not _contains(
            event.location, self.location_contains
        ):
            return False
        if self.keyword_contains is not None and not (
            _contains(event.title, self.keyword_contains)
            or _contains(event.description, self.keyword_contains)
        ):
            return False
        return True


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def build_filtered_query(filters: EventFilters) -> EventQuery:
    return EventQuery(
        start_from=filters.start_time,
        end_until=filters.end_time,
        location_contains=_clean_text(filters.location),
        keyword_contains=_clean_text(filters.keyword),
        page=filters.page,
        per_page=filters.per_page,
        include_deleted=filters.include_deleted,
    )
