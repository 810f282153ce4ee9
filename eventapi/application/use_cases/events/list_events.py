# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from eventapi.domain.events.entities import EventPage
from eventapi.domain.events.filters import EventFilters, build_filtered_query
from eventapi.domain.events.repositories import EventRepository
from eventapi.shared.logging import logger


class ListEventsUseCase:
    """Paginated listing across all owners; soft-deleted events are excluded."""

    def __init__(self, *, events: EventRepository) -> None:
        self._events = events

    def execute(self, filters: EventFilters) -> EventPage:
        query = build_filtered_query(filters)
        page = self._events.paginate(query)
        logger.debug(
            f"events.list: page={page.current_page}/{page.last_page} "
            f"n={len(page.items)} total={page.total} unfiltered={query.is_unfiltered()}"
        )
        return page
