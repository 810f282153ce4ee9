# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Event, EventDraft, EventPage, EventPatch
from .filters import (DEFAULT_PER_PAGE, MAX_PER_PAGE, EventFilters, EventQuery,
                      build_filtered_query)
from .guard import AccessDecision, EventAction, authorize

__all__ = [
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "AccessDecision",
    "Event",
    "EventAction",
    "EventDraft",
    "EventFilters",
    "EventPage",
    "EventPatch",
    "EventQuery",
    "authorize",
    "build_filtered_query",
]
