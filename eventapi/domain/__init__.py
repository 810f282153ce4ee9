# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Domain layer primitives."""

from .events import (AccessDecision, Event, EventAction, EventDraft,
                     EventFilters, EventPage, EventPatch, EventQuery,
                     authorize, build_filtered_query)
from .exceptions import InvariantViolation, InvariantViolationError
from .users.entities import AccessToken, User

__all__ = [
    "AccessDecision",
    "AccessToken",
    "Event",
    "EventAction",
    "EventDraft",
    "EventFilters",
    "EventPage",
    "EventPatch",
    "EventQuery",
    "InvariantViolation",
    "InvariantViolationError",
    "User",
    "authorize",
    "build_filtered_query",
]
