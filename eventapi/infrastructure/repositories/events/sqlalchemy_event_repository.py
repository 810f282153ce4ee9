# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from eventapi.domain.events.entities import Event as DomainEvent
from eventapi.domain.events.entities import EventPage
from eventapi.domain.events.filters import EventQuery
from eventapi.domain.events.repositories import EventRepository
from eventapi.infrastructure.db.models import Event
from eventapi.infrastructure.unit_of_work import unit_of_work_scope
from sqlalchemy import or_
from sqlalchemy.orm import Query, Session


def _to_domain(row: Event) -> DomainEvent:
    return DomainEvent(
        id=row.id,
        owner_id=row.user_id,
        title=row.title,
        description=row.description,
        start_time=row.start_time,
        end_time=row.end_time,
        location=row.location,
        deleted_at=row.deleted_at,
    )


def apply_event_query(query: Query, criteria: EventQuery) -> Query:
    """Translate the predicate part of ``criteria`` into WHERE clauses."""

    if not criteria.include_deleted:
        query = query.filter(Event.deleted_at.is_(None))
    if criteria.start_from is not None:
        query = query.filter(Event.start_time >= criteria.start_from)
    if criteria.end_until is not None:
        query = query.filter(Event.end_time <= criteria.end_until)
    if criteria.location_contains is not None:
        query = query.filter(Event.location.contains(criteria.location_contains, autoescape=True))
    if criteria.keyword_contains is not None:
        query = query.filter(
            or_(
                Event.title.contains(criteria.keyword_contains, autoescape=True),
                Event.description.contains(criteria.keyword_contains, autoescape=True),
            )
        )
    return query


class SqlAlchemyEventRepository(EventRepository):
    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def add(self, event: DomainEvent) -> DomainEvent:
        with unit_of_work_scope(self._session_factory) as session:
            row = Event(
                user_id=event.owner_id,
                title=event.title,
                description=event.description,
                start_time=event.start_time,
                end_time=event.end_time,
                location=event.location,
            )
            session.add(row)
            session.flush()
            return _to_domain(row)

    def find_by_id(self, event_id: int, *, include_deleted: bool = False) -> DomainEvent | None:
        with unit_of_work_scope(self._session_factory) as session:
            query = session.query(Event).filter(Event.id == event_id)
            if not include_deleted:
                query = query.filter(Event.deleted_at.is_(None))
            row = query.first()
            return _to_domain(row) if row else None

    def update(self, event: DomainEvent) -> DomainEvent | None:
        with unit_of_work_scope(self._session_factory) as session:
            row = (
                session.query(Event)
                .filter(Event.id == event.id, Event.deleted_at.is_(None))
                .with_for_update()
                .first()
            )
            if row is None:
                return None
            row.title = event.title
            row.description = event.description
            row.start_time = event.start_time
            row.end_time = event.end_time
            row.location = event.location
            session.flush()
            return _to_domain(row)

    def soft_delete(self, event_id: int, deleted_at: datetime) -> bool:
        with unit_of_work_scope(self._session_factory) as session:
            updated = (
                session.query(Event)
                .filter(Event.id == event_id, Event.deleted_at.is_(None))
                .update({Event.deleted_at: deleted_at}, synchronize_session=False)
            )
        return updated > 0

    def paginate(self, query: EventQuery) -> EventPage:
        with unit_of_work_scope(self._session_factory) as session:
            filtered = apply_event_query(session.query(Event), query)
            total = filtered.count()
            items: list[DomainEvent] = []
            # a page past the end never reaches the driver, whose offset is 64-bit
            if query.offset < total:
                rows = (
                    filtered.order_by(Event.id.asc())
                    .offset(query.offset)
                    .limit(query.per_page)
                    .all()
                )
                items = [_to_domain(row) for row in rows]
        return EventPage(
            items=items,
            current_page=query.page,
            per_page=query.per_page,
            total=total,
        )
