"""In-memory repositories shared by the use-case and controller tests."""

from __future__ import annotations

from dataclasses import replace
from datetime import UTC, datetime, timedelta

from eventapi.domain.events.entities import Event, EventPage
from eventapi.domain.events.filters import EventQuery
from eventapi.domain.events.repositories import EventRepository
from eventapi.domain.users.entities import AccessToken, User
from eventapi.domain.users.repositories import (AccessTokenRepository,
                                                PasswordHasher, UserRepository)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.email] = new_user
        return new_user


class InMemoryTokenRepository(AccessTokenRepository):
    def __init__(self) -> None:
        self._tokens: dict[str, int] = {}
        self._seq = 1

    def replace_for_user(self, user_id: int) -> AccessToken:
        for key, owner in list(self._tokens.items()):
            if owner == user_id:
                del self._tokens[key]
        token = AccessToken(
            user_id=user_id,
            token=f"token-{user_id}-{self._seq}",
            expires_at=datetime.now(UTC) + timedelta(days=7),
        )
        self._seq += 1
        self._tokens[token.token] = user_id
        return token

    def resolve(self, token: str) -> int | None:
        return self._tokens.get(token)

    def revoke(self, token: str) -> None:
        self._tokens.pop(token, None)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


class InMemoryEventRepository(EventRepository):
    def __init__(self) -> None:
        self._events: dict[int, Event] = {}
        self._seq = 1

    def add(self, event: Event) -> Event:
        stored = replace(event, id=self._seq)
        self._seq += 1
        self._events[stored.id] = stored
        return stored

    def find_by_id(self, event_id: int, *, include_deleted: bool = False) -> Event | None:
        event = self._events.get(event_id)
        if event is None or (event.is_deleted and not include_deleted):
            return None
        return event

    def update(self, event: Event) -> Event | None:
        current = self._events.get(event.id)
        if current is None or current.is_deleted:
            return None
        stored = replace(event, owner_id=current.owner_id, deleted_at=None)
        self._events[event.id] = stored
        return stored

    def soft_delete(self, event_id: int, deleted_at: datetime) -> bool:
        current = self._events.get(event_id)
        if current is None or current.is_deleted:
            return False
        self._events[event_id] = replace(current, deleted_at=deleted_at)
        return True

    def paginate(self, query: EventQuery) -> EventPage:
        matched = [e for _, e in sorted(self._events.items()) if query.matches(e)]
        return EventPage(
            items=matched[query.offset : query.offset + query.per_page],
            current_page=query.page,
            per_page=query.per_page,
            total=len(matched),
        )
