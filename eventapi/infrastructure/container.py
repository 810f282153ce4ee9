# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property, partial

from eventapi.application.services.password_hashing import \
    WerkzeugPasswordHasher
from eventapi.application.use_cases.events.create_event import \
    CreateEventUseCase
from eventapi.application.use_cases.events.delete_event import \
    DeleteEventUseCase
from eventapi.application.use_cases.events.get_event import GetEventUseCase
from eventapi.application.use_cases.events.list_events import \
    ListEventsUseCase
from eventapi.application.use_cases.events.update_event import \
    UpdateEventUseCase
from eventapi.application.use_cases.users.authenticate_token import \
    AuthenticateTokenUseCase
from eventapi.application.use_cases.users.login_user import LoginUserUseCase
from eventapi.application.use_cases.users.logout_user import LogoutUserUseCase
from eventapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from eventapi.infrastructure.db import SessionLocal
from eventapi.infrastructure.repositories.events.sqlalchemy_event_repository import \
    SqlAlchemyEventRepository
from eventapi.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyAccessTokenRepository, SqlAlchemyUserRepository)
from eventapi.infrastructure.unit_of_work import unit_of_work_scope
from eventapi.interfaces.http.controllers.auth_controller import AuthController
from eventapi.interfaces.http.controllers.events_controller import \
    EventsController
from eventapi.interfaces.http.controllers.misc_controller import MiscController
from eventapi.shared.config import load_config


class Container:
    def __init__(self) -> None:
        self._config = load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher()

    # Repositories

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(SessionLocal)

    @cached_property
    def access_token_repository(self) -> SqlAlchemyAccessTokenRepository:
        return SqlAlchemyAccessTokenRepository(
            SessionLocal,
            ttl_days=self._config.auth.token_ttl_days,
            name=self._config.auth.token_name,
        )

    @cached_property
    def event_repository(self) -> SqlAlchemyEventRepository:
        return SqlAlchemyEventRepository(SessionLocal)

    # Auth use cases

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            tokens=self.access_token_repository,
            password_hasher=self.password_hasher,
            transaction=partial(unit_of_work_scope, SessionLocal),
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.access_token_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(tokens=self.access_token_repository)

    @cached_property
    def authenticate_token_use_case(self) -> AuthenticateTokenUseCase:
        return AuthenticateTokenUseCase(tokens=self.access_token_repository)

    # Event use cases

    @cached_property
    def create_event_use_case(self) -> CreateEventUseCase:
        return CreateEventUseCase(events=self.event_repository)

    @cached_property
    def list_events_use_case(self) -> ListEventsUseCase:
        return ListEventsUseCase(events=self.event_repository)

    @cached_property
    def get_event_use_case(self) -> GetEventUseCase:
        return GetEventUseCase(events=self.event_repository)

    @cached_property
    def update_event_use_case(self) -> UpdateEventUseCase:
        return UpdateEventUseCase(events=self.event_repository)

    @cached_property
    def delete_event_use_case(self) -> DeleteEventUseCase:
        return DeleteEventUseCase(events=self.event_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            authenticate_use_case=self.authenticate_token_use_case,
        )

    @cached_property
    def events_controller(self) -> EventsController:
        return EventsController(
            create_use_case=self.create_event_use_case,
            list_use_case=self.list_events_use_case,
            get_use_case=self.get_event_use_case,
            update_use_case=self.update_event_use_case,
            delete_use_case=self.delete_event_use_case,
            authenticate_use_case=self.authenticate_token_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
