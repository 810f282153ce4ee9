# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.events.create_event import CreateEventUseCase
from .use_cases.events.delete_event import DeleteEventUseCase
from .use_cases.events.get_event import GetEventUseCase
from .use_cases.events.list_events import ListEventsUseCase
from .use_cases.events.update_event import UpdateEventUseCase
from .use_cases.users.authenticate_token import AuthenticateTokenUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.logout_user import LogoutUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "AuthenticateTokenUseCase",
    "CreateEventUseCase",
    "DeleteEventUseCase",
    "GetEventUseCase",
    "ListEventsUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
    "UpdateEventUseCase",
]
