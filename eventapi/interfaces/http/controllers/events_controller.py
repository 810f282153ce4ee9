# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from time import perf_counter

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from eventapi.application.use_cases.events.create_event import \
    CreateEventUseCase
from eventapi.application.use_cases.events.delete_event import \
    DeleteEventUseCase
from eventapi.application.use_cases.events.get_event import GetEventUseCase
from eventapi.application.use_cases.events.list_events import \
    ListEventsUseCase
from eventapi.application.use_cases.events.update_event import \
    UpdateEventUseCase
from eventapi.infrastructure.audit import AuditAction, audit_log
from eventapi.infrastructure.auth import TokenAuthenticator, auth_required
from eventapi.interfaces.http.dto.auth import MessageDTO
from eventapi.interfaces.http.dto.events import (EventCreateDTO, EventDTO,
                                                 EventListDTO,
                                                 EventListQueryDTO,
                                                 EventMutationDTO,
                                                 EventUpdateDTO, PageMetaDTO)
from eventapi.shared.config import load_config
from eventapi.shared.errors import InfrastructureError
from eventapi.shared.errors.validation import raise_validation_error
from eventapi.shared.logging import logger


class EventsController:
    def __init__(
        self,
        *,
        create_use_case: CreateEventUseCase,
        list_use_case: ListEventsUseCase,
        get_use_case: GetEventUseCase,
        update_use_case: UpdateEventUseCase,
        delete_use_case: DeleteEventUseCase,
        authenticate_use_case: TokenAuthenticator,
    ) -> None:
        self._create = create_use_case
        self._list = list_use_case
        self._get = get_use_case
        self._update = update_use_case
        self._delete = delete_use_case
        self._authenticate = authenticate_use_case

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("events", __name__, url_prefix="/api")
        bp.add_url_rule("/events", view_func=self.list_events, methods=["GET"])
        bp.add_url_rule("/events", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/events/<int:event_id>", view_func=self.show, methods=["GET"])
        bp.add_url_rule(
            "/events/<int:event_id>",
            view_func=self.update,
            methods=["PUT", "PATCH"],
        )
        bp.add_url_rule(
            "/events/<int:event_id>",
            view_func=self.delete,
            methods=["DELETE"],
        )
        return bp

    @auth_required
    def list_events(self, *, actor_id: int) -> tuple[Response, int]:
        t0 = perf_counter()
        events_config = load_config().events
        try:
            dto = EventListQueryDTO.model_validate(
                request.args.to_dict(),
                context={"max_per_page": events_config.max_per_page},
            )
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            page = self._list.execute(dto.to_filters(events_config.default_per_page))
        except SQLAlchemyError as exc:
            logger.exception(f"events.list: err (user_id={actor_id})")
            raise InfrastructureError(code="events_list_failed") from exc

        payload = EventListDTO(
            data=[EventDTO.model_validate(event) for event in page.items],
            meta=PageMetaDTO(
                current_page=page.current_page,
                last_page=page.last_page,
                total=page.total,
            ),
        )
        dt = (perf_counter() - t0) * 1000
        logger.info(
            f"events.list: ok (user_id={actor_id}, n={len(page.items)}, "
            f"total={page.total}, dt_ms={dt:.0f})"
        )
        return jsonify(payload.model_dump(mode="json")), 200

    @auth_required
    def create(self, *, actor_id: int) -> tuple[Response, int]:
        try:
            dto = EventCreateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            event = self._create.execute(actor_id, dto.to_draft())
        except SQLAlchemyError as exc:
            logger.exception(f"events.create: err (user_id={actor_id})")
            raise InfrastructureError(code="events_create_failed") from exc

        audit_log(AuditAction.EVENT_CREATED, user_id=actor_id, details={"event_id": event.id})
        payload = EventMutationDTO(
            message="Event created successfully",
            event=EventDTO.model_validate(event),
        )
        return jsonify(payload.model_dump(mode="json")), 201

    @auth_required
    def show(self, event_id: int, *, actor_id: int) -> tuple[Response, int]:
        try:
            event = self._get.execute(event_id, actor_id)
        except SQLAlchemyError as exc:
            logger.exception(f"events.show: err (event_id={event_id})")
            raise InfrastructureError(code="events_show_failed") from exc

        return jsonify(EventDTO.model_validate(event).model_dump(mode="json")), 200

    @auth_required
    def update(self, event_id: int, *, actor_id: int) -> tuple[Response, int]:
        try:
            dto = EventUpdateDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            event = self._update.execute(event_id, actor_id, dto.to_patch())
        except SQLAlchemyError as exc:
            logger.exception(f"events.update: err (event_id={event_id})")
            raise InfrastructureError(code="events_update_failed") from exc

        audit_log(
            AuditAction.EVENT_UPDATED,
            user_id=actor_id,
            details={"event_id": event_id, "fields": sorted(dto.model_fields_set)},
        )
        payload = EventMutationDTO(
            message="Event updated successfully",
            event=EventDTO.model_validate(event),
        )
        return jsonify(payload.model_dump(mode="json")), 200

    @auth_required
    def delete(self, event_id: int, *, actor_id: int) -> tuple[Response, int]:
        try:
            self._delete.execute(event_id, actor_id)
        except SQLAlchemyError as exc:
            logger.exception(f"events.delete: err (event_id={event_id})")
            raise InfrastructureError(code="events_delete_failed") from exc

        audit_log(AuditAction.EVENT_DELETED, user_id=actor_id, details={"event_id": event_id})
        return jsonify(MessageDTO(message="Event deleted successfully.").model_dump()), 200
