# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, g, jsonify, request
from pydantic import ValidationError

from eventapi.application.use_cases.users.login_user import LoginUserUseCase
from eventapi.application.use_cases.users.logout_user import LogoutUserUseCase
from eventapi.application.use_cases.users.register_user import \
    RegisterUserUseCase
from eventapi.infrastructure.audit import AuditAction, audit_log
from eventapi.infrastructure.auth import (TokenAuthenticator, auth_required,
                                          bearer_token)
from eventapi.interfaces.http.dto.auth import (AuthTokenDTO, LoginRequestDTO,
                                               MessageDTO, RegisterRequestDTO)
from eventapi.shared.errors import AppError
from eventapi.shared.errors.validation import raise_validation_error
from eventapi.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        authenticate_use_case: TokenAuthenticator,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._authenticate = authenticate_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user, token = self._register_use_case.execute(dto.name, dto.email, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.REGISTER_FAILED,
                ip_address=_get_client_ip(),
                details={"error": exc.code},
                success=False,
            )
            raise

        audit_log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            success=True,
        )

        payload = AuthTokenDTO(message="Register successfully", token=token).model_dump()
        logger.info(f"auth.register: ok user_id={user.id}")
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            user, token = self._login_use_case.execute(dto.email, dto.password)
        except AppError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"error": exc.code},
                success=False,
            )
            raise

        g.user_id = user.id
        audit_log(
            AuditAction.LOGIN_SUCCESS,
            user_id=user.id,
            ip_address=ip_address,
            success=True,
        )

        payload = AuthTokenDTO(message="Login successfully", token=token).model_dump()
        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(payload), 200

    @auth_required
    def logout(self, *, actor_id: int) -> tuple[Response, int]:
        self._logout_use_case.execute(bearer_token())

        audit_log(
            AuditAction.LOGOUT,
            user_id=actor_id,
            ip_address=_get_client_ip(),
            success=True,
        )

        logger.info(f"auth.logout: ok user_id={actor_id}")
        return jsonify(MessageDTO(message="Logged out successfully").model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["DELETE"])
        return bp
