# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Request and response shapes for the events API."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import (AliasChoices, BaseModel, ConfigDict, Field,
                      ValidationInfo, field_validator, model_validator)
from pydantic_core import PydanticCustomError

from eventapi.domain.events.entities import EventDraft, EventPatch
from eventapi.domain.events.filters import DEFAULT_PER_PAGE, MAX_PER_PAGE, EventFilters
from eventapi.shared.errors.validation_types import ValidationErrorType

_TIME_FIELDS = ("start_time", "end_time")
_TEXT_FIELDS = ("title", "description", "location")


def _naive_utc(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(UTC).replace(tzinfo=None)


def _reject_blank(value: str | None) -> str | None:
    if value is not None and not value:
        raise PydanticCustomError(
            ValidationErrorType.TEXT_BLANK,
            "Value cannot be blank",
            {},
        )
    return value


def _check_time_order(start: datetime | None, end: datetime | None) -> None:
    if start is not None and end is not None and end <= start:
        raise PydanticCustomError(
            ValidationErrorType.END_BEFORE_START,
            "The end time must be after the start time.",
            {"start_time": start.isoformat(), "end_time": end.isoformat()},
        )


class EventCreateDTO(BaseModel):
    title: str = Field(max_length=255)
    description: str
    start_time: datetime
    end_time: datetime
    location: str = Field(max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator(*_TEXT_FIELDS)
    @classmethod
    def _not_blank(cls, value: str) -> str:
        return _reject_blank(value)  # type: ignore[return-value]

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _to_naive_utc(cls, value: datetime) -> datetime:
        return _naive_utc(value)  # type: ignore[return-value]

    @model_validator(mode="after")
    def _end_after_start(self) -> "EventCreateDTO":
        _check_time_order(self.start_time, self.end_time)
        return self

    def to_draft(self) -> EventDraft:
        return EventDraft(
            title=self.title,
            description=self.description,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
        )


class EventUpdateDTO(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = Field(None, max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator(*_TEXT_FIELDS, *_TIME_FIELDS)
    @classmethod
    def _no_explicit_null(cls, value: Any) -> Any:
        # defaults are not validated, so None here was sent explicitly
        if value is None:
            raise PydanticCustomError(
                ValidationErrorType.NULL_NOT_ALLOWED,
                "Field may be omitted but not null",
                {},
            )
        return value

    @field_validator(*_TEXT_FIELDS)
    @classmethod
    def _not_blank(cls, value: str | None) -> str | None:
        return _reject_blank(value)

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _to_naive_utc(cls, value: datetime | None) -> datetime | None:
        return _naive_utc(value)

    @model_validator(mode="after")
    def _end_after_start(self) -> "EventUpdateDTO":
        _check_time_order(self.start_time, self.end_time)
        return self

    def to_patch(self) -> EventPatch:
        return EventPatch(
            title=self.title,
            description=self.description,
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
        )


class EventListQueryDTO(BaseModel):
    start_time: datetime | None = None
    end_time: datetime | None = None
    location: str | None = Field(None, max_length=255)
    keyword: str | None = Field(None, max_length=255)
    page: int = Field(1, ge=1)
    per_page: int | None = Field(
        None, validation_alias=AliasChoices("perPage", "per_page")
    )

    @model_validator(mode="before")
    @classmethod
    def _blank_as_missing(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value not in ("", None)}
        return data

    @field_validator(*_TIME_FIELDS)
    @classmethod
    def _to_naive_utc(cls, value: datetime | None) -> datetime | None:
        return _naive_utc(value)

    @field_validator("per_page")
    @classmethod
    def _per_page_in_range(cls, value: int | None, info: ValidationInfo) -> int | None:
        if value is None:
            return value
        upper = (info.context or {}).get("max_per_page", MAX_PER_PAGE)
        if not 1 <= value <= upper:
            raise PydanticCustomError(
                ValidationErrorType.PER_PAGE_OUT_OF_RANGE,
                "The per page value must be between 1 and {max}.",
                {"min": 1, "max": upper},
            )
        return value

    def to_filters(self, default_per_page: int = DEFAULT_PER_PAGE) -> EventFilters:
        return EventFilters(
            start_time=self.start_time,
            end_time=self.end_time,
            location=self.location,
            keyword=self.keyword,
            page=self.page,
            per_page=self.per_page or default_per_page,
        )


class EventDTO(BaseModel):
    """External representation; owner and deletion marker are never exposed."""

    id: int
    title: str
    description: str
    start_time: datetime
    end_time: datetime
    location: str

    model_config = ConfigDict(from_attributes=True)


class PageMetaDTO(BaseModel):
    current_page: int
    last_page: int
    total: int


class EventListDTO(BaseModel):
    data: list[EventDTO]
    meta: PageMetaDTO


class EventMutationDTO(BaseModel):
    message: str
    event: EventDTO


__all__ = [
    "EventCreateDTO",
    "EventDTO",
    "EventListDTO",
    "EventListQueryDTO",
    "EventMutationDTO",
    "EventUpdateDTO",
    "PageMetaDTO",
]
