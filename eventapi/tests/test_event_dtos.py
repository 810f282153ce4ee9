from __future__ import annotations

from datetime import datetime

import pytest
from pydantic import ValidationError

from eventapi.interfaces.http.dto.events import (EventCreateDTO,
                                                 EventListQueryDTO,
                                                 EventUpdateDTO)

VALID_EVENT = {
    "title": " Launch ",
    "description": "Product launch",
    "start_time": "2025-03-01T10:00",
    "end_time": "2025-03-01T12:00",
    "location": "NYC",
}


def _error_types(exc: ValidationError) -> set[str]:
    return {error["type"] for error in exc.errors()}


def test_create_dto_builds_trimmed_draft() -> None:
    draft = EventCreateDTO.model_validate(VALID_EVENT).to_draft()

    assert draft.title == "Launch"
    assert draft.start_time == datetime(2025, 3, 1, 10, 0)


def test_create_dto_normalises_aware_times_to_naive_utc() -> None:
    payload = dict(VALID_EVENT, start_time="2025-03-01T10:00+02:00", end_time="2025-03-01T12:00+02:00")

    draft = EventCreateDTO.model_validate(payload).to_draft()

    assert draft.start_time == datetime(2025, 3, 1, 8, 0)
    assert draft.start_time.tzinfo is None


@pytest.mark.parametrize("missing", sorted(VALID_EVENT))
def test_create_dto_requires_every_field(missing: str) -> None:
    payload = {k: v for k, v in VALID_EVENT.items() if k != missing}

    with pytest.raises(ValidationError) as exc_info:
        EventCreateDTO.model_validate(payload)

    assert "missing" in _error_types(exc_info.value)


def test_create_dto_rejects_end_before_start() -> None:
    payload = dict(VALID_EVENT, end_time="2025-03-01T09:00")

    with pytest.raises(ValidationError) as exc_info:
        EventCreateDTO.model_validate(payload)

    assert "end_time_not_after_start_time" in _error_types(exc_info.value)


def test_create_dto_rejects_blank_title() -> None:
    with pytest.raises(ValidationError) as exc_info:
        EventCreateDTO.model_validate(dict(VALID_EVENT, title="   "))

    assert "text_blank" in _error_types(exc_info.value)


def test_update_dto_allows_partial_payload() -> None:
    patch = EventUpdateDTO.model_validate({"location": "Boston"}).to_patch()

    assert dict(patch.provided()) == {"location": "Boston"}


def test_update_dto_rejects_explicit_null() -> None:
    with pytest.raises(ValidationError) as exc_info:
        EventUpdateDTO.model_validate({"title": None})

    assert "null_not_allowed" in _error_types(exc_info.value)


def test_update_dto_empty_payload_is_empty_patch() -> None:
    assert EventUpdateDTO.model_validate({}).to_patch().is_empty()


def test_list_query_accepts_both_per_page_spellings() -> None:
    assert EventListQueryDTO.model_validate({"perPage": "5"}).per_page == 5
    assert EventListQueryDTO.model_validate({"per_page": "7"}).per_page == 7


def test_list_query_blank_values_count_as_missing() -> None:
    dto = EventListQueryDTO.model_validate({"keyword": "", "perPage": "", "location": "NYC"})

    filters = dto.to_filters(default_per_page=2)
    assert filters.keyword is None
    assert filters.location == "NYC"
    assert filters.per_page == 2


@pytest.mark.parametrize("per_page", ["0", "101"])
def test_list_query_per_page_out_of_range(per_page: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        EventListQueryDTO.model_validate({"perPage": per_page})

    assert "per_page_out_of_range" in _error_types(exc_info.value)


def test_list_query_max_per_page_comes_from_context() -> None:
    with pytest.raises(ValidationError):
        EventListQueryDTO.model_validate({"perPage": "20"}, context={"max_per_page": 10})


def test_list_query_rejects_malformed_time() -> None:
    with pytest.raises(ValidationError):
        EventListQueryDTO.model_validate({"start_time": "yesterday"})
