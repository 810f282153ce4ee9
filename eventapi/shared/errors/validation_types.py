# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from enum import StrEnum


class ValidationErrorType(StrEnum):
    MISSING = "missing"
    NULL_NOT_ALLOWED = "null_not_allowed"
    EMAIL_INVALID = "email_invalid"
    NAME_BLANK = "name_blank"
    TEXT_BLANK = "text_blank"
    DATETIME_INVALID = "datetime_invalid"
    END_BEFORE_START = "end_time_not_after_start_time"
    PER_PAGE_OUT_OF_RANGE = "per_page_out_of_range"


__all__ = ["ValidationErrorType"]
