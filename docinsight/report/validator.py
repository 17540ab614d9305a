"""Validates raw parsed JSON against the report structure."""

import math
from typing import Any

from docinsight.report.exceptions import ReportValidationError
from docinsight.report.models import SENTIMENTS, Report

_MAX_LIST_ITEMS = 50


def validate_and_build(data: dict[str, Any]) -> Report:
    """Validate raw parsed JSON and build a Report.

    ``wordCount`` and ``readingTime`` may be missing or null; they are then
    reported as 0.

    Raises:
        ReportValidationError: on any validation failure.
    """
    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        raise ReportValidationError("'summary' must be a non-empty string")
    return Report(
        summary=summary.strip(),
        key_points=_build_string_list(data, "keyPoints"),
        insights=_build_string_list(data, "insights"),
        actionable_takeaways=_build_string_list(data, "actionableTakeaways"),
        word_count=_build_count(data.get("wordCount"), "wordCount"),
        reading_time=_build_count(data.get("readingTime"), "readingTime"),
        sentiment=_build_sentiment(data.get("sentiment")),
    )


def _build_string_list(data: dict[str, Any], key: str) -> list[str]:
    raw = data.get(key)
    if not isinstance(raw, list):
        raise ReportValidationError(f"'{key}' must be a list")
    if len(raw) > _MAX_LIST_ITEMS:
        raise ReportValidationError(
            f"Too many items in '{key}': {len(raw)} (max {_MAX_LIST_ITEMS})"
        )
    items: list[str] = []
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise ReportValidationError(f"'{key}' item at index {i} must be a string")
        if item.strip():
            items.append(item.strip())
    return items


def _build_count(raw: Any, key: str) -> int:
    if raw is None:
        return 0
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ReportValidationError(f"'{key}' must be a number")
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ReportValidationError(f"'{key}' must be a finite number")
    if raw < 0:
        raise ReportValidationError(f"'{key}' must not be negative")
    return math.ceil(raw)


def _build_sentiment(raw: Any) -> str:
    if not isinstance(raw, str) or raw.strip().lower() not in SENTIMENTS:
        raise ReportValidationError(
            f"'sentiment' must be one of {list(SENTIMENTS)}, got {raw!r}"
        )
    return raw.strip().lower()
