# SPDX-License-Identifier: MIT

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from quoteplan.errors import SegmentConversionError
from quoteplan.model.segment import (
    ITEM_CATEGORIES,
    ItemCategory,
    ScheduledTaskSegment,
    TaskId,
)

logger = logging.getLogger(__name__)

# Column names used by the planning backend and the camelCase names used by
# JSON exports, mapped onto segment keys.
FIELD_ALIASES: dict[str, str] = {
    "originalRequirementId": "original_task_id",
    "original_requirement_id": "original_task_id",
    "originalTaskId": "original_task_id",
    "resourceId": "resource_id",
    "resourceName": "resource_name",
    "machine_name": "item_name",
    "itemName": "item_name",
    "resource_category": "item_category",
    "itemCategory": "item_category",
    "segmentHours": "segment_hours",
    "total_training_hours": "total_hours",
    "totalHours": "total_hours",
    "startDay": "start_day",
    "durationDays": "duration_days",
    "startHourOffset": "start_hour_offset",
}

SEGMENT_FIELDS = (
    "id",
    "original_task_id",
    "resource_id",
    "resource_name",
    "item_name",
    "item_category",
    "segment_hours",
    "total_hours",
    "start_day",
    "duration_days",
    "start_hour_offset",
)


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _to_int(field: str, value: Any) -> Optional[int]:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise SegmentConversionError(f"'{field}' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise SegmentConversionError(
                f"'{field}' must be a whole number, got {value!r}"
            )
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
        try:
            return _to_int(field, float(value.strip()))
        except ValueError:
            pass
    raise SegmentConversionError(f"'{field}' must be an integer, got {value!r}")


def _to_float(field: str, value: Any) -> Optional[float]:
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        raise SegmentConversionError(f"'{field}' must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise SegmentConversionError(
                f"'{field}' must be a number, got {value!r}"
            ) from None
    else:
        raise SegmentConversionError(f"'{field}' must be a number, got {value!r}")
    if not math.isfinite(number):
        raise SegmentConversionError(f"'{field}' must be finite, got {value!r}")
    return number


def _to_text(field: str, value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise SegmentConversionError(f"'{field}' must be text, got {value!r}")
    return str(value)


def _to_task_id(value: Any) -> Optional[TaskId]:
    if _is_blank(value):
        return None
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise SegmentConversionError(
            f"'original_task_id' must be text or an integer, got {value!r}"
        )
    return value


def _to_category(value: Any) -> ItemCategory:
    if not isinstance(value, str):
        return "Unknown"
    for category in ITEM_CATEGORIES:
        if value.strip().lower() == category.lower():
            return category
    return "Unknown"


def _normalize_keys(raw: Mapping[str, Any]) -> dict[str, Any]:
    normalized: dict[str, Any] = {}
    for key, value in raw.items():
        canonical = FIELD_ALIASES.get(key, key)
        # Canonical keys win over aliases when a record carries both
        if canonical in normalized and key != canonical:
            continue
        normalized[canonical] = value
    return normalized


def convert_segment_record(
    raw: Any, fallback_id: Optional[str] = None
) -> ScheduledTaskSegment:
    """
    Convert one loosely typed backend record into a segment.

    Geometry fields that are absent stay None; the layout pass decides whether
    such a segment can be drawn. Fields that are present but cannot be coerced
    make the whole record unusable.

    Args:
        raw: The record, usually a mapping loaded from YAML or JSON
        fallback_id: Identifier to use when the record carries none

    Returns:
        The converted segment

    Raises:
        SegmentConversionError: If the record is not a mapping or a present
            field has the wrong type
    """
    if not isinstance(raw, Mapping):
        raise SegmentConversionError(f"Segment record must be a mapping, got {raw!r}")

    record = _normalize_keys(raw)

    segment_id = _to_text("id", record.get("id"))
    if segment_id is None:
        if fallback_id is None:
            raise SegmentConversionError("Segment record has no 'id'")
        segment_id = fallback_id

    return {
        "id": segment_id,
        "original_task_id": _to_task_id(record.get("original_task_id")),
        "resource_id": _to_int("resource_id", record.get("resource_id")),
        "resource_name": _to_text("resource_name", record.get("resource_name")),
        "item_name": _to_text("item_name", record.get("item_name")),
        "item_category": _to_category(record.get("item_category")),
        "segment_hours": _to_float("segment_hours", record.get("segment_hours")),
        "total_hours": _to_float("total_hours", record.get("total_hours")),
        "start_day": _to_int("start_day", record.get("start_day")),
        "duration_days": _to_int("duration_days", record.get("duration_days")),
        "start_hour_offset": _to_float(
            "start_hour_offset", record.get("start_hour_offset")
        ),
    }


def convert_segment_records(raws: Iterable[Any]) -> list[ScheduledTaskSegment]:
    """Convert records, skipping the ones that fail conversion."""
    segments: list[ScheduledTaskSegment] = []
    for position, raw in enumerate(raws):
        try:
            segments.append(
                convert_segment_record(raw, fallback_id=f"segment-{position + 1}")
            )
        except SegmentConversionError as e:
            logger.warning("Skipping segment record #%d: %s", position + 1, e)
    return segments
