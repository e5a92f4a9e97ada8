from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, Optional, Union


IdList = Union[None, str, int, Iterable[Union[str, int]]]
Timestamp = Union[None, int, float, datetime]


def as_list(value: IdList) -> list:
    """Normalize a single value or a sequence of values to a list."""
    if value is None:
        return []
    if isinstance(value, (str, int, float)):
        return [value]
    return list(value)


def join_ids(value: IdList) -> str:
    """
    Comma-join one or more ids for the wire:
      "A" -> "A", ["A", "B"] -> "A,B", None -> ""
    """
    return ",".join(str(item) for item in as_list(value))


def to_epoch(value: Timestamp) -> Optional[int]:
    """Seconds since epoch. Naive datetimes are taken as local time."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return int(value.timestamp())
    return int(value)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.astimezone(timezone.utc)
        return value
    return datetime.fromtimestamp(float(value), tz=timezone.utc)
