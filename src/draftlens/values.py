"""Lenient coercion of raw export cells into numbers, dates and names."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from draftlens.config.columns import DRAFT, FIRST_NAME, LAST_NAME

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S.%f %Z",
    "%Y-%m-%d %H:%M:%S %Z",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y",
)


def cell(row: Mapping[str, Any] | None, column: str) -> str:
    """Return a cell as a string, treating missing and ``None`` as blank."""

    if not row:
        return ""
    value = row.get(column)
    if value is None:
        return ""
    return str(value)


def parse_number(value: Any) -> Optional[float]:
    """Parse a numeric cell; blanks and junk give ``None``."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    if not math.isfinite(number):
        return None
    return number


def parse_int_prefix(value: Any) -> Optional[int]:
    """Read the leading integer of a cell ("12.7" -> 12, "3rd" -> 3)."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def normalize_pick(number: float) -> float | int:
    return int(number) if float(number).is_integer() else number


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a pick timestamp. Aware values are converted to UTC and made naive."""

    if isinstance(value, datetime):
        parsed: Optional[datetime] = value
    else:
        text = str(value).strip() if value is not None else ""
        if not text:
            return None
        parsed = None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            for fmt in _TIMESTAMP_FORMATS:
                try:
                    parsed = datetime.strptime(text, fmt)
                    break
                except ValueError:
                    continue
        if parsed is None:
            return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def full_name(row: Mapping[str, Any]) -> str:
    return f"{cell(row, FIRST_NAME).strip()} {cell(row, LAST_NAME).strip()}".strip()


def draft_id_of(row: Mapping[str, Any]) -> str:
    return cell(row, DRAFT)
