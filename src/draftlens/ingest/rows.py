"""Helpers to load pick export CSVs and check their schema."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Sequence

from draftlens.config.columns import REQUIRED_FIELDS


logger = logging.getLogger(__name__)

PickRow = Mapping[str, Any]


class IngestError(ValueError):
    """Raised when an uploaded pick table cannot be analyzed at all."""


class EmptyInputError(IngestError):
    def __init__(self, message: str = "No data found in CSV.") -> None:
        super().__init__(message)


class MissingFieldsError(IngestError):
    def __init__(self, missing: Sequence[str]):
        self.missing = list(missing)
        super().__init__(f"Missing CSV headers: {', '.join(self.missing)}")


def validate_headers(row: Mapping[str, Any] | None) -> List[str]:
    """Return required columns absent from ``row``, in canonical order."""

    present = set(row.keys()) if row else set()
    return [name for name in REQUIRED_FIELDS if name not in present]


def require_valid_rows(rows: Sequence[PickRow]) -> None:
    """Reject a table that is empty or whose first row lacks required columns."""

    if not rows:
        raise EmptyInputError()
    missing = validate_headers(rows[0])
    if missing:
        raise MissingFieldsError(missing)


def _is_blank(row: Mapping[str, Any]) -> bool:
    return all(value is None or str(value).strip() == "" for value in row.values())


def _collect(reader: Iterable[dict[str, Any]]) -> List[dict[str, str]]:
    rows: List[dict[str, str]] = []
    for raw in reader:
        # DictReader stores overflow cells under a None key.
        raw.pop(None, None)
        if _is_blank(raw):
            continue
        rows.append(raw)
    return rows


def read_pick_rows(text: str) -> List[dict[str, str]]:
    rows = _collect(csv.DictReader(StringIO(text)))
    logger.debug("Read %s pick rows", len(rows))
    return rows


def load_pick_csv(path: Path) -> List[dict[str, str]]:
    with path.open(newline="", encoding="utf-8-sig") as f:
        rows = _collect(csv.DictReader(f))
    logger.debug("Loaded %s pick rows from %s", len(rows), path)
    return rows
