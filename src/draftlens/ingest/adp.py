"""Load the external ADP reference list and index it by player name."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

import httpx
from pydantic import ValidationError

from draftlens.models import AdpRecord


logger = logging.getLogger(__name__)


def parse_adp_records(payload: Any) -> List[AdpRecord]:
    """Validate a decoded JSON payload, skipping records that do not parse."""

    if not isinstance(payload, list):
        raise ValueError("ADP reference must be a JSON list of records")
    records: List[AdpRecord] = []
    skipped = 0
    for item in payload:
        try:
            records.append(AdpRecord.model_validate(item))
        except ValidationError:
            skipped += 1
    if skipped:
        logger.debug("Skipped %s ADP records that failed validation", skipped)
    return records


def _read_source(source: str | Path, timeout: float) -> Any:
    text = str(source)
    if text.startswith(("http://", "https://")):
        response = httpx.get(text, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    return json.loads(Path(source).read_text(encoding="utf-8"))


def load_adp_reference(source: str | Path | None, *, timeout: float = 10.0) -> List[AdpRecord]:
    """Fetch the reference list from a path or URL.

    Failures are not fatal: the caller gets an empty list and every metric
    that depends on the reference degrades to "no data".
    """

    if not source:
        return []
    try:
        payload = _read_source(source, timeout)
        records = parse_adp_records(payload)
    except (httpx.HTTPError, OSError, ValueError) as exc:
        logger.warning("Could not load ADP reference from %s: %s", source, exc)
        return []
    logger.info("Loaded %s ADP reference records from %s", len(records), source)
    return records


def build_adp_lookup(records: Iterable[AdpRecord]) -> Dict[str, float]:
    """Map trimmed "first last" to ADP.

    Players sharing a full name collapse onto one entry (the last one wins);
    team and position are not used to tell them apart.
    """

    lookup: Dict[str, float] = {}
    for record in records:
        lookup[record.full_name] = record.adp
    return lookup


def reference_players(records: Sequence[AdpRecord]) -> List[AdpRecord]:
    """Reference records ordered by ADP, for player pickers."""

    return sorted(records, key=lambda record: record.adp)
