"""Input adapters for pick exports and the ADP reference list."""

from .adp import build_adp_lookup, load_adp_reference, parse_adp_records, reference_players
from .rows import (
    EmptyInputError,
    IngestError,
    MissingFieldsError,
    PickRow,
    load_pick_csv,
    read_pick_rows,
    require_valid_rows,
    validate_headers,
)

__all__ = [
    "EmptyInputError",
    "IngestError",
    "MissingFieldsError",
    "PickRow",
    "build_adp_lookup",
    "load_adp_reference",
    "load_pick_csv",
    "parse_adp_records",
    "read_pick_rows",
    "reference_players",
    "require_valid_rows",
    "validate_headers",
]
