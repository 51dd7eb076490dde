"""Configuration helpers for pick exports and analysis defaults."""

from .columns import (
    MAX_ROUNDS,
    POSITION_PRIORITY,
    REQUIRED_FIELDS,
    ROUND_SIZE,
    SLOT_RANGE,
    UNKNOWN_TOURNAMENT,
    position_sort_key,
)
from .settings import AnalysisSettings

__all__ = [
    "AnalysisSettings",
    "MAX_ROUNDS",
    "POSITION_PRIORITY",
    "REQUIRED_FIELDS",
    "ROUND_SIZE",
    "SLOT_RANGE",
    "UNKNOWN_TOURNAMENT",
    "position_sort_key",
]
