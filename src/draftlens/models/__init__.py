"""Entities shared across ingestion, analysis and API layers."""

from .adp import AdpRecord
from .draft import Draft, RosterEntry
from .player import Player, PlayerKey, PlayerStats
from .portfolio import Combo, ExposurePair

__all__ = [
    "AdpRecord",
    "Combo",
    "Draft",
    "ExposurePair",
    "Player",
    "PlayerKey",
    "PlayerStats",
    "RosterEntry",
]
