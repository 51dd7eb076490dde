"""Column names and layout constants for draft pick exports."""

from __future__ import annotations

from typing import Dict, Tuple

PICKED_AT = "Picked At"
PICK_NUMBER = "Pick Number"
APPEARANCE = "Appearance"
FIRST_NAME = "First Name"
LAST_NAME = "Last Name"
TEAM = "Team"
POSITION = "Position"
DRAFT = "Draft"
DRAFT_ENTRY = "Draft Entry"
DRAFT_ENTRY_FEE = "Draft Entry Fee"
DRAFT_SIZE = "Draft Size"
DRAFT_TOTAL_PRIZES = "Draft Total Prizes"
TOURNAMENT_TITLE = "Tournament Title"
TOURNAMENT = "Tournament"
TOURNAMENT_ENTRY_FEE = "Tournament Entry Fee"
TOURNAMENT_TOTAL_PRIZES = "Tournament Total Prizes"
TOURNAMENT_SIZE = "Tournament Size"

REQUIRED_FIELDS: Tuple[str, ...] = (
    PICKED_AT,
    PICK_NUMBER,
    APPEARANCE,
    FIRST_NAME,
    LAST_NAME,
    TEAM,
    POSITION,
    DRAFT,
    DRAFT_ENTRY,
    DRAFT_ENTRY_FEE,
    DRAFT_SIZE,
    DRAFT_TOTAL_PRIZES,
    TOURNAMENT_TITLE,
    TOURNAMENT,
    TOURNAMENT_ENTRY_FEE,
    TOURNAMENT_TOTAL_PRIZES,
    TOURNAMENT_SIZE,
    "Draft Pool Title",
    "Draft Pool",
    "Draft Pool Entry Fee",
    "Draft Pool Total Prizes",
    "Draft Pool Size",
    "Weekly Winner Title",
    "Weekly Winner",
    "Weekly Winner Entry Fee",
    "Weekly Winner Total Prizes",
    "Weekly Winner Size",
)

UNKNOWN_TOURNAMENT = "Unknown"

# Positions listed here sort ahead of everything else, in this order.
POSITION_PRIORITY: Dict[str, int] = {"QB": 1, "RB": 2, "WR": 3, "TE": 4}

ROUND_SIZE = 12
# Picks past this round are treated as bad data by the round chart.
MAX_ROUNDS = 40
SLOT_RANGE: Tuple[int, int] = (1, 12)


def position_sort_key(position: str) -> tuple[int, str]:
    """Order QB, RB, WR, TE first and the rest alphabetically."""

    return POSITION_PRIORITY.get(position, 99), position
