"""Draft ("team") entities derived from pick rows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class RosterEntry:
    name: str
    team: str
    position: str
    pick_number: Optional[float]


@dataclass(frozen=True, eq=False)
class Draft:
    draft_id: str
    picked_at: Optional[datetime]
    tournament: str
    slot: Optional[float]
    roster: Mapping[str, Tuple[RosterEntry, ...]]
    positions: Tuple[str, ...]
    rows: Tuple[Mapping[str, Any], ...]

    @property
    def date(self) -> str:
        """ISO calendar date of the earliest pick, or ``""``."""

        if self.picked_at is None:
            return ""
        return self.picked_at.date().isoformat()

    @property
    def player_names(self) -> Tuple[str, ...]:
        return tuple(entry.name for position in self.positions for entry in self.roster[position])

    def as_dict(self) -> Dict[str, Any]:
        return {
            "draft_id": self.draft_id,
            "date": self.date,
            "tournament": self.tournament,
            "slot": self.slot,
            "positions": list(self.positions),
            "roster": {
                position: [
                    {
                        "name": entry.name,
                        "team": entry.team,
                        "position": entry.position,
                        "pick_number": entry.pick_number,
                    }
                    for entry in self.roster[position]
                ]
                for position in self.positions
            },
        }
