"""Player entities derived from pick rows."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from draftlens.values import draft_id_of


class PlayerKey(NamedTuple):
    """Composite identity of a player: trimmed full name, team, position.

    Tuple ordering is the canonical (name, team, position) ordering used to
    sort combo members.
    """

    name: str
    team: str
    position: str

    @property
    def label(self) -> str:
        return f"{self.name}|{self.team}|{self.position}"

    @classmethod
    def parse(cls, label: str) -> "PlayerKey":
        parts = label.split("|")
        if len(parts) != 3:
            raise ValueError(f"player key must look like 'name|team|position', got {label!r}")
        return cls(*parts)


@dataclass(frozen=True)
class PlayerStats:
    month_counts: Dict[str, int] = field(default_factory=dict)
    tournament_counts: Dict[str, int] = field(default_factory=dict)
    total_tournament_entry_fee: float = 0.0


@dataclass(frozen=True, eq=False)
class Player:
    """Every pick of one (name, team, position) across the uploaded table."""

    key: PlayerKey
    pick_numbers: Tuple[float, ...]
    rows: Tuple[Mapping[str, Any], ...]
    stats: PlayerStats

    @property
    def name(self) -> str:
        return self.key.name

    @property
    def team(self) -> str:
        return self.key.team

    @property
    def position(self) -> str:
        return self.key.position

    @property
    def count(self) -> int:
        return len(self.rows)

    @property
    def my_adp(self) -> Optional[float]:
        # Coerced zero picks stay in the denominator.
        if not self.pick_numbers:
            return None
        return sum(self.pick_numbers) / len(self.pick_numbers)

    @property
    def draft_ids(self) -> Tuple[str, ...]:
        """Distinct draft ids in first-seen order (a blank id included)."""

        return tuple(dict.fromkeys(draft_id_of(row) for row in self.rows))

    @property
    def draft_set(self) -> frozenset[str]:
        return frozenset(self.draft_ids)
