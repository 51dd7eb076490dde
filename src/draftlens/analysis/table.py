"""Per-player display rows: exposure, own ADP and the reference comparison."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence

from draftlens.models import Player

from .charts import player_pick_timeline
from .exposure import player_exposure

MISSING = "-"

SortColumn = Literal[
    "name", "team", "position", "exposure", "count", "my_adp", "reference_adp", "clv", "clv_pct"
]


@dataclass(frozen=True)
class PlayerTableRow:
    name: str
    team: str
    position: str
    exposure: Optional[float]
    count: int
    my_adp: Optional[float]
    reference_adp: Optional[float]
    clv: Optional[float]
    clv_pct: Optional[float]

    def as_display(self) -> Dict[str, Any]:
        """Rounded values with ``"-"`` standing in for anything missing."""

        def fmt(value: Optional[float], digits: int) -> str:
            return MISSING if value is None else f"{value:.{digits}f}"

        return {
            "name": self.name,
            "team": self.team,
            "position": self.position,
            "exposure": fmt(self.exposure, 1),
            "count": self.count,
            "my_adp": fmt(self.my_adp, 2),
            "reference_adp": fmt(self.reference_adp, 2),
            "clv": fmt(self.clv, 2),
            "clv_pct": fmt(self.clv_pct, 1),
        }


def player_table_row(
    player: Player,
    total_drafts: int,
    adp_lookup: Mapping[str, float],
) -> PlayerTableRow:
    my_adp = player.my_adp
    reference = adp_lookup.get(player.name.strip())
    clv = None
    clv_pct = None
    if my_adp is not None and reference is not None:
        clv = my_adp - reference
        if reference != 0:
            clv_pct = clv / reference * 100
    return PlayerTableRow(
        name=player.name,
        team=player.team,
        position=player.position,
        exposure=player_exposure(player, total_drafts),
        count=player.count,
        my_adp=my_adp,
        reference_adp=reference,
        clv=clv,
        clv_pct=clv_pct,
    )


def build_player_table(
    players: Sequence[Player],
    total_drafts: int,
    adp_lookup: Mapping[str, float] | None = None,
) -> List[PlayerTableRow]:
    lookup = adp_lookup or {}
    return [player_table_row(player, total_drafts, lookup) for player in players]


def sort_player_rows(
    rows: Sequence[PlayerTableRow],
    column: SortColumn = "my_adp",
    *,
    descending: bool = False,
) -> List[PlayerTableRow]:
    """Sort by ``column``; rows missing that value always go last."""

    present = [row for row in rows if getattr(row, column) is not None]
    missing = [row for row in rows if getattr(row, column) is None]

    def key(row: PlayerTableRow) -> Any:
        value = getattr(row, column)
        return value.lower() if isinstance(value, str) else value

    present.sort(key=key, reverse=descending)
    return present + missing


def filter_player_rows(rows: Sequence[PlayerTableRow], query: Optional[str]) -> List[PlayerTableRow]:
    if not query:
        return list(rows)
    needle = query.lower()
    return [row for row in rows if needle in row.name.lower()]


def player_detail(player: Player) -> Dict[str, Any]:
    """Per-player breakdowns shown beside the table row."""

    stats = player.stats
    return {
        "month_counts": dict(stats.month_counts),
        "tournament_counts": dict(stats.tournament_counts),
        "total_tournament_entry_fee": stats.total_tournament_entry_fee,
        "pick_timeline": [
            {
                "picked_at": point.picked_at.isoformat(),
                "pick": point.pick,
                "timestamp_ms": point.timestamp_ms,
            }
            for point in player_pick_timeline(player)
        ],
    }
