"""Exposure: share of all distinct drafts that contain a player or group."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Sequence

from draftlens.models import Player
from draftlens.values import draft_id_of


def total_drafts(rows: Iterable[Mapping[str, Any]]) -> int:
    """Count distinct draft ids across the table; a blank id counts once."""

    return len({draft_id_of(row) for row in rows})


def exposure(draft_ids: Iterable[str], total: int) -> Optional[float]:
    """Percentage of ``total`` drafts covered by ``draft_ids``, or ``None`` with no drafts."""

    if total <= 0:
        return None
    return len(set(draft_ids)) / total * 100


def player_exposure(player: Player, total: int) -> Optional[float]:
    return exposure(player.draft_set, total)


def group_exposure(players: Sequence[Player], total: int) -> Optional[float]:
    """Exposure of drafts containing every player in ``players``."""

    if not players:
        return exposure((), total)
    shared = set(players[0].draft_set)
    for player in players[1:]:
        shared &= player.draft_set
    return exposure(shared, total)
