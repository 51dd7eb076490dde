"""Group pick rows into per-player entities."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Sequence

from draftlens.config.columns import (
    PICK_NUMBER,
    PICKED_AT,
    POSITION,
    TEAM,
    TOURNAMENT_ENTRY_FEE,
    TOURNAMENT_TITLE,
    UNKNOWN_TOURNAMENT,
)
from draftlens.models import Player, PlayerKey, PlayerStats
from draftlens.values import cell, full_name, normalize_pick, parse_number, parse_timestamp


logger = logging.getLogger(__name__)


def player_key(row: Mapping[str, Any]) -> PlayerKey:
    return PlayerKey(full_name(row), cell(row, TEAM).strip(), cell(row, POSITION).strip())


def _pick_or_zero(row: Mapping[str, Any]) -> float:
    value = parse_number(row.get(PICK_NUMBER))
    return 0 if value is None else normalize_pick(value)


def _player_stats(rows: Sequence[Mapping[str, Any]]) -> PlayerStats:
    month_counts: Dict[str, int] = {}
    tournament_counts: Dict[str, int] = {}
    total_fee = 0.0
    for row in rows:
        picked_at = parse_timestamp(row.get(PICKED_AT))
        if picked_at is not None:
            label = picked_at.strftime("%B %Y")
            month_counts[label] = month_counts.get(label, 0) + 1
        title = cell(row, TOURNAMENT_TITLE) or UNKNOWN_TOURNAMENT
        tournament_counts[title] = tournament_counts.get(title, 0) + 1
        fee = parse_number(row.get(TOURNAMENT_ENTRY_FEE))
        if fee is not None:
            total_fee += fee
    return PlayerStats(
        month_counts=month_counts,
        tournament_counts=tournament_counts,
        total_tournament_entry_fee=total_fee,
    )


def group_players(rows: Sequence[Mapping[str, Any]]) -> List[Player]:
    """Build one :class:`Player` per (name, team, position), in first-seen order.

    Rows agreeing on the trimmed triple are the same player whatever their
    other fields say. Unparsable pick numbers are kept as 0 so they still
    count as a pick.
    """

    grouped: Dict[PlayerKey, List[Mapping[str, Any]]] = {}
    for row in rows:
        grouped.setdefault(player_key(row), []).append(row)

    players = [
        Player(
            key=key,
            pick_numbers=tuple(_pick_or_zero(row) for row in player_rows),
            rows=tuple(player_rows),
            stats=_player_stats(player_rows),
        )
        for key, player_rows in grouped.items()
    ]
    logger.debug("Grouped %s rows into %s players", len(rows), len(players))
    return players


def sort_by_adp(players: Sequence[Player]) -> List[Player]:
    """Order players by own average pick, earliest first."""

    return sorted(players, key=lambda player: (player.my_adp is None, player.my_adp or 0.0))


def find_player(players: Sequence[Player], key: PlayerKey | str) -> Player | None:
    wanted = PlayerKey.parse(key) if isinstance(key, str) else key
    for player in players:
        if player.key == wanted:
            return player
    return None
