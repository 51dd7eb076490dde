"""Shape pick rows into display-ready chart series."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from draftlens.config.columns import (
    DRAFT_TOTAL_PRIZES,
    MAX_ROUNDS,
    PICK_NUMBER,
    PICKED_AT,
    POSITION,
    ROUND_SIZE,
    SLOT_RANGE,
    TEAM,
    TOURNAMENT_TITLE,
    TOURNAMENT_TOTAL_PRIZES,
    UNKNOWN_TOURNAMENT,
    position_sort_key,
)
from draftlens.models import Player
from draftlens.values import cell, draft_id_of, full_name, normalize_pick, parse_int_prefix, parse_number, parse_timestamp

from .exposure import total_drafts

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]


@dataclass(frozen=True)
class TeamPlayerCount:
    team: str
    unique_players: int


@dataclass(frozen=True)
class StackedChart:
    """Rows of ``{label_key: label, series: count, ...}`` plus the series order."""

    series: Tuple[str, ...]
    rows: List[Dict[str, Any]] = field(default_factory=list)


@dataclass(frozen=True)
class RoundShare:
    round: int
    total: int
    shares: Dict[str, float]


@dataclass(frozen=True)
class RoundShareChart:
    positions: Tuple[str, ...]
    rounds: List[RoundShare]

    @property
    def max_round(self) -> int:
        return len(self.rounds)


@dataclass(frozen=True)
class PickPoint:
    picked_at: datetime
    pick: float

    @property
    def timestamp_ms(self) -> int:
        return int(self.picked_at.replace(tzinfo=timezone.utc).timestamp() * 1000)


@dataclass(frozen=True)
class SummaryStats:
    total_picks: int
    total_drafts: int
    unique_teams: int
    avg_pick_number: float
    most_picked_team: str
    total_draft_prizes: float
    total_tournament_prizes: float


def unique_players_by_team(rows: Sequence[Row]) -> List[TeamPlayerCount]:
    """Distinct full names per team, most players first, then team code."""

    team_players: Dict[str, set[str]] = {}
    for row in rows:
        team = cell(row, TEAM)
        name = full_name(row)
        if not team or not name:
            continue
        team_players.setdefault(team, set()).add(name)
    counts = [TeamPlayerCount(team=team, unique_players=len(names)) for team, names in team_players.items()]
    counts.sort(key=lambda item: (-item.unique_players, item.team))
    return counts


def team_position_counts(rows: Sequence[Row]) -> StackedChart:
    counts: Dict[str, Dict[str, int]] = {}
    positions: set[str] = set()
    for row in rows:
        team = cell(row, TEAM)
        if not team:
            continue
        position = cell(row, POSITION)
        by_position = counts.setdefault(team, {})
        by_position[position] = by_position.get(position, 0) + 1
        positions.add(position)

    ordered = tuple(sorted(positions, key=position_sort_key))
    chart_rows = [
        {"team": team, **{position: counts[team].get(position, 0) for position in ordered}}
        for team in sorted(counts)
    ]
    return StackedChart(series=ordered, rows=chart_rows)


def draft_slot_by_tournament(rows: Sequence[Row]) -> StackedChart:
    """Count drafts per starting slot, split by tournament.

    A draft's slot is its smallest integer pick number within the slot
    range; drafts with no pick in range are left out. The tournament is
    taken from the draft's first in-range row.
    """

    low, high = SLOT_RANGE
    titles = tuple(dict.fromkeys(cell(row, TOURNAMENT_TITLE) or UNKNOWN_TOURNAMENT for row in rows))

    slots: Dict[str, Tuple[int, str]] = {}
    for row in rows:
        draft_id = draft_id_of(row)
        slot = parse_int_prefix(row.get(PICK_NUMBER))
        if not draft_id or slot is None or slot < low or slot > high:
            continue
        current = slots.get(draft_id)
        if current is None:
            slots[draft_id] = (slot, cell(row, TOURNAMENT_TITLE) or UNKNOWN_TOURNAMENT)
        elif slot < current[0]:
            slots[draft_id] = (slot, current[1])

    counts: Dict[int, Dict[str, int]] = {}
    for slot, title in slots.values():
        by_title = counts.setdefault(slot, {})
        by_title[title] = by_title.get(title, 0) + 1

    chart_rows = [
        {"slot": str(slot), **{title: counts.get(slot, {}).get(title, 0) for title in titles}}
        for slot in range(low, high + 1)
    ]
    return StackedChart(series=titles, rows=chart_rows)


def position_share_by_round(rows: Sequence[Row]) -> RoundShareChart:
    """Each position's share of the picks made in every 12-pick round.

    Rounds run from 1 to the last round holding a pick. Picks beyond
    ``MAX_ROUNDS`` rounds are dropped with a warning.
    """

    positions = tuple(sorted({cell(row, POSITION) for row in rows}, key=position_sort_key))

    by_round: Dict[int, Dict[str, int]] = {}
    skipped = 0
    for row in rows:
        pick = parse_number(row.get(PICK_NUMBER))
        if pick is None or pick <= 0:
            continue
        round_number = math.ceil(pick / ROUND_SIZE)
        if round_number > MAX_ROUNDS:
            skipped += 1
            continue
        by_position = by_round.setdefault(round_number, {})
        position = cell(row, POSITION)
        by_position[position] = by_position.get(position, 0) + 1
    if skipped:
        logger.warning(
            "Ignored %s picks beyond round %s in the round chart", skipped, MAX_ROUNDS
        )

    rounds: List[RoundShare] = []
    for round_number in range(1, max(by_round, default=0) + 1):
        position_counts = by_round.get(round_number, {})
        total = sum(position_counts.values())
        shares = {
            position: round(position_counts.get(position, 0) / total * 100, 2) if total else 0.0
            for position in positions
        }
        rounds.append(RoundShare(round=round_number, total=total, shares=shares))
    return RoundShareChart(positions=positions, rounds=rounds)


def player_pick_timeline(player: Player) -> List[PickPoint]:
    points = []
    for row in player.rows:
        picked_at = parse_timestamp(row.get(PICKED_AT))
        pick = parse_number(row.get(PICK_NUMBER))
        if picked_at is None or pick is None:
            continue
        points.append(PickPoint(picked_at=picked_at, pick=normalize_pick(pick)))
    points.sort(key=lambda point: point.picked_at)
    return points


def summary_stats(rows: Sequence[Row]) -> SummaryStats:
    total_picks = len(rows)
    team_counts: Dict[str, int] = {}
    pick_sum = 0.0
    draft_prizes = 0.0
    tournament_prizes = 0.0
    for row in rows:
        team = cell(row, TEAM)
        if team:
            team_counts[team] = team_counts.get(team, 0) + 1
        pick_sum += parse_number(row.get(PICK_NUMBER)) or 0.0
        draft_prizes += parse_number(row.get(DRAFT_TOTAL_PRIZES)) or 0.0
        tournament_prizes += parse_number(row.get(TOURNAMENT_TOTAL_PRIZES)) or 0.0

    most_picked = max(team_counts.items(), key=lambda item: item[1])[0] if team_counts else "-"
    return SummaryStats(
        total_picks=total_picks,
        total_drafts=total_drafts(rows),
        unique_teams=len({cell(row, TEAM) for row in rows}),
        avg_pick_number=round(pick_sum / total_picks, 2) if total_picks else 0.0,
        most_picked_team=most_picked,
        total_draft_prizes=draft_prizes,
        total_tournament_prizes=tournament_prizes,
    )
