"""Group pick rows into drafts and index which players appear in each."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from draftlens.config.columns import PICK_NUMBER, PICKED_AT, POSITION, TEAM, TOURNAMENT_TITLE, position_sort_key
from draftlens.models import Draft, Player, PlayerKey, RosterEntry
from draftlens.values import cell, draft_id_of, full_name, normalize_pick, parse_number, parse_timestamp


logger = logging.getLogger(__name__)


@dataclass
class _DraftAccumulator:
    draft_id: str
    picked_at: Optional[datetime] = None
    tournament: str = ""
    slot: Optional[float] = None
    roster: Dict[str, List[RosterEntry]] = field(default_factory=dict)
    rows: List[Mapping[str, Any]] = field(default_factory=list)

    def fold(self, row: Mapping[str, Any]) -> None:
        raw_pick = parse_number(row.get(PICK_NUMBER))
        pick = None if raw_pick is None else normalize_pick(raw_pick)
        position = cell(row, POSITION)
        self.roster.setdefault(position, []).append(
            RosterEntry(name=full_name(row), team=cell(row, TEAM), position=position, pick_number=pick)
        )

        picked_at = parse_timestamp(row.get(PICKED_AT))
        if picked_at is not None and (self.picked_at is None or picked_at < self.picked_at):
            self.picked_at = picked_at

        if not self.tournament:
            self.tournament = cell(row, TOURNAMENT_TITLE)

        # First qualifying pick wins, then the minimum; a zero or missing
        # slot counts as unset.
        if not self.slot or (pick and pick < self.slot):
            self.slot = pick

        self.rows.append(row)

    def freeze(self) -> Draft:
        roster = {
            position: tuple(
                sorted(entries, key=lambda entry: (entry.pick_number is None, entry.pick_number or 0))
            )
            for position, entries in self.roster.items()
        }
        return Draft(
            draft_id=self.draft_id,
            picked_at=self.picked_at,
            tournament=self.tournament,
            slot=self.slot,
            roster=roster,
            positions=tuple(sorted(roster, key=position_sort_key)),
            rows=tuple(self.rows),
        )


def group_drafts(rows: Sequence[Mapping[str, Any]]) -> List[Draft]:
    """Fold rows into one :class:`Draft` per draft id, newest first.

    Rows without a draft id are ignored here. Sorting compares ISO date
    strings, so drafts without a parsable timestamp land at the end; ties
    keep first-seen order.
    """

    accumulators: Dict[str, _DraftAccumulator] = {}
    for row in rows:
        draft_id = draft_id_of(row)
        if not draft_id:
            continue
        accumulator = accumulators.get(draft_id)
        if accumulator is None:
            accumulator = accumulators[draft_id] = _DraftAccumulator(draft_id=draft_id)
        accumulator.fold(row)

    drafts = [accumulator.freeze() for accumulator in accumulators.values()]
    drafts.sort(key=lambda draft: draft.date, reverse=True)
    logger.debug("Grouped %s rows into %s drafts", len(rows), len(drafts))
    return drafts


def filter_drafts_with_players(drafts: Sequence[Draft], names: Iterable[str]) -> List[Draft]:
    """Keep drafts whose roster holds every requested full name."""

    wanted = [name for name in names if name]
    if not wanted:
        return list(drafts)
    return [draft for draft in drafts if set(wanted).issubset(draft.player_names)]


class DraftIndex:
    """Draft id -> distinct players present in that draft, in player order.

    Built once per aggregation pass in O(total rows) and shared by every
    combo query.
    """

    def __init__(self, players: Iterable[Player]):
        members: Dict[str, Dict[PlayerKey, Player]] = {}
        for player in players:
            for draft_id in player.draft_ids:
                if not draft_id:
                    continue
                members.setdefault(draft_id, {}).setdefault(player.key, player)
        self._members: Dict[str, Tuple[Player, ...]] = {
            draft_id: tuple(by_key.values()) for draft_id, by_key in members.items()
        }

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, draft_id: object) -> bool:
        return draft_id in self._members

    def players_in(self, draft_id: str) -> Tuple[Player, ...]:
        return self._members.get(draft_id, ())
