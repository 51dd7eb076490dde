"""Run every aggregation over one uploaded pick table."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from draftlens.ingest.adp import build_adp_lookup
from draftlens.ingest.rows import require_valid_rows
from draftlens.models import AdpRecord, Combo, Draft, ExposurePair, Player, PlayerKey

from .charts import (
    RoundShareChart,
    StackedChart,
    SummaryStats,
    TeamPlayerCount,
    draft_slot_by_tournament,
    position_share_by_round,
    summary_stats,
    team_position_counts,
    unique_players_by_team,
)
from .combos import DEFAULT_TOP_N, player_combos
from .drafts import DraftIndex, filter_drafts_with_players, group_drafts
from .exposure import total_drafts
from .players import find_player, group_players, sort_by_adp
from .portfolio import DEFAULT_EXPOSURE_THRESHOLD, PortfolioRecommender
from .table import PlayerTableRow, SortColumn, build_player_table, filter_player_rows, sort_player_rows


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DraftReport:
    """Everything derived from one row table. Rebuilt, never patched."""

    rows: Sequence[Mapping[str, Any]]
    players: List[Player]
    drafts: List[Draft]
    index: DraftIndex
    total_drafts: int
    player_table: List[PlayerTableRow]
    recommender: PortfolioRecommender
    pairs: List[ExposurePair]
    exposure_threshold: float
    combo_top_n: int
    summary: SummaryStats
    team_players: List[TeamPlayerCount]
    team_positions: StackedChart
    draft_slots: StackedChart
    round_shares: RoundShareChart

    def combos_for(self, key: PlayerKey | str, combo_size: int = 2) -> List[Combo]:
        player = find_player(self.players, key)
        if player is None:
            return []
        return player_combos(player, self.index, combo_size=combo_size, top_n=self.combo_top_n)

    def pairs_at(self, threshold: float) -> List[ExposurePair]:
        return self.recommender.pairs(threshold)

    @cached_property
    def _players_by_key(self) -> Dict[PlayerKey, Player]:
        return {player.key: player for player in self.players}

    def player_for(self, row: PlayerTableRow) -> Optional[Player]:
        return self._players_by_key.get(PlayerKey(row.name, row.team, row.position))

    def table(
        self,
        query: Optional[str] = None,
        sort_by: SortColumn = "my_adp",
        *,
        descending: bool = False,
    ) -> List[PlayerTableRow]:
        """Player table filtered by name and sorted by one column."""

        return sort_player_rows(filter_player_rows(self.player_table, query), sort_by, descending=descending)

    def drafts_with(self, names: Iterable[str]) -> List[Draft]:
        return filter_drafts_with_players(self.drafts, names)


def analyze_rows(
    rows: Sequence[Mapping[str, Any]],
    *,
    adp_records: Iterable[AdpRecord] = (),
    exposure_threshold: float = DEFAULT_EXPOSURE_THRESHOLD,
    combo_top_n: int = DEFAULT_TOP_N,
) -> DraftReport:
    """Validate ``rows`` and build a :class:`DraftReport`.

    Raises :class:`~draftlens.ingest.EmptyInputError` or
    :class:`~draftlens.ingest.MissingFieldsError` before any aggregation runs.
    """

    require_valid_rows(rows)

    players = sort_by_adp(group_players(rows))
    drafts = group_drafts(rows)
    total = total_drafts(rows)
    recommender = PortfolioRecommender(players, total)
    report = DraftReport(
        rows=rows,
        players=players,
        drafts=drafts,
        index=DraftIndex(players),
        total_drafts=total,
        player_table=build_player_table(players, total, build_adp_lookup(adp_records)),
        recommender=recommender,
        pairs=recommender.pairs(exposure_threshold),
        exposure_threshold=exposure_threshold,
        combo_top_n=combo_top_n,
        summary=summary_stats(rows),
        team_players=unique_players_by_team(rows),
        team_positions=team_position_counts(rows),
        draft_slots=draft_slot_by_tournament(rows),
        round_shares=position_share_by_round(rows),
    )
    logger.info(
        "Analyzed %s picks: %s players, %s drafts, %s portfolio pairs",
        len(rows),
        len(players),
        total,
        len(report.pairs),
    )
    return report
