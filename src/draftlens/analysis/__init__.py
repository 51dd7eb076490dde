"""Aggregations over draft pick tables."""

from .charts import (
    PickPoint,
    RoundShare,
    RoundShareChart,
    StackedChart,
    SummaryStats,
    TeamPlayerCount,
    draft_slot_by_tournament,
    player_pick_timeline,
    position_share_by_round,
    summary_stats,
    team_position_counts,
    unique_players_by_team,
)
from .combos import player_combos
from .drafts import DraftIndex, filter_drafts_with_players, group_drafts
from .exposure import exposure, group_exposure, player_exposure, total_drafts
from .pipeline import DraftReport, analyze_rows
from .players import find_player, group_players, player_key, sort_by_adp
from .portfolio import PortfolioRecommender, filter_pairs, recommend_pairs
from .table import (
    PlayerTableRow,
    SortColumn,
    build_player_table,
    filter_player_rows,
    player_detail,
    sort_player_rows,
)

__all__ = [
    "DraftIndex",
    "DraftReport",
    "PickPoint",
    "PlayerTableRow",
    "PortfolioRecommender",
    "RoundShare",
    "RoundShareChart",
    "SortColumn",
    "StackedChart",
    "SummaryStats",
    "TeamPlayerCount",
    "analyze_rows",
    "build_player_table",
    "draft_slot_by_tournament",
    "exposure",
    "filter_drafts_with_players",
    "filter_pairs",
    "filter_player_rows",
    "find_player",
    "group_drafts",
    "group_exposure",
    "group_players",
    "player_combos",
    "player_detail",
    "player_exposure",
    "player_key",
    "player_pick_timeline",
    "position_share_by_round",
    "recommend_pairs",
    "sort_by_adp",
    "sort_player_rows",
    "summary_stats",
    "team_position_counts",
    "total_drafts",
    "unique_players_by_team",
]
