"""Recommend player pairs that have never shared a draft."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from draftlens.models import ExposurePair, Player, PlayerKey

from .exposure import player_exposure


logger = logging.getLogger(__name__)

DEFAULT_EXPOSURE_THRESHOLD = 15.0


class PortfolioRecommender:
    """Rank non-overlapping pairs of high-exposure players.

    Exposure and draft sets are computed once per player, so calls that
    only change the threshold skip that work.
    """

    def __init__(self, players: Sequence[Player], total_drafts: int):
        self._players = list(players)
        self._total_drafts = total_drafts
        self._exposures: Dict[PlayerKey, float] = {}
        self._draft_sets: Dict[PlayerKey, frozenset[str]] = {}
        for player in self._players:
            value = player_exposure(player, total_drafts)
            self._exposures[player.key] = 0.0 if value is None else value
            self._draft_sets[player.key] = player.draft_set

    def exposure_of(self, player: Player) -> float:
        return self._exposures[player.key]

    def pairs(self, threshold: float = DEFAULT_EXPOSURE_THRESHOLD) -> List[ExposurePair]:
        """Pairs of players above ``threshold`` percent with disjoint drafts.

        Pair enumeration is quadratic in the number of players left after
        thresholding. Ordering: combined exposure, then first exposure, then
        second exposure, all descending; otherwise player order.
        """

        eligible = [player for player in self._players if self._exposures[player.key] > threshold]
        pairs: List[ExposurePair] = []
        for i, first in enumerate(eligible):
            first_drafts = self._draft_sets[first.key]
            for second in eligible[i + 1:]:
                if not first_drafts.isdisjoint(self._draft_sets[second.key]):
                    continue
                pairs.append(
                    ExposurePair(
                        first=first,
                        second=second,
                        first_exposure=self._exposures[first.key],
                        second_exposure=self._exposures[second.key],
                    )
                )
        pairs.sort(key=lambda pair: (-pair.combined_exposure, -pair.first_exposure, -pair.second_exposure))
        logger.debug(
            "Portfolio threshold %.1f kept %s players and %s pairs", threshold, len(eligible), len(pairs)
        )
        return pairs


def recommend_pairs(
    players: Sequence[Player],
    total_drafts: int,
    threshold: float = DEFAULT_EXPOSURE_THRESHOLD,
) -> List[ExposurePair]:
    return PortfolioRecommender(players, total_drafts).pairs(threshold)


def filter_pairs(pairs: Sequence[ExposurePair], query: Optional[str]) -> List[ExposurePair]:
    """Keep pairs where either player's name contains ``query`` (case-insensitive)."""

    if not query:
        return list(pairs)
    needle = query.lower()
    return [
        pair
        for pair in pairs
        if needle in pair.first.name.lower() or needle in pair.second.name.lower()
    ]
