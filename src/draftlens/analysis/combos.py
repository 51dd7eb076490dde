"""Find the teammate groups most often drafted alongside a player."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Tuple

from draftlens.models import Combo, Player, PlayerKey

from .drafts import DraftIndex

DEFAULT_TOP_N = 5


def player_combos(
    player: Player,
    index: DraftIndex,
    *,
    combo_size: int = 2,
    top_n: int = DEFAULT_TOP_N,
) -> List[Combo]:
    """Return the ``top_n`` most frequent groups of ``combo_size - 1`` teammates.

    For every draft holding ``player`` this enumerates C(t, combo_size - 1)
    subsets of its t teammates, so cost per call is the sum of those binomials
    over the player's drafts. Each (draft, group) pair counts once. Ties keep
    discovery order.
    """

    if combo_size < 2 or top_n <= 0:
        return []
    group_size = combo_size - 1

    counts: Dict[str, Tuple[Tuple[PlayerKey, ...], int]] = {}
    for draft_id in player.draft_ids:
        if not draft_id:
            continue
        members = index.players_in(draft_id)
        if len(members) < combo_size or all(member.key != player.key for member in members):
            continue
        teammates = [member.key for member in members if member.key != player.key]
        for group in combinations(teammates, group_size):
            ordered = tuple(sorted(group))
            combo_key = "||".join(member.label for member in ordered)
            _, seen = counts.get(combo_key, (ordered, 0))
            counts[combo_key] = (ordered, seen + 1)

    ranked = sorted(
        (
            Combo(focal=player.key, members=members, count=count)
            for members, count in counts.values()
            if len(members) == group_size
        ),
        key=lambda combo: combo.count,
        reverse=True,
    )
    return ranked[:top_n]
