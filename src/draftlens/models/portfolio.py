"""Combination and pairing results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .player import Player, PlayerKey


@dataclass(frozen=True)
class Combo:
    """Teammates drafted alongside a focal player, with co-occurrence count."""

    focal: PlayerKey
    members: Tuple[PlayerKey, ...]
    count: int

    @property
    def key(self) -> str:
        return "||".join(member.label for member in self.members)


@dataclass(frozen=True, eq=False)
class ExposurePair:
    first: Player
    second: Player
    first_exposure: float
    second_exposure: float

    @property
    def combined_exposure(self) -> float:
        return self.first_exposure + self.second_exposure

    @property
    def identity(self) -> frozenset[PlayerKey]:
        return frozenset((self.first.key, self.second.key))
