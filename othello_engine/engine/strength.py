from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class StrengthProfile:
    depth: int
    endgame_solver: bool
    endgame_threshold: int  # empty squares at or below which the exact solver runs
    opening_book: bool


class Difficulty(Enum):
    EASY = 0
    MEDIUM = 1
    HARD = 2
    EXPERT = 3

    @property
    def profile(self) -> StrengthProfile:
        return PROFILES[self]

    def depth(self) -> int:
        return self.profile.depth

    def use_endgame_solver(self) -> bool:
        return self.profile.endgame_solver

    def endgame_threshold(self) -> int:
        return self.profile.endgame_threshold

    def use_opening_book(self) -> bool:
        return self.profile.opening_book

    @staticmethod
    def from_name(name: str) -> Optional["Difficulty"]:
        try:
            return Difficulty[name.strip().upper()]
        except KeyError:
            return None


PROFILES = {
    Difficulty.EASY: StrengthProfile(2, False, 0, False),
    Difficulty.MEDIUM: StrengthProfile(4, False, 0, False),
    Difficulty.HARD: StrengthProfile(6, True, 12, False),
    Difficulty.EXPERT: StrengthProfile(8, True, 14, True),
}
