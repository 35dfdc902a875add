"""
Leaderboard data models.

Provides data transfer objects for the daily and all-time leaderboard views.
Views are rebuilt from stored scores on every request and never persisted.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Union

from puzzlebot.constants import MedalConstants

BoardKey = Union[int, date]


@dataclass
class MedalCount:
    """Gold, silver and bronze finishes for one player."""
    gold: int = 0
    silver: int = 0
    bronze: int = 0

    @property
    def points(self) -> int:
        return (
            self.gold * MedalConstants.GOLD_WEIGHT
            + self.silver * MedalConstants.SILVER_WEIGHT
            + self.bronze * MedalConstants.BRONZE_WEIGHT
        )

    def __str__(self):
        return (
            f"{MedalConstants.GOLD_EMOJI}{self.gold} "
            f"{MedalConstants.SILVER_EMOJI}{self.silver} "
            f"{MedalConstants.BRONZE_EMOJI}{self.bronze} "
            f"(Medal points: {self.points})"
        )


@dataclass(frozen=True)
class DailyEntry:
    """Single row of a daily leaderboard."""
    rank: int
    user_id: int
    score: Union[int, float]
    correct: Optional[int] = None
    medal: Optional[str] = None


@dataclass(frozen=True)
class CumulativeEntry:
    """Single row of a points-total all-time leaderboard."""
    position: int
    user_id: int
    total: int


@dataclass(frozen=True)
class MedalEntry:
    """Single row of a medal-table all-time leaderboard."""
    position: int
    user_id: int
    medals: MedalCount


@dataclass(frozen=True)
class DailyLeaderboard:
    """Ranked on-time scores for one board."""
    game_name: str
    key: BoardKey
    entries: List[DailyEntry]


@dataclass(frozen=True)
class AllTimeLeaderboard:
    """All-time ranking up to a cutoff board."""
    game_name: str
    cutoff: BoardKey
    include_cutoff: bool
    include_late: bool
    entries: List[Union[CumulativeEntry, MedalEntry]]
    medal_table: bool = False
