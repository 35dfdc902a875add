"""
Common interface for supported daily puzzle games.

A game knows how to parse its share text, how to turn a parsed score into a
database record, and how to rank stored records into daily and all-time
leaderboards. Ranking works on records that were already fetched, so it never
touches the database itself.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from puzzlebot.data_models.leaderboard import AllTimeLeaderboard, BoardKey, DailyEntry, DailyLeaderboard
from puzzlebot.utils import ranking
from puzzlebot.utils.board_calendar import DayCalendar
from puzzlebot.games.errors import Field, NotANumberError
from puzzlebot.utils.leaderboard_exceptions import BeforeFirstBoardError, RowDecodeError

logger = logging.getLogger(__name__)


class Game(ABC):
    """A daily puzzle game whose scores can be submitted and ranked."""

    name: str = ""                # Slash command value, e.g. "geogrid"
    description: str = ""         # Human-readable name, e.g. "GeoGrid"
    calendar: DayCalendar = None
    record_model = None           # SQLAlchemy model holding this game's scores
    key_column: str = "board"
    added_column: str = "day_added"
    higher_is_better: bool = True
    medal_table: bool = False

    # Parsing

    @abstractmethod
    def parse(self, raw: str):
        """
        Parse shared score text.

        Raises:
            ScoreParseError: If the text is not a valid score for this game
        """

    @abstractmethod
    def recognizes(self, raw: str) -> bool:
        """Cheap check for whether text claims to be a share from this game."""

    # Persistence

    @abstractmethod
    def key_of(self, score) -> BoardKey:
        """Get the board (or date) a parsed score belongs to."""

    @abstractmethod
    def submission_key(self, submitted_at: datetime) -> Optional[BoardKey]:
        """Get the board (or date) that was live at submission time."""

    @abstractmethod
    def build_record(self, score, guild_id: int, user_id: int, submitted_at: datetime):
        """
        Create an unsaved record for a parsed score.

        Raises:
            BeforeFirstBoardError: If no board was live yet at `submitted_at`
        """

    def require_submission_key(self, submitted_at: datetime) -> BoardKey:
        """
        Like `submission_key`, but for a submission that is about to be stored.

        Raises:
            BeforeFirstBoardError: If no board was live yet at `submitted_at`
        """
        key = self.submission_key(submitted_at)
        if key is None:
            raise BeforeFirstBoardError(self.description, submitted_at)
        return key

    def current_key(self, now: Optional[datetime] = None) -> BoardKey:
        key = self.submission_key(now or datetime.now(timezone.utc))
        if key is None:
            raise ValueError(f"No {self.description} board is live yet")
        return key

    def beats(self, new_score, best_score) -> bool:
        """Whether `new_score` is strictly better than `best_score`."""
        if self.higher_is_better:
            return new_score > best_score
        return new_score < best_score

    def best_first(self):
        """SQL ordering that puts the best score first."""
        column = self.record_model.score
        return column.desc() if self.higher_is_better else column.asc()

    # Ranking

    def order_key(self, record):
        """Sort key putting the best record first; ties keep submission order."""
        score = record.score if not self.higher_is_better else -record.score
        return (score, record.id if record.id is not None else 0, record.user_id)

    def daily(self, records: Iterable[Any], key: BoardKey) -> DailyLeaderboard:
        """
        Rank on-time, non-zero scores for one board.

        Equal scores share a rank ("1, 2, 2, 4"), and ranks 1 to 3 are tagged
        with a medal for display.
        """
        todays = sorted(
            (
                record for record in self._decoded(records)
                if record.board_key == key and record.on_time and record.score != 0
            ),
            key=self.order_key,
        )
        ranks = ranking.competition_ranks([record.score for record in todays])

        entries = [
            DailyEntry(
                rank=rank,
                user_id=record.user_id,
                score=record.score,
                medal=ranking.medal_for_rank(rank),
                **self._entry_details(record),
            )
            for rank, record in zip(ranks, todays)
        ]
        logger.debug(f"{self.description} daily leaderboard for {key}: {len(entries)} entries")
        return DailyLeaderboard(game_name=self.description, key=key, entries=entries)

    def all_time(
        self,
        records: Iterable[Any],
        cutoff: BoardKey,
        include_cutoff: bool,
        include_late: bool,
    ) -> AllTimeLeaderboard:
        """
        Rank everything up to `cutoff`.

        Args:
            records: All stored records for one guild
            cutoff: Usually today's board
            include_cutoff: Count the cutoff board itself
            include_late: Count scores submitted after their board ended
        """
        qualifying = [
            record for record in self._decoded(records)
            if self.qualifies(record, cutoff, include_cutoff, include_late)
        ]
        logger.debug(
            f"{self.description} all-time leaderboard up to {cutoff}: {len(qualifying)} qualifying scores "
            f"(include_cutoff={include_cutoff}, include_late={include_late})"
        )
        return AllTimeLeaderboard(
            game_name=self.description,
            cutoff=cutoff,
            include_cutoff=include_cutoff,
            include_late=include_late,
            entries=self._rank_all_time(qualifying),
            medal_table=self.medal_table,
        )

    def qualifies(self, record, cutoff: BoardKey, include_cutoff: bool, include_late: bool) -> bool:
        if record.score == 0:
            return False
        if include_cutoff:
            in_range = record.board_key <= cutoff
        else:
            in_range = record.board_key < cutoff
        return in_range and (include_late or record.on_time)

    def _rank_all_time(self, records: List[Any]) -> list:
        return ranking.cumulative_totals((record.user_id, record.score) for record in records)

    def _entry_details(self, record) -> dict:
        return {}

    def _decoded(self, records: Iterable[Any]) -> List[Any]:
        decoded = []
        for record in records:
            if record.user_id is None or record.score is None or record.board_key is None or record.added_key is None:
                raise RowDecodeError(repr(record))
            decoded.append(record)
        return decoded

    def __repr__(self):
        return f"<{type(self).__name__}(name='{self.name}')>"


def next_line(lines, error):
    """Get the next stripped line, raising `error` when there are none left."""
    line = next(lines, None)
    if line is None:
        raise error
    return line.strip()


def read_count(text: str, field: Field, thousands: bool = False) -> int:
    """Read a non-negative integer, optionally with `,` thousands separators."""
    digits = text.strip()
    if thousands:
        digits = digits.replace(',', '')
    if not (digits.isascii() and digits.isdigit()):
        raise NotANumberError(field)
    return int(digits)
