"""
GeoGrid (geogridgame.com) scores.

A share looks like:

    ✅ ✅ ✅
    ✅ ✅ ✅
    ✅ ✅ ❌

    🌎Game Summary🌎
    Board #38
    Score: 193.7
    Rank: 2,387 / 7,102
    https://geogridgame.com
    @geogridgame

Lower scores are better. The all-time leaderboard is a medal table built from
each board's top three rather than a sum of scores.
"""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional

from puzzlebot.database.models import GeoGridScoreRecord
from puzzlebot.games.base import Game, next_line, read_count
from puzzlebot.games.errors import (
    EmptyScoreError, Field, InvalidFormatError, MissingSectionError,
    NotANumberError, Section, TruncatedScoreError
)
from puzzlebot.utils import ranking
from puzzlebot.utils.board_calendar import BoardCalendar

GEOGRID_EPOCH = date(2024, 4, 7)
GRID_SIZE = 9
GRID_LINES = 3
SUMMARY_TITLE = "🌎Game Summary🌎"

CORRECT_CELL = '✅'
WRONG_CELL = '❌'


@dataclass(frozen=True)
class GeoGridScore:
    correct: int
    board: int
    score: float
    rank: int
    players: int


class GeoGrid(Game):
    name = "geogrid"
    description = "GeoGrid"
    # Boards roll over at midnight EDT according to geogridgame.com
    calendar = BoardCalendar(GEOGRID_EPOCH, utc_offset_hours=-4)
    record_model = GeoGridScoreRecord
    higher_is_better = False
    medal_table = True

    def recognizes(self, raw: str) -> bool:
        return any(line.strip() == SUMMARY_TITLE for line in raw.splitlines())

    def parse(self, raw: str) -> GeoGridScore:
        lines = iter(raw.strip().splitlines())

        grid_raw = next_line(lines, EmptyScoreError()) + ''.join(
            next_line(lines, TruncatedScoreError()) for _ in range(GRID_LINES - 1)
        )
        grid = [c == CORRECT_CELL for c in grid_raw if c in (CORRECT_CELL, WRONG_CELL)]

        if not grid:
            raise MissingSectionError(Section.GRID)
        if len(grid) != GRID_SIZE:
            raise InvalidFormatError(Section.GRID)

        correct = sum(grid)

        if next_line(lines, TruncatedScoreError()):
            raise MissingSectionError(Section.SEPARATOR)

        if next(lines, '').strip() != SUMMARY_TITLE:
            raise MissingSectionError(Section.SUMMARY_TITLE)

        board_line = next_line(lines, TruncatedScoreError())
        if not board_line.startswith("Board #"):
            raise MissingSectionError(Section.BOARD_NUMBER)
        board = read_count(board_line[len("Board #"):], Field.BOARD)
        if board < 1:
            raise InvalidFormatError(Section.BOARD_NUMBER)

        score_line = next_line(lines, TruncatedScoreError())
        if not score_line.startswith("Score: "):
            raise MissingSectionError(Section.SCORE)
        score_str = score_line[len("Score: "):]
        # float() accepts "1_93.7"
        if '_' in score_str:
            raise NotANumberError(Field.SCORE)
        try:
            score = float(score_str)
        except ValueError:
            raise NotANumberError(Field.SCORE)
        if not math.isfinite(score):
            raise NotANumberError(Field.SCORE)

        ranking_line = next_line(lines, TruncatedScoreError())
        if not ranking_line.startswith("Rank: "):
            raise MissingSectionError(Section.RANKING)
        rank_raw, sep, players_raw = ranking_line[len("Rank: "):].partition(" / ")
        if not sep:
            raise InvalidFormatError(Section.RANKING)

        rank = read_count(rank_raw, Field.RANK, thousands=True)
        players = read_count(players_raw, Field.PLAYERS, thousands=True)
        if rank < 1 or players < 1 or rank > players:
            raise InvalidFormatError(Section.RANKING)

        return GeoGridScore(
            correct=correct,
            board=board,
            score=score,
            rank=rank,
            players=players,
        )

    def key_of(self, score: GeoGridScore) -> int:
        return score.board

    def submission_key(self, submitted_at: datetime) -> Optional[int]:
        return self.calendar.board_at(submitted_at)

    def build_record(self, score: GeoGridScore, guild_id: int, user_id: int, submitted_at: datetime) -> GeoGridScoreRecord:
        return GeoGridScoreRecord(
            guild_id=guild_id,
            user_id=user_id,
            correct=score.correct,
            board=self.key_of(score),
            score=score.score,
            rank=score.rank,
            players=score.players,
            day_added=self.require_submission_key(submitted_at),
        )

    def _entry_details(self, record) -> dict:
        return {'correct': record.correct}

    def _rank_all_time(self, records: List[GeoGridScoreRecord]) -> list:
        placements = ranking.place_finishers(
            records,
            board_key=lambda record: record.board_key,
            order_key=self.order_key,
        )
        return ranking.medal_table(ranking.tally_medals(placements))
