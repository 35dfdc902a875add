"""
Flagle (flagle.io) scores.

A share looks like:

    #Flagle #957 (05.10.2024) 3/6
    🟥🟥🟩
    🟩🟩🟩
    https://www.flagle.io

Each wrong guess turns one grid square red, so a board solved on guess `g`
shows `7 - g` green squares and a failed board ("X/6") shows none. The guess
count and the grid are read independently and must agree.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from puzzlebot.database.models import FlagleScoreRecord
from puzzlebot.games.base import Game, next_line, read_count
from puzzlebot.games.errors import (
    EmptyScoreError, Field, InconsistentScoreError, InvalidFormatError,
    MissingSectionError, Section, TruncatedScoreError
)
from puzzlebot.utils.board_calendar import BoardCalendar

FLAGLE_EPOCH = date(2022, 2, 22)
MAX_GUESSES = 6
FAILED_GUESSES = MAX_GUESSES + 1  # "X/6"
GRID_SIZE = 6
GRID_LINES = 2

CORRECT_SQUARE = '🟩'
WRONG_SQUARE = '🟥'


@dataclass(frozen=True)
class FlagleScore:
    score: int  # Green squares left, 0 to 6
    board: int


class Flagle(Game):
    name = "flagle"
    description = "Flagle"
    # flagle.io doesn't say which timezone it uses, so assume UTC
    calendar = BoardCalendar(FLAGLE_EPOCH, utc_offset_hours=0)
    record_model = FlagleScoreRecord

    def recognizes(self, raw: str) -> bool:
        return raw.strip().startswith("#Flagle")

    def parse(self, raw: str) -> FlagleScore:
        lines = iter(raw.strip().splitlines())

        details = next_line(lines, EmptyScoreError())
        if not details.startswith("#Flagle #"):
            raise MissingSectionError(Section.DETAILS)
        details = details[len("#Flagle #"):]

        board_str, sep, date_guesses = details.partition(' ')
        if not sep:
            raise MissingSectionError(Section.BOARD_NUMBER)
        board = read_count(board_str, Field.BOARD)
        if board < 1:
            raise InvalidFormatError(Section.BOARD_NUMBER)

        _date, sep, guesses = date_guesses.partition(') ')
        if not sep:
            raise MissingSectionError(Section.GUESSES)

        guess_str, sep, _total = guesses.partition('/')
        if not sep:
            raise InvalidFormatError(Section.GUESSES)
        guess_str = guess_str.strip()
        if guess_str == 'X':
            guess = FAILED_GUESSES
        else:
            guess = read_count(guess_str, Field.GUESS)

        grid_raw = ''.join(next_line(lines, TruncatedScoreError()) for _ in range(GRID_LINES))
        grid = [c == CORRECT_SQUARE for c in grid_raw if c in (CORRECT_SQUARE, WRONG_SQUARE)]

        if not grid:
            raise MissingSectionError(Section.GRID)
        if len(grid) != GRID_SIZE:
            raise InvalidFormatError(Section.GRID)

        correct = sum(grid)

        # A mismatch means the share was edited by hand
        if FAILED_GUESSES - guess != correct:
            raise InconsistentScoreError(guess, correct)

        return FlagleScore(score=correct, board=board)

    def key_of(self, score: FlagleScore) -> int:
        return score.board

    def submission_key(self, submitted_at: datetime) -> Optional[int]:
        return self.calendar.board_at(submitted_at)

    def build_record(self, score: FlagleScore, guild_id: int, user_id: int, submitted_at: datetime) -> FlagleScoreRecord:
        return FlagleScoreRecord(
            guild_id=guild_id,
            user_id=user_id,
            score=score.score,
            board=self.key_of(score),
            day_added=self.require_submission_key(submitted_at),
        )
