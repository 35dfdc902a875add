"""
FoodGuessr (foodguessr.com) scores.

A share looks like:

    FoodGuessr - 05 Oct 2024 GMT
    🌕🌕🌕🌕🌑 Round 1
    🌕🌕🌕🌑🌑 Round 2
    🌕🌕🌕🌕🌕 Round 3
    Total score: 12,500 / 15,000

FoodGuessr has no board numbers; scores are keyed by the UTC date in the header.
"""

from dataclasses import dataclass
from datetime import date, datetime

from puzzlebot.database.models import FoodGuessrScoreRecord
from puzzlebot.games.base import Game, next_line, read_count
from puzzlebot.games.errors import (
    EmptyScoreError, Field, InvalidFormatError, MissingSectionError,
    Section, TruncatedScoreError
)
from puzzlebot.utils.board_calendar import DayCalendar

MAX_SCORE = 15000
ROUNDS = 3
SCORE_PREFIX = "Total score: "
SCORE_SUFFIX = " / 15,000"

MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)


def parse_month(text: str) -> int:
    """Get the month number for an English month name or three-letter abbreviation."""
    text = text.lower()
    for number, month in enumerate(MONTHS, start=1):
        if text == month or text == month[:3]:
            return number
    raise InvalidFormatError(Section.DATE)


@dataclass(frozen=True)
class FoodGuessrScore:
    date: date
    score: int  # 0 to 15,000


class FoodGuessr(Game):
    name = "foodguessr"
    description = "FoodGuessr"
    calendar = DayCalendar(utc_offset_hours=0)
    record_model = FoodGuessrScoreRecord
    key_column = "date"
    added_column = "date_added"

    def recognizes(self, raw: str) -> bool:
        return raw.strip().startswith("FoodGuessr - ")

    def parse(self, raw: str) -> FoodGuessrScore:
        lines = iter(raw.strip().splitlines())

        details = next_line(lines, EmptyScoreError())
        if not details.startswith("FoodGuessr - "):
            raise MissingSectionError(Section.DETAILS)

        date_parts = details[len("FoodGuessr - "):].split()
        if len(date_parts) < 3:
            raise InvalidFormatError(Section.DATE)
        day_str, month_str, year_str = date_parts[:3]

        day = read_count(day_str, Field.DAY)
        month = parse_month(month_str)
        year = read_count(year_str, Field.YEAR)

        try:
            score_date = date(year, month, day)
        except ValueError:
            raise InvalidFormatError(Section.DATE)

        # Round lines carry nothing that isn't in the total
        for _ in range(ROUNDS):
            next_line(lines, TruncatedScoreError())

        score_line = next_line(lines, MissingSectionError(Section.SCORE))
        if not score_line.startswith(SCORE_PREFIX) or not score_line.endswith(SCORE_SUFFIX):
            raise InvalidFormatError(Section.SCORE)

        score = read_count(score_line[len(SCORE_PREFIX):-len(SCORE_SUFFIX)], Field.SCORE, thousands=True)
        if score > MAX_SCORE:
            raise InvalidFormatError(Section.SCORE)

        return FoodGuessrScore(date=score_date, score=score)

    def key_of(self, score: FoodGuessrScore) -> date:
        return score.date

    def submission_key(self, submitted_at: datetime) -> date:
        return self.calendar.date_from_utc(submitted_at)

    def build_record(self, score: FoodGuessrScore, guild_id: int, user_id: int, submitted_at: datetime) -> FoodGuessrScoreRecord:
        return FoodGuessrScoreRecord(
            guild_id=guild_id,
            user_id=user_id,
            score=score.score,
            date=self.key_of(score),
            date_added=self.require_submission_key(submitted_at),
        )
