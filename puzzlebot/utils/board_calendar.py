"""
Day numbering for daily puzzle games.

Each game publishes one board per calendar day in its own timezone. Board 1 is
published on the game's epoch date and every following day adds one. Offsets
are fixed (no daylight saving), matching what the games themselves use.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Optional


class DayCalendar:
    """Maps instants to calendar dates in a game's fixed-offset timezone."""

    def __init__(self, utc_offset_hours: int = 0):
        self.utc_offset_hours = utc_offset_hours
        self.tz = timezone(timedelta(hours=utc_offset_hours))

    def date_from_utc(self, moment: datetime) -> date:
        """Get the game's calendar date at a given instant. Naive datetimes are taken as UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(self.tz).date()

    def today(self, now: Optional[datetime] = None) -> date:
        """Get today's date in the game's timezone."""
        return self.date_from_utc(now or datetime.now(timezone.utc))

    def __repr__(self):
        return f"<DayCalendar(utc_offset_hours={self.utc_offset_hours})>"


class BoardCalendar(DayCalendar):
    """Day calendar with sequential board numbers counted from an epoch date."""

    def __init__(self, epoch: date, utc_offset_hours: int = 0):
        super().__init__(utc_offset_hours)
        self.epoch = epoch

    def board_for(self, day: date) -> Optional[int]:
        """
        Get the number of the board published on `day`.

        Returns:
            The board number, or None if `day` is before board 1
        """
        days_since = (day - self.epoch).days
        if days_since < 0:
            return None
        return days_since + 1

    def date_for(self, board: int) -> date:
        """
        Get the date on which a board was published.

        Raises:
            ValueError: If `board` is less than 1
        """
        if board < 1:
            raise ValueError(f"Board numbers start at 1, got {board}")
        return self.epoch + timedelta(days=board - 1)

    def board_at(self, moment: datetime) -> Optional[int]:
        """Get the board that was active at a given instant."""
        return self.board_for(self.date_from_utc(moment))

    def today_board(self, now: Optional[datetime] = None) -> int:
        """Get the board that is active right now."""
        board = self.board_for(self.today(now))
        if board is None:
            raise ValueError(f"Current date is before board 1 ({self.epoch.isoformat()})")
        return board

    def __repr__(self):
        return f"<BoardCalendar(epoch={self.epoch.isoformat()}, utc_offset_hours={self.utc_offset_hours})>"
