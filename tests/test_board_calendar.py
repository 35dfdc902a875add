"""Tests for board numbering and game-day calendars."""

from datetime import date, datetime, timedelta, timezone

import pytest

from puzzlebot.games.flagle import FLAGLE_EPOCH
from puzzlebot.games.geogrid import GEOGRID_EPOCH
from puzzlebot.utils.board_calendar import BoardCalendar, DayCalendar

FLAGLE = BoardCalendar(FLAGLE_EPOCH, utc_offset_hours=0)
GEOGRID = BoardCalendar(GEOGRID_EPOCH, utc_offset_hours=-4)


def test_epoch_is_board_one():
    assert FLAGLE.board_for(FLAGLE_EPOCH) == 1
    assert GEOGRID.board_for(GEOGRID_EPOCH) == 1


def test_known_boards():
    assert FLAGLE.board_for(date(2024, 10, 5)) == 957
    assert FLAGLE.date_for(957) == date(2024, 10, 5)
    assert GEOGRID.board_for(date(2024, 6, 24)) == 79
    assert GEOGRID.date_for(79) == date(2024, 6, 24)


def test_dates_before_epoch_have_no_board():
    assert FLAGLE.board_for(FLAGLE_EPOCH - timedelta(days=1)) is None
    assert GEOGRID.board_for(date(2000, 1, 1)) is None


def test_board_numbers_start_at_one():
    with pytest.raises(ValueError):
        FLAGLE.date_for(0)
    with pytest.raises(ValueError):
        GEOGRID.date_for(-3)


def test_date_round_trip():
    for board in (1, 2, 365, 957, 2000):
        assert FLAGLE.board_for(FLAGLE.date_for(board)) == board


def test_geogrid_rolls_over_at_utc_minus_four():
    before = datetime(2024, 6, 25, 3, 59, tzinfo=timezone.utc)
    after = datetime(2024, 6, 25, 4, 0, tzinfo=timezone.utc)
    assert GEOGRID.board_at(before) == 79
    assert GEOGRID.board_at(after) == 80


def test_flagle_rolls_over_at_utc_midnight():
    assert FLAGLE.board_at(datetime(2024, 10, 5, 23, 59, tzinfo=timezone.utc)) == 957
    assert FLAGLE.board_at(datetime(2024, 10, 6, 0, 0, tzinfo=timezone.utc)) == 958


def test_naive_datetimes_are_utc():
    calendar = DayCalendar(utc_offset_hours=-4)
    assert calendar.date_from_utc(datetime(2024, 6, 25, 2, 0)) == date(2024, 6, 24)


def test_aware_datetimes_are_converted():
    plus_ten = timezone(timedelta(hours=10))
    moment = datetime(2024, 10, 6, 8, 0, tzinfo=plus_ten)  # 2024-10-05 22:00 UTC
    assert FLAGLE.board_at(moment) == 957


def test_today_board_before_epoch_raises():
    with pytest.raises(ValueError):
        FLAGLE.today_board(datetime(2020, 1, 1, tzinfo=timezone.utc))
