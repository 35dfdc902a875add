"""Tests for shared ranking helpers."""

from types import SimpleNamespace

import pytest

from puzzlebot.constants import MedalConstants
from puzzlebot.data_models.leaderboard import CumulativeEntry, MedalCount
from puzzlebot.utils import ranking
from puzzlebot.utils.leaderboard_exceptions import LeaderboardCalculationError, PlaceOutOfBoundsError


def test_competition_ranks_share_ties():
    assert ranking.competition_ranks([10, 8, 8, 5]) == [1, 2, 2, 4]
    assert ranking.competition_ranks([3, 3, 3]) == [1, 1, 1]
    assert ranking.competition_ranks([]) == []


def test_medal_for_rank():
    assert ranking.medal_for_rank(1) == MedalConstants.GOLD_EMOJI
    assert ranking.medal_for_rank(3) == MedalConstants.BRONZE_EMOJI
    assert ranking.medal_for_rank(4) is None


def test_cumulative_totals():
    # Two boards: A scores 10 then 5, B scores 20 then 15
    rows = [(1, 10), (2, 20), (1, 5), (2, 15)]
    assert ranking.cumulative_totals(rows) == [
        CumulativeEntry(position=1, user_id=2, total=35),
        CumulativeEntry(position=2, user_id=1, total=15),
    ]


def test_cumulative_totals_break_ties_by_user_id():
    entries = ranking.cumulative_totals([(9, 4), (3, 4)])
    assert [(entry.position, entry.user_id) for entry in entries] == [(1, 3), (2, 9)]


def test_place_finishers_per_board():
    records = [
        SimpleNamespace(user_id=1, board=1, score=50.0),
        SimpleNamespace(user_id=2, board=1, score=40.0),
        SimpleNamespace(user_id=3, board=1, score=60.0),
        SimpleNamespace(user_id=4, board=1, score=70.0),
        SimpleNamespace(user_id=1, board=2, score=10.0),
    ]
    placements = ranking.place_finishers(
        records,
        board_key=lambda record: record.board,
        order_key=lambda record: record.score,
    )
    assert placements == [(2, 1), (1, 2), (3, 3), (1, 1)]


def test_medal_points():
    medals = ranking.tally_medals([(1, 1), (1, 1), (1, 2)])
    assert medals[1] == MedalCount(gold=2, silver=1, bronze=0)
    assert medals[1].points == 10


def test_medal_table_order():
    table = ranking.medal_table({
        1: MedalCount(silver=2),
        2: MedalCount(gold=1),
        3: MedalCount(gold=1, bronze=1),
    })
    assert [(entry.position, entry.user_id, entry.medals.points) for entry in table] == [
        (1, 3, 5),
        (2, 1, 4),
        (3, 2, 4),
    ]


@pytest.mark.parametrize("place", [0, 4, -1])
def test_out_of_bounds_place(place):
    with pytest.raises(PlaceOutOfBoundsError) as excinfo:
        ranking.tally_medals([(1, place)])
    assert excinfo.value.place == place
    assert isinstance(excinfo.value, LeaderboardCalculationError)


def test_medal_count_display():
    assert str(MedalCount(gold=1, silver=0, bronze=2)) == "🥇1 🥈0 🥉2 (Medal points: 6)"
