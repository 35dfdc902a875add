"""Tests for recording submitted scores."""

from datetime import date, datetime, timezone

import pytest
from sqlalchemy import func, select

from puzzlebot.database.models import FlagleScoreRecord, GuildUser, User
from puzzlebot.games.flagle import Flagle, FlagleScore
from puzzlebot.games.foodguessr import FoodGuessr, FoodGuessrScore
from puzzlebot.games.geogrid import GeoGrid, GeoGridScore
from puzzlebot.services.scores import ScoreService
from puzzlebot.utils.leaderboard_exceptions import BeforeFirstBoardError, DuplicateScoreError, ScoreInsertionError

GUILD = 1234
OTHER_GUILD = 5678

# Flagle board 957 is live for all of 2024-10-05 UTC
BOARD_957_NOON = datetime(2024, 10, 5, 12, 0, tzinfo=timezone.utc)
BOARD_958_NOON = datetime(2024, 10, 6, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def service(db):
    return ScoreService(db.session_factory)


@pytest.mark.asyncio
async def test_first_score_is_best_so_far(service, db):
    result = await service.insert_score(
        Flagle(), FlagleScore(score=4, board=957), GUILD, 1, "alice", BOARD_957_NOON
    )
    assert result.best_so_far
    assert result.on_time
    assert result.is_todays_best

    async with db.get_session() as session:
        record = await session.scalar(select(FlagleScoreRecord))
        assert (record.user_id, record.board, record.score, record.day_added) == (1, 957, 4, 957)
        assert (await session.get(User, 1)).username == "alice"
        assert await session.get(GuildUser, (GUILD, 1)) is not None


@pytest.mark.asyncio
async def test_duplicate_submission(service, db):
    flagle = Flagle()
    await service.insert_score(flagle, FlagleScore(score=4, board=957), GUILD, 1, "alice", BOARD_957_NOON)

    with pytest.raises(DuplicateScoreError) as excinfo:
        await service.insert_score(flagle, FlagleScore(score=6, board=957), GUILD, 1, "alice", BOARD_957_NOON)
    assert excinfo.value.key == 957
    assert isinstance(excinfo.value, ScoreInsertionError)

    async with db.get_session() as session:
        assert await session.scalar(select(func.count()).select_from(FlagleScoreRecord)) == 1


@pytest.mark.asyncio
async def test_same_board_in_another_guild_is_not_a_duplicate(service):
    flagle = Flagle()
    await service.insert_score(flagle, FlagleScore(score=4, board=957), GUILD, 1, "alice", BOARD_957_NOON)
    result = await service.insert_score(flagle, FlagleScore(score=4, board=957), OTHER_GUILD, 1, "alice", BOARD_957_NOON)
    assert result.best_so_far


@pytest.mark.asyncio
async def test_best_so_far_needs_a_strictly_better_score(service):
    flagle = Flagle()
    await service.insert_score(flagle, FlagleScore(score=4, board=957), GUILD, 1, "alice", BOARD_957_NOON)

    tie = await service.insert_score(flagle, FlagleScore(score=4, board=957), GUILD, 2, "bob", BOARD_957_NOON)
    worse = await service.insert_score(flagle, FlagleScore(score=2, board=957), GUILD, 3, "carol", BOARD_957_NOON)
    better = await service.insert_score(flagle, FlagleScore(score=5, board=957), GUILD, 4, "dave", BOARD_957_NOON)

    assert not tie.best_so_far
    assert not worse.best_so_far
    assert better.best_so_far


@pytest.mark.asyncio
async def test_zero_score_is_never_best(service):
    result = await service.insert_score(
        Flagle(), FlagleScore(score=0, board=957), GUILD, 1, "alice", BOARD_957_NOON
    )
    assert not result.best_so_far


@pytest.mark.asyncio
async def test_late_submission(service):
    flagle = Flagle()
    late = await service.insert_score(flagle, FlagleScore(score=6, board=957), GUILD, 1, "alice", BOARD_958_NOON)
    assert not late.on_time
    assert not late.is_todays_best

    # Late scores don't count against on-time ones
    on_time = await service.insert_score(flagle, FlagleScore(score=3, board=957), GUILD, 2, "bob", BOARD_957_NOON)
    assert on_time.is_todays_best


@pytest.mark.asyncio
async def test_geogrid_lower_score_is_better(service):
    geogrid = GeoGrid()
    submitted = datetime(2024, 6, 24, 18, 0, tzinfo=timezone.utc)  # board 79
    first = GeoGridScore(correct=8, board=79, score=193.7, rank=2387, players=7102)
    second = GeoGridScore(correct=9, board=79, score=114.7, rank=2213, players=7102)

    assert (await service.insert_score(geogrid, first, GUILD, 1, "alice", submitted)).is_todays_best
    assert (await service.insert_score(geogrid, second, GUILD, 2, "bob", submitted)).is_todays_best


@pytest.mark.asyncio
async def test_foodguessr_keyed_by_date(service):
    foodguessr = FoodGuessr()
    score = FoodGuessrScore(date=date(2024, 10, 5), score=12500)

    result = await service.insert_score(foodguessr, score, GUILD, 1, "alice", BOARD_957_NOON)
    assert result.is_todays_best

    with pytest.raises(DuplicateScoreError) as excinfo:
        await service.insert_score(foodguessr, score, GUILD, 1, "alice", BOARD_958_NOON)
    assert excinfo.value.key == date(2024, 10, 5)


@pytest.mark.asyncio
async def test_username_is_updated(service, db):
    flagle = Flagle()
    await service.insert_score(flagle, FlagleScore(score=4, board=957), GUILD, 1, "alice", BOARD_957_NOON)
    await service.insert_score(flagle, FlagleScore(score=4, board=958), GUILD, 1, "alice2", BOARD_958_NOON)

    async with db.get_session() as session:
        assert (await session.get(User, 1)).username == "alice2"


@pytest.mark.asyncio
async def test_submission_before_first_board(service, db):
    with pytest.raises(BeforeFirstBoardError) as excinfo:
        await service.insert_score(
            Flagle(), FlagleScore(score=4, board=1), GUILD, 1, "alice",
            datetime(2020, 1, 1, tzinfo=timezone.utc)
        )
    assert "Flagle" in excinfo.value.user_message

    async with db.get_session() as session:
        assert await session.scalar(select(func.count()).select_from(FlagleScoreRecord)) == 0


def test_build_record_keys():
    record = GeoGrid().build_record(
        GeoGridScore(correct=8, board=182, score=193.7, rank=2387, players=7102),
        GUILD, 1, datetime(2024, 10, 6, 12, 0, tzinfo=timezone.utc)
    )
    assert (record.board, record.day_added) == (182, 183)
    assert (record.correct, record.rank, record.players) == (8, 2387, 7102)
