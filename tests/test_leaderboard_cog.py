"""Tests for the leaderboard slash commands' error handling."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from discord import app_commands

from puzzlebot.cogs.leaderboard import LeaderboardCog
from puzzlebot.data_models.leaderboard import DailyLeaderboard
from puzzlebot.utils.leaderboard_exceptions import LeaderboardStorageError, RowDecodeError

FLAGLE = app_commands.Choice(name="Flagle", value="flagle")


def make_cog():
    return LeaderboardCog(SimpleNamespace(db=SimpleNamespace(session_factory=None)))


def make_interaction(guild=True):
    interaction = MagicMock()
    interaction.guild = MagicMock(id=1234) if guild else None
    interaction.response.defer = AsyncMock()
    interaction.followup.send = AsyncMock()
    return interaction


def sent_embed(interaction):
    return interaction.followup.send.await_args.kwargs['embed']


@pytest.mark.asyncio
async def test_today_sends_leaderboard():
    cog = make_cog()
    cog.leaderboard_service.daily = AsyncMock(
        return_value=DailyLeaderboard(game_name="Flagle", key=957, entries=[])
    )
    interaction = make_interaction()

    await cog.today.callback(cog, interaction, FLAGLE)

    assert "Flagle" in sent_embed(interaction).title
    assert cog.leaderboard_service.daily.await_args.args[1] == 1234


@pytest.mark.asyncio
async def test_today_outside_a_guild():
    cog = make_cog()
    cog.leaderboard_service.daily = AsyncMock()
    interaction = make_interaction(guild=False)

    await cog.today.callback(cog, interaction, FLAGLE)

    assert sent_embed(interaction).title == "Server Only"
    cog.leaderboard_service.daily.assert_not_awaited()


@pytest.mark.asyncio
async def test_storage_failure_shows_database_error():
    cog = make_cog()
    cog.leaderboard_service.all_time = AsyncMock(
        side_effect=LeaderboardStorageError("fetching Flagle scores", "database is locked")
    )
    interaction = make_interaction()

    await cog.all_time.callback(cog, interaction, FLAGLE)

    assert sent_embed(interaction).title == "Database Error"
    assert interaction.followup.send.await_args.kwargs['ephemeral']


@pytest.mark.asyncio
async def test_calculation_failure_shows_command_error():
    cog = make_cog()
    cog.leaderboard_service.daily = AsyncMock(side_effect=RowDecodeError("<FlagleScoreRecord>"))
    interaction = make_interaction()

    await cog.today.callback(cog, interaction, FLAGLE)

    assert sent_embed(interaction).title == "Command Error"
