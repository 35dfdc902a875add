import discord
from discord import app_commands
from discord.ext import commands
import logging

from puzzlebot.games import get_game
from puzzlebot.services.leaderboard import LeaderboardService
from puzzlebot.utils.embeds import build_all_time_embed, build_daily_embed
from puzzlebot.utils.error_embeds import ErrorEmbeds
from puzzlebot.utils.leaderboard_exceptions import (
    GuildSecurityError, LeaderboardCalculationError, LeaderboardStorageError
)

logger = logging.getLogger(__name__)

GAME_CHOICES = [
    app_commands.Choice(name="GeoGrid", value="geogrid"),
    app_commands.Choice(name="Flagle", value="flagle"),
    app_commands.Choice(name="FoodGuessr", value="foodguessr"),
]


class LeaderboardCog(commands.Cog):
    """Daily and all-time leaderboards for each game."""

    leaderboard = app_commands.Group(name="leaderboard", description="View puzzle game leaderboards")

    def __init__(self, bot):
        self.bot = bot
        self.leaderboard_service = LeaderboardService(bot.db.session_factory)

    @leaderboard.command(name="today", description="View today's leaderboard for a game")
    @app_commands.describe(game="Game to show")
    @app_commands.choices(game=GAME_CHOICES)
    async def today(self, interaction: discord.Interaction, game: app_commands.Choice[str]):
        """Display today's leaderboard."""
        await interaction.response.defer()

        try:
            if not interaction.guild:
                raise GuildSecurityError()

            daily = await self.leaderboard_service.daily(get_game(game.value), interaction.guild.id)
            await interaction.followup.send(embed=build_daily_embed(daily))

        except GuildSecurityError:
            await interaction.followup.send(embed=ErrorEmbeds.guild_only(), ephemeral=True)
        except LeaderboardStorageError as e:
            logger.error(f"Failed to load {game.value} scores: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.database_error(), ephemeral=True)
        except LeaderboardCalculationError as e:
            logger.error(f"Failed to build {game.value} daily leaderboard: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.command_error(e.user_message), ephemeral=True)

    @leaderboard.command(name="all_time", description="View the all-time leaderboard for a game")
    @app_commands.describe(
        game="Game to show",
        include_today="Count today's board (default: yes)",
        include_late="Count scores submitted after their board ended (default: no)"
    )
    @app_commands.choices(game=GAME_CHOICES)
    async def all_time(
        self,
        interaction: discord.Interaction,
        game: app_commands.Choice[str],
        include_today: bool = True,
        include_late: bool = False
    ):
        """Display the all-time leaderboard."""
        await interaction.response.defer()

        try:
            if not interaction.guild:
                raise GuildSecurityError()

            all_time = await self.leaderboard_service.all_time(
                get_game(game.value),
                interaction.guild.id,
                include_today=include_today,
                include_late=include_late
            )
            await interaction.followup.send(embed=build_all_time_embed(all_time))

        except GuildSecurityError:
            await interaction.followup.send(embed=ErrorEmbeds.guild_only(), ephemeral=True)
        except LeaderboardStorageError as e:
            logger.error(f"Failed to load {game.value} scores: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.database_error(), ephemeral=True)
        except LeaderboardCalculationError as e:
            logger.error(f"Failed to build {game.value} all-time leaderboard: {e}", exc_info=True)
            await interaction.followup.send(embed=ErrorEmbeds.command_error(e.user_message), ephemeral=True)


async def setup(bot):
    await bot.add_cog(LeaderboardCog(bot))
