"""
Scores cog.

Watches guild messages for shared puzzle results, records them and
acknowledges each submission with a reaction.
"""

import discord
from discord.ext import commands
import logging

from puzzlebot.constants import ReactionConstants
from puzzlebot.games import identify_score
from puzzlebot.games.errors import RecognizedScoreError, UnrecognizedScoreError
from puzzlebot.services.scores import ScoreService
from puzzlebot.utils.leaderboard_exceptions import BeforeFirstBoardError, DuplicateScoreError, ScoreStorageError

logger = logging.getLogger(__name__)


class ScoresCog(commands.Cog):
    """Score submission by posting a game's share text."""

    def __init__(self, bot):
        self.bot = bot
        self.score_service = ScoreService(bot.db.session_factory)

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        if message.author.bot or message.guild is None:
            return

        try:
            game, score = identify_score(message.content)
        except UnrecognizedScoreError:
            return
        except RecognizedScoreError as e:
            logger.info(f"Malformed {e.game_name} score from user {message.author.id}: {e.cause}")
            await message.reply(e.user_message)
            return

        logger.debug(f"Parsed {game.description} score from user {message.author.id}: {score}")

        try:
            inserted = await self.score_service.insert_score(
                game,
                score,
                guild_id=message.guild.id,
                user_id=message.author.id,
                username=message.author.name,
                submitted_at=message.created_at,
            )
        except DuplicateScoreError:
            await message.add_reaction(ReactionConstants.DUPLICATE)
            return
        except ScoreStorageError as e:
            await message.reply(e.user_message)
            return
        except BeforeFirstBoardError as e:
            logger.warning(f"Rejected {game.description} score from user {message.author.id}: {e}")
            return

        await message.add_reaction(ReactionConstants.ACCEPTED)
        if inserted.is_todays_best:
            await message.add_reaction(ReactionConstants.BEST_SO_FAR)


async def setup(bot):
    await bot.add_cog(ScoresCog(bot))
