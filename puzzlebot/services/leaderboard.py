"""
Leaderboard service.

Fetches a guild's stored scores for a game and hands them to the game's
ranking code to build daily and all-time leaderboard views.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from puzzlebot.data_models.leaderboard import AllTimeLeaderboard, DailyLeaderboard
from puzzlebot.games.base import Game
from puzzlebot.services.base import BaseService
from puzzlebot.utils.leaderboard_exceptions import LeaderboardStorageError

logger = logging.getLogger(__name__)


class LeaderboardService(BaseService):
    """Service for daily and all-time leaderboard queries."""

    async def daily(self, game: Game, guild_id: int, now: Optional[datetime] = None) -> DailyLeaderboard:
        """Get today's leaderboard for a game in a guild."""
        key = game.current_key(now)
        key_column = getattr(game.record_model, game.key_column)
        records = await self._fetch_records(game, guild_id, key_column == key)
        return game.daily(records, key)

    async def all_time(
        self,
        game: Game,
        guild_id: int,
        include_today: bool = True,
        include_late: bool = False,
        now: Optional[datetime] = None,
    ) -> AllTimeLeaderboard:
        """
        Get the all-time leaderboard for a game in a guild.

        Args:
            game: Game to rank
            guild_id: Discord guild
            include_today: Count today's board as well as finished ones
            include_late: Count scores submitted after their board ended
            now: Reference time for "today", defaults to now
        """
        cutoff = game.current_key(now)
        key_column = getattr(game.record_model, game.key_column)
        records = await self._fetch_records(game, guild_id, key_column <= cutoff)
        return game.all_time(records, cutoff, include_cutoff=include_today, include_late=include_late)

    async def _fetch_records(self, game: Game, guild_id: int, *criteria) -> List:
        model = game.record_model
        stmt = select(model).where(model.guild_id == guild_id, *criteria).order_by(model.id)
        try:
            async with self.get_session() as session:
                result = await session.execute(stmt)
                records = list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch {game.description} scores for guild {guild_id}: {e}", exc_info=True)
            raise LeaderboardStorageError(f"fetching {game.description} scores", str(e)) from e

        logger.info(f"Fetched {len(records)} {game.description} scores for guild {guild_id}")
        return records
