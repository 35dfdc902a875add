"""
Score persistence service.

Records parsed scores and works out whether a new score is the best on-time
score of its board so far. The duplicate check (a unique constraint on guild,
user and board) and the best-so-far read happen inside the same transaction as
the insert, so two racing submissions can't both see a stale best.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from puzzlebot.database.models import GuildUser, User
from puzzlebot.games.base import Game
from puzzlebot.services.base import BaseService
from puzzlebot.utils.leaderboard_exceptions import DuplicateScoreError, InsertionTarget, ScoreStorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InsertedScore:
    """Outcome of a successful submission."""
    best_so_far: bool
    on_time: bool

    @property
    def is_todays_best(self) -> bool:
        return self.best_so_far and self.on_time


def _is_unique_violation(error: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed", PostgreSQL: "violates unique constraint"
    return 'unique' in str(error.orig).lower()


class ScoreService(BaseService):
    """Service for recording submitted scores."""

    async def insert_score(
        self,
        game: Game,
        score,
        guild_id: int,
        user_id: int,
        username: str,
        submitted_at: Optional[datetime] = None,
    ) -> InsertedScore:
        """
        Record a parsed score for a user in a guild.

        Args:
            game: Game the score was parsed for
            score: Parsed score from `game.parse`
            guild_id: Discord guild the score was posted in
            user_id: Discord user who posted it
            username: Current username, stored for reference
            submitted_at: Submission time, defaults to now

        Returns:
            InsertedScore with best-so-far and on-time flags

        Raises:
            DuplicateScoreError: The user already has a score for this board in this guild
            ScoreStorageError: Any other database failure
        """
        submitted_at = submitted_at or datetime.now(timezone.utc)
        record = game.build_record(score, guild_id, user_id, submitted_at)
        key = record.board_key
        target = InsertionTarget.TRANSACTION

        try:
            async with self.get_session() as session:
                target = InsertionTarget.USER
                await self._upsert_user(session, user_id, username)

                target = InsertionTarget.GUILD_USER
                await self._ensure_guild_user(session, guild_id, user_id)

                target = InsertionTarget.SCORE
                session.add(record)
                try:
                    await session.flush()
                except IntegrityError as e:
                    if _is_unique_violation(e):
                        raise DuplicateScoreError(game.description, key) from e
                    raise

                best_score = await self._best_other_score(session, game, guild_id, user_id, key)
                target = InsertionTarget.TRANSACTION

        except DuplicateScoreError:
            logger.info(f"{game.description} score for board {key} from user {user_id} in guild {guild_id} was a duplicate")
            raise
        except SQLAlchemyError as e:
            logger.error(f"Failed to insert {game.description} score ({target.value}): {e}", exc_info=True)
            raise ScoreStorageError(target, str(e)) from e

        if best_score is None:
            logger.info(f"There are no other on-time {game.description} scores for board {key}")
            best_so_far = record.score != 0
        else:
            logger.info(f"Best existing {game.description} score for board {key} is {best_score}")
            best_so_far = record.score != 0 and game.beats(record.score, best_score)

        logger.info(
            f"Inserted {game.description} score {record.score} for board {key} "
            f"(user={user_id}, guild={guild_id}, on_time={record.on_time}, best_so_far={best_so_far})"
        )
        return InsertedScore(best_so_far=best_so_far, on_time=record.on_time)

    async def _upsert_user(self, session, user_id: int, username: str):
        user = await session.get(User, user_id)
        if user is None:
            session.add(User(user_id=user_id, username=username))
            logger.debug(f"Created user {user_id} ({username})")
        elif user.username != username:
            user.username = username
        await session.flush()

    async def _ensure_guild_user(self, session, guild_id: int, user_id: int):
        guild_user = await session.get(GuildUser, (guild_id, user_id))
        if guild_user is None:
            session.add(GuildUser(guild_id=guild_id, user_id=user_id))
            await session.flush()
            logger.debug(f"Added user {user_id} to guild {guild_id}")

    async def _best_other_score(self, session, game: Game, guild_id: int, user_id: int, key):
        """Best on-time score for a board from everyone except `user_id`."""
        model = game.record_model
        key_column = getattr(model, game.key_column)
        added_column = getattr(model, game.added_column)

        stmt = (
            select(model.score)
            .where(
                model.guild_id == guild_id,
                model.user_id != user_id,
                key_column == key,
                key_column == added_column,
                model.score != 0,
            )
            .order_by(game.best_first())
            .limit(1)
            .with_for_update()
        )
        return await session.scalar(stmt)
