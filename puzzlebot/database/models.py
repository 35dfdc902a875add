from sqlalchemy import (
    Column, Integer, String, DateTime, Date, Float, BigInteger,
    ForeignKey, UniqueConstraint, CheckConstraint
)
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()

class User(Base):
    __tablename__ = 'users'

    user_id = Column(BigInteger, primary_key=True, autoincrement=False)  # Discord user ID
    username = Column(String(100), nullable=False)

    # Metadata
    created_at = Column(DateTime, default=func.now())
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now())

    guilds = relationship("GuildUser", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<User(user_id={self.user_id}, username='{self.username}')>"

class GuildUser(Base):
    __tablename__ = 'guild_users'

    guild_id = Column(BigInteger, primary_key=True, autoincrement=False)
    user_id = Column(BigInteger, ForeignKey('users.user_id'), primary_key=True)
    joined_at = Column(DateTime, default=func.now())

    user = relationship("User", back_populates="guilds")

    def __repr__(self):
        return f"<GuildUser(guild_id={self.guild_id}, user_id={self.user_id})>"

class BoardScoreMixin:
    """Columns and helpers shared by games keyed by sequential board number."""

    id = Column(Integer, primary_key=True)
    guild_id = Column(BigInteger, nullable=False, index=True)
    board = Column(Integer, nullable=False, index=True)
    day_added = Column(Integer, nullable=False)  # Board that was live when the score was submitted
    created_at = Column(DateTime, default=func.now())

    @property
    def board_key(self):
        return self.board

    @property
    def added_key(self):
        return self.day_added

    @property
    def on_time(self) -> bool:
        return self.board == self.day_added

class FlagleScoreRecord(BoardScoreMixin, Base):
    __tablename__ = 'flagle_scores'

    user_id = Column(BigInteger, ForeignKey('users.user_id'), nullable=False)
    score = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('guild_id', 'user_id', 'board', name='uq_flagle_score_per_board'),
        CheckConstraint('score >= 0 AND score <= 6', name='check_flagle_score_range'),
    )

    def __repr__(self):
        return f"<FlagleScoreRecord(user_id={self.user_id}, board={self.board}, score={self.score}, day_added={self.day_added})>"

class GeoGridScoreRecord(BoardScoreMixin, Base):
    __tablename__ = 'geogrid_scores'

    user_id = Column(BigInteger, ForeignKey('users.user_id'), nullable=False)
    correct = Column(Integer, nullable=False)
    score = Column(Float, nullable=False)  # Lower is better
    rank = Column(Integer, nullable=False)
    players = Column(Integer, nullable=False)

    __table_args__ = (
        UniqueConstraint('guild_id', 'user_id', 'board', name='uq_geogrid_score_per_board'),
        CheckConstraint('correct >= 0 AND correct <= 9', name='check_geogrid_correct_range'),
    )

    def __repr__(self):
        return f"<GeoGridScoreRecord(user_id={self.user_id}, board={self.board}, score={self.score}, correct={self.correct})>"

class FoodGuessrScoreRecord(Base):
    __tablename__ = 'foodguessr_scores'

    id = Column(Integer, primary_key=True)
    guild_id = Column(BigInteger, nullable=False, index=True)
    user_id = Column(BigInteger, ForeignKey('users.user_id'), nullable=False)
    score = Column(Integer, nullable=False)
    date = Column(Date, nullable=False, index=True)
    date_added = Column(Date, nullable=False)  # UTC date the score was submitted
    created_at = Column(DateTime, default=func.now())

    __table_args__ = (
        UniqueConstraint('guild_id', 'user_id', 'date', name='uq_foodguessr_score_per_date'),
        CheckConstraint('score >= 0 AND score <= 15000', name='check_foodguessr_score_range'),
    )

    @property
    def board_key(self):
        return self.date

    @property
    def added_key(self):
        return self.date_added

    @property
    def on_time(self) -> bool:
        return self.date == self.date_added

    def __repr__(self):
        return f"<FoodGuessrScoreRecord(user_id={self.user_id}, date={self.date}, score={self.score}, date_added={self.date_added})>"
