"""
Custom exceptions for score submission and leaderboards with user-friendly error messages.
"""

from enum import Enum


class LeaderboardException(Exception):
    """Base exception for leaderboard-related errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class LeaderboardCalculationError(LeaderboardException):
    """Base exception for failures while building a leaderboard view."""
    pass

class RowDecodeError(LeaderboardCalculationError):
    """Raised when a stored score row cannot be turned into a leaderboard record."""
    def __init__(self, details: str):
        super().__init__(
            f"Failed to extract data from row: {details}",
            "❌ Some stored scores could not be read. Please contact an administrator."
        )

class LeaderboardStorageError(LeaderboardCalculationError):
    """Raised when fetching score rows fails."""
    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Unexpected database error during {operation}: {details}",
            "❌ Database error occurred. Please try again later."
        )

class PlaceOutOfBoundsError(LeaderboardCalculationError):
    """Raised when a placement outside the medal places reaches the medal tally."""
    def __init__(self, place: int):
        self.place = place
        super().__init__(
            f"Unexpectedly received out-of-bounds place value: {place}",
            "❌ The medal table could not be calculated."
        )

class InsertionTarget(Enum):
    USER = "user"
    GUILD_USER = "guild user"
    SCORE = "score"
    TRANSACTION = "transaction"

class ScoreInsertionError(LeaderboardException):
    """Base exception for failures while recording a score."""
    pass

class DuplicateScoreError(ScoreInsertionError):
    """Raised when the user already submitted a score for this board in this guild."""
    def __init__(self, game_name: str, key):
        self.key = key
        super().__init__(
            f"{game_name} score is a duplicate entry for board {key}, user and guild",
            f"❌ You've already submitted a {game_name} score for {key}!"
        )

class ScoreStorageError(ScoreInsertionError):
    """Raised when the database rejects a write for a reason other than a duplicate."""
    def __init__(self, target: InsertionTarget, details: str = None):
        self.target = target
        super().__init__(
            f"Unexpected database error when inserting {target.value}: {details}",
            f"Failed to record score ({target.value} could not be saved). Please try again!"
        )

class BeforeFirstBoardError(ScoreInsertionError):
    """Raised when a score is submitted before the game's first board went live."""
    def __init__(self, game_name: str, submitted_at):
        self.submitted_at = submitted_at
        super().__init__(
            f"Submission time {submitted_at} is before {game_name} board 1",
            f"❌ {game_name} hadn't started yet when that score was posted."
        )

class GuildSecurityError(LeaderboardException):
    """Raised when guild security checks fail."""
    def __init__(self):
        super().__init__(
            "Command used outside of guild context",
            "❌ This command can only be used in a server!"
        )
