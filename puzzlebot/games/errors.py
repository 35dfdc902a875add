"""
Parse errors for shared score text.

The set of errors is closed: every parser raises one of the classes below and
nothing else. Callers branch on the class to tell a message that is not a score
at all from a share that looks right but is malformed or tampered with.
"""

from enum import Enum


class Section(Enum):
    """Structural parts of a score share."""
    DETAILS = "details line"
    BOARD_NUMBER = "board number"
    GUESSES = "guesses"
    GRID = "grid section"
    SEPARATOR = "blank separator line"
    SUMMARY_TITLE = "summary title"
    SCORE = "score line"
    RANKING = "ranking line"
    DATE = "date"


class Field(Enum):
    """Numeric fields read out of a score share."""
    BOARD = "board number"
    GUESS = "guess"
    SCORE = "score"
    RANK = "rank"
    PLAYERS = "player count"
    DAY = "day"
    YEAR = "year"


class ScoreParseError(ValueError):
    """Base exception for score text that could not be parsed."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or f"❌ Couldn't read that score: {message}."


class EmptyScoreError(ScoreParseError):
    """Raised when the message has no content."""
    def __init__(self):
        super().__init__("string is empty")


class TruncatedScoreError(ScoreParseError):
    """Raised when the message ends before all expected lines were read."""
    def __init__(self):
        super().__init__("string ends prematurely")


class MissingSectionError(ScoreParseError):
    """Raised when an expected section is absent."""
    def __init__(self, section: Section):
        self.section = section
        super().__init__(f"string does not contain a {section.value}")


class InvalidFormatError(ScoreParseError):
    """Raised when a section is present but not laid out as expected."""
    def __init__(self, section: Section):
        self.section = section
        super().__init__(f"{section.value} was not formatted as expected")


class NotANumberError(ScoreParseError):
    """Raised when a numeric field does not hold a number."""
    def __init__(self, field: Field):
        self.field = field
        super().__init__(f"{field.value} is not a number")


class InconsistentScoreError(ScoreParseError):
    """Raised when the reported guess count disagrees with the grid."""
    def __init__(self, guesses: int, correct: int):
        self.guesses = guesses
        self.correct = correct
        super().__init__(
            f"guess number and grid don't match ({guesses} guesses, {correct} correct)",
            "❌ That score's guess count doesn't match its grid."
        )


class UnrecognizedScoreError(ScoreParseError):
    """Raised when no game recognizes the message at all."""
    def __init__(self):
        super().__init__("message is not a score for any known game")


class RecognizedScoreError(ScoreParseError):
    """Raised when a message looks like a game's share but fails to parse."""
    def __init__(self, game_name: str, cause: ScoreParseError):
        self.game_name = game_name
        self.cause = cause
        super().__init__(
            f"{game_name} score could not be parsed: {cause}",
            f"❌ That looks like a {game_name} score, but the {_describe(cause)}."
        )


def _describe(error: ScoreParseError) -> str:
    if isinstance(error, (MissingSectionError, InvalidFormatError)):
        return f"{error.section.value} is missing or malformed"
    if isinstance(error, NotANumberError):
        return f"{error.field.value} isn't a number"
    if isinstance(error, InconsistentScoreError):
        return "guess count doesn't match the grid"
    return "message ends too early"
