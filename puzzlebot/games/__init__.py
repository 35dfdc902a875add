"""
Supported daily puzzle games.

Incoming messages are matched against each game's parser in a fixed order and
the first successful parse wins.
"""

import logging
from typing import Dict, Tuple

from .base import Game
from .errors import RecognizedScoreError, ScoreParseError, UnrecognizedScoreError
from .flagle import Flagle
from .foodguessr import FoodGuessr
from .geogrid import GeoGrid

logger = logging.getLogger(__name__)

GAMES: Tuple[Game, ...] = (GeoGrid(), Flagle(), FoodGuessr())
GAMES_BY_NAME: Dict[str, Game] = {game.name: game for game in GAMES}


def get_game(name: str) -> Game:
    """
    Look up a game by its command name.

    Raises:
        KeyError: If no game has that name
    """
    return GAMES_BY_NAME[name.lower()]


def identify_score(raw: str):
    """
    Parse a message as a score for whichever game it belongs to.

    Returns:
        (game, score) for the first game whose parser accepts the message

    Raises:
        RecognizedScoreError: The message claims to be from a game but is malformed
        UnrecognizedScoreError: The message isn't a score at all
    """
    failures = []
    for game in GAMES:
        try:
            return game, game.parse(raw)
        except ScoreParseError as e:
            logger.debug(f"Message isn't a {game.description} score: {e}")
            failures.append((game, e))

    for game, error in failures:
        if game.recognizes(raw):
            raise RecognizedScoreError(game.description, error)

    raise UnrecognizedScoreError()


__all__ = ['Game', 'GAMES', 'GAMES_BY_NAME', 'get_game', 'identify_score', 'Flagle', 'FoodGuessr', 'GeoGrid']
