"""
Shared ranking utilities for daily and all-time leaderboards.

These helpers work on plain Python values that have already been fetched from
the database, so every game ranks, tie-breaks and awards medals the same way.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from puzzlebot.constants import MedalConstants
from puzzlebot.data_models.leaderboard import CumulativeEntry, MedalCount, MedalEntry
from puzzlebot.utils.leaderboard_exceptions import PlaceOutOfBoundsError


def competition_ranks(values: Sequence[Any]) -> List[int]:
    """
    Rank values that are already in best-first order.

    Consecutive equal values share a rank and the next distinct value resumes
    at its own position, e.g. [10, 8, 8, 5] ranks as [1, 2, 2, 4].
    """
    ranks = []
    for position, value in enumerate(values, start=1):
        if ranks and values[position - 2] == value:
            ranks.append(ranks[-1])
        else:
            ranks.append(position)
    return ranks


def medal_for_rank(rank: int) -> Optional[str]:
    """Get the display medal for a daily rank, if it earns one."""
    return {
        1: MedalConstants.GOLD_EMOJI,
        2: MedalConstants.SILVER_EMOJI,
        3: MedalConstants.BRONZE_EMOJI,
    }.get(rank)


def cumulative_totals(rows: Iterable[Tuple[int, int]]) -> List[CumulativeEntry]:
    """
    Sum each user's points and list users by descending total.

    Args:
        rows: (user_id, points) pairs that already passed the inclusion rules

    Returns:
        Entries with sequential positions; equal totals are ordered by user ID
    """
    totals: Dict[int, int] = defaultdict(int)
    for user_id, points in rows:
        totals[user_id] += points

    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0]))
    return [
        CumulativeEntry(position=position, user_id=user_id, total=total)
        for position, (user_id, total) in enumerate(ordered, start=1)
    ]


def place_finishers(
    records: Iterable[Any],
    board_key: Callable[[Any], Hashable],
    order_key: Callable[[Any], Any],
    places: int = MedalConstants.MEDAL_PLACES,
) -> List[Tuple[int, int]]:
    """
    Find the top finishers of every board.

    Args:
        records: Score records with a `user_id` attribute
        board_key: Returns the board a record belongs to
        order_key: Sort key putting the best record of a board first
        places: How many places per board to return

    Returns:
        (user_id, place) pairs, place counted from 1
    """
    boards = defaultdict(list)
    for record in records:
        boards[board_key(record)].append(record)

    placements = []
    for board in sorted(boards):
        finishers = sorted(boards[board], key=order_key)[:places]
        placements.extend(
            (record.user_id, place) for place, record in enumerate(finishers, start=1)
        )
    return placements


def tally_medals(placements: Iterable[Tuple[int, int]]) -> Dict[int, MedalCount]:
    """
    Count gold, silver and bronze finishes per user.

    Raises:
        PlaceOutOfBoundsError: If a placement is not 1, 2 or 3
    """
    medals: Dict[int, MedalCount] = {}
    for user_id, place in placements:
        entry = medals.setdefault(user_id, MedalCount())
        if place == 1:
            entry.gold += 1
        elif place == 2:
            entry.silver += 1
        elif place == 3:
            entry.bronze += 1
        else:
            raise PlaceOutOfBoundsError(place)
    return medals


def medal_table(medals: Dict[int, MedalCount]) -> List[MedalEntry]:
    """List users by descending medal points; equal points are ordered by user ID."""
    ordered = sorted(medals.items(), key=lambda item: (-item[1].points, item[0]))
    return [
        MedalEntry(position=position, user_id=user_id, medals=count)
        for position, (user_id, count) in enumerate(ordered, start=1)
    ]
