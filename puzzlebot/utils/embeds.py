"""
Shared embed utilities for the puzzle scores bot.

Renders daily and all-time leaderboard views into Discord embeds.
"""

import discord
from datetime import date

from puzzlebot.constants import UIConstants
from puzzlebot.data_models.leaderboard import (
    AllTimeLeaderboard, BoardKey, CumulativeEntry, DailyEntry, DailyLeaderboard, MedalEntry
)

EMPTY_LISTING = "No scores yet!"


def format_key(key: BoardKey) -> str:
    """Board numbers render as `#957`, dates as ISO dates."""
    if isinstance(key, date):
        return key.isoformat()
    return f"#{key}"


def format_score(score) -> str:
    if isinstance(score, float):
        return f"{score:g}"
    return f"{score:,}"


def format_daily_line(entry: DailyEntry) -> str:
    line = f"- {entry.rank}. <@{entry.user_id}> ({format_score(entry.score)} pts"
    if entry.correct is not None:
        line += f", {entry.correct} correct"
    line += ")"
    if entry.medal:
        line += f" {entry.medal}"
    return line


def format_all_time_line(entry) -> str:
    if isinstance(entry, MedalEntry):
        return f"- {entry.position}. <@{entry.user_id}> {entry.medals}"
    if isinstance(entry, CumulativeEntry):
        return f"- {entry.position}. <@{entry.user_id}> ({entry.total:,} pts)"
    raise TypeError(f"Unexpected all-time entry: {entry!r}")


def build_daily_embed(leaderboard: DailyLeaderboard) -> discord.Embed:
    """
    Build the embed for today's leaderboard of one game.

    Args:
        leaderboard: Ranked daily view from `LeaderboardService.daily`

    Returns:
        Formatted Discord embed ready for display
    """
    key_name = "Date" if isinstance(leaderboard.key, date) else "Board"
    embed = discord.Embed(
        title=f"Today's {leaderboard.game_name} Leaderboard",
        color=UIConstants.DEFAULT_EMBED_COLOR
    )
    embed.add_field(name=key_name, value=format_key(leaderboard.key), inline=False)

    listing = "\n".join(format_daily_line(entry) for entry in leaderboard.entries)
    embed.add_field(name="Rankings", value=listing or EMPTY_LISTING, inline=False)

    embed.set_footer(text=UIConstants.RANKING_FOOTER)
    return embed


def build_all_time_embed(leaderboard: AllTimeLeaderboard) -> discord.Embed:
    """
    Build the embed for a game's all-time leaderboard.

    Shows which boards were counted (today's and late submissions) so two
    differently-filtered views aren't confused for each other.
    """
    embed = discord.Embed(
        title=f"All-Time {leaderboard.game_name} Leaderboard",
        color=UIConstants.GOLD_RANK_COLOR if leaderboard.medal_table else UIConstants.DEFAULT_EMBED_COLOR
    )
    embed.add_field(
        name=f"Includes today's board ({format_key(leaderboard.cutoff)})?",
        value="Yes" if leaderboard.include_cutoff else "No",
        inline=True
    )
    embed.add_field(
        name="Includes late submissions?",
        value="Yes" if leaderboard.include_late else "No",
        inline=True
    )

    listing = "\n".join(format_all_time_line(entry) for entry in leaderboard.entries)
    embed.add_field(
        name="Medals" if leaderboard.medal_table else "Rankings",
        value=listing or EMPTY_LISTING,
        inline=False
    )

    embed.set_footer(text=UIConstants.MEDALS_FOOTER if leaderboard.medal_table else UIConstants.RANKING_FOOTER)
    return embed
