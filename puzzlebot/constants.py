"""
Bot-wide constants for the puzzle scores bot.
"""

class MedalConstants:
    """Constants for medal placements and the all-time medal table."""
    
    GOLD_WEIGHT = 4
    SILVER_WEIGHT = 2
    BRONZE_WEIGHT = 1
    
    # Only the top three of each board earn a medal
    MEDAL_PLACES = 3
    
    GOLD_EMOJI = "🥇"
    SILVER_EMOJI = "🥈"
    BRONZE_EMOJI = "🥉"

class ReactionConstants:
    """Reactions used to acknowledge score submissions."""
    
    ACCEPTED = "✅"
    BEST_SO_FAR = "✨"
    DUPLICATE = "🗞"

class UIConstants:
    """Constants for Discord UI elements."""
    
    DEFAULT_EMBED_COLOR = 0x3498db  # Blue
    GOLD_RANK_COLOR = 0xffd700     # Gold for medal tables
    
    RANKING_FOOTER = (
        "Ranking may change with more submissions! "
        "Run `/leaderboard` again to see updated scores."
    )
    MEDALS_FOOTER = (
        "Medals may change with more submissions! "
        "Run `/leaderboard` again to see updated scores."
    )
