"""
Services package for the puzzle scores bot.
"""

from .base import BaseService
from .leaderboard import LeaderboardService
from .scores import InsertedScore, ScoreService

__all__ = ['BaseService', 'LeaderboardService', 'InsertedScore', 'ScoreService']
