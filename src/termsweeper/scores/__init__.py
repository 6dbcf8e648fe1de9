"""
Score keeping for finished games.
"""
from .leaderboard import Leaderboard, LeaderboardEntry, format_time

__all__ = ["Leaderboard", "LeaderboardEntry", "format_time"]
