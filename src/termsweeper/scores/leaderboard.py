"""
Minesweeper Leaderboard
Keeps the best winning time per difficulty for the current session
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, Optional

from ..game.difficulty import PRESETS


logger = logging.getLogger(__name__)


def format_time(seconds: float) -> str:
    """Format a duration as MM:SS"""
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


@dataclass(frozen=True)
class LeaderboardEntry:
    """Represents the best time for one difficulty"""

    time_seconds: float
    date: str = field(default_factory=lambda: datetime.now().strftime("%Y-%m-%d %H:%M"))

    def format_time(self) -> str:
        return format_time(self.time_seconds)


class Leaderboard:
    """
    Best (minimum) winning time per difficulty tier.

    Entries only ever improve. Nothing is written to disk; the board lives
    as long as the process.
    """

    def __init__(self, tiers: Optional[Iterable[str]] = None):
        if tiers is None:
            tiers = [d.name for d in PRESETS]
        self._best: Dict[str, Optional[LeaderboardEntry]] = {t: None for t in tiers}

    def update(self, tier: str, elapsed_seconds: float) -> bool:
        """
        Record a winning time.

        Returns True if it is a new best for the tier.

        Raises:
            KeyError: If the tier is unknown.
        """
        if tier not in self._best:
            raise KeyError(f"Unknown difficulty tier {tier!r}")
        current = self._best[tier]
        if current is not None and current.time_seconds <= elapsed_seconds:
            return False
        self._best[tier] = LeaderboardEntry(elapsed_seconds)
        logger.info("New best time for %s: %s", tier, format_time(elapsed_seconds))
        return True

    def best(self, tier: str) -> Optional[LeaderboardEntry]:
        """Best entry for a tier, or None if never won."""
        return self._best[tier]

    def best_time(self, tier: str) -> Optional[float]:
        entry = self._best[tier]
        return entry.time_seconds if entry is not None else None

    def tiers(self):
        return list(self._best)

    def __contains__(self, tier: str) -> bool:
        return tier in self._best
