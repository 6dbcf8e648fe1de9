"""
Application configuration and logging setup.
"""
import argparse
import logging
from dataclasses import dataclass
from typing import Optional


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ============================================================================
# Application Configuration
# ============================================================================

@dataclass
class AppConfig:
    """Settings for one run of the terminal game."""

    # Game settings
    difficulty: Optional[str] = None

    # Display settings
    poll_interval_ms: int = 16
    max_display_seconds: int = 999

    # Logging
    log_file: Optional[str] = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.poll_interval_ms < 1:
            raise ValueError("Poll interval must be at least 1 ms")
        if self.max_display_seconds < 0:
            raise ValueError("Display cap cannot be negative")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "AppConfig":
        """Build a config from parsed command-line arguments."""
        return cls(
            difficulty=args.difficulty,
            poll_interval_ms=args.poll_interval,
            max_display_seconds=args.max_time,
            log_file=args.log_file,
            log_level=args.log_level,
        )


def configure_logging(config: AppConfig) -> None:
    """
    Send package logs to the configured file.

    curses owns the terminal, so without a log file nothing is emitted.
    """
    package_logger = logging.getLogger("termsweeper")
    package_logger.setLevel(config.log_level.upper())
    if config.log_file is None:
        return
    handler = logging.FileHandler(config.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
