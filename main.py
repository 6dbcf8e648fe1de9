#!/usr/bin/env python3
"""
Terminal Minesweeper - main entry point.

Usage:
    python main.py [--difficulty {beginner,intermediate,expert}]
"""
import sys
from pathlib import Path

# Add src to path so the game runs from a checkout
sys.path.insert(0, str(Path(__file__).parent / "src"))

from termsweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
