"""
Fixed difficulty presets.

Three tiers are offered; they are picked once at game start and never
edited at runtime.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from .board import BoardConfig


@dataclass(frozen=True)
class Difficulty:
    """A named difficulty tier and the board it produces."""

    name: str
    label: str
    config: BoardConfig

    def __str__(self) -> str:
        cfg = self.config
        return f"{self.label} ({cfg.width}x{cfg.height}, {cfg.num_mines} mines)"


BEGINNER = Difficulty("beginner", "Beginner", BoardConfig(8, 8, 10))
INTERMEDIATE = Difficulty("intermediate", "Intermediate", BoardConfig(16, 16, 40))
EXPERT = Difficulty("expert", "Expert", BoardConfig(24, 20, 99))

PRESETS: Tuple[Difficulty, ...] = (BEGINNER, INTERMEDIATE, EXPERT)

DIFFICULTIES: Dict[str, Difficulty] = {d.name: d for d in PRESETS}


def get_difficulty(name: str) -> Difficulty:
    """
    Look up a preset by name, case-insensitively.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        raise KeyError(
            f"Unknown difficulty {name!r}; choose from {', '.join(DIFFICULTIES)}"
        ) from None


def from_menu_choice(choice: int) -> Difficulty:
    """Map a 1-based menu number to a preset, clamping out-of-range values."""
    index = min(max(choice, 1), len(PRESETS)) - 1
    return PRESETS[index]
