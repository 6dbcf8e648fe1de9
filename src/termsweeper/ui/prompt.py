"""Difficulty selection shown before the game screen opens."""
from typing import Callable

from ..game.difficulty import BEGINNER, PRESETS, Difficulty, from_menu_choice


def menu_lines():
    lines = ["Select difficulty:"]
    for number, difficulty in enumerate(PRESETS, 1):
        lines.append(f"{number}. {difficulty}")
    return lines


def parse_choice(text: str) -> Difficulty:
    """
    Turn a menu answer into a preset.

    Anything that is not a number falls back to Beginner; numbers past the
    end of the menu pick the hardest preset.
    """
    try:
        choice = int(text.strip())
    except ValueError:
        return BEGINNER
    return from_menu_choice(choice)


def prompt_difficulty(
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> Difficulty:
    """Print the menu and read one answer."""
    for line in menu_lines():
        output(line)
    return parse_choice(input_fn("> "))
