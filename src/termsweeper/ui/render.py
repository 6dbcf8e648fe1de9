"""Drawing of the game state, as plain text and onto a curses window."""

import curses
from typing import List, Optional, Tuple

from ..config import AppConfig
from ..game.cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE
from ..game.engine import GameEngine
from ..scores.leaderboard import format_time
from ..session import GameSession
from .controls import END_HELP_TEXT, HELP_TEXT

# ── Glyphs ────────────────────────────────────────────────────────────
GLYPH_HIDDEN = "■"
GLYPH_FLAG = "⚑"
GLYPH_MINE = "✱"
GLYPH_EMPTY = " "

# ── Color pair IDs ────────────────────────────────────────────────────
COLOR_BORDER = 1
COLOR_NUM1 = 2
COLOR_NUM2 = 3
COLOR_NUM3 = 4
COLOR_NUM_HIGH = 5
COLOR_HIDDEN = 6
COLOR_FLAG = 7
COLOR_MINE = 8
COLOR_CURSOR = 9
COLOR_TITLE = 10
COLOR_STATUS = 11
COLOR_WIN = 12

NUM_COLORS = {
    1: COLOR_NUM1,
    2: COLOR_NUM2,
    3: COLOR_NUM3,
}

CELL_W = 3  # characters per cell, including padding
TITLE = " Minesweeper "


def init_colors():
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_BORDER, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_NUM1, curses.COLOR_BLUE, -1)
    curses.init_pair(COLOR_NUM2, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_NUM3, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_NUM_HIGH, curses.COLOR_MAGENTA, -1)
    curses.init_pair(COLOR_HIDDEN, curses.COLOR_WHITE, -1)
    curses.init_pair(COLOR_FLAG, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_MINE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_CURSOR, curses.COLOR_WHITE, curses.COLOR_BLACK)
    curses.init_pair(COLOR_TITLE, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_STATUS, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_WIN, curses.COLOR_GREEN, -1)


def safe_addstr(win, y, x, text, attr=0):
    """addstr that ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


# ── Text ──────────────────────────────────────────────────────────────

def cell_glyph(value: int) -> Tuple[str, int, bool]:
    """Return (text, color_pair_id, bold) for an observation value."""
    if value == OBS_HIDDEN:
        return GLYPH_HIDDEN, COLOR_HIDDEN, False
    if value == OBS_FLAGGED:
        return GLYPH_FLAG, COLOR_FLAG, True
    if value == OBS_MINE:
        return GLYPH_MINE, COLOR_MINE, True
    if value == 0:
        return GLYPH_EMPTY, COLOR_HIDDEN, False
    return str(value), NUM_COLORS.get(value, COLOR_NUM_HIGH), True


def displayed_seconds(engine: GameEngine, cap: int) -> int:
    """Whole elapsed seconds, capped for the timer display."""
    return min(int(engine.elapsed_time()), cap)


def status_line(session: GameSession, cap: int = 999) -> str:
    engine = session.engine
    return (
        f"Time: {displayed_seconds(engine, cap)}s | "
        f"Flags left: {engine.flags_remaining} | "
        f"Difficulty: {session.difficulty.label}"
    )


def end_message(session: GameSession) -> Optional[str]:
    """Banner shown once the game is over, or None while playing."""
    engine = session.engine
    if engine.victory:
        message = "You win!"
        if session.new_record:
            message += " New best time!"
    elif engine.game_over:
        message = "You lost!"
    else:
        return None
    best = session.best_time
    if best is not None:
        message += f" Best: {format_time(best)}"
    return message


def render_text(engine: GameEngine) -> List[str]:
    """Render the board as one string per row."""
    obs = engine.get_observation()
    lines = []
    for y in range(engine.height):
        lines.append(" ".join(cell_glyph(int(v))[0] for v in obs[y]))
    return lines


# ── Drawing ───────────────────────────────────────────────────────────

def draw_board(win, engine: GameEngine, by: int, bx: int):
    """Draw the grid with the cursor highlighted."""
    obs = engine.get_observation()
    cursor = engine.cursor
    for y in range(engine.height):
        for x in range(engine.width):
            text, color_id, bold = cell_glyph(int(obs[y, x]))
            attr = curses.color_pair(color_id)
            if bold:
                attr |= curses.A_BOLD
            if (x, y) == cursor and not engine.is_terminal:
                attr = curses.color_pair(COLOR_CURSOR) | curses.A_REVERSE
            safe_addstr(win, by + y, bx + x * CELL_W, f"{text} ", attr)


def draw(win, session: GameSession, config: AppConfig):
    """Redraw the whole screen for the current session state."""
    engine = session.engine
    win.erase()
    max_y, max_x = win.getmaxyx()

    safe_addstr(win, 0, max(0, (max_x - len(TITLE)) // 2), TITLE,
                curses.color_pair(COLOR_TITLE) | curses.A_BOLD)
    safe_addstr(win, 1, 1, status_line(session, config.max_display_seconds),
                curses.color_pair(COLOR_STATUS))

    board_w = engine.width * CELL_W
    bx = max(1, (max_x - board_w) // 2)
    by = 3
    draw_board(win, engine, by, bx)

    message_y = by + engine.height + 1
    message = end_message(session)
    if message is None:
        safe_addstr(win, message_y, bx, HELP_TEXT, curses.color_pair(COLOR_STATUS))
    else:
        color = COLOR_WIN if engine.victory else COLOR_MINE
        safe_addstr(win, message_y, max(0, (max_x - len(message)) // 2), message,
                    curses.color_pair(color) | curses.A_BOLD)
        safe_addstr(win, message_y + 1, max(0, (max_x - len(END_HELP_TEXT)) // 2),
                    END_HELP_TEXT, curses.color_pair(COLOR_STATUS))

    win.refresh()
