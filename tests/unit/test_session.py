"""
Unit tests for GameSession command dispatch.
"""
import random

import pytest

from termsweeper.game import BEGINNER, Board, BoardConfig, Difficulty, GameEngine
from termsweeper.scores import Leaderboard
from termsweeper.session import Command, GameSession

TINY = Difficulty("beginner", "Beginner", BoardConfig(3, 3, 1))


@pytest.fixture
def session(clock) -> GameSession:
    """Session on a 3x3 board with its mine fixed at (2, 2)."""
    s = GameSession(TINY, Leaderboard(), clock, random.Random(0))
    board = Board.from_mine_positions(TINY.config, [(2, 2)])
    s.engine = GameEngine(board, clock)
    return s


def lose(session: GameSession) -> None:
    for command in (Command.MOVE_RIGHT, Command.MOVE_RIGHT,
                    Command.MOVE_DOWN, Command.MOVE_DOWN, Command.REVEAL):
        session.dispatch(command)


class TestDispatch:
    """Test mapping of commands onto the engine."""

    def test_quit_stops_loop(self, session: GameSession) -> None:
        assert session.dispatch(Command.QUIT) is False

    def test_other_commands_continue(self, session: GameSession) -> None:
        for command in Command:
            if command is not Command.QUIT:
                assert session.dispatch(command) is True

    def test_moves_cursor(self, session: GameSession) -> None:
        session.dispatch(Command.MOVE_DOWN)
        session.dispatch(Command.MOVE_RIGHT)
        assert session.engine.cursor == (1, 1)
        session.dispatch(Command.MOVE_UP)
        session.dispatch(Command.MOVE_LEFT)
        assert session.engine.cursor == (0, 0)

    def test_flag_under_cursor(self, session: GameSession) -> None:
        session.dispatch(Command.FLAG)
        assert session.engine.get_cell(0, 0).is_flagged

    def test_reveal_under_cursor(self, session: GameSession) -> None:
        session.dispatch(Command.REVEAL)
        assert session.engine.victory is True

    def test_mine_ends_game(self, session: GameSession) -> None:
        lose(session)
        assert session.engine.game_over is True


class TestRestart:
    """Test replacing the engine."""

    def test_restart_ignored_mid_game(self, session: GameSession) -> None:
        engine = session.engine
        session.dispatch(Command.MOVE_RIGHT)
        session.dispatch(Command.RESTART)
        assert session.engine is engine

    def test_restart_after_loss(self, session: GameSession) -> None:
        lose(session)
        old = session.engine
        assert session.dispatch(Command.RESTART) is True
        assert session.engine is not old
        assert session.engine.game_over is False
        assert session.engine.cursor == (0, 0)
        assert session.engine.board.config == TINY.config

    def test_default_session_uses_preset(self) -> None:
        s = GameSession(BEGINNER)
        assert s.engine.width == 8
        assert s.engine.mines == 10


class TestLeaderboardRecording:
    """Test that wins reach the leaderboard exactly once."""

    def test_win_recorded(self, session: GameSession, clock) -> None:
        session.dispatch(Command.MOVE_DOWN)
        clock.advance(20)
        session.dispatch(Command.REVEAL)
        assert session.engine.victory is True
        assert session.leaderboard.best_time("beginner") == 0
        assert session.new_record is True

    def test_win_recorded_once(self, session: GameSession, clock) -> None:
        updates = []
        original = session.leaderboard.update

        def spy(tier, seconds):
            updates.append((tier, seconds))
            return original(tier, seconds)

        session.leaderboard.update = spy
        session.dispatch(Command.FLAG)
        clock.advance(15)
        session.dispatch(Command.FLAG)
        session.dispatch(Command.REVEAL)
        for _ in range(3):
            session.dispatch(Command.MOVE_RIGHT)
            session.dispatch(Command.REVEAL)
        assert updates == [("beginner", 15)]

    def test_loss_not_recorded(self, session: GameSession) -> None:
        lose(session)
        assert session.best_time is None

    def test_leaderboard_survives_restart(self, session: GameSession, clock) -> None:
        session.dispatch(Command.FLAG)
        clock.advance(8)
        session.dispatch(Command.FLAG)
        session.dispatch(Command.REVEAL)
        session.dispatch(Command.RESTART)
        assert session.best_time == 8
        assert session.new_record is False
