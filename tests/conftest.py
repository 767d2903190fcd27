"""Shared board fixtures for Qirkat tests."""

import pytest

from qirkat.game.state import Board, PieceColor


@pytest.fixture
def board():
    """A board in the starting position, White to move."""
    return Board()


@pytest.fixture
def make_board():
    """Factory for boards built from a description, bottom row first."""
    def _make(description: str, turn: PieceColor = PieceColor.WHITE) -> Board:
        return Board(description, turn)
    return _make


@pytest.fixture
def snapshot():
    """Capture the parts of a board that undo must restore exactly."""
    def _snap(b: Board):
        return list(b.cells), b.turn, list(b.restrictions), b.game_over
    return _snap
