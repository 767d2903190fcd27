"""Tests for the interactive session commands in scripts/play.py."""

import pytest

from qirkat.engine.players import AlphaBetaAgent
from qirkat.game.state import Board, Move, PieceColor
from scripts.play import manual_turn

WHITE = PieceColor.WHITE
BLACK = PieceColor.BLACK


@pytest.fixture
def typed(monkeypatch):
    """Feed the given lines to input(), recording the prompts shown."""
    prompts = []

    def _feed(lines):
        queue = list(lines)

        def fake_input(prompt):
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)
        monkeypatch.setattr("builtins.input", fake_input)
        return prompts
    return _feed


class TestManualTurn:
    def test_move_is_applied(self, typed):
        board = Board()
        prompts = typed(["moves", "c3-c4", "c2-c3"])
        assert manual_turn(board, {WHITE: None, BLACK: None})
        assert board.move_history == [Move.step(7, 12)]
        assert prompts == ["White: "] * 3

    def test_undo_of_first_move_returns_turn_to_agent(self, typed):
        board = Board()
        board.apply(Move.step(7, 12))
        prompts = typed(["undo", "c4-c3"])
        agents = {WHITE: AlphaBetaAgent(WHITE, depth=1), BLACK: None}
        assert manual_turn(board, agents)
        assert board.turn == WHITE
        assert board.history == []
        assert prompts == ["Black: "]

    def test_undo_takes_back_agent_reply(self, typed):
        board = Board()
        board.apply(Move.step(7, 12))
        board.apply(Move.jump(17, 7))
        prompts = typed(["undo", "quit"])
        agents = {WHITE: None, BLACK: AlphaBetaAgent(BLACK, depth=1)}
        assert not manual_turn(board, agents)
        assert board == Board()
        assert board.history == []
        assert prompts == ["White: ", "White: "]

    def test_undo_with_nothing_to_undo(self, typed):
        board = Board()
        typed(["undo"])
        assert not manual_turn(board, {WHITE: None, BLACK: None})
        assert board == Board()
