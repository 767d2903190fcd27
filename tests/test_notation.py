"""Tests for move notation and game records."""

import pytest

from qirkat.game.errors import InvalidMove, ParseError
from qirkat.game.notation import (
    game_to_record, move_to_text, parse_move, record_to_game, result_string,
)
from qirkat.game.state import Move, PieceColor


class TestParseMove:
    def test_step(self):
        assert parse_move("c2-c3") == Move.step(7, 12)

    def test_single_jump(self):
        m = parse_move("c1-c3")
        assert m == Move.jump(2, 12)
        assert m.captured_sq == 7

    def test_chain(self):
        m = parse_move("a1-c3-e5")
        assert m == Move((0, 12, 24), is_jump=True)
        assert m.num_captures == 2

    def test_surrounding_whitespace(self):
        assert parse_move("  d3-c3\n") == Move.step(13, 12)

    @pytest.mark.parametrize("text", [
        "", "c2", "c2c3", "c2-", "c2-c3-", "f1-f2", "a0-a1", "a1-a6", "C2-C3", "c2 - c3",
    ])
    def test_malformed(self, text):
        with pytest.raises(ParseError):
            parse_move(text)

    @pytest.mark.parametrize("text", ["a1-a4", "b1-c2", "c3-c3", "a1-c3-c4"])
    def test_impossible_geometry(self, text):
        with pytest.raises(InvalidMove):
            parse_move(text)

    def test_text_roundtrip(self):
        for m in (Move.step(6, 12), Move.jump(12, 2), Move((0, 12, 20), is_jump=True)):
            assert parse_move(move_to_text(m)) == m


class TestGameRecord:
    def test_result_strings(self):
        assert result_string(PieceColor.WHITE) == "1-0"
        assert result_string(PieceColor.BLACK) == "0-1"
        assert result_string(None) == "*"

    def test_record_layout(self):
        moves = [Move.step(7, 12), Move.jump(17, 7), Move.step(13, 12)]
        text = game_to_record(moves, headers={"White": "Manual", "Black": "AI"},
                              result="*")
        lines = text.split("\n")
        assert lines[0] == '[White "Manual"]'
        assert lines[1] == '[Black "AI"]'
        assert lines[2] == '[Result "*"]'
        assert lines[3] == ""
        assert lines[4] == "1. c2-c3 c4-c2"
        assert lines[5] == "2. d3-c3"
        assert lines[-1] == "*"

    def test_record_roundtrip(self):
        moves = [Move.step(7, 12), Move.jump(17, 7), Move.step(13, 12)]
        headers, parsed, result = record_to_game(
            game_to_record(moves, headers={"White": "AI"}, result="0-1"))
        assert headers["White"] == "AI"
        assert parsed == moves
        assert result == "0-1"

    def test_record_without_headers(self):
        headers, moves, result = record_to_game("1. c2-c3 c4-c2\n2. d3-c3")
        assert headers == {}
        assert len(moves) == 3
        assert result is None

    def test_bad_token(self):
        with pytest.raises(ParseError):
            record_to_game("1. c2-c3 zz")
