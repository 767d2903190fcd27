"""Qirkat game engine: state, rules, board geometry, notation."""

from qirkat.game.state import Board, Move, PieceColor, Restriction, Direction, JumpStep
from qirkat.game.rules import (
    generate_legal_moves, is_legal_move, jump_possible, apply_move, undo_move, check_winner,
)
from qirkat.game.board import INITIAL_LAYOUT, SIDE, index_to_notation, notation_to_index, render_board
from qirkat.game.notation import move_to_text, parse_move, game_to_record, record_to_game
from qirkat.game.errors import (
    QirkatError, ParseError, InvalidLayout, InvalidMove, IllegalMove, EmptyHistory,
)

__all__ = [
    "Board", "Move", "PieceColor", "Restriction", "Direction", "JumpStep",
    "generate_legal_moves", "is_legal_move", "jump_possible", "apply_move", "undo_move",
    "check_winner",
    "INITIAL_LAYOUT", "SIDE", "index_to_notation", "notation_to_index", "render_board",
    "move_to_text", "parse_move", "game_to_record", "record_to_game",
    "QirkatError", "ParseError", "InvalidLayout", "InvalidMove", "IllegalMove", "EmptyHistory",
]
