"""Qirkat move notation and game records.

Move formats:
  c2-c3        Step from c2 to c3
  c3-c5        Single capture (c4 is jumped)
  a1-c3-e5     Jump chain, one capture per hyphenated leg

Game format (similar to PGN):
  [White "AI"]
  [Black "Manual"]
  [Result "1-0"]

  1. c2-c3 d4-d3
  2. c3-c5 ...
"""

from __future__ import annotations

import re
from typing import Optional

from qirkat.game.board import notation_to_index
from qirkat.game.errors import ParseError
from qirkat.game.state import Move, PieceColor

_SQUARE = r"[a-e][1-5]"
_MOVE_RE = re.compile(rf"^{_SQUARE}(?:-{_SQUARE})+$")
_HEADER_RE = re.compile(r'(\w+)\s+"([^"]*)"')
_MOVE_NUMBER_RE = re.compile(r"^\d+\.\s*")

RESULTS = ("1-0", "0-1", "*")


def move_to_text(move: Move) -> str:
    """Convert a move to notation like 'c2-c3' or 'a1-c3-e5'."""
    return str(move)


def parse_move(text: str) -> Move:
    """Parse move notation into a Move.

    A single pair of squares gives a step or a single jump depending on
    their distance; three or more squares give a jump chain.

    Raises:
        ParseError: If the text is not well-formed notation.
        InvalidMove: If the squares do not form a step or jump chain.
    """
    text = text.strip()
    if not _MOVE_RE.match(text):
        raise ParseError(f"Invalid move notation: {text!r}")
    squares = tuple(notation_to_index(sq) for sq in text.split("-"))
    if len(squares) == 2:
        return Move.between(*squares)
    return Move(squares, is_jump=True)


def result_string(winner: Optional[PieceColor]) -> str:
    if winner == PieceColor.WHITE:
        return "1-0"
    if winner == PieceColor.BLACK:
        return "0-1"
    return "*"


def game_to_record(moves: list[Move],
                   headers: Optional[dict[str, str]] = None,
                   result: Optional[str] = None) -> str:
    """Convert a sequence of moves, WHITE first, to a game record.

    Args:
        moves: Moves in the order played.
        headers: Optional dict of header key-value pairs.
        result: Game result string ("1-0", "0-1", "*").
    """
    lines = []

    if headers:
        for key, value in headers.items():
            lines.append(f'[{key} "{value}"]')
    if result:
        lines.append(f'[Result "{result}"]')
    if headers or result:
        lines.append("")

    move_strs = [move_to_text(move) for move in moves]
    for move_num, i in enumerate(range(0, len(move_strs), 2), start=1):
        lines.append(f"{move_num}. " + " ".join(move_strs[i:i + 2]))

    if result:
        lines.append(result)

    return "\n".join(lines)


def record_to_game(text: str) -> tuple[dict[str, str], list[Move], Optional[str]]:
    """Parse a game record.

    Returns:
        (headers, moves, result)

    Raises:
        ParseError: If a move token is not valid notation.
    """
    headers: dict[str, str] = {}
    moves: list[Move] = []
    result: Optional[str] = None

    for line in text.strip().split("\n"):
        line = line.strip()
        if not line:
            continue

        if line.startswith("[") and line.endswith("]"):
            m = _HEADER_RE.match(line[1:-1])
            if m:
                headers[m.group(1)] = m.group(2)
            continue

        line = _MOVE_NUMBER_RE.sub("", line)
        for token in line.split():
            if token in RESULTS:
                result = token
            else:
                moves.append(parse_move(token))

    if result is None:
        result = headers.get("Result")
    return headers, moves, result
