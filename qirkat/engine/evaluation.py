"""Static position evaluation for the alpha-beta search.

Scores are signed: positive favours WHITE, negative favours BLACK.
"""

from __future__ import annotations

from dataclasses import dataclass

from qirkat.game.state import Board, PieceColor

# Larger than any position value
INFINITY = 2 ** 31 - 1


@dataclass
class PositionEval:
    """Breakdown of a static score."""
    score: int
    material: int
    captures: int
    # Jumps after the first in the longest available chain
    longest_chain: int


def evaluate_position(board: Board) -> PositionEval:
    """Evaluate BOARD.

    Material is always WHITE minus BLACK. The capture count and the length
    of the longest available chain belong to the side to move, so they are
    added when WHITE is to move and subtracted when BLACK is. A chain's
    length counts the jumps that follow its first, so a single capture
    adds nothing beyond the capture count.
    """
    moves = board.legal_moves()
    material = board.count(PieceColor.WHITE) - board.count(PieceColor.BLACK)
    captures = sum(1 for move in moves if move.is_jump)
    longest = max((move.num_captures - 1 for move in moves if move.is_jump), default=0)

    sense = 1 if board.turn == PieceColor.WHITE else -1
    score = material + sense * (captures + longest)
    return PositionEval(score, material, captures, longest)


def static_score(board: Board) -> int:
    """Heuristic value of BOARD."""
    return evaluate_position(board).score
