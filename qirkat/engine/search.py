"""Fixed-depth minimax search with alpha-beta pruning.

WHITE maximizes and BLACK minimizes the signed value from
qirkat.engine.evaluation. Each branch is explored on its own copy of the
board, so the position handed to search() is never modified.
"""

from __future__ import annotations

import logging
import random
import time
from typing import Optional

from qirkat.engine.evaluation import INFINITY, static_score
from qirkat.game.state import Board, Move, PieceColor

logger = logging.getLogger("qirkat.search")

# Default search depth in plies
MAX_DEPTH = 5


class AlphaBetaSearch:
    """Depth-limited alpha-beta search.

    Ties that leave the root bound unimproved are broken at random among
    the available captures (or steps, when there are none), using a
    generator seeded by the caller so that play is reproducible.
    """

    def __init__(self, depth: int = MAX_DEPTH, seed: Optional[int] = None):
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        self.depth = depth
        self.rng = random.Random(seed)
        self.nodes = 0

    def reseed(self, seed: Optional[int]):
        self.rng.seed(seed)

    def search(self, board: Board, color: PieceColor) -> Optional[Move]:
        """Return the move COLOR should play on BOARD, or None if the game is over."""
        if board.game_over:
            logger.debug("No move: game is already over")
            return None
        if color != board.turn:
            raise ValueError(f"{color} is not to move")

        self.nodes = 0
        sense = 1 if color == PieceColor.WHITE else -1
        start = time.time()
        value, best = self._find_move(board.clone(), self.depth, True, sense,
                                      -INFINITY, INFINITY)
        elapsed = time.time() - start
        logger.debug(f"{color} depth {self.depth}: {best} value {value} "
                     f"nodes {self.nodes} time {elapsed:.2f}s")
        return best

    def _find_move(self, board: Board, depth: int, save_move: bool, sense: int,
                   alpha: int, beta: int) -> tuple[int, Optional[Move]]:
        """Search BOARD to DEPTH plies and return (value, move).

        The move is only selected when SAVE_MOVE. With SENSE == 1 the mover
        maximizes (raising alpha); with SENSE == -1 it minimizes (lowering
        beta). Returns the final bound for the mover's side.
        """
        self.nodes += 1
        if depth == 0:
            return static_score(board), None

        moves = board.legal_moves()
        if not moves:
            return static_score(board), None

        best = None
        for move in moves:
            if beta <= alpha:
                break
            child = board.clone()
            child.apply(move)
            value, _ = self._find_move(child, depth - 1, False, -sense, alpha, beta)
            if sense == 1 and value > alpha:
                alpha = value
                best = move
            elif sense == -1 and value < beta:
                beta = value
                best = move

        if best is None and save_move:
            jumps = [move for move in moves if move.is_jump]
            best = self.rng.choice(jumps or moves)

        return (alpha if sense == 1 else beta), best


def choose_move(board: Board, color: PieceColor, seed: Optional[int] = None,
                depth: int = MAX_DEPTH) -> Optional[Move]:
    """Pick a move for COLOR on BOARD. None when the game is over."""
    return AlphaBetaSearch(depth=depth, seed=seed).search(board, color)
