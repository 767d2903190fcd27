"""Players and a driver for complete games."""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from qirkat.engine.search import MAX_DEPTH, AlphaBetaSearch
from qirkat.game.errors import ParseError, InvalidMove
from qirkat.game.notation import parse_move
from qirkat.game.state import Board, Move, PieceColor

logger = logging.getLogger("qirkat.players")

# Supplies one line of text for a prompt, or None when input is exhausted
MoveSource = Callable[[str], Optional[str]]
Reporter = Callable[[str], None]


class Agent:
    """Base agent interface."""

    def get_move(self, board: Board) -> Optional[Move]:
        raise NotImplementedError


class RandomAgent(Agent):
    """Plays random legal moves."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def get_move(self, board: Board) -> Optional[Move]:
        moves = board.legal_moves()
        if not moves:
            return None
        return self.rng.choice(moves)


class AlphaBetaAgent(Agent):
    """Plays COLOR using fixed-depth alpha-beta search."""

    def __init__(self, color: PieceColor, depth: int = MAX_DEPTH,
                 seed: Optional[int] = None):
        self.color = color
        self.search = AlphaBetaSearch(depth=depth, seed=seed)

    def get_move(self, board: Board) -> Optional[Move]:
        return self.search.search(board, self.color)


class ManualAgent(Agent):
    """Takes moves as text from MOVE_SOURCE.

    Unparseable or illegal input is reported and the source is asked again.
    A None line means the player has quit, and get_move returns None.
    """

    def __init__(self, move_source: MoveSource, prompt: str = "> ",
                 report: Optional[Reporter] = None):
        self.move_source = move_source
        self.prompt = prompt
        self.report = report or logger.info

    def get_move(self, board: Board) -> Optional[Move]:
        while True:
            line = self.move_source(self.prompt)
            if line is None:
                return None
            line = line.strip()
            if not line:
                continue
            try:
                move = parse_move(line)
            except (ParseError, InvalidMove) as e:
                self.report(f"Invalid move: {e}")
                continue
            if not board.legal(move):
                self.report(f"That move is not legal: {move}")
                continue
            return move


def play_game(white: Agent, black: Agent, board: Optional[Board] = None,
              max_moves: int = 400,
              report: Optional[Reporter] = None) -> tuple[list[Move], Optional[PieceColor]]:
    """Play a game between two agents until one side cannot move.

    Moves and the outcome are announced through REPORT (logging by default).
    The game also stops if an agent returns no move or after MAX_MOVES.

    Returns:
        (moves, winner) where winner is None for an unfinished game.
    """
    if board is None:
        board = Board()
    report = report or logger.info
    moves_played: list[Move] = []

    while not board.game_over and len(moves_played) < max_moves:
        mover = board.turn
        agent = white if mover == PieceColor.WHITE else black
        move = agent.get_move(board)
        if move is None:
            logger.info(f"{mover} stopped playing after {len(moves_played)} moves")
            break
        board.apply(move)
        moves_played.append(move)
        report(f"{mover} moves {move}.")

    if board.game_over:
        report(f"{board.winner} wins.")
    return moves_played, board.winner
