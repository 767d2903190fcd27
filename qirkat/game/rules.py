"""Legal move generation, move execution, undo, and game-over detection.

Captures are mandatory: when any jump is available to the side to move,
only jump chains are legal, and a chain must be continued for as long as
further captures are available from its landing square.

Pieces that just stepped sideways may not step straight back while they
stay on that square, and pieces on their far row (row 5 for WHITE, row 1
for BLACK) may not step sideways at all.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from qirkat.game.board import JUMP_TARGETS, NUM_SQUARES, SIDE, STEP_NEIGHBORS
from qirkat.game.errors import EmptyHistory, IllegalMove
from qirkat.game.state import Board, Move, PieceColor, Restriction

logger = logging.getLogger("qirkat.rules")

EMPTY = PieceColor.EMPTY


def _on_far_row(square: int, color: PieceColor) -> bool:
    if color == PieceColor.WHITE:
        return square >= SIDE * (SIDE - 1)
    return square < SIDE


def jump_possible_between(board: Board, from_sq: int, to_sq: int) -> bool:
    """True iff the side to move can capture from from_sq landing on to_sq."""
    cells = board.cells
    if cells[from_sq] != board.turn:
        return False
    for target, mid in JUMP_TARGETS[from_sq]:
        if target == to_sq:
            return cells[mid] == board.turn.opposite() and cells[to_sq] == EMPTY
    return False


def _square_can_jump(board: Board, square: int, color: PieceColor) -> bool:
    cells = board.cells
    if cells[square] != color:
        return False
    opponent = color.opposite()
    for target, mid in JUMP_TARGETS[square]:
        if cells[mid] == opponent and cells[target] == EMPTY:
            return True
    return False


def jump_possible(board: Board, square: Optional[int] = None) -> bool:
    """True iff the side to move has a capture, from SQUARE or anywhere."""
    if square is not None:
        return _square_can_jump(board, square, board.turn)
    return any(_square_can_jump(board, k, board.turn) for k in range(NUM_SQUARES))


def _step_allowed(board: Board, move: Move) -> bool:
    """Step legality, apart from the mandatory-capture rule."""
    color = board.turn
    if board.cells[move.from_sq] != color or board.cells[move.to_sq] != EMPTY:
        return False
    restriction = board.restrictions[move.from_sq]
    if move.is_left_move() and restriction == Restriction.NO_LEFT:
        return False
    if move.is_right_move() and restriction == Restriction.NO_RIGHT:
        return False
    if _on_far_row(move.from_sq, color) and (move.is_left_move() or move.is_right_move()):
        return False
    return move.is_single_move(color)


def _chain_valid(board: Board, squares: tuple[int, ...], color: PieceColor) -> bool:
    """Check the jumps along SQUARES, recursing on the partially applied board.

    The chain must also be maximal: no capture may remain from the final
    landing square.
    """
    cells = board.cells
    from_sq, to_sq = squares[0], squares[1]
    mid = None
    for target, jumped in JUMP_TARGETS[from_sq]:
        if target == to_sq:
            mid = jumped
            break
    if mid is None or cells[mid] != color.opposite() or cells[to_sq] != EMPTY:
        return False

    cells[from_sq], cells[mid], cells[to_sq] = EMPTY, EMPTY, color
    try:
        if len(squares) == 2:
            return not _square_can_jump(board, to_sq, color)
        return _chain_valid(board, squares[1:], color)
    finally:
        cells[from_sq], cells[mid], cells[to_sq] = color, color.opposite(), EMPTY


def is_legal_move(board: Board, move: Move) -> bool:
    """Return True iff MOVE is legal on BOARD for the side to move."""
    if board.cells[move.from_sq] != board.turn:
        return False
    if move.is_jump:
        return _chain_valid(board, move.squares, board.turn)
    if jump_possible(board):
        return False
    return _step_allowed(board, move)


def _jump_chains(board: Board, from_sq: int, color: PieceColor) -> list[tuple[int, ...]]:
    """All maximal capture paths for the COLOR piece standing on from_sq."""
    cells = board.cells
    opponent = color.opposite()
    paths = []
    for to_sq, mid in JUMP_TARGETS[from_sq]:
        if cells[mid] != opponent or cells[to_sq] != EMPTY:
            continue
        cells[from_sq], cells[mid], cells[to_sq] = EMPTY, EMPTY, color
        try:
            continuations = _jump_chains(board, to_sq, color)
        finally:
            cells[from_sq], cells[mid], cells[to_sq] = color, opponent, EMPTY
        if continuations:
            paths.extend((from_sq,) + path for path in continuations)
        else:
            paths.append((from_sq, to_sq))
    return paths


def generate_jumps(board: Board, square: int) -> list[Move]:
    """All legal jump chains starting from SQUARE."""
    if board.cells[square] != board.turn:
        return []
    return [Move(path, is_jump=True) for path in _jump_chains(board, square, board.turn)]


def generate_steps(board: Board, square: int) -> list[Move]:
    """All steps from SQUARE that are legal if no capture is available."""
    if board.cells[square] != board.turn:
        return []
    moves = []
    for target in STEP_NEIGHBORS[square]:
        move = Move.step(square, target)
        if _step_allowed(board, move):
            moves.append(move)
    return moves


def generate_legal_moves(board: Board) -> list[Move]:
    """Generate all legal moves for the side to move.

    Only jump chains when any capture exists, otherwise all legal steps.
    Empty exactly when the side to move has lost.
    """
    if jump_possible(board):
        moves: list[Move] = []
        for k in range(NUM_SQUARES):
            moves.extend(generate_jumps(board, k))
        return moves

    moves = []
    for k in range(NUM_SQUARES):
        moves.extend(generate_steps(board, k))
    return moves


def has_legal_move(board: Board) -> bool:
    if jump_possible(board):
        return True
    return any(generate_steps(board, k) for k in range(NUM_SQUARES))


def apply_move(board: Board, move: Move) -> Board:
    """Apply MOVE for the side to move, recording it for undo.

    Raises:
        IllegalMove: If MOVE is not legal; BOARD is left unchanged.
    """
    if not is_legal_move(board, move):
        raise IllegalMove(f"illegal move {move} for {board.turn}")

    color = board.turn
    cells = board.cells
    restrictions = board.restrictions
    board.history.append((move, tuple(restrictions)))

    if move.is_jump:
        for step in move.jump_steps():
            cells[step.from_sq] = EMPTY
            cells[step.captured_sq] = EMPTY
            restrictions[step.from_sq] = Restriction.NONE
            restrictions[step.captured_sq] = Restriction.NONE
        cells[move.to_sq] = color
    else:
        cells[move.from_sq] = EMPTY
        cells[move.to_sq] = color
        restrictions[move.from_sq] = Restriction.NONE
        if move.is_left_move():
            restrictions[move.to_sq] = Restriction.NO_RIGHT
        elif move.is_right_move():
            restrictions[move.to_sq] = Restriction.NO_LEFT

    board.turn = color.opposite()
    board.game_over = not has_legal_move(board)
    logger.debug(f"{color} played {move}"
                 + (f"; {board.winner} wins" if board.game_over else ""))
    board.notify("apply")
    return board


def undo_move(board: Board) -> Move:
    """Take back the most recent move and return it.

    Raises:
        EmptyHistory: If no move has been applied since the last reset.
    """
    if not board.history:
        raise EmptyHistory("no move to undo")

    move, saved_restrictions = board.history.pop()
    board.turn = board.turn.opposite()
    color = board.turn
    cells = board.cells

    for step in reversed(list(move.jump_steps())):
        cells[step.captured_sq] = color.opposite()
    cells[move.to_sq] = EMPTY
    cells[move.from_sq] = color
    board.restrictions = list(saved_restrictions)

    board.game_over = not has_legal_move(board)
    board.notify("undo")
    return move


def replay(moves: Iterable[Move], board: Optional[Board] = None) -> Board:
    """Apply MOVES in order, to BOARD or to a fresh starting position."""
    if board is None:
        board = Board()
    for move in moves:
        apply_move(board, move)
    return board


def check_winner(board: Board) -> tuple[bool, Optional[PieceColor]]:
    """Check if the game is over.

    Returns (is_done, winner). There are no draws.
    """
    return board.game_over, board.winner

