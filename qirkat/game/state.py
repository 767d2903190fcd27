"""Game state representation for Qirkat."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Iterator, Optional

from qirkat.game.board import (
    INITIAL_LAYOUT, NUM_SQUARES, SIDE, index_to_notation, index_to_rc,
    is_adjacent, jump_midpoint, notation_to_index, render_board, valid_square,
)
from qirkat.game.errors import InvalidLayout, InvalidMove


class PieceColor(Enum):
    EMPTY = 0
    WHITE = 1
    BLACK = 2

    def opposite(self) -> PieceColor:
        """The other player's color. EMPTY has no opposite."""
        if self == PieceColor.EMPTY:
            raise ValueError("EMPTY has no opposite color")
        return PieceColor.BLACK if self == PieceColor.WHITE else PieceColor.WHITE

    @property
    def short_name(self) -> str:
        return _SHORT_NAMES[self]

    @classmethod
    def from_char(cls, ch: str) -> PieceColor:
        return _CHAR_COLORS[ch.lower()]

    def __str__(self) -> str:
        return self.name.capitalize()


_SHORT_NAMES = {PieceColor.EMPTY: "-", PieceColor.WHITE: "w", PieceColor.BLACK: "b"}
_CHAR_COLORS = {v: k for k, v in _SHORT_NAMES.items()}


class Restriction(IntEnum):
    """Horizontal step forbidden for the piece standing on a square."""
    NONE = 0
    NO_LEFT = 1
    NO_RIGHT = 2


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class JumpStep:
    """One capture within a jump chain."""
    from_sq: int
    to_sq: int
    captured_sq: int


@dataclass(frozen=True, order=True)
class Move:
    """A single step, or a chain of one or more jumps taken as one turn.

    squares holds every point the piece visits, origin first. A step has
    exactly two squares; a jump chain has one more square than captures.
    """
    squares: tuple[int, ...]
    is_jump: bool = False

    def __post_init__(self):
        if len(self.squares) < 2:
            raise InvalidMove(f"a move needs at least two squares: {self.squares}")
        for k in self.squares:
            if not valid_square(k):
                raise InvalidMove(f"square out of range: {k}")
        if not self.is_jump:
            if len(self.squares) != 2:
                raise InvalidMove("a non-jump move has exactly one step")
            if not is_adjacent(*self.squares):
                raise InvalidMove(f"not a single step: {self._text()}")
            return
        for k0, k1 in zip(self.squares, self.squares[1:]):
            if jump_midpoint(k0, k1) is None:
                raise InvalidMove(f"not a jump: {self._text()}")

    @classmethod
    def step(cls, from_sq: int, to_sq: int) -> Move:
        """A non-capturing one-square move."""
        return cls((from_sq, to_sq))

    @classmethod
    def jump(cls, from_sq: int, to_sq: int) -> Move:
        """A single capture from from_sq over the midpoint to to_sq."""
        return cls((from_sq, to_sq), is_jump=True)

    @classmethod
    def chain(cls, first: Move, rest: Optional[Move]) -> Move:
        """Prepend the single jump FIRST to the chain REST (which may be None)."""
        if not first.is_jump or first.num_captures != 1:
            raise InvalidMove("only a single jump can start a chain")
        if rest is None:
            return first
        if not rest.is_jump or rest.from_sq != first.to_sq:
            raise InvalidMove(f"{rest} does not continue {first}")
        return cls(first.squares + rest.squares[1:], is_jump=True)

    @classmethod
    def between(cls, from_sq: int, to_sq: int) -> Move:
        """A step or single jump between two squares, chosen by distance."""
        if jump_midpoint(from_sq, to_sq) is not None:
            return cls.jump(from_sq, to_sq)
        return cls.step(from_sq, to_sq)

    @property
    def from_sq(self) -> int:
        return self.squares[0]

    @property
    def to_sq(self) -> int:
        """Final landing square."""
        return self.squares[-1]

    @property
    def captured_sq(self) -> Optional[int]:
        """Square captured by the first jump, None for a step."""
        if not self.is_jump:
            return None
        return jump_midpoint(self.squares[0], self.squares[1])

    @property
    def tail(self) -> Optional[Move]:
        """The remaining jumps after the first, or None."""
        if not self.is_jump or len(self.squares) <= 2:
            return None
        return Move(self.squares[1:], is_jump=True)

    @property
    def num_captures(self) -> int:
        return len(self.squares) - 1 if self.is_jump else 0

    def jump_steps(self) -> Iterator[JumpStep]:
        if not self.is_jump:
            return
        for k0, k1 in zip(self.squares, self.squares[1:]):
            yield JumpStep(k0, k1, jump_midpoint(k0, k1))

    @property
    def direction(self) -> Optional[Direction]:
        """Direction of a step. None for jumps."""
        if self.is_jump:
            return None
        r0, c0 = index_to_rc(self.from_sq)
        r1, c1 = index_to_rc(self.to_sq)
        if r0 != r1 and c0 != c1:
            return Direction.DIAGONAL
        if r1 > r0:
            return Direction.UP
        if r1 < r0:
            return Direction.DOWN
        return Direction.RIGHT if c1 > c0 else Direction.LEFT

    def is_left_move(self) -> bool:
        return self.direction == Direction.LEFT

    def is_right_move(self) -> bool:
        return self.direction == Direction.RIGHT

    def is_single_move(self, color: PieceColor) -> bool:
        """True iff this is a step COLOR may make: forward, diagonally forward,
        or sideways. WHITE advances towards row 5, BLACK towards row 1."""
        if self.is_jump:
            return False
        dr = index_to_rc(self.to_sq)[0] - index_to_rc(self.from_sq)[0]
        forward = 1 if color == PieceColor.WHITE else -1
        return dr == 0 or dr == forward

    def _text(self) -> str:
        return "-".join(index_to_notation(k) if valid_square(k) else str(k)
                        for k in self.squares)

    def __str__(self) -> str:
        return self._text()


# History entries: the move applied and the restrictions in force before it
HistoryEntry = tuple[Move, tuple[Restriction, ...]]
Listener = Callable[["Board", str], None]

_WHITESPACE_RE = re.compile(r"[\s/]")
_DESCRIPTION_RE = re.compile(r"[bw-]{%d}" % NUM_SQUARES)


def parse_description(text: str) -> list[PieceColor]:
    """Parse a 25-cell board description into cell colors.

    Each cell is 'b', 'w' or '-' (case-insensitive), bottom row first.
    Whitespace and '/' row separators are ignored. At least one cell must
    be empty.

    Raises:
        InvalidLayout: If the description is malformed.
    """
    compact = _WHITESPACE_RE.sub("", text).lower()
    if not _DESCRIPTION_RE.fullmatch(compact):
        raise InvalidLayout(f"bad board description: {text!r}")
    if "-" not in compact:
        raise InvalidLayout("board description has no empty square")
    return [PieceColor.from_char(ch) for ch in compact]


class Board:
    """Complete game state for Qirkat.

    Mutate only through apply(), undo() and reset(); the rules in
    qirkat.game.rules keep game_over consistent with the position.
    """

    def __init__(self, description: str = INITIAL_LAYOUT,
                 turn: PieceColor = PieceColor.WHITE):
        self.cells: list[PieceColor] = [PieceColor.EMPTY] * NUM_SQUARES
        self.turn: PieceColor = turn
        self.game_over: bool = False
        self.restrictions: list[Restriction] = [Restriction.NONE] * NUM_SQUARES
        self.history: list[HistoryEntry] = []
        self._listeners: list[Listener] = []
        self.reset(description, turn)

    def clone(self) -> Board:
        """Return an independent copy. Listeners are not copied."""
        new = Board.__new__(Board)
        new.cells = self.cells.copy()
        new.turn = self.turn
        new.game_over = self.game_over
        new.restrictions = self.restrictions.copy()
        new.history = self.history.copy()
        new._listeners = []
        return new

    def reset(self, description: str, turn: PieceColor) -> None:
        """Install the layout DESCRIPTION with TURN to move; clear history."""
        from qirkat.game.rules import has_legal_move

        if turn not in (PieceColor.WHITE, PieceColor.BLACK):
            raise InvalidLayout(f"bad player color: {turn!r}")
        self.cells = parse_description(description)
        self.turn = turn
        self.restrictions = [Restriction.NONE] * NUM_SQUARES
        self.history = []
        self.game_over = not has_legal_move(self)
        self.notify("reset")

    def clear(self) -> None:
        """Reset to the starting position with WHITE to move."""
        self.reset(INITIAL_LAYOUT, PieceColor.WHITE)

    def get(self, k: int) -> PieceColor:
        """Contents of the square with linearized index k."""
        return self.cells[k]

    def get_at(self, sq: str) -> PieceColor:
        """Contents of the square named like 'c3'."""
        return self.cells[notation_to_index(sq)]

    def count(self, color: PieceColor) -> int:
        return sum(1 for cell in self.cells if cell == color)

    @property
    def whose_move(self) -> PieceColor:
        return self.turn

    @property
    def move_history(self) -> list[Move]:
        return [move for move, _ in self.history]

    @property
    def winner(self) -> Optional[PieceColor]:
        """The side that is not to move once the game is over, else None."""
        return self.turn.opposite() if self.game_over else None

    # Rules delegation

    def legal(self, move: Move) -> bool:
        from qirkat.game.rules import is_legal_move
        return is_legal_move(self, move)

    def legal_moves(self) -> list[Move]:
        from qirkat.game.rules import generate_legal_moves
        return generate_legal_moves(self)

    def jump_possible(self, square: Optional[int] = None) -> bool:
        from qirkat.game.rules import jump_possible
        return jump_possible(self, square)

    def apply(self, move: Move) -> None:
        from qirkat.game.rules import apply_move
        apply_move(self, move)

    def undo(self) -> Move:
        from qirkat.game.rules import undo_move
        return undo_move(self)

    # Change notification

    def add_listener(self, listener: Listener) -> None:
        """Call LISTENER(board, event) after every apply, undo and reset."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def notify(self, event: str) -> None:
        for listener in list(self._listeners):
            listener(self, event)

    # Text forms

    def to_description(self) -> str:
        """The layout as a description string accepted by reset()."""
        rows = []
        for row in range(SIDE):
            rows.append(" ".join(cell.short_name
                                 for cell in self.cells[row * SIDE:(row + 1) * SIDE]))
        return "  ".join(rows)

    def str_with_legend(self) -> str:
        return render_board([cell.short_name for cell in self.cells], legend=True)

    def __str__(self) -> str:
        return render_board([cell.short_name for cell in self.cells])

    def __repr__(self) -> str:
        return f"Board({self.to_description()!r}, {self.turn.name})"

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.cells == other.cells and self.turn == other.turn
                and self.game_over == other.game_over)

    __hash__ = None
