"""Board geometry, square notation, and text dumps for the 5x5 Qirkat board.

Squares are numbered 0..24 in row-major order starting from the bottom row
('1') and the left column ('a'), so a1 = 0, e1 = 4, a2 = 5 and e5 = 24.
Diagonal lines are drawn only through points whose row + column is even.
"""

from __future__ import annotations

from typing import Optional, Sequence

SIDE = 5
NUM_SQUARES = SIDE * SIDE
MAX_INDEX = NUM_SQUARES - 1

# Column labels for notation
COL_LABELS = "abcde"
# Row labels for notation (row 0 = "1", row 4 = "5")
ROW_LABELS = "12345"

# Starting layout, bottom row first. WHITE moves first.
INITIAL_LAYOUT = "w w w w w  w w w w w  b b - w w  b b b b b  b b b b b"

ORTHOGONAL = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONAL_DIRS = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
ALL_DIRS = ORTHOGONAL + DIAGONAL_DIRS


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < SIDE and 0 <= col < SIDE


def valid_square(k: int) -> bool:
    return 0 <= k <= MAX_INDEX


def rc_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a linearized square index."""
    return row * SIDE + col


def index_to_rc(k: int) -> tuple[int, int]:
    """Convert a linearized square index to (row, col)."""
    return divmod(k, SIDE)


def index_to_notation(k: int) -> str:
    """Convert a square index to notation like 'c3'."""
    row, col = index_to_rc(k)
    return COL_LABELS[col] + ROW_LABELS[row]


def notation_to_index(sq: str) -> int:
    """Convert notation like 'c3' to a square index.

    Raises:
        ValueError: If sq does not name a square on the board.
    """
    if len(sq) != 2 or sq[0] not in COL_LABELS or sq[1] not in ROW_LABELS:
        raise ValueError(f"not a square: {sq!r}")
    return rc_to_index(ROW_LABELS.index(sq[1]), COL_LABELS.index(sq[0]))


def on_diagonal(k: int) -> bool:
    """True iff diagonal lines pass through square k."""
    row, col = index_to_rc(k)
    return (row + col) % 2 == 0


def is_adjacent(k0: int, k1: int) -> bool:
    """True iff a one-square step along a drawn line connects k0 and k1."""
    if not (valid_square(k0) and valid_square(k1)) or k0 == k1:
        return False
    r0, c0 = index_to_rc(k0)
    r1, c1 = index_to_rc(k1)
    dr, dc = r1 - r0, c1 - c0
    if abs(dr) > 1 or abs(dc) > 1:
        return False
    if dr != 0 and dc != 0:
        return on_diagonal(k0)
    return True


def jump_midpoint(k0: int, k1: int) -> Optional[int]:
    """Return the square jumped over by a capture from k0 to k1.

    None when k0 and k1 are not exactly two squares apart along a drawn line.
    """
    if not (valid_square(k0) and valid_square(k1)) or k0 == k1:
        return None
    r0, c0 = index_to_rc(k0)
    r1, c1 = index_to_rc(k1)
    dr, dc = r1 - r0, c1 - c0
    if dr not in (-2, 0, 2) or dc not in (-2, 0, 2):
        return None
    mid = rc_to_index(r0 + dr // 2, c0 + dc // 2)
    if dr != 0 and dc != 0 and not on_diagonal(mid):
        return None
    return mid


def _build_step_neighbors() -> list[list[int]]:
    table = []
    for k in range(NUM_SQUARES):
        row, col = index_to_rc(k)
        dirs = ALL_DIRS if on_diagonal(k) else ORTHOGONAL
        table.append([rc_to_index(row + dr, col + dc) for dr, dc in dirs
                      if in_bounds(row + dr, col + dc)])
    return table


def _build_jump_targets() -> list[list[tuple[int, int]]]:
    table = []
    for k in range(NUM_SQUARES):
        row, col = index_to_rc(k)
        dirs = ALL_DIRS if on_diagonal(k) else ORTHOGONAL
        targets = []
        for dr, dc in dirs:
            r2, c2 = row + 2 * dr, col + 2 * dc
            if in_bounds(r2, c2):
                targets.append((rc_to_index(r2, c2), rc_to_index(row + dr, col + dc)))
        table.append(targets)
    return table


# STEP_NEIGHBORS[k]: squares one step from k along a drawn line
STEP_NEIGHBORS: list[list[int]] = _build_step_neighbors()
# JUMP_TARGETS[k]: (landing square, jumped square) pairs for captures from k
JUMP_TARGETS: list[list[tuple[int, int]]] = _build_jump_targets()


def render_board(symbols: Sequence[str], legend: bool = False) -> str:
    """Render 25 one-character cell symbols as text, top row first.

    Args:
        symbols: Cell symbols in square-index order (bottom row first).
        legend: If True, label rows on the left and columns underneath.
    """
    lines = []
    for row in range(SIDE - 1, -1, -1):
        cells = " ".join(symbols[rc_to_index(row, col)] for col in range(SIDE))
        prefix = ROW_LABELS[row] if legend else ""
        lines.append(f"{prefix}  {cells}")
    if legend:
        lines.append("   " + " ".join(COL_LABELS))
    return "\n".join(lines)
