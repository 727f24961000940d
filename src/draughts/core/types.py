"""Cell type alias and coordinate helpers.

Board layout (row-major, row 0 at the top):
    row 0 holds Black's back rank, row 7 holds White's.
    Files a-h map to columns 0-7; rank 1 is row 7, rank 8 is row 0.
"""

from __future__ import annotations

from typing import TypeAlias

Cell: TypeAlias = tuple[int, int]  # (row, col)

BOARD_SIZE = 8


def is_valid_cell(row: int, col: int) -> bool:
    """Check whether (row, col) lies on an 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_dark_cell(row: int, col: int) -> bool:
    """Playable cells are the ones where pieces start and move."""
    return (row + col) % 2 == 1


def cell_name(row: int, col: int) -> str:
    """Human-readable name, e.g. (7, 0) → 'a1', (0, 7) → 'h8'."""
    return chr(ord("a") + col) + str(BOARD_SIZE - row)

