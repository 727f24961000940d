"""Board - piece placement on an 8x8 grid and single-hop legality."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from draughts.core.enums import Color, InvalidReason
from draughts.core.errors import CellOutOfRangeError, ParseError
from draughts.core.move import Capture, Invalid, MoveInfo, Step
from draughts.core.piece import EMPTY, Piece
from draughts.core.types import BOARD_SIZE, Cell, cell_name, is_valid_cell

_MIDDLE_ROWS = (3, 4)


def _initial_piece(row: int, col: int) -> Piece:
    if (row + col) % 2 == 0 or row in _MIDDLE_ROWS:
        return EMPTY
    return Piece.man(Color.BLACK if row < _MIDDLE_ROWS[0] else Color.WHITE)


class Board:
    """Mutable grid of immutable :class:`Piece` values, row-major."""

    __slots__ = ("_cells",)

    def __init__(self, labels: Sequence[Sequence[str]] | None = None) -> None:
        if labels is None:
            self._cells: list[list[Piece]] = [
                [_initial_piece(r, c) for c in range(BOARD_SIZE)]
                for r in range(BOARD_SIZE)
            ]
            return

        if isinstance(labels, str) or not isinstance(labels, Sequence):
            raise ParseError(f"Board labels must be a grid, got {type(labels).__name__}")
        cells: list[list[Piece]] = []
        for row in labels:
            if isinstance(row, str) or not isinstance(row, Sequence):
                raise ParseError(f"Board row must be a sequence, got {row!r}")
            cells.append([Piece.from_label(label) for label in row])
        self._cells = cells

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting layout."""
        return cls()

    @classmethod
    def empty(cls) -> Board:
        """Board with no pieces at all."""
        return cls([[EMPTY.label] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def from_labels(cls, labels: Sequence[Sequence[str]]) -> Board:
        return cls(labels)

    def to_labels(self) -> list[list[str]]:
        """Row-major grid of piece labels, accepted back by the constructor."""
        return [[piece.label for piece in row] for row in self._cells]

    # -- Element access -----------------------------------------------------

    def _check(self, row: int, col: int) -> None:
        # Both the 8x8 board and the decoded grid must contain the cell
        if not (
            is_valid_cell(row, col)
            and row < len(self._cells)
            and col < len(self._cells[row])
        ):
            raise CellOutOfRangeError(row, col)

    def get_piece(self, row: int, col: int) -> Piece:
        self._check(row, col)
        return self._cells[row][col]

    def set_piece(self, row: int, col: int, piece: Piece) -> None:
        """Raw write; no game rule is checked here."""
        self._check(row, col)
        self._cells[row][col] = piece

    def rows(self) -> Iterator[tuple[Piece, ...]]:
        for row in self._cells:
            yield tuple(row)

    def pieces(self, color: Color) -> list[Cell]:
        """Cells occupied by *color*, in row-major order."""
        return [
            (r, c)
            for r, row in enumerate(self._cells)
            for c, piece in enumerate(row)
            if piece.is_of_color(color)
        ]

    # -- Move legality ------------------------------------------------------

    def get_move_info(
        self, from_row: int, from_col: int, to_row: int, to_col: int
    ) -> MoveInfo:
        """Classify one hop as :class:`Invalid`, :class:`Step` or :class:`Capture`.

        Reads the board only. Coordinates off the grid raise
        :class:`CellOutOfRangeError`; every rule violation is returned
        as :class:`Invalid`.
        """
        piece = self.get_piece(from_row, from_col)
        if piece.is_empty():
            return Invalid(InvalidReason.FROM_EMPTY)

        # A zero-length hop is not a move onto an occupied cell
        if (to_row, to_col) == (from_row, from_col):
            return Invalid(InvalidReason.INVALID_DISTANCE)

        if not self.get_piece(to_row, to_col).is_empty():
            return Invalid(InvalidReason.TO_OCCUPIED)

        dr = to_row - from_row
        dc = to_col - from_col

        # Must be diagonal
        if abs(dr) != abs(dc):
            return Invalid(InvalidReason.INVALID_DISTANCE)

        distance = abs(dr)
        dir_r = 1 if dr > 0 else -1
        dir_c = 1 if dc > 0 else -1

        # Scan the cells strictly between source and destination
        victim: Cell | None = None
        for i in range(1, distance):
            row = from_row + i * dir_r
            col = from_col + i * dir_c
            between = self.get_piece(row, col)
            if between.is_empty():
                continue
            if not between.is_of_opposite_color(piece):
                return Invalid(InvalidReason.INVALID_VICTIM)
            # At most one piece may be jumped per hop
            if victim is not None:
                return Invalid(InvalidReason.INVALID_DISTANCE)
            victim = (row, col)

        crowned = piece.is_crowned()

        if victim is None:
            if crowned:
                return Step()
            assert piece.color is not None
            if distance == 1 and dir_r == piece.color.forward:
                return Step()
            return Invalid(InvalidReason.INVALID_DISTANCE)

        # Men only short-jump; kings may land anywhere past the victim
        if crowned or distance == 2:
            return Capture(victim)
        return Invalid(InvalidReason.INVALID_DISTANCE)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._cells = [row.copy() for row in self._cells]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        rows: list[str] = []
        for r, row in enumerate(self._cells):
            rank = cell_name(r, 0)[1:]
            rows.append(f"{rank} {' '.join(p.symbol for p in row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
