"""GameSession — applies hops that the board has approved.

The board only classifies moves. The session is the caller that turns a
``Step`` or ``Capture`` into cell writes, tracks the two-tap selection used
by the board widget, and notifies listeners. It does not enforce turn order
or detect the end of the game.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from draughts.core.board import Board
from draughts.core.enums import Color
from draughts.core.move import Capture, Invalid, Move, MoveInfo
from draughts.core.piece import EMPTY, Piece
from draughts.core.types import BOARD_SIZE, Cell

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[["MoveRecord"], None]
RejectedCallback = Callable[[Move, Invalid], None]


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """One applied hop."""

    move: Move
    info: MoveInfo
    piece: Piece  # occupant of the destination after the hop
    promoted: bool = False

    @property
    def is_capture(self) -> bool:
        return isinstance(self.info, Capture)


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


def _last_row(color: Color) -> int:
    return 0 if color == Color.WHITE else BOARD_SIZE - 1


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """Owns one board and mutates it only after a legality check.

    Thread-safety: none. Each game needs its own session, and concurrent
    taps on the same session must be serialized by the caller.
    """

    __slots__ = ("_board", "_promote", "_selected", "_history", "events")

    def __init__(self, board: Board | None = None, *, promote: bool = True) -> None:
        self._board = board if board is not None else Board.initial()
        self._promote = promote
        self._selected: Cell | None = None
        self._history: list[MoveRecord] = []
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Board:
        return self._board

    @property
    def selected(self) -> Cell | None:
        return self._selected

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def promote(self) -> bool:
        return self._promote

    # ── Lifecycle ────────────────────────────────────────────────────────

    def new_game(self) -> None:
        self._reset(Board.initial())

    def load(self, labels: Sequence[Sequence[str]]) -> None:
        """Replace the board with a decoded label grid."""
        self._reset(Board(labels))

    def snapshot(self) -> list[list[str]]:
        """Label grid for whatever storage the host uses."""
        return self._board.to_labels()

    def _reset(self, board: Board) -> None:
        self._board = board
        self._selected = None
        self._history = []

    # ── Moves ────────────────────────────────────────────────────────────

    def try_move(self, from_cell: Cell, to_cell: Cell) -> MoveInfo:
        """Validate a hop and apply it when legal. Returns the classification."""
        move = Move(from_cell, to_cell)
        info = self._board.get_move_info(*from_cell, *to_cell)

        if isinstance(info, Invalid):
            _LOGGER.debug("Rejected %s: %s", move, info.reason.name)
            for cb in self.events.on_rejected:
                cb(move, info)
            return info

        record = self._apply(move, info)
        self._history.append(record)
        _LOGGER.info(
            "Applied %s%s%s",
            move,
            " capturing" if record.is_capture else "",
            " (crowned)" if record.promoted else "",
        )
        for cb in self.events.on_move:
            cb(record)
        return info

    def _apply(self, move: Move, info: MoveInfo) -> MoveRecord:
        piece = self._board.get_piece(*move.from_cell)
        to_row, to_col = move.to_cell

        promoted = False
        if (
            self._promote
            and not piece.is_crowned()
            and piece.color is not None
            and to_row == _last_row(piece.color)
        ):
            piece = piece.crowned()
            promoted = True

        self._board.set_piece(*move.from_cell, EMPTY)
        if isinstance(info, Capture):
            self._board.set_piece(*info.victim, EMPTY)
        self._board.set_piece(to_row, to_col, piece)
        return MoveRecord(move, info, piece, promoted)

    # ── Two-tap selection ────────────────────────────────────────────────

    def select(self, row: int, col: int) -> MoveInfo | None:
        """Handle a tap on (row, col).

        Returns the move classification when the tap completed a hop
        attempt, otherwise ``None`` (selection changed or tap ignored).
        """
        tapped = self._board.get_piece(row, col)

        if self._selected is None:
            if not tapped.is_empty():
                self._selected = (row, col)
            return None

        if self._selected == (row, col):
            self._selected = None
            return None

        selected_piece = self._board.get_piece(*self._selected)
        if selected_piece.color is not None and tapped.is_own_piece(selected_piece.color):
            self._selected = (row, col)
            return None

        from_cell = self._selected
        self._selected = None
        return self.try_move(from_cell, (row, col))
