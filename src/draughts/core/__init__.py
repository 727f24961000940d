"""Core domain layer — pure draughts rules with zero external dependencies.

Quick start::

    from draughts.core import Board, Capture

    board = Board.initial()
    info = board.get_move_info(2, 1, 3, 2)
    if isinstance(info, Capture):
        print("victim at", info.victim)
"""

from draughts.core.board import Board
from draughts.core.enums import Color, InvalidReason, PieceVariant
from draughts.core.errors import CellOutOfRangeError, DraughtsError, ParseError
from draughts.core.move import Capture, Invalid, Move, MoveInfo, Step
from draughts.core.notation import board_from_json, board_to_json
from draughts.core.piece import EMPTY, Piece
from draughts.core.types import (
    BOARD_SIZE,
    Cell,
    cell_name,
    is_dark_cell,
    is_valid_cell,
)

__all__ = [
    # Enums
    "Color",
    "InvalidReason",
    "PieceVariant",
    # Errors
    "CellOutOfRangeError",
    "DraughtsError",
    "ParseError",
    # Types / helpers
    "BOARD_SIZE",
    "Cell",
    "cell_name",
    "is_dark_cell",
    "is_valid_cell",
    # Domain objects
    "Board",
    "EMPTY",
    "Piece",
    # Move classification
    "Capture",
    "Invalid",
    "Move",
    "MoveInfo",
    "Step",
    # Notation
    "board_from_json",
    "board_to_json",
]
