"""JSON serialization of a board's label grid."""

from __future__ import annotations

import json

from draughts.core.board import Board
from draughts.core.errors import ParseError


def board_to_json(board: Board) -> str:
    """Encode *board* as a JSON array of rows of piece labels."""
    return json.dumps(board.to_labels())


def board_from_json(text: str) -> Board:
    """Decode a document produced by :func:`board_to_json`."""
    try:
        labels = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid board JSON: {exc.msg}") from None
    if not isinstance(labels, list):
        raise ParseError(f"Board JSON must be an array, got {type(labels).__name__}")
    return Board(labels)
