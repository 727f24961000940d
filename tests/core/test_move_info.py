"""Tests for Board.get_move_info: single-hop legality."""

import pytest

from draughts.core.board import Board
from draughts.core.enums import Color, InvalidReason
from draughts.core.errors import CellOutOfRangeError
from draughts.core.move import Capture, Invalid, Move, Step
from draughts.core.piece import Piece

WHITE = Piece.man(Color.WHITE)
BLACK = Piece.man(Color.BLACK)
WHITE_KING = Piece.king(Color.WHITE)
BLACK_KING = Piece.king(Color.BLACK)


def _board(*placements: tuple[int, int, Piece]) -> Board:
    """Helper: empty board with the given pieces."""
    board = Board.empty()
    for row, col, piece in placements:
        board.set_piece(row, col, piece)
    return board


class TestPreconditions:
    def test_from_empty(self) -> None:
        board = Board.initial()
        assert board.get_move_info(4, 3, 3, 2) == Invalid(InvalidReason.FROM_EMPTY)

    def test_to_occupied_by_own(self) -> None:
        board = Board.initial()
        assert board.get_move_info(6, 1, 5, 2) == Invalid(InvalidReason.TO_OCCUPIED)

    def test_to_occupied_by_opponent(self) -> None:
        board = _board((4, 3, WHITE), (3, 2, BLACK))
        assert board.get_move_info(4, 3, 3, 2) == Invalid(InvalidReason.TO_OCCUPIED)

    def test_to_occupied_checked_before_distance(self) -> None:
        # Not diagonal either, but occupancy wins
        board = _board((4, 3, WHITE_KING), (4, 5, BLACK))
        assert board.get_move_info(4, 3, 4, 5) == Invalid(InvalidReason.TO_OCCUPIED)

    @pytest.mark.parametrize("piece", [WHITE, BLACK, WHITE_KING, BLACK_KING])
    def test_same_cell_is_invalid_distance(self, piece: Piece) -> None:
        board = _board((4, 3, piece))
        assert board.get_move_info(4, 3, 4, 3) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_same_empty_cell_is_from_empty(self) -> None:
        board = Board.empty()
        assert board.get_move_info(4, 3, 4, 3) == Invalid(InvalidReason.FROM_EMPTY)

    @pytest.mark.parametrize("to_row, to_col", [(4, 5), (2, 3), (3, 5), (0, 4)])
    def test_non_diagonal(self, to_row: int, to_col: int) -> None:
        board = _board((4, 3, WHITE_KING))
        assert board.get_move_info(4, 3, to_row, to_col) == Invalid(
            InvalidReason.INVALID_DISTANCE
        )

    def test_out_of_range_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(CellOutOfRangeError):
            board.get_move_info(5, 0, 4, -1)
        with pytest.raises(CellOutOfRangeError):
            board.get_move_info(8, 0, 7, 1)


class TestManSteps:
    def test_white_forward_step(self) -> None:
        board = _board((5, 4, WHITE))
        assert board.get_move_info(5, 4, 4, 3) == Step()
        assert board.get_move_info(5, 4, 4, 5) == Step()

    def test_white_backward_step(self) -> None:
        board = _board((5, 4, WHITE))
        assert board.get_move_info(5, 4, 6, 3) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_black_forward_step(self) -> None:
        board = _board((2, 3, BLACK))
        assert board.get_move_info(2, 3, 3, 4) == Step()

    def test_black_backward_step(self) -> None:
        board = _board((2, 3, BLACK))
        assert board.get_move_info(2, 3, 1, 2) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_man_cannot_slide(self) -> None:
        board = _board((5, 4, WHITE))
        assert board.get_move_info(5, 4, 3, 2) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_initial_position_opening_step(self) -> None:
        board = Board.initial()
        assert board.get_move_info(5, 0, 4, 1) == Step()
        assert board.get_move_info(2, 1, 3, 0) == Step()


class TestManCaptures:
    def test_black_captures_forward(self) -> None:
        board = _board((2, 3, BLACK), (3, 4, WHITE))
        assert board.get_move_info(2, 3, 4, 5) == Capture(victim=(3, 4))

    def test_white_captures_forward(self) -> None:
        board = _board((5, 4, WHITE), (4, 3, BLACK))
        assert board.get_move_info(5, 4, 3, 2) == Capture(victim=(4, 3))

    def test_man_captures_backward(self) -> None:
        board = _board((3, 2, WHITE), (4, 3, BLACK))
        assert board.get_move_info(3, 2, 5, 4) == Capture(victim=(4, 3))

    def test_man_cannot_long_jump(self) -> None:
        board = _board((6, 1, WHITE), (5, 2, BLACK))
        assert board.get_move_info(6, 1, 3, 4) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_man_cannot_jump_own_piece(self) -> None:
        board = _board((5, 4, WHITE), (4, 3, WHITE))
        assert board.get_move_info(5, 4, 3, 2) == Invalid(InvalidReason.INVALID_VICTIM)

    def test_man_jumps_opposing_king(self) -> None:
        board = _board((5, 4, WHITE), (4, 5, BLACK_KING))
        assert board.get_move_info(5, 4, 3, 6) == Capture(victim=(4, 5))


class TestKing:
    def test_long_step_on_clear_diagonal(self) -> None:
        board = _board((7, 0, WHITE_KING))
        assert board.get_move_info(7, 0, 3, 4) == Step()

    def test_king_steps_backward(self) -> None:
        board = _board((3, 4, WHITE_KING))
        assert board.get_move_info(3, 4, 6, 1) == Step()

    def test_own_piece_on_path(self) -> None:
        board = _board((7, 0, WHITE_KING), (5, 2, WHITE))
        assert board.get_move_info(7, 0, 3, 4) == Invalid(InvalidReason.INVALID_VICTIM)

    def test_flying_capture(self) -> None:
        board = _board((7, 0, WHITE_KING), (5, 2, BLACK))
        assert board.get_move_info(7, 0, 3, 4) == Capture(victim=(5, 2))

    def test_flying_capture_victim_next_to_destination(self) -> None:
        board = _board((7, 0, WHITE_KING), (4, 3, BLACK))
        assert board.get_move_info(7, 0, 3, 4) == Capture(victim=(4, 3))

    def test_black_king_short_capture(self) -> None:
        board = _board((2, 3, BLACK_KING), (1, 2, WHITE))
        assert board.get_move_info(2, 3, 0, 1) == Capture(victim=(1, 2))


class TestTwoPiecesOnPath:
    def test_king_two_opponents(self) -> None:
        board = _board((7, 0, WHITE_KING), (6, 1, BLACK), (4, 3, BLACK))
        assert board.get_move_info(7, 0, 3, 4) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_king_two_adjacent_opponents(self) -> None:
        board = _board((7, 0, BLACK_KING), (6, 1, WHITE), (5, 2, WHITE))
        assert board.get_move_info(7, 0, 4, 3) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_man_two_opponents(self) -> None:
        board = _board((7, 0, WHITE), (6, 1, BLACK), (5, 2, BLACK))
        assert board.get_move_info(7, 0, 4, 3) == Invalid(InvalidReason.INVALID_DISTANCE)

    def test_own_piece_after_opponent(self) -> None:
        board = _board((7, 0, WHITE_KING), (6, 1, BLACK), (5, 2, WHITE))
        assert board.get_move_info(7, 0, 4, 3) == Invalid(InvalidReason.INVALID_VICTIM)


class TestPurity:
    def test_repeated_calls_match(self) -> None:
        board = _board((7, 0, WHITE_KING), (5, 2, BLACK))
        before = board.to_labels()
        first = board.get_move_info(7, 0, 3, 4)
        second = board.get_move_info(7, 0, 3, 4)
        assert first == second
        assert board.to_labels() == before

    def test_is_legal_flags(self) -> None:
        assert not Invalid(InvalidReason.FROM_EMPTY).is_legal
        assert Step().is_legal
        assert Capture((3, 4)).is_legal


class TestMoveValue:
    def test_str(self) -> None:
        assert str(Move((5, 2), (4, 3))) == "c3-d4"
