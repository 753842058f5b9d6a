"""Tests for the one-ply tactical safety check."""

import chess
import pytest

from companion.safety import is_safe
from helpers import KNIGHT_TRADE, PAWN_TAKES_BISHOP, QUEEN_INTO_PAWN, move_for


class TestIsSafe:
    def test_queen_to_pawn_covered_square_is_unsafe(self) -> None:
        board = chess.Board(QUEEN_INTO_PAWN)
        assert not is_safe(board, move_for(board, "d1d5"), chess.WHITE)

    def test_pawn_takes_undefended_bishop_is_safe(self) -> None:
        board = chess.Board(PAWN_TAKES_BISHOP)
        assert is_safe(board, move_for(board, "e4d5"), chess.WHITE)

    def test_unattacked_destination_is_safe(self) -> None:
        board = chess.Board(QUEEN_INTO_PAWN)
        assert is_safe(board, move_for(board, "d1d3"), chess.WHITE)

    def test_even_trade_is_safe(self) -> None:
        # Nxd5 exd5: 320 - (320 - 100) >= 0.
        board = chess.Board(KNIGHT_TRADE)
        assert is_safe(board, move_for(board, "c3d5"), chess.WHITE)

    def test_rook_takes_defended_pawn_is_unsafe(self) -> None:
        board = chess.Board("4k3/8/4p3/3p4/8/8/8/3RK3 w - - 0 1")
        assert not is_safe(board, move_for(board, "d1d5"), chess.WHITE)

    def test_does_not_modify_board(self) -> None:
        board = chess.Board(QUEEN_INTO_PAWN)
        is_safe(board, move_for(board, "d1d5"), chess.WHITE)
        assert board.fen() == QUEEN_INTO_PAWN
        assert board.move_stack == []

    def test_wrong_mover_raises(self) -> None:
        board = chess.Board(QUEEN_INTO_PAWN)
        with pytest.raises(ValueError):
            is_safe(board, move_for(board, "d1d5"), chess.BLACK)
