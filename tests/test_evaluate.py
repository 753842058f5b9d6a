"""Tests for the static evaluator."""

import chess
import pytest

from companion.evaluate import evaluate, evaluate_for_side
from helpers import KNIGHT_FORK, MANY_CAPTURES, MIDDLEGAME, ONLY_HANGING_MOVES


class TestEvaluate:
    def test_start_position_is_balanced(self, start_board) -> None:
        assert evaluate(start_board) == 0

    def test_material_counts_for_white(self) -> None:
        # Queen on d1 sits on the rim rank: no centrality bonus.
        board = chess.Board("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
        assert evaluate(board) == 900

    def test_centrality_rewards_central_knight(self) -> None:
        central = chess.Board("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1")
        corner = chess.Board("4k3/8/8/8/8/8/8/N3K3 w - - 0 1")

        assert evaluate(central) == 320 + 9
        assert evaluate(corner) == 320

    def test_side_in_check_is_penalised(self) -> None:
        # Black rook on e2 (500 + 1 centrality) gives check to White.
        board = chess.Board("4k3/8/8/8/8/8/4r3/4K3 w - - 0 1")
        assert evaluate(board) == -501 - 15

    @pytest.mark.parametrize(
        "fen",
        [
            chess.STARTING_FEN,
            MIDDLEGAME,
            KNIGHT_FORK,
            MANY_CAPTURES,
            ONLY_HANGING_MOVES,
            "4k3/8/8/8/8/8/4r3/4K3 w - - 0 1",
        ],
    )
    def test_colour_mirror_negates_score(self, fen: str) -> None:
        board = chess.Board(fen)
        assert evaluate(board.mirror()) == -evaluate(board)

    def test_does_not_modify_board(self) -> None:
        board = chess.Board(MIDDLEGAME)
        evaluate(board)
        assert board.fen() == MIDDLEGAME

    def test_evaluate_for_side(self) -> None:
        board = chess.Board("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")

        assert evaluate_for_side(board, chess.WHITE) == 900
        assert evaluate_for_side(board, chess.BLACK) == -900
