"""Tests for move ordering."""

import chess

from companion.oracle import CandidateMove
from companion.ordering import move_order_score, order_moves


def _quiet(frm, to, piece):
    return CandidateMove(frm, to, piece)


class TestMoveOrdering:
    def test_scores(self) -> None:
        promo = CandidateMove(chess.A7, chess.A8, chess.PAWN, promotion=chess.QUEEN)
        pxq = CandidateMove(chess.E4, chess.D5, chess.PAWN, captured=chess.QUEEN)
        qxp = CandidateMove(chess.D1, chess.D5, chess.QUEEN, captured=chess.PAWN)

        assert move_order_score(promo) == 800 - 100
        assert move_order_score(pxq) == 9000 - 100
        assert move_order_score(qxp) == 1000 - 900
        assert move_order_score(_quiet(chess.G1, chess.F3, chess.KNIGHT)) == -320

    def test_cheap_attacker_on_expensive_victim_first(self) -> None:
        qxp = CandidateMove(chess.D1, chess.D5, chess.QUEEN, captured=chess.PAWN)
        pxq = CandidateMove(chess.E4, chess.D5, chess.PAWN, captured=chess.QUEEN)
        quiet_queen = _quiet(chess.D1, chess.D3, chess.QUEEN)
        quiet_pawn = _quiet(chess.A2, chess.A3, chess.PAWN)

        ordered = order_moves([quiet_queen, qxp, quiet_pawn, pxq])

        assert ordered == [pxq, qxp, quiet_pawn, quiet_queen]

    def test_promotion_before_quiet_moves(self) -> None:
        promo = CandidateMove(chess.A7, chess.A8, chess.PAWN, promotion=chess.QUEEN)
        king = _quiet(chess.H1, chess.G1, chess.KING)

        assert order_moves([king, promo]) == [promo, king]

    def test_ties_keep_enumeration_order(self) -> None:
        first = _quiet(chess.B1, chess.C3, chess.KNIGHT)
        second = _quiet(chess.G1, chess.F3, chess.KNIGHT)
        third = _quiet(chess.B1, chess.A3, chess.KNIGHT)

        assert order_moves([first, second, third]) == [first, second, third]
        assert order_moves([third, first, second]) == [third, first, second]

    def test_does_not_modify_input(self) -> None:
        moves = [_quiet(chess.D1, chess.D3, chess.QUEEN), _quiet(chess.A2, chess.A3, chess.PAWN)]
        snapshot = list(moves)

        order_moves(moves)

        assert moves == snapshot
