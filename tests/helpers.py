"""Positions and small helpers shared by the tests."""

import chess

from companion.oracle import CandidateMove, PythonChessOracle

# White: Ra8 is the only checkmate (back-rank mate).
BACK_RANK_MATE = "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"

# Same back-rank mate, plus a knight on c1 that the rook could also take.
BACK_RANK_MATE_WITH_CAPTURE = "6k1/5ppp/8/8/8/8/8/R1n3K1 w - - 0 1"

# White to move is checkmated (fool's mate).
FOOLS_MATE = "rnbqkbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 1 3"

# Black to move is stalemated.
STALEMATE = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"

# Nc7+ forks king and queen. Qxb6 wins a rook at first sight but loses the
# queen to axb6.
KNIGHT_FORK = "q3k3/p7/1r6/3N4/8/8/8/1Q4K1 w - - 0 1"

# Pawn on e4 can take an undefended bishop on d5.
PAWN_TAKES_BISHOP = "4k3/8/8/3b4/4P3/8/8/4K3 w - - 0 1"

# Queen d1 can step to d5, which the e6 pawn covers.
QUEEN_INTO_PAWN = "4k3/8/4p3/8/8/8/8/3QK3 w - - 0 1"

# Knight c3 can take a knight on d5 that the e6 pawn defends.
KNIGHT_TRADE = "4k3/8/4p3/3n4/8/2N5/8/4K3 w - - 0 1"

# White's only legal moves are Nb3 and Nc2, both into a pawn's capture.
ONLY_HANGING_MOVES = "4k1r1/8/8/8/p7/3p3p/7P/N6K w - - 0 1"

# Rh8+ is a safe check; exd5 is a safe good capture.
CHECK_AND_CAPTURE = "k7/8/8/3n4/4P3/8/8/4K2R w - - 0 1"

# Pawns can take queen, rook, bishop (twice) and knight, all safely.
MANY_CAPTURES = "4k3/8/8/q2r1b1n/1P2P1P1/8/8/7K w - - 0 1"

# Pawn on a7 can promote.
PROMOTION = "8/P7/8/8/8/8/8/k6K w - - 0 1"

# En passant: e5xd6 is legal.
EN_PASSANT = "4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1"

MIDDLEGAME = "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"

_ORACLE = PythonChessOracle()


def move_for(board: chess.Board, uci: str) -> CandidateMove:
    """Return the legal CandidateMove with the given UCI string."""
    for move in _ORACLE.legal_moves(board):
        if move.uci() == uci:
            return move
    raise AssertionError(f"{uci} is not legal in {board.fen()}")


def legal_ucis(board: chess.Board) -> set[str]:
    return {move.uci() for move in _ORACLE.legal_moves(board)}
