"""
One-ply tactical safety check used by the hint selector.

``is_safe`` is a cheap static-exchange estimate, not a search. It plays the
candidate move, lets the opponent recapture on the destination square with
its least valuable piece, and stops there. Longer exchanges, discovered
attacks and deflections are ignored.
"""

import chess

from companion.constants import PIECE_VALUES
from companion.oracle import DEFAULT_ORACLE, CandidateMove, RulesOracle


def is_safe(
    board: chess.Board,
    move: CandidateMove,
    mover: chess.Color,
    oracle: RulesOracle | None = None,
) -> bool:
    """
    Estimate whether ``move`` loses material to the best immediate recapture.

    net = value captured by the move
          - (value of the moving piece - value of the cheapest recapturer)

    The move is safe when nobody can land on the destination square, or when
    ``net >= 0``. A promoting pawn is valued as a pawn.

    Args:
        board: The position before the move. Not modified.
        move:  A legal move for ``mover``.
        mover: The side playing ``move``.
        oracle: Rules backend; defaults to python-chess.

    Raises:
        ValueError: ``mover`` is not the side to move.
    """
    oracle = oracle or DEFAULT_ORACLE
    if oracle.side_to_move(board) != mover:
        raise ValueError(f"{chess.COLOR_NAMES[mover]} is not to move")

    scratch = oracle.copy(board)
    oracle.apply(scratch, move)
    attackers = [
        reply.piece
        for reply in oracle.legal_moves(scratch)
        if reply.to_square == move.to_square
    ]
    oracle.undo(scratch)

    if not attackers:
        return True

    cheapest = min(PIECE_VALUES[pt] for pt in attackers)
    gained = PIECE_VALUES[move.captured] if move.captured is not None else 0
    net = gained - (PIECE_VALUES[move.piece] - cheapest)
    return net >= 0
