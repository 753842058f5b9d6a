"""
Static evaluation: material plus a light centrality bonus.

The evaluator is intentionally shallow. It knows piece values, rewards pieces
for standing near the centre, and charges a small penalty to a side that is in
check. There is no pawn-structure or king-safety model; the search depth is
what turns this into reasonable play.

Unlike a textbook negamax evaluator, ``evaluate`` always scores from White's
point of view (positive = White is better). The search converts the score to
the side to move at its leaves, and the HTTP surface reports it unchanged, so
every caller sees one fixed sign convention.
"""

import chess

from companion.constants import CENTRALITY_BONUS, CHECK_PENALTY, PIECE_VALUES


def evaluate(board: chess.Board) -> int:
    """
    Centipawn evaluation from White's perspective.

    Each piece contributes its material value plus its precomputed centrality
    bonus, signed by colour. If the side to move is in check, the other side
    gets CHECK_PENALTY.

    Args:
        board: The position to score. Not modified.

    Returns:
        Centipawn score. Positive = White is ahead.

    Example:
        >>> import chess
        >>> evaluate(chess.Board())  # the start position is symmetric
        0
    """
    score = 0

    for sq, piece in board.piece_map().items():
        pt = piece.piece_type
        value = PIECE_VALUES[pt] + CENTRALITY_BONUS[pt][sq]
        if piece.color == chess.WHITE:
            score += value
        else:
            score -= value

    if board.is_check():
        score += -CHECK_PENALTY if board.turn == chess.WHITE else CHECK_PENALTY

    return score


def evaluate_for_side(board: chess.Board, color: chess.Color) -> int:
    """Return ``evaluate(board)`` from ``color``'s perspective."""
    score = evaluate(board)
    return score if color == chess.WHITE else -score
