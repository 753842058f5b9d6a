"""
Move ordering for the search and the hint heuristics.

Good ordering only changes how fast alpha-beta prunes, never which move the
search returns for a given budget. The formula is a cheap MVV-LVA variant:

    promotion:  +PROMOTION_BONUS
    capture:    victim_value * CAPTURE_VICTIM_MULTIPLIER - mover_value
    quiet move: -mover_value

So PxQ ranks above QxP, and among quiet moves the lighter pieces go first.
"""

from collections.abc import Iterable

from companion.constants import (
    CAPTURE_VICTIM_MULTIPLIER,
    PIECE_VALUES,
    PROMOTION_BONUS,
)
from companion.oracle import CandidateMove


def move_order_score(move: CandidateMove) -> int:
    score = PROMOTION_BONUS if move.is_promotion else 0
    if move.captured is not None:
        score += PIECE_VALUES[move.captured] * CAPTURE_VICTIM_MULTIPLIER
    return score - PIECE_VALUES[move.piece]


def order_moves(moves: Iterable[CandidateMove]) -> list[CandidateMove]:
    """
    Sort moves from most to least promising.

    The sort is stable, so equal scores keep the oracle's enumeration order
    and repeated calls on the same input give the same order.

    Args:
        moves: Legal moves, usually straight from the oracle.

    Returns:
        New list, highest score first.
    """
    return sorted(moves, key=move_order_score, reverse=True)
