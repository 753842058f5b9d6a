"""
Companion constants: piece values, positional weights, search budget defaults,
and the fixed point values used by the hint heuristics.

Every tuning number in the package lives here so that the evaluator, the move
orderer, the search and the hint selector never introduce their own magic
numbers. Changing a weight here changes it everywhere.

Piece values follow the standard centipawn convention (1 pawn = 100 cp).
"""

import chess

# ---------------------------------------------------------------------------
# Piece values (centipawns)
# ---------------------------------------------------------------------------
# The king is worth 0: it is never captured, so it contributes nothing to the
# material balance and is the "cheapest" mover in the move-ordering formula.

PAWN_VALUE: int = 100
KNIGHT_VALUE: int = 320
BISHOP_VALUE: int = 330
ROOK_VALUE: int = 500
QUEEN_VALUE: int = 900
KING_VALUE: int = 0

PIECE_VALUES: dict[int, int] = {
    chess.PAWN:   PAWN_VALUE,
    chess.KNIGHT: KNIGHT_VALUE,
    chess.BISHOP: BISHOP_VALUE,
    chess.ROOK:   ROOK_VALUE,
    chess.QUEEN:  QUEEN_VALUE,
    chess.KING:   KING_VALUE,
}

# ---------------------------------------------------------------------------
# Centrality weights
# ---------------------------------------------------------------------------
# Multiplied by a [0, 1] centrality factor for the square a piece stands on.
# Minor pieces gain the most from the centre; the king gains nothing.

CENTRALITY_WEIGHTS: dict[int, int] = {
    chess.PAWN:   2,
    chess.KNIGHT: 10,
    chess.BISHOP: 10,
    chess.ROOK:   4,
    chess.QUEEN:  6,
    chess.KING:   0,
}


def _centrality(square: chess.Square) -> float:
    """1 - Chebyshev distance from the board centre, scaled to [0, 1)."""
    dx = abs(3.5 - chess.square_file(square))
    dy = abs(3.5 - chess.square_rank(square))
    return 1.0 - max(dx, dy) / 3.5


# Precomputed centrality bonus per (piece type, square), already rounded.
# Rank symmetry (|3.5 - r| == |3.5 - (7 - r)|) keeps the table colour-neutral.
CENTRALITY_BONUS: dict[int, list[int]] = {
    pt: [round(_centrality(sq) * weight) for sq in chess.SQUARES]
    for pt, weight in CENTRALITY_WEIGHTS.items()
}

# Applied against the side to move when it is in check.
CHECK_PENALTY: int = 15

# ---------------------------------------------------------------------------
# Special scores
# ---------------------------------------------------------------------------
# Integers only, so they compare exactly in alpha-beta. Mate scores are
# adjusted by ply so a mate nearer the root always outranks a distant one.

CHECKMATE_SCORE: int = 1_000_000
DRAW_SCORE: int = 0

# ---------------------------------------------------------------------------
# Move ordering
# ---------------------------------------------------------------------------

PROMOTION_BONUS: int = 800
CAPTURE_VICTIM_MULTIPLIER: int = 10

# ---------------------------------------------------------------------------
# Search budget defaults
# ---------------------------------------------------------------------------
# The node cap is a global, soft limit over the whole tree. Once exceeded,
# every remaining call returns the static evaluation.

DEFAULT_SEARCH_DEPTH: int = 3
DEFAULT_NODE_CAP: int = 3_000

# ---------------------------------------------------------------------------
# Hint heuristics
# ---------------------------------------------------------------------------

HINT_CHECK_BONUS: int = 20
HINT_CENTER_BONUS: int = 4
HINT_CAPTURE_TOP_K: int = 3
HINT_QUIET_TOP_K: int = 4
HINT_JITTER_PERIOD: int = 7

# Development bonus point values.
DEV_MINOR_LEAVES_HOME: int = 8
DEV_MINOR_SEMI_CENTER: int = 6
DEV_PAWN_CENTER: int = 5
DEV_PAWN_FLANK_CENTER: int = 3
DEV_KING_CASTLE_SQUARE: int = 10

MINOR_HOME_SQUARES: frozenset[int] = frozenset(
    [chess.B1, chess.G1, chess.B8, chess.G8]
)

# c3-f6 block.
SEMI_CENTER_SQUARES: frozenset[int] = frozenset(
    chess.square(f, r) for f in range(2, 6) for r in range(2, 6)
)

CENTER_SQUARES: frozenset[int] = frozenset([chess.D4, chess.E4, chess.D5, chess.E5])
FLANK_CENTER_SQUARES: frozenset[int] = frozenset([chess.C4, chess.F4, chess.C5, chess.F5])
KING_CASTLE_SQUARES: frozenset[int] = frozenset([chess.G1, chess.G8])
