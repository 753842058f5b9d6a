"""
Hint selection: a tiered rule cascade for suggesting a move to a human.

Hints come from a short list of readable rules rather than from the search,
so they read like what a decent club player would suggest rather than an
engine line. The tiers are tried in order and the first one with any
candidates wins:

    1. MATE_IN_ONE   — a move that checkmates right now.
    2. SAFE_CHECK    — a check that does not hang the checking piece.
    3. GOOD_CAPTURE  — a capture of an equal or bigger piece that is safe.
    4. DEVELOPING    — a safe quiet move, preferring development and centre.
    5. FALLBACK      — any safe move, else any legal move.

Tiers 3 to 5 pick at random among their best few candidates so repeated
hints do not feel robotic. The random source is passed in; tests hand in a
seeded ``random.Random`` to make the choice reproducible.
"""

import enum
import logging
import random
from dataclasses import dataclass

import chess

from companion.constants import (
    CENTER_SQUARES,
    DEV_KING_CASTLE_SQUARE,
    DEV_MINOR_LEAVES_HOME,
    DEV_MINOR_SEMI_CENTER,
    DEV_PAWN_CENTER,
    DEV_PAWN_FLANK_CENTER,
    FLANK_CENTER_SQUARES,
    HINT_CAPTURE_TOP_K,
    HINT_CENTER_BONUS,
    HINT_CHECK_BONUS,
    HINT_JITTER_PERIOD,
    HINT_QUIET_TOP_K,
    KING_CASTLE_SQUARES,
    MINOR_HOME_SQUARES,
    PIECE_VALUES,
    SEMI_CENTER_SQUARES,
)
from companion.oracle import DEFAULT_ORACLE, CandidateMove, RulesOracle
from companion.safety import is_safe

_log = logging.getLogger(__name__)


class HintTier(enum.Enum):
    """Which rule produced a hint."""

    MATE_IN_ONE = "mate_in_one"
    SAFE_CHECK = "safe_check"
    GOOD_CAPTURE = "good_capture"
    DEVELOPING = "developing"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class Hint:
    move: CandidateMove
    tier: HintTier


def development_bonus(move: CandidateMove) -> int:
    """
    Small fixed bonus for moves that develop or centralise.

    Knights and bishops get points for leaving their home squares and for
    landing on c3-f6; pawns for reaching the centre; the king for stepping to
    its kingside castling square.
    """
    bonus = 0
    if move.piece in (chess.KNIGHT, chess.BISHOP):
        if move.from_square in MINOR_HOME_SQUARES:
            bonus += DEV_MINOR_LEAVES_HOME
        if move.to_square in SEMI_CENTER_SQUARES:
            bonus += DEV_MINOR_SEMI_CENTER
    elif move.piece == chess.PAWN:
        if move.to_square in CENTER_SQUARES:
            bonus += DEV_PAWN_CENTER
        elif move.to_square in FLANK_CENTER_SQUARES:
            bonus += DEV_PAWN_FLANK_CENTER
    elif move.piece == chess.KING and move.to_square in KING_CASTLE_SQUARES:
        bonus += DEV_KING_CASTLE_SQUARE
    return bonus


def _gives_check(board: chess.Board, move: CandidateMove, oracle: RulesOracle) -> tuple[bool, bool]:
    """Return (check, checkmate) after ``move``; ``board`` is restored."""
    oracle.apply(board, move)
    check = oracle.is_in_check(board)
    mate = check and oracle.is_checkmate(board)
    oracle.undo(board)
    return check, mate


def _best_of(scored: list[tuple[CandidateMove, float]]) -> list[CandidateMove]:
    # sorted() is stable: equal scores keep enumeration order.
    return [m for m, _ in sorted(scored, key=lambda item: item[1], reverse=True)]


def pick_hint_with_tier(
    board: chess.Board,
    side_to_move: chess.Color,
    rng: random.Random | None = None,
    oracle: RulesOracle | None = None,
) -> Hint | None:
    """
    Choose a hint move and report which tier produced it.

    Args:
        board:        The position. Not modified.
        side_to_move: The side asking for a hint.
        rng:          Random source for the top-K tiers.
        oracle:       Rules backend; defaults to python-chess.

    Returns:
        Hint, or None when ``side_to_move`` is not to move or has no legal
        moves.
    """
    oracle = oracle or DEFAULT_ORACLE
    rng = rng or random.Random()

    if oracle.side_to_move(board) != side_to_move:
        return None

    scratch = oracle.copy(board)
    moves = oracle.legal_moves(scratch)
    if not moves:
        return None

    checks: list[CandidateMove] = []
    for move in moves:
        check, mate = _gives_check(scratch, move, oracle)
        if mate:
            return Hint(move, HintTier.MATE_IN_ONE)
        if check:
            checks.append(move)

    verdicts: dict[CandidateMove, bool] = {}

    def safe(move: CandidateMove) -> bool:
        if move not in verdicts:
            verdicts[move] = is_safe(scratch, move, side_to_move, oracle)
        return verdicts[move]

    safe_checks = [(m, HINT_CHECK_BONUS + development_bonus(m)) for m in checks if safe(m)]
    if safe_checks:
        return Hint(_best_of(safe_checks)[0], HintTier.SAFE_CHECK)

    good_captures = []
    for move in moves:
        if move.captured is None or not safe(move):
            continue
        gain = PIECE_VALUES[move.captured] - PIECE_VALUES[move.piece]
        if gain >= 0:
            good_captures.append((move, gain + development_bonus(move)))
    if good_captures:
        top = _best_of(good_captures)[:HINT_CAPTURE_TOP_K]
        return Hint(rng.choice(top), HintTier.GOOD_CAPTURE)

    jitter = oracle.history_length(scratch) % HINT_JITTER_PERIOD + 1
    quiet = []
    for move in moves:
        if move.is_capture or not safe(move):
            continue
        score = development_bonus(move)
        if move.to_square in CENTER_SQUARES:
            score += HINT_CENTER_BONUS
        quiet.append((move, score + rng.random() * jitter))
    if quiet:
        top = _best_of(quiet)[:HINT_QUIET_TOP_K]
        return Hint(rng.choice(top), HintTier.DEVELOPING)

    fallback = [m for m in moves if safe(m)] or moves
    return Hint(rng.choice(fallback), HintTier.FALLBACK)


def pick_hint(
    board: chess.Board,
    side_to_move: chess.Color,
    rng: random.Random | None = None,
    oracle: RulesOracle | None = None,
) -> CandidateMove | None:
    """Return just the hint move from ``pick_hint_with_tier``."""
    hint = pick_hint_with_tier(board, side_to_move, rng, oracle)
    if hint is None:
        return None
    _log.debug("hint %s from tier %s", hint.move, hint.tier.value)
    return hint.move
