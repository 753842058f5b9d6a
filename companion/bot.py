"""
Public entry points: the bot's move and the human's hint.

``choose_bot_move`` and ``choose_hint`` are the only functions a front end
needs. Both take the caller's board, work on a private copy, and return a
``CandidateMove`` or None. They never mutate the board they are given.

Bot strength is a tagged choice between two policies:

    STRONG — fixed-depth alpha-beta search (companion.search).
    WEAK   — first promotion, else first capture, else a random legal move.

None means "no move available" (game over, no legal moves, or not the
caller's turn). Rules-backend contract breaches are raised as OracleError and
are never folded into None.
"""

import enum
import logging
import random
from collections.abc import Callable

import chess

from companion.hints import pick_hint
from companion.oracle import DEFAULT_ORACLE, CandidateMove, RulesOracle
from companion.search import SearchBudget, search

_log = logging.getLogger(__name__)


class BotStrength(enum.Enum):
    WEAK = "weak"
    STRONG = "strong"


def _weak_policy(
    board: chess.Board,
    moves: list[CandidateMove],
    budget: SearchBudget,
    rng: random.Random,
    oracle: RulesOracle,
) -> CandidateMove:
    for move in moves:
        if move.is_promotion:
            return move
    for move in moves:
        if move.is_capture:
            return move
    return rng.choice(moves)


def _strong_policy(
    board: chess.Board,
    moves: list[CandidateMove],
    budget: SearchBudget,
    rng: random.Random,
    oracle: RulesOracle,
) -> CandidateMove:
    result = search(board, oracle.side_to_move(board), budget, oracle)
    # search only returns None without legal moves, which the caller excludes.
    return result.move if result.move is not None else moves[0]


BotPolicy = Callable[
    [chess.Board, list[CandidateMove], SearchBudget, random.Random, RulesOracle],
    CandidateMove,
]

POLICIES: dict[BotStrength, BotPolicy] = {
    BotStrength.WEAK: _weak_policy,
    BotStrength.STRONG: _strong_policy,
}


def choose_bot_move(
    board: chess.Board,
    bot_color: chess.Color,
    strength: BotStrength = BotStrength.STRONG,
    *,
    budget: SearchBudget | None = None,
    rng: random.Random | None = None,
    oracle: RulesOracle | None = None,
) -> CandidateMove | None:
    """
    Choose the bot's move.

    Args:
        board:     The current position. Not modified.
        bot_color: The colour the bot plays.
        strength:  Which policy to use.
        budget:    Search limits for the strong policy (default depth 3,
                   3000 nodes).
        rng:       Random source for the weak policy.
        oracle:    Rules backend; defaults to python-chess.

    Returns:
        A legal move, or None if it is not the bot's turn or there are no
        legal moves.
    """
    oracle = oracle or DEFAULT_ORACLE
    if oracle.side_to_move(board) != bot_color:
        return None

    moves = oracle.legal_moves(board)
    if not moves:
        return None

    policy = POLICIES[strength]
    move = policy(board, moves, budget or SearchBudget(), rng or random.Random(), oracle)
    _log.debug("bot (%s) plays %s", strength.value, move)
    return move


def choose_hint(
    board: chess.Board,
    side_to_move: chess.Color,
    *,
    rng: random.Random | None = None,
    oracle: RulesOracle | None = None,
) -> CandidateMove | None:
    """
    Suggest a move for the human playing ``side_to_move``.

    Returns None when it is not that side's turn (for example, the bot is
    thinking) or when there are no legal moves.
    """
    return pick_hint(board, side_to_move, rng, oracle)
