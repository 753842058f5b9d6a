"""
Bot search: fixed-depth negamax with alpha-beta pruning and a node cap.

This is the engine behind the "strong" bot. It is deliberately simple:

1. Fixed depth. There is no iterative deepening and no quiescence search; the
   default budget is depth 3.

2. Global node cap. Every recursive call bumps one shared counter. Once the
   counter passes ``SearchBudget.max_nodes``, every remaining call returns the
   static evaluation immediately, so latency is bounded by the cap no matter
   how wide the tree is. Which branches get truncated depends on traversal
   order, so a capped search can return a different move than an uncapped
   one, and it can score a forced mate as ordinary material. That is the
   price of a fixed node budget and is accepted as is.

3. Backtracking on one scratch board. The caller's board is copied once per
   call; every descent applies one move on the copy and undoes it on the way
   back up, so at most one mutated position exists at a time and the caller's
   board is never touched.

Perspective:
    ``evaluate`` is White-positive. Inside the tree every node scores from the
    perspective of its own side to move (negamax convention), so leaves
    convert the static score to that side. The root negates each child's value
    to get the mover's score and reports the final result White-positive again.

Mate scores:
    A side with no legal moves while in check scores
    ``-(CHECKMATE_SCORE - ply)`` where ply is the distance from the root, so
    the winner prefers the nearest mate and the loser the most distant one.
"""

import logging
from dataclasses import dataclass

import chess

from companion.constants import (
    CHECKMATE_SCORE,
    DEFAULT_NODE_CAP,
    DEFAULT_SEARCH_DEPTH,
    DRAW_SCORE,
)
from companion.evaluate import evaluate_for_side
from companion.oracle import DEFAULT_ORACLE, CandidateMove, IllegalMoveError, RulesOracle
from companion.ordering import order_moves

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchBudget:
    """
    Bounds for one search call.

    Attributes:
        max_depth: Plies searched below the root, counting the root move.
                   Depth 1 scores each legal move by the static evaluation
                   of the resulting position.
        max_nodes: Soft cap on recursive calls across the whole tree.
    """

    max_depth: int = DEFAULT_SEARCH_DEPTH
    max_nodes: int = DEFAULT_NODE_CAP

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.max_nodes < 1:
            raise ValueError(f"max_nodes must be >= 1, got {self.max_nodes}")


@dataclass
class SearchState:
    """
    Mutable state for a single search call.

    Everything that changes during the search lives here rather than in
    module globals, so concurrent calls on independent boards never interact.

    Attributes:
        board:      Private scratch copy the search applies and undoes moves on.
        oracle:     Rules backend used for move generation and apply/undo.
        budget:     Depth and node limits for this call.
        node_count: Recursive calls made so far, root children included.
        cutoff:     True once the node cap has been exceeded.
    """

    board: chess.Board
    oracle: RulesOracle
    budget: SearchBudget
    node_count: int = 0
    cutoff: bool = False


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a search call.

    Attributes:
        move:   The chosen move, or None if the side to move has no legal moves.
        score:  Score of the chosen line in centipawns, White-positive.
        nodes:  Number of recursive calls made.
        depth:  The depth the search was asked to reach.
        cutoff: True if the node cap truncated part of the tree.
    """

    move: CandidateMove | None
    score: int
    nodes: int
    depth: int
    cutoff: bool


def _static_score(state: SearchState) -> int:
    board = state.board
    return evaluate_for_side(board, state.oracle.side_to_move(board))


def negamax(state: SearchState, depth: int, alpha: int, beta: int) -> int:
    """
    Negamax search with alpha-beta pruning under a global node cap.

    Args:
        state: Per-call search state. ``state.board`` is modified via
               apply/undo and always restored before returning.
        depth: Remaining depth in plies. 0 means score statically.
        alpha: Lower bound of the window, from this node's side to move.
        beta:  Upper bound of the window, from this node's side to move.

    Returns:
        Score in centipawns from the perspective of the side to move at
        this node.
    """
    state.node_count += 1
    if state.node_count > state.budget.max_nodes:
        state.cutoff = True
        return _static_score(state)

    if depth == 0:
        return _static_score(state)

    board = state.board
    oracle = state.oracle

    moves = oracle.legal_moves(board)
    if not moves:
        if oracle.is_in_check(board):
            ply = state.budget.max_depth - depth
            return -(CHECKMATE_SCORE - ply)
        return DRAW_SCORE

    best_score = -CHECKMATE_SCORE
    searched = False

    for move in order_moves(moves):
        try:
            oracle.apply(board, move)
        except IllegalMoveError:
            _log.warning("oracle rejected %s during search; skipping branch", move)
            continue
        score = -negamax(state, depth - 1, -beta, -alpha)
        oracle.undo(board)
        searched = True

        if score > best_score:
            best_score = score
        if best_score > alpha:
            alpha = best_score
        if alpha >= beta:
            break

    if not searched:
        # Every child was rejected: score the node as a leaf, not as a loss.
        return _static_score(state)

    return best_score


def search(
    board: chess.Board,
    side_to_move: chess.Color,
    budget: SearchBudget | None = None,
    oracle: RulesOracle | None = None,
) -> SearchResult:
    """
    Pick the best move for ``side_to_move`` within the budget.

    Every root move is searched with a full window; the move with the best
    score for the mover wins, and the first one in move order wins ties.
    Without a binding node cap the result is fully deterministic.

    Args:
        board:        The position. Not modified.
        side_to_move: The colour to move. Must match the board.
        budget:       Depth and node limits; defaults to SearchBudget().
        oracle:       Rules backend; defaults to python-chess.

    Returns:
        SearchResult. ``move`` is None only when there are no legal moves.

    Raises:
        ValueError:  ``side_to_move`` is not the side to move on ``board``.
        OracleError: The rules backend broke its apply/undo contract.
    """
    oracle = oracle or DEFAULT_ORACLE
    budget = budget or SearchBudget()

    if oracle.side_to_move(board) != side_to_move:
        raise ValueError(
            f"search asked for {chess.COLOR_NAMES[side_to_move]} but "
            f"{chess.COLOR_NAMES[oracle.side_to_move(board)]} is to move"
        )

    scratch = oracle.copy(board)
    moves = order_moves(oracle.legal_moves(scratch))
    if not moves:
        return SearchResult(move=None, score=0, nodes=0, depth=budget.max_depth, cutoff=False)

    state = SearchState(board=scratch, oracle=oracle, budget=budget)
    sign = 1 if side_to_move == chess.WHITE else -1

    best_move: CandidateMove | None = None
    best_score = -CHECKMATE_SCORE

    for move in moves:
        try:
            oracle.apply(scratch, move)
        except IllegalMoveError:
            _log.warning("oracle rejected root move %s; skipping", move)
            continue
        score = -negamax(state, budget.max_depth - 1, -CHECKMATE_SCORE, CHECKMATE_SCORE)
        oracle.undo(scratch)

        if best_move is None or score > best_score:
            best_move = move
            best_score = score

    if best_move is None:
        # Every root move was rejected; still hand back something playable.
        _log.warning("no root move could be searched; falling back to %s", moves[0])
        best_move = moves[0]
        best_score = 0

    _log.debug(
        "search move=%s score=%d nodes=%d depth=%d cutoff=%s",
        best_move,
        best_score * sign,
        state.node_count,
        budget.max_depth,
        state.cutoff,
    )

    return SearchResult(
        move=best_move,
        score=best_score * sign,
        nodes=state.node_count,
        depth=budget.max_depth,
        cutoff=state.cutoff,
    )


def pick_best_move(
    board: chess.Board,
    side_to_move: chess.Color,
    max_depth: int = DEFAULT_SEARCH_DEPTH,
    node_cap: int = DEFAULT_NODE_CAP,
    oracle: RulesOracle | None = None,
) -> CandidateMove | None:
    """Convenience wrapper returning only the chosen move."""
    budget = SearchBudget(max_depth=max_depth, max_nodes=node_cap)
    return search(board, side_to_move, budget, oracle).move
