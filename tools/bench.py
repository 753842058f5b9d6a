#!/usr/bin/env python3
"""
Benchmark: nodes visited, time, and node-cap cutoffs per position.

Run before and after touching evaluation, ordering or the search to see the
effect. Fewer nodes at the same depth means better pruning; a cutoff means
the node cap truncated the tree and the move may differ from an uncapped
search.

Usage: python3 tools/bench.py [depth] [nodes]
"""
import os
import sys
import time

REPO = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO not in sys.path:
    sys.path.insert(0, REPO)

import chess

from companion.constants import DEFAULT_NODE_CAP, DEFAULT_SEARCH_DEPTH
from companion.search import SearchBudget, search

# Fixed positions spanning opening, middlegame, endgame and tactics.
POSITIONS = [
    ("Start",        chess.STARTING_FEN),
    ("After 1.e4",   "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"),
    ("Italian",      "r1bqkbnr/pppp1ppp/2n5/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R b KQkq - 3 3"),
    ("Mid-open",     "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4"),
    ("Complex mid",  "r2q1rk1/ppp2ppp/2np1n2/2b1p1B1/2B1P1b1/2NP1N2/PPP2PPP/R2Q1RK1 w - - 0 8"),
    ("Knight fork",  "q3k3/p7/1r6/3N4/8/8/8/1Q4K1 w - - 0 1"),
    ("Back rank",    "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"),
    ("Rook ending",  "8/5pk1/6p1/7p/7P/6P1/5PK1/8 w - - 0 1"),
    ("Pawn race",    "8/1p4k1/p7/P1K5/8/8/8/8 w - - 0 1"),
]


def run_position(label: str, fen: str, budget: SearchBudget) -> dict:
    """Search one position and return its metrics."""
    board = chess.Board(fen)
    start = time.monotonic()
    result = search(board, board.turn, budget)
    time_ms = max(1, int((time.monotonic() - start) * 1000))
    return {
        "label": label,
        "move": result.move.uci() if result.move is not None else "(none)",
        "score": result.score,
        "nodes": result.nodes,
        "nps": result.nodes * 1000 // time_ms,
        "time_ms": time_ms,
        "cutoff": result.cutoff,
    }


def main() -> None:
    """Run all benchmark positions and print a summary table."""
    depth = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_SEARCH_DEPTH
    nodes = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_NODE_CAP
    budget = SearchBudget(max_depth=depth, max_nodes=nodes)

    print(f"Chess companion search benchmark — {sys.executable}")
    print(f"Budget: depth {budget.max_depth}, node cap {budget.max_nodes:,}")
    print()
    print(
        f"{'Position':<14} {'Move':<7} {'Score':>7} "
        f"{'Nodes':>8} {'NPS':>8} {'Time(ms)':>9} {'Cut':>4}"
    )
    print("-" * 64)

    results = []
    for label, fen in POSITIONS:
        r = run_position(label, fen, budget)
        results.append(r)
        print(
            f"{r['label']:<14} {r['move']:<7} {r['score']:>7} "
            f"{r['nodes']:>8,} {r['nps']:>8,} {r['time_ms']:>9,} "
            f"{'yes' if r['cutoff'] else 'no':>4}"
        )

    avg_nodes = sum(r["nodes"] for r in results) // len(results)
    avg_time = sum(r["time_ms"] for r in results) // len(results)
    cutoffs = sum(1 for r in results if r["cutoff"])
    print("-" * 64)
    print(f"{'AVERAGE':<14} {'':<7} {'':>7} {avg_nodes:>8,} {'':>8} {avg_time:>9,}")
    print(f"{cutoffs} of {len(results)} searches hit the node cap.")


if __name__ == "__main__":
    main()
