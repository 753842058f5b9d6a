"""
Chess companion package: picks the bot's move and suggests hints.

This package implements the decision-making core of a casual chess app: a
shallow static evaluator, fixed-depth negamax with alpha-beta pruning and a
node cap for the bot, and a tiered rule cascade for human-readable hints.
Move legality is delegated to a rules oracle (python-chess by default).

Modules:
    constants — Piece values, centrality weights, budgets, hint bonuses
    oracle    — Rules-oracle protocol, python-chess backend, CandidateMove
    evaluate  — Static evaluation (material + centrality + check penalty)
    ordering  — Promotion / capture / quiet move ordering
    search    — Negamax with alpha-beta pruning and a global node cap
    safety    — One-ply static-exchange safety check
    hints     — Tiered hint selector
    bot       — Entry points: choose_bot_move, choose_hint
"""

from companion.bot import BotStrength, choose_bot_move, choose_hint
from companion.oracle import (
    CandidateMove,
    IllegalMoveError,
    OracleError,
    PythonChessOracle,
    RulesOracle,
)
from companion.search import SearchBudget, SearchResult

__all__ = [
    "BotStrength",
    "CandidateMove",
    "IllegalMoveError",
    "OracleError",
    "PythonChessOracle",
    "RulesOracle",
    "SearchBudget",
    "SearchResult",
    "choose_bot_move",
    "choose_hint",
]
