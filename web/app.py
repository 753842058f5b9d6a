"""
FastAPI web service for the chess companion.

Exposes the two decision entry points over HTTP so a browser or mobile front
end can ask for the bot's reply and for a hint without embedding the engine:

    POST /api/move      — bot move for the side to move (weak or strong)
    POST /api/hint      — hint move for the side to move, with the rule tier
    POST /api/evaluate  — static evaluation, White-positive

Architecture notes:
- Sync endpoints (not async): FastAPI runs sync handlers in a thread pool,
  which keeps the CPU-bound search off the event loop.
- Stateless per request: the client sends the full FEN each time; no server-
  side board state is kept between requests, so the engine always works on
  its own board built from that FEN.
- ``seed`` makes the random parts (weak bot, hint tiers 3-5) reproducible.
"""

import logging
import random

import chess
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, field_validator

from companion.bot import BotStrength, choose_bot_move
from companion.evaluate import evaluate
from companion.hints import pick_hint_with_tier
from companion.oracle import OracleError
from companion.search import SearchBudget

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

app = FastAPI(title="Chess Companion", version="1.0.0")

MAX_DEPTH: int = 5
MAX_NODES: int = 200_000


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class MoveRequest(BaseModel):
    """
    Client request for the bot's move.

    Fields:
        fen:      Full FEN of the current position; the bot plays the side
                  to move.
        strength: "strong" (search) or "weak" (promotion > capture > random).
        depth:    Search depth, clamped to [1, MAX_DEPTH].
        nodes:    Node cap, clamped to [1, MAX_NODES].
        seed:     Optional seed for the weak policy's random choice.
    """

    fen: str
    strength: BotStrength = BotStrength.STRONG
    depth: int = 3
    nodes: int = 3_000
    seed: int | None = None

    @field_validator("depth")
    @classmethod
    def clamp_depth(cls, v: int) -> int:
        """Clamp depth to a range that answers in well under a second."""
        return max(1, min(v, MAX_DEPTH))

    @field_validator("nodes")
    @classmethod
    def clamp_nodes(cls, v: int) -> int:
        return max(1, min(v, MAX_NODES))


class MoveResponse(BaseModel):
    """
    Bot move.

    Fields:
        move:  Move in UCI notation (e.g. "e2e4", "e7e8q").
        fen:   Board FEN after the move is applied.
        score: Static evaluation after the move, White-positive.
    """

    move: str
    fen: str
    score: int


class HintRequest(BaseModel):
    fen: str
    seed: int | None = None


class HintResponse(BaseModel):
    """
    Hint for the side to move.

    Fields:
        move:        Move in UCI notation.
        tier:        Rule that produced it ("mate_in_one", "safe_check", ...).
        from_square: Origin square name, for highlighting.
        to_square:   Destination square name, for highlighting.
    """

    move: str
    tier: str
    from_square: str
    to_square: str


class EvaluateRequest(BaseModel):
    fen: str


class EvaluateResponse(BaseModel):
    score: int
    turn: str


def _parse_board(fen: str) -> chess.Board:
    try:
        return chess.Board(fen)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid FEN: {exc}") from exc


def _require_in_progress(board: chess.Board) -> None:
    if board.is_game_over():
        raise HTTPException(
            status_code=400,
            detail=f"Game is already over: {board.result()}",
        )


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/move", response_model=MoveResponse)
def api_move(request: MoveRequest) -> MoveResponse:
    """
    Compute the bot's move for the given position.

    Raises:
        HTTPException 400: Malformed FEN or game already over.
        HTTPException 500: Rules-backend contract breach, or no move returned.
    """
    board = _parse_board(request.fen)
    _require_in_progress(board)

    budget = SearchBudget(max_depth=request.depth, max_nodes=request.nodes)
    rng = random.Random(request.seed)

    try:
        move = choose_bot_move(board, board.turn, request.strength, budget=budget, rng=rng)
    except OracleError as exc:
        _log.exception("Bot move failed for FEN=%s", request.fen)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    if move is None:
        raise HTTPException(status_code=500, detail="Engine returned no move")

    board.push(move.to_move())
    score = evaluate(board)

    _log.info(
        "Move=%s strength=%s depth=%d nodes=%d score=%d fen=%s",
        move.uci(),
        request.strength.value,
        request.depth,
        request.nodes,
        score,
        request.fen[:40],
    )

    return MoveResponse(move=move.uci(), fen=board.fen(), score=score)


@app.post("/api/hint", response_model=HintResponse)
def api_hint(request: HintRequest) -> HintResponse:
    """
    Suggest a move for the side to move.

    Raises:
        HTTPException 400: Malformed FEN or game already over.
        HTTPException 500: Rules-backend contract breach.
    """
    board = _parse_board(request.fen)
    _require_in_progress(board)

    rng = random.Random(request.seed)
    try:
        hint = pick_hint_with_tier(board, board.turn, rng)
    except OracleError as exc:
        _log.exception("Hint failed for FEN=%s", request.fen)
        raise HTTPException(status_code=500, detail=f"Engine error: {exc}") from exc

    if hint is None:
        raise HTTPException(status_code=500, detail="No hint available")

    _log.info("Hint=%s tier=%s fen=%s", hint.move.uci(), hint.tier.value, request.fen[:40])

    return HintResponse(
        move=hint.move.uci(),
        tier=hint.tier.value,
        from_square=chess.square_name(hint.move.from_square),
        to_square=chess.square_name(hint.move.to_square),
    )


@app.post("/api/evaluate", response_model=EvaluateResponse)
def api_evaluate(request: EvaluateRequest) -> EvaluateResponse:
    """Static evaluation of a position, White-positive."""
    board = _parse_board(request.fen)
    return EvaluateResponse(
        score=evaluate(board),
        turn="white" if board.turn == chess.WHITE else "black",
    )
