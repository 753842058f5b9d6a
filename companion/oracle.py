"""
Rules oracle: the only place the package talks to the chess rules.

The decision code (evaluation, search, hints) never decides legality on its
own. It asks an oracle for the legal moves of a position, applies and undoes
them, and queries terminal state. The contract is captured by the
``RulesOracle`` protocol so that any rules backend can be plugged in;
``PythonChessOracle`` is the default implementation on top of python-chess.

Moves cross the oracle boundary as ``CandidateMove`` values. Unlike a bare
``chess.Move``, a candidate carries its provenance (the moved piece and the
captured piece), so move ordering and the safety check never have to look the
board up again. Promotions are always to a queen: underpromotions are filtered
out of ``legal_moves`` and never searched.

Error taxonomy:
    OracleError       — contract breach (e.g. undo without a matching apply).
                        Fatal to the call in progress; never swallowed.
    IllegalMoveError  — a move handed to ``apply`` is not legal in the
                        position. The search treats it as a dead branch.
"""

from dataclasses import dataclass
from typing import Protocol

import chess


class OracleError(RuntimeError):
    """The rules oracle was used in a way that breaks its contract."""


class IllegalMoveError(OracleError):
    """A move passed to ``apply`` is not legal in the current position."""


@dataclass(frozen=True)
class CandidateMove:
    """
    A legal move with the provenance the heuristics need.

    Attributes:
        from_square: Origin square (python-chess square index, a1 = 0).
        to_square:   Destination square.
        piece:       Type of the piece that moves (before promotion).
        captured:    Type of the captured piece, or None for quiet moves.
                     En passant captures report a pawn.
        promotion:   chess.QUEEN for promotions, otherwise None.
    """

    from_square: chess.Square
    to_square: chess.Square
    piece: chess.PieceType
    captured: chess.PieceType | None = None
    promotion: chess.PieceType | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_promotion(self) -> bool:
        return self.promotion is not None

    def to_move(self) -> chess.Move:
        return chess.Move(self.from_square, self.to_square, promotion=self.promotion)

    def uci(self) -> str:
        return self.to_move().uci()

    @classmethod
    def from_move(cls, board: chess.Board, move: chess.Move) -> "CandidateMove":
        """Build a candidate from a python-chess move legal on ``board``."""
        piece = board.piece_type_at(move.from_square)
        if piece is None:
            raise OracleError(f"no piece on origin square of {move.uci()}")

        captured = None
        if board.is_en_passant(move):
            captured = chess.PAWN
        elif board.is_capture(move):
            captured = board.piece_type_at(move.to_square)

        return cls(
            from_square=move.from_square,
            to_square=move.to_square,
            piece=piece,
            captured=captured,
            promotion=move.promotion,
        )

    def __str__(self) -> str:
        return self.uci()


class RulesOracle(Protocol):
    """Rules backend consumed by the decision code."""

    def legal_moves(self, board: chess.Board) -> list[CandidateMove]: ...

    def apply(self, board: chess.Board, move: CandidateMove) -> None: ...

    def undo(self, board: chess.Board) -> None: ...

    def is_in_check(self, board: chess.Board) -> bool: ...

    def is_checkmate(self, board: chess.Board) -> bool: ...

    def is_game_over(self, board: chess.Board) -> bool: ...

    def side_to_move(self, board: chess.Board) -> chess.Color: ...

    def copy(self, board: chess.Board) -> chess.Board: ...

    def key(self, board: chess.Board) -> str: ...

    def history_length(self, board: chess.Board) -> int: ...


class PythonChessOracle:
    """
    ``RulesOracle`` backed by python-chess.

    ``apply`` pushes onto the board's move stack and ``undo`` pops it, so
    nested apply/undo pairs restore the board exactly, to any depth.
    """

    def legal_moves(self, board: chess.Board) -> list[CandidateMove]:
        """
        Legal moves in python-chess enumeration order, queen promotions only.

        Args:
            board: Position to enumerate. Not modified.

        Returns:
            List of CandidateMove. Empty when the side to move is mated or
            stalemated.
        """
        return [
            CandidateMove.from_move(board, move)
            for move in board.legal_moves
            if move.promotion in (None, chess.QUEEN)
        ]

    def apply(self, board: chess.Board, move: CandidateMove) -> None:
        """
        Play ``move`` on ``board`` in place.

        Raises:
            IllegalMoveError: The move is not legal in this position.
        """
        raw = move.to_move()
        if not board.is_legal(raw):
            raise IllegalMoveError(f"{raw.uci()} is not legal in {board.fen()}")
        board.push(raw)

    def undo(self, board: chess.Board) -> None:
        """
        Revert the most recent ``apply``.

        Raises:
            OracleError: There is no move to take back.
        """
        try:
            board.pop()
        except IndexError as exc:
            raise OracleError("undo called without a matching apply") from exc

    def is_in_check(self, board: chess.Board) -> bool:
        return board.is_check()

    def is_checkmate(self, board: chess.Board) -> bool:
        return board.is_checkmate()

    def is_game_over(self, board: chess.Board) -> bool:
        return board.is_game_over()

    def side_to_move(self, board: chess.Board) -> chess.Color:
        return board.turn

    def copy(self, board: chess.Board) -> chess.Board:
        # Keep the move stack: the hint jitter depends on game length.
        return board.copy()

    def key(self, board: chess.Board) -> str:
        return board.fen()

    def history_length(self, board: chess.Board) -> int:
        return len(board.move_stack)


DEFAULT_ORACLE = PythonChessOracle()
