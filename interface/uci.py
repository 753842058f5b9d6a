"""
UCI (Universal Chess Interface) protocol handler for the chess companion.

UCI is the standard text-based protocol that chess GUIs and testing tools
(like cutechess-cli) use to talk to engines. The engine reads commands from
stdin and writes responses to stdout, flushing every line.

Protocol overview:
    GUI → Engine: uci, isready, ucinewgame, position, go, stop, quit, setoption
    Engine → GUI: id name, id author, option, uciok, readyok, info, bestmove

Extensions:
    hint                           — answer "hint <uci>" for the side to move
                                     (or "hint (none)"), using the hint rules
                                     rather than the search.
    setoption name Strength value weak|strong
                                   — choose the bot policy.

Budgets:
    The search is bounded by depth and node count, not by time. "go depth N"
    and "go nodes N" override the defaults (3 plies, 3000 nodes); clock
    parameters such as wtime/btime are accepted and ignored.

Threading model:
    The UCI loop runs on the main thread. "go" runs the bot in a daemon thread
    on a copy of the board, so the loop keeps reading stdin. The core has no
    cancellation; "stop" waits for the running search to finish, which the
    node cap keeps short.

Critical rule: NEVER print to stdout except for valid UCI responses.
Debug output must go to stderr.
"""

import sys
import os
import threading
import time

# ---------------------------------------------------------------------------
# Path setup: make 'companion' importable when this script is run directly
# as `python interface/uci.py` from the repo root.
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import chess
from companion.bot import BotStrength, choose_bot_move, choose_hint
from companion.constants import DEFAULT_NODE_CAP, DEFAULT_SEARCH_DEPTH
from companion.oracle import OracleError
from companion.search import SearchBudget, search


def _send(line: str) -> None:
    """
    Write a line to stdout and flush immediately.

    GUIs read line-by-line; an unflushed buffer leaves the GUI waiting for
    output that was already produced.
    """
    print(line, flush=True)


def _log(message: str) -> None:
    """
    Write a diagnostic message to stderr.

    stdout is reserved for protocol messages; anything else there confuses
    the GUI.
    """
    print(message, file=sys.stderr, flush=True)


class UciHandler:
    """
    Stateful handler for the UCI protocol.

    Holds the current board and the bot strength, and manages the search
    thread lifecycle. The main loop creates one instance and dispatches
    commands to it.

    Attributes:
        board:         Current position, updated by "position" commands.
        strength:      Bot policy selected with setoption.
        search_thread: The active search thread, or None.
    """

    def __init__(self) -> None:
        self.board: chess.Board = chess.Board()
        self.strength: BotStrength = BotStrength.STRONG
        self.search_thread: threading.Thread | None = None

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_uci(self) -> None:
        """Identify the engine and list its options, then send uciok."""
        _send("id name ChessCompanion")
        _send("id author Chess Companion Project")
        _send("option name Strength type combo default strong var weak var strong")
        _send("uciok")

    def handle_isready(self) -> None:
        """Reply readyok; there is no lazy initialization to wait for."""
        _send("readyok")

    def handle_ucinewgame(self) -> None:
        """Wait for any running search and reset to the starting position."""
        self._wait_for_search()
        self.board = chess.Board()

    def handle_setoption(self, tokens: list[str]) -> None:
        """
        Handle "setoption name <name> value <value>".

        Only the Strength option is recognised; unknown options are logged
        and ignored.
        """
        if "name" not in tokens or "value" not in tokens:
            _log(f"uci: malformed setoption: {' '.join(tokens)}")
            return

        name_idx = tokens.index("name")
        value_idx = tokens.index("value")
        name = " ".join(tokens[name_idx + 1:value_idx]).lower()
        value = " ".join(tokens[value_idx + 1:]).lower()

        if name != "strength":
            _log(f"uci: ignoring unknown option: {name!r}")
            return
        try:
            self.strength = BotStrength(value)
        except ValueError:
            _log(f"uci: invalid Strength value: {value!r}")

    def handle_position(self, tokens: list[str]) -> None:
        """
        Parse and apply a "position" command.

        Command formats:
            position startpos
            position startpos moves e2e4 e7e5 ...
            position fen <FEN>
            position fen <FEN> moves e2e4 e7e5 ...

        Args:
            tokens: The command tokens with "position" already stripped.
        """
        try:
            if not tokens:
                return

            if tokens[0] == "startpos":
                self.board = chess.Board()
                move_tokens = tokens[2:] if len(tokens) > 1 and tokens[1] == "moves" else []
            elif tokens[0] == "fen":
                if "moves" in tokens:
                    moves_idx = tokens.index("moves")
                    fen = " ".join(tokens[1:moves_idx])
                    move_tokens = tokens[moves_idx + 1:]
                else:
                    fen = " ".join(tokens[1:])
                    move_tokens = []
                self.board = chess.Board(fen)
            else:
                _log(f"uci: unknown position type: {tokens[0]}")
                return

            # Replaying keeps the move stack, which the hint jitter reads.
            for uci_move in move_tokens:
                move = chess.Move.from_uci(uci_move)
                if move in self.board.legal_moves:
                    self.board.push(move)
                else:
                    _log(f"uci: illegal move in position command: {uci_move}")
                    break

        except ValueError as e:
            _log(f"uci: error in position command: {e}")

    def handle_go(self, tokens: list[str]) -> None:
        """
        Parse a "go" command and start the bot in a background thread.

        The bot always plays the side to move. The board is copied so a new
        "position" command cannot race with the running search.

        Args:
            tokens: The command tokens with "go" already stripped.
        """
        self._wait_for_search()

        budget = self._parse_go_budget(tokens)
        board_copy = self.board.copy()
        strength = self.strength

        def search_and_reply() -> None:
            """
            Run the bot and emit the info + bestmove lines.

            Every path ends with exactly one "bestmove" line; the GUI will not
            continue the game until it receives one.
            """
            best = None
            try:
                start = time.monotonic()
                if strength is BotStrength.STRONG:
                    result = search(board_copy, board_copy.turn, budget)
                    best = result.move
                    elapsed_ms = max(1, int((time.monotonic() - start) * 1000))
                    if best is not None:
                        # UCI scores are from the engine's point of view.
                        score = result.score if board_copy.turn == chess.WHITE else -result.score
                        nps = max(1, result.nodes * 1000 // elapsed_ms)
                        _send(
                            f"info depth {result.depth} score cp {score} "
                            f"nodes {result.nodes} nps {nps} time {elapsed_ms}"
                        )
                else:
                    best = choose_bot_move(board_copy, board_copy.turn, strength, budget=budget)
                    elapsed_ms = max(1, int((time.monotonic() - start) * 1000))
                    if best is not None:
                        _send(f"info time {elapsed_ms}")

            except Exception as e:
                _log(f"search error: {e!r}")

            # No legal moves or a failed search: UCI still requires a bestmove line.
            _send(f"bestmove {best.uci()}" if best is not None else "bestmove (none)")

        self.search_thread = threading.Thread(target=search_and_reply, daemon=True)
        self.search_thread.start()

    def handle_hint(self) -> None:
        """Answer with a hint for the side to move, synchronously."""
        self._wait_for_search()
        try:
            move = choose_hint(self.board, self.board.turn)
        except OracleError as e:
            _log(f"hint error: {e}")
            move = None

        if move is None:
            _send("hint (none)")
            return
        _send(f"hint {move.uci()}")

    def handle_stop(self) -> None:
        """
        Respond to the "stop" command.

        The search cannot be interrupted; wait for it so its bestmove line
        is sent before the next command is processed.
        """
        self._wait_for_search()

    def handle_quit(self) -> None:
        """Wait for the search and exit. "quit" gets no reply."""
        self._wait_for_search()
        sys.exit(0)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _wait_for_search(self) -> None:
        """Join the current search thread, if any."""
        if self.search_thread is not None and self.search_thread.is_alive():
            self.search_thread.join()
        self.search_thread = None

    def _parse_go_budget(self, tokens: list[str]) -> SearchBudget:
        """
        Extract the search budget from "go" command tokens.

        Supports "depth <n>" and "nodes <n>". Other parameters (movetime,
        wtime, btime, infinite) are ignored; the node cap bounds latency.

        Args:
            tokens: The go command tokens (with "go" stripped).

        Returns:
            SearchBudget with defaults for anything not given.
        """
        params: dict[str, int] = {}
        i = 0
        while i < len(tokens) - 1:
            key = tokens[i]
            try:
                params[key] = int(tokens[i + 1])
                i += 2
            except (ValueError, IndexError):
                i += 1

        depth = max(1, params.get("depth", DEFAULT_SEARCH_DEPTH))
        nodes = max(1, params.get("nodes", DEFAULT_NODE_CAP))
        return SearchBudget(max_depth=depth, max_nodes=nodes)


def run_uci_loop() -> None:
    """
    Main UCI protocol loop.

    Reads lines from stdin and dispatches each command to the UciHandler
    until "quit" or end of input.

    Error handling:
        Rules-backend errors and bad arguments in one command are logged to
        stderr and the loop continues, so one bad command does not end a game.
    """
    handler = UciHandler()

    for raw_line in sys.stdin:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0]
        args = tokens[1:]

        try:
            if command == "uci":
                handler.handle_uci()
            elif command == "isready":
                handler.handle_isready()
            elif command == "ucinewgame":
                handler.handle_ucinewgame()
            elif command == "setoption":
                handler.handle_setoption(args)
            elif command == "position":
                handler.handle_position(args)
            elif command == "go":
                handler.handle_go(args)
            elif command == "hint":
                handler.handle_hint()
            elif command == "stop":
                handler.handle_stop()
            elif command == "quit":
                handler.handle_quit()
            else:
                # Unknown commands are ignored per the UCI protocol.
                _log(f"uci: ignoring unknown command: {command!r}")

        except (OracleError, ValueError) as e:
            _log(f"uci: error for command {command!r}: {e}")

    handler._wait_for_search()


if __name__ == "__main__":
    run_uci_loop()
