"""Tests for the FastAPI surface."""

import chess
import pytest
from fastapi.testclient import TestClient

from helpers import BACK_RANK_MATE, FOOLS_MATE, PROMOTION, legal_ucis
from web.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestMoveEndpoint:
    def test_strong_move_from_start(self, client) -> None:
        response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "depth": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["move"] in legal_ucis(chess.Board())
        board = chess.Board()
        board.push_uci(body["move"])
        assert body["fen"] == board.fen()

    def test_weak_move_prefers_promotion(self, client) -> None:
        response = client.post("/api/move", json={"fen": PROMOTION, "strength": "weak", "seed": 1})

        assert response.status_code == 200
        assert response.json()["move"] == "a7a8q"

    def test_depth_is_clamped(self, client) -> None:
        response = client.post(
            "/api/move",
            json={"fen": BACK_RANK_MATE, "depth": 99, "nodes": 500},
        )
        assert response.status_code == 200

    def test_invalid_fen(self, client) -> None:
        response = client.post("/api/move", json={"fen": "not a fen"})
        assert response.status_code == 400

    def test_game_over(self, client) -> None:
        response = client.post("/api/move", json={"fen": FOOLS_MATE})
        assert response.status_code == 400

    def test_unknown_strength(self, client) -> None:
        response = client.post("/api/move", json={"fen": chess.STARTING_FEN, "strength": "medium"})
        assert response.status_code == 422


class TestHintEndpoint:
    def test_mate_in_one_hint(self, client) -> None:
        response = client.post("/api/hint", json={"fen": BACK_RANK_MATE, "seed": 5})

        assert response.status_code == 200
        assert response.json() == {
            "move": "a1a8",
            "tier": "mate_in_one",
            "from_square": "a1",
            "to_square": "a8",
        }

    def test_game_over(self, client) -> None:
        response = client.post("/api/hint", json={"fen": FOOLS_MATE})
        assert response.status_code == 400


class TestEvaluateEndpoint:
    def test_start_position(self, client) -> None:
        response = client.post("/api/evaluate", json={"fen": chess.STARTING_FEN})

        assert response.status_code == 200
        assert response.json() == {"score": 0, "turn": "white"}
