"""Shared pytest fixtures used across the test suite."""

import random

import chess
import pytest

from companion.oracle import PythonChessOracle


@pytest.fixture
def oracle() -> PythonChessOracle:
    return PythonChessOracle()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so the random hint tiers are reproducible."""
    return random.Random(1234)


@pytest.fixture
def start_board() -> chess.Board:
    return chess.Board()
