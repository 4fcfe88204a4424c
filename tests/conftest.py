"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from solardawn import EntityIdGenerator, generate_game
from solardawn.generation import RandomStream

ZERO_SEED = bytes(32)


@pytest.fixture
def id_generator():
    """Fresh EntityIdGenerator at cursor 1."""
    return EntityIdGenerator()


@pytest.fixture
def zero_stream():
    """RandomStream seeded with the all-zero seed."""
    return RandomStream(ZERO_SEED)


@pytest.fixture(scope="module")
def two_player_game():
    """Two-player game from the all-zero seed, with the generator that built it."""
    id_generator = EntityIdGenerator()
    state = generate_game(ZERO_SEED, 2, id_generator)
    return state, id_generator
