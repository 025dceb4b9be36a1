import os

# pygame без окна и звука
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from database import SnakeDatabase
from env import SnakeEnv
from game import SnakeGame


@pytest.fixture
def db():
    database = SnakeDatabase(":memory:")
    yield database
    database.close()


@pytest.fixture
def env():
    return SnakeEnv(20, seed=123)


@pytest.fixture
def game(db):
    return SnakeGame(store=db, grid_size=20, seed=123)


@pytest.fixture
def rng():
    return np.random.default_rng(7)
