import numpy as np
import pytest

from score import ScoreTracker


class MemoryStore:
    def __init__(self, value=None):
        self.value = value
        self.writes = []

    def read(self):
        return self.value

    def write(self, value):
        self.writes.append(value)
        self.value = value


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def tracker(store):
    return ScoreTracker(store)
