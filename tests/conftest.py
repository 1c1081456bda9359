import pytest


class LowRng:
    """Deterministic stand-in for random.Random: always the lowest option."""

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]

    def shuffle(self, seq):
        pass


class HighRng(LowRng):
    def randint(self, a, b):
        return b

    def choice(self, seq):
        return seq[-1]


@pytest.fixture
def low_rng():
    return LowRng()


@pytest.fixture
def high_rng():
    return HighRng()
