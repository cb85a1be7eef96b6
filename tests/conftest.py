# tests/conftest.py
from dataclasses import dataclass

import pytest

from pyprop.Prop import Falsified, Passed, Result
from pyprop.RNG import SimpleRNG


@dataclass(frozen=True)
class FixedRNG:
    """An RNG that always draws the same raw value."""
    value: int

    def next_int(self):
        return self.value, self


def assert_result_eq(res1: Result, res2: Result):
    """
    Compare two property Results, with readable messages on mismatch.
    """
    if isinstance(res1, Passed):
        assert isinstance(res2, Passed), f"Result mismatch: Passed vs {res2}"
    else:
        assert isinstance(res2, Falsified), f"Result mismatch: {res1} vs Passed"
        assert res1.failure == res2.failure
        assert res1.successes == res2.successes


@pytest.fixture
def rng():
    return SimpleRNG(42)


@pytest.fixture
def make_rng():
    def _make(seed):
        return SimpleRNG(seed)

    return _make


@pytest.fixture
def fixed_rng():
    def _make(value):
        return FixedRNG(value)

    return _make
