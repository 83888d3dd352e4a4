"""Shared test helpers."""

import numpy as np
import pytest


class FixedRandom:
    """Random source that always returns the same value."""
    
    def __init__(self, value: float):
        self.value = value
        self.calls = 0
    
    def random(self, size=None):
        self.calls += 1
        if size is None:
            return self.value
        return np.full(size, self.value)


@pytest.fixture
def fixed_random():
    return FixedRandom
