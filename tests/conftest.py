"""
Test configuration and fixtures for palettegen tests.
"""
import itertools
import random

import pytest

from palettegen import PaletteGenerator


@pytest.fixture
def seeded_rand():
    """Factory for deterministic uniform [0, 1) generators."""
    def _make(seed: int = 42):
        return random.Random(seed).random
    return _make


@pytest.fixture
def cycle_rand():
    """Factory for generators cycling through fixed values."""
    def _make(*values: float):
        values_iter = itertools.cycle(values)
        return lambda: next(values_iter)
    return _make


@pytest.fixture
def blue_generator(seeded_rand):
    """Generator seeded from #3459c7 with a fixed random sequence."""
    return PaletteGenerator(rand=seeded_rand(7), precision=4, base_color="#3459c7")
