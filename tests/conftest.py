"""Shared pytest fixtures for the fire engine tests.

Deterministic decay sources stand in for ``RandomDecay`` so ``step()``
produces exact, checkable grids.
"""

import pytest

from doomfire.core import FireGrid, RandomDecay


# ============================================================================
# Decay sources
# ============================================================================

class ConstantDecay:
    """Always returns the same decay."""

    def __init__(self, decay):
        self.decay = decay
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.decay


class ScriptedDecay:
    """Returns decays from a list, in order."""

    def __init__(self, decays):
        self.decays = list(decays)

    def __call__(self):
        return self.decays.pop(0)


@pytest.fixture
def constant_decay():
    return ConstantDecay


@pytest.fixture
def scripted_decay():
    return ScriptedDecay


# ============================================================================
# Grid fixtures
# ============================================================================

@pytest.fixture
def tiny_grid():
    """3x3 px viewport with 2 px cells: a 2x2 cell grid."""
    return FireGrid(3, 3, 2, decay_source=ConstantDecay(1))


@pytest.fixture
def seeded_grid():
    """10x7 cell grid, seeded, with a reproducible random decay source."""
    grid = FireGrid(37, 25, 4, decay_source=RandomDecay(seed=1234))
    grid.seed()
    return grid
