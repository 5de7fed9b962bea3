"""Shared pytest fixtures and helpers for all tests."""

from collections import deque

import pytest

from toclickornot.engine.catalog import SituationCatalog
from toclickornot.models.situation import SituationTemplate


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "webapp: marks webapp-specific tests"
    )


class ScriptedRandom:
    """Random source that replays scripted values.

    random() pops the next scripted float; randint() pops the next scripted
    int (or returns the lower bound when none are left); sample() and
    choice() take from the front of the population.
    """

    def __init__(self, floats=(), ints=()):
        self.floats = deque(floats)
        self.ints = deque(ints)

    def random(self):
        return self.floats.popleft()

    def randint(self, a, b):
        if self.ints:
            value = self.ints.popleft()
            assert a <= value <= b, f"scripted {value} outside [{a}, {b}]"
            return value
        return a

    def sample(self, population, k):
        return list(population)[:k]

    def choice(self, seq):
        return seq[0]


def fixed_catalog(effects=None, round_event_effects=None):
    """Catalog that always draws the same situation and round event."""
    return SituationCatalog(
        core=[],
        templates=[SituationTemplate(message="Same old day.", effects=effects or {})],
        round_events=[
            SituationTemplate(message="Another round.", effects=round_event_effects or {})
        ],
    )


@pytest.fixture
def make_catalog():
    """Factory for catalogs with fixed situation and round event effects."""
    return fixed_catalog


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom sources."""
    return ScriptedRandom


@pytest.fixture
def neutral_catalog():
    """Catalog whose situations never change any stat."""
    return fixed_catalog()


@pytest.fixture
def sample_stats():
    """Provide a default stat vector for testing."""
    from toclickornot.models.stats import StatVector
    return StatVector()


@pytest.fixture
def sample_session_state():
    """Provide a fresh session state for testing."""
    from toclickornot.models.session import GameSessionState
    return GameSessionState()
