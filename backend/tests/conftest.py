"""
Test configuration and fixtures for the Tonal palette engine tests.
"""
import random

import pytest


class ScriptedRandom:
    """Random source returning pre-scripted picks, in order."""

    def __init__(self, *picks):
        self.picks = list(picks)
        self.calls = []

    def choice(self, seq):
        pick = self.picks.pop(0)
        assert pick in seq, f"scripted pick {pick!r} not in {seq!r}"
        self.calls.append(tuple(seq))
        return pick


@pytest.fixture
def seeded_rng():
    """Deterministic random.Random instance."""
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom
