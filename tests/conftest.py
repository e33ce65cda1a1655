"""
conftest.py — Shared pytest fixtures for the dpalign test suite

Provides common scoring schemes, the DNA alphabet, and random
number generators used across all test modules.
"""

import pytest
import numpy as np

from dpalign.dp_core import ScoringScheme
from dpalign.sequences import random_dna


# ---------------------------------------------------------------------------
# Scoring fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def unit_scoring() -> ScoringScheme:
    """+1 match, -1 mismatch, -1 gap."""
    return ScoringScheme(match=1, mismatch=-1, gap=-1)


@pytest.fixture
def default_scoring() -> ScoringScheme:
    """Package defaults: +1 match, -1 mismatch, -2 gap."""
    return ScoringScheme(match=1, mismatch=-1, gap=-2)


SCORING_VARIANTS = [
    # (name, match, mismatch, gap)
    ("unit", 1, -1, -1),
    ("default", 1, -1, -2),
    ("strong_match", 5, -4, -3),
    ("cheap_gaps", 2, -3, -1),
    ("positive_gap", 1, -1, 1),
]


@pytest.fixture(params=SCORING_VARIANTS, ids=[v[0] for v in SCORING_VARIANTS])
def any_scoring(request) -> ScoringScheme:
    """Parametrized fixture running a test under several scoring schemes."""
    _, match, mismatch, gap = request.param
    return ScoringScheme(match=match, mismatch=mismatch, gap=gap)


# ---------------------------------------------------------------------------
# Random number generator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def rng():
    """Seeded random generator for reproducible tests."""
    return np.random.default_rng(888)


@pytest.fixture
def rng_alt():
    """Alternative seed for diversity in randomized tests."""
    return np.random.default_rng(123)


# ---------------------------------------------------------------------------
# Sequence generation helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def random_dna_factory():
    """Factory fixture returning a function to generate random DNA strings."""
    def _random_dna(length: int, rng: np.random.Generator) -> str:
        return random_dna(length, rng)
    return _random_dna
