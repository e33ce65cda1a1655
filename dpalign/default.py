"""
default.py — Default parameters for dpalign

Provides the standard +1/-1/-2 linear scoring scheme, the gap
character and a few named example sequence pairs that are used
throughout the CLI, examples and tests.
"""

from .dp_core import GAP_CHAR, ScoringScheme

# DNA alphabet
DNA_BASES = ("A", "C", "G", "T")

# Scalar scoring
DEFAULT_MATCH = 1
DEFAULT_MISMATCH = -1
DEFAULT_GAP = -2

DEFAULT_SCORING = ScoringScheme(
    match=DEFAULT_MATCH,
    mismatch=DEFAULT_MISMATCH,
    gap=DEFAULT_GAP,
)

## Cell count above which the aligners warn before filling
LARGE_MATRIX_CELLS = 25_000_000

# Named example pairs (seq1, seq2)
EXAMPLES = {
    "dna-basic": ("GATTACA", "GCATGCA"),
    "dna-indel": ("AGCTAGCTAGCT", "AGCTAGCT"),
    "protein-hemoglobin": (
        "MVLSPADKTNVKAAWGKVGAHAGEYGAEALE",
        "MVLSEGEWQLVLHVWAKVEADVAGHGQDILIR",
    ),
}

__all__ = [
    "DNA_BASES",
    "GAP_CHAR",
    "DEFAULT_MATCH",
    "DEFAULT_MISMATCH",
    "DEFAULT_GAP",
    "DEFAULT_SCORING",
    "LARGE_MATRIX_CELLS",
    "EXAMPLES",
    "get_default_scoring",
    "get_example",
    "align_params",
]


def get_default_scoring() -> ScoringScheme:
    """Return the default ScoringScheme (+1 match, -1 mismatch, -2 gap)."""
    return DEFAULT_SCORING


def get_example(name: str) -> tuple:
    """
    Look up a named example pair.

    Raises ValueError listing the known names if `name` is unknown.
    """
    try:
        return EXAMPLES[name]
    except KeyError:
        known = ", ".join(sorted(EXAMPLES))
        raise ValueError(f"Unknown example '{name}'; choose one of: {known}") from None


def align_params(*, local: bool = False) -> dict:
    """
    Bundle default scoring parameters into a dict for easy unpacking.

    Parameters:
        local (bool): If True, select local (Smith-Waterman) alignment.

    Usage:
        result = align(seq1, seq2, **align_params(local=True))"""
    return {
        "scoring": DEFAULT_SCORING,
        "mode": "local" if local else "global",
    }
