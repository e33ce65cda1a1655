"""
aligners.py — User-facing alignment helpers for dpalign

Each function picks the FillPolicy for its mode, runs the shared DP
core and returns an AlignmentResult.  None of them change the scoring
or the tie-break: global and local alignment differ only in boundary
initialization, clamping and the traceback start/stop rule.

align_sequences() is the request-level entry point: it normalizes raw
text and rejects empty sequences before the engine is invoked.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from .default import DEFAULT_SCORING, LARGE_MATRIX_CELLS
from .dp_core import (
    GLOBAL_POLICY,
    LOCAL_POLICY,
    AlignmentResult,
    ScoringScheme,
    run_dp,
)
from .sequences import normalize_sequence

LOG = logging.getLogger("dpalign.aligners")


class AlignmentMode(str, Enum):
    """Which DP policy to run."""
    GLOBAL = "global"
    LOCAL = "local"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]


_MODE_LABELS = {
    AlignmentMode.GLOBAL: "Needleman-Wunsch (Global)",
    AlignmentMode.LOCAL: "Smith-Waterman (Local)",
}

_POLICIES = {
    AlignmentMode.GLOBAL: GLOBAL_POLICY,
    AlignmentMode.LOCAL: LOCAL_POLICY,
}


class EmptySequenceError(ValueError):
    """Raised when a sequence is empty after normalization."""


def resolve_mode(mode: Union[AlignmentMode, str]) -> AlignmentMode:
    """Accept an AlignmentMode or its string value ("global"/"local")."""
    try:
        return AlignmentMode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown mode: {mode!r} (expected 'global' or 'local')"
        ) from None


# ---------------------------------------------------------------------------
# Engine entry points
# ---------------------------------------------------------------------------

def align(
    seq1: str,
    seq2: str,
    scoring: Optional[ScoringScheme] = None,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
) -> AlignmentResult:
    """
    Align two normalized sequences.

    Parameters
    ----------
    seq1, seq2 : str
        Normalized sequences; seq1 indexes rows, seq2 columns.
    scoring : ScoringScheme, optional
        Match/mismatch/gap scores.  Defaults to DEFAULT_SCORING.
    mode : AlignmentMode or str
        "global" (Needleman-Wunsch) or "local" (Smith-Waterman).

    Returns
    -------
    AlignmentResult
        Aligned strings, score, identity, score/move matrices and path.
    """
    mode = resolve_mode(mode)
    if scoring is None:
        scoring = DEFAULT_SCORING

    cells = (len(seq1) + 1) * (len(seq2) + 1)
    if cells > LARGE_MATRIX_CELLS:
        LOG.warning("%s alignment will fill %d cells.", mode.value, cells)
    LOG.debug("%s alignment: %d x %d matrix", mode.value, len(seq1) + 1, len(seq2) + 1)

    result = run_dp(seq1, seq2, scoring, _POLICIES[mode])

    LOG.info(
        "%s alignment done: score=%d identity=%.2f%% length=%d",
        mode.value, result.score, result.identity, result.length,
    )
    return result


def needleman_wunsch(
    seq1: str,
    seq2: str,
    scoring: Optional[ScoringScheme] = None,
) -> AlignmentResult:
    """Global alignment spanning both sequences end to end."""
    return align(seq1, seq2, scoring=scoring, mode=AlignmentMode.GLOBAL)


def smith_waterman(
    seq1: str,
    seq2: str,
    scoring: Optional[ScoringScheme] = None,
) -> AlignmentResult:
    """Local alignment of the best-scoring pair of substrings."""
    return align(seq1, seq2, scoring=scoring, mode=AlignmentMode.LOCAL)


# ---------------------------------------------------------------------------
# Request-level helper
# ---------------------------------------------------------------------------

def align_sequences(
    raw1: str,
    raw2: str,
    scoring: Optional[ScoringScheme] = None,
    mode: Union[AlignmentMode, str] = AlignmentMode.GLOBAL,
    fasta: Optional[bool] = None,
) -> AlignmentResult:
    """
    Normalize two raw inputs and align them.

    Raises
    ------
    EmptySequenceError
        If either input is empty after normalization.
    """
    seq1 = normalize_sequence(raw1, fasta=fasta)
    seq2 = normalize_sequence(raw2, fasta=fasta)
    if not seq1 or not seq2:
        raise EmptySequenceError("Both sequences must not be empty.")
    return align(seq1, seq2, scoring=scoring, mode=mode)
