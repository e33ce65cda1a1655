"""
export.py — text, CSV and image exports of an AlignmentResult

All functions here only read the result; none of them feed anything
back into the DP core.

  - format_report / write_report       : plain-text summary.
  - summary_table / alignment_table    : pandas DataFrames.
  - write_csv                          : summary + column table in one CSV.
  - matrix_table / write_matrix_csv    : labelled DP score matrix.
  - save_matrix_image                  : heatmap via dpalign.plot.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Union

import pandas as pd

from .aligners import AlignmentMode
from .dp_core import GAP_CHAR, AlignmentResult

PathLike = Union[str, Path]

MATCH_MARK = "|"
NO_MARK = " "


def match_line(aln1: str, aln2: str) -> str:
    """'|' under identical non-gap columns, ' ' elsewhere."""
    return "".join(
        MATCH_MARK if a == b and a != GAP_CHAR else NO_MARK
        for a, b in zip(aln1, aln2)
    )


def mode_label(result: AlignmentResult) -> str:
    return AlignmentMode(result.mode).label


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def format_report(result: AlignmentResult) -> str:
    """
    Render the alignment summary and aligned sequences as plain text.
    """
    lines = [
        "Alignment Result",
        "================",
        f"Algorithm: {mode_label(result)}",
        f"Score: {result.score}",
        f"Identity: {result.identity:.2f}%",
        f"Length: {result.length}",
        "",
        f"Seq1: {result.aligned_seq1}",
        f"      {match_line(result.aligned_seq1, result.aligned_seq2)}",
        f"Seq2: {result.aligned_seq2}",
    ]
    return "\n".join(lines) + "\n"


def write_report(result: AlignmentResult, path: PathLike) -> Path:
    path = Path(path)
    path.write_text(format_report(result), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

def summary_table(result: AlignmentResult) -> pd.DataFrame:
    """Parameter/Value table with algorithm, score, identity and length."""
    return pd.DataFrame(
        {
            "Parameter": ["Algorithm", "Score", "Identity (%)", "Length"],
            "Value": [
                mode_label(result),
                str(result.score),
                f"{result.identity:.2f}",
                str(result.length),
            ],
        }
    )


def alignment_table(result: AlignmentResult) -> pd.DataFrame:
    """One row per alignment column: 1-based index, both residues, match mark."""
    aln1, aln2 = result.aligned_seq1, result.aligned_seq2
    return pd.DataFrame(
        {
            "Index": range(1, len(aln1) + 1),
            "Sequence 1": list(aln1),
            "Match": list(match_line(aln1, aln2)),
            "Sequence 2": list(aln2),
        }
    )


def write_csv(result: AlignmentResult, path: PathLike) -> Path:
    """
    Write the summary table, a blank line and the alignment table to
    one CSV file with every field quoted.
    """
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as fh:
        summary_table(result).to_csv(
            fh, index=False, quoting=csv.QUOTE_ALL, lineterminator="\r\n"
        )
        fh.write("\r\n")
        alignment_table(result).to_csv(
            fh, index=False, quoting=csv.QUOTE_ALL, lineterminator="\r\n"
        )
    return path


def matrix_table(result: AlignmentResult) -> pd.DataFrame:
    """
    DP score matrix as a DataFrame.  Row labels are '-' followed by seq1,
    column labels '-' followed by seq2; labels may repeat.
    """
    return pd.DataFrame(
        result.matrix,
        index=[GAP_CHAR] + list(result.seq1),
        columns=[GAP_CHAR] + list(result.seq2),
    )


def write_matrix_csv(result: AlignmentResult, path: PathLike) -> Path:
    path = Path(path)
    matrix_table(result).to_csv(path)
    return path


# ---------------------------------------------------------------------------
# Image
# ---------------------------------------------------------------------------

def save_matrix_image(
    result: AlignmentResult,
    path: PathLike,
    dpi: int = 150,
    **plot_kwargs,
) -> Path:
    """
    Draw the score matrix with its traceback path and save it to `path`.
    The format follows the file suffix (png, pdf, svg, ...).
    """
    import matplotlib.pyplot as plt
    from .plot.matrix import plot_alignment_matrix

    path = Path(path)
    fig = plot_alignment_matrix(result, **plot_kwargs)
    try:
        fig.savefig(path, dpi=dpi, bbox_inches="tight", facecolor="white")
    finally:
        plt.close(fig)
    return path
