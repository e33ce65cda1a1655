"""
sequences.py — turning raw text into alignable sequences

  - clean_sequence     : drop non-alphabetic characters and uppercase.
  - parse_fasta        : drop '>' header lines and join the rest.
  - normalize_sequence : FASTA-aware parse followed by cleaning.
  - read_sequence_file : normalize the contents of a (FASTA) file.
  - random_dna         : random ACGT string for demos and tests.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Union

import numpy as np

from .default import DNA_BASES

_NON_ALPHA = re.compile(r"[^A-Za-z]")


def clean_sequence(seq: str) -> str:
    """Remove every non-alphabetic character and uppercase the rest."""
    return _NON_ALPHA.sub("", seq).upper()


def parse_fasta(content: str) -> str:
    """
    Concatenate the sequence lines of FASTA text.

    Lines starting with '>' are headers and are discarded.  All records
    are joined into a single sequence; surrounding whitespace is trimmed.
    """
    lines = [line for line in content.splitlines() if not line.startswith(">")]
    return "".join(lines).strip()


def is_fasta(text: str) -> bool:
    return any(line.startswith(">") for line in text.splitlines())


def normalize_sequence(text: str, fasta: Optional[bool] = None) -> str:
    """
    Normalize raw user text into an uppercase alphabetic sequence.

    Parameters
    ----------
    text : str
        Raw sequence, optionally in FASTA form.
    fasta : bool or None
        Force (True) or skip (False) FASTA header removal.  If None, the
        text is treated as FASTA when any line starts with '>'.
    """
    if fasta is None:
        fasta = is_fasta(text)
    if fasta:
        text = parse_fasta(text)
    return clean_sequence(text)


def read_sequence_file(path: Union[str, Path]) -> str:
    """Read and normalize the sequence stored in a text or FASTA file."""
    content = Path(path).read_text(encoding="utf-8")
    return normalize_sequence(content)


def random_dna(length: int, rng: np.random.Generator) -> str:
    """
    Generate a random DNA string of given length using rng.
    """
    return "".join(rng.choice(np.array(DNA_BASES), size=length))
