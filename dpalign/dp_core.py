"""
dp_core.py — dynamic programming core for pairwise alignment

This module implements one linear-gap DP machine shared by global
(Needleman-Wunsch) and local (Smith-Waterman) alignment.  The two modes
differ only in their FillPolicy: how row 0 / column 0 are initialized
and how each cell value is clamped.  The tie-break between candidate
moves is fixed and mode independent:

    diagonal >= up, diagonal >= left  ->  DIAGONAL
    up >= left                        ->  UP
    otherwise                         ->  LEFT
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Dict, Tuple

import numpy as np
from numpy.typing import NDArray


GAP_CHAR = "-"


# ---------------------------------------------------------------------------
# Moves, scoring and DP storage
# ---------------------------------------------------------------------------

class Move(IntEnum):
    """Recurrence branch that produced a cell's score."""
    DIAGONAL = 0
    UP = 1
    LEFT = 2
    STOP = 3


@dataclass(frozen=True)
class ScoringScheme:
    """
    Scalar linear-gap scoring.

    Attributes
    ----------
    match, mismatch : int
        Score added on a diagonal move for identical / differing characters.
    gap : int
        Score added on every UP or LEFT move.
    """
    match: int
    mismatch: int
    gap: int

    def pair_score(self, a: str, b: str) -> int:
        """Return match if a == b else mismatch."""
        return self.match if a == b else self.mismatch


@dataclass
class DPMatrices:
    """
    Score and move arenas for a single DP run.

    Both grids are stored as flat row-major buffers of size
    n_rows * n_cols; cell (i, j) lives at index i * n_cols + j.

    scores : (n_rows * n_cols,) array of int64
    moves  : (n_rows * n_cols,) array of int8, values from Move
    """
    n_rows: int
    n_cols: int
    scores: NDArray[np.int64]
    moves: NDArray[np.int8]

    @classmethod
    def allocate(cls, n_rows: int, n_cols: int) -> "DPMatrices":
        size = n_rows * n_cols
        return cls(
            n_rows=n_rows,
            n_cols=n_cols,
            scores=np.zeros(size, dtype=np.int64),
            moves=np.full(size, Move.STOP, dtype=np.int8),
        )

    def index(self, i: int, j: int) -> int:
        return i * self.n_cols + j

    def score_at(self, i: int, j: int) -> int:
        return int(self.scores[i * self.n_cols + j])

    def move_at(self, i: int, j: int) -> Move:
        return Move(int(self.moves[i * self.n_cols + j]))

    def set_cell(self, i: int, j: int, score: int, move: Move) -> None:
        k = i * self.n_cols + j
        self.scores[k] = score
        self.moves[k] = move

    def freeze(self) -> Tuple[NDArray[np.int64], NDArray[np.int8]]:
        """
        Lock both buffers and return read-only 2-D views (matrix, trace).
        """
        self.scores.setflags(write=False)
        self.moves.setflags(write=False)
        shape = (self.n_rows, self.n_cols)
        return self.scores.reshape(shape), self.moves.reshape(shape)


# ---------------------------------------------------------------------------
# Fill policies
# ---------------------------------------------------------------------------

def init_global_boundary(data: DPMatrices, scoring: ScoringScheme) -> None:
    """Cumulative gap penalties along row 0 and column 0."""
    for i in range(1, data.n_rows):
        data.set_cell(i, 0, i * scoring.gap, Move.UP)
    for j in range(1, data.n_cols):
        data.set_cell(0, j, j * scoring.gap, Move.LEFT)


def init_local_boundary(data: DPMatrices, scoring: ScoringScheme) -> None:
    """Row 0 and column 0 stay at 0 / STOP, as allocated."""
    return None


def clamp_none(score: int, move: Move) -> Tuple[int, Move]:
    return score, move


def clamp_at_zero(score: int, move: Move) -> Tuple[int, Move]:
    # a zero cell is always a STOP, even if a raw candidate was exactly 0
    if score <= 0:
        return 0, Move.STOP
    return score, move


@dataclass(frozen=True)
class FillPolicy:
    """
    Strategy pair that turns the shared recurrence into a concrete mode.

    Attributes
    ----------
    name : str
        Short mode name ("global" or "local").
    init_boundary : callable
        Fills row 0 and column 0 of a freshly allocated DPMatrices.
    clamp : callable
        Maps the tie-broken (score, move) of an interior cell to the
        stored (score, move).
    local : bool
        If True, traceback starts at the best-scoring cell and stops at
        the first zero cell; otherwise it runs from (n, m) to (0, 0).
    """
    name: str
    init_boundary: Callable[[DPMatrices, ScoringScheme], None]
    clamp: Callable[[int, Move], Tuple[int, Move]]
    local: bool = False


GLOBAL_POLICY = FillPolicy("global", init_global_boundary, clamp_none, local=False)
LOCAL_POLICY = FillPolicy("local", init_local_boundary, clamp_at_zero, local=True)


# ---------------------------------------------------------------------------
# Matrix fill
# ---------------------------------------------------------------------------

def choose_move(diagonal: int, up: int, left: int) -> Tuple[int, Move]:
    """
    Pick the best of the three candidates with the fixed tie-break
    diagonal > up > left.
    """
    if diagonal >= up and diagonal >= left:
        return diagonal, Move.DIAGONAL
    if up >= left:
        return up, Move.UP
    return left, Move.LEFT


@dataclass
class FillOutcome:
    """Filled DP arena plus the best cell seen during the fill."""
    data: DPMatrices
    best_score: int = 0
    best_cell: Tuple[int, int] = (0, 0)


def fill_matrices(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    policy: FillPolicy,
) -> FillOutcome:
    """
    Fill the score and move arenas for seq1 (rows) against seq2 (columns).

    The running maximum is updated with a strict comparison, so among
    equal maxima the first cell in row-major order is kept.  It starts
    at 0 in cell (0, 0).
    """
    n, m = len(seq1), len(seq2)
    data = DPMatrices.allocate(n + 1, m + 1)
    policy.init_boundary(data, scoring)
    outcome = FillOutcome(data=data)

    scores = data.scores
    ncols = data.n_cols
    gap = scoring.gap

    for i in range(1, n + 1):
        a = seq1[i - 1]
        row = i * ncols
        prev = row - ncols
        for j in range(1, m + 1):
            diagonal = int(scores[prev + j - 1]) + scoring.pair_score(a, seq2[j - 1])
            up = int(scores[prev + j]) + gap
            left = int(scores[row + j - 1]) + gap

            score, move = policy.clamp(*choose_move(diagonal, up, left))
            data.set_cell(i, j, score, move)

            if score > outcome.best_score:
                outcome.best_score = score
                outcome.best_cell = (i, j)

    return outcome


# ---------------------------------------------------------------------------
# Traceback
# ---------------------------------------------------------------------------

def traceback_alignment(
    seq1: str,
    seq2: str,
    data: DPMatrices,
    start: Tuple[int, int],
    local: bool,
) -> Tuple[str, str, Tuple[Tuple[int, int], ...]]:
    """
    Walk the move arena backwards from `start`.

    Global traceback continues until (0, 0); local traceback continues
    while the current cell score is positive.  In both cases the cell
    where the walk stops is the first entry of the returned path.

    Returns
    -------
    aln1, aln2 : str
        Aligned sequences with GAP_CHAR for gaps.
    path : tuple of (i, j)
        Visited cells from the alignment start to its end.
    """
    aln1 = []
    aln2 = []
    path = []
    i, j = start

    def keep_going(i: int, j: int) -> bool:
        if local:
            return data.score_at(i, j) > 0
        return i > 0 or j > 0

    while keep_going(i, j):
        path.append((i, j))
        move = data.move_at(i, j)
        if move == Move.DIAGONAL:
            aln1.append(seq1[i - 1])
            aln2.append(seq2[j - 1])
            i -= 1
            j -= 1
        elif move == Move.UP:
            aln1.append(seq1[i - 1])
            aln2.append(GAP_CHAR)
            i -= 1
        elif move == Move.LEFT:
            aln1.append(GAP_CHAR)
            aln2.append(seq2[j - 1])
            j -= 1
        else:  # Move.STOP on a positive cell does not occur
            break
    path.append((i, j))

    aln1.reverse()
    aln2.reverse()
    path.reverse()
    return "".join(aln1), "".join(aln2), tuple(path)


def calculate_identity(aln1: str, aln2: str) -> float:
    """
    Percentage of alignment columns holding the same non-gap character.
    Returns 0.0 for an empty alignment.
    """
    if len(aln1) == 0:
        return 0.0
    matches = sum(1 for a, b in zip(aln1, aln2) if a == b and a != GAP_CHAR)
    return 100.0 * matches / len(aln1)


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class AlignmentResult:
    """
    Immutable output of a single alignment run.

    Attributes
    ----------
    aligned_seq1, aligned_seq2 : str
        Equal-length aligned strings, '-' marking gaps.
    score : int
        Global mode: matrix[n, m].  Local mode: best cell value.
    identity : float
        Percent identity of the aligned strings, in [0, 100].
    matrix : (n+1, m+1) read-only array of int64
        DP score matrix.
    trace : (n+1, m+1) read-only array of int8
        Move matrix with values from Move.
    path : tuple of (i, j)
        Traceback path from the alignment start cell to its end cell.
    seq1, seq2 : str
        The normalized input sequences.
    scoring : ScoringScheme
        Scoring used for this run.
    mode : str
        Name of the fill policy ("global" or "local").
    """
    aligned_seq1: str
    aligned_seq2: str
    score: int
    identity: float
    matrix: NDArray[np.int64] = field(repr=False)
    trace: NDArray[np.int8] = field(repr=False)
    path: Tuple[Tuple[int, int], ...]
    seq1: str
    seq2: str
    scoring: ScoringScheme
    mode: str = "global"

    @property
    def length(self) -> int:
        """Alignment length (number of columns)."""
        return len(self.aligned_seq1)

    @property
    def start_cell(self) -> Tuple[int, int]:
        return self.path[0]

    @property
    def end_cell(self) -> Tuple[int, int]:
        return self.path[-1]

    def to_tuple(self) -> Tuple[int, str, str, Tuple[Tuple[int, int], ...]]:
        """(score, aligned_seq1, aligned_seq2, path)"""
        return (self.score, self.aligned_seq1, self.aligned_seq2, self.path)


# ---------------------------------------------------------------------------
# Per-cell explanation
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CellUpdate:
    """
    Breakdown of how an interior cell (i, j) got its value.

    candidates maps "diagonal", "up", "left" to the raw candidate scores;
    pair_score is the match/mismatch term added on the diagonal.
    """
    i: int
    j: int
    pair_score: int
    candidates: Dict[str, int]
    score: int
    move: Move


def explain_cell(result: AlignmentResult, i: int, j: int) -> CellUpdate:
    """
    Recompute the candidates for cell (i, j) of a finished alignment.
    """
    n, m = len(result.seq1), len(result.seq2)
    if not (1 <= i <= n and 1 <= j <= m):
        raise ValueError(f"Cell ({i}, {j}) must satisfy 1 <= i <= {n} and 1 <= j <= {m}")

    M = result.matrix
    pair = result.scoring.pair_score(result.seq1[i - 1], result.seq2[j - 1])
    candidates = {
        "diagonal": int(M[i - 1, j - 1]) + pair,
        "up": int(M[i - 1, j]) + result.scoring.gap,
        "left": int(M[i, j - 1]) + result.scoring.gap,
    }
    return CellUpdate(
        i=i,
        j=j,
        pair_score=pair,
        candidates=candidates,
        score=int(M[i, j]),
        move=Move(int(result.trace[i, j])),
    )


# ---------------------------------------------------------------------------
# Top-level driver
# ---------------------------------------------------------------------------

def run_dp(
    seq1: str,
    seq2: str,
    scoring: ScoringScheme,
    policy: FillPolicy,
) -> AlignmentResult:
    """
    Fill, trace back and package one alignment under the given policy.
    """
    outcome = fill_matrices(seq1, seq2, scoring, policy)
    data = outcome.data

    if policy.local:
        start = outcome.best_cell
        score = outcome.best_score
    else:
        start = (len(seq1), len(seq2))
        score = data.score_at(*start)

    aln1, aln2, path = traceback_alignment(seq1, seq2, data, start, policy.local)
    matrix, trace = data.freeze()

    return AlignmentResult(
        aligned_seq1=aln1,
        aligned_seq2=aln2,
        score=score,
        identity=calculate_identity(aln1, aln2),
        matrix=matrix,
        trace=trace,
        path=path,
        seq1=seq1,
        seq2=seq2,
        scoring=scoring,
        mode=policy.name,
    )
