"""
validation.py — independent baselines and consistency checks for dpalign

This module reimplements the global and local linear-gap scores with
plain Python lists (nw_score_naive, sw_score_naive) and provides
helpers that recompute derived quantities from an AlignmentResult:

  1. the alignment score from the aligned strings,
  2. the percent identity from the aligned strings,
  3. the traceback path by replaying the move matrix,
  4. the aligned strings from the path.

It does not import dp_core internals beyond the result containers, so
that bugs in the DP core cannot mask each other during testing.
"""

from typing import List, Tuple

from .dp_core import GAP_CHAR, AlignmentResult, Move, ScoringScheme


# ---------------------------------------------------------------------------
# Naive score baselines
# ---------------------------------------------------------------------------

def nw_score_naive(seq1: str, seq2: str, scoring: ScoringScheme) -> int:
    """
    Standard global Needleman-Wunsch score with linear gaps.
    """
    n, m = len(seq1), len(seq2)
    F = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        F[i][0] = i * scoring.gap
    for j in range(1, m + 1):
        F[0][j] = j * scoring.gap

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            s = scoring.match if seq1[i - 1] == seq2[j - 1] else scoring.mismatch
            F[i][j] = max(
                F[i - 1][j - 1] + s,
                F[i - 1][j] + scoring.gap,
                F[i][j - 1] + scoring.gap,
            )
    return F[n][m]


def sw_score_naive(seq1: str, seq2: str, scoring: ScoringScheme) -> int:
    """
    Standard local Smith-Waterman score with linear gaps.
    """
    n, m = len(seq1), len(seq2)
    H = [[0] * (m + 1) for _ in range(n + 1)]
    best = 0
    for i in range(1, n + 1):
        for j in range(1, m + 1):
            s = scoring.match if seq1[i - 1] == seq2[j - 1] else scoring.mismatch
            H[i][j] = max(
                0,
                H[i - 1][j - 1] + s,
                H[i - 1][j] + scoring.gap,
                H[i][j - 1] + scoring.gap,
            )
            best = max(best, H[i][j])
    return best


# ---------------------------------------------------------------------------
# Recomputation from a result
# ---------------------------------------------------------------------------

def score_alignment(aln1: str, aln2: str, scoring: ScoringScheme) -> int:
    """Score two aligned strings column by column."""
    total = 0
    for a, b in zip(aln1, aln2):
        if a == GAP_CHAR or b == GAP_CHAR:
            total += scoring.gap
        else:
            total += scoring.match if a == b else scoring.mismatch
    return total


def recompute_identity(aln1: str, aln2: str) -> float:
    """Percent of columns with identical non-gap characters."""
    if not aln1:
        return 0.0
    matches = 0
    for a, b in zip(aln1, aln2):
        if a == b and a != GAP_CHAR:
            matches += 1
    return 100.0 * matches / len(aln1)


def traceback_start(result: AlignmentResult) -> Tuple[int, int]:
    """
    Cell where the traceback must begin, derived from the matrix alone.

    Global: (n, m).  Local: the first maximum in row-major order, or
    (0, 0) when no cell is positive.
    """
    n, m = len(result.seq1), len(result.seq2)
    if result.mode != "local":
        return (n, m)
    best, cell = 0, (0, 0)
    for i in range(n + 1):
        for j in range(m + 1):
            if result.matrix[i, j] > best:
                best, cell = int(result.matrix[i, j]), (i, j)
    return cell


def replay_trace(result: AlignmentResult) -> List[Tuple[int, int]]:
    """
    Follow result.trace from traceback_start() and return the visited
    cells in start-to-end order.

    The walk ends at (0, 0) in global mode and at the first zero-score
    cell in local mode.
    """
    trace = result.trace
    matrix = result.matrix
    i, j = traceback_start(result)
    local = result.mode == "local"
    visited = []

    while (matrix[i, j] > 0) if local else (i > 0 or j > 0):
        visited.append((i, j))
        move = Move(int(trace[i, j]))
        if move == Move.DIAGONAL:
            i, j = i - 1, j - 1
        elif move == Move.UP:
            i -= 1
        elif move == Move.LEFT:
            j -= 1
        else:
            break
    visited.append((int(i), int(j)))
    visited.reverse()
    return visited


def path_to_alignment(seq1: str, seq2: str, path) -> Tuple[str, str]:
    """
    Convert a start-to-end path of (i, j) cells to aligned sequences.
    """
    align1, align2 = [], []
    for (i_prev, j_prev), (i_curr, j_curr) in zip(path, path[1:]):
        di, dj = i_curr - i_prev, j_curr - j_prev
        if di == 1 and dj == 1:
            align1.append(seq1[i_prev])
            align2.append(seq2[j_prev])
        elif di == 1 and dj == 0:
            align1.append(seq1[i_prev])
            align2.append(GAP_CHAR)
        elif di == 0 and dj == 1:
            align1.append(GAP_CHAR)
            align2.append(seq2[j_prev])
    return "".join(align1), "".join(align2)


# ---------------------------------------------------------------------------
# Combined check
# ---------------------------------------------------------------------------

def check_alignment_validity(result: AlignmentResult) -> Tuple[bool, str]:
    """
    Check an AlignmentResult against its own derived quantities.

    Verifies that:
    - matrix and trace have shape (n+1, m+1) and trace[0, 0] is STOP,
    - the aligned strings have the same length and no double gaps,
    - the path ends at the cell the traceback must start from ((n, m) or
      the first local maximum) and replays from trace,
    - the aligned strings rebuilt from the path match the stored ones,
    - the score recomputed from the aligned strings matches result.score,
    - identity recomputed from the aligned strings matches exactly.

    Returns
    -------
    valid : bool
        True if all checks pass.
    message : str
        Description of what was checked or what failed.
    """
    shape = (len(result.seq1) + 1, len(result.seq2) + 1)
    if result.matrix.shape != shape or result.trace.shape != shape:
        return False, f"Shape mismatch: matrix={result.matrix.shape}, trace={result.trace.shape}, expected {shape}"
    if result.trace[0, 0] != Move.STOP:
        return False, "trace[0, 0] is not STOP"

    aln1, aln2 = result.aligned_seq1, result.aligned_seq2
    if len(aln1) != len(aln2):
        return False, f"Length mismatch: aln1={len(aln1)}, aln2={len(aln2)}"
    for k, (a, b) in enumerate(zip(aln1, aln2)):
        if a == GAP_CHAR and b == GAP_CHAR:
            return False, f"Double gap found in alignment at position {k}"

    if len(result.path) != len(aln1) + 1:
        return False, f"Path has {len(result.path)} cells for alignment length {len(aln1)}"
    start = traceback_start(result)
    if result.path[-1] != start:
        return False, f"Path ends at {result.path[-1]}, traceback must start at {start}"
    if replay_trace(result) != list(result.path):
        return False, "Replaying trace does not reproduce the stored path"
    if path_to_alignment(result.seq1, result.seq2, result.path) != (aln1, aln2):
        return False, "Aligned strings do not follow the stored path"

    computed_score = score_alignment(aln1, aln2, result.scoring)
    if computed_score != result.score:
        return False, f"Score mismatch: computed {computed_score}, reported {result.score}"

    identity = recompute_identity(aln1, aln2)
    if identity != result.identity:
        return False, f"Identity mismatch: computed {identity}, reported {result.identity}"
    if not 0.0 <= result.identity <= 100.0:
        return False, f"Identity out of range: {result.identity}"

    return True, f"Valid alignment of length {len(aln1)}"
