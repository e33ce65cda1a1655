"""
Single-cell update view for dpalign.

Shows how one interior cell (i, j) of a finished alignment got its
value: the three predecessor nodes, the candidate score along each
incoming edge, and the chosen move.  In local mode a STOP candidate
(value 0) is listed as well.
"""

from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt

from ..dp_core import AlignmentResult, CellUpdate, Move, explain_cell
from .colors import CANDIDATE_COLOR, CHOSEN_COLOR, NODE_COLORS
from .utils import draw_highlighted_edge, draw_node_with_score, draw_shortened_arrow

_MOVE_KEYS = {
    Move.DIAGONAL: "diagonal",
    Move.UP: "up",
    Move.LEFT: "left",
}


def plot_cell_update(
    result: AlignmentResult,
    i: int,
    j: int,
    ax: Optional[plt.Axes] = None,
    figsize: Tuple[float, float] = (4.5, 4.5),
    node_radius: float = 0.22,
) -> Tuple[plt.Figure, CellUpdate]:
    """
    Draw the 2x2 neighbourhood of cell (i, j) with its candidate edges.

    Returns
    -------
    fig : matplotlib.figure.Figure
    update : CellUpdate
        The candidate breakdown that was drawn.
    """
    update = explain_cell(result, i, j)
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    M = result.matrix
    # screen coordinates: column -> x, row -> -y
    nodes = {
        "diagonal": ((0.0, 1.0), (i - 1, j - 1)),
        "up": ((1.0, 1.0), (i - 1, j)),
        "left": ((0.0, 0.0), (i, j - 1)),
    }
    target = (1.0, 0.0)
    chosen = _MOVE_KEYS.get(update.move)

    for key, (xy, (pi, pj)) in nodes.items():
        draw_node_with_score(ax, xy[0], xy[1], M[pi, pj], node_radius=node_radius)
        if key == chosen:
            draw_highlighted_edge(ax, xy, target, CHOSEN_COLOR, node_radius,
                                  score=update.candidates[key])
        else:
            draw_shortened_arrow(ax, xy, target, CANDIDATE_COLOR, node_radius,
                                 linewidth=1.2, alpha=0.6)
            ax.text((xy[0] + target[0]) / 2, (xy[1] + target[1]) / 2,
                    str(update.candidates[key]), ha="center", va="center",
                    fontsize=8, color=CANDIDATE_COLOR)

    draw_node_with_score(ax, target[0], target[1], update.score,
                         node_radius=node_radius,
                         edgecolor=CHOSEN_COLOR)

    a, b = result.seq1[i - 1], result.seq2[j - 1]
    lines = [
        f"diag: {M[i - 1, j - 1]} + ({a}/{b} -> {update.pair_score}) = {update.candidates['diagonal']}",
        f"up:   {M[i - 1, j]} + ({result.scoring.gap}) = {update.candidates['up']}",
        f"left: {M[i, j - 1]} + ({result.scoring.gap}) = {update.candidates['left']}",
    ]
    if result.mode == "local":
        mark = " <" if update.move == Move.STOP else ""
        lines.append(f"stop: 0{mark}")
    ax.text(0.5, -0.55, "\n".join(lines), ha="center", va="top",
            family="monospace", fontsize=8,
            color=NODE_COLORS["empty_edge"])

    ax.set_xlim(-0.5, 1.5)
    ax.set_ylim(-1.4, 1.5)
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Cell ({i}, {j}): {update.move.name}")
    return fig, update
