"""
Shared utilities for dpalign plotting functions.

This module contains helper functions used across multiple plotting modules:
- Arrow drawing helpers
- Node drawing helpers
- Residue label coloring
- Traceback path coloring
"""

import numpy as np
from typing import Dict, Iterable, Optional, Tuple
import matplotlib.pyplot as plt
from matplotlib.patches import FancyArrowPatch, Circle

from ..dp_core import AlignmentResult, Move
from .colors import NT_COLOR, NODE_COLORS, PATH_COLORS


# =============================================================================
# ARROW DRAWING HELPERS
# =============================================================================

def _shortened_endpoints(
    p0: Tuple[float, float],
    p1: Tuple[float, float],
    shrink: float,
) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    x0, y0 = p0
    x1, y1 = p1
    v = np.array([x1 - x0, y1 - y0], dtype=float)
    L = np.linalg.norm(v) if np.linalg.norm(v) > 0 else 1.0
    start = (x0 + v[0] * (shrink / L), y0 + v[1] * (shrink / L))
    end = (x1 - v[0] * (shrink / L), y1 - v[1] * (shrink / L))
    return start, end


def draw_shortened_arrow(
    ax: plt.Axes,
    p0: Tuple[float, float],
    p1: Tuple[float, float],
    color: str,
    node_radius: float,
    edge_shrink_factor: float = 1.2,
    mutation_scale: float = 10.0,
    linewidth: float = 1.0,
    alpha: float = 0.7,
    zorder: int = 2,
) -> FancyArrowPatch:
    """
    Draw an arrow between two points, shortened to avoid overlapping nodes.

    Parameters
    ----------
    ax : matplotlib Axes
        Axes to draw on
    p0, p1 : tuple
        Start and end coordinates
    color : str
        Arrow color
    node_radius : float
        Radius of nodes (shrink = node_radius * edge_shrink_factor)

    Returns
    -------
    arrow : FancyArrowPatch
        The created arrow patch
    """
    start, end = _shortened_endpoints(p0, p1, node_radius * edge_shrink_factor)
    arrow = FancyArrowPatch(
        start, end,
        arrowstyle="->",
        mutation_scale=mutation_scale,
        linewidth=linewidth,
        color=color,
        alpha=alpha,
        zorder=zorder,
    )
    ax.add_patch(arrow)
    return arrow


def draw_highlighted_edge(
    ax: plt.Axes,
    p0: Tuple[float, float],
    p1: Tuple[float, float],
    color: str,
    node_radius: float,
    edge_shrink_factor: float = 1.2,
    mutation_scale: float = 12.0,
    score: Optional[float] = None,
    score_fontsize: int = 8,
) -> FancyArrowPatch:
    """
    Draw a bold edge with an optional score label at its midpoint.
    """
    arrow = draw_shortened_arrow(
        ax, p0, p1, color, node_radius,
        edge_shrink_factor=edge_shrink_factor,
        mutation_scale=mutation_scale,
        linewidth=2.5,
        alpha=0.9,
        zorder=3,
    )
    if score is not None:
        midx, midy = (p0[0] + p1[0]) / 2, (p0[1] + p1[1]) / 2
        ax.text(midx, midy, f"{int(score)}", ha="center", va="center",
                fontsize=score_fontsize, color="black", fontweight="bold",
                bbox=dict(boxstyle="round,pad=0.15", fc="white", ec="none", alpha=0.8))
    return arrow


# =============================================================================
# NODE DRAWING HELPERS
# =============================================================================

def draw_node_with_score(
    ax: plt.Axes,
    x: float,
    y: float,
    score: Optional[float],
    node_radius: float = 0.25,
    facecolor: str = NODE_COLORS["face"],
    edgecolor: str = NODE_COLORS["edge"],
    linewidth: float = 2.0,
    alpha: float = 0.8,
    fontsize: int = 9,
) -> None:
    """
    Draw a filled node, labelled with its score unless score is None.
    """
    circ = Circle(
        (x, y), radius=node_radius * 0.9,
        facecolor=facecolor, edgecolor=edgecolor,
        linewidth=linewidth, alpha=alpha
    )
    ax.add_patch(circ)
    if score is not None:
        ax.text(x, y, str(int(score)), ha="center", va="center",
                fontsize=fontsize, fontweight="bold")


# =============================================================================
# LABELS AND PATH COLORS
# =============================================================================

def color_tick_labels(
    ticks: Iterable,
    labels: Iterable[str],
    nt_color_map: Optional[Dict[str, str]] = None,
    fontsize: float = 10.0,
) -> None:
    """Color residue tick labels and set them upright and bold."""
    if nt_color_map is None:
        nt_color_map = NT_COLOR
    for tick, lab in zip(ticks, labels):
        tick.set_rotation(0)
        tick.set_va("center")
        tick.set_color(nt_color_map.get(lab, "black"))
        tick.set_fontweight("bold")
        tick.set_fontsize(fontsize)


def path_cell_color(result: AlignmentResult, i: int, j: int) -> str:
    """
    Outline color for a traceback cell.

    The zero cell that ends a local traceback is gray; otherwise the
    recorded move decides: diagonal cells are green for a match and red
    for a mismatch, gap moves are blue.
    """
    if result.mode == "local" and (i, j) == result.path[0]:
        return PATH_COLORS["stop"]
    move = Move(int(result.trace[i, j]))
    if move == Move.DIAGONAL:
        if result.seq1[i - 1] == result.seq2[j - 1]:
            return PATH_COLORS["match"]
        return PATH_COLORS["mismatch"]
    if move == Move.STOP:
        return PATH_COLORS["stop"]
    return PATH_COLORS["gap"]
