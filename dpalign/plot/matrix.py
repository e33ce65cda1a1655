"""
DP matrix visualization for dpalign.

This module contains functions for visualizing the DP score matrix
as a heatmap with the traceback path overlaid, and the move matrix as
a grid of arrows.

Functions:
    - plot_alignment_matrix: score heatmap with colored path outlines
    - plot_trace_matrix: move matrix drawn as arrow glyphs
    - visualize_alignment_matrices: both panels side by side
"""

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.colors import ListedColormap
from matplotlib.patches import Rectangle
from typing import Dict, Optional, Tuple

from ..dp_core import GAP_CHAR, AlignmentResult, Move
from .colors import HEATMAP_COLORMAPS, PATH_COLORS
from .utils import color_tick_labels, path_cell_color

grid_color_map = HEATMAP_COLORMAPS['default']

MOVE_GLYPHS = {
    Move.DIAGONAL: "↖",
    Move.UP: "↑",
    Move.LEFT: "←",
    Move.STOP: "•",
}


def _default_figsize(result: AlignmentResult) -> Tuple[float, float]:
    n_rows, n_cols = result.matrix.shape
    return (max(4.0, 0.55 * n_cols + 1.5), max(3.0, 0.55 * n_rows + 1.0))


def _label_axes(
    ax: plt.Axes,
    xticklabels,
    yticklabels,
    nt_color_map: Optional[Dict[str, str]],
    tick_fontsize: float,
) -> None:
    ax.set_xlabel("Sequence 2")
    ax.set_ylabel("Sequence 1")
    ax.tick_params(top=True, bottom=False, labeltop=True, labelbottom=False)
    ax.xaxis.set_label_position("top")
    color_tick_labels(ax.get_xticklabels(), xticklabels, nt_color_map, tick_fontsize)
    color_tick_labels(ax.get_yticklabels(), yticklabels, nt_color_map, tick_fontsize)


def _draw_path_outlines(ax: plt.Axes, result: AlignmentResult, linewidth: float) -> None:
    for (i, j) in result.path:
        if (i, j) == (0, 0):
            continue
        ax.add_patch(
            Rectangle(
                (j, i), 1, 1,
                fill=False,
                edgecolor=path_cell_color(result, i, j),
                linewidth=linewidth,
                zorder=3,
            )
        )


def plot_alignment_matrix(
    result: AlignmentResult,
    ax: Optional[plt.Axes] = None,
    nt_color_map: Optional[Dict[str, str]] = None,
    figsize: Optional[Tuple[float, float]] = None,
    annotate: bool = True,
    colormap: str = grid_color_map,
    show_path: bool = True,
    path_linewidth: float = 2.5,
    tick_fontsize: float = 10.0,
    title: Optional[str] = None,
) -> plt.Figure:
    """
    Plot the DP score matrix as a heatmap with the traceback path overlaid.

    Path cells are outlined by move type: green for matches, red for
    mismatches, blue for gaps and gray for the zero cell that ends a
    local traceback.  Cell (0, 0) is never outlined.

    Parameters
    ----------
    result : AlignmentResult
        Output of align / needleman_wunsch / smith_waterman.
    ax : matplotlib Axes, optional
        Axes to draw on.  A new figure is created if omitted.
    nt_color_map : dict, optional
        Residue -> color for the tick labels.
    annotate : bool
        Write the score into every cell.
    colormap : str
        Seaborn/matplotlib colormap name.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize or _default_figsize(result))
    else:
        fig = ax.figure

    xticklabels = [GAP_CHAR] + list(result.seq2)
    yticklabels = [GAP_CHAR] + list(result.seq1)

    sns.heatmap(
        np.array(result.matrix),
        ax=ax,
        cmap=sns.color_palette(colormap, as_cmap=True),
        square=True,
        cbar=False,
        annot=annotate,
        fmt="d",
        linewidths=0.5,
        linecolor="white",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    _label_axes(ax, xticklabels, yticklabels, nt_color_map, tick_fontsize)

    if show_path:
        _draw_path_outlines(ax, result, path_linewidth)

    if title is None:
        title = f"{result.mode.capitalize()} alignment, score {result.score}"
    ax.set_title(title, pad=24)
    return fig


def plot_trace_matrix(
    result: AlignmentResult,
    ax: Optional[plt.Axes] = None,
    nt_color_map: Optional[Dict[str, str]] = None,
    figsize: Optional[Tuple[float, float]] = None,
    glyph_fontsize: float = 12.0,
    tick_fontsize: float = 10.0,
) -> plt.Figure:
    """
    Draw the move matrix: one arrow per cell pointing at the predecessor
    (↖ diagonal, ↑ up, ← left, • stop).  Arrows on the traceback path
    are drawn bold in the path colors.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize or _default_figsize(result))
    else:
        fig = ax.figure

    trace = np.asarray(result.trace)
    xticklabels = [GAP_CHAR] + list(result.seq2)
    yticklabels = [GAP_CHAR] + list(result.seq1)

    sns.heatmap(
        np.zeros(trace.shape),
        ax=ax,
        cmap=ListedColormap(["#f7f7f7"]),
        square=True,
        cbar=False,
        linewidths=0.5,
        linecolor="#d0d0d0",
        xticklabels=xticklabels,
        yticklabels=yticklabels,
    )
    _label_axes(ax, xticklabels, yticklabels, nt_color_map, tick_fontsize)

    on_path = set(result.path)
    n_rows, n_cols = trace.shape
    for i in range(n_rows):
        for j in range(n_cols):
            glyph = MOVE_GLYPHS[Move(int(trace[i, j]))]
            if (i, j) in on_path and (i, j) != (0, 0):
                color, weight = path_cell_color(result, i, j), "bold"
            else:
                color, weight = PATH_COLORS["stop"], "normal"
            ax.text(j + 0.5, i + 0.5, glyph, ha="center", va="center",
                    fontsize=glyph_fontsize, color=color, fontweight=weight)

    ax.set_title("Move matrix", pad=24)
    return fig


def visualize_alignment_matrices(
    result: AlignmentResult,
    figsize: Optional[Tuple[float, float]] = None,
    **kwargs,
) -> plt.Figure:
    """
    Score heatmap and move matrix side by side.
    """
    if figsize is None:
        w, h = _default_figsize(result)
        figsize = (2 * w, h)
    fig, axes = plt.subplots(1, 2, figsize=figsize)
    plot_alignment_matrix(result, ax=axes[0], **kwargs)
    plot_trace_matrix(result, ax=axes[1],
                      nt_color_map=kwargs.get("nt_color_map"),
                      tick_fontsize=kwargs.get("tick_fontsize", 10.0))
    fig.tight_layout()
    return fig
