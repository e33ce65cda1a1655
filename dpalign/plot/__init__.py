"""
dpalign plotting package.

This package provides visualization functions for DP alignment results.
Users can import from dpalign.plot, or access submodules directly.

Submodules:
    - plot.colors: Color constants for all visualization
    - plot.utils: Shared utility functions
    - plot.scoring: Scoring system visualization
    - plot.matrix: DP score / move matrix views
    - plot.cell: Single-cell update view

Example imports:
    from dpalign.plot import plot_alignment_matrix  # top-level re-export
    from dpalign.plot.matrix import plot_alignment_matrix  # direct submodule
    from dpalign.plot.colors import NT_COLOR  # color constants
"""

# =============================================================================
# COLOR CONSTANTS (from colors)
# =============================================================================

from .colors import (
    NT_COLOR,
    PATH_COLORS,
    NODE_COLORS,
    HEATMAP_COLORMAPS,
)


# =============================================================================
# UTILITY FUNCTIONS (from utils)
# =============================================================================

from .utils import (
    draw_shortened_arrow,
    draw_highlighted_edge,
    draw_node_with_score,
    color_tick_labels,
    path_cell_color,
)


# =============================================================================
# SCORING VISUALIZATION (from scoring)
# =============================================================================

from .scoring import plot_score_system, substitution_table


# =============================================================================
# DP MATRIX VIEWS (from matrix, cell)
# =============================================================================

from .matrix import (
    plot_alignment_matrix,
    plot_trace_matrix,
    visualize_alignment_matrices,
)

from .cell import plot_cell_update


__all__ = [
    # Colors
    "NT_COLOR",
    "PATH_COLORS",
    "NODE_COLORS",
    "HEATMAP_COLORMAPS",
    # Utils
    "draw_shortened_arrow",
    "draw_highlighted_edge",
    "draw_node_with_score",
    "color_tick_labels",
    "path_cell_color",
    # Scoring
    "plot_score_system",
    "substitution_table",
    # Matrix
    "plot_alignment_matrix",
    "plot_trace_matrix",
    "visualize_alignment_matrices",
    "plot_cell_update",
]
