"""
Color constants for dpalign plotting.

This module defines all color schemes used across the plotting library.
"""

# =============================================================================
# RESIDUE COLORS
# =============================================================================

# Nucleotide colors; any other residue is drawn in black
NT_COLOR = {
    "A": "#74AB86",  # soft green
    "C": "#6E93C0",  # soft blue
    "G": "#C19A5A",  # soft warm ochre
    "T": "#C26F6F",  # soft red
    "U": "#C26F6F",  # same as T
    "-": "#000000",
    "": "#000000",
}


# =============================================================================
# TRACEBACK PATH COLORS
# =============================================================================

PATH_COLORS = dict(
    match="#48BB78",     # green
    mismatch="#F56565",  # red
    gap="#3B82F6",       # blue
    stop="#A0AEC0",      # gray, zero cell that ends a local traceback
)

# Highlight for the chosen candidate in cell-update views
CHOSEN_COLOR = "#E5A000"
CANDIDATE_COLOR = "#7A7A7A"


# =============================================================================
# SCORE NODE COLORS
# =============================================================================

NODE_COLORS = dict(
    face="#d0ffd0",
    edge="#00ff2f",
    empty_edge="#7A7A7A",
)


# =============================================================================
# HEATMAP COLORMAPS
# =============================================================================
HEATMAP_COLORMAPS = {
    'default': 'Blues',
    'diverging': 'RdBu_r',
}
