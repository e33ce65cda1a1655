"""
dpalign: pairwise sequence alignment with a full DP trace.
"""

# =============================================================================
# CORE ALIGNMENT
# =============================================================================

from .aligners import (
    AlignmentMode,
    EmptySequenceError,
    align,
    align_sequences,
    needleman_wunsch,
    smith_waterman,
)

from .dp_core import (
    GAP_CHAR,
    AlignmentResult,
    CellUpdate,
    DPMatrices,
    FillPolicy,
    GLOBAL_POLICY,
    LOCAL_POLICY,
    Move,
    ScoringScheme,
    calculate_identity,
    choose_move,
    explain_cell,
    run_dp,
)

from .default import (
    DEFAULT_SCORING,
    EXAMPLES,
    align_params,
    get_default_scoring,
    get_example,
)


# =============================================================================
# SEQUENCE INPUT
# =============================================================================

from .sequences import (
    clean_sequence,
    normalize_sequence,
    parse_fasta,
    random_dna,
    read_sequence_file,
)


# =============================================================================
# VALIDATION AND TESTING
# =============================================================================

from .validation import (
    check_alignment_validity,
    nw_score_naive,
    replay_trace,
    sw_score_naive,
    traceback_start,
)


# =============================================================================
# EXPORT
# =============================================================================

from .export import (
    alignment_table,
    format_report,
    matrix_table,
    save_matrix_image,
    summary_table,
    write_csv,
    write_matrix_csv,
    write_report,
)


# =============================================================================
# PLOTTING (requires both matplotlib and seaborn -- install with pip install dpalign[plot])
# =============================================================================
def _missing_plot_dep(func_name: str) -> ImportError:
    return ImportError(
        f"{func_name} requires plotting dependencies.\n"
        'Install with: pip install "dpalign[plot]"'
    )

try:
    from .plot import (
        plot_alignment_matrix,
        plot_trace_matrix,
        visualize_alignment_matrices,
        plot_cell_update,
        plot_score_system,
    )
    PLOT_AVAILABLE = True
except ImportError:
    # These will raise ImportError if accessed without matplotlib/seaborn
    def plot_alignment_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_alignment_matrix")
    def plot_trace_matrix(*args, **kwargs):
        raise _missing_plot_dep("plot_trace_matrix")
    def visualize_alignment_matrices(*args, **kwargs):
        raise _missing_plot_dep("visualize_alignment_matrices")
    def plot_cell_update(*args, **kwargs):
        raise _missing_plot_dep("plot_cell_update")
    def plot_score_system(*args, **kwargs):
        raise _missing_plot_dep("plot_score_system")
    PLOT_AVAILABLE = False


__all__ = [
    # Core alignment
    "AlignmentMode",
    "AlignmentResult",
    "EmptySequenceError",
    "align",
    "align_sequences",
    "needleman_wunsch",
    "smith_waterman",
    # DP core
    "GAP_CHAR",
    "CellUpdate",
    "DPMatrices",
    "FillPolicy",
    "GLOBAL_POLICY",
    "LOCAL_POLICY",
    "Move",
    "ScoringScheme",
    "calculate_identity",
    "choose_move",
    "explain_cell",
    "run_dp",
    # Defaults
    "DEFAULT_SCORING",
    "EXAMPLES",
    "align_params",
    "get_default_scoring",
    "get_example",
    # Sequence input
    "clean_sequence",
    "normalize_sequence",
    "parse_fasta",
    "random_dna",
    "read_sequence_file",
    # Validation
    "check_alignment_validity",
    "nw_score_naive",
    "replay_trace",
    "sw_score_naive",
    "traceback_start",
    # Export
    "alignment_table",
    "format_report",
    "matrix_table",
    "save_matrix_image",
    "summary_table",
    "write_csv",
    "write_matrix_csv",
    "write_report",
    # Plotting
    "PLOT_AVAILABLE",
    "plot_alignment_matrix",
    "plot_trace_matrix",
    "visualize_alignment_matrices",
    "plot_cell_update",
    "plot_score_system",
]
