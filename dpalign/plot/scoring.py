"""
Scoring scheme visualization for dpalign.

A ScoringScheme is three scalars, but it is easier to read as the
substitution table it implies over an alphabet, next to the per-column
gap score.
"""

import numpy as np
import matplotlib.pyplot as plt
import seaborn as sns
from typing import Optional, Sequence, Tuple

from ..default import DNA_BASES
from ..dp_core import ScoringScheme
from .colors import HEATMAP_COLORMAPS
from .utils import color_tick_labels


def substitution_table(scoring: ScoringScheme, alphabet: Sequence[str]) -> np.ndarray:
    """k x k array with `match` on the diagonal and `mismatch` elsewhere."""
    table = np.full((len(alphabet), len(alphabet)), scoring.mismatch, dtype=int)
    np.fill_diagonal(table, scoring.match)
    return table


def plot_score_system(
    scoring: ScoringScheme,
    alphabet: Sequence[str] = DNA_BASES,
    figsize: Optional[Tuple[float, float]] = None,
) -> plt.Figure:
    """
    Show the implied substitution table and the linear gap score.

    Both panels share one diverging colormap centred on 0, so rewards
    and penalties are comparable at a glance.

    Parameters
    ----------
    scoring : ScoringScheme
        Match, mismatch and gap scores.
    alphabet : sequence of str
        Residues labelling the substitution panel.
    figsize : tuple, optional
        Figure size (width, height); scaled to the alphabet if omitted.

    Returns
    -------
    fig : matplotlib.figure.Figure
    """
    labels = list(alphabet)
    k = len(labels)
    if figsize is None:
        figsize = (max(4.0, 0.6 * k + 2.5), max(3.0, 0.5 * k + 1.5))

    bound = max(abs(scoring.match), abs(scoring.mismatch), abs(scoring.gap), 1)
    cmap = sns.color_palette(HEATMAP_COLORMAPS["diverging"], as_cmap=True)
    shared = dict(cmap=cmap, vmin=-bound, vmax=bound, center=0,
                  annot=True, fmt="d", cbar=False, square=True,
                  linewidths=0.5, linecolor="white")

    fig, (ax_sub, ax_gap) = plt.subplots(
        1, 2, figsize=figsize, gridspec_kw={"width_ratios": [k, 1]}
    )

    sns.heatmap(substitution_table(scoring, labels), ax=ax_sub,
                xticklabels=labels, yticklabels=labels, **shared)
    color_tick_labels(ax_sub.get_xticklabels(), labels)
    color_tick_labels(ax_sub.get_yticklabels(), labels)
    ax_sub.set_title("Match / mismatch")
    ax_sub.set_xlabel("Sequence 2")
    ax_sub.set_ylabel("Sequence 1")

    sns.heatmap(np.array([[scoring.gap]]), ax=ax_gap,
                xticklabels=False, yticklabels=["gap"], **shared)
    ax_gap.set_title("Gap")

    fig.tight_layout()
    return fig
