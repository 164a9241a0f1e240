"""
Plotting utilities for cross-validation results.

This module provides a small helper to plot per-fold accuracy scores
as a bar chart using matplotlib.
"""

import os
from typing import Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt

from iris_knn.utils.helpers import ensure_dir


def plot_fold_scores(scores: Sequence[float],
                     title: str = "Cross-validation accuracy",
                     ax: Optional[plt.Axes] = None,
                     out_path: Optional[str] = None) -> Tuple[plt.Figure, plt.Axes]:
    """
    Plot one bar per fold with a dashed line at the mean accuracy.

    Args:
        scores: Accuracy percentage per fold.
        title: Plot title.
        ax: Optional matplotlib Axes to plot into. If None, a new figure is created.
        out_path: If provided, save the figure to this path (parent dirs are created).

    Returns:
        (fig, ax) tuple where fig is the matplotlib Figure and ax is the Axes.
    """
    folds = np.arange(1, len(scores) + 1)
    mean = float(np.mean(scores)) if len(scores) > 0 else 0.0

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 4))
    else:
        fig = ax.figure

    ax.bar(folds, scores, color='steelblue')
    ax.axhline(mean, color='darkorange', linestyle='--', label=f"Mean: {mean:.2f}%")
    ax.set_xticks(folds)
    ax.set_xlabel("Fold")
    ax.set_ylabel("Accuracy (%)")
    ax.set_ylim(0, 100)
    ax.set_title(title)
    ax.legend(loc='lower right')
    fig.tight_layout()

    if out_path is not None:
        parent = os.path.dirname(out_path)
        if parent:
            ensure_dir(parent)
        fig.savefig(out_path, dpi=150, bbox_inches='tight')

    return fig, ax
