"""
Helper utility functions.
"""

import os
from typing import Sequence

import numpy as np


def ensure_dir(path: str):
    """
    Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
    """
    os.makedirs(path, exist_ok=True)


def is_integer(value) -> bool:
    """True for Python and numpy integers, False for bools and everything else."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def format_scores(scores: Sequence[float], precision: int = 3) -> str:
    """
    Format a list of accuracy percentages for console output.

    Args:
        scores: Accuracy values.
        precision: Decimal places per value.

    Returns:
        String like "[96.667, 93.333]".
    """
    return "[" + ", ".join(f"{s:.{precision}f}" for s in scores) + "]"
