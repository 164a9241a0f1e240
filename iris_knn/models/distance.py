"""
Distance between two records' feature vectors.
"""

import numpy as np

from iris_knn.data.record import Record
from iris_knn.errors import ContractViolation


def euclidean_distance(row1: Record, row2: Record) -> float:
    """
    Euclidean distance over the feature vectors of two records.

    Square the per-feature differences, sum, then take the square root.
    No weighting or scaling is applied here; normalize upstream if needed.
    """
    a = row1.as_array()
    b = row2.as_array()
    if a.shape != b.shape:
        raise ContractViolation(
            f"Feature arity mismatch: {a.shape[0]} vs {b.shape[0]}"
        )
    return float(np.sqrt(np.sum((a - b) ** 2)))
