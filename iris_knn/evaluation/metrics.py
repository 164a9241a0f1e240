"""
Scoring of predicted labels against ground truth.
"""

from typing import Sequence

from iris_knn.errors import ContractViolation


def accuracy_metric(actual: Sequence[str], predicted: Sequence[str]) -> float:
    """
    Percentage of positions where the predicted label equals the actual one.

    Args:
        actual: Ground-truth labels.
        predicted: Predicted labels, same length as actual.

    Returns:
        Accuracy in [0, 100].

    Raises:
        ContractViolation: If the sequences differ in length or are empty.
    """
    if len(actual) != len(predicted):
        raise ContractViolation(
            f"Length mismatch: {len(actual)} actual vs {len(predicted)} predicted"
        )
    if len(actual) == 0:
        raise ContractViolation("Cannot score an empty set of predictions")

    correct = sum(1 for a, p in zip(actual, predicted) if a == p)
    return correct / float(len(actual)) * 100.0


def mean_accuracy(scores: Sequence[float]) -> float:
    """Average of per-fold accuracy scores."""
    if len(scores) == 0:
        raise ContractViolation("Cannot average an empty list of scores")
    return sum(scores) / float(len(scores))
