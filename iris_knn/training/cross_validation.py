"""
k-fold cross-validation for the k-NN classifier.
"""

from typing import Callable, List, NamedTuple, Sequence

from iris_knn.data.record import Record
from iris_knn.errors import ContractViolation
from iris_knn.evaluation.metrics import accuracy_metric, mean_accuracy
from iris_knn.utils.helpers import is_integer


# algorithm(train, test, num_neighbors) -> predicted labels for test
Algorithm = Callable[[Sequence[Record], Sequence[Record], int], List[str]]


class FoldResult(NamedTuple):
    fold: int
    train_size: int
    actual: List[str]
    predicted: List[str]
    accuracy: float


def cross_validation_split(dataset: Sequence[Record], n_folds: int) -> List[List[Record]]:
    """
    Partition the dataset into n_folds groups, round-robin by index.

    Record i goes to fold i % n_folds, so fold sizes differ by at most one
    and the split is the same every time for a given input order.

    Raises:
        ContractViolation: If n_folds is not in 1..len(dataset).
    """
    if not is_integer(n_folds) or not 1 <= n_folds <= len(dataset):
        raise ContractViolation(
            f"n_folds must be an integer in 1..{len(dataset)}, got {n_folds!r}"
        )

    folds: List[List[Record]] = [[] for _ in range(n_folds)]
    for i, record in enumerate(dataset):
        folds[i % n_folds].append(record)
    return folds


class CrossValidator:
    """Runs one train/test round per fold and keeps the per-fold results."""

    def __init__(self, algorithm: Algorithm, n_folds: int = 5,
                 num_neighbors: int = 5, verbose: bool = False):
        """
        Initialize the cross-validator.

        Args:
            algorithm: Callable mapping (train, test, num_neighbors) to
                predicted labels, e.g. k_nearest_neighbors.
            n_folds: Number of folds.
            num_neighbors: k handed to the algorithm.
            verbose: Print one line per fold.
        """
        self.algorithm = algorithm
        self.n_folds = n_folds
        self.num_neighbors = num_neighbors
        self.verbose = verbose
        self.fold_results: List[FoldResult] = []

    def evaluate(self, dataset: Sequence[Record]) -> List[float]:
        """
        Score the algorithm on every held-out fold.

        The training set for fold i is every other fold concatenated in fold
        order. With a single fold there is nothing to hold out, so the fold
        is used for both training and testing.

        Returns:
            One accuracy percentage per fold.
        """
        folds = cross_validation_split(dataset, self.n_folds)
        self.fold_results = []

        for i, test_set in enumerate(folds):
            if len(folds) == 1:
                train_set = list(test_set)
            else:
                train_set = [
                    record
                    for j, fold in enumerate(folds) if j != i
                    for record in fold
                ]

            predicted = list(self.algorithm(train_set, test_set, self.num_neighbors))
            actual = [record.label for record in test_set]
            accuracy = accuracy_metric(actual, predicted)

            self.fold_results.append(
                FoldResult(i, len(train_set), actual, predicted, accuracy)
            )
            if self.verbose:
                print(f"   [CV] Fold {i + 1}/{len(folds)}: "
                      f"train={len(train_set)}, test={len(test_set)}, "
                      f"accuracy={accuracy:.2f}%")

        return self.scores

    @property
    def scores(self) -> List[float]:
        return [result.accuracy for result in self.fold_results]

    @property
    def mean_accuracy(self) -> float:
        return mean_accuracy(self.scores)

    @property
    def actual(self) -> List[str]:
        """Ground-truth labels pooled over every fold, in fold order."""
        return [label for result in self.fold_results for label in result.actual]

    @property
    def predicted(self) -> List[str]:
        """Predicted labels pooled over every fold, in fold order."""
        return [label for result in self.fold_results for label in result.predicted]


def evaluate_algorithm(dataset: Sequence[Record], algorithm: Algorithm,
                       n_folds: int, num_neighbors: int) -> List[float]:
    """Cross-validated accuracy of algorithm, one score per fold."""
    return CrossValidator(algorithm, n_folds, num_neighbors).evaluate(dataset)
