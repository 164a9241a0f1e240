from collections import Counter
from typing import List, NamedTuple, Optional, Any, Sequence

from iris_knn.data.record import Record
from iris_knn.errors import ContractViolation
from iris_knn.models.distance import euclidean_distance
from iris_knn.utils.helpers import is_integer


class RankedNeighbor(NamedTuple):
    """Distance from a query to one training record, plus that record's label."""
    distance: float
    label: str


def _check_num_neighbors(num_neighbors, n_train: int) -> None:
    if not is_integer(num_neighbors) or num_neighbors < 1:
        raise ContractViolation(
            f"num_neighbors must be a positive integer, got {num_neighbors!r}"
        )
    if num_neighbors > n_train:
        raise ContractViolation(
            f"num_neighbors={num_neighbors} exceeds the {n_train} available "
            f"training records"
        )


def rank_neighbors(train: Sequence[Record], test_row: Record) -> List[RankedNeighbor]:
    """
    Rank every training record by its distance to test_row, nearest first.

    sorted() is stable, so records at equal distance keep their training order.
    """
    distances = [
        RankedNeighbor(euclidean_distance(test_row, train_row), train_row.label)
        for train_row in train
    ]
    return sorted(distances, key=lambda n: n.distance)


def get_neighbors(train: Sequence[Record], test_row: Record, num_neighbors: int) -> List[str]:
    """
    Labels of the num_neighbors training records closest to test_row.

    Args:
        train: Training records.
        test_row: Query record (only its features are used).
        num_neighbors: k, with 1 <= k <= len(train).

    Returns:
        k labels in ascending-distance order.

    Raises:
        ContractViolation: If k is not a positive integer or exceeds len(train).
    """
    _check_num_neighbors(num_neighbors, len(train))
    ranked = rank_neighbors(train, test_row)
    return [neighbor.label for neighbor in ranked[:num_neighbors]]


def predict_classification(train: Sequence[Record], test_row: Record, num_neighbors: int) -> str:
    """
    Majority vote over the labels of the k nearest neighbors.

    Ties go to the label seen first in neighbor order: Counter keeps
    insertion order and most_common() keeps it among equal counts.
    """
    neighbors = get_neighbors(train, test_row, num_neighbors)
    most_common = Counter(neighbors).most_common(1)
    return most_common[0][0]


def k_nearest_neighbors(train: Sequence[Record], test: Sequence[Record], num_neighbors: int) -> List[str]:
    """Predict a label for every record in test against train."""
    return [predict_classification(train, row, num_neighbors) for row in test]


class KNNClassifier:
    """
    K-Nearest Neighbors classifier (from scratch).

    Uses Euclidean distance and majority voting.
    """

    def __init__(self, cfg: Optional[Any] = None, k: int = 5):
        """
        Initialize KNN classifier.

        Args:
            cfg: Optional config object (e.g., cfg.model.knn)
            k: Number of neighbors (default: 5)
        """
        if cfg is not None:
            self.k = getattr(cfg, 'k', k)
        else:
            self.k = k
        _check_num_neighbors(self.k, self.k)

        self.train: Optional[List[Record]] = None

    def fit(self, records: Sequence[Record]) -> "KNNClassifier":
        """
        Lazy learning: just store the training data.
        """
        _check_num_neighbors(self.k, len(records))
        self.train = list(records)
        print(f"   [KNN] Stored {len(self.train)} training samples.")
        return self

    def predict_one(self, record: Record) -> str:
        """Predict the label of a single record."""
        if self.train is None:
            raise RuntimeError("Classifier not fitted. Call fit() first.")
        return predict_classification(self.train, record, self.k)

    def predict(self, records: Sequence[Record]) -> List[str]:
        """
        Predict labels for test data.
        """
        if self.train is None:
            raise RuntimeError("Classifier not fitted. Call fit() first.")
        return k_nearest_neighbors(self.train, records, self.k)

    def __repr__(self) -> str:
        n_train = len(self.train) if self.train is not None else 0
        return f"KNNClassifier(k={self.k}, train={n_train})"
