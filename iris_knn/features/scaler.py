from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from iris_knn.data.record import Record
from iris_knn.errors import ContractViolation


class ColumnStat(NamedTuple):
    min: float
    max: float


def compute_minmax(dataset: Sequence[Record]) -> List[ColumnStat]:
    """Per-column min and max over every record in the dataset."""
    if len(dataset) == 0:
        raise ContractViolation("Cannot compute min/max of an empty dataset")
    X = np.array([record.features for record in dataset], dtype=np.float64)
    return [ColumnStat(float(lo), float(hi)) for lo, hi in zip(X.min(axis=0), X.max(axis=0))]


def _check_widths(stats: Sequence[ColumnStat]) -> None:
    for column, stat in enumerate(stats):
        if stat.max == stat.min:
            raise ContractViolation(
                f"Column {column} is constant (min == max == {stat.min}); "
                f"min-max normalization is undefined"
            )


def normalize_dataset(dataset: Sequence[Record], stats: Sequence[ColumnStat]) -> List[Record]:
    """
    Rescale every feature to (value - min) / (max - min).

    Returns new records; the input dataset is left untouched.
    """
    _check_widths(stats)
    mins = np.array([s.min for s in stats])
    widths = np.array([s.max - s.min for s in stats])
    return [record.with_features((record.as_array() - mins) / widths) for record in dataset]


class MinMaxScaler:
    def __init__(self):
        self.stats: Optional[List[ColumnStat]] = None

    def fit(self, dataset: Sequence[Record]) -> "MinMaxScaler":
        self.stats = compute_minmax(dataset)
        _check_widths(self.stats)
        return self

    def transform(self, dataset: Sequence[Record]) -> List[Record]:
        if self.stats is None:
            raise RuntimeError("Scaler not fitted. Call fit() first.")
        return normalize_dataset(dataset, self.stats)

    def fit_transform(self, dataset: Sequence[Record]) -> List[Record]:
        self.fit(dataset)
        return self.transform(dataset)

    def inverse_transform(self, dataset: Sequence[Record]) -> List[Record]:
        if self.stats is None:
            raise RuntimeError("Scaler not fitted. Call fit() first.")
        mins = np.array([s.min for s in self.stats])
        widths = np.array([s.max - s.min for s in self.stats])
        return [record.with_features(record.as_array() * widths + mins) for record in dataset]
