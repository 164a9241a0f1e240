"""
Fixed-schema data point: four numeric features plus a species label.
"""

import math
import random
import string
from typing import Iterable, Optional, Tuple

import numpy as np

from iris_knn.errors import SchemaViolation


FEATURE_NAMES = ("sepal_length", "sepal_width", "petal_length", "petal_width")
NUM_FEATURES = len(FEATURE_NAMES)


class Record:
    """
    One labeled flower measurement.

    Features are stored as an immutable tuple of floats so distance code can
    be written once over any fixed arity. Records never change after
    construction; normalization builds new ones.
    """

    __slots__ = ("_features", "_label")

    def __init__(self, features: Iterable[float], label: str):
        """
        Args:
            features: Exactly four numeric values, in FEATURE_NAMES order.
            label: Non-empty class name.

        Raises:
            SchemaViolation: On wrong arity, non-numeric/non-finite values
                or an empty label.
        """
        if isinstance(features, (str, bytes)):
            raise SchemaViolation(
                f"Features must be a sequence of numbers, got {type(features).__name__}"
            )
        try:
            values = tuple(float(v) for v in features)
        except (TypeError, ValueError) as e:
            raise SchemaViolation(f"Features must be numeric: {e}") from e

        if len(values) != NUM_FEATURES:
            raise SchemaViolation(
                f"Expected {NUM_FEATURES} features, got {len(values)}"
            )
        if not all(math.isfinite(v) for v in values):
            raise SchemaViolation(f"Features must be finite, got {values}")
        if not isinstance(label, str) or not label:
            raise SchemaViolation(f"Label must be a non-empty string, got {label!r}")

        self._features = values
        self._label = label

    @property
    def features(self) -> Tuple[float, ...]:
        return self._features

    @property
    def label(self) -> str:
        return self._label

    def as_array(self) -> np.ndarray:
        """Return the features as a float64 vector."""
        return np.array(self._features, dtype=np.float64)

    def with_features(self, features: Iterable[float]) -> "Record":
        """Return a copy carrying the same label and new feature values."""
        return Record(features, self._label)

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> "Record":
        """
        Build a record with uniform features in [0.1, 7.0) and a random
        7-character alphanumeric label. Handy as an ad-hoc query.
        """
        rng = rng or random.Random()
        features = [rng.uniform(0.1, 7.0) for _ in range(NUM_FEATURES)]
        label = "".join(rng.choices(string.ascii_letters + string.digits, k=7))
        return cls(features, label)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._features == other._features and self._label == other._label

    def __hash__(self) -> int:
        return hash((self._features, self._label))

    def __repr__(self) -> str:
        values = ", ".join(f"{v:g}" for v in self._features)
        return f"Record(features=({values}), label='{self._label}')"
