"""
From-scratch k-nearest-neighbors classifier with k-fold cross-validation
"""

from iris_knn.data.record import Record
from iris_knn.errors import KNNError, SchemaViolation, ContractViolation
from iris_knn.evaluation.metrics import accuracy_metric
from iris_knn.features.scaler import compute_minmax, normalize_dataset
from iris_knn.models.distance import euclidean_distance
from iris_knn.models.KNN import get_neighbors, predict_classification, k_nearest_neighbors
from iris_knn.training.cross_validation import cross_validation_split, evaluate_algorithm

__all__ = [
    'Record', 'KNNError', 'SchemaViolation', 'ContractViolation',
    'accuracy_metric', 'compute_minmax', 'normalize_dataset',
    'euclidean_distance', 'get_neighbors', 'predict_classification',
    'k_nearest_neighbors', 'cross_validation_split', 'evaluate_algorithm',
]
