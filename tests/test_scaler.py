import numpy as np
import pytest

from iris_knn.data.record import Record
from iris_knn.errors import ContractViolation
from iris_knn.features.scaler import ColumnStat, MinMaxScaler, compute_minmax, normalize_dataset


class TestComputeMinmax:
    """Per-column statistics."""

    def test_values(self):
        dataset = [Record((1, 5, -2, 0), "a"), Record((3, 4, 2, 0.5), "b"), Record((2, 6, 0, 1), "a")]
        assert compute_minmax(dataset) == [
            ColumnStat(1.0, 3.0), ColumnStat(4.0, 6.0), ColumnStat(-2.0, 2.0), ColumnStat(0.0, 1.0)
        ]

    def test_empty(self):
        with pytest.raises(ContractViolation, match="empty"):
            compute_minmax([])

    def test_constant_column_is_allowed_here(self):
        stats = compute_minmax([Record((1, 1, 1, 1), "a"), Record((1, 2, 3, 4), "b")])
        assert stats[0] == ColumnStat(1.0, 1.0)


class TestNormalizeDataset:
    """Min-max rescaling."""

    def test_values_in_unit_interval(self, small_dataset):
        normalized = normalize_dataset(small_dataset, compute_minmax(small_dataset))
        X = np.array([r.features for r in normalized])
        assert X.min() >= 0.0
        assert X.max() <= 1.0
        np.testing.assert_allclose(X.min(axis=0), 0.0)
        np.testing.assert_allclose(X.max(axis=0), 1.0)

    def test_labels_and_order_preserved(self, small_dataset):
        normalized = normalize_dataset(small_dataset, compute_minmax(small_dataset))
        assert [r.label for r in normalized] == [r.label for r in small_dataset]

    def test_input_not_modified(self, small_dataset):
        before = list(small_dataset)
        normalize_dataset(small_dataset, compute_minmax(small_dataset))
        assert small_dataset == before

    def test_zero_width_column(self):
        dataset = [Record((1, 1, 1, 1), "a"), Record((1, 2, 3, 4), "b")]
        with pytest.raises(ContractViolation, match="Column 0 is constant"):
            normalize_dataset(dataset, compute_minmax(dataset))

    def test_idempotent_relative_to_stats(self, small_dataset):
        stats = compute_minmax(small_dataset)
        assert normalize_dataset(small_dataset, stats) == normalize_dataset(small_dataset, stats)


class TestMinMaxScaler:
    """fit / transform / inverse_transform."""

    def test_inverse_recovers_original(self, small_dataset):
        scaler = MinMaxScaler()
        restored = scaler.inverse_transform(scaler.fit_transform(small_dataset))
        np.testing.assert_allclose(
            [r.features for r in restored],
            [r.features for r in small_dataset],
            atol=1e-12,
        )

    def test_transform_unseen_record_uses_fitted_stats(self):
        scaler = MinMaxScaler().fit([Record((0, 0, 0, 0), "a"), Record((10, 10, 10, 10), "b")])
        [query] = scaler.transform([Record((5, 20, -10, 2.5), "?")])
        assert query.features == pytest.approx((0.5, 2.0, -1.0, 0.25))

    def test_fit_rejects_constant_column(self):
        with pytest.raises(ContractViolation):
            MinMaxScaler().fit([Record((1, 1, 1, 1), "a"), Record((1, 2, 3, 4), "b")])

    def test_unfitted(self, small_dataset):
        with pytest.raises(RuntimeError, match="not fitted"):
            MinMaxScaler().transform(small_dataset)
        with pytest.raises(RuntimeError, match="not fitted"):
            MinMaxScaler().inverse_transform(small_dataset)
