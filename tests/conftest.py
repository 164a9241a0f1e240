from pathlib import Path

import pytest

from iris_knn.data.record import Record


IRIS_CSV = Path(__file__).resolve().parent.parent / "data" / "iris.csv"


@pytest.fixture
def iris_csv():
    return IRIS_CSV


@pytest.fixture
def two_cluster_train():
    """Three 'A' records at the origin and three 'B' records at (10, 10, 10, 10)."""
    return (
        [Record((0, 0, 0, 0), "A") for _ in range(3)]
        + [Record((10, 10, 10, 10), "B") for _ in range(3)]
    )


@pytest.fixture
def small_dataset():
    """Eleven records with distinct, non-constant columns."""
    return [
        Record((i, 2 * i + 1, 10 - i, (i * 7) % 5), "even" if i % 2 == 0 else "odd")
        for i in range(11)
    ]


@pytest.fixture
def write_csv(tmp_path):
    def _write(text, name="data.csv"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
