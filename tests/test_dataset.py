import pytest

from iris_knn.data.dataset import IrisDataset
from iris_knn.data.record import Record
from iris_knn.errors import SchemaViolation


HEADER = "sepal_length,sepal_width,petal_length,petal_width,class\n"


class TestLoad:
    """Parsing the delimited file."""

    def test_iris_file(self, iris_csv):
        dataset = IrisDataset(str(iris_csv)).load()
        assert len(dataset) == 150
        assert dataset.class_names == ["Iris-setosa", "Iris-versicolor", "Iris-virginica"]
        assert dataset.header[-1] == "class"
        assert dataset[0] == Record((5.1, 3.5, 1.4, 0.2), "Iris-setosa")

    def test_skips_blank_lines(self, write_csv):
        path = write_csv(HEADER + "1,2,3,4,a\n\n5,6,7,8,b\n\n")
        dataset = IrisDataset(str(path)).load()
        assert [r.label for r in dataset.records] == ["a", "b"]

    def test_custom_delimiter(self, write_csv):
        path = write_csv(HEADER.replace(",", ";") + "1;2;3;4;a\n")
        dataset = IrisDataset(str(path), delimiter=";").load()
        assert dataset[0].features == (1.0, 2.0, 3.0, 4.0)

    def test_reordered_header_maps_by_name(self, write_csv):
        path = write_csv(
            "class,petal_width,petal_length,sepal_width,sepal_length\n"
            "Iris-setosa,0.2,1.4,3.5,5.1\n"
        )
        dataset = IrisDataset(str(path)).load()
        assert dataset[0] == Record((5.1, 3.5, 1.4, 0.2), "Iris-setosa")

    def test_headerless_file(self, write_csv):
        path = write_csv("5.1,3.5,1.4,0.2,Iris-setosa\n4.9,3.0,1.4,0.2,Iris-setosa\n")
        with pytest.raises(SchemaViolation, match=":1: header must name the columns"):
            IrisDataset(str(path)).load()

    @pytest.mark.parametrize("header", [
        "sepal_length,sepal_width,petal_length,petal_width,species\n",
        "sepal_length,sepal_width,petal_length,class\n",
        "sepal_length,sepal_length,petal_length,petal_width,class\n",
    ])
    def test_unexpected_header(self, write_csv, header):
        path = write_csv(header + "1,2,3,4,a\n")
        with pytest.raises(SchemaViolation, match="header"):
            IrisDataset(str(path)).load()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            IrisDataset(str(tmp_path / "nope.csv")).load()

    def test_wrong_column_count(self, write_csv):
        path = write_csv(HEADER + "1,2,3,4,a\n1,2,3,b\n")
        with pytest.raises(SchemaViolation, match=":3: expected 5 columns"):
            IrisDataset(str(path)).load()

    def test_non_numeric_value(self, write_csv):
        path = write_csv(HEADER + "1,2,x,4,a\n")
        with pytest.raises(SchemaViolation, match=":2:"):
            IrisDataset(str(path)).load()

    def test_empty_label(self, write_csv):
        path = write_csv(HEADER + "1,2,3,4,\n")
        with pytest.raises(SchemaViolation):
            IrisDataset(str(path)).load()


class TestAccessors:
    """Summary and guards."""

    def test_len_before_load(self, iris_csv):
        with pytest.raises(RuntimeError, match="not loaded"):
            len(IrisDataset(str(iris_csv)))

    def test_summary(self, iris_csv):
        stats = IrisDataset(str(iris_csv)).load().summary()
        assert stats["total_samples"] == 150
        assert stats["num_classes"] == 3
        assert set(stats["class_distribution"].values()) == {50}

    def test_summary_not_loaded(self, iris_csv):
        assert IrisDataset(str(iris_csv)).summary() == {"loaded": False}

    def test_records_by_class(self, iris_csv):
        dataset = IrisDataset(str(iris_csv)).load()
        setosa = dataset.get_records_by_class("Iris-setosa")
        assert len(setosa) == 50
        assert all(r.label == "Iris-setosa" for r in setosa)
        assert dataset.get_num_classes() == 3

    def test_print_summary(self, iris_csv, capsys):
        IrisDataset(str(iris_csv)).load().print_summary("Iris")
        out = capsys.readouterr().out
        assert "Total Samples: 150" in out
        assert "Iris-virginica" in out
