"""
Dataset loading and handling for the iris k-NN classifier.
"""

import csv
from pathlib import Path
from typing import List, Dict, Any

from iris_knn.data.record import Record, FEATURE_NAMES, NUM_FEATURES
from iris_knn.errors import SchemaViolation


LABEL_COLUMN = "class"
COLUMNS = FEATURE_NAMES + (LABEL_COLUMN,)


class IrisDataset:
    """Dataset class for loading labeled flower measurements from a CSV file."""

    def __init__(self, csv_path: str, delimiter: str = ","):
        """
        Initialize the dataset.

        Args:
            csv_path: Path to the delimited text file.
            delimiter: Column delimiter (default: comma).
        """
        self.csv_path = Path(csv_path)
        self.delimiter = delimiter
        self.header: List[str] = []
        self._column_order: List[int] = []
        self.records: List[Record] = []
        self.class_names: List[str] = []
        self._loaded = False

    def load(self) -> "IrisDataset":
        """
        Load the dataset from the CSV file.

        Expects a header row followed by one record per line:
            sepal_length,sepal_width,petal_length,petal_width,class
            5.1,3.5,1.4,0.2,Iris-setosa
            ...

        Columns are matched by header name, so their order in the file may
        differ. Blank lines are skipped.

        Returns:
            self for method chaining.

        Raises:
            FileNotFoundError: If the file does not exist.
            SchemaViolation: If the header does not name exactly the expected
                columns, or a row does not hold four numbers and a label.
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(
                f"Dataset file not found: {self.csv_path}"
            )

        self.header = []
        self._column_order = []
        self.records = []
        self.class_names = []

        with open(self.csv_path, newline="") as f:
            reader = csv.reader(f, delimiter=self.delimiter)
            for row in reader:
                if not row or all(not cell.strip() for cell in row):
                    continue
                if not self.header:
                    self._read_header(row, reader.line_num)
                    continue
                self.records.append(self._parse_row(row, reader.line_num))

        # Class names in order of first appearance
        for record in self.records:
            if record.label not in self.class_names:
                self.class_names.append(record.label)

        self._loaded = True
        return self

    def _read_header(self, row: List[str], line_num: int) -> None:
        header = [cell.strip() for cell in row]
        if len(header) != len(COLUMNS) or set(header) != set(COLUMNS):
            raise SchemaViolation(
                f"{self.csv_path}:{line_num}: header must name the columns "
                f"{','.join(COLUMNS)} (in any order), got {','.join(header)}"
            )
        self.header = header
        self._column_order = [header.index(name) for name in COLUMNS]

    def _parse_row(self, row: List[str], line_num: int) -> Record:
        cells = [cell.strip() for cell in row]
        if len(cells) != NUM_FEATURES + 1:
            raise SchemaViolation(
                f"{self.csv_path}:{line_num}: expected {NUM_FEATURES + 1} "
                f"columns, got {len(cells)}"
            )
        cells = [cells[i] for i in self._column_order]
        try:
            return Record(cells[:NUM_FEATURES], cells[NUM_FEATURES])
        except SchemaViolation as e:
            raise SchemaViolation(f"{self.csv_path}:{line_num}: {e}") from e

    def __len__(self) -> int:
        """Return the number of records in the dataset."""
        if not self._loaded:
            raise RuntimeError("Dataset not loaded. Call load() first.")
        return len(self.records)

    def __getitem__(self, idx: int) -> Record:
        if not self._loaded:
            raise RuntimeError("Dataset not loaded. Call load() first.")
        return self.records[idx]

    def get_num_classes(self) -> int:
        """Return the number of classes in the dataset."""
        return len(self.class_names)

    def get_records_by_class(self, class_name: str) -> List[Record]:
        """
        Get all records belonging to a specific class.

        Args:
            class_name: Label of the class.

        Returns:
            List of records with that label, in file order.
        """
        return [record for record in self.records if record.label == class_name]

    def summary(self) -> Dict[str, Any]:
        """
        Get a summary of the dataset.

        Returns:
            Dictionary with dataset statistics.
        """
        if not self._loaded:
            return {"loaded": False}

        class_distribution = {
            class_name: len(self.get_records_by_class(class_name))
            for class_name in self.class_names
        }

        return {
            "loaded": True,
            "total_samples": len(self.records),
            "num_classes": len(self.class_names),
            "class_names": self.class_names,
            "class_distribution": class_distribution,
            "header": self.header,
            "csv_path": str(self.csv_path)
        }

    def print_summary(self, title: str = "Dataset Summary") -> None:
        """
        Print a formatted summary of the dataset.

        Args:
            title: Title to display at the top of the summary.
        """
        stats = self.summary()

        print(f"\n   {title}")
        print(f"   {'=' * 50}")

        if not stats.get("loaded", False):
            print("   Dataset not loaded.")
            return

        print(f"   File: {stats['csv_path']}")
        print(f"   Columns: {', '.join(stats['header'])}")
        print(f"   Total Samples: {stats['total_samples']}")
        print(f"   Number of Classes: {stats['num_classes']}")
        print(f"\n   Class Distribution:")
        print(f"   {'-' * 30}")

        for class_name, count in stats['class_distribution'].items():
            percentage = (count / stats['total_samples']) * 100
            bar = '█' * int(percentage / 5)
            print(f"   {class_name:16} | {count:4} samples | {percentage:5.1f}% | {bar}")

        print(f"   {'-' * 30}")

    def __repr__(self) -> str:
        """Return string representation of the dataset."""
        if not self._loaded:
            return f"IrisDataset(csv_path='{self.csv_path}', loaded=False)"
        return (
            f"IrisDataset(csv_path='{self.csv_path}', "
            f"samples={len(self.records)}, classes={len(self.class_names)})"
        )
