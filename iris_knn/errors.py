"""
Exception types raised by the k-NN pipeline.
"""


class KNNError(Exception):
    """Base class for every error raised by iris_knn."""


class SchemaViolation(KNNError, ValueError):
    """A record (or CSV row) does not match the fixed four-feature schema."""


class ContractViolation(KNNError, ValueError):
    """
    A caller passed arguments the computation cannot honour.

    Examples: more neighbors than training records, a fold count outside
    1..len(dataset), label sequences of different lengths, or a constant
    feature column during min-max normalization.
    """
