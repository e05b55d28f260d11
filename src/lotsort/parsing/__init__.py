"""Per-broker extraction and classification."""

from lotsort.parsing.base import BaseExtractor
from lotsort.parsing.normalizers import VARIOUS, parse_amount, parse_date
from lotsort.parsing.schemas import (
    ColumnLayout,
    ExtractionReport,
    NormalizedTransaction,
    Term,
)

__all__ = [
    "VARIOUS",
    "BaseExtractor",
    "ColumnLayout",
    "ExtractionReport",
    "NormalizedTransaction",
    "Term",
    "parse_amount",
    "parse_date",
]
