"""Data models for the ingest pipeline and working set."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.normalizers import ZERO
from lotsort.parsing.schemas import NormalizedTransaction


@dataclass(frozen=True)
class FileExtractionResult:
    """Outcome of detecting and extracting one file.

    Produced once per document and never modified; removing a file from
    the working set discards its result.
    """

    filename: str
    detected_source: SourceKind
    transactions: tuple[NormalizedTransaction, ...] = ()
    rows_skipped: int = 0
    char_count: int = 0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.transactions)

    @property
    def recognized(self) -> bool:
        return self.detected_source != SourceKind.UNRECOGNIZED


@dataclass
class AggregateView:
    """Term split and totals over a transaction collection."""

    short_term: list[NormalizedTransaction] = field(default_factory=list)
    long_term: list[NormalizedTransaction] = field(default_factory=list)
    total_proceeds: Decimal = ZERO
    total_cost_basis: Decimal = ZERO
    total_gain_loss: Decimal = ZERO
    file_count: int = 0

    @property
    def transaction_count(self) -> int:
        return len(self.short_term) + len(self.long_term)
