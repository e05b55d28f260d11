"""Data models for extracted transactions and column layouts."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.normalizers import ZERO, format_amount, to_cents

# Width of the description box on the legacy form layout.
DESCRIPTION_WIDTH = 35


class Term(StrEnum):
    """Holding period classification."""

    SHORT = "Short"
    LONG = "Long"


@dataclass(frozen=True)
class NormalizedTransaction:
    """One disposal in the unified schedule.

    ``description`` is cut to ``DESCRIPTION_WIDTH`` characters and the
    ``proceeds``, ``cost_basis`` and ``gain_loss`` amounts are rounded to
    cents on construction. ``wash_sale`` keeps the amount the source
    reported; use ``wash_sale_adjustment`` for its output form.
    """

    source: SourceKind
    description: str
    date_acquired: str
    date_sold: str
    proceeds: Decimal
    cost_basis: Decimal
    gain_loss: Decimal
    term: Term
    box_code: str
    wash_sale: Decimal = ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "description", self.description[:DESCRIPTION_WIDTH])
        for name in ("proceeds", "cost_basis", "gain_loss"):
            object.__setattr__(self, name, to_cents(getattr(self, name)))

    @property
    def wash_sale_adjustment(self) -> str:
        """Two-decimal string when positive, otherwise empty."""
        return format_amount(self.wash_sale) if self.wash_sale > 0 else ""

    def as_row(self) -> list[str]:
        """Cells in export column order, description unquoted."""
        return [
            self.description,
            self.date_acquired,
            self.date_sold,
            format_amount(self.proceeds),
            format_amount(self.cost_basis),
            self.wash_sale_adjustment,
            format_amount(self.gain_loss),
            self.term.value,
            self.box_code,
            self.source.value,
        ]


@dataclass(frozen=True)
class ColumnLayout:
    """Named column positions for one source's export rows.

    Attributes:
        columns: Field name -> 0-based column index.
        min_fields: Rows with fewer fields are skipped.
    """

    columns: Mapping[str, int]
    min_fields: int

    def pick(self, fields: Sequence[str]) -> dict[str, str]:
        """Map a split row to trimmed named values; missing cells are ``""``."""
        return {
            name: fields[idx].strip() if idx < len(fields) else ""
            for name, idx in self.columns.items()
        }


@dataclass
class ExtractionReport:
    """Result of running one extractor over one document.

    Attributes:
        source: Dialect the extractor handles.
        transactions: Extracted rows in file order.
        rows_scanned: Candidate rows examined.
        rows_skipped: Candidate rows rejected (too short, sub-header, or
            not a disposal).
        header_found: ``False`` when a header-anchored layout found no
            header, in which case nothing was scanned.
    """

    source: SourceKind
    transactions: list[NormalizedTransaction] = field(default_factory=list)
    rows_scanned: int = 0
    rows_skipped: int = 0
    header_found: bool = True

    @property
    def count(self) -> int:
        return len(self.transactions)
