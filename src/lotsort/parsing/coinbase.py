"""Coinbase gain/loss report extractor.

The report has a preamble followed by a header row beginning
``Transaction Type,Transaction ID,Tax lot ID``; everything after it is a
lot record. Fields may be double-quoted and contain commas. Only
disposals (``Sell``, ``Trade``, ``Convert``) are kept.
"""

from __future__ import annotations

from lotsort.documents.detector import COINBASE_HEADER
from lotsort.documents.schemas import SourceKind
from lotsort.parsing.base import BaseExtractor
from lotsort.parsing.normalizers import leading_int, parse_amount, parse_date, split_quoted
from lotsort.parsing.schemas import ColumnLayout, NormalizedTransaction, Term

DISPOSAL_TYPES = frozenset({"Sell", "Trade", "Convert"})
LONG_TERM_DAYS = 365

COINBASE_LAYOUT = ColumnLayout(
    columns={
        "transaction_type": 0,
        "asset_name": 3,
        "date_acquired": 5,
        "cost_basis": 6,
        "date_sold": 7,
        "proceeds": 8,
        "gain_loss": 9,
        "holding_days": 10,
    },
    min_fields=11,
)


class CoinbaseExtractor(BaseExtractor):
    """Extract disposal lots from a Coinbase gain/loss report."""

    source = SourceKind.COINBASE
    layout = COINBASE_LAYOUT

    def _candidate_lines(self, lines: list[str]) -> list[str] | None:
        for i, line in enumerate(lines):
            if line.strip().startswith(COINBASE_HEADER):
                return [s for s in (ln.strip() for ln in lines[i + 1:]) if s]
        return None

    def _split(self, line: str) -> list[str]:
        return split_quoted(line)

    def _build(self, row: dict[str, str]) -> NormalizedTransaction | None:
        tx_type = row["transaction_type"]
        if tx_type not in DISPOSAL_TYPES:
            return None

        holding_days = leading_int(row["holding_days"]) or 0
        term = Term.LONG if holding_days > LONG_TERM_DAYS else Term.SHORT

        return NormalizedTransaction(
            source=self.source,
            description=f"{row['asset_name']} ({tx_type})",
            date_acquired=parse_date(row["date_acquired"], self.source),
            date_sold=parse_date(row["date_sold"], self.source),
            proceeds=parse_amount(row["proceeds"]),
            cost_basis=parse_amount(row["cost_basis"]),
            gain_loss=parse_amount(row["gain_loss"]),
            term=term,
            box_code="E" if term == Term.LONG else "B",
        )
