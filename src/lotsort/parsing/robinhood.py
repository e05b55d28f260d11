"""Robinhood consolidated 1099 export extractor.

Transaction rows start with ``1099-B,``. Dates are ``YYYYMMDD`` and the
export carries its own Form 8949 box code, which wins when present.
"""

from __future__ import annotations

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.base import BaseExtractor
from lotsort.parsing.normalizers import parse_amount, parse_date
from lotsort.parsing.schemas import ColumnLayout, NormalizedTransaction, Term

ROW_PREFIX = "1099-B,"
HEADER_LABEL = "DESCRIPTION"

ROBINHOOD_LAYOUT = ColumnLayout(
    columns={
        "date_acquired": 3,
        "date_sold": 4,
        "description": 5,
        "cost_basis": 7,
        "proceeds": 8,
        "term": 9,
        "wash_sale": 12,
        "form_8949_code": 14,
    },
    min_fields=15,
)


class RobinhoodExtractor(BaseExtractor):
    """Extract ``1099-B`` rows from a Robinhood export."""

    source = SourceKind.ROBINHOOD
    layout = ROBINHOOD_LAYOUT

    def _candidate_lines(self, lines: list[str]) -> list[str]:
        return [line for line in lines if line.startswith(ROW_PREFIX)]

    def _build(self, row: dict[str, str]) -> NormalizedTransaction | None:
        description = row["description"]
        if not description or description == HEADER_LABEL:
            return None

        cost_basis = parse_amount(row["cost_basis"])
        proceeds = parse_amount(row["proceeds"])
        wash_sale = parse_amount(row["wash_sale"])
        # exact match, not substring
        term = Term.LONG if row["term"].upper() == "LONG" else Term.SHORT
        default_box = "D" if term == Term.LONG else "A"

        return NormalizedTransaction(
            source=self.source,
            description=description,
            date_acquired=parse_date(row["date_acquired"], self.source),
            date_sold=parse_date(row["date_sold"], self.source),
            proceeds=proceeds,
            cost_basis=cost_basis,
            wash_sale=wash_sale,
            gain_loss=proceeds - cost_basis + wash_sale,
            term=term,
            box_code=row["form_8949_code"] or default_box,
        )
