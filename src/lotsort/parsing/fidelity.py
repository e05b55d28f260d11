"""Fidelity 1099-B export extractor.

Transaction rows start with ``1099-B-Detail,`` and are plain
comma-separated (Fidelity never quotes these fields). The export repeats
a ``1099-B-1a`` sub-header row inside the detail block; it is skipped.

Box codes follow the holding period and whether basis was reported to
the IRS ("covered"):

    ========  =======  ===========
    term      covered  not covered
    ========  =======  ===========
    Short     A        C
    Long      D        F
    ========  =======  ===========
"""

from __future__ import annotations

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.base import BaseExtractor
from lotsort.parsing.normalizers import parse_amount, parse_date
from lotsort.parsing.schemas import ColumnLayout, NormalizedTransaction, Term

ROW_PREFIX = "1099-B-Detail,"
SUBHEADER_LABEL = "1099-B-1a"

FIDELITY_LAYOUT = ColumnLayout(
    columns={
        "description": 8,
        "date_acquired": 11,
        "date_sold": 12,
        "proceeds": 13,
        "cost_basis": 14,
        "wash_sale": 16,
        "gain": 17,
        "loss": 18,
        "term": 21,
        "covered": 22,
    },
    min_fields=22,
)

_BOX_CODES: dict[tuple[Term, bool], str] = {
    (Term.SHORT, True): "A",
    (Term.SHORT, False): "C",
    (Term.LONG, True): "D",
    (Term.LONG, False): "F",
}


def is_covered(raw: str) -> bool:
    upper = raw.upper()
    return "COVERED" in upper and "NON" not in upper


class FidelityExtractor(BaseExtractor):
    """Extract ``1099-B-Detail`` rows from a Fidelity export."""

    source = SourceKind.FIDELITY
    layout = FIDELITY_LAYOUT

    def _candidate_lines(self, lines: list[str]) -> list[str]:
        return [line for line in lines if line.startswith(ROW_PREFIX)]

    def _build(self, row: dict[str, str]) -> NormalizedTransaction | None:
        description = row["description"]
        if not description or SUBHEADER_LABEL in description:
            return None

        wash_sale = parse_amount(row["wash_sale"])
        gain = parse_amount(row["gain"])
        loss = parse_amount(row["loss"])
        term = Term.LONG if "LONG" in row["term"].upper() else Term.SHORT

        return NormalizedTransaction(
            source=self.source,
            description=description,
            date_acquired=parse_date(row["date_acquired"], self.source),
            date_sold=parse_date(row["date_sold"], self.source),
            proceeds=parse_amount(row["proceeds"]),
            cost_basis=parse_amount(row["cost_basis"]),
            wash_sale=wash_sale,
            # wash sale is added on top of the component gain/loss
            gain_loss=gain - abs(loss) + wash_sale,
            term=term,
            box_code=_BOX_CODES[(term, is_covered(row["covered"]))],
        )
