"""CSV export of a transaction collection.

Only the description cell is wrapped in double quotes, and it is not
escaped; the remaining cells are written verbatim. Rows are joined with
``\\n`` and the payload has no trailing newline.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from lotsort.config import ExportSettings
from lotsort.parsing.schemas import NormalizedTransaction, Term
from lotsort.pipeline.aggregator import filter_by_term

logger = logging.getLogger(__name__)

EXPORT_HEADER = [
    "Description",
    "Date Acquired",
    "Date Sold",
    "Proceeds",
    "Cost Basis",
    "Wash Sale Adj",
    "Gain/Loss",
    "Term",
    "Box",
    "Source",
]


def _format_row(txn: NormalizedTransaction) -> str:
    description, *rest = txn.as_row()
    return ",".join([f'"{description}"', *rest])


def to_csv(transactions: Sequence[NormalizedTransaction]) -> bytes:
    """Serialize ``transactions`` in the given order as UTF-8 CSV bytes."""
    lines = [",".join(EXPORT_HEADER)]
    lines.extend(_format_row(txn) for txn in transactions)
    return "\n".join(lines).encode("utf-8")


def export_all(transactions: Sequence[NormalizedTransaction]) -> bytes:
    return to_csv(transactions)


def export_short_term(transactions: Sequence[NormalizedTransaction]) -> bytes:
    return to_csv(filter_by_term(transactions, Term.SHORT))


def export_long_term(transactions: Sequence[NormalizedTransaction]) -> bytes:
    return to_csv(filter_by_term(transactions, Term.LONG))


def write_exports(
    transactions: Sequence[NormalizedTransaction],
    out_dir: str | Path,
    settings: ExportSettings | None = None,
) -> list[Path]:
    """Write the all / short-term / long-term files into ``out_dir``.

    A term file is only written when that term has transactions.

    Returns:
        Paths written, in all / short / long order.
    """
    settings = settings or ExportSettings()
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    payloads = [(settings.all_filename, export_all(transactions))]
    if filter_by_term(transactions, Term.SHORT):
        payloads.append((settings.short_term_filename, export_short_term(transactions)))
    if filter_by_term(transactions, Term.LONG):
        payloads.append((settings.long_term_filename, export_long_term(transactions)))

    written: list[Path] = []
    for name, data in payloads:
        path = out_dir / name
        path.write_bytes(data)
        written.append(path)
        logger.info("Wrote %s (%d bytes)", path, len(data))
    return written
