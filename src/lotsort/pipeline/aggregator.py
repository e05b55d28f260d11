"""Working set of extracted files and the summaries derived from it.

The flattened transaction list and every summary are recomputed from the
stored per-file results on each call; nothing is cached or patched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from lotsort.parsing.schemas import NormalizedTransaction, Term
from lotsort.pipeline.schemas import AggregateView, FileExtractionResult

logger = logging.getLogger(__name__)


def filter_by_term(
    transactions: Iterable[NormalizedTransaction], term: Term
) -> list[NormalizedTransaction]:
    return [txn for txn in transactions if txn.term == term]


def summarize(
    transactions: Sequence[NormalizedTransaction], file_count: int = 0
) -> AggregateView:
    """Split ``transactions`` by term and total the money columns."""
    view = AggregateView(
        short_term=filter_by_term(transactions, Term.SHORT),
        long_term=filter_by_term(transactions, Term.LONG),
        file_count=file_count,
    )
    for txn in transactions:
        view.total_proceeds += txn.proceeds
        view.total_cost_basis += txn.cost_basis
        view.total_gain_loss += txn.gain_loss
    return view


class TransactionSet:
    """Caller-owned, ordered collection of ``FileExtractionResult``.

    Usage:
        txset = TransactionSet()
        txset.add_batch(await pipeline.ingest_batch(paths))
        csv_bytes = export_all(txset.current_transactions())
    """

    def __init__(self, results: Iterable[FileExtractionResult] = ()) -> None:
        self._results: list[FileExtractionResult] = list(results)

    def __len__(self) -> int:
        return len(self._results)

    @property
    def files(self) -> list[FileExtractionResult]:
        return list(self._results)

    def add_file(self, result: FileExtractionResult) -> None:
        self._results.append(result)
        logger.debug("Added %s (%d transactions)", result.filename, result.count)

    def add_batch(self, results: Sequence[FileExtractionResult]) -> None:
        """Append a completed batch, keeping its submission order."""
        for result in results:
            self.add_file(result)

    def remove_file(self, key: str | int) -> FileExtractionResult:
        """Remove a file by filename (first match) or by position.

        Raises:
            KeyError: No file with that name.
            IndexError: Position out of range.
        """
        if isinstance(key, int):
            removed = self._results.pop(key)
        else:
            for i, result in enumerate(self._results):
                if result.filename == key:
                    removed = self._results.pop(i)
                    break
            else:
                raise KeyError(key)

        logger.debug("Removed %s (%d transactions)", removed.filename, removed.count)
        return removed

    def reset(self) -> None:
        self._results.clear()

    def current_transactions(self) -> list[NormalizedTransaction]:
        """All transactions, file by file in insertion order."""
        return [txn for result in self._results for txn in result.transactions]

    def short_term(self) -> list[NormalizedTransaction]:
        return filter_by_term(self.current_transactions(), Term.SHORT)

    def long_term(self) -> list[NormalizedTransaction]:
        return filter_by_term(self.current_transactions(), Term.LONG)

    def summary(self) -> AggregateView:
        return summarize(self.current_transactions(), file_count=len(self._results))
