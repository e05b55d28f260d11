"""Abstract base class for all brokerage extractors."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar

from lotsort.documents.detector import split_lines
from lotsort.documents.schemas import SourceKind
from lotsort.parsing.schemas import ColumnLayout, ExtractionReport, NormalizedTransaction

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """Scan one dialect's export and emit normalized transactions.

    Subclasses declare their ``source`` and column ``layout`` and implement
    candidate selection, row splitting and row classification. Rows that
    fail a structural check are counted and skipped, never raised.
    """

    source: ClassVar[SourceKind]
    layout: ClassVar[ColumnLayout]

    def extract(self, content: str) -> list[NormalizedTransaction]:
        """Return the transactions found in ``content``, in file order."""
        return self.extract_with_stats(content).transactions

    def extract_with_stats(self, content: str) -> ExtractionReport:
        """Like ``extract`` but also report how many rows were skipped."""
        candidates = self._candidate_lines(split_lines(content))
        if candidates is None:
            logger.warning("%s: header not found, nothing extracted", self.extractor_name())
            return ExtractionReport(source=self.source, header_found=False)

        report = ExtractionReport(source=self.source, rows_scanned=len(candidates))
        for line in candidates:
            fields = self._split(line)
            if len(fields) < self.layout.min_fields:
                report.rows_skipped += 1
                continue

            txn = self._build(self.layout.pick(fields))
            if txn is None:
                report.rows_skipped += 1
                continue
            report.transactions.append(txn)

        logger.info(
            "%s: extracted %d %s transactions (%d of %d candidate rows skipped)",
            self.extractor_name(), report.count, self.source,
            report.rows_skipped, report.rows_scanned,
        )
        return report

    @abstractmethod
    def _candidate_lines(self, lines: list[str]) -> list[str] | None:
        """Select the lines that may hold transactions.

        Returns ``None`` when the document lacks the structure this
        dialect requires.
        """

    def _split(self, line: str) -> list[str]:
        return line.split(",")

    @abstractmethod
    def _build(self, row: dict[str, str]) -> NormalizedTransaction | None:
        """Classify one named row, or return ``None`` to skip it."""

    @classmethod
    def extractor_name(cls) -> str:
        """Return human-readable extractor name."""
        return cls.__name__
