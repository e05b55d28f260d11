"""Ingestion pipeline — file → load → detect → extract.

Batch reads are issued concurrently and awaited together; results come
back in submission order whatever order the reads finish in.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from lotsort.documents.detector import detect_source
from lotsort.documents.loader import DocumentLoader
from lotsort.documents.schemas import RawDocument, SourceKind
from lotsort.parsing.factory import extract
from lotsort.pipeline.schemas import FileExtractionResult

logger = logging.getLogger(__name__)


class IngestPipeline:
    """Orchestrates ingestion: load → detect → extract."""

    def __init__(self, loader: DocumentLoader | None = None):
        self.loader = loader or DocumentLoader()

    def extract_document(self, doc: RawDocument) -> FileExtractionResult:
        """Detect ``doc``'s dialect and extract its transactions.

        Unrecognized documents are never handed to an extractor; they come
        back with zero transactions and a warning.
        """
        warnings = list(doc.warnings)
        source = detect_source(doc.text)

        if source == SourceKind.UNRECOGNIZED:
            warnings.append("Unrecognized export format; no transactions extracted")
            logger.info("Skipping %s (%d chars): unrecognized format", doc.name, doc.char_count)
            return FileExtractionResult(
                filename=doc.name,
                detected_source=source,
                char_count=doc.char_count,
                warnings=tuple(warnings),
            )

        report = extract(doc.text, source)
        if not report.header_found:
            warnings.append(f"{source} header row not found; no transactions extracted")

        logger.info(
            "Ingested %s (%d chars): %s, %d transactions, %d rows skipped",
            doc.name, doc.char_count, source, report.count, report.rows_skipped,
        )
        return FileExtractionResult(
            filename=doc.name,
            detected_source=source,
            transactions=tuple(report.transactions),
            rows_skipped=report.rows_skipped,
            char_count=doc.char_count,
            warnings=tuple(warnings),
        )

    def ingest_text(self, text: str, filename: str = "inline") -> FileExtractionResult:
        """Extract from already-decoded text (no loading step)."""
        return self.extract_document(RawDocument(name=filename, text=text))

    def ingest_bytes(self, data: bytes, filename: str) -> FileExtractionResult:
        return self.extract_document(self.loader.load_bytes(data, filename))

    def ingest_file(self, path: str | Path) -> FileExtractionResult:
        return self.extract_document(self.loader.load_file(path))

    async def ingest_batch(self, paths: Sequence[str | Path]) -> list[FileExtractionResult]:
        """Read every file concurrently, then extract in submission order."""
        docs = await asyncio.gather(*(self.loader.load_file_async(p) for p in paths))
        return [self.extract_document(doc) for doc in docs]

    def ingest_batch_sync(self, paths: Sequence[str | Path]) -> list[FileExtractionResult]:
        return asyncio.run(self.ingest_batch(paths))
