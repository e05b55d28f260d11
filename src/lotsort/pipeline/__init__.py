"""Ingest pipeline, working set and CSV export."""

from lotsort.pipeline.aggregator import TransactionSet, summarize
from lotsort.pipeline.export import export_all, export_long_term, export_short_term, to_csv
from lotsort.pipeline.ingest import IngestPipeline
from lotsort.pipeline.schemas import AggregateView, FileExtractionResult

__all__ = [
    "AggregateView",
    "FileExtractionResult",
    "IngestPipeline",
    "TransactionSet",
    "export_all",
    "export_long_term",
    "export_short_term",
    "summarize",
    "to_csv",
]
