"""Document ingestion — loading and source detection."""

from lotsort.documents.detector import detect_source
from lotsort.documents.loader import DocumentLoader
from lotsort.documents.schemas import RawDocument, SourceKind

__all__ = [
    "DocumentLoader",
    "RawDocument",
    "SourceKind",
    "detect_source",
]
