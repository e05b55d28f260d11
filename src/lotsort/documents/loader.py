"""Document loader — read brokerage CSV exports into ``RawDocument``.

Supports both filesystem paths and in-memory bytes (browser-style uploads).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from lotsort.documents.schemas import RawDocument

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".csv", ".txt"}
DEFAULT_ENCODINGS = ("utf-8-sig", "cp1252", "latin-1")


class DocumentLoader:
    """Load brokerage exports into a decoded ``RawDocument``."""

    def __init__(
        self,
        encodings: Sequence[str] = DEFAULT_ENCODINGS,
        supported_extensions: Sequence[str] | None = None,
    ):
        self.encodings = tuple(encodings)
        self.supported_extensions = (
            {ext.lower() for ext in supported_extensions}
            if supported_extensions is not None
            else set(SUPPORTED_EXTENSIONS)
        )

    def load_file(self, path: str | Path) -> RawDocument:
        """Load a document from a filesystem path."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        self._check_extension(path.name)

        return self._decode(path.read_bytes(), path.name)

    def load_bytes(self, data: bytes, filename: str) -> RawDocument:
        """Load a document from in-memory bytes."""
        self._check_extension(filename)
        return self._decode(data, filename)

    async def load_file_async(self, path: str | Path) -> RawDocument:
        """Read a file without blocking the event loop."""
        return await asyncio.to_thread(self.load_file, path)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check_extension(self, filename: str) -> None:
        ext = Path(filename).suffix.lower()
        if ext not in self.supported_extensions:
            raise ValueError(
                f"Unsupported format '{ext}'. Supported: {sorted(self.supported_extensions)}"
            )

    def _decode(self, data: bytes, filename: str) -> RawDocument:
        """Decode with the first codec in ``encodings`` that accepts ``data``.

        ``latin-1`` maps every byte, so with the default chain the final
        utf-8-with-replacement step and its warning are only reached when a
        caller configures a chain without a single-byte codec.
        """
        for encoding in self.encodings:
            try:
                text = data.decode(encoding)
            except UnicodeDecodeError:
                continue
            logger.debug("Decoded %s as %s (%d chars)", filename, encoding, len(text))
            return RawDocument(name=filename, text=text, encoding=encoding)

        text = data.decode("utf-8", errors="replace").lstrip("\ufeff")
        logger.warning("Encoding detection failed for %s, using utf-8 with replacements", filename)
        return RawDocument(
            name=filename,
            text=text,
            encoding="utf-8",
            warnings=("Encoding detection fell back to utf-8 with replacements",),
        )
