"""Data models for raw brokerage documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class SourceKind(StrEnum):
    """Supported brokerage export dialects."""

    FIDELITY = "Fidelity"
    ROBINHOOD = "Robinhood"
    COINBASE = "Coinbase"
    UNRECOGNIZED = "Unrecognized"


@dataclass(frozen=True)
class RawDocument:
    """Decoded text of one uploaded file.

    Attributes:
        name: Filename or other identifier supplied by the caller.
        text: Full decoded content. Line endings are left as found.
        encoding: Codec that decoded the bytes.
        warnings: Non-fatal issues encountered while decoding.
    """

    name: str
    text: str
    encoding: str = "utf-8"
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def char_count(self) -> int:
        return len(self.text)
