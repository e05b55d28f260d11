"""Source detection — classify an export by its content signatures.

Signatures are checked in a fixed priority order and the first match wins:

1. the first line carries Fidelity's ``1099 Summary`` banner
2. ``Robinhood Markets`` appears anywhere
3. Coinbase's lot-report header row appears anywhere
4. Coinbase's ``Gain/loss report`` title appears anywhere

The filename is never consulted.
"""

from __future__ import annotations

import logging

from lotsort.documents.schemas import SourceKind

logger = logging.getLogger(__name__)

FIDELITY_BANNER = "1099 Summary"
ROBINHOOD_MARKER = "Robinhood Markets"
COINBASE_HEADER = "Transaction Type,Transaction ID,Tax lot ID"
COINBASE_TITLE = "Gain/loss report"


def normalize_newlines(content: str) -> str:
    """Convert ``\\r\\n`` and bare ``\\r`` terminators to ``\\n``."""
    return content.replace("\r\n", "\n").replace("\r", "\n")


def split_lines(content: str) -> list[str]:
    """Split on any of the three line terminators.

    Unlike ``str.splitlines``, form feeds and other separators inside a
    cell do not start a new line.
    """
    return normalize_newlines(content).split("\n")


def detect_source(content: str) -> SourceKind:
    """Return the dialect of ``content``, or ``UNRECOGNIZED``."""
    normalized = normalize_newlines(content)
    first_line = normalized.split("\n", 1)[0].strip()

    if FIDELITY_BANNER in first_line:
        source = SourceKind.FIDELITY
    elif ROBINHOOD_MARKER in normalized:
        source = SourceKind.ROBINHOOD
    elif COINBASE_HEADER in normalized or COINBASE_TITLE in normalized:
        source = SourceKind.COINBASE
    else:
        source = SourceKind.UNRECOGNIZED

    logger.debug("Detected source %s", source)
    return source
