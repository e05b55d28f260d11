"""Extractor factory — map a detected source to its extractor.

Extractors are stateless, so a fresh instance is built per call and no
module-level cache is kept.
"""

from __future__ import annotations

import importlib
import logging

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.base import BaseExtractor
from lotsort.parsing.schemas import ExtractionReport

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Extractor registry
#
# Each entry: (source, module_path, class_name)
# ---------------------------------------------------------------------------

_EXTRACTOR_REGISTRY: list[tuple[SourceKind, str, str]] = [
    (SourceKind.FIDELITY, "lotsort.parsing.fidelity", "FidelityExtractor"),
    (SourceKind.ROBINHOOD, "lotsort.parsing.robinhood", "RobinhoodExtractor"),
    (SourceKind.COINBASE, "lotsort.parsing.coinbase", "CoinbaseExtractor"),
]


def get_extractor(source: SourceKind) -> BaseExtractor:
    """Get the extractor for ``source``.

    Raises:
        ValueError: If no extractor handles ``source`` (including
            ``UNRECOGNIZED``, which must never be parsed speculatively).
    """
    for registered, module_path, cls_name in _EXTRACTOR_REGISTRY:
        if registered == source:
            mod = importlib.import_module(module_path)
            return getattr(mod, cls_name)()

    raise ValueError(
        f"No extractor for source '{source}'. Available: {available_extractors()}"
    )


def extract(content: str, source: SourceKind) -> ExtractionReport:
    """Run the extractor for ``source`` over ``content``."""
    return get_extractor(source).extract_with_stats(content)


def available_extractors() -> list[str]:
    """Return names of sources with a registered extractor."""
    return [source.value for source, _, _ in _EXTRACTOR_REGISTRY]
