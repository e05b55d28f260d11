"""Amount, date and field normalizers shared by all extractors.

Every function here degrades instead of raising: a malformed cell becomes
``0`` or ``VARIOUS`` so that one bad row never aborts a whole file.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from lotsort.documents.schemas import SourceKind

VARIOUS = "VARIOUS"
ZERO = Decimal("0")
CENT = Decimal("0.01")

# Magnitudes above 1e40 parse as zero so cent quantization
# never exceeds the context precision.
_MAX_ADJUSTED_EXPONENT = 40
_MONEY_CONTEXT = Context(prec=64, rounding=ROUND_HALF_UP)

_NON_NUMERIC_RE = re.compile(r"[^0-9.\-]")
_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------


def _to_decimal(text: str) -> Decimal | None:
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def _in_range(value: Decimal) -> bool:
    return value.is_finite() and value.adjusted() <= _MAX_ADJUSTED_EXPONENT


def parse_amount(raw: str | None) -> Decimal:
    """Parse a numeric-looking cell such as ``$1,234.56`` into a ``Decimal``.

    A direct parse is tried first. On failure every character other than
    digits, ``.`` and ``-`` is stripped and the parse is retried. Anything
    still unparseable is ``0``, as is a value that parses but is NaN,
    infinite or larger than 1e40 (``"1E50"`` is ``0``, not ``150``).
    """
    if raw is None:
        return ZERO
    text = str(raw).strip()
    if not text:
        return ZERO

    value = _to_decimal(text)
    if value is None:
        value = _to_decimal(_NON_NUMERIC_RE.sub("", text))
    if value is None or not _in_range(value):
        return ZERO
    return value


def to_cents(value: Decimal) -> Decimal:
    """Round to two places, half away from zero. Negative zero becomes zero."""
    result = value.quantize(CENT, context=_MONEY_CONTEXT)
    return abs(result) if result.is_zero() else result


def format_amount(value: Decimal) -> str:
    return f"{to_cents(value):.2f}"


def leading_int(raw: str | None) -> int | None:
    """Integer prefix of ``raw`` (``"400 days"`` -> 400), or ``None``."""
    if not raw:
        return None
    m = _LEADING_INT_RE.match(raw)
    return int(m.group(1)) if m else None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def _expand_two_digit_year(year: str) -> str:
    century = "19" if (leading_int(year) or 0) > 50 else "20"
    return f"{century}{year}"


def parse_date(raw: str | None, source: SourceKind) -> str:
    """Convert a source-specific date cell to ``MM/DD/YYYY``.

    Blank cells become ``VARIOUS`` for every source. Robinhood sends
    ``YYYYMMDD``; Fidelity sends ``M/D/YY`` with a 50-year pivot (``51`` ->
    ``1951``, ``50`` -> ``2050``); Coinbase is already canonical. Values that
    do not have the expected shape are returned unchanged.
    """
    if raw is None or not raw.strip():
        return VARIOUS
    clean = raw.strip()

    if source == SourceKind.ROBINHOOD:
        if len(clean) == 8:
            return f"{clean[4:6]}/{clean[6:8]}/{clean[0:4]}"
        return raw

    if source == SourceKind.FIDELITY:
        parts = clean.split("/")
        if len(parts) == 3:
            return f"{parts[0]}/{parts[1]}/{_expand_two_digit_year(parts[2])}"
        return raw

    return clean


# ---------------------------------------------------------------------------
# Row splitting
# ---------------------------------------------------------------------------


def split_quoted(line: str, delimiter: str = ",") -> list[str]:
    """Split a delimited line, honouring double-quoted fields.

    Each quote character toggles the in-quotes state and is dropped from
    the output, so ``"1,000"`` yields the single field ``1,000``.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in line:
        if ch == '"':
            in_quotes = not in_quotes
        elif ch == delimiter and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields
