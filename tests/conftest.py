"""Shared fixtures for tests — synthetic broker exports, no real files."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------


def _fidelity_line(
    description: str = "AAPL",
    acquired: str = "01/15/20",
    sold: str = "03/20/21",
    proceeds: str = "1500.00",
    cost: str = "1000.00",
    wash: str = "",
    gain: str = "0.00",
    loss: str = "0.00",
    term: str = "SHORT",
    covered: str = "COVERED",
) -> str:
    cols = [""] * 23
    cols[0] = "1099-B-Detail"
    cols[8] = description
    cols[11] = acquired
    cols[12] = sold
    cols[13] = proceeds
    cols[14] = cost
    cols[16] = wash
    cols[17] = gain
    cols[18] = loss
    cols[21] = term
    cols[22] = covered
    return ",".join(cols)


def _robinhood_line(
    description: str = "NVDA",
    acquired: str = "20220110",
    sold: str = "20230615",
    cost: str = "1000.00",
    proceeds: str = "1500.00",
    term: str = "SHORT",
    wash: str = "",
    code: str = "",
) -> str:
    cols = [""] * 15
    cols[0] = "1099-B"
    cols[3] = acquired
    cols[4] = sold
    cols[5] = description
    cols[7] = cost
    cols[8] = proceeds
    cols[9] = term
    cols[12] = wash
    cols[14] = code
    return ",".join(cols)


COINBASE_HEADER_ROW = (
    "Transaction Type,Transaction ID,Tax lot ID,Asset name,Amount,"
    "Date Acquired,Cost basis (USD),Date of Disposition,Proceeds (USD),"
    "Gains (Losses) (USD),Holding period (Days),Data source"
)


@pytest.fixture
def fidelity_line() -> Callable[..., str]:
    return _fidelity_line


@pytest.fixture
def robinhood_line() -> Callable[..., str]:
    return _robinhood_line


# ---------------------------------------------------------------------------
# Synthetic exports
# ---------------------------------------------------------------------------


@pytest.fixture
def fidelity_content() -> str:
    """Four real rows, one sub-header row, one truncated row."""
    lines = [
        "1099 Summary,Tax Year 2023,Account X12345678",
        "1099-DIV,Ordinary Dividends,12.34",
        _fidelity_line(description="1099-B-1a Description of property"),
        _fidelity_line(
            description="APPLE INC", acquired="01/15/20", sold="03/20/21",
            proceeds="1500.00", cost="1000.00", wash="50.00",
            gain="600.00", loss="0.00", term="LONG TERM", covered="COVERED",
        ),
        _fidelity_line(
            description="MICROSOFT CORP", acquired="06/01/23", sold="09/15/23",
            proceeds="800.00", cost="1000.00", gain="0.00", loss="-200.00",
            term="SHORT TERM", covered="NONCOVERED",
        ),
        _fidelity_line(
            description="TESLA INC", acquired="", sold="11/02/23",
            proceeds="400.00", cost="500.00", wash="25.50", gain="0.00",
            loss="100.00", term="SHORT TERM", covered="COVERED",
        ),
        "1099-B-Detail,TRUNCATED,ROW",
        _fidelity_line(
            description="ALPHABET INC CL A", acquired="3/4/99", sold="5/6/23",
            proceeds="$2000.00", cost="$1200.00", gain="800.00",
            term="LONG TERM", covered="NONCOVERED",
        ),
    ]
    return "\n".join(lines)


@pytest.fixture
def robinhood_content() -> str:
    """Header row plus four transactions."""
    lines = [
        "Robinhood Markets Inc,Consolidated Form 1099,2023",
        _robinhood_line(
            description="DESCRIPTION", acquired="DATE ACQUIRED", sold="DATE SOLD",
            cost="COST", proceeds="PROCEEDS", term="TERM", code="CODE",
        ),
        _robinhood_line(
            description="NVIDIA CORP", acquired="20220110", sold="20230615",
            cost="1000.00", proceeds="1500.25", term="LONG",
        ),
        _robinhood_line(
            description="ADVANCED MICRO DEVICES", acquired="20230301", sold="20230615",
            cost="900.00", proceeds="850.00", term="SHORT", wash="20.00",
        ),
        _robinhood_line(
            description="GAMESTOP CORP", acquired="20230101", sold="20230201",
            cost="100.00", proceeds="120.00", term="SHORT", code="B",
        ),
        _robinhood_line(
            description="AMC ENTERTAINMENT", acquired="2023-01-01", sold="20230301",
            cost="50.00", proceeds="40.00", term="LONG TERM",
        ),
    ]
    return "\r\n".join(lines)


@pytest.fixture
def coinbase_content() -> str:
    """Preamble, header, three disposals, one buy, one short row."""
    lines = [
        "Gain/loss report",
        "Tax year,2023",
        "",
        COINBASE_HEADER_ROW,
        'Sell,tx1,lot1,BTC,0.5,01/10/2022,"20,000.00",03/15/2023,"12,500.00","-7,500.00",429,Coinbase',
        "Buy,tx2,lot2,ETH,1,01/01/2023,1500.00,,,,,Coinbase",
        "Convert,tx3,lot3,ETH,1.2,06/01/2023,1800.00,07/01/2023,2000.00,200.00,30,Coinbase",
        "",
        "Trade,tx4,lot4,SOL,10,03/15/2022,300.00,03/15/2023,250.00,-50.00,365,Coinbase",
        "Sell,tx5,short",
    ]
    return "\r".join(lines)


# ---------------------------------------------------------------------------
# Files on disk
# ---------------------------------------------------------------------------


@pytest.fixture
def export_files(
    tmp_path: Path,
    fidelity_content: str,
    robinhood_content: str,
    coinbase_content: str,
) -> dict[str, Path]:
    files = {
        "fidelity": tmp_path / "fidelity_2023.csv",
        "robinhood": tmp_path / "robinhood_2023.csv",
        "coinbase": tmp_path / "coinbase_2023.csv",
        "unknown": tmp_path / "bank_statement.csv",
    }
    files["fidelity"].write_text(fidelity_content, encoding="utf-8")
    files["robinhood"].write_text(robinhood_content, encoding="utf-8")
    files["coinbase"].write_text(coinbase_content, encoding="utf-8")
    files["unknown"].write_text("Date,Payee,Amount\n01/02/2023,Grocer,-12.00\n", encoding="utf-8")
    return files
