"""Tests for source detection."""

from __future__ import annotations

import pytest

from lotsort.documents.detector import detect_source, split_lines
from lotsort.documents.schemas import SourceKind


class TestDetectSource:
    def test_fidelity(self, fidelity_content: str):
        assert detect_source(fidelity_content) == SourceKind.FIDELITY

    def test_robinhood(self, robinhood_content: str):
        assert detect_source(robinhood_content) == SourceKind.ROBINHOOD

    def test_coinbase(self, coinbase_content: str):
        assert detect_source(coinbase_content) == SourceKind.COINBASE

    def test_coinbase_by_header_only(self):
        content = "Transaction Type,Transaction ID,Tax lot ID,Asset name\n"
        assert detect_source(content) == SourceKind.COINBASE

    def test_coinbase_by_title_only(self):
        assert detect_source("Gain/loss report\nnothing else") == SourceKind.COINBASE

    def test_unrecognized(self):
        assert detect_source("Date,Payee,Amount\n") == SourceKind.UNRECOGNIZED

    def test_empty(self):
        assert detect_source("") == SourceKind.UNRECOGNIZED

    def test_idempotent(self, robinhood_content: str):
        assert detect_source(robinhood_content) == detect_source(robinhood_content)


class TestPriority:
    def test_fidelity_beats_robinhood(self):
        content = "1099 Summary\nRobinhood Markets Inc\n"
        assert detect_source(content) == SourceKind.FIDELITY

    def test_robinhood_beats_coinbase(self):
        content = "Robinhood Markets\nGain/loss report\n"
        assert detect_source(content) == SourceKind.ROBINHOOD

    def test_fidelity_banner_only_counts_on_first_line(self):
        content = "Some preamble\n1099 Summary\n"
        assert detect_source(content) == SourceKind.UNRECOGNIZED

    @pytest.mark.parametrize("eol", ["\n", "\r\n", "\r"])
    def test_first_line_with_any_terminator(self, eol: str):
        content = f"1099 Summary{eol}Robinhood Markets{eol}"
        assert detect_source(content) == SourceKind.FIDELITY

    def test_filename_is_irrelevant(self):
        # detection takes content only
        assert detect_source("robinhood.csv") == SourceKind.UNRECOGNIZED


class TestSplitLines:
    def test_mixed_terminators(self):
        assert split_lines("a\r\nb\rc\nd") == ["a", "b", "c", "d"]

    def test_form_feed_not_a_break(self):
        assert split_lines("a\x0cb\nc") == ["a\x0cb", "c"]
