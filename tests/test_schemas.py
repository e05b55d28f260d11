"""Tests for transaction and layout data models."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from lotsort.documents.schemas import SourceKind
from lotsort.parsing.schemas import (
    DESCRIPTION_WIDTH,
    ColumnLayout,
    NormalizedTransaction,
    Term,
)


def _txn(**overrides) -> NormalizedTransaction:
    fields = dict(
        source=SourceKind.ROBINHOOD,
        description="NVIDIA CORP",
        date_acquired="01/10/2022",
        date_sold="06/15/2023",
        proceeds=Decimal("1500.255"),
        cost_basis=Decimal("1000"),
        gain_loss=Decimal("500.255"),
        term=Term.LONG,
        box_code="D",
    )
    fields.update(overrides)
    return NormalizedTransaction(**fields)


class TestNormalizedTransaction:
    def test_description_truncated(self):
        txn = _txn(description="X" * 50)
        assert len(txn.description) == DESCRIPTION_WIDTH

    def test_amounts_rounded_to_cents(self):
        txn = _txn()
        assert txn.proceeds == Decimal("1500.26")
        assert str(txn.cost_basis) == "1000.00"

    def test_wash_sale_positive(self):
        assert _txn(wash_sale=Decimal("20")).wash_sale_adjustment == "20.00"

    @pytest.mark.parametrize("amount", ["0", "-5.00"])
    def test_wash_sale_not_positive_is_blank(self, amount: str):
        assert _txn(wash_sale=Decimal(amount)).wash_sale_adjustment == ""

    def test_wash_sale_defaults_blank(self):
        assert _txn().wash_sale_adjustment == ""

    def test_frozen(self):
        txn = _txn()
        with pytest.raises(dataclasses.FrozenInstanceError):
            txn.description = "changed"  # type: ignore[misc]

    def test_as_row_order(self):
        row = _txn(wash_sale=Decimal("1.5")).as_row()
        assert row == [
            "NVIDIA CORP", "01/10/2022", "06/15/2023", "1500.26", "1000.00",
            "1.50", "500.26", "Long", "D", "Robinhood",
        ]


class TestColumnLayout:
    def test_pick_trims(self):
        layout = ColumnLayout(columns={"a": 0, "b": 2}, min_fields=3)
        assert layout.pick([" x ", "skip", " y"]) == {"a": "x", "b": "y"}

    def test_pick_missing_is_blank(self):
        layout = ColumnLayout(columns={"a": 0, "z": 9}, min_fields=1)
        assert layout.pick(["x"]) == {"a": "x", "z": ""}
