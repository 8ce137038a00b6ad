"""Tests for ledger/models.py"""

from decimal import Decimal

import pytest

from ledger.exceptions import ValidationError
from ledger.models import Category, Entry, LedgerTotals


class TestCategory:
    def test_storage_keys(self):
        assert Category.INCOME.storage_key == "incomeItems"
        assert Category.EXPENSE.storage_key == "expenseItems"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("income", Category.INCOME),
            ("INCOME", Category.INCOME),
            ("incomes", Category.INCOME),
            (" expense ", Category.EXPENSE),
            ("expenses", Category.EXPENSE),
            (Category.EXPENSE, Category.EXPENSE),
        ],
    )
    def test_parse(self, raw, expected):
        assert Category.parse(raw) is expected

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValidationError, match="must be one of"):
            Category.parse("savings")


class TestEntry:
    def test_to_dict(self):
        entry = Entry(id=1, description="Salary", amount=Decimal("1000.50"))
        assert entry.to_dict() == {"id": 1, "description": "Salary", "amount": "1000.50"}

    def test_from_dict_accepts_numeric_amount(self):
        entry = Entry.from_dict({"id": 1718000000000, "description": "Coffee", "amount": 3})
        assert entry == Entry(id=1718000000000, description="Coffee", amount=Decimal("3"))

    def test_from_dict_accepts_decimal_string(self):
        entry = Entry.from_dict({"id": 2, "description": "Rent", "amount": "500.25"})
        assert entry.amount == Decimal("500.25")

    def test_is_immutable(self):
        entry = Entry(id=1, description="Salary", amount=Decimal("1"))
        with pytest.raises(AttributeError):
            entry.amount = Decimal("2")

    @pytest.mark.parametrize(
        "payload",
        [
            {"description": "Salary", "amount": 1},
            {"id": "1", "description": "Salary", "amount": 1},
            {"id": True, "description": "Salary", "amount": 1},
            {"id": 1, "description": "", "amount": 1},
            {"id": 1, "description": "Salary", "amount": -1},
            {"id": 1, "description": "Salary", "amount": "abc"},
            ["not", "a", "dict"],
        ],
    )
    def test_from_dict_rejects_schema_mismatch(self, payload):
        with pytest.raises(ValidationError):
            Entry.from_dict(payload)


class TestLedgerTotals:
    def test_net_and_formatting(self):
        totals = LedgerTotals(income=Decimal("1200"), expense=Decimal("500"))
        assert totals.net == Decimal("700")
        assert totals.is_negative is False
        assert totals.to_dict() == {
            "total_income": "1200.00",
            "total_expense": "500.00",
            "net": "700.00",
        }

    def test_negative_net(self):
        totals = LedgerTotals(income=Decimal("10"), expense=Decimal("25.5"))
        assert totals.is_negative is True
        assert totals.to_dict()["net"] == "-15.50"
