"""Tests for ledger/validators.py"""

from decimal import Decimal

import pytest

from ledger.exceptions import ValidationError
from ledger.validators import (
    is_valid_entry_input,
    parse_entry_amount,
    validate_description,
    validate_entry_input,
)


class TestParseEntryAmount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1000", Decimal("1000")),
            (" 12.50 ", Decimal("12.50")),
            ("1,250.75", Decimal("1250.75")),
            ("0.01", Decimal("0.01")),
            (5, Decimal("5")),
            (Decimal("3.3"), Decimal("3.3")),
        ],
    )
    def test_accepts_positive_numbers(self, raw, expected):
        assert parse_entry_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "12abc", "NaN", "Infinity", "-inf", None, True])
    def test_rejects_non_numeric_or_non_finite(self, raw):
        with pytest.raises(ValidationError):
            parse_entry_amount(raw)

    @pytest.mark.parametrize("raw", ["1e999999999", "1E+400", Decimal("9E+999999"), 10**400])
    def test_rejects_amounts_too_large_to_total(self, raw):
        with pytest.raises(ValidationError, match="finite"):
            parse_entry_amount(raw)

    def test_thousands_separators_are_stripped(self):
        assert parse_entry_amount("1,000") == Decimal("1000")

    @pytest.mark.parametrize("raw", ["0", "0.00", "-5", -1])
    def test_rejects_zero_and_negative(self, raw):
        with pytest.raises(ValidationError, match="greater than zero"):
            parse_entry_amount(raw)


class TestValidateDescription:
    def test_trims_whitespace(self):
        assert validate_description("  Salary \n") == "Salary"

    def test_rejects_blank(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_description("   ")

    def test_rejects_non_string(self):
        with pytest.raises(ValidationError):
            validate_description(42)

    def test_accepts_long_text(self):
        assert validate_description("x" * 500) == "x" * 500


class TestEntryInput:
    def test_validate_returns_normalised_pair(self):
        assert validate_entry_input(" Rent ", "500") == ("Rent", Decimal("500"))

    def test_predicate_accepts_valid_input(self):
        assert is_valid_entry_input("Salary", "1000") is True

    @pytest.mark.parametrize(
        "description, amount",
        [("", "10"), ("   ", "10"), ("Lunch", ""), ("Lunch", "ten"), ("Lunch", "0"), ("Lunch", "-3")],
    )
    def test_predicate_rejects_invalid_input(self, description, amount):
        assert is_valid_entry_input(description, amount) is False
