"""Data models for the income and expense ledger."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Dict

from .exceptions import ValidationError
from .validators import parse_entry_amount, validate_description

__all__ = ["Category", "Entry", "LedgerTotals"]


class Category(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"

    @property
    def storage_key(self) -> str:
        """Fixed key under which this category's snapshot is stored."""
        return _STORAGE_KEYS[self]

    @property
    def label(self) -> str:
        return "Income" if self is Category.INCOME else "Expenses"

    @classmethod
    def parse(cls, value: object) -> "Category":
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValidationError("category must be a string")
        canonical = value.strip().lower()
        # Accept plural forms used by the URL and CLI surfaces.
        canonical = {"incomes": "income", "expenses": "expense"}.get(canonical, canonical)
        try:
            return cls(canonical)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ValidationError(f"category must be one of: {allowed}") from exc


_STORAGE_KEYS = {
    Category.INCOME: "incomeItems",
    Category.EXPENSE: "expenseItems",
}


@dataclass(frozen=True)
class Entry:
    id: int
    description: str
    amount: Decimal

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the entry to JSON-friendly natives."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": str(self.amount),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Hydrate an Entry, accepting numeric or string amounts."""
        if not isinstance(data, dict):
            raise ValidationError("entry must be an object")
        try:
            raw_id = data["id"]
            raw_description = data["description"]
            raw_amount = data["amount"]
        except KeyError as exc:
            raise ValidationError(f"entry is missing field {exc.args[0]!r}") from exc

        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValidationError("id must be an integer")
        return cls(
            id=raw_id,
            description=validate_description(raw_description),
            amount=parse_entry_amount(raw_amount),
        )


@dataclass(frozen=True)
class LedgerTotals:
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        return self.income - self.expense

    @property
    def is_negative(self) -> bool:
        return self.net < 0

    def to_dict(self) -> Dict[str, str]:
        return {
            "total_income": f"{self.income:.2f}",
            "total_expense": f"{self.expense:.2f}",
            "net": f"{self.net:.2f}",
        }
