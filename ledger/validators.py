"""Validation helpers shared by the ledger store and its front ends."""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Tuple

from .exceptions import ValidationError


def sanitize_amount_input(raw: object) -> str:
    """Strip whitespace and thousands separators from user-typed amounts."""
    if raw is None:
        return ""
    return str(raw).replace(",", "").strip()


def parse_entry_amount(raw: object, field: str = "amount") -> Decimal:
    """Convert raw input to a finite, strictly positive Decimal."""
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    if isinstance(raw, Decimal):
        amount = raw
    elif isinstance(raw, (int, float)):
        amount = Decimal(str(raw))
    else:
        text = sanitize_amount_input(raw)
        if not text:
            raise ValidationError(f"{field} is required")
        try:
            amount = Decimal(text)
        except (InvalidOperation, TypeError) as exc:
            raise ValidationError(f"{field} must be a numeric value") from exc

    # Huge exponents are valid Decimals but overflow once totals are summed.
    if not amount.is_finite() or not math.isfinite(float(amount)):
        raise ValidationError(f"{field} must be a finite number")
    if amount <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return amount


def validate_description(value: object, field: str = "description") -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    return trimmed


def validate_entry_input(description: object, amount_text: object) -> Tuple[str, Decimal]:
    """Return the normalised (description, amount) pair or raise ValidationError."""
    return validate_description(description), parse_entry_amount(amount_text)


def is_valid_entry_input(description: object, amount_text: object) -> bool:
    """Predicate form of :func:`validate_entry_input` for callers that reject silently."""
    try:
        validate_entry_input(description, amount_text)
    except ValidationError:
        return False
    return True
