"""Framework-agnostic ledger store: in-memory entries mirrored to key-value storage."""

from __future__ import annotations

import json
import logging
import time
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Tuple

from .exceptions import CorruptSnapshotError, PersistenceError, RecordNotFoundError, ValidationError
from .models import Category, Entry, LedgerTotals
from .storage import KeyValueStorage
from .validators import validate_entry_input

logger = logging.getLogger(__name__)

CLEAR_CONFIRMATION_PROMPT = (
    "Are you sure you want to clear all data? This action cannot be undone."
)


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


def encode_entries(entries: List[Entry]) -> str:
    """Render entries as a JSON array with amounts written as exact JSON numbers."""
    # json.dumps would stringify a Decimal or round it through float.
    items = (
        '{"id": %d, "description": %s, "amount": %s}'
        % (entry.id, json.dumps(entry.description), entry.amount)
        for entry in entries
    )
    return "[" + ", ".join(items) + "]"


def decode_entries(raw: str) -> List[Entry]:
    """Decode a stored snapshot, raising CorruptSnapshotError on any mismatch."""
    try:
        payload = json.loads(raw, parse_float=Decimal)
    except (ValueError, TypeError, RecursionError) as exc:
        # ValueError also covers integers beyond the interpreter's digit limit.
        raise CorruptSnapshotError(f"Snapshot is not valid JSON: {exc}") from exc

    if not isinstance(payload, list):
        raise CorruptSnapshotError("Expected list payload")

    entries: List[Entry] = []
    seen = set()
    for index, item in enumerate(payload):
        try:
            entry = Entry.from_dict(item)
        except ValidationError as exc:
            raise CorruptSnapshotError(f"Invalid entry at position {index}: {exc}") from exc
        if entry.id in seen:
            raise CorruptSnapshotError(f"Duplicate entry id {entry.id}")
        seen.add(entry.id)
        entries.append(entry)
    return entries


class LedgerStore:
    """Owns the income and expense sequences and keeps storage in step with them."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        self._storage = storage
        self._clock = clock or _wall_clock_ms
        self._entries: Dict[Category, List[Entry]] = {category: [] for category in Category}
        self.initialize()  # Hydrate in-memory state from persistence on construction.

    # Lifecycle ------------------------------------------------------------
    def initialize(self) -> None:
        """Reload both categories from storage; unreadable snapshots load as empty."""
        for category in Category:
            self._entries[category] = self._load_category(category)

    # Mutations ------------------------------------------------------------
    def add(self, category: Category, description: object, amount_text: object) -> Entry:
        """Append a new entry or raise ValidationError describing the bad input."""
        category = Category.parse(category)
        clean_description, amount = validate_entry_input(description, amount_text)
        entry = Entry(
            id=self._next_id(category),
            description=clean_description,
            amount=amount,
        )
        self._commit(category, [*self._entries[category], entry])
        logger.debug("Added %s entry %s", category.value, entry.id)
        return entry

    def add_entry(
        self, category: Category, description: object, amount_text: object
    ) -> Optional[Entry]:
        """Like :meth:`add`, but invalid input is a silent no-op returning None."""
        try:
            return self.add(category, description, amount_text)
        except ValidationError as exc:
            logger.debug("Rejected %s input: %s", category, exc)
            return None

    def remove_entry(self, category: Category, entry_id: int) -> bool:
        category = Category.parse(category)
        entries = self._entries[category]
        remaining = [entry for entry in entries if entry.id != entry_id]
        removed = len(remaining) != len(entries)
        self._commit(category, remaining)
        return removed

    def clear_all(self, confirm: Callable[[], bool]) -> bool:
        """Empty both categories and drop their storage keys once the user confirms."""
        if not confirm():
            return False
        for category in Category:
            self._entries[category] = []
            self._storage.remove_item(category.storage_key)
        logger.info("Cleared all ledger data")
        return True

    # Queries --------------------------------------------------------------
    def entries(self, category: Category) -> Tuple[Entry, ...]:
        return tuple(self._entries[Category.parse(category)])

    @property
    def income_entries(self) -> Tuple[Entry, ...]:
        return self.entries(Category.INCOME)

    @property
    def expense_entries(self) -> Tuple[Entry, ...]:
        return self.entries(Category.EXPENSE)

    def get(self, category: Category, entry_id: int) -> Entry:
        for entry in self._entries[Category.parse(category)]:
            if entry.id == entry_id:
                return entry
        raise RecordNotFoundError(f"{Category.parse(category).label} entry {entry_id} not found")

    def total(self, category: Category) -> Decimal:
        entries = self._entries[Category.parse(category)]
        return sum((entry.amount for entry in entries), start=Decimal("0"))

    @property
    def total_income(self) -> Decimal:
        return self.total(Category.INCOME)

    @property
    def total_expense(self) -> Decimal:
        return self.total(Category.EXPENSE)

    @property
    def net(self) -> Decimal:
        return self.total_income - self.total_expense

    def totals(self) -> LedgerTotals:
        return LedgerTotals(income=self.total_income, expense=self.total_expense)

    def snapshot(self) -> Dict[str, object]:
        """Return a serialisable view of both categories and their totals."""
        return {
            "income": [entry.to_dict() for entry in self.income_entries],
            "expense": [entry.to_dict() for entry in self.expense_entries],
            "totals": self.totals().to_dict(),
        }

    # Internal helpers -----------------------------------------------------
    def _load_category(self, category: Category) -> List[Entry]:
        key = category.storage_key
        try:
            raw = self._storage.get_item(key)
            if raw is None:
                return []
            return decode_entries(raw)
        except PersistenceError as exc:
            logger.error("Error loading %s items from %r: %s", category.value, key, exc)
            return []

    def _commit(self, category: Category, entries: List[Entry]) -> None:
        # Full snapshot overwrite; memory only changes once the write succeeded.
        self._storage.set_item(category.storage_key, encode_entries(entries))
        self._entries[category] = entries

    def _next_id(self, category: Category) -> int:
        candidate = int(self._clock())
        existing = self._entries[category]
        if existing:
            # Same clock tick (or a clock that went backwards): stay unique and increasing.
            highest = max(entry.id for entry in existing)
            if candidate <= highest:
                candidate = highest + 1
        return candidate
