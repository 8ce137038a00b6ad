"""Presentation-agnostic input state for the add-entry forms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .models import Category, Entry
from .services import LedgerStore

SUBMIT_KEYS = frozenset({"Return", "Enter", "KP_Enter"})


@dataclass
class EntryForm:
    """Description and amount fields for one category.

    Fields are cleared only after the store accepts the entry; rejected input
    stays in place so the user can correct it.
    """

    store: LedgerStore
    category: Category
    description: str = ""
    amount: str = ""

    def submit(self) -> Optional[Entry]:
        entry = self.store.add_entry(self.category, self.description, self.amount)
        if entry is not None:
            self.reset()
        return entry

    def handle_key(self, key: str) -> Optional[Entry]:
        if key in SUBMIT_KEYS:
            return self.submit()
        return None

    def reset(self) -> None:
        self.description = ""
        self.amount = ""
