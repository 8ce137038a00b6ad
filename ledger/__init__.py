"""Core business logic package for the income and expense ledger."""

from .exceptions import CorruptSnapshotError, PersistenceError, RecordNotFoundError, ValidationError
from .forms import EntryForm
from .models import Category, Entry, LedgerTotals
from .services import CLEAR_CONFIRMATION_PROMPT, LedgerStore
from .storage import FileStorage, KeyValueStorage, MemoryStorage
from .validators import is_valid_entry_input

__all__ = [
    "Category",
    "Entry",
    "LedgerTotals",
    "LedgerStore",
    "EntryForm",
    "CLEAR_CONFIRMATION_PROMPT",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "is_valid_entry_input",
    "CorruptSnapshotError",
    "PersistenceError",
    "ValidationError",
    "RecordNotFoundError",
]
