"""Domain-specific exceptions for the ledger core services."""

class ValidationError(ValueError):
    """Raised when provided data does not meet validation requirements."""


class RecordNotFoundError(LookupError):
    """Raised when an income or expense entry cannot be located."""


class PersistenceError(IOError):
    """Raised when the persistence layer encounters unrecoverable issues."""


class CorruptSnapshotError(PersistenceError):
    """Raised when a stored snapshot cannot be decoded into entries."""
