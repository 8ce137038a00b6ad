"""Key-value persistence backends for the ledger store."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Optional, Protocol

from .exceptions import PersistenceError

KEY_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class KeyValueStorage(Protocol):
    """Device-local string storage keyed by name."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...

    def __contains__(self, key: object) -> bool: ...


class MemoryStorage:
    """Dictionary-backed storage for tests and throwaway sessions."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items


class FileStorage:
    """File-per-key storage with crash-safe writes."""

    def __init__(self, base_path: Path) -> None:
        self._base_path = Path(base_path)
        try:
            self._base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Unable to create storage directory {self._base_path}") from exc

    def get_item(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"Unable to read from {path}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path_for(key)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                handle.write(value)
                handle.flush()
            # Atomic on POSIX; readers never see a half-written snapshot.
            temp_path.replace(path)
        except OSError as exc:
            raise PersistenceError(f"Unable to write to {path}") from exc

    def remove_item(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceError(f"Unable to remove {path}") from exc

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._path_for(key).exists()

    @property
    def base_path(self) -> Path:
        return self._base_path

    def _path_for(self, key: str) -> Path:
        if not KEY_PATTERN.fullmatch(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self._base_path / f"{key}.json"
