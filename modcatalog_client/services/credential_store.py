"""
Credential store for the user's API key.

The key lives in one process-wide slot backed by a key-value storage. The slot
is read from storage once at construction and written through on every change.
Storage that is missing or failing never breaks the client: the key is then
kept in memory only.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

STORAGE_KEY = "curseforge-api-key"


class KeyValueStorage(Protocol):
    """Minimal string storage, modelled on browser localStorage."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Storage that lives as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage:
    """Storage persisted as a JSON object in a single file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        content = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        if not isinstance(content, dict):
            raise ValueError(f"{self.path} does not hold a JSON object")
        return content

    def _write(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(items), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if key in items:
            del items[key]
            self._write(items)


class CredentialStore:
    """Process-wide API key slot with write-through persistence."""

    def __init__(self, storage: Optional[KeyValueStorage] = None, key: str = STORAGE_KEY):
        """
        Initialize the store, reading the persisted key once.

        Args:
            storage: Backing storage (None keeps the key in memory only)
            key: Storage key holding the API key
        """
        self.storage = storage
        self.key = key
        self._listeners: List[Callable[[str], None]] = []
        self._api_key = self._load()

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]]) -> "CredentialStore":
        """Store backed by a JSON file, or memory-only when ``path`` is None."""
        return cls(FileStorage(path) if path else None)

    def _load(self) -> str:
        if self.storage is None:
            return ""
        try:
            return self.storage.get_item(self.key) or ""
        except (OSError, ValueError) as error:
            logger.warning("Credential storage unavailable, using memory only", exc_info=error)
            return ""

    def _persist(self, value: str) -> None:
        if self.storage is None:
            return
        try:
            if value:
                self.storage.set_item(self.key, value)
            else:
                self.storage.remove_item(self.key)
        except (OSError, ValueError) as error:
            logger.warning("Failed to persist credential, keeping it in memory", exc_info=error)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def set_api_key(self, value: Optional[str]) -> None:
        """Replace the key; an empty value removes it from storage."""
        self._api_key = value or ""
        self._persist(self._api_key)
        for listener in list(self._listeners):
            listener(self._api_key)

    def clear(self) -> None:
        self.set_api_key("")

    def subscribe(self, listener: Callable[[str], None]) -> Callable[[], None]:
        """
        Register a callback receiving the new key on every change.

        Returns:
            Function removing the callback
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
