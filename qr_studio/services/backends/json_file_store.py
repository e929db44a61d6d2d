"""Key-value store kept in a single JSON document on disk."""

import json
import logging
from pathlib import Path

from qr_studio.exceptions import StorageError
from qr_studio.utils.file_utils import atomic_write_text

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Persistent key-value store backed by one JSON object file.

    The whole document is rewritten on every change; writes go through a
    temporary file so a crash never leaves a truncated document behind.
    """

    def __init__(self, file_path: Path):
        """Initialize the store.

        Args:
            file_path: Path to the JSON document (created on first write)
        """
        self._file_path = file_path

    def get(self, key: str) -> str | None:
        """Read the value stored under a key."""
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        """Delete a key if present."""
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def _load(self) -> dict[str, str]:
        """Load the document, treating a missing file as empty."""
        if not self._file_path.exists():
            return {}
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Cannot read store file {self._file_path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self._file_path} does not contain a JSON object")
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        """Write the document atomically."""
        try:
            atomic_write_text(
                self._file_path,
                json.dumps(data, indent=2, ensure_ascii=False),
            )
        except OSError as e:
            raise StorageError(f"Cannot write store file {self._file_path}: {e}") from e
