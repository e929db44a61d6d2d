"""Protocol for the string key-value persistence port."""

from typing import Protocol


class KeyValueStore(Protocol):
    """Interface for a persistent string key-value backend.

    The history store keeps its records in two independent keys of such a
    backend. Implementations (SQLite, JSON file, in-memory) are created
    once at process start and injected into the store.

    Implementations wrap backend-specific failures (``OSError``,
    ``sqlite3.Error``, ...) in ``StorageError``.
    """

    def get(self, key: str) -> str | None:
        """Read the value stored under a key.

        Args:
            key: Record key

        Returns:
            The stored string, or None if the key is absent.

        Raises:
            StorageError: If the backend cannot be read.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value.

        Raises:
            StorageError: If the backend cannot be written.
        """
        ...

    def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is not an error.

        Raises:
            StorageError: If the backend cannot be written.
        """
        ...
