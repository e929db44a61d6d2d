"""Key-value persistence backends."""

from .json_file_store import JsonFileKeyValueStore
from .memory_store import MemoryKeyValueStore
from .sqlite_store import SqliteKeyValueStore

__all__ = ["SqliteKeyValueStore", "JsonFileKeyValueStore", "MemoryKeyValueStore"]
