"""Bounded, deduplicated payload history with a favorites overlay."""

from __future__ import annotations

import json
import logging
from collections import Counter
from collections.abc import Callable
from datetime import datetime
from uuid import uuid4

from qr_studio.config import QRStudioConfig, create_default_config
from qr_studio.exceptions import ShareError, StorageError
from qr_studio.interfaces import KeyValueStore, ShareTarget
from qr_studio.models import (
    ContentType,
    ExportResult,
    FavoriteUpdate,
    HistoryEntry,
    HistoryStats,
    HistoryUpdate,
    ShareOptions,
)
from qr_studio.services.content_classifier import classify
from qr_studio.utils.time_utils import parse_timestamp, utc_now

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"
EXPORT_MIME_TYPE = "application/json"
EXPORT_DIALOG_TITLE = "Export QR History"


class HistoryStore:
    """Record payloads and query them back.

    History and favorites live under two independent keys of the injected
    key-value store: the history is a JSON array of entries (most recent
    first) and the favorites are a JSON array of entry ids. The favorite
    flag of an entry is derived by joining both at read time, so toggling
    a favorite never rewrites or reorders the history.

    Persistence failures never propagate: a failed read is treated as an
    empty record, and a failed write is reported through the
    ``persisted`` flag of the returned result.

    Concurrency:
        Every operation re-reads the persisted state and writes back the
        whole record. Two writers interleaving on the same backend can
        overwrite each other's changes; the store assumes one writer.
    """

    def __init__(
        self,
        store: KeyValueStore,
        config: QRStudioConfig | None = None,
        share_target: ShareTarget | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the history store.

        Args:
            store: Persistence backend
            config: Keys, capacity and dedup window (defaults if None)
            share_target: Destination for ``export``
            clock: Returns the current aware datetime
        """
        self._store = store
        self._config = config or create_default_config(storage_backend="memory")
        self._share_target = share_target
        self._clock = clock

    # === Write operations ===

    def add(self, data: str) -> HistoryUpdate:
        """Record a payload at the head of the history.

        An identical payload recorded within the dedup window is not added
        again and keeps its position. When the history grows past its
        capacity the oldest entries are evicted.

        Args:
            data: Payload text

        Returns:
            HistoryUpdate with the resulting history, favorites joined
        """
        entries = self._read_history()
        if not data:
            logger.debug("Ignoring empty payload")
            return HistoryUpdate(self._join(entries), changed=False)

        now = self._clock()
        duplicate = self._find_recent_duplicate(entries, data, now)
        if duplicate is not None:
            logger.debug(f"Payload already recorded as {duplicate.id}, skipping")
            return HistoryUpdate(self._join(entries), changed=False)

        entry = HistoryEntry(
            id=self._new_id(entries),
            data=data,
            type=classify(data),
            timestamp=now.isoformat(),
        )
        updated = [entry, *entries][: self._config.max_history_items]
        evicted = len(entries) + 1 - len(updated)
        if evicted > 0:
            logger.debug(f"Evicted {evicted} oldest history entries")

        persisted = self._write_history(updated)
        return HistoryUpdate(self._join(updated), persisted=persisted)

    def remove(self, entry_id: str) -> HistoryUpdate:
        """Remove the entry with the given id. Unknown ids are a no-op."""
        entries = self._read_history()
        updated = [e for e in entries if e.id != entry_id]
        if len(updated) == len(entries):
            return HistoryUpdate(self._join(entries), changed=False)
        persisted = self._write_history(updated)
        return HistoryUpdate(self._join(updated), persisted=persisted)

    def clear(self) -> bool:
        """Replace the persisted history with an empty list.

        The favorites set is left untouched; its ids simply stop matching
        any entry.

        Returns:
            True if the empty history was persisted
        """
        persisted = self._write_history([])
        if persisted:
            logger.info("History cleared")
        return persisted

    def clear_favorites(self) -> bool:
        """Empty the favorites set without touching the history."""
        return self._write_favorites([])

    def toggle_favorite(self, entry_id: str) -> FavoriteUpdate:
        """Flip membership of an id in the favorites set."""
        favorites = self._read_favorites()
        if entry_id in favorites:
            favorites.remove(entry_id)
            is_favorite = False
        else:
            favorites.append(entry_id)
            is_favorite = True
        persisted = self._write_favorites(favorites)
        return FavoriteUpdate(entry_id=entry_id, is_favorite=is_favorite, persisted=persisted)

    # === Read operations ===

    def list(self) -> list[HistoryEntry]:
        """Return all entries, most recent first, with favorite flags joined."""
        return self._join(self._read_history())

    def get(self, entry_id: str) -> HistoryEntry | None:
        """Return a single entry by id, or None if it is not in the history."""
        for entry in self.list():
            if entry.id == entry_id:
                return entry
        return None

    def is_favorite(self, entry_id: str) -> bool:
        """Check whether an id is in the favorites set."""
        return entry_id in self._read_favorites()

    def search(self, query: str, entries: list[HistoryEntry] | None = None) -> list[HistoryEntry]:
        """Case-insensitive substring search over payload text and type tag.

        Args:
            query: Search text; blank queries return every entry
            entries: Already-loaded entries to search (loads ``list()`` if None)
        """
        if entries is None:
            entries = self.list()
        needle = (query or "").strip().lower()
        if not needle:
            return list(entries)
        return [e for e in entries if needle in e.data.lower() or needle in e.type.value]

    def filter_by_type(
        self,
        content_type: ContentType | str | None,
        entries: list[HistoryEntry] | None = None,
    ) -> list[HistoryEntry]:
        """Keep entries of one type; ``"all"`` or None keeps everything."""
        if entries is None:
            entries = self.list()
        if content_type is None or content_type == "all":
            return list(entries)
        if isinstance(content_type, str):
            content_type = ContentType.from_value(content_type)
            if content_type is None:
                return []
        return [e for e in entries if e.type == content_type]

    def stats(self, entries: list[HistoryEntry] | None = None) -> HistoryStats:
        """Count entries, favorites and entries per type."""
        if entries is None:
            entries = self.list()
        by_type = Counter(e.type.value for e in entries)
        return HistoryStats(
            total=len(entries),
            favorites=sum(1 for e in entries if e.is_favorite),
            by_type=dict(by_type),
            last_generated=entries[0].timestamp if entries else None,
        )

    def export(self) -> ExportResult:
        """Serialize the history to JSON and hand it to the share target.

        The history is not modified.
        """
        if self._share_target is None:
            return ExportResult(success=False, error="No share target configured")

        entries = self.list()
        now = self._clock()
        document = {
            "exportDate": now.isoformat(),
            "version": EXPORT_VERSION,
            "itemCount": len(entries),
            "items": [e.to_export() for e in entries],
        }
        content = json.dumps(document, indent=2, ensure_ascii=False)
        filename = f"qr_history_{int(now.timestamp() * 1000)}.json"
        options = ShareOptions(
            filename=filename,
            mime_type=EXPORT_MIME_TYPE,
            dialog_title=EXPORT_DIALOG_TITLE,
        )

        try:
            delivered = self._share_target.share(content, options)
        except ShareError as e:
            logger.warning(f"Export failed: {e}")
            return ExportResult(success=False, filename=filename, error=str(e))
        except Exception as e:
            logger.exception("Unexpected error while exporting history")
            return ExportResult(success=False, filename=filename, error=str(e))

        if not delivered:
            return ExportResult(success=False, filename=filename, error="Share was not completed")
        return ExportResult(success=True, filename=filename, item_count=len(entries))

    # === Persistence ===

    def _read_history(self) -> list[HistoryEntry]:
        records = self._read_json_list(self._config.history_key)
        entries = []
        for record in records:
            entry = self._entry_from_record(record)
            if entry is None:
                logger.warning(f"Skipping malformed history record: {record!r}")
                continue
            entries.append(entry)
        return entries

    def _read_favorites(self) -> list[str]:
        ids = self._read_json_list(self._config.favorites_key)
        return list(dict.fromkeys(i for i in ids if isinstance(i, str)))

    def _read_json_list(self, key: str) -> list:
        try:
            raw = self._store.get(key)
        except StorageError as e:
            logger.warning(f"Could not read {key}: {e}")
            return []
        if not raw:
            return []
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Could not parse {key}: {e}")
            return []
        if not isinstance(value, list):
            logger.warning(f"Ignoring {key}: expected a JSON array")
            return []
        return value

    def _write_history(self, entries: list[HistoryEntry]) -> bool:
        return self._write_json(self._config.history_key, [e.to_record() for e in entries])

    def _write_favorites(self, ids: list[str]) -> bool:
        return self._write_json(self._config.favorites_key, ids)

    def _write_json(self, key: str, value: list) -> bool:
        try:
            self._store.set(key, json.dumps(value, ensure_ascii=False))
        except StorageError as e:
            logger.warning(f"Could not write {key}: {e}")
            return False
        return True

    # === Helpers ===

    def _join(self, entries: list[HistoryEntry]) -> list[HistoryEntry]:
        favorites = set(self._read_favorites())
        for entry in entries:
            entry.is_favorite = entry.id in favorites
        return entries

    def _find_recent_duplicate(
        self, entries: list[HistoryEntry], data: str, now: datetime
    ) -> HistoryEntry | None:
        window = self._config.dedup_window_seconds
        for entry in entries:
            if entry.data != data:
                continue
            created = parse_timestamp(entry.timestamp)
            if created is not None and (now - created).total_seconds() < window:
                return entry
        return None

    @staticmethod
    def _new_id(entries: list[HistoryEntry]) -> str:
        existing = {e.id for e in entries}
        entry_id = uuid4().hex
        while entry_id in existing:
            entry_id = uuid4().hex
        return entry_id

    @staticmethod
    def _entry_from_record(record) -> HistoryEntry | None:
        if not isinstance(record, dict):
            return None
        entry_id = record.get("id")
        data = record.get("data")
        timestamp = record.get("timestamp")
        if not isinstance(entry_id, str) or not isinstance(data, str):
            return None
        if not isinstance(timestamp, str):
            return None
        tag = record.get("type")
        content_type = (ContentType.from_value(tag) if isinstance(tag, str) else None) or classify(
            data
        )
        return HistoryEntry(id=entry_id, data=data, type=content_type, timestamp=timestamp)
