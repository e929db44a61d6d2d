"""Data models for QR interaction history."""

from dataclasses import dataclass, field

from .content_type import ContentType


@dataclass
class HistoryEntry:
    """A single payload recorded in the interaction history.

    ``is_favorite`` is never persisted with the entry. It is filled in at
    read time by joining against the separate favorites set.
    """

    id: str
    data: str
    type: ContentType
    timestamp: str
    is_favorite: bool = False

    def to_record(self) -> dict:
        """Serialize to the persisted record shape (no favorite flag)."""
        return {
            "id": self.id,
            "data": self.data,
            "type": self.type.value,
            "timestamp": self.timestamp,
        }

    def to_export(self) -> dict:
        """Serialize for the export artifact, including the favorite flag."""
        record = self.to_record()
        record["isFavorite"] = self.is_favorite
        return record


@dataclass
class HistoryUpdate:
    """Result of a history write operation.

    ``entries`` is the attempted next state of the history, most recent
    first. When ``persisted`` is False the write failed and the change may
    be lost on the next read.
    """

    entries: list[HistoryEntry] = field(default_factory=list)
    persisted: bool = True
    changed: bool = True


@dataclass
class FavoriteUpdate:
    """Result of toggling an entry in the favorites set."""

    entry_id: str
    is_favorite: bool
    persisted: bool = True


@dataclass
class HistoryStats:
    """Summary counts over the history list."""

    total: int = 0
    favorites: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    last_generated: str | None = None


@dataclass
class ExportResult:
    """Outcome of exporting the history through a share target."""

    success: bool
    filename: str = ""
    item_count: int = 0
    error: str = ""

    def __str__(self) -> str:
        if self.success:
            return f"ExportResult(ok, file={self.filename}, items={self.item_count})"
        return f"ExportResult(failed, error={self.error})"
