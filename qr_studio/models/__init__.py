"""Data models for QR Studio."""

from .action import ActionInfo, OpenResult, OpenStrategy, ShareOptions
from .content_type import LINK_TYPES, ContentType
from .history import ExportResult, FavoriteUpdate, HistoryEntry, HistoryStats, HistoryUpdate
from .template import Template, TemplateField

__all__ = [
    "ContentType",
    "LINK_TYPES",
    "HistoryEntry",
    "HistoryUpdate",
    "FavoriteUpdate",
    "HistoryStats",
    "ExportResult",
    "Template",
    "TemplateField",
    "ActionInfo",
    "OpenStrategy",
    "OpenResult",
    "ShareOptions",
]
