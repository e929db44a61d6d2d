"""Utility functions for QR Studio."""

from .file_utils import atomic_write_text, ensure_directory, safe_filename
from .format_utils import (
    escape_text_value,
    escape_wifi_value,
    percent_encode,
    to_calendar_datetime,
)
from .time_utils import format_history_time, parse_timestamp, utc_now

__all__ = [
    "ensure_directory",
    "atomic_write_text",
    "safe_filename",
    "escape_wifi_value",
    "escape_text_value",
    "percent_encode",
    "to_calendar_datetime",
    "format_history_time",
    "parse_timestamp",
    "utc_now",
]
