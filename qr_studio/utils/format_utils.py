"""Escaping and normalization helpers for payload microformats."""

import re
from datetime import date, datetime, timezone
from urllib.parse import quote

# Characters that terminate or delimit fields in a WIFI: record
WIFI_SPECIAL_CHARS = ("\\", ";", ",", ":")

# Same set of characters JavaScript's encodeURIComponent leaves alone
URI_COMPONENT_SAFE = "!*'()"

_COMPACT_DATETIME_RE = re.compile(r"^(\d{8})[Tt](\d{6})([Zz]?)$")
_COMPACT_DATE_RE = re.compile(r"^\d{8}$")


def escape_wifi_value(value: str) -> str:
    """Backslash-escape the characters that would break a WIFI: field.

    Example:
        escape_wifi_value("a;b")  # Returns: "a\\;b"
    """
    # Backslash goes first so the escapes added below are not doubled
    for char in WIFI_SPECIAL_CHARS:
        value = value.replace(char, "\\" + char)
    return value


def escape_text_value(value: str) -> str:
    """Escape a vCard/iCalendar TEXT property value.

    Backslashes, semicolons and commas are backslash-escaped and line
    breaks become a literal ``\\n`` so the value stays on one line.
    """
    value = value.replace("\\", "\\\\")
    value = value.replace(";", "\\;").replace(",", "\\,")
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return value.replace("\n", "\\n")


def percent_encode(value: str) -> str:
    """Percent-encode a URI query component (UTF-8)."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def to_calendar_datetime(value) -> str | None:
    """Normalize a date/time to the compact ``YYYYMMDDTHHMMSS`` form.

    Accepts ``datetime``/``date`` objects, ISO 8601 strings, or strings
    already in the compact form. Timezone-aware values are converted to
    UTC and get a trailing ``Z``.

    Returns:
        The compact string, or None if the value cannot be interpreted
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return _format_datetime(value)
    if isinstance(value, date):
        return value.strftime("%Y%m%dT000000")

    text = str(value).strip()
    if not text:
        return None

    match = _COMPACT_DATETIME_RE.match(text)
    if match:
        return f"{match.group(1)}T{match.group(2)}{match.group(3).upper()}"
    if _COMPACT_DATE_RE.match(text):
        return f"{text}T000000"

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return _format_datetime(parsed)


def _format_datetime(value: datetime) -> str:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    return value.strftime("%Y%m%dT%H%M%S")
