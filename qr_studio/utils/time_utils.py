"""Timestamp parsing and display helpers."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def parse_timestamp(value: str) -> datetime | None:
    """Parse an ISO 8601 timestamp into an aware datetime.

    Naive timestamps are assumed to be UTC. Returns None when the value
    is missing or malformed.
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_history_time(timestamp: str, now: datetime | None = None) -> str:
    """Format a history timestamp as a short relative label.

    Args:
        timestamp: ISO 8601 creation time of the entry
        now: Reference time (defaults to the current UTC time)

    Returns:
        "Just now", "5m ago", "3h ago", "2d ago", or the ISO date for
        anything a week old or more

    Example:
        format_history_time("2024-01-01T12:00:00+00:00", now=...)
        # Returns: "15m ago"
    """
    created = parse_timestamp(timestamp)
    if created is None:
        return ""
    if now is None:
        now = utc_now()
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_seconds = (now - created).total_seconds()
    diff_mins = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)

    if diff_mins < 1:
        return "Just now"
    if diff_mins < 60:
        return f"{diff_mins}m ago"
    if diff_hours < 24:
        return f"{diff_hours}h ago"
    if diff_days < 7:
        return f"{diff_days}d ago"
    return created.date().isoformat()
