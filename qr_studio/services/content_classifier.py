"""Classify a payload string into a semantic content type.

Classification walks a fixed, ordered list of ``(predicate, type)`` rules
and returns the type of the first predicate that matches. The order is
the precedence: platform links are tested before the generic ``url``
rule, and ``tel:``/phone shapes are tested before e-mail addresses.
"""

import re
from collections.abc import Callable
from urllib.parse import urlsplit

from qr_studio.models import ContentType

# Each repetition consumes one digit or one parenthesized group, so a
# digit run has exactly one parse and a failed match cannot backtrack.
PHONE_PATTERN = re.compile(r"^\+?(?:\d|\(\d+\))(?:[\s.\-]?(?:\d|\(\d+\)))*$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_PHONE_DIGITS = 7
MAX_PHONE_DIGITS = 13

# Hostnames that identify platform links; a host matches a domain exactly
# or as a dot-suffix (m.youtube.com matches youtube.com).
PLATFORM_DOMAINS: tuple[tuple[ContentType, tuple[str, ...]], ...] = (
    (ContentType.YOUTUBE, ("youtube.com", "youtu.be")),
    (ContentType.INSTAGRAM, ("instagram.com",)),
    (ContentType.FACEBOOK, ("facebook.com", "fb.com")),
    (ContentType.TWITTER, ("twitter.com", "x.com")),
    (ContentType.LINKEDIN, ("linkedin.com",)),
    (ContentType.GITHUB, ("github.com",)),
    (ContentType.PLAYSTORE, ("play.google.com",)),
    (ContentType.APPSTORE, ("apps.apple.com",)),
)


def _starts_with(*prefixes: str) -> Callable[[str], bool]:
    lowered = tuple(p.lower() for p in prefixes)
    return lambda data: data.lower().startswith(lowered)


_is_web_url = _starts_with("http://", "https://")


def _hostname(data: str) -> str:
    try:
        return (urlsplit(data.strip()).hostname or "").lower()
    except ValueError:
        return ""


def _on_platform(domains: tuple[str, ...]) -> Callable[[str], bool]:
    def predicate(data: str) -> bool:
        if not _is_web_url(data):
            return False
        host = _hostname(data)
        return any(host == d or host.endswith("." + d) for d in domains)

    return predicate


def _is_empty(data: str) -> bool:
    return not data


def _is_phone(data: str) -> bool:
    if data.lower().startswith("tel:"):
        return True
    digits = sum(ch.isdigit() for ch in data)
    if not MIN_PHONE_DIGITS <= digits <= MAX_PHONE_DIGITS:
        return False
    return bool(PHONE_PATTERN.match(data))


def _is_email(data: str) -> bool:
    return data.lower().startswith("mailto:") or bool(EMAIL_PATTERN.match(data))


ClassificationRule = tuple[Callable[[str], bool], ContentType]

CLASSIFICATION_RULES: tuple[ClassificationRule, ...] = (
    (_is_empty, ContentType.TEXT),
    *((_on_platform(domains), content_type) for content_type, domains in PLATFORM_DOMAINS),
    (_is_web_url, ContentType.URL),
    (_is_phone, ContentType.PHONE),
    (_is_email, ContentType.EMAIL),
    (_starts_with("sms:", "smsto:"), ContentType.SMS),
    (_starts_with("wifi:"), ContentType.WIFI),
    (_starts_with("begin:vcard"), ContentType.CONTACT),
    (_starts_with("begin:vevent"), ContentType.EVENT),
    (_starts_with("geo:"), ContentType.LOCATION),
)


def classify(data: str | None) -> ContentType:
    """Classify a payload string.

    Pure and total: every input, including None and the empty string,
    maps to exactly one ContentType, and the same input always maps to
    the same type.

    Args:
        data: Raw payload text

    Returns:
        The type of the first matching rule, or ContentType.TEXT
    """
    if not isinstance(data, str):
        return ContentType.TEXT
    for predicate, content_type in CLASSIFICATION_RULES:
        if predicate(data):
            return content_type
    return ContentType.TEXT
