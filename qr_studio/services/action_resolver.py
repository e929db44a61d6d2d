"""Map content types to display metadata and an open strategy."""

import sys
from urllib.parse import parse_qs, quote, urlsplit

from qr_studio.models import ActionInfo, ContentType, OpenStrategy

DEFAULT_ICON = "qr-code-outline"
DEFAULT_COLOR = "#8E8E93"

ACTIONS: dict[ContentType, ActionInfo] = {
    ContentType.URL: ActionInfo("globe-outline", "#4285F4", "Website", OpenStrategy.OPEN_LINK),
    ContentType.YOUTUBE: ActionInfo("logo-youtube", "#FF0000", "YouTube", OpenStrategy.OPEN_LINK),
    ContentType.INSTAGRAM: ActionInfo(
        "logo-instagram", "#E4405F", "Instagram", OpenStrategy.OPEN_LINK
    ),
    ContentType.FACEBOOK: ActionInfo(
        "logo-facebook", "#1877F2", "Facebook", OpenStrategy.OPEN_LINK
    ),
    ContentType.TWITTER: ActionInfo("logo-twitter", "#1DA1F2", "Twitter / X", OpenStrategy.OPEN_LINK),
    ContentType.LINKEDIN: ActionInfo(
        "logo-linkedin", "#0A66C2", "LinkedIn", OpenStrategy.OPEN_LINK
    ),
    ContentType.GITHUB: ActionInfo("logo-github", "#333333", "GitHub", OpenStrategy.OPEN_LINK),
    ContentType.PLAYSTORE: ActionInfo(
        "logo-google-playstore", "#34A853", "Google Play", OpenStrategy.OPEN_LINK
    ),
    ContentType.APPSTORE: ActionInfo(
        "logo-apple-appstore", "#0D96F6", "App Store", OpenStrategy.OPEN_LINK
    ),
    ContentType.PHONE: ActionInfo("call-outline", "#34C759", "Phone Number", OpenStrategy.CALL),
    ContentType.EMAIL: ActionInfo("mail-outline", "#FF9500", "Email", OpenStrategy.COMPOSE_EMAIL),
    ContentType.SMS: ActionInfo("chatbubble-outline", "#5856D6", "SMS", OpenStrategy.COMPOSE_SMS),
    ContentType.WIFI: ActionInfo("wifi-outline", "#00C7BE", "WiFi Network", OpenStrategy.SHOW_DETAILS),
    ContentType.CONTACT: ActionInfo(
        "person-outline", "#FF2D55", "Contact", OpenStrategy.SHOW_DETAILS
    ),
    ContentType.EVENT: ActionInfo(
        "calendar-outline", "#AF52DE", "Calendar Event", OpenStrategy.SHOW_DETAILS
    ),
    ContentType.LOCATION: ActionInfo(
        "location-outline", "#FF3B30", "Location", OpenStrategy.OPEN_MAP
    ),
    ContentType.TEXT: ActionInfo(
        "document-text-outline", DEFAULT_COLOR, "Text", OpenStrategy.SHOW_DETAILS
    ),
}

FALLBACK_ACTION = ACTIONS[ContentType.TEXT]

# Scheme each strategy's target must carry
STRATEGY_SCHEMES = {
    OpenStrategy.CALL: "tel:",
    OpenStrategy.COMPOSE_EMAIL: "mailto:",
    OpenStrategy.COMPOSE_SMS: "sms:",
}


def resolve(content_type: ContentType | str) -> ActionInfo:
    """Look up display metadata and open strategy for a content type.

    Unknown tags resolve to the plain-text action (details + copy).
    """
    if isinstance(content_type, str):
        content_type = ContentType.from_value(content_type) or ContentType.TEXT
    return ACTIONS.get(content_type, FALLBACK_ACTION)


def _ensure_prefix(data: str, prefix: str) -> str:
    if data.lower().startswith(prefix):
        return data
    if prefix == "sms:" and data.lower().startswith("smsto:"):
        return data
    return prefix + data


def resolve_maps_provider(provider: str = "auto", platform: str | None = None) -> str:
    """Pick the maps provider for the platform ("google" or "apple")."""
    if provider != "auto":
        return provider
    platform = platform or sys.platform
    return "apple" if platform == "darwin" else "google"


def geo_to_maps_link(data: str, provider: str = "google") -> str | None:
    """Translate a ``geo:`` URI into a maps web deep link.

    The coordinate pair is carried over unchanged; a ``(label)`` in the
    ``q`` parameter becomes the place name for either provider.

    Returns:
        The maps link, or None if the URI has no coordinate pair
    """
    parts = urlsplit(data.strip())
    if parts.scheme.lower() != "geo":
        return None
    coords = parts.path.split(";", 1)[0]
    lat, sep, lon = coords.partition(",")
    if not sep or not lat.strip() or not lon.strip():
        return None
    pair = f"{lat.strip()},{lon.strip()}"

    label = ""
    query = parse_qs(parts.query).get("q", [""])[0]
    if "(" in query and query.endswith(")"):
        label = query[query.index("(") + 1 : -1]

    if provider == "apple":
        link = f"https://maps.apple.com/?ll={pair}"
        if label:
            link += f"&q={quote(label, safe='')}"
        return link
    query = f"{label} {pair}" if label else pair
    return f"https://www.google.com/maps/search/?api=1&query={quote(query, safe=',')}"


def build_open_target(
    data: str,
    strategy: OpenStrategy,
    maps_provider: str = "google",
) -> str | None:
    """Build the URI handed to the platform launcher for a payload.

    Args:
        data: Raw payload text
        strategy: Open strategy resolved for the payload's type
        maps_provider: "google" or "apple" for OPEN_MAP

    Returns:
        The URI to open, or None when the strategy has nothing to open
        (the caller should present details and offer a clipboard copy)
    """
    if not data or not data.strip():
        return None
    if strategy == OpenStrategy.OPEN_LINK:
        return data.strip()
    if strategy in STRATEGY_SCHEMES:
        return _ensure_prefix(data.strip(), STRATEGY_SCHEMES[strategy])
    if strategy == OpenStrategy.OPEN_MAP:
        return geo_to_maps_link(data, maps_provider)
    return None
