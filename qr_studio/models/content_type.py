"""Closed vocabulary of payload content types."""

from enum import Enum


class ContentType(Enum):
    """Semantic type assigned to a QR payload."""

    URL = "url"
    YOUTUBE = "youtube"
    INSTAGRAM = "instagram"
    FACEBOOK = "facebook"
    TWITTER = "twitter"
    LINKEDIN = "linkedin"
    GITHUB = "github"
    PLAYSTORE = "playstore"
    APPSTORE = "appstore"
    PHONE = "phone"
    EMAIL = "email"
    SMS = "sms"
    WIFI = "wifi"
    CONTACT = "contact"
    EVENT = "event"
    LOCATION = "location"
    TEXT = "text"

    @property
    def is_link(self) -> bool:
        """Whether this type is a hyperlink (generic or platform-specific)."""
        return self in LINK_TYPES

    @classmethod
    def from_value(cls, value: str) -> "ContentType | None":
        """Look up a type by its tag, returning None for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            return None


LINK_TYPES = frozenset(
    {
        ContentType.URL,
        ContentType.YOUTUBE,
        ContentType.INSTAGRAM,
        ContentType.FACEBOOK,
        ContentType.TWITTER,
        ContentType.LINKEDIN,
        ContentType.GITHUB,
        ContentType.PLAYSTORE,
        ContentType.APPSTORE,
    }
)
