"""Data models for resolving what "opening" a payload does."""

from dataclasses import dataclass
from enum import Enum


class OpenStrategy(Enum):
    """How a payload of a given type is acted upon when opened."""

    OPEN_LINK = "open_link"
    CALL = "call"
    COMPOSE_EMAIL = "compose_email"
    COMPOSE_SMS = "compose_sms"
    OPEN_MAP = "open_map"
    SHOW_DETAILS = "show_details"  # present details, offer clipboard copy


@dataclass(frozen=True)
class ActionInfo:
    """Display metadata and open strategy for a content type."""

    icon: str
    color: str
    label: str
    open_strategy: OpenStrategy


@dataclass
class OpenResult:
    """Outcome of trying to open a payload."""

    strategy: OpenStrategy
    target: str | None = None  # URI handed to the launcher, if any
    opened: bool = False
    copied: bool = False

    @property
    def handled(self) -> bool:
        """Whether the payload was either opened or copied."""
        return self.opened or self.copied


@dataclass(frozen=True)
class ShareOptions:
    """Options passed to a share target along with the content."""

    filename: str
    mime_type: str = "application/json"
    dialog_title: str = ""
