"""Interface protocols for QR Studio."""

from .clipboard import Clipboard
from .key_value_store import KeyValueStore
from .presenter import PresenterProtocol
from .share_target import ShareTarget
from .uri_launcher import UriLauncher

__all__ = ["KeyValueStore", "ShareTarget", "Clipboard", "UriLauncher", "PresenterProtocol"]
