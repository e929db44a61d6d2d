"""Open payloads through the platform, falling back to the clipboard."""

import logging

from qr_studio.config import QRStudioConfig, create_default_config
from qr_studio.exceptions import ClipboardError, LaunchError
from qr_studio.interfaces import Clipboard, UriLauncher
from qr_studio.models import ContentType, OpenResult
from qr_studio.services.action_resolver import (
    build_open_target,
    resolve,
    resolve_maps_provider,
)
from qr_studio.services.content_classifier import classify

logger = logging.getLogger(__name__)


class ActionInvoker:
    """Carry out the open strategy of a payload.

    Types without a platform action (WiFi, contacts, events, text) and
    targets the platform cannot handle are copied to the clipboard
    instead, so opening a payload never fails silently.
    """

    def __init__(
        self,
        launcher: UriLauncher,
        clipboard: Clipboard,
        config: QRStudioConfig | None = None,
    ):
        self._launcher = launcher
        self._clipboard = clipboard
        self._config = config or create_default_config(storage_backend="memory")

    def open(self, data: str, content_type: ContentType | None = None) -> OpenResult:
        """Open a payload, or copy it to the clipboard if it cannot be opened.

        Args:
            data: Payload text
            content_type: Known type of the payload (classified if None)

        Returns:
            OpenResult describing what happened
        """
        if content_type is None:
            content_type = classify(data)
        strategy = resolve(content_type).open_strategy
        provider = resolve_maps_provider(self._config.maps_provider)
        target = build_open_target(data, strategy, provider)

        result = OpenResult(strategy=strategy, target=target)
        if target is not None:
            result.opened = self._launch(target)
        if not result.opened:
            result.copied = self.copy(data)
        return result

    def copy(self, text: str) -> bool:
        """Copy text to the clipboard.

        Returns:
            True if the text was copied
        """
        try:
            self._clipboard.copy(text)
        except ClipboardError as e:
            logger.warning(f"Could not copy to clipboard: {e}")
            return False
        return True

    def _launch(self, target: str) -> bool:
        try:
            if not self._launcher.can_open(target):
                logger.info(f"No handler for {target}, falling back to clipboard")
                return False
            return self._launcher.open(target)
        except LaunchError as e:
            logger.warning(f"Could not open {target}: {e}")
            return False
