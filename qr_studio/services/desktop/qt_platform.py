"""Clipboard and URI launching through PyQt6."""

import sys

from qr_studio.exceptions import ClipboardError, LaunchError


def _application():
    """Return the running Qt application, creating one if needed."""
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        app = QGuiApplication(sys.argv[:1])
    return app


class QtClipboard:
    """Clipboard port backed by ``QGuiApplication.clipboard()``."""

    def __init__(self):
        self._app = None

    def copy(self, text: str) -> None:
        """Copy text to the system clipboard."""
        from PyQt6.QtGui import QGuiApplication

        self._app = self._app or _application()
        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("System clipboard is not available")
        clipboard.setText(text)


class QtUriLauncher:
    """URI launch port backed by ``QDesktopServices.openUrl``."""

    # Schemes the desktop can hand to a registered handler
    SUPPORTED_SCHEMES = frozenset({"http", "https", "mailto", "tel", "sms", "smsto", "geo"})

    def __init__(self):
        self._app = None

    def can_open(self, uri: str) -> bool:
        """Check that the URI is well-formed and uses a supported scheme."""
        from PyQt6.QtCore import QUrl

        url = QUrl(uri)
        return url.isValid() and url.scheme().lower() in self.SUPPORTED_SCHEMES

    def open(self, uri: str) -> bool:
        """Ask the desktop to open the URI with its registered handler."""
        from PyQt6.QtCore import QUrl
        from PyQt6.QtGui import QDesktopServices

        if not self.can_open(uri):
            raise LaunchError(f"No handler for {uri!r}")
        self._app = self._app or _application()
        return bool(QDesktopServices.openUrl(QUrl(uri)))
