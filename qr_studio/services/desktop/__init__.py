"""Desktop implementations of the clipboard, launcher and share ports."""

from .file_share import FileShareTarget
from .qt_platform import QtClipboard, QtUriLauncher

__all__ = ["FileShareTarget", "QtClipboard", "QtUriLauncher"]
