"""Clipboard and URI launch exceptions."""

from .base import QRStudioException


class ClipboardError(QRStudioException):
    """Raised when text cannot be placed on the clipboard."""

    pass


class LaunchError(QRStudioException):
    """Raised when a URI cannot be handed to the platform."""

    pass
