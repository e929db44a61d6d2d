"""Custom exceptions for QR Studio."""

from .base import QRStudioException
from .platform import ClipboardError, LaunchError
from .storage import ShareError, StorageError
from .validation import ConfigurationError, TemplateNotFoundError

__all__ = [
    "QRStudioException",
    "ConfigurationError",
    "TemplateNotFoundError",
    "StorageError",
    "ShareError",
    "ClipboardError",
    "LaunchError",
]
