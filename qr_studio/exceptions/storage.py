"""Persistence and export exceptions."""

from .base import QRStudioException


class StorageError(QRStudioException):
    """Raised when a key-value backend cannot read or write a record."""

    pass


class ShareError(QRStudioException):
    """Raised when a share target cannot deliver the exported content."""

    pass
