"""Base exception classes for QR Studio."""


class QRStudioException(Exception):
    """Base exception for all QR Studio errors.

    All custom exceptions in the qr_studio package should inherit
    from this base class for consistent error handling.
    """

    pass
