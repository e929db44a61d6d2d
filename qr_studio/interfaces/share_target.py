"""Protocol for the export/share port."""

from typing import Protocol

from qr_studio.models import ShareOptions


class ShareTarget(Protocol):
    """Interface for delivering exported content to the user.

    A desktop implementation writes a file; other implementations may hand
    the content to a system share sheet.
    """

    def share(self, content: str, options: ShareOptions) -> bool:
        """Deliver the content.

        Args:
            content: Serialized export artifact
            options: Filename, MIME type and dialog title

        Returns:
            True if the content was delivered.

        Raises:
            ShareError: If delivery failed part-way.
        """
        ...
