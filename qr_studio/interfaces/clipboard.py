"""Protocol for the clipboard port."""

from typing import Protocol


class Clipboard(Protocol):
    """Interface for placing text on the system clipboard."""

    def copy(self, text: str) -> None:
        """Copy text to the clipboard.

        Raises:
            ClipboardError: If the clipboard is unavailable.
        """
        ...
