"""Protocol for the URI launch port."""

from typing import Protocol


class UriLauncher(Protocol):
    """Interface for handing a URI to the platform (browser, dialer, maps)."""

    def can_open(self, uri: str) -> bool:
        """Check whether the platform has a handler for this URI."""
        ...

    def open(self, uri: str) -> bool:
        """Open the URI.

        Returns:
            True if the platform accepted the URI.

        Raises:
            LaunchError: If the platform failed to launch a handler.
        """
        ...
