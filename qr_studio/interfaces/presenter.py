"""Presenter protocol for output abstraction."""

from typing import Protocol

from qr_studio.models import ActionInfo, HistoryEntry, HistoryStats, Template


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, tests, etc).

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_success(self, message: str) -> None:
        """Display a success message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_payload(self, payload: str, action: ActionInfo) -> None:
        """Display a payload together with its resolved type metadata.

        Args:
            payload: Payload text
            action: Display metadata of the payload's type
        """
        ...

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display history entries, most recent first.

        Args:
            entries: Entries annotated with their favorite flag
        """
        ...

    def show_stats(self, stats: HistoryStats) -> None:
        """Display history statistics."""
        ...

    def show_templates(self, templates: list[Template]) -> None:
        """Display the available payload templates."""
        ...
