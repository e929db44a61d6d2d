"""Null presenter for testing (no output)."""

from qr_studio.models import ActionInfo, HistoryEntry, HistoryStats, Template


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_payload(self, payload: str, action: ActionInfo) -> None:
        """Display a payload (no-op)."""
        pass

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display history entries (no-op)."""
        pass

    def show_stats(self, stats: HistoryStats) -> None:
        """Display history statistics (no-op)."""
        pass

    def show_templates(self, templates: list[Template]) -> None:
        """Display templates (no-op)."""
        pass
