"""Helpers shared by CLI commands."""

from qr_studio.config import QRStudioConfig, create_default_config
from qr_studio.interfaces.presenter import PresenterProtocol
from qr_studio.models import HistoryEntry
from qr_studio.services.history_store import HistoryStore


def build_config(args) -> QRStudioConfig:
    """Build the configuration from the global command-line options.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration with --data-dir/--backend/--ephemeral applied
    """
    overrides = {}
    if getattr(args, "data_dir", None):
        overrides["data_dir"] = args.data_dir
    if getattr(args, "ephemeral", False):
        overrides["storage_backend"] = "memory"
    elif getattr(args, "backend", None):
        overrides["storage_backend"] = args.backend
    return create_default_config(**overrides)


def find_entry(
    history: HistoryStore, ref: str, presenter: PresenterProtocol
) -> HistoryEntry | None:
    """Find a history entry by full id or unique id prefix.

    Reports an error through the presenter when nothing or more than one
    entry matches.
    """
    entries = history.list()
    for entry in entries:
        if entry.id == ref:
            return entry

    matches = [e for e in entries if e.id.startswith(ref)] if ref else []
    if len(matches) == 1:
        return matches[0]
    if not matches:
        presenter.show_error(f"No history entry matches '{ref}'")
    else:
        presenter.show_error(f"'{ref}' is ambiguous ({len(matches)} entries match)")
    return None


def report_write(presenter: PresenterProtocol, persisted: bool, message: str) -> int:
    """Report the outcome of a history write and return the exit code."""
    if not persisted:
        presenter.show_warning(f"{message}, but the change may not have been saved")
        return 1
    presenter.show_success(message)
    return 0
