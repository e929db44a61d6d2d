"""CLI commands that act on a history entry: open and copy."""

from qr_studio.cli.commands.common import build_config, find_entry
from qr_studio.models import OpenStrategy
from qr_studio.presenters import ConsolePresenter
from qr_studio.services.action_resolver import resolve
from qr_studio.services.factory import create_action_invoker, create_history_store


def open_command(args) -> int:
    """Execute the open subcommand.

    Opens the entry with the platform handler for its type. Types with no
    handler, or targets the platform refuses, are copied to the clipboard.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    config = build_config(args)
    history = create_history_store(config)

    entry = find_entry(history, args.id, presenter)
    if entry is None:
        return 1

    invoker = create_action_invoker(config)
    result = invoker.open(entry.data, entry.type)

    if result.opened:
        presenter.show_success(f"Opened {result.target}")
        return 0

    presenter.show_payload(entry.data, resolve(entry.type))
    if result.strategy != OpenStrategy.SHOW_DETAILS:
        presenter.show_warning("This payload could not be opened on this system")
    if result.copied:
        presenter.show_success("Copied to clipboard")
        return 0
    presenter.show_error("Could not copy to clipboard")
    return 1


def copy_command(args) -> int:
    """Execute the copy subcommand."""
    presenter = ConsolePresenter()
    config = build_config(args)
    history = create_history_store(config)

    entry = find_entry(history, args.id, presenter)
    if entry is None:
        return 1

    if create_action_invoker(config).copy(entry.data):
        presenter.show_success("Copied to clipboard")
        return 0
    presenter.show_error("Could not copy to clipboard")
    return 1
