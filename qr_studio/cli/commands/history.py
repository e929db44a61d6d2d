"""CLI commands that query and edit the payload history."""

from qr_studio.cli.commands.common import build_config, find_entry, report_write
from qr_studio.presenters import ConsolePresenter
from qr_studio.services.factory import create_history_store


def history_command(args) -> int:
    """Execute the history subcommand (list, search and filter).

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    history = create_history_store(build_config(args))

    entries = history.list()
    if args.search:
        entries = history.search(args.search, entries)
    if args.type:
        entries = history.filter_by_type(args.type, entries)
    if args.favorites:
        entries = [e for e in entries if e.is_favorite]

    presenter.show_history(entries)
    return 0


def favorite_command(args) -> int:
    """Execute the favorite subcommand (toggle)."""
    presenter = ConsolePresenter()
    history = create_history_store(build_config(args))

    entry = find_entry(history, args.id, presenter)
    if entry is None:
        return 1
    update = history.toggle_favorite(entry.id)
    state = "Added to favorites" if update.is_favorite else "Removed from favorites"
    return report_write(presenter, update.persisted, f"{state}: {entry.id[:8]}")


def remove_command(args) -> int:
    """Execute the remove subcommand."""
    presenter = ConsolePresenter()
    history = create_history_store(build_config(args))

    entry = find_entry(history, args.id, presenter)
    if entry is None:
        return 1
    update = history.remove(entry.id)
    return report_write(presenter, update.persisted, f"Removed {entry.id[:8]}")


def clear_command(args) -> int:
    """Execute the clear subcommand."""
    presenter = ConsolePresenter()
    history = create_history_store(build_config(args))

    if args.favorites:
        return report_write(presenter, history.clear_favorites(), "Favorites cleared")
    return report_write(presenter, history.clear(), "History cleared")


def stats_command(args) -> int:
    """Execute the stats subcommand."""
    history = create_history_store(build_config(args))
    ConsolePresenter().show_stats(history.stats())
    return 0
