"""CLI command for exporting the payload history."""

from pathlib import Path

from qr_studio.cli.commands.common import build_config
from qr_studio.presenters import ConsolePresenter
from qr_studio.services.desktop import FileShareTarget
from qr_studio.services.factory import create_history_store


def export_command(args) -> int:
    """Execute the export subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    config = build_config(args)
    target = FileShareTarget(Path(args.dir) if args.dir else config.export_dir)
    history = create_history_store(config, share_target=target)

    result = history.export()
    if not result.success:
        presenter.show_error(f"Export failed: {result.error}")
        return 1
    presenter.show_success(f"Exported {result.item_count} entries to {target.last_path}")
    return 0
