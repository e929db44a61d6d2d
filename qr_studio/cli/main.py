"""Main CLI entry point for qr_studio."""

import argparse
import logging
import sys

from qr_studio import __version__
from qr_studio.cli.commands import export, generate, history, open_entry
from qr_studio.config import STORAGE_BACKENDS
from qr_studio.exceptions import QRStudioException
from qr_studio.models import ContentType
from qr_studio.presenters import ConsolePresenter
from qr_studio.services.template_catalog import TEMPLATES


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="qr_studio",
        description="Generate QR payloads and keep a searchable history of them",
        epilog="Use 'qr_studio <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--data-dir", help="Directory for history and exports (default: ~/.qr_studio)")
    parser.add_argument(
        "--backend",
        choices=STORAGE_BACKENDS,
        help="Storage backend for the history (default: sqlite)",
    )
    parser.add_argument(
        "--ephemeral",
        action="store_true",
        help="Keep history in memory only for this run",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # qr_studio templates
    subparsers.add_parser(
        "templates",
        help="List payload templates and their fields",
    )

    # qr_studio generate <template> key=value...
    generate_parser = subparsers.add_parser(
        "generate",
        help="Encode template fields into a payload",
        description="Encode structured fields into a standard QR payload and save it to history",
    )
    generate_parser.add_argument("template", choices=[t.id for t in TEMPLATES], help="Template id")
    generate_parser.add_argument(
        "fields",
        nargs="*",
        metavar="key=value",
        help="Template field values (see 'qr_studio templates')",
    )
    generate_parser.add_argument(
        "--no-save",
        action="store_true",
        help="Print the payload without adding it to history",
    )

    # qr_studio add <data>
    add_parser = subparsers.add_parser("add", help="Save raw text or a URL to history")
    add_parser.add_argument("data", help="Payload text")

    # qr_studio classify <data>
    classify_parser = subparsers.add_parser("classify", help="Show the content type of a payload")
    classify_parser.add_argument("data", help="Payload text")

    # qr_studio history
    history_parser = subparsers.add_parser(
        "history",
        help="List history entries",
        description="List history entries, most recent first",
    )
    history_parser.add_argument("--search", help="Case-insensitive text to look for")
    history_parser.add_argument(
        "--type",
        choices=["all"] + [t.value for t in ContentType],
        help="Only show entries of this type",
    )
    history_parser.add_argument(
        "--favorites",
        action="store_true",
        help="Only show favorite entries",
    )

    # qr_studio favorite/remove/open/copy <id>
    for name, help_text in (
        ("favorite", "Toggle the favorite flag of an entry"),
        ("remove", "Remove an entry from history"),
        ("open", "Open an entry (browser, dialer, mail, maps) or copy it"),
        ("copy", "Copy an entry's payload to the clipboard"),
    ):
        id_parser = subparsers.add_parser(name, help=help_text)
        id_parser.add_argument("id", help="Entry id or unique id prefix")

    # qr_studio clear
    clear_parser = subparsers.add_parser("clear", help="Clear the history")
    clear_parser.add_argument(
        "--favorites",
        action="store_true",
        help="Clear the favorites instead of the history",
    )

    # qr_studio stats
    subparsers.add_parser("stats", help="Show history statistics")

    # qr_studio export
    export_parser = subparsers.add_parser(
        "export",
        help="Export the history as JSON",
        description="Write the history to a JSON file in the export directory",
    )
    export_parser.add_argument("--dir", help="Directory to write the export to")

    return parser


COMMANDS = {
    "templates": generate.templates_command,
    "generate": generate.generate_command,
    "add": generate.add_command,
    "classify": generate.classify_command,
    "history": history.history_command,
    "favorite": history.favorite_command,
    "remove": history.remove_command,
    "clear": history.clear_command,
    "stats": history.stats_command,
    "export": export.export_command,
    "open": open_entry.open_command,
    "copy": open_entry.copy_command,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1
    try:
        return command(args)
    except QRStudioException as e:
        ConsolePresenter().show_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
