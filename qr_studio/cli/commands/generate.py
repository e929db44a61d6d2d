"""CLI commands that create payloads: generate, add, classify, templates."""

from qr_studio.cli.commands.common import build_config, report_write
from qr_studio.exceptions import QRStudioException
from qr_studio.presenters import ConsolePresenter
from qr_studio.services.action_resolver import resolve
from qr_studio.services.content_classifier import classify
from qr_studio.services.factory import create_history_store
from qr_studio.services.payload_encoder import encode_payload
from qr_studio.services.template_catalog import get_template, get_templates


def parse_field_args(pairs: list[str]) -> dict[str, str]:
    """Parse ``key=value`` arguments into a field mapping.

    Raises:
        ValueError: If an argument has no '=' or an empty key
    """
    fields: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"Expected key=value, got '{pair}'")
        fields[key.strip()] = value
    return fields


def generate_command(args) -> int:
    """Execute the generate subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        template = get_template(args.template)
        fields = parse_field_args(args.fields)
    except (QRStudioException, ValueError) as e:
        presenter.show_error(str(e))
        return 1

    unknown = sorted(set(fields) - set(template.field_keys))
    if unknown:
        presenter.show_warning(f"Ignoring unknown field(s) for {template.id}: {', '.join(unknown)}")

    payload = encode_payload(template.id, fields)
    if not payload:
        required = ", ".join(template.required_keys)
        presenter.show_error(f"Could not encode {template.name}: required field(s) {required}")
        return 1

    presenter.show_payload(payload, resolve(classify(payload)))

    if args.no_save:
        return 0
    return _record(args, payload, presenter)


def add_command(args) -> int:
    """Execute the add subcommand (record raw text as a payload)."""
    presenter = ConsolePresenter()
    if not args.data:
        presenter.show_error("Payload is empty")
        return 1
    presenter.show_payload(args.data, resolve(classify(args.data)))
    return _record(args, args.data, presenter)


def classify_command(args) -> int:
    """Execute the classify subcommand."""
    presenter = ConsolePresenter()
    content_type = classify(args.data)
    action = resolve(content_type)
    presenter.show_info(f"{content_type.value}\t{action.label}\t{action.open_strategy.value}")
    return 0


def templates_command(args) -> int:
    """Execute the templates subcommand."""
    ConsolePresenter().show_templates(get_templates())
    return 0


def _record(args, payload: str, presenter) -> int:
    history = create_history_store(build_config(args))
    update = history.add(payload)
    if not update.changed:
        presenter.show_info("Already in history (recorded less than a minute ago)")
        return 0
    return report_write(presenter, update.persisted, f"Saved to history as {update.entries[0].id[:8]}")
