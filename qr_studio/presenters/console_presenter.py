"""Console presenter for CLI output."""

from qr_studio.models import ActionInfo, HistoryEntry, HistoryStats, Template
from qr_studio.utils.time_utils import format_history_time


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_payload(self, payload: str, action: ActionInfo) -> None:
        """Display a payload with its type label."""
        print(f"\n{action.label} ({action.open_strategy.value}):")
        print("-" * 60)
        print(payload)
        print("-" * 60)

    def show_history(self, entries: list[HistoryEntry]) -> None:
        """Display history entries, most recent first."""
        if not entries:
            print("History is empty")
            return

        print(f"\nHistory ({len(entries)} entries):")
        print("=" * 60)
        for entry in entries:
            star = "*" if entry.is_favorite else " "
            first_line = entry.data.splitlines()[0] if entry.data else ""
            if len(first_line) > 40:
                first_line = first_line[:37] + "..."
            when = format_history_time(entry.timestamp)
            print(f"{star} {entry.id[:8]}  {entry.type.value:10s} {first_line:40s} {when}")

    def show_stats(self, stats: HistoryStats) -> None:
        """Display history statistics."""
        print("\nHistory Statistics:")
        print(f"  Total entries: {stats.total}")
        print(f"  Favorites: {stats.favorites}")
        if stats.last_generated:
            print(f"  Last generated: {format_history_time(stats.last_generated)}")
        if stats.by_type:
            print("\nBy type:")
            for type_tag, count in sorted(stats.by_type.items(), key=lambda kv: (-kv[1], kv[0])):
                print(f"  {type_tag:10s} {count}")

    def show_templates(self, templates: list[Template]) -> None:
        """Display the available payload templates."""
        print("\nTemplates:")
        for template in templates:
            keys = ", ".join(
                f"{f.key}*" if f.required else f.key for f in template.fields
            )
            print(f"  {template.id:9s} {template.name:16s} {keys}")
        print("\n(* = required)")
