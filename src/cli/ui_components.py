"""Rich UI components for the CLI.

Table builders kept apart from the commands so the doctor output and any
later command share the same look.
"""

from __future__ import annotations

from rich.table import Table

STATUS_STYLES = {
    "OK": "green",
    "FAIL": "red",
    "OPTIONAL": "yellow",
}


def build_checks_table(title: str = "tzclock doctor") -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def add_check(table: Table, name: str, status: str, details: str) -> None:
    """Append a row, colouring the status cell."""

    style = STATUS_STYLES.get(status, "white")
    table.add_row(name, f"[{style}]{status}[/{style}]", details)
