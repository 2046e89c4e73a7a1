"""Main CLI: `tzclock [CONFIG_PATH]`.

Locate the config file, read it, then print the local time and the time in
every listed zone. Any failure prints one explanatory message and exits
with status 1; no partial report is printed.
"""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console

from adapters.json_exporter import report_to_json
from adapters.system_clock import SystemClock
from adapters.timezones import get_local_zone
from adapters.tz_file import read_entries
from core.config import AppSettings
from core.errors import ConfigFormatError, ConfigLocationError, ConfigReadError
from core.locator import get_home_dir, locate
from core.logging_config import configure_logging, get_logger
from core.services.report import build_report

app = typer.Typer(
    add_completion=False,
    help="Print the current local time and the time in every zone listed in ~/.tz.rc.",
)

_console = Console(highlight=False, soft_wrap=True, emoji=False)
_log = get_logger("cli")


def _fail(message: str) -> typer.Exit:
    _console.print(message, markup=False, emoji=False)
    return typer.Exit(code=1)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def show(
    ctx: typer.Context,
    args: list[str] | None = typer.Argument(
        None,
        help="Config file to read instead of ~/.tz.rc; only the first one is used.",
        show_default=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Print the aligned time report."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        raise _fail(f"Invalid TZCLOCK_* settings:\n{exc}")
    configure_logging(settings.log_level)

    try:
        argv = [ctx.info_name or "tzclock", *(args or []), *ctx.args]
        path = locate(argv, get_home_dir(), filename=settings.config_filename)
    except ConfigLocationError as exc:
        raise _fail(f"Unable to retrieve name of config file:\n{exc}.")

    try:
        entries = read_entries(path)
    except ConfigReadError as exc:
        raise _fail(f"Unable to read config file {path}:\n{exc.cause}")
    except ConfigFormatError as exc:
        raise _fail(f"Invalid config file {path}:\n{exc}")

    try:
        local_zone = get_local_zone(settings.local_zone)
    except ValueError as exc:
        raise _fail(f"Invalid local timezone:\n{exc}")
    _log.debug("Local zone: %s", local_zone)

    report = build_report(entries, SystemClock(), local_zone)

    if as_json:
        typer.echo(report_to_json(report))
        return
    for line in report.lines():
        typer.echo(line)


def run() -> None:
    app()
