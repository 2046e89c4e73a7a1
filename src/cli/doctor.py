"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.timezones import get_local_zone, list_zones, zone_count, zone_key
from adapters.tz_file import read_entries
from cli.ui_components import add_check, build_checks_table
from core.config import AppSettings
from core.errors import ConfigFormatError, ConfigLocationError, ConfigReadError
from core.locator import get_home_dir, resolve_config_path
from core.logging_config import configure_logging

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and timezone lookup.")

_console = Console(highlight=False)


@app.command()
def run(
    config_path: str | None = typer.Argument(
        None,
        help="Config file to check instead of ~/.tz.rc.",
        show_default=False,
    ),
) -> None:
    """Check home directory, config file, local zone and timezone database."""

    table = build_checks_table()
    ok = True

    try:
        settings = AppSettings()
    except ValidationError as exc:
        add_check(table, "Settings", "FAIL", escape(str(exc)))
        _console.print(table)
        raise typer.Exit(code=1)
    configure_logging(settings.log_level)

    home = get_home_dir()
    if home is not None:
        add_check(table, "Home directory", "OK", escape(str(home)))
    elif config_path is None:
        add_check(table, "Home directory", "FAIL", "No home directory!")
        ok = False
    else:
        add_check(table, "Home directory", "OPTIONAL", "Not found; explicit path given")

    path = None
    try:
        path = resolve_config_path(config_path, home, filename=settings.config_filename)
        add_check(table, "Config path", "OK", escape(str(path)))
    except ConfigLocationError as exc:
        add_check(table, "Config path", "FAIL", escape(str(exc)))
        ok = False

    if path is not None:
        try:
            entries = read_entries(path)
            names = ", ".join(e.name for e in entries) or "(empty)"
            add_check(table, "Config entries", "OK", escape(f"{len(entries)}: {names}"))
        except ConfigReadError as exc:
            add_check(table, "Config file", "FAIL", escape(str(exc.cause)))
            ok = False
        except ConfigFormatError as exc:
            add_check(table, "Config entries", "FAIL", escape(str(exc)))
            ok = False

    try:
        local = get_local_zone(settings.local_zone)
        add_check(table, "Local timezone", "OK", escape(zone_key(local)))
    except ValueError as exc:
        add_check(table, "Local timezone", "FAIL", escape(str(exc)))
        ok = False

    count = zone_count()
    if count:
        add_check(table, "Timezone database", "OK", f"{count} zones")
    else:
        add_check(table, "Timezone database", "FAIL", "No zones found; install `tzdata`")
        ok = False

    _console.print(table)
    if not ok:
        raise typer.Exit(code=1)


@app.command()
def zones(
    prefix: str | None = typer.Option(None, "--prefix", "-p", help="Only names starting with this (e.g. 'Asia/')."),
) -> None:
    """List valid timezone names for the config file."""

    for name in list_zones(prefix):
        typer.echo(name)


def main() -> None:
    app()
