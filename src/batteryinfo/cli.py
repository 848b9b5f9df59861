"""Battery information CLI application.

This module provides the command-line interface that prints the
battery summary read from sysfs, or the error that stopped it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer

from batteryinfo.errors import BatteryInfoError
from batteryinfo.settings import BatterySettings
from batteryinfo.system.loader import BatteryLoader
from batteryinfo.system.status import BatteryRecord

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Linux battery information CLI", add_completion=False)

logger: Final = logging.getLogger(__name__)  # Will be "batteryinfo.cli"

DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
# For testing only - HIDDEN from CLI
DEVICE_PATH_OPTION = typer.Option(None, "--device-path", hidden=True)


def _load_record(device_path: Path | None, debug: bool) -> BatteryRecord:
    """Configure logging, load the record, and exit 1 on failure."""
    settings = BatterySettings(device_path=device_path) if device_path else BatterySettings()
    logging.basicConfig(
        level=settings.logging_level(debug),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        return BatteryLoader(settings).load()
    except BatteryInfoError as exc:
        logger.debug("Loading battery information failed", exc_info=True)
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = DEBUG_OPTION,
    device_path: Path | None = DEVICE_PATH_OPTION,
) -> None:
    """Print the battery summary when no command is given."""
    if ctx.invoked_subcommand is None:
        show(debug=debug, device_path=device_path)


@app.command()
def show(
    debug: bool = DEBUG_OPTION,
    device_path: Path | None = DEVICE_PATH_OPTION,
) -> None:
    """Print the one-line battery summary."""
    record = _load_record(device_path, debug)
    typer.echo(record.summary())


@app.command()
def attributes(
    debug: bool = DEBUG_OPTION,
    device_path: Path | None = DEVICE_PATH_OPTION,
) -> None:
    """Print each parsed battery attribute on its own line."""
    record = _load_record(device_path, debug)
    for name, label in record.as_attributes().items():
        typer.echo(f"{name}: {label}")


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
