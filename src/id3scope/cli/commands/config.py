"""Config command - Show or initialise the configuration file."""

import argparse
import sys

from rich.console import Console
from rich.table import Table

from ...config import Config
from ..schemas import ConfigResponse, ErrorResponse
from ..utils import ExitCode, json_output


def cmd_config(args: argparse.Namespace) -> None:
    """Show the effective configuration, optionally writing it out.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        30: Write failed (--init could not save the file)
    """
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)
    config = Config(getattr(args, "config", None))

    written = False
    if getattr(args, "init", False):
        if not config.save(force=True):
            message = f"Cannot write config file: {config.config_path}"
            if use_json:
                json_output(
                    ErrorResponse(error="write_failed", message=message),
                    ExitCode.WRITE_FAILED,
                )
            console.print(f"[red]Error: {message}[/red]")
            sys.exit(ExitCode.WRITE_FAILED)
        written = True

    if use_json:
        json_output(
            ConfigResponse(
                config_path=str(config.config_path),
                written=written,
                config=config.data,
            ),
            ExitCode.SUCCESS,
        )

    table = Table(title="Configuration", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    for section, values in config.data.items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", repr(value))

    console.print(f"[cyan]Config file: {config.config_path}[/cyan]")
    if written:
        console.print("[green]✓[/green] Configuration written")
    console.print(table)
