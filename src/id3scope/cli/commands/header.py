"""Header command - Display the ID3v2 tag header."""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...cursor import ByteCursor
from ...errors import ID3Error
from ...header import TagHeader
from ..schemas import ErrorResponse, HeaderModel, HeaderResponse
from ..utils import ExitCode, json_output


def header_model(header: TagHeader) -> HeaderModel:
    return HeaderModel(
        version=header.version_string,
        unsync=header.unsync,
        extended_header=header.has_ext_header,
        experimental=header.experimental,
        footer=header.has_footer,
        declared_size=header.declared_size,
        ext_header_size=header.ext_header_size,
    )


def header_table(header: TagHeader) -> Table:
    table = Table(title="Tag Header", show_header=False)
    table.add_column("Field", style="cyan", width=18)
    table.add_column("Value", style="magenta")

    table.add_row("Version", f"ID3v{header.version_string}")
    table.add_row("Tag Size", f"{header.declared_size:,} bytes")
    table.add_row("Unsynchronised", "Yes" if header.unsync else "No")
    table.add_row(
        "Extended Header",
        f"Yes ({header.ext_header_size} bytes)" if header.has_ext_header else "No",
    )
    table.add_row("Experimental", "Yes" if header.experimental else "No")
    table.add_row("Footer", "Yes" if header.has_footer else "No")
    return table


def cmd_header(args: argparse.Namespace) -> None:
    """Display the tag header of a file.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (file doesn't exist or can't be read)
        20: Data error (no ID3v2 header)
    """
    file_path = Path(args.file)
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)

    if not file_path.is_file():
        if use_json:
            json_output(
                ErrorResponse(
                    error="invalid_input",
                    message=f"File not found: {file_path}",
                ),
                ExitCode.INVALID_INPUT,
            )
        console.print(f"[red]Error: File not found: {file_path}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)

    try:
        with open(file_path, "rb") as f:
            header = TagHeader.from_cursor(ByteCursor(f))
    except OSError as e:
        logging.debug("Cannot read %s", file_path, exc_info=True)
        if use_json:
            json_output(
                ErrorResponse(error="invalid_input", message=str(e)),
                ExitCode.INVALID_INPUT,
            )
        console.print(f"[red]Error: Cannot read {file_path}: {escape(str(e))}[/red]")
        sys.exit(ExitCode.INVALID_INPUT)
    except ID3Error as e:
        if use_json:
            json_output(
                ErrorResponse(error="data_error", message=str(e)),
                ExitCode.DATA_ERROR,
            )
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(ExitCode.DATA_ERROR)

    if use_json:
        json_output(
            HeaderResponse(file=str(file_path), header=header_model(header)),
            ExitCode.SUCCESS,
        )

    console.print(f"[cyan]Reading tag header: {file_path}[/cyan]\n")
    console.print(header_table(header))
