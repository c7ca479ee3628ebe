"""Frames command - Decode and display every frame of a tag."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import Config
from ...errors import ID3Error, SourceUnavailable
from ...registry import frame_name
from ...sinks import DirectorySink
from ...tag import ID3Tag
from ..schemas import DiagnosticModel, ErrorResponse, FrameModel, TagResponse
from ..utils import ExitCode, format_value, json_output, jsonable
from .header import header_model, header_table


def _fail(use_json: bool, console: Console, error: str, message: str, code: ExitCode) -> NoReturn:
    if use_json:
        json_output(ErrorResponse(error=error, message=message), code)
    console.print(f"[red]Error: {escape(message)}[/red]")
    sys.exit(code)


def tag_response(tag: ID3Tag, file_path: Path, attachments: Optional[List[str]]) -> TagResponse:
    frames = [
        FrameModel(
            frame_id=frame.frame_id,
            title=frame_name(frame.frame_id),
            size=frame.size,
            offset=frame.header.offset,
            fields={name: jsonable(value) for name, value in frame.fields().items()},
        )
        for frame in tag
    ]
    diagnostics = [
        DiagnosticModel(
            severity=d.severity,
            message=d.message,
            frame_index=d.frame_index,
            frame_id=d.frame_id,
            offset=d.offset,
        )
        for d in tag.diagnostics
    ]
    return TagResponse(
        status="complete" if tag.complete else "partial",
        file=str(file_path),
        header=header_model(tag.header),
        frames=frames,
        diagnostics=diagnostics,
        padding=tag.padding,
        footer=tag.footer_present,
        attachments=attachments,
    )


def cmd_frames(args: argparse.Namespace) -> None:
    """Decode all frames of a tag and display them.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (file doesn't exist or can't be read)
        20: Data error (no ID3v2 header, or the walk stopped early)
        30: Write failed (an attachment could not be written)
    """
    file_path = Path(args.file)
    use_json = getattr(args, "json", False)
    console = Console(quiet=use_json)

    # In JSON mode, suppress INFO/DEBUG logs
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)

    config = Config(getattr(args, "config", None))
    max_length = config.get_max_value_length()

    extract_dir = getattr(args, "extract", None) or config.get_attachments_dir()
    attachment_name = getattr(args, "name", None) or config.get_attachment_base_name() or None
    sink = DirectorySink(extract_dir) if extract_dir else None

    if not file_path.is_file():
        _fail(use_json, console, "invalid_input", f"File not found: {file_path}", ExitCode.INVALID_INPUT)

    try:
        tag = ID3Tag.read(file_path, sink=sink, attachment_name=attachment_name)
    except SourceUnavailable as e:
        _fail(use_json, console, "invalid_input", str(e), ExitCode.INVALID_INPUT)
    except ID3Error as e:
        _fail(use_json, console, "data_error", str(e), ExitCode.DATA_ERROR)
    except OSError as e:
        logging.debug("Attachment write failed", exc_info=True)
        _fail(use_json, console, "write_failed", f"Cannot write attachment: {e}", ExitCode.WRITE_FAILED)

    exit_code = ExitCode.SUCCESS if tag.complete else ExitCode.DATA_ERROR
    attachments = None
    if sink is not None:
        attachments = [str(sink.path_for(a.name, a.extension)) for a in tag.attachments]

    if use_json:
        json_output(tag_response(tag, file_path, attachments), exit_code)

    console.print(f"[cyan]Reading tag: {file_path}[/cyan]\n")
    console.print(header_table(tag.header))
    console.print()

    if not args.quiet:
        table = Table(title=f"Frames ({len(tag)})")
        table.add_column("#", style="dim", justify="right")
        table.add_column("ID", style="cyan")
        table.add_column("Name")
        if config.get_show_offsets():
            table.add_column("Offset", justify="right")
        table.add_column("Size", justify="right")
        table.add_column("Fields", style="magenta")

        for i, frame in enumerate(tag):
            fields = "\n".join(
                escape(f"{name}: {format_value(value, max_length)}")
                for name, value in frame.fields().items()
            )
            row = [str(i), escape(frame.frame_id), frame_name(frame.frame_id)]
            if config.get_show_offsets():
                row.append(str(frame.header.offset))
            row += [str(frame.size), fields]
            table.add_row(*row)

        console.print(table)
        console.print()

    console.print(f"Padding: {tag.padding:,} bytes")
    console.print(f"Footer: {'present' if tag.footer_present else 'absent'}")

    for d in tag.diagnostics:
        colour = "red" if d.fatal else "yellow"
        console.print(f"[{colour}]{escape(str(d))}[/{colour}]")

    if attachments:
        console.print(f"\n[green]✓[/green] Wrote {len(attachments)} attachment(s):")
        for path in attachments:
            console.print(f"  {path}")

    if exit_code != ExitCode.SUCCESS:
        console.print("\n[yellow]Tag could not be decoded completely[/yellow]")
    sys.exit(exit_code)
