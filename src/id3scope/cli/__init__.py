"""Command-line interface for id3scope.

This package provides the 'id3scope' command-line tool with these subcommands:
    frames: Decode and display every frame of a tag
    header: Display the tag header
    config: Show or initialise the configuration file

Modules:
    commands/: Command implementations (frames, header, config)
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from ..config import Config
from .utils import setup_logging
from .commands import (
    cmd_frames,
    cmd_header,
    cmd_config,
)

__all__ = [
    "main",
    "cmd_frames",
    "cmd_header",
    "cmd_config",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""
    pass


def main() -> None:
    """Main CLI entry point."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        default=None,
        help="Set logging level (disabled by default)",
    )
    parent_parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file (default: ~/.id3scope/config.toml)",
    )

    parser = argparse.ArgumentParser(
        prog="id3scope",
        usage="id3scope <command> [options]",
        description="id3scope - Inspect ID3v2 tags frame by frame",
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # frames
    # ──────────────────────────────
    frames_parser = subparsers.add_parser(
        "frames",
        help="Decode and display every frame of a tag",
        usage="id3scope frames <file> [options]",
        description=(
            "Walk the ID3v2 tag at the start of a file and display each "
            "decoded frame, the padding and any problems found"
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    frames_parser.add_argument("file", help="Path to an audio file or raw tag")
    frames_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    frames_parser.add_argument(
        "--extract",
        metavar="DIR",
        help="Write embedded payloads (COMR logos, ENCR data) to DIR",
    )
    frames_parser.add_argument(
        "--name",
        help="Base name for extracted attachments (default: the input file name)",
    )
    frames_parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Show only the header and summary, not the frames",
    )
    frames_parser.set_defaults(func=cmd_frames)

    # ──────────────────────────────
    # header
    # ──────────────────────────────
    header_parser = subparsers.add_parser(
        "header",
        help="Display the tag header",
        usage="id3scope header <file> [options]",
        description="Parse and display the 10-byte ID3v2 tag header",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    header_parser.add_argument("file", help="Path to an audio file or raw tag")
    header_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    header_parser.set_defaults(func=cmd_header)

    # ──────────────────────────────
    # config
    # ──────────────────────────────
    config_parser = subparsers.add_parser(
        "config",
        help="Show or initialise the configuration",
        usage="id3scope config [options]",
        description="Show the effective configuration, or write it out with --init",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        help="Write the effective configuration to the config file",
    )
    config_parser.add_argument(
        "--json",
        action="store_true",
        help="Output results as JSON",
    )
    config_parser.set_defaults(func=cmd_config)

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup; command line wins over the config file
    log_level = args.log_level or Config(args.config).get_log_level()
    setup_logging(log_level or "critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
