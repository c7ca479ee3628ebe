"""CLI command implementations.

Each module in this package implements a specific id3scope subcommand:
    frames.py: Decode and display every frame of a tag
    header.py: Display the tag header
    config.py: Show or initialise the configuration file
"""

from .frames import cmd_frames
from .header import cmd_header
from .config import cmd_config

__all__ = [
    "cmd_frames",
    "cmd_header",
    "cmd_config",
]
