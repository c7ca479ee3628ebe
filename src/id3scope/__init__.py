"""id3scope.

Read-only decoder for ID3v2 tags. Walks the tag header and every frame in
the tag region and returns structured, immutable frame values, with a
command-line tool for inspecting tags and extracting embedded payloads.

Main modules:
    cli: Command-line interface (id3scope command)
    frames: One dataclass and decode routine per frame kind
    tag: Tag walker and the ID3Tag result

Core modules:
    config: Configuration management
    constants: Sizes, identifiers and lookup tables
    cursor: Seekable byte reader
    encoding: Text encodings and terminators
    errors: Exception hierarchy
    header: Tag header parsing
    registry: Frame identifier dispatch
    sinks: Attachment sinks
    utils: Integer codecs
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("id3scope")
except (PackageNotFoundError, ImportError):
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject_data = tomllib.load(f)
            __version__ = pyproject_data["project"]["version"]
    except Exception:
        __version__ = "unknown"

from .errors import (
    ID3Error,
    BadMagic,
    TruncatedInput,
    InvalidEncoding,
    UnrecognizedFrameKind,
    MalformedFrame,
    SourceUnavailable,
)
from .header import TagHeader
from .tag import ID3Tag, TagWalker, Diagnostic
from .sinks import DirectorySink, MemorySink

__all__ = [
    # Sub-packages
    "cli",
    "frames",
    # Entry points
    "ID3Tag",
    "TagWalker",
    "TagHeader",
    "Diagnostic",
    "DirectorySink",
    "MemorySink",
    # Errors
    "ID3Error",
    "BadMagic",
    "TruncatedInput",
    "InvalidEncoding",
    "UnrecognizedFrameKind",
    "MalformedFrame",
    "SourceUnavailable",
]
