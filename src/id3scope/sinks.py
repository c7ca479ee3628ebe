"""Attachment sinks.

Frames that embed binary payloads (COMR logos, ENCR data) return an
AttachmentRequest. The walker hands each request to a sink, which opens a
writable for (name, extension), receives the bytes once and is closed on
every exit path.
"""

import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Dict, Iterator, Union

logger = logging.getLogger(__name__)


class DirectorySink:
    """Writes each attachment to <directory>/<name><extension>."""

    def __init__(self, directory: Union[str, Path], buffer_size: int = 8192):
        self.directory = Path(directory)
        self.buffer_size = buffer_size

    def path_for(self, name: str, extension: str) -> Path:
        # Only the final path component of the name is used
        return self.directory / (Path(name).name + extension)

    @contextmanager
    def open(self, name: str, extension: str) -> Iterator[BinaryIO]:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(name, extension)
        logger.info(f"Writing attachment {path}")
        with open(path, "wb", buffering=self.buffer_size) as f:
            yield f


class MemorySink:
    """Keeps attachments in memory, keyed by name + extension."""

    def __init__(self):
        self.files: Dict[str, bytes] = {}

    def __contains__(self, filename):
        return filename in self.files

    def __getitem__(self, filename):
        return self.files[filename]

    @contextmanager
    def open(self, name: str, extension: str) -> Iterator[BinaryIO]:
        buffer = io.BytesIO()
        try:
            yield buffer
        finally:
            # Store whatever was written, even if the writer failed part way
            self.files[name + extension] = buffer.getvalue()
            buffer.close()
