"""Utility functions for CLI operations."""

import json
import logging
import sys
from enum import IntEnum
from typing import Any, Dict, NoReturn, Union

from pydantic import BaseModel


class ExitCode(IntEnum):
    """Process exit codes shared by all commands."""

    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    WRITE_FAILED = 30


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_output(data: Union[BaseModel, Dict[str, Any]], exit_code: int) -> NoReturn:
    """Print a JSON document to stdout and exit.

    Args:
        data: A pydantic model or plain dict
        exit_code: Process exit code
    """
    if isinstance(data, BaseModel):
        print(data.model_dump_json(exclude_none=True, indent=2))
    else:
        print(json.dumps(data, indent=2))
    sys.exit(exit_code)


def format_value(value: Any, max_length: int = 60) -> str:
    """Render a decoded field value for a table cell.

    Bytes are shown as hex (or just their length when long), long text is
    cut to max_length.
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) * 2 > max_length:
            text = f"<{len(value)} bytes>"
        else:
            text = value.hex(" ") if value else "<empty>"
    elif isinstance(value, (list, tuple)):
        text = ", ".join(format_value(item, max_length) for item in value)
    elif hasattr(value, "filename") and hasattr(value, "data"):
        text = f"{value.filename} ({len(value.data)} bytes)"
    elif hasattr(value, "__dataclass_fields__"):
        text = " ".join(
            f"{name}={format_value(getattr(value, name), max_length)}"
            for name in value.__dataclass_fields__
        )
    elif isinstance(value, IntEnum):
        text = value.name
    else:
        text = str(value)

    if len(text) > max_length:
        text = text[: max_length - 3] + "..."
    return text


def jsonable(value: Any) -> Any:
    """Convert a decoded field value into something JSON can carry.

    Bytes become lowercase hex strings; nested dataclasses become dicts.
    """
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    if isinstance(value, (list, tuple)):
        return [jsonable(item) for item in value]
    if hasattr(value, "__dataclass_fields__"):
        return {
            name: jsonable(getattr(value, name))
            for name in value.__dataclass_fields__
        }
    return value
