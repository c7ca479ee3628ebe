"""Pydantic schemas for JSON output validation.

This module defines the data structures for all JSON outputs from the CLI.

Commands using Pydantic validation:
- frames: TagResponse | ErrorResponse
- header: HeaderResponse | ErrorResponse
- config: ConfigResponse | ErrorResponse
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Base Response Models
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response for all commands.

    Attributes:
        status: Always "error" for error responses
        error: Machine-readable error code (e.g., "invalid_input", "data_error")
        message: Human-readable error message
    """

    status: Literal["error"] = "error"
    error: str = Field(
        description="Machine-readable error code",
        examples=["invalid_input", "data_error", "write_failed"],
    )
    message: str = Field(description="Human-readable error description")


# ============================================================================
# Tag Models
# ============================================================================


class HeaderModel(BaseModel):
    """Decoded tag header."""

    version: str = Field(description="Tag version, e.g. 2.4.0")
    unsync: bool
    extended_header: bool
    experimental: bool
    footer: bool
    declared_size: int = Field(ge=0, description="Tag size excluding the header")
    ext_header_size: int = Field(default=0, ge=0)


class FrameModel(BaseModel):
    """One decoded frame."""

    frame_id: str = Field(min_length=4, max_length=4)
    title: str
    size: int = Field(ge=0, description="Declared body size in bytes")
    offset: int = Field(ge=0, description="Absolute offset of the frame body")
    fields: Dict[str, Any] = Field(description="Decoded fields; bytes are hex encoded")


class DiagnosticModel(BaseModel):
    """A fatal or recoverable problem found while walking the tag."""

    severity: Literal["fatal", "recoverable"]
    message: str
    frame_index: Optional[int] = None
    frame_id: Optional[str] = None
    offset: Optional[int] = None


# ============================================================================
# Command Responses
# ============================================================================


class TagResponse(BaseModel):
    """Response of the frames command.

    Attributes:
        status: "complete" if no fatal condition stopped the walk, else "partial"
        file: Path of the decoded file
        header: Decoded tag header
        frames: Frames in file order
        diagnostics: Problems found during the walk
        padding: Number of padding bytes
        footer: Whether a footer was found
        attachments: Filenames written to the attachment directory
    """

    status: Literal["complete", "partial"]
    file: str
    header: HeaderModel
    frames: List[FrameModel]
    diagnostics: List[DiagnosticModel] = Field(default_factory=list)
    padding: int = Field(ge=0)
    footer: bool
    attachments: Optional[List[str]] = Field(
        default=None, description="Attachment filenames, when extraction was requested"
    )


class HeaderResponse(BaseModel):
    """Response of the header command."""

    status: Literal["success"] = "success"
    file: str
    header: HeaderModel


class ConfigResponse(BaseModel):
    """Response of the config command."""

    status: Literal["success"] = "success"
    config_path: str
    written: bool = Field(default=False, description="True if --init wrote the file")
    config: Dict[str, Any]
