"""Tool result content — the MCP ``tools/call`` result payload.

A :class:`ToolResult` holds an ordered list of content items, each either
:class:`TextContent` or :class:`ResourceContent` (a base64-encoded file).
Results are always returned, never raised: failures are ``is_error=True``
results with a single text item.
"""

from __future__ import annotations

import base64
import binascii
from datetime import UTC, datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kelurahan_mcp.content.mime import KNOWN_MIME_TYPES


class TextContent(BaseModel):
    """Plain text content item."""

    type: Literal["text"] = "text"
    text: str


class FileMetadata(BaseModel):
    """Descriptive metadata attached to a resource item."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str = Field(min_length=1)
    mime_type: str = Field(alias="mimeType")
    size_bytes: int = Field(alias="sizeBytes", ge=0)
    created_at: str = Field(
        default_factory=lambda: datetime.now(UTC).isoformat(), alias="createdAt"
    )


class ResourceContent(BaseModel):
    """A file carried inline as base64."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["resource"] = "resource"
    text: str
    data: str
    mime_type: str = Field(alias="mimeType")
    metadata: FileMetadata

    @field_validator("mime_type")
    @classmethod
    def _known_mime_type(cls, value: str) -> str:
        if value not in KNOWN_MIME_TYPES:
            msg = f"unrecognized MIME type: {value}"
            raise ValueError(msg)
        return value

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str, filename: str) -> ResourceContent:
        """Encode *data* as a resource item named *filename*."""
        return cls(
            text=f"Generated file: {filename}",
            data=base64.b64encode(data).decode("ascii"),
            mime_type=mime_type,
            metadata=FileMetadata(filename=filename, mime_type=mime_type, size_bytes=len(data)),
        )

    @property
    def filename(self) -> str:
        return self.metadata.filename

    def decode(self) -> bytes:
        """Return the original bytes.

        Raises:
            ValueError: If ``data`` is not valid base64.
        """
        try:
            return base64.b64decode(self.data, validate=True)
        except binascii.Error as exc:
            msg = f"invalid base64 payload for {self.filename}: {exc}"
            raise ValueError(msg) from exc


ContentItem = Annotated[TextContent | ResourceContent, Field(discriminator="type")]


class ToolResult(BaseModel):
    """Outcome of one tool call."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[ContentItem] = []
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def success(cls, content: list[TextContent | ResourceContent]) -> ToolResult:
        return cls(content=content, is_error=False)

    @classmethod
    def success_text(cls, text: str) -> ToolResult:
        return cls.success([TextContent(text=text)])

    @classmethod
    def error(cls, message: str) -> ToolResult:
        return cls(content=[TextContent(text=message)], is_error=True)

    @property
    def text(self) -> str:
        """Concatenated text of all text items."""
        return "\n".join(item.text for item in self.content if isinstance(item, TextContent))

    @property
    def resources(self) -> list[ResourceContent]:
        return [item for item in self.content if isinstance(item, ResourceContent)]

    def to_wire(self) -> dict[str, Any]:
        """Serialize with MCP field names (``isError``, ``mimeType``, ...)."""
        return self.model_dump(mode="json", by_alias=True)
