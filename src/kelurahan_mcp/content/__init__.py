"""Content types for tool results."""

from kelurahan_mcp.content.builder import ContentBuilder
from kelurahan_mcp.content.mime import FileExtension, detect_mime_from_bytes, detect_mime_type
from kelurahan_mcp.content.models import (
    ContentItem,
    FileMetadata,
    ResourceContent,
    TextContent,
    ToolResult,
)

__all__ = [
    "ContentBuilder",
    "ContentItem",
    "FileExtension",
    "FileMetadata",
    "ResourceContent",
    "TextContent",
    "ToolResult",
    "detect_mime_from_bytes",
    "detect_mime_type",
]
