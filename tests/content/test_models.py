"""Tests for content items and ToolResult."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from kelurahan_mcp.content import ContentItem, ResourceContent, TextContent, ToolResult


class TestResourceContent:
    @pytest.mark.parametrize("data", [b"%PDF-1.7 fake", b"", bytes(range(256))])
    def test_base64_round_trip(self, data: bytes) -> None:
        resource = ResourceContent.from_bytes(data, "application/pdf", "a.pdf")
        assert resource.decode() == data
        assert resource.metadata.size_bytes == len(data)

    def test_from_bytes_fields(self) -> None:
        resource = ResourceContent.from_bytes(b"abc", "application/pdf", "sktm-siti.pdf")
        assert resource.text == "Generated file: sktm-siti.pdf"
        assert resource.filename == "sktm-siti.pdf"
        assert resource.data == "YWJj"
        assert resource.metadata.created_at

    def test_empty_filename_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ResourceContent.from_bytes(b"x", "application/pdf", "")

    def test_unknown_mime_rejected(self) -> None:
        with pytest.raises(ValidationError, match="unrecognized MIME type"):
            ResourceContent.from_bytes(b"x", "application/x-made-up", "a.bin")

    def test_invalid_base64(self) -> None:
        resource = ResourceContent.from_bytes(b"x", "application/pdf", "a.pdf")
        broken = resource.model_copy(update={"data": "not base64!"})
        with pytest.raises(ValueError, match="invalid base64"):
            broken.decode()


class TestToolResult:
    def test_error(self) -> None:
        result = ToolResult.error("gagal")
        assert result.is_error
        assert result.text == "gagal"
        assert result.resources == []

    def test_wire_format_uses_mcp_names(self) -> None:
        result = ToolResult.success(
            [TextContent(text="ok"), ResourceContent.from_bytes(b"x", "application/pdf", "a.pdf")]
        )
        wire = result.to_wire()
        assert wire["isError"] is False
        assert wire["content"][0] == {"type": "text", "text": "ok"}
        resource = wire["content"][1]
        assert resource["type"] == "resource"
        assert resource["mimeType"] == "application/pdf"
        assert set(resource["metadata"]) == {"filename", "mimeType", "sizeBytes", "createdAt"}

    def test_wire_round_trip(self) -> None:
        result = ToolResult.success(
            [TextContent(text="ok"), ResourceContent.from_bytes(b"x", "application/pdf", "a.pdf")]
        )
        restored = ToolResult.model_validate(result.to_wire())
        assert restored == result
        assert restored.resources[0].decode() == b"x"

    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(ContentItem)
        item = adapter.validate_python({"type": "text", "text": "hi"})
        assert isinstance(item, TextContent)
        with pytest.raises(ValidationError):
            adapter.validate_python({"type": "image", "text": "hi"})
