"""Tests for ContentBuilder."""

from __future__ import annotations

from kelurahan_mcp.content import ContentBuilder, ResourceContent, TextContent


class TestContentBuilder:
    def test_text_then_pdf(self) -> None:
        result = ContentBuilder().text("Surat berhasil dibuat.").pdf(b"%PDF", "a.pdf").build()
        assert not result.is_error
        assert isinstance(result.content[0], TextContent)
        assert isinstance(result.content[1], ResourceContent)
        assert result.content[1].mime_type == "application/pdf"

    def test_typed_helpers(self) -> None:
        result = (
            ContentBuilder()
            .png(b"\x89PNG", "a.png")
            .jpeg(b"\xff\xd8\xff\xe0", "a.jpg")
            .json_file(b"{}", "a.json")
            .csv(b"a,b", "a.csv")
            .build()
        )
        assert [r.mime_type for r in result.resources] == [
            "image/png",
            "image/jpeg",
            "application/json",
            "text/csv",
        ]

    def test_error_flag(self) -> None:
        result = ContentBuilder().text("gagal").error().build()
        assert result.is_error
        assert result.text == "gagal"

    def test_build_is_a_snapshot(self) -> None:
        builder = ContentBuilder().text("a")
        first = builder.build()
        builder.text("b")
        assert len(first.content) == 1
