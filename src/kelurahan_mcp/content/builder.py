"""Fluent builder for :class:`ToolResult`."""

from __future__ import annotations

from kelurahan_mcp.content.models import ResourceContent, TextContent, ToolResult


class ContentBuilder:
    """Accumulate content items, then :meth:`build` a :class:`ToolResult`.

    Usage::

        result = (
            ContentBuilder()
            .text("Surat berhasil dibuat.")
            .pdf(pdf_bytes, "sktm-budi.pdf")
            .build()
        )
    """

    def __init__(self) -> None:
        self._items: list[TextContent | ResourceContent] = []
        self._is_error = False

    def text(self, message: str) -> ContentBuilder:
        self._items.append(TextContent(text=message))
        return self

    def file(self, data: bytes, mime_type: str, filename: str) -> ContentBuilder:
        self._items.append(ResourceContent.from_bytes(data, mime_type, filename))
        return self

    def pdf(self, data: bytes, filename: str) -> ContentBuilder:
        return self.file(data, "application/pdf", filename)

    def png(self, data: bytes, filename: str) -> ContentBuilder:
        return self.file(data, "image/png", filename)

    def jpeg(self, data: bytes, filename: str) -> ContentBuilder:
        return self.file(data, "image/jpeg", filename)

    def json_file(self, data: bytes, filename: str) -> ContentBuilder:
        return self.file(data, "application/json", filename)

    def csv(self, data: bytes, filename: str) -> ContentBuilder:
        return self.file(data, "text/csv", filename)

    def error(self) -> ContentBuilder:
        self._is_error = True
        return self

    def build(self) -> ToolResult:
        return ToolResult(content=list(self._items), is_error=self._is_error)
