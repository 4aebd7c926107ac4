"""MIME type detection by filename extension or magic bytes."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePath


class FileExtension(Enum):
    """File types the server knows how to label."""

    PDF = "application/pdf"
    PNG = "image/png"
    JPEG = "image/jpeg"
    JSON = "application/json"
    CSV = "text/csv"
    TXT = "text/plain"
    HTML = "text/html"
    XML = "application/xml"
    UNKNOWN = "application/octet-stream"

    @property
    def mime_type(self) -> str:
        return self.value

    @classmethod
    def from_suffix(cls, suffix: str) -> FileExtension:
        return _SUFFIXES.get(suffix.lower().lstrip("."), cls.UNKNOWN)

    @classmethod
    def from_filename(cls, filename: str) -> FileExtension:
        return cls.from_suffix(PurePath(filename).suffix)


_SUFFIXES = {
    "pdf": FileExtension.PDF,
    "png": FileExtension.PNG,
    "jpg": FileExtension.JPEG,
    "jpeg": FileExtension.JPEG,
    "json": FileExtension.JSON,
    "csv": FileExtension.CSV,
    "txt": FileExtension.TXT,
    "htm": FileExtension.HTML,
    "html": FileExtension.HTML,
    "xml": FileExtension.XML,
}

KNOWN_MIME_TYPES = frozenset(ext.mime_type for ext in FileExtension)


def detect_mime_type(filename: str) -> str:
    """MIME type for *filename*'s extension (``application/octet-stream`` if unknown)."""
    return FileExtension.from_filename(filename).mime_type


def detect_mime_from_bytes(data: bytes) -> str | None:
    """Guess a MIME type from leading magic bytes, or ``None``."""
    if len(data) < 4:
        return None
    if data.startswith(b"%PDF"):
        return "application/pdf"
    if data.startswith(b"\x89PNG"):
        return "image/png"
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if data.startswith((b"{", b"[")):
        return "application/json"
    if data.startswith((b"<?xml", b"<!DOCTYPE", b"<html")):
        return "text/html"
    return None
