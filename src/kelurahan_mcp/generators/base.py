"""DocumentGenerator — validate → render → compile, one subclass per letter type."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import Field

from kelurahan_mcp.generators.common import format_indonesian_date
from kelurahan_mcp.generators.engine import TypstEngine
from kelurahan_mcp.generators.models import GeneratedDocument, ToolArguments
from kelurahan_mcp.generators.renderer import TemplateStore, TypstTemplate

logger = logging.getLogger(__name__)


class PersonData(ToolArguments):
    """Identity fields shared by every letter."""

    nama: str = ""
    nik: str = ""
    ttl: str = Field(default="", description="Tempat, tanggal lahir")
    jk: str = Field(default="", description="Jenis kelamin (Laki-laki/Perempuan)")
    agama: str = ""
    pekerjaan: str = ""
    alamat: str = ""


class LetterMeta(ToolArguments):
    """Metadata common to every letter."""

    tanggal: str | None = None

    def date_label(self) -> str:
        """The caller's date override, or today's date in Indonesian."""
        if self.tanggal and self.tanggal.strip():
            return self.tanggal.strip()
        return format_indonesian_date()


class DocumentRequest(ToolArguments, ABC):
    """A letter request that knows how to validate itself."""

    @abstractmethod
    def validate_request(self) -> None:
        """Run every field check and raise ``DocumentValidationError`` if any failed."""

    @abstractmethod
    def letter_meta(self) -> LetterMeta: ...

    @abstractmethod
    def subject_name(self) -> str:
        """Name the output filename is derived from."""


RequestT = TypeVar("RequestT", bound=DocumentRequest)


class DocumentGenerator(ABC, Generic[RequestT]):
    """Base class for letter generators.

    The template is read and checked once in ``__init__``; a failure there
    raises :class:`~kelurahan_mcp.generators.errors.TemplateLoadError` and the
    generator is never built.  After construction the template is read-only
    and the instance is safe to share between threads.
    """

    template_file: ClassVar[str]
    filename_prefix: ClassVar[str]
    title: ClassVar[str]
    request_model: ClassVar[type[DocumentRequest]]
    fields: ClassVar[tuple[str, ...]]

    def __init__(self, *, engine: TypstEngine | None = None, store: TemplateStore | None = None) -> None:
        self._engine = engine or TypstEngine()
        self._template = TypstTemplate.load(store or TemplateStore(), self.template_file, self.fields)

    @abstractmethod
    def template_context(self, request: RequestT, date_label: str) -> dict[str, str | bool]:
        """Map *request* onto the template's placeholders."""

    def render_source(self, request: RequestT, date_label: str) -> str:
        return self._template.render(self.template_context(request, date_label))

    def generate(self, request: RequestT) -> GeneratedDocument:
        """Render and compile *request*; the request must already be validated."""
        date_label = request.letter_meta().date_label()
        source = self.render_source(request, date_label)
        document = self._engine.render(
            source,
            source_filename=self.template_file,
            filename_prefix=self.filename_prefix,
            subject_name=request.subject_name(),
            date_label=date_label,
        )
        logger.info("Generated %s (%d bytes)", document.filename, len(document.pdf))
        return document


def prefixed(prefix: str, record: ToolArguments, names: tuple[str, ...]) -> dict[str, str | bool]:
    """Build ``{prefix_name: value}`` entries for *names* taken from *record*."""
    return {f"{prefix}_{name}": getattr(record, name) for name in names}
