"""Generators — turn validated letter requests into PDFs via Typst."""

from kelurahan_mcp.generators.base import DocumentGenerator, DocumentRequest
from kelurahan_mcp.generators.engine import TypstEngine
from kelurahan_mcp.generators.errors import (
    ArtifactReadError,
    CompilerExitError,
    CompilerLaunchError,
    CompilerTimeoutError,
    GeneratorError,
    ScratchDirError,
    SourceWriteError,
    TemplateLoadError,
)
from kelurahan_mcp.generators.models import CompilerConfig, GeneratedDocument
from kelurahan_mcp.generators.renderer import TemplateStore, TypstTemplate
from kelurahan_mcp.generators.surat_kpr import SuratKprGenerator, SuratKprRequest
from kelurahan_mcp.generators.surat_nib_npwp import SuratNibNpwpGenerator, SuratNibNpwpRequest
from kelurahan_mcp.generators.surat_tidak_mampu import (
    SuratTidakMampuGenerator,
    SuratTidakMampuRequest,
)
from kelurahan_mcp.generators.validation import DocumentValidationError, ValidationErrors

__all__ = [
    "ArtifactReadError",
    "CompilerConfig",
    "CompilerExitError",
    "CompilerLaunchError",
    "CompilerTimeoutError",
    "DocumentGenerator",
    "DocumentRequest",
    "DocumentValidationError",
    "GeneratedDocument",
    "GeneratorError",
    "ScratchDirError",
    "SourceWriteError",
    "SuratKprGenerator",
    "SuratKprRequest",
    "SuratNibNpwpGenerator",
    "SuratNibNpwpRequest",
    "SuratTidakMampuGenerator",
    "SuratTidakMampuRequest",
    "TemplateLoadError",
    "TemplateStore",
    "TypstEngine",
    "TypstTemplate",
    "ValidationErrors",
]
