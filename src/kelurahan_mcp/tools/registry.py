"""ToolRegistry — the fixed catalogue of tools and the dispatch into them.

Document tools are synchronous (they block on the Typst compiler) and are
reachable through :meth:`ToolRegistry.call`.  The async entry point
:meth:`ToolRegistry.call_async` offloads them to a dedicated thread pool and
awaits the posting accessor for the browse tools.

Every outcome, including argument, validation, compiler and data-layer
failures, comes back as a :class:`~kelurahan_mcp.content.ToolResult`.

Usage::

    registry = ToolRegistry(config=CompilerConfig(timeout=30))
    registry.list_tools()
    result = await registry.call_async("list_categories", {}, accessor)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from kelurahan_mcp.content import ContentBuilder, ToolResult
from kelurahan_mcp.generators import (
    CompilerConfig,
    DocumentGenerator,
    DocumentValidationError,
    GeneratorError,
    SuratKprGenerator,
    SuratNibNpwpGenerator,
    SuratTidakMampuGenerator,
    TemplateLoadError,
    TemplateStore,
    TypstEngine,
)
from kelurahan_mcp.tools import browse_posts, surat_kpr, surat_nib_npwp, surat_tidak_mampu
from kelurahan_mcp.tools.data import PostingAccessor
from kelurahan_mcp.tools.models import InvalidArgumentsError, ToolDescriptor, parse_arguments
from kelurahan_mcp.utils.telemetry import (
    ATTR_TOOL_IS_ERROR,
    ATTR_TOOL_KIND,
    ATTR_TOOL_NAME,
    get_tracer,
)

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

BrowseHandler = Callable[[Any, PostingAccessor], Awaitable[ToolResult]]

DOCUMENT_TOOLS: dict[str, tuple[type[DocumentGenerator[Any]], Callable[[], ToolDescriptor]]] = {
    surat_tidak_mampu.TOOL_NAME: (SuratTidakMampuGenerator, surat_tidak_mampu.descriptor),
    surat_kpr.TOOL_NAME: (SuratKprGenerator, surat_kpr.descriptor),
    surat_nib_npwp.TOOL_NAME: (SuratNibNpwpGenerator, surat_nib_npwp.descriptor),
}

BROWSE_TOOLS: dict[str, tuple[BrowseHandler, Callable[[], ToolDescriptor]]] = {
    browse_posts.LIST_POSTINGS_TOOL: (
        browse_posts.list_postings,
        browse_posts.list_postings_descriptor,
    ),
    browse_posts.GET_POSTING_DETAIL_TOOL: (
        browse_posts.get_posting_detail,
        browse_posts.get_posting_detail_descriptor,
    ),
    browse_posts.LIST_CATEGORIES_TOOL: (
        browse_posts.list_categories,
        browse_posts.list_categories_descriptor,
    ),
}

TOOL_NAMES: tuple[str, ...] = (*DOCUMENT_TOOLS, *BROWSE_TOOLS)


class ToolRegistry:
    """Name-keyed dispatch over the three document tools and three browse tools.

    Generators are built once here.  A generator whose template fails to
    load is left out of :meth:`list_tools` and answers every call with its
    load error; the remaining tools are unaffected.
    """

    def __init__(
        self,
        *,
        config: CompilerConfig | None = None,
        engine: TypstEngine | None = None,
        store: TemplateStore | None = None,
    ) -> None:
        self._engine = engine or TypstEngine(config)
        self._config = config or self._engine.config
        self._generators: dict[str, DocumentGenerator[Any]] = {}
        self._load_errors: dict[str, str] = {}

        for name, (generator_cls, _) in DOCUMENT_TOOLS.items():
            try:
                self._generators[name] = generator_cls(engine=self._engine, store=store)
            except TemplateLoadError as exc:
                logger.error("Tool %s unavailable: %s", name, exc)
                self._load_errors[name] = str(exc)

        descriptors = [factory() for _, factory in DOCUMENT_TOOLS.values()]
        descriptors += [factory() for _, factory in BROWSE_TOOLS.values()]
        self._descriptors = tuple(d for d in descriptors if d.name not in self._load_errors)
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.workers, thread_name_prefix="kelurahan-typst"
        )

    @property
    def unavailable(self) -> dict[str, str]:
        """Tool names whose template failed to load, mapped to the load error."""
        return dict(self._load_errors)

    def list_tools(self) -> list[ToolDescriptor]:
        """Descriptors of every available tool, in catalogue order."""
        return list(self._descriptors)

    def call(self, name: str, arguments: Any = None) -> ToolResult:
        """Invoke a document tool synchronously.

        Browse tools need a posting accessor and are only reachable through
        :meth:`call_async`.
        """
        with tracer.start_as_current_span("tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            if name in DOCUMENT_TOOLS:
                span.set_attribute(ATTR_TOOL_KIND, "document")
                result = self._call_document(name, arguments)
            elif name in BROWSE_TOOLS:
                span.set_attribute(ATTR_TOOL_KIND, "browse")
                result = self._accessor_required(name)
            else:
                span.set_attribute(ATTR_TOOL_KIND, "unknown")
                result = self._unknown_tool(name)
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
            return result

    async def call_async(
        self,
        name: str,
        arguments: Any = None,
        accessor: PostingAccessor | None = None,
    ) -> ToolResult:
        """Invoke any tool without blocking the event loop."""
        if name not in BROWSE_TOOLS:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(self._executor, self.call, name, arguments)

        with tracer.start_as_current_span("tool.call") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            span.set_attribute(ATTR_TOOL_KIND, "browse")
            if accessor is None:
                result = self._accessor_required(name)
            else:
                handler, _ = BROWSE_TOOLS[name]
                result = await handler(arguments, accessor)
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
            return result

    def shutdown(self) -> None:
        """Wait for in-flight compilations and release the thread pool."""
        self._executor.shutdown(wait=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _call_document(self, name: str, arguments: Any) -> ToolResult:
        if name in self._load_errors:
            return ToolResult.error(f"Gagal membuat surat: {self._load_errors[name]}")

        generator = self._generators[name]
        try:
            request = parse_arguments(generator.request_model, arguments, tool=name)
        except InvalidArgumentsError as exc:
            return ToolResult.error(str(exc))

        try:
            request.validate_request()
        except DocumentValidationError as exc:
            logger.info("Rejected %s call: %d validation error(s)", name, len(exc.errors))
            return ToolResult.error(str(exc))

        try:
            document = generator.generate(request)
        except GeneratorError as exc:
            logger.error("Generating %s failed: %s", name, exc)
            return ToolResult.error(f"Gagal membuat surat: {exc}")
        except Exception as exc:
            logger.exception("Unexpected failure generating %s", name)
            return ToolResult.error(f"Gagal membuat surat: {exc}")

        return (
            ContentBuilder()
            .text(
                f"{generator.title} berhasil dibuat.\n"
                f"File: {document.filename}\n"
                f"Tanggal: {document.date_label}"
            )
            .pdf(document.pdf, document.filename)
            .build()
        )

    @staticmethod
    def _accessor_required(name: str) -> ToolResult:
        return ToolResult.error(
            f"Tool '{name}' membutuhkan akses data postingan yang tidak tersedia pada pemanggilan ini."
        )

    @staticmethod
    def _unknown_tool(name: str) -> ToolResult:
        return ToolResult.error(
            f"Tool '{name}' tidak tersedia. Tools yang tersedia: {', '.join(TOOL_NAMES)}"
        )
