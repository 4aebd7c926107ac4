"""Browse tools: list postings, read one posting, list categories.

Each handler parses and validates its arguments, asks the
:class:`~kelurahan_mcp.tools.data.PostingAccessor` for rows, and answers with
a single pretty-printed JSON text item.  Failures become error results; no
exception leaves these functions.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from kelurahan_mcp.content import ToolResult
from kelurahan_mcp.generators.models import ToolArguments
from kelurahan_mcp.tools.data import PostingAccessor, PostingRow
from kelurahan_mcp.tools.models import ToolDescriptor, parse_arguments

logger = logging.getLogger(__name__)

LIST_POSTINGS_TOOL = "list_postings"
GET_POSTING_DETAIL_TOOL = "get_posting_detail"
LIST_CATEGORIES_TOOL = "list_categories"

DEFAULT_LIMIT = 10
MAX_LIMIT = 50
SORT_ORDERS = ("latest", "oldest")


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


def list_postings_descriptor() -> ToolDescriptor:
    return ToolDescriptor(
        name=LIST_POSTINGS_TOOL,
        description=(
            "Melihat daftar postingan, berita, dan informasi terbaru di Kelurahan Cakung Barat. "
            "Gunakan tool ini untuk mendapatkan update terkini mengenai kegiatan dan pengumuman "
            "kelurahan. Hasil bisa difilter berdasarkan kategori dan diurutkan berdasarkan tanggal. "
            "Gunakan tool ini untuk: "
            "(1) Melihat berita terbaru, "
            "(2) Mencari informasi berdasarkan kategori tertentu, "
            "(3) Melihat daftar posting dengan pagination."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": (
                        "Filter berdasarkan kategori (opsional). "
                        "Gunakan list_categories untuk melihat kategori yang tersedia."
                    ),
                },
                "sort_by": {
                    "type": "string",
                    "enum": list(SORT_ORDERS),
                    "description": "Urutan hasil (default: latest)",
                },
                "limit": {
                    "type": "integer",
                    "description": f"Jumlah maksimal hasil (default: {DEFAULT_LIMIT}, max: {MAX_LIMIT})",
                },
                "offset": {
                    "type": "integer",
                    "description": "Offset untuk pagination (default: 0)",
                },
            },
        },
    )


def get_posting_detail_descriptor() -> ToolDescriptor:
    return ToolDescriptor(
        name=GET_POSTING_DETAIL_TOOL,
        description=(
            "Melihat detail lengkap satu postingan atau berita berdasarkan ID. "
            "Gunakan tool ini untuk membaca isi lengkap informasi terbaru Kelurahan Cakung Barat "
            "setelah menemukan ID posting dari list_postings."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "ID postingan (format UUID)"},
            },
            "required": ["id"],
        },
    )


def list_categories_descriptor() -> ToolDescriptor:
    return ToolDescriptor(
        name=LIST_CATEGORIES_TOOL,
        description=(
            "Melihat daftar semua kategori postingan yang tersedia. "
            "Gunakan tool ini untuk mengetahui kategori apa saja yang bisa "
            "digunakan sebagai filter di list_postings."
        ),
        input_schema={"type": "object", "properties": {}},
    )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class ListPostingsRequest(ToolArguments):
    category: str | None = None
    sort_by: str = "latest"
    limit: int = DEFAULT_LIMIT
    offset: int = 0

    def validate_request(self) -> None:
        """Raise :class:`ValueError` with the first failed bound."""
        if self.limit < 1:
            raise ValueError("Limit harus lebih dari 0")
        if self.limit > MAX_LIMIT:
            raise ValueError(f"Limit maksimal adalah {MAX_LIMIT}")
        if self.offset < 0:
            raise ValueError("Offset tidak boleh negatif")
        if self.sort_by not in SORT_ORDERS:
            raise ValueError("sort_by harus 'latest' atau 'oldest'")

    @property
    def sort_latest(self) -> bool:
        return self.sort_by == "latest"


class GetPostingDetailRequest(ToolArguments):
    id: str

    def posting_id(self) -> UUID:
        """Parse :attr:`id`, raising :class:`ValueError` with the caller-facing text."""
        if not self.id.strip():
            raise ValueError("ID postingan tidak boleh kosong")
        try:
            return UUID(self.id.strip())
        except ValueError:
            raise ValueError(f"ID '{self.id}' bukan format UUID yang valid") from None


class ListCategoriesRequest(ToolArguments):
    pass


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class PostListItem(BaseModel):
    id: str
    title: str
    category: str
    date: str
    excerpt: str
    image_url: str | None

    @classmethod
    def from_row(cls, row: PostingRow) -> PostListItem:
        return cls(
            id=str(row.id),
            title=row.title,
            category=row.category,
            date=row.date.isoformat(),
            excerpt=row.excerpt,
            image_url=row.image_urls[0] if row.image_urls else None,
        )


class ListPostingsResponse(BaseModel):
    posts: list[PostListItem]
    total: int
    limit: int
    offset: int
    has_more: bool


class PostDetailResponse(BaseModel):
    id: str
    title: str
    category: str
    date: str
    excerpt: str
    created_at: str | None
    updated_at: str | None
    image_urls: list[str]

    @classmethod
    def from_row(cls, row: PostingRow) -> PostDetailResponse:
        return cls(
            id=str(row.id),
            title=row.title,
            category=row.category,
            date=row.date.isoformat(),
            excerpt=row.excerpt,
            created_at=row.created_at.isoformat() if row.created_at else None,
            updated_at=row.updated_at.isoformat() if row.updated_at else None,
            image_urls=list(row.image_urls),
        )


class ListCategoriesResponse(BaseModel):
    categories: list[str]
    count: int


def _json_result(response: BaseModel) -> ToolResult:
    return ToolResult.success_text(response.model_dump_json(indent=2))


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def list_postings(arguments: Any, accessor: PostingAccessor) -> ToolResult:
    try:
        request = parse_arguments(ListPostingsRequest, arguments, tool=LIST_POSTINGS_TOOL)
        request.validate_request()
    except ValueError as exc:
        return ToolResult.error(str(exc))

    try:
        rows = await accessor.list_filtered(
            request.category, request.sort_latest, request.limit, request.offset
        )
    except Exception as exc:
        logger.warning("Listing postings failed: %s", exc)
        return ToolResult.error(f"Gagal mengambil data postingan: {exc}")

    try:
        total = await accessor.count_filtered(request.category)
    except Exception as exc:
        logger.warning("Counting postings failed: %s", exc)
        return ToolResult.error(f"Gagal menghitung total postingan: {exc}")

    return _json_result(
        ListPostingsResponse(
            posts=[PostListItem.from_row(row) for row in rows],
            total=total,
            limit=request.limit,
            offset=request.offset,
            has_more=request.offset + request.limit < total,
        )
    )


async def get_posting_detail(arguments: Any, accessor: PostingAccessor) -> ToolResult:
    try:
        request = parse_arguments(GetPostingDetailRequest, arguments, tool=GET_POSTING_DETAIL_TOOL)
        posting_id = request.posting_id()
    except ValueError as exc:
        return ToolResult.error(str(exc))

    try:
        row = await accessor.get_by_id(posting_id)
    except Exception as exc:
        logger.warning("Fetching posting %s failed: %s", posting_id, exc)
        return ToolResult.error(f"Gagal mengambil data postingan: {exc}")

    if row is None:
        return ToolResult.error(f"Postingan dengan ID '{posting_id}' tidak ditemukan")
    return _json_result(PostDetailResponse.from_row(row))


async def list_categories(arguments: Any, accessor: PostingAccessor) -> ToolResult:
    try:
        parse_arguments(ListCategoriesRequest, arguments, tool=LIST_CATEGORIES_TOOL)
    except ValueError as exc:
        return ToolResult.error(str(exc))

    try:
        categories = await accessor.list_distinct_categories()
    except Exception as exc:
        logger.warning("Listing categories failed: %s", exc)
        return ToolResult.error(f"Gagal mengambil daftar kategori: {exc}")

    return _json_result(ListCategoriesResponse(categories=categories, count=len(categories)))
