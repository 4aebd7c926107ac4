"""Posting data accessor — the read-only collaborator behind the browse tools.

The registry only depends on the :class:`PostingAccessor` protocol.  The
portal backend supplies a database-backed implementation;
:class:`InMemoryPostingAccessor` serves fixed rows (from a YAML/JSON file
or a list) so the server runs standalone.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Protocol, runtime_checkable
from uuid import UUID

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class DataAccessError(Exception):
    """A data-layer read failed."""


class PostingRow(BaseModel):
    """One posting as stored by the portal."""

    id: UUID
    title: str
    category: str
    date: date
    excerpt: str = ""
    image_urls: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@runtime_checkable
class PostingAccessor(Protocol):
    """Read-only access to postings.  All methods may raise on data-layer failure."""

    async def list_filtered(
        self, category: str | None, sort_latest: bool, limit: int, offset: int
    ) -> list[PostingRow]: ...

    async def count_filtered(self, category: str | None) -> int: ...

    async def get_by_id(self, posting_id: UUID) -> PostingRow | None: ...

    async def list_distinct_categories(self) -> list[str]: ...


class InMemoryPostingAccessor:
    """Serves a fixed list of rows.  Satisfies :class:`PostingAccessor`."""

    def __init__(self, rows: list[PostingRow] | None = None) -> None:
        self._rows = list(rows or [])

    @classmethod
    def from_file(cls, path: Path) -> InMemoryPostingAccessor:
        """Load rows from a YAML (or JSON) file holding a list of postings.

        Raises:
            DataAccessError: If the file cannot be read or a row is malformed.
        """
        try:
            raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise DataAccessError(f"Cannot load postings from {path}: {exc}") from exc

        if raw is None:
            raw = []
        if not isinstance(raw, list):
            raise DataAccessError(f"{path} must contain a list of postings")

        try:
            rows = [PostingRow.model_validate(item) for item in raw]
        except ValidationError as exc:
            raise DataAccessError(f"Invalid posting in {path}: {exc}") from exc

        logger.info("Loaded %d postings from %s", len(rows), path)
        return cls(rows)

    def _matching(self, category: str | None) -> list[PostingRow]:
        if category is None:
            return list(self._rows)
        return [row for row in self._rows if row.category == category]

    async def list_filtered(
        self, category: str | None, sort_latest: bool, limit: int, offset: int
    ) -> list[PostingRow]:
        rows = sorted(
            self._matching(category),
            key=lambda row: (row.date, row.created_at.timestamp() if row.created_at else 0.0),
            reverse=sort_latest,
        )
        return rows[offset : offset + limit]

    async def count_filtered(self, category: str | None) -> int:
        return len(self._matching(category))

    async def get_by_id(self, posting_id: UUID) -> PostingRow | None:
        return next((row for row in self._rows if row.id == posting_id), None)

    async def list_distinct_categories(self) -> list[str]:
        return sorted({row.category for row in self._rows})
