"""Data models for the document generation subsystem."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CompilerConfig(BaseModel):
    """Configuration for the external Typst compiler."""

    binary: str = Field(default="typst", description="Compiler executable name or path.")
    timeout: float | None = Field(
        default=None, description="Kill the compiler after this many seconds (unbounded when unset)."
    )
    scratch_dir: Path | None = Field(
        default=None, description="Parent directory for per-call temporary directories."
    )
    workers: int = Field(default=4, ge=1, description="Threads reserved for compilation work.")
    env: dict[str, str] = Field(default_factory=dict, description="Extra environment variables.")


class GeneratedDocument(BaseModel):
    """A compiled letter ready to hand back to the caller."""

    model_config = ConfigDict(frozen=True)

    filename: str
    pdf: bytes
    date_label: str


class ToolArguments(BaseModel):
    """Base for tool argument records.

    Unknown keys are accepted and kept aside so the registry can warn about
    them; numbers are accepted where strings are expected.
    """

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    def unknown_fields(self, prefix: str = "") -> list[str]:
        """Dotted paths of every key that did not match a declared field."""
        found = [f"{prefix}{key}" for key in (self.model_extra or {})]
        for name in type(self).model_fields:
            value: Any = getattr(self, name)
            if isinstance(value, ToolArguments):
                found.extend(value.unknown_fields(f"{prefix}{name}."))
        return found
