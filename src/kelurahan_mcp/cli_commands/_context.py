"""Settings loading and object wiring shared by the subcommands."""

from __future__ import annotations

import sys
from pathlib import Path

from kelurahan_mcp.cli_commands._output import console
from kelurahan_mcp.generators import TemplateStore
from kelurahan_mcp.settings import ServerSettings, SettingsLoader
from kelurahan_mcp.tools import DataAccessError, InMemoryPostingAccessor, ToolRegistry


def load_settings(path: Path | None) -> ServerSettings:
    """Load *path*, or return defaults when no file is given.  Exits on error."""
    if path is None:
        return ServerSettings()
    try:
        return SettingsLoader(path).load()
    except Exception as exc:
        console.print(f"[red]Settings error:[/red] {exc}")
        sys.exit(1)


def build_registry(settings: ServerSettings) -> ToolRegistry:
    registry = ToolRegistry(config=settings.compiler, store=TemplateStore(settings.templates_dir))
    for name, error in registry.unavailable.items():
        console.print(f"[yellow]Tool {name} unavailable:[/yellow] {error}")
    return registry


def build_accessor(settings: ServerSettings) -> InMemoryPostingAccessor:
    """Postings from ``settings.postings_file``, or an empty accessor.  Exits on error."""
    if settings.postings_file is None:
        return InMemoryPostingAccessor()
    try:
        return InMemoryPostingAccessor.from_file(settings.postings_file)
    except DataAccessError as exc:
        console.print(f"[red]Postings error:[/red] {exc}")
        sys.exit(1)
