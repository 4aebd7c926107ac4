"""Shared CLI output formatters."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.table import Table

from kelurahan_mcp.content import ToolResult  # noqa: TC001
from kelurahan_mcp.tools import ToolDescriptor  # noqa: TC001

console = Console()


def print_tools_table(descriptors: list[ToolDescriptor]) -> None:
    """Pretty-print tool descriptors as a table."""
    table = Table(title="Available Tools")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Parameters")
    table.add_column("Description")

    for descriptor in descriptors:
        properties = descriptor.input_schema.get("properties", {})
        table.add_row(
            descriptor.name,
            ", ".join(properties) or "-",
            _truncate(descriptor.description),
        )

    console.print(table)


def print_tool_result(result: ToolResult, output_dir: Path) -> list[Path]:
    """Print text items and write resource items under *output_dir*.

    Returns the paths written.
    """
    style = "red" if result.is_error else "green"
    for line in result.text.splitlines():
        console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)

    written: list[Path] = []
    resources = result.resources
    if resources:
        output_dir.mkdir(parents=True, exist_ok=True)
    for resource in resources:
        path = output_dir / Path(resource.filename).name
        path.write_bytes(resource.decode())
        console.print(f"[bold]Saved[/bold] {path} ({resource.mime_type})")
        written.append(path)
    return written


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
