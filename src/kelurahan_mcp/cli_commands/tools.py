"""``kelurahan-mcp tools`` — list and invoke tools without a server."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

import click

from kelurahan_mcp.cli_commands._context import build_accessor, build_registry, load_settings
from kelurahan_mcp.cli_commands._output import console, print_tool_result, print_tools_table

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings YAML file.",
)


@click.group()
def tools() -> None:
    """List and invoke tools."""


@tools.command("list")
@_config_option
@click.option("--json", "as_json", is_flag=True, help="Print raw descriptors as JSON.")
def list_cmd(config_path: Path | None, as_json: bool) -> None:
    """List the available tools."""
    registry = build_registry(load_settings(config_path))
    try:
        descriptors = registry.list_tools()
    finally:
        registry.shutdown()

    if as_json:
        click.echo(json.dumps([d.to_wire() for d in descriptors], indent=2, ensure_ascii=False))
        return
    print_tools_table(descriptors)


def _parse_arguments(raw: str) -> Any:
    """Decode ``--arguments``: inline JSON, or ``@path`` to a JSON file."""
    if raw.startswith("@"):
        try:
            raw = Path(raw[1:]).read_text(encoding="utf-8")
        except OSError as exc:
            raise click.BadParameter(str(exc), param_hint="--arguments") from exc
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"invalid JSON: {exc}", param_hint="--arguments") from exc


@tools.command("call")
@click.argument("name")
@_config_option
@click.option(
    "--arguments",
    "-a",
    "raw_arguments",
    default="{}",
    show_default=True,
    help="Tool arguments as JSON, or @FILE to read them from a file.",
)
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory generated files are written to.",
)
@click.option(
    "--postings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML/JSON file of postings for the browse tools.",
)
def call_cmd(
    name: str,
    config_path: Path | None,
    raw_arguments: str,
    output_dir: Path,
    postings: Path | None,
) -> None:
    """Invoke tool NAME once and print its result.

    Exits with status 1 when the tool reports an error.
    """
    arguments = _parse_arguments(raw_arguments)
    settings = load_settings(config_path)
    if postings is not None:
        settings.postings_file = postings

    registry = build_registry(settings)
    accessor = build_accessor(settings)
    try:
        result = asyncio.run(registry.call_async(name, arguments, accessor))
    finally:
        registry.shutdown()

    print_tool_result(result, output_dir)
    if result.is_error:
        sys.exit(1)
