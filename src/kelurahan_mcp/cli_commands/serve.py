"""``kelurahan-mcp serve`` — run the JSON-RPC server over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from kelurahan_mcp.cli_commands._context import build_accessor, build_registry, load_settings
from kelurahan_mcp.cli_commands._output import console


@click.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings YAML file.",
)
@click.option("--host", default=None, help="Override http.host.")
@click.option("--port", type=int, default=None, help="Override http.port.")
@click.option(
    "--postings",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML/JSON file of postings for the browse tools.",
)
@click.option("--telemetry", is_flag=True, help="Enable telemetry.")
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    postings: Path | None,
    telemetry: bool,
) -> None:
    """Serve the tools at POST <rpc_path> until interrupted."""
    import uvicorn

    from kelurahan_mcp.protocol import McpService
    from kelurahan_mcp.transport import create_app
    from kelurahan_mcp.utils.telemetry import configure_telemetry

    settings = load_settings(config_path)
    if host is not None:
        settings.http.host = host
    if port is not None:
        settings.http.port = port
    if postings is not None:
        settings.postings_file = postings
    if telemetry:
        settings.telemetry.enabled = True

    if settings.telemetry.enabled:
        configure_telemetry(
            export_to_console=settings.telemetry.console,
            otlp_endpoint=settings.telemetry.otlp_endpoint,
        )

    registry = build_registry(settings)
    service = McpService(registry, build_accessor(settings))
    app = create_app(service, settings.http.rpc_path)

    console.print(
        f"[green]Serving[/green] {len(registry.list_tools())} tools at "
        f"http://{settings.http.host}:{settings.http.port}{settings.http.rpc_path}"
    )
    uvicorn.run(
        app,
        host=settings.http.host,
        port=settings.http.port,
        log_level=logging.getLevelName(logging.getLogger().getEffectiveLevel()).lower(),
    )
