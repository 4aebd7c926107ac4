"""Server settings and the YAML loader behind ``kelurahan-mcp serve``.

Every section has defaults, so a settings file is optional::

    http:
      host: 0.0.0.0
      port: 8080
    compiler:
      binary: ${TYPST_BIN}
      timeout: 30
    postings_file: ./postings.yaml
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from kelurahan_mcp.generators.models import CompilerConfig
from kelurahan_mcp.transport.http import DEFAULT_RPC_PATH


class SettingsError(Exception):
    """Raised when a settings file cannot be read, parsed or validated."""


class HttpSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8080, ge=1, le=65535)
    rpc_path: str = DEFAULT_RPC_PATH


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    console: bool = False
    otlp_endpoint: str | None = None


class ServerSettings(BaseModel):
    """Top-level server configuration."""

    http: HttpSettings = Field(default_factory=HttpSettings)
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)
    templates_dir: Path | None = None
    postings_file: Path | None = None


class SettingsLoader:
    """Load and validate a settings YAML file into :class:`ServerSettings`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ServerSettings:
        """Read YAML, interpolate env vars, and validate.

        ``${VAR}`` and ``$VAR`` are expanded with :func:`os.path.expandvars`
        before parsing.  Relative paths are resolved against the file's
        directory.

        Raises:
            SettingsError: On read, YAML or validation failures.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {self._path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(os.path.expandvars(raw))
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise SettingsError("Settings YAML must be a mapping")

        try:
            settings = ServerSettings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc

        return self._resolve_paths(settings)

    def _resolve_paths(self, settings: ServerSettings) -> ServerSettings:
        base = self._path.parent
        updates: dict[str, Path] = {}
        for name in ("templates_dir", "postings_file"):
            value: Path | None = getattr(settings, name)
            if value is not None and not value.is_absolute():
                updates[name] = base / value
        return settings.model_copy(update=updates) if updates else settings
