"""Tool descriptor model and argument parsing shared by every tool."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from kelurahan_mcp.generators.models import ToolArguments

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound=ToolArguments)


class ToolDescriptor(BaseModel):
    """Name, description and JSON input schema of one tool."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: str
    input_schema: dict[str, Any] = Field(alias="inputSchema")

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class InvalidArgumentsError(ValueError):
    """Tool arguments could not be parsed into the tool's request model."""


def describe_validation_error(exc: ValidationError) -> str:
    """Compact one-line rendering of a pydantic error: ``loc: msg; loc: msg``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def parse_arguments(model: type[ArgsT], arguments: Any, *, tool: str) -> ArgsT:
    """Parse *arguments* (``None`` means no arguments) into *model*.

    Unrecognised keys are ignored and logged as a warning.

    Raises:
        InvalidArgumentsError: With the caller-facing "Argumen tidak valid" text.
    """
    try:
        request = model.model_validate({} if arguments is None else arguments)
    except ValidationError as exc:
        raise InvalidArgumentsError(f"Argumen tidak valid: {describe_validation_error(exc)}") from exc

    unknown = request.unknown_fields()
    if unknown:
        logger.warning("Ignoring unknown argument(s) for %s: %s", tool, ", ".join(unknown))
    return request
