"""McpService — validates the JSON-RPC envelope and routes by method."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from kelurahan_mcp import __version__
from kelurahan_mcp.protocol.models import (
    JSONRPC_VERSION,
    PROMPT_NOT_FOUND,
    RESOURCE_NOT_FOUND,
    CallToolParams,
    InitializeParams,
    PromptGetParams,
    ResourceReadParams,
    RpcRequest,
    RpcResponse,
)
from kelurahan_mcp.tools.data import PostingAccessor
from kelurahan_mcp.tools.models import describe_validation_error
from kelurahan_mcp.tools.registry import ToolRegistry
from kelurahan_mcp.utils.telemetry import ATTR_RPC_METHOD, get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "kelurahan-mcp"
SERVER_TITLE = "Cakung Barat MCP Server"

ParamsT = TypeVar("ParamsT", bound=BaseModel)
Handler = Callable[[RpcRequest], Awaitable[RpcResponse]]


class _InvalidParams(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _parse_params(model: type[ParamsT], params: Any) -> ParamsT:
    try:
        return model.model_validate(params)
    except ValidationError as exc:
        raise _InvalidParams(describe_validation_error(exc)) from exc


class McpService:
    """Stateless request handler.

    :meth:`handle` returns ``None`` only for ``notifications/*`` methods.
    Whether a response to some other request without an ``id`` is delivered
    is the transport's decision.
    """

    def __init__(self, registry: ToolRegistry, accessor: PostingAccessor | None = None) -> None:
        self._registry = registry
        self._accessor = accessor
        self._handlers: dict[str, Handler] = {
            "initialize": self._initialize,
            "tools/list": self._tools_list,
            "tools/call": self._tools_call,
            "resources/list": self._resources_list,
            "resources/read": self._resources_read,
            "resources/templates/list": self._resource_templates_list,
            "prompts/list": self._prompts_list,
            "prompts/get": self._prompts_get,
            "ping": self._ping,
        }

    @property
    def registry(self) -> ToolRegistry:
        return self._registry

    async def handle(self, request: RpcRequest) -> RpcResponse | None:
        with tracer.start_as_current_span("rpc.handle") as span:
            span.set_attribute(ATTR_RPC_METHOD, request.method)

            if request.jsonrpc != JSONRPC_VERSION:
                logger.warning("Unsupported jsonrpc version: %r", request.jsonrpc)
                return RpcResponse.invalid_request(
                    request.id, f"Unsupported jsonrpc version (expected {JSONRPC_VERSION})"
                )

            if request.method.startswith("notifications/"):
                logger.info("Client notification: %s", request.method)
                return None

            handler = self._handlers.get(request.method)
            if handler is None:
                logger.info("Unknown method: %s", request.method)
                return RpcResponse.method_not_found(request.id, request.method)

            try:
                return await handler(request)
            except _InvalidParams as exc:
                return RpcResponse.invalid_params(request.id, exc.message)

    # ------------------------------------------------------------------
    # Methods
    # ------------------------------------------------------------------

    async def _initialize(self, request: RpcRequest) -> RpcResponse:
        try:
            params = InitializeParams.model_validate(request.params)
        except ValidationError as exc:
            logger.warning("Ignoring malformed initialize params: %s", describe_validation_error(exc))
        else:
            logger.info(
                "Client requested initialization: %s v%s (protocol %s)",
                params.client_info.name,
                params.client_info.version or "unknown",
                params.protocol_version,
            )

        return RpcResponse.success(
            request.id,
            {
                "protocolVersion": PROTOCOL_VERSION,
                "serverInfo": {"name": SERVER_NAME, "version": __version__, "title": SERVER_TITLE},
                "capabilities": {
                    "tools": {"listChanged": False},
                    "resources": {},
                    "prompts": {},
                },
            },
        )

    async def _tools_list(self, request: RpcRequest) -> RpcResponse:
        tools = [descriptor.to_wire() for descriptor in self._registry.list_tools()]
        return RpcResponse.success(request.id, {"tools": tools})

    async def _tools_call(self, request: RpcRequest) -> RpcResponse:
        params = _parse_params(CallToolParams, request.params)
        result = await self._registry.call_async(params.name, params.arguments, self._accessor)
        return RpcResponse.success(request.id, result.to_wire())

    async def _resources_list(self, request: RpcRequest) -> RpcResponse:
        return RpcResponse.success(request.id, {"resources": []})

    async def _resources_read(self, request: RpcRequest) -> RpcResponse:
        params = _parse_params(ResourceReadParams, request.params)
        return RpcResponse.failure(
            request.id, RESOURCE_NOT_FOUND, f"Resource '{params.uri}' tidak ditemukan."
        )

    async def _resource_templates_list(self, request: RpcRequest) -> RpcResponse:
        return RpcResponse.success(request.id, {"resourceTemplates": []})

    async def _prompts_list(self, request: RpcRequest) -> RpcResponse:
        return RpcResponse.success(request.id, {"prompts": []})

    async def _prompts_get(self, request: RpcRequest) -> RpcResponse:
        params = _parse_params(PromptGetParams, request.params)
        return RpcResponse.failure(
            request.id, PROMPT_NOT_FOUND, f"Prompt '{params.name}' tidak tersedia."
        )

    async def _ping(self, request: RpcRequest) -> RpcResponse:
        return RpcResponse.success(request.id, {"ok": True})
