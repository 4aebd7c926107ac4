"""HTTP transport — one JSON-RPC message per ``POST``.

Calls are answered with ``200`` and the JSON response.  Notifications (and
anything the service answers with ``None``) get ``202 Accepted`` and an
empty body.
"""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from kelurahan_mcp.protocol import McpService, RpcRequest, RpcResponse
from kelurahan_mcp.tools.models import describe_validation_error

logger = logging.getLogger(__name__)

DEFAULT_RPC_PATH = "/sse"


def create_app(service: McpService, rpc_path: str = DEFAULT_RPC_PATH) -> Starlette:
    """Build the ASGI app serving *service* at ``POST rpc_path``.

    The registry's compile pool is shut down when the app stops.
    """

    async def rpc_endpoint(request: Request) -> Response:
        body = await request.body()
        try:
            payload = json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Rejected unparseable request body: %s", exc)
            return JSONResponse(RpcResponse.parse_error(f"Parse error: {exc}").to_wire())

        if not isinstance(payload, dict):
            return JSONResponse(
                RpcResponse.invalid_request(None, "Request must be a JSON object").to_wire()
            )

        try:
            rpc_request = RpcRequest.model_validate(payload)
        except ValidationError as exc:
            message = f"Invalid request: {describe_validation_error(exc)}"
            logger.warning("%s", message)
            return JSONResponse(RpcResponse.invalid_request(payload.get("id"), message).to_wire())

        logger.info("Received MCP request: %s", rpc_request.method)
        response = await service.handle(rpc_request)

        if rpc_request.is_notification:
            if response is not None and response.is_error:
                logger.warning(
                    "Dropping error for notification %s: %s",
                    rpc_request.method,
                    response.error.message if response.error else "",
                )
            return Response(status_code=202)
        if response is None:
            return Response(status_code=202)
        return JSONResponse(response.to_wire())

    @asynccontextmanager
    async def lifespan(_: Starlette) -> AsyncIterator[None]:
        yield
        service.registry.shutdown()

    return Starlette(routes=[Route(rpc_path, rpc_endpoint, methods=["POST"])], lifespan=lifespan)
