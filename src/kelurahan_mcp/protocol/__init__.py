"""JSON-RPC protocol layer."""

from kelurahan_mcp.protocol.models import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    PROMPT_NOT_FOUND,
    RESOURCE_NOT_FOUND,
    RpcError,
    RpcRequest,
    RpcResponse,
)
from kelurahan_mcp.protocol.service import PROTOCOL_VERSION, McpService

__all__ = [
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "PROMPT_NOT_FOUND",
    "PROTOCOL_VERSION",
    "RESOURCE_NOT_FOUND",
    "McpService",
    "RpcError",
    "RpcRequest",
    "RpcResponse",
]
