"""Transports carrying JSON-RPC messages to :class:`~kelurahan_mcp.protocol.McpService`."""

from kelurahan_mcp.transport.http import DEFAULT_RPC_PATH, create_app

__all__ = ["DEFAULT_RPC_PATH", "create_app"]
