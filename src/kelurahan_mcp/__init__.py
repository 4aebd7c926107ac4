"""Kelurahan MCP — JSON-RPC tool server for letter generation and posting browse tools."""

from __future__ import annotations

__version__ = "0.1.0"
