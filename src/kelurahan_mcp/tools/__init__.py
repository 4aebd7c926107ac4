"""Tools — descriptors, argument handling and dispatch for the six tools."""

from kelurahan_mcp.tools.data import (
    DataAccessError,
    InMemoryPostingAccessor,
    PostingAccessor,
    PostingRow,
)
from kelurahan_mcp.tools.models import InvalidArgumentsError, ToolDescriptor, parse_arguments
from kelurahan_mcp.tools.registry import TOOL_NAMES, ToolRegistry

__all__ = [
    "TOOL_NAMES",
    "DataAccessError",
    "InMemoryPostingAccessor",
    "InvalidArgumentsError",
    "PostingAccessor",
    "PostingRow",
    "ToolDescriptor",
    "ToolRegistry",
    "parse_arguments",
]
