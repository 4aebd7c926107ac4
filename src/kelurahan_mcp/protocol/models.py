"""JSON-RPC 2.0 envelope and MCP parameter models.

A request without an ``id`` member is a notification; that is tracked
through pydantic's ``model_fields_set`` so an explicit ``"id": null`` is
still a call that gets answered.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"

# Reserved JSON-RPC codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602

# Application codes
RESOURCE_NOT_FOUND = -32000
PROMPT_NOT_FOUND = -32001


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class RpcRequest(BaseModel):
    """An inbound JSON-RPC message."""

    jsonrpc: str
    method: str
    params: Any = None
    id: Any = None

    @property
    def is_notification(self) -> bool:
        return "id" not in self.model_fields_set


class RpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class RpcResponse(BaseModel):
    """An outbound JSON-RPC message carrying either a result or an error."""

    jsonrpc: str = JSONRPC_VERSION
    id: Any = None
    result: Any = None
    error: RpcError | None = None

    @classmethod
    def success(cls, id: Any, result: Any) -> RpcResponse:
        return cls(id=id, result=result)

    @classmethod
    def failure(cls, id: Any, code: int, message: str, data: Any = None) -> RpcResponse:
        return cls(id=id, error=RpcError(code=code, message=message, data=data))

    @classmethod
    def parse_error(cls, message: str) -> RpcResponse:
        return cls.failure(None, PARSE_ERROR, message)

    @classmethod
    def invalid_request(cls, id: Any, message: str) -> RpcResponse:
        return cls.failure(id, INVALID_REQUEST, message)

    @classmethod
    def invalid_params(cls, id: Any, message: str) -> RpcResponse:
        return cls.failure(id, INVALID_PARAMS, message)

    @classmethod
    def method_not_found(cls, id: Any, method: str) -> RpcResponse:
        return cls.failure(id, METHOD_NOT_FOUND, f"Method '{method}' is not supported by this server.")

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_wire(self) -> dict[str, Any]:
        """Serialise with exactly one of ``result``/``error``; ``id`` is always present."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result
        payload["id"] = self.id
        return payload


# ---------------------------------------------------------------------------
# MCP method parameters
# ---------------------------------------------------------------------------


class ClientInfo(BaseModel):
    name: str
    version: str | None = None


class InitializeParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    protocol_version: str | None = Field(default=None, alias="protocolVersion")
    client_info: ClientInfo = Field(alias="clientInfo")


class CallToolParams(BaseModel):
    name: str
    arguments: Any = None


class ResourceReadParams(BaseModel):
    uri: str


class PromptGetParams(BaseModel):
    name: str
