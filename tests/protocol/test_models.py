"""Tests for the JSON-RPC envelope models."""

from __future__ import annotations

from kelurahan_mcp.protocol import (
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    RpcRequest,
    RpcResponse,
)


class TestRpcRequest:
    def test_absent_id_is_notification(self) -> None:
        request = RpcRequest.model_validate({"jsonrpc": "2.0", "method": "notifications/initialized"})
        assert request.is_notification
        assert request.id is None

    def test_null_id_is_a_call(self) -> None:
        request = RpcRequest.model_validate({"jsonrpc": "2.0", "method": "ping", "id": None})
        assert not request.is_notification

    def test_string_and_numeric_ids(self) -> None:
        assert RpcRequest.model_validate({"jsonrpc": "2.0", "method": "x", "id": "a"}).id == "a"
        assert RpcRequest.model_validate({"jsonrpc": "2.0", "method": "x", "id": 7}).id == 7


class TestRpcResponse:
    def test_success_wire(self) -> None:
        assert RpcResponse.success(1, {"ok": True}).to_wire() == {
            "jsonrpc": "2.0",
            "result": {"ok": True},
            "id": 1,
        }

    def test_error_wire_omits_result_and_empty_data(self) -> None:
        wire = RpcResponse.method_not_found("abc", "foo/bar").to_wire()
        assert wire == {
            "jsonrpc": "2.0",
            "error": {
                "code": METHOD_NOT_FOUND,
                "message": "Method 'foo/bar' is not supported by this server.",
            },
            "id": "abc",
        }

    def test_null_result_still_emitted(self) -> None:
        wire = RpcResponse.success(2, None).to_wire()
        assert "result" in wire
        assert "error" not in wire

    def test_parse_error_has_null_id(self) -> None:
        wire = RpcResponse.parse_error("bad json").to_wire()
        assert wire["id"] is None
        assert wire["error"]["code"] == PARSE_ERROR

    def test_invalid_params(self) -> None:
        response = RpcResponse.invalid_params(3, "name: Field required")
        assert response.is_error
        assert response.error is not None
        assert response.error.code == INVALID_PARAMS
