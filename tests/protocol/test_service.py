"""Tests for McpService method routing."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from kelurahan_mcp import __version__
from kelurahan_mcp.generators import CompilerConfig
from kelurahan_mcp.protocol import (
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PROMPT_NOT_FOUND,
    PROTOCOL_VERSION,
    RESOURCE_NOT_FOUND,
    McpService,
    RpcRequest,
    RpcResponse,
)
from kelurahan_mcp.tools import InMemoryPostingAccessor, PostingRow, ToolRegistry


@pytest.fixture
def service(
    typst_ok: Path, scratch_dir: Path, posting_rows: list[dict[str, Any]]
) -> Iterator[McpService]:
    registry = ToolRegistry(config=CompilerConfig(binary=str(typst_ok), scratch_dir=scratch_dir))
    accessor = InMemoryPostingAccessor([PostingRow.model_validate(r) for r in posting_rows])
    yield McpService(registry, accessor)
    registry.shutdown()


def _request(method: str, params: Any = None, **extra: Any) -> RpcRequest:
    payload: dict[str, Any] = {"jsonrpc": "2.0", "method": method, "id": 1, **extra}
    if params is not None:
        payload["params"] = params
    return RpcRequest.model_validate(payload)


async def _handle(service: McpService, request: RpcRequest) -> RpcResponse:
    response = await service.handle(request)
    assert response is not None
    return response


class TestEnvelope:
    async def test_wrong_version(self, service: McpService) -> None:
        response = await _handle(service, _request("ping", jsonrpc="1.0"))
        assert response.error is not None
        assert response.error.code == INVALID_REQUEST
        assert response.error.message == "Unsupported jsonrpc version (expected 2.0)"

    async def test_wrong_version_notification_still_answered(self, service: McpService) -> None:
        request = RpcRequest.model_validate({"jsonrpc": "1.0", "method": "notifications/x"})
        response = await _handle(service, request)
        assert response.error is not None
        assert response.error.code == INVALID_REQUEST

    async def test_unknown_method(self, service: McpService) -> None:
        response = await _handle(service, _request("tools/delete"))
        assert response.error is not None
        assert response.error.code == METHOD_NOT_FOUND
        assert "tools/delete" in response.error.message

    async def test_notifications_get_no_response(self, service: McpService) -> None:
        request = RpcRequest.model_validate(
            {"jsonrpc": "2.0", "method": "notifications/initialized"}
        )
        assert await service.handle(request) is None

    async def test_id_echoed(self, service: McpService) -> None:
        response = await _handle(service, _request("ping", id="req-9"))
        assert response.id == "req-9"


class TestInitialize:
    async def test_result(self, service: McpService) -> None:
        response = await _handle(
            service,
            _request(
                "initialize",
                {"protocolVersion": PROTOCOL_VERSION, "clientInfo": {"name": "agent", "version": "1"}},
            ),
        )
        result = response.result
        assert result["protocolVersion"] == "2024-11-05"
        assert result["serverInfo"] == {
            "name": "kelurahan-mcp",
            "version": __version__,
            "title": "Cakung Barat MCP Server",
        }
        assert result["capabilities"]["tools"] == {"listChanged": False}
        assert result["capabilities"]["resources"] == {}
        assert result["capabilities"]["prompts"] == {}

    async def test_malformed_params_still_succeed(self, service: McpService) -> None:
        response = await _handle(service, _request("initialize", {"unexpected": True}))
        assert not response.is_error
        assert response.result["protocolVersion"] == PROTOCOL_VERSION

    async def test_client_info_without_protocol_version(
        self, service: McpService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="kelurahan_mcp.protocol.service"):
            response = await _handle(
                service, _request("initialize", {"clientInfo": {"name": "agent"}})
            )
        assert not response.is_error
        assert "malformed" not in caplog.text
        assert "agent" in caplog.text

    async def test_missing_params_still_succeed(self, service: McpService) -> None:
        response = await _handle(service, _request("initialize"))
        assert not response.is_error


class TestTools:
    async def test_list(self, service: McpService) -> None:
        response = await _handle(service, _request("tools/list"))
        tools = response.result["tools"]
        assert len(tools) == 6
        for tool in tools:
            assert tool["description"]
            assert "properties" in tool["inputSchema"]

    async def test_call_success(self, service: McpService, sktm_arguments: dict[str, Any]) -> None:
        response = await _handle(
            service,
            _request("tools/call", {"name": "generate_surat_tidak_mampu", "arguments": sktm_arguments}),
        )
        result = response.result
        assert result["isError"] is False
        assert result["content"][0]["type"] == "text"
        assert result["content"][1]["mimeType"] == "application/pdf"

    async def test_unknown_tool_is_rpc_success(self, service: McpService) -> None:
        response = await _handle(service, _request("tools/call", {"name": "foo"}))
        assert not response.is_error
        assert response.result["isError"] is True
        text = response.result["content"][0]["text"]
        for name in ("generate_surat_tidak_mampu", "list_categories", "get_posting_detail"):
            assert name in text

    async def test_validation_error_is_rpc_success(self, service: McpService) -> None:
        response = await _handle(
            service,
            _request(
                "tools/call",
                {
                    "name": "generate_surat_tidak_mampu",
                    "arguments": {"pengisi": {}, "meta": {"kelurahan": "Cakung Barat"}},
                },
            ),
        )
        assert not response.is_error
        assert response.result["isError"] is True
        assert "8 kesalahan" in response.result["content"][0]["text"]

    async def test_browse_call_uses_accessor(self, service: McpService) -> None:
        response = await _handle(service, _request("tools/call", {"name": "list_categories"}))
        assert response.result["isError"] is False
        assert "Kegiatan" in response.result["content"][0]["text"]

    @pytest.mark.parametrize("params", [None, {}, {"arguments": {}}, {"name": 5}])
    async def test_bad_call_params(self, service: McpService, params: Any) -> None:
        request = RpcRequest.model_validate(
            {"jsonrpc": "2.0", "method": "tools/call", "id": 1, "params": params}
        )
        response = await _handle(service, request)
        assert response.error is not None
        assert response.error.code == INVALID_PARAMS


class TestResourcesAndPrompts:
    @pytest.mark.parametrize(
        ("method", "key"),
        [
            ("resources/list", "resources"),
            ("resources/templates/list", "resourceTemplates"),
            ("prompts/list", "prompts"),
        ],
    )
    async def test_empty_catalogs(self, service: McpService, method: str, key: str) -> None:
        response = await _handle(service, _request(method))
        assert response.result == {key: []}

    async def test_resource_read_not_found(self, service: McpService) -> None:
        response = await _handle(service, _request("resources/read", {"uri": "file:///x"}))
        assert response.error is not None
        assert response.error.code == RESOURCE_NOT_FOUND
        assert response.error.message == "Resource 'file:///x' tidak ditemukan."

    async def test_prompt_get_not_found(self, service: McpService) -> None:
        response = await _handle(service, _request("prompts/get", {"name": "sapa"}))
        assert response.error is not None
        assert response.error.code == PROMPT_NOT_FOUND
        assert response.error.message == "Prompt 'sapa' tidak tersedia."

    async def test_resource_read_without_params(self, service: McpService) -> None:
        response = await _handle(service, _request("resources/read"))
        assert response.error is not None
        assert response.error.code == INVALID_PARAMS

    async def test_ping(self, service: McpService) -> None:
        response = await _handle(service, _request("ping"))
        assert response.result == {"ok": True}
