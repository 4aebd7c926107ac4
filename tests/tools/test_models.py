"""Tests for tool descriptors and argument parsing."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from kelurahan_mcp.generators.models import ToolArguments
from kelurahan_mcp.tools import surat_kpr, surat_nib_npwp, surat_tidak_mampu
from kelurahan_mcp.tools.browse_posts import (
    get_posting_detail_descriptor,
    list_categories_descriptor,
    list_postings_descriptor,
)
from kelurahan_mcp.tools.models import InvalidArgumentsError, ToolDescriptor, parse_arguments


class _Args(ToolArguments):
    nama: str = ""
    umur: int = 0


class TestDescriptors:
    def test_sktm(self) -> None:
        desc = surat_tidak_mampu.descriptor()
        assert desc.name == "generate_surat_tidak_mampu"
        assert desc.input_schema["required"] == ["pengisi", "meta"]
        assert desc.input_schema["properties"]["meta"]["properties"]["opsi_sendiri"]["default"] is True

    def test_kpr(self) -> None:
        desc = surat_kpr.descriptor()
        assert "KPR" in desc.description
        assert desc.input_schema["properties"]["meta"]["required"] == ["kelurahan", "bank_tujuan"]

    def test_nib(self) -> None:
        desc = surat_nib_npwp.descriptor()
        assert "NIB" in desc.description
        assert "NPWP" in desc.description
        assert len(desc.input_schema["properties"]["data"]["required"]) == 7

    def test_browse(self) -> None:
        assert list_postings_descriptor().input_schema["properties"]["sort_by"]["enum"] == [
            "latest",
            "oldest",
        ]
        assert get_posting_detail_descriptor().input_schema["required"] == ["id"]
        assert list_categories_descriptor().input_schema == {"type": "object", "properties": {}}

    def test_wire_uses_camel_case(self) -> None:
        wire = surat_kpr.descriptor().to_wire()
        assert set(wire) == {"name", "description", "inputSchema"}

    def test_frozen(self) -> None:
        desc = ToolDescriptor(name="x", description="y", inputSchema={})
        with pytest.raises(ValueError):
            desc.name = "z"  # type: ignore[misc]


class TestParseArguments:
    def test_none_means_empty(self) -> None:
        assert parse_arguments(_Args, None, tool="t") == _Args()

    def test_error_message(self) -> None:
        with pytest.raises(InvalidArgumentsError) as exc_info:
            parse_arguments(_Args, {"umur": "tua"}, tool="t")
        assert str(exc_info.value).startswith("Argumen tidak valid: umur:")

    def test_unknown_fields_logged(self) -> None:
        with patch("kelurahan_mcp.tools.models.logger") as mock_logger:
            args = parse_arguments(_Args, {"nama": "x", "hobi": "y"}, tool="t")
        assert args.nama == "x"
        mock_logger.warning.assert_called_once_with(
            "Ignoring unknown argument(s) for %s: %s", "t", "hobi"
        )
