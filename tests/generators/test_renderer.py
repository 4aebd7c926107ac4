"""Tests for template loading, the placeholder contract and rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from kelurahan_mcp.generators.errors import TemplateLoadError
from kelurahan_mcp.generators.renderer import TemplateStore, TypstTemplate, escape_typst_string


class TestEscape:
    def test_quotes_and_backslashes(self) -> None:
        assert escape_typst_string('Jl. "Melati" \\ 5') == 'Jl. \\"Melati\\" \\\\ 5'

    def test_control_characters(self) -> None:
        assert escape_typst_string("a\nb\tc\r") == "a\\nb\\tc\\r"

    def test_plain_text_unchanged(self) -> None:
        assert escape_typst_string("Siti Aminah") == "Siti Aminah"


class TestTypstTemplate:
    def test_contract_satisfied(self) -> None:
        template = TypstTemplate("t.typ", '#let a = "${x}"\n#let b = ${y}', ["x", "y"])
        assert template.fields == {"x", "y"}

    def test_missing_placeholder(self) -> None:
        with pytest.raises(TemplateLoadError, match="missing placeholders: y"):
            TypstTemplate("t.typ", '#let a = "${x}"', ["x", "y"])

    def test_unknown_placeholder(self) -> None:
        with pytest.raises(TemplateLoadError, match="unknown placeholders: z"):
            TypstTemplate("t.typ", '"${x}" "${z}"', ["x"])

    def test_invalid_placeholder_syntax(self) -> None:
        with pytest.raises(TemplateLoadError, match="invalid placeholder syntax"):
            TypstTemplate("t.typ", '"${x}" $', ["x"])

    def test_render_escapes_and_converts_bools(self) -> None:
        template = TypstTemplate("t.typ", '#let n = "${nama}"\n#let s = ${sendiri}', ["nama", "sendiri"])
        source = template.render({"nama": 'A "B"', "sendiri": False})
        assert source == '#let n = "A \\"B\\""\n#let s = false'

    def test_render_rejects_context_mismatch(self) -> None:
        template = TypstTemplate("t.typ", '"${x}"', ["x"])
        with pytest.raises(ValueError, match="context mismatch"):
            template.render({"x": "1", "y": "2"})


class TestTemplateStore:
    def test_builtin_templates_exist(self) -> None:
        store = TemplateStore()
        for name in (
            "keterangan_tidak_mampu.typ",
            "kpr_belum_memiliki_rumah.typ",
            "surat_pernyataan_akan_mengurus_nib_npwp.typ",
        ):
            assert "${meta_tanggal}" in store.read(name)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TemplateLoadError) as exc_info:
            TemplateStore(tmp_path).read("absent.typ")
        assert exc_info.value.template == "absent.typ"

    def test_undecodable_file(self, tmp_path: Path) -> None:
        (tmp_path / "bad.typ").write_bytes(b"\xff\xfe \xe9")
        with pytest.raises(TemplateLoadError) as exc_info:
            TemplateStore(tmp_path).read("bad.typ")
        assert exc_info.value.template == "bad.typ"

    def test_load_from_directory(self, tmp_path: Path) -> None:
        (tmp_path / "x.typ").write_text('"${a}"', encoding="utf-8")
        template = TypstTemplate.load(TemplateStore(tmp_path), "x.typ", ["a"])
        assert template.render({"a": "ok"}) == '"ok"'
