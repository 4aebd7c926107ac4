"""Typst template rendering.

Templates are plain Typst files carrying :class:`string.Template`
placeholders (``${pengisi_nama}``).  String placeholders sit inside Typst
string literals, boolean placeholders are bare::

    #let pengisi = (
      nama: "${pengisi_nama}",
    )
    #let opsi_sendiri = ${meta_opsi_sendiri}

The placeholder set is the contract between a template file and its
generator: :class:`TypstTemplate` checks it once at load time, so rendering
never depends on searching the template text for markers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from string import Template

from kelurahan_mcp.generators.errors import TemplateLoadError

logger = logging.getLogger(__name__)

BUILTIN_TEMPLATE_DIR = Path(__file__).parent / "templates"

_TYPST_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_typst_string(value: str) -> str:
    """Escape *value* for use inside a double-quoted Typst string literal."""
    return "".join(_TYPST_ESCAPES.get(ch, ch) for ch in value)


class TemplateStore:
    """Filename-keyed source of template text.

    Reads from *directory* (default: the templates bundled with the package).
    """

    def __init__(self, directory: Path | None = None) -> None:
        self.directory = directory or BUILTIN_TEMPLATE_DIR

    def read(self, filename: str) -> str:
        path = self.directory / filename
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateLoadError(filename, str(exc)) from exc


class TypstTemplate:
    """A loaded template bound to the set of fields its generator supplies."""

    def __init__(self, filename: str, source: str, fields: Iterable[str]) -> None:
        self.filename = filename
        self.fields = frozenset(fields)
        self._template = Template(source)
        self._check_contract()

    @classmethod
    def load(cls, store: TemplateStore, filename: str, fields: Iterable[str]) -> TypstTemplate:
        """Read *filename* from *store* and verify its placeholder contract."""
        template = cls(filename, store.read(filename), fields)
        logger.debug("Loaded template %s from %s", filename, store.directory)
        return template

    def _check_contract(self) -> None:
        if not self._template.is_valid():
            raise TemplateLoadError(self.filename, "invalid placeholder syntax")

        placeholders = set(self._template.get_identifiers())
        missing = sorted(self.fields - placeholders)
        unknown = sorted(placeholders - self.fields)
        if missing or unknown:
            parts = []
            if missing:
                parts.append(f"missing placeholders: {', '.join(missing)}")
            if unknown:
                parts.append(f"unknown placeholders: {', '.join(unknown)}")
            raise TemplateLoadError(self.filename, "; ".join(parts))

    def render(self, context: Mapping[str, str | bool]) -> str:
        """Produce complete Typst source from *context*.

        Strings are escaped for Typst string literals; booleans become
        ``true``/``false``.  *context* must provide exactly the declared fields.
        """
        if set(context) != self.fields:
            missing = sorted(self.fields - set(context))
            extra = sorted(set(context) - self.fields)
            msg = f"render context mismatch for {self.filename}: missing={missing} extra={extra}"
            raise ValueError(msg)

        values = {
            key: ("true" if value else "false")
            if isinstance(value, bool)
            else escape_typst_string(value)
            for key, value in context.items()
        }
        return self._template.substitute(values)
