"""
Go swagger doc renderer — records to ``map_<Type>`` + ``SwaggerDoc()``.

For every documented type this emits a map variable keyed by field
name (the type's own description under ``""``) and a value-receiver
method returning it, which go-restful picks up when building the
Swagger model descriptions.

Layout is left loose on purpose; the formatter owns whitespace.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from swaggerdocs.adapters.base import DocRenderer
from swaggerdocs.core.errors import RenderError
from swaggerdocs.core.models.records import DocumentationRecord

logger = logging.getLogger(__name__)

_IDENT_RE = re.compile(r"[^\W\d]\w*")

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer",
    "else", "fallthrough", "for", "func", "go", "goto", "if", "import",
    "interface", "map", "package", "range", "return", "select", "struct",
    "switch", "type", "var",
})

_SIMPLE_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\v": "\\v",
}


def is_go_identifier(name: str) -> bool:
    """True when ``name`` is a legal, non-keyword Go identifier."""
    return bool(_IDENT_RE.fullmatch(name)) and name not in GO_KEYWORDS


def go_quote(text: str) -> str:
    """Quote ``text`` as a Go interpreted string literal."""
    out = ['"']
    for ch in text:
        if ch in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\x{ord(ch):02x}")
        elif not ch.isprintable():
            # line and paragraph separators, NEL, format characters
            code = ord(ch)
            out.append(f"\\u{code:04x}" if code < 0x10000 else f"\\U{code:08x}")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


class GoSwaggerDocRenderer(DocRenderer):
    """Render records the way go-restful's swagger doc generator does.

    Entries with an empty description are dropped; a record left with
    no entries produces no code at all.
    """

    @property
    def name(self) -> str:
        return "go-swagger"

    def render(self, records: Sequence[DocumentationRecord]) -> str:
        seen: set[str] = set()
        chunks: list[str] = []

        for record in records:
            type_name = record.type_name
            if not is_go_identifier(type_name):
                raise RenderError(f"invalid Go type name: {type_name!r}")
            if type_name in seen:
                raise RenderError(f"duplicate type: {type_name}")
            seen.add(type_name)

            entries = [(key, doc) for key, doc in record.entries() if doc]
            if not entries:
                logger.debug("Skipping %s: no documented entries", type_name)
                continue

            chunks.append(self._render_type(type_name, entries))

        return "".join(chunks)

    def _render_type(self, type_name: str, entries: list[tuple[str, str]]) -> str:
        keys: set[str] = set()
        lines = [f"var map_{type_name} = map[string]string{{\n"]
        for key, doc in entries:
            if key in keys:
                raise RenderError(f"duplicate field {key!r} in type {type_name}")
            keys.add(key)
            lines.append(f"\t{go_quote(key)}: {go_quote(doc)},\n")
        lines.append("}\n")
        lines.append("\n")
        lines.append(f"func ({type_name}) SwaggerDoc() map[string]string {{\n")
        lines.append(f"\treturn map_{type_name}\n")
        lines.append("}\n")
        lines.append("\n")
        return "".join(lines)
