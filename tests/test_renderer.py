"""
Tests for the Go swagger doc renderer.

Pure unit tests: records in → unformatted Go source out.
"""

import pytest

from swaggerdocs.adapters.renderers.go_swagger import (
    GoSwaggerDocRenderer,
    go_quote,
    is_go_identifier,
)
from swaggerdocs.core.errors import RenderError
from swaggerdocs.core.models.records import DocumentationRecord, FieldDoc


# ═══════════════════════════════════════════════════════════════════
#  helpers
# ═══════════════════════════════════════════════════════════════════


class TestGoQuote:
    def test_plain(self):
        assert go_quote("desired state") == '"desired state"'

    def test_quotes_and_backslashes(self):
        assert go_quote('say "hi" \\o/') == '"say \\"hi\\" \\\\o/"'

    def test_newline_and_tab(self):
        assert go_quote("a\nb\tc") == '"a\\nb\\tc"'

    def test_control_character(self):
        assert go_quote("\x01") == '"\\x01"'

    def test_unicode_passthrough(self):
        assert go_quote("café") == '"café"'

    @pytest.mark.parametrize("text, quoted", [
        ("a\u2028b", '"a\\u2028b"'),
        ("a\u2029b", '"a\\u2029b"'),
        ("a\x85b", '"a\\u0085b"'),
        ("a\u00a0b", '"a\\u00a0b"'),
        ("a\ufeffb", '"a\\ufeffb"'),
    ])
    def test_line_separators_escaped(self, text, quoted):
        assert go_quote(text) == quoted


class TestIsGoIdentifier:
    @pytest.mark.parametrize("name", ["Pod", "_x", "podList2", "Ünïcode"])
    def test_valid(self, name):
        assert is_go_identifier(name)

    @pytest.mark.parametrize(
        "name", ["", "2pod", "my-pod", "a b", "func", "type", "Pod\n", "Pod\u2028"]
    )
    def test_invalid(self, name):
        assert not is_go_identifier(name)


# ═══════════════════════════════════════════════════════════════════
#  render
# ═══════════════════════════════════════════════════════════════════


class TestRender:
    def test_map_and_method(self):
        out = GoSwaggerDocRenderer().render([
            DocumentationRecord(
                type_name="Pod", fields=(FieldDoc(name="Spec", doc="desired state"),)
            ),
        ])
        assert "var map_Pod = map[string]string{" in out
        assert '"Spec": "desired state",' in out
        assert "func (Pod) SwaggerDoc() map[string]string {" in out
        assert "return map_Pod" in out

    def test_type_doc_under_empty_key(self, pod_records):
        out = GoSwaggerDocRenderer().render(pod_records)
        assert '"": "Pod is a collection of containers.",' in out

    def test_order_preserved(self, pod_records):
        out = GoSwaggerDocRenderer().render(pod_records)
        assert out.index("map_Pod ") < out.index("map_PodList ")
        assert out.index('"spec"') < out.index('"status"')

    def test_empty_docs_dropped(self, undocumented_records):
        out = GoSwaggerDocRenderer().render(undocumented_records)
        assert '"size"' in out
        assert '"color"' not in out

    def test_undocumented_type_renders_nothing(self):
        out = GoSwaggerDocRenderer().render([
            DocumentationRecord(type_name="Bare", fields=(FieldDoc(name="a"),)),
        ])
        assert out == ""

    def test_exempt_field_with_doc_still_rendered(self):
        out = GoSwaggerDocRenderer().render([
            DocumentationRecord(
                type_name="Pod", fields=(FieldDoc(name="x", doc="kept", exempt=True),)
            ),
        ])
        assert '"x": "kept"' in out

    def test_invalid_type_name(self):
        with pytest.raises(RenderError, match="invalid Go type name"):
            GoSwaggerDocRenderer().render([DocumentationRecord(type_name="my-type", doc="d")])

    def test_type_name_with_trailing_newline(self):
        with pytest.raises(RenderError, match="invalid Go type name"):
            GoSwaggerDocRenderer().render([DocumentationRecord(type_name="Pod\n", doc="d")])

    def test_duplicate_type(self):
        rec = DocumentationRecord(type_name="Pod", doc="d")
        with pytest.raises(RenderError, match="duplicate type"):
            GoSwaggerDocRenderer().render([rec, rec])

    def test_duplicate_field(self):
        rec = DocumentationRecord(
            type_name="Pod",
            fields=(FieldDoc(name="a", doc="1"), FieldDoc(name="a", doc="2")),
        )
        with pytest.raises(RenderError, match="duplicate field"):
            GoSwaggerDocRenderer().render([rec])
