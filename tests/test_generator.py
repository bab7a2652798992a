"""
Tests for the swagger doc generator.

Pure unit tests: package name + records in → formatted bytes out.
"""

import pytest

from swaggerdocs.adapters.base import DocRenderer, SourceFormatter
from swaggerdocs.core.errors import FormatError, RenderError
from swaggerdocs.core.models.records import DocumentationRecord, FieldDoc
from swaggerdocs.core.services.generators.swagger_doc import (
    END_MARKER,
    FOOTER_CONTENT,
    HEADER_CONTENT,
    START_MARKER,
    generate_swagger_docs,
)

EXPECTED_POD = (
    "package widgets\n"
    "\n"
    "// This file contains a collection of methods that can be used from go-restful to\n"
    "// generate Swagger API documentation for its models. Please read this PR for more\n"
    "// information on the implementation: https://github.com/emicklei/go-restful/pull/215\n"
    "//\n"
    "// TODOs are ignored from the parser (e.g. TODO(andronat):... || TODO:...) if and only if\n"
    "// they are on one line! For multiple line or blocks that you want to ignore use ---.\n"
    "// Any context after a --- is ignored.\n"
    "//\n"
    "// Those methods can be generated by using hack/update-swagger-docs.sh\n"
    "\n"
    "// AUTO-GENERATED FUNCTIONS START HERE\n"
    "var map_Pod = map[string]string{\n"
    '\t"Spec": "desired state",\n'
    "}\n"
    "\n"
    "func (Pod) SwaggerDoc() map[string]string {\n"
    "\treturn map_Pod\n"
    "}\n"
    "\n"
    "// AUTO-GENERATED FUNCTIONS END HERE\n"
)


class FakeRenderer(DocRenderer):
    def __init__(self, output: str = "", error: Exception | None = None):
        self.output = output
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    def render(self, records):
        self.calls.append(list(records))
        if self.error:
            raise self.error
        return self.output


class PassthroughFormatter(SourceFormatter):
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.seen = []

    @property
    def name(self) -> str:
        return "passthrough"

    def format(self, source: str) -> str:
        self.seen.append(source)
        if self.error:
            raise self.error
        return source


@pytest.fixture
def pod() -> list[DocumentationRecord]:
    return [
        DocumentationRecord(
            type_name="Pod", fields=(FieldDoc(name="Spec", doc="desired state"),)
        )
    ]


class TestGenerate:
    def test_scenario(self, pod):
        out = generate_swagger_docs("widgets", pod)
        assert isinstance(out, bytes)
        text = out.decode("utf-8")
        assert text.startswith("package widgets\n")
        assert START_MARKER in text
        assert '"Spec"' in text
        assert '"desired state"' in text
        assert END_MARKER in text

    def test_exact_output(self, pod):
        assert generate_swagger_docs("widgets", pod) == EXPECTED_POD.encode("utf-8")

    def test_deterministic(self, pod_records):
        first = generate_swagger_docs("v1", pod_records)
        assert all(generate_swagger_docs("v1", pod_records) == first for _ in range(5))

    def test_aligned_map(self, pod_records):
        text = generate_swagger_docs("v1", pod_records).decode("utf-8")
        assert '\t"":       "Pod is a collection of containers.",\n' in text
        assert '\t"spec":   "desired state",\n' in text
        assert '\t"status": "observed state",\n' in text

    def test_no_records(self):
        text = generate_swagger_docs("v1", []).decode("utf-8")
        assert f"{START_MARKER}\n{END_MARKER}\n" in text

    def test_output_already_formatted(self, pod_records):
        from swaggerdocs.adapters.formatters.builtin import GoSourceFormatter

        text = generate_swagger_docs("v1", pod_records).decode("utf-8")
        assert GoSourceFormatter().format(text) == text

    def test_escaped_docs(self):
        records = [DocumentationRecord(
            type_name="T", doc='uses "quotes"\nand lines',
        )]
        text = generate_swagger_docs("v1", records).decode("utf-8")
        assert '"": "uses \\"quotes\\"\\nand lines",' in text

    @pytest.mark.parametrize("sep", ["\u2028", "\u2029", "\x85"])
    def test_line_separators_in_docs(self, sep):
        records = [DocumentationRecord(
            type_name="T", fields=(FieldDoc(name="f", doc=f"first{sep}second"),),
        )]
        text = generate_swagger_docs("v1", records).decode("utf-8")
        escaped = f"\\u{ord(sep):04x}"
        assert f'"f": "first{escaped}second",' in text
        assert sep not in text


class TestInjectedCapabilities:
    def test_assembly_order(self, pod):
        renderer = FakeRenderer(output="// rendered\n")
        formatter = PassthroughFormatter()
        out = generate_swagger_docs("widgets", pod, renderer=renderer, formatter=formatter)
        assert out.decode("utf-8") == (
            "package widgets\n" + HEADER_CONTENT + "// rendered\n" + FOOTER_CONTENT
        )
        assert renderer.calls == [pod]

    def test_render_error_propagates(self, pod):
        renderer = FakeRenderer(error=RenderError("bad record"))
        with pytest.raises(RenderError, match="bad record"):
            generate_swagger_docs("widgets", pod, renderer=renderer)

    def test_unexpected_render_failure_wrapped(self, pod):
        renderer = FakeRenderer(error=ValueError("boom"))
        with pytest.raises(RenderError, match="boom"):
            generate_swagger_docs("widgets", pod, renderer=renderer)

    def test_format_error_propagates(self, pod):
        formatter = PassthroughFormatter(error=FormatError("nope", line=4))
        with pytest.raises(FormatError, match="line 4: nope"):
            generate_swagger_docs("widgets", pod, formatter=formatter)

    def test_malformed_render_output_fails_formatting(self, pod):
        renderer = FakeRenderer(output="var broken = map[string]string{\n")
        with pytest.raises(FormatError, match="unclosed"):
            generate_swagger_docs("widgets", pod, renderer=renderer)

    def test_invalid_render_output_fails_formatting(self, pod):
        renderer = FakeRenderer(output="var = = ;;\nfunc {\n}\n")
        with pytest.raises(FormatError, match="declaration"):
            generate_swagger_docs("widgets", pod, renderer=renderer)

    @pytest.mark.parametrize("name", ["", "my-pkg", "1st", "package", "v1\n", "v1 "])
    def test_invalid_package_name(self, pod, name):
        formatter = PassthroughFormatter()
        with pytest.raises(FormatError, match="invalid package name"):
            generate_swagger_docs(name, pod, formatter=formatter)
        assert formatter.seen == []
