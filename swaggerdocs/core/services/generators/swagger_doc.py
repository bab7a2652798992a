"""
Swagger doc generator — produce a formatted zz_generated swagger file.

The file is the package clause, a fixed header, the rendered records
and a fixed footer, run through the formatter as one unit. Nothing here
touches the filesystem.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from swaggerdocs.adapters.base import DocRenderer, SourceFormatter
from swaggerdocs.adapters.formatters.builtin import GoSourceFormatter
from swaggerdocs.adapters.renderers.go_swagger import GoSwaggerDocRenderer, is_go_identifier
from swaggerdocs.core.errors import FormatError, RenderError
from swaggerdocs.core.models.config import DEFAULT_OUTPUT_FILE_NAME
from swaggerdocs.core.models.records import DocumentationRecord

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_OUTPUT_FILE_NAME",
    "END_MARKER",
    "FOOTER_CONTENT",
    "HEADER_CONTENT",
    "START_MARKER",
    "generate_swagger_docs",
]

START_MARKER = "// AUTO-GENERATED FUNCTIONS START HERE"
END_MARKER = "// AUTO-GENERATED FUNCTIONS END HERE"

HEADER_CONTENT = f"""\
// This file contains a collection of methods that can be used from go-restful to
// generate Swagger API documentation for its models. Please read this PR for more
// information on the implementation: https://github.com/emicklei/go-restful/pull/215
//
// TODOs are ignored from the parser (e.g. TODO(andronat):... || TODO:...) if and only if
// they are on one line! For multiple line or blocks that you want to ignore use ---.
// Any context after a --- is ignored.
//
// Those methods can be generated by using hack/update-swagger-docs.sh

{START_MARKER}
"""

FOOTER_CONTENT = f"{END_MARKER}\n"


def generate_swagger_docs(
    package_name: str,
    records: Sequence[DocumentationRecord],
    renderer: DocRenderer | None = None,
    formatter: SourceFormatter | None = None,
) -> bytes:
    """Generate the swagger doc source for one Go package.

    Args:
        package_name: Go package clause name.
        records: Documented types, in output order.
        renderer: Record renderer (default: GoSwaggerDocRenderer).
        formatter: Source formatter (default: GoSourceFormatter).

    Returns:
        The formatted file content, UTF-8 encoded.

    Raises:
        RenderError: A record cannot be rendered.
        FormatError: The assembled source cannot be formatted.
    """
    renderer = renderer or GoSwaggerDocRenderer()
    formatter = formatter or GoSourceFormatter()

    if not is_go_identifier(package_name):
        raise FormatError(f"invalid package name: {package_name!r}")

    parts = [f"package {package_name}\n", HEADER_CONTENT]

    try:
        parts.append(renderer.render(records))
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"error generating swagger docs for types: {e}") from e

    parts.append(FOOTER_CONTENT)

    try:
        formatted = formatter.format("".join(parts))
    except FormatError:
        raise
    except Exception as e:
        raise FormatError(f"could not format output data: {e}") from e

    logger.debug(
        "Generated swagger docs for package %s (%d type(s), %s)",
        package_name, len(records), formatter.name,
    )
    return formatted.encode("utf-8")
