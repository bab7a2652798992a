"""
Error types raised by generation and verification.

Every failure of the generate/verify pipeline is a ``SwaggerDocsError``
so callers can catch the family in one place.
"""

from __future__ import annotations

from swaggerdocs.core.models.records import CompletenessReport


class SwaggerDocsError(Exception):
    """Base class for swagger doc generation and verification failures."""


class RenderError(SwaggerDocsError):
    """A documentation record could not be rendered to source."""


class FormatError(SwaggerDocsError):
    """The assembled source is not valid and cannot be formatted."""

    def __init__(self, message: str, line: int | None = None):
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class MissingDocsError(SwaggerDocsError):
    """Fields lack descriptions while comments are enforced."""

    def __init__(self, count: int, listing: str, report: CompletenessReport | None = None):
        super().__init__(
            f"missing swagger docs for the following {count} fields:\n{listing}"
        )
        self.count = count
        self.listing = listing
        self.report = report


class ReadError(SwaggerDocsError):
    """The baseline file could not be read."""

    def __init__(self, path: str, reason: str = ""):
        message = f"error reading existing swagger docs file: {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.path = path


class StaleError(SwaggerDocsError):
    """The baseline differs from freshly generated content."""

    def __init__(self, path: str):
        super().__init__(
            f"swagger docs are out of date, please regenerate the swagger docs: {path}"
        )
        self.path = path
