"""
Adapter base — the contracts between the generator and its collaborators.

Generation needs two capabilities: turning documentation records into
Go source, and formatting Go source canonically. Both are injected so
tests and alternative toolchains can substitute their own.

Implementations must be deterministic: the same input always produces
the same output, byte for byte.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from swaggerdocs.core.models.records import DocumentationRecord


class DocRenderer(ABC):
    """Renders documentation records to Go source text.

    To create a new renderer:
        1. Subclass DocRenderer
        2. Implement name and render
        3. Raise RenderError for records that cannot be rendered
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The renderer identifier."""

    @abstractmethod
    def render(self, records: Sequence[DocumentationRecord]) -> str:
        """Render records, in order, to source text.

        Raises:
            RenderError: A record cannot be rendered.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


class SourceFormatter(ABC):
    """Formats Go source canonically.

    The formatter is the only place whitespace and layout are decided,
    so concatenated input may carry arbitrary incidental spacing.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """The formatter identifier (e.g., 'builtin', 'gofmt')."""

    def is_available(self) -> bool:
        """Check if the formatter's underlying tool is available."""
        return True

    @abstractmethod
    def format(self, source: str) -> str:
        """Return the canonical form of ``source``.

        Raises:
            FormatError: The source is not syntactically valid.
        """

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
