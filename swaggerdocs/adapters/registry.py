"""
Formatter registry — resolve the formatter named in swaggerdocs.yml.

The use cases never construct formatters directly; they ask the
registry for the configured one.
"""

from __future__ import annotations

import logging
from typing import Any

from swaggerdocs.adapters.base import SourceFormatter
from swaggerdocs.adapters.formatters.builtin import GoSourceFormatter
from swaggerdocs.adapters.formatters.gofmt import GofmtFormatter
from swaggerdocs.core.models.config import SwaggerDocsConfig

logger = logging.getLogger(__name__)


class FormatterRegistry:
    """Registry of source formatters keyed by name."""

    def __init__(self) -> None:
        self._formatters: dict[str, SourceFormatter] = {}

    def register(self, formatter: SourceFormatter) -> None:
        name = formatter.name
        if name in self._formatters:
            logger.warning("Overwriting existing formatter: %s", name)
        self._formatters[name] = formatter
        logger.debug("Registered formatter: %s", name)

    def get(self, name: str) -> SourceFormatter | None:
        """Look up a formatter by name."""
        return self._formatters.get(name)

    def formatter_status(self) -> dict[str, dict[str, Any]]:
        """Availability of every registered formatter."""
        return {
            name: {
                "name": name,
                "available": formatter.is_available(),
                "type": formatter.__class__.__name__,
            }
            for name, formatter in self._formatters.items()
        }


def default_registry(config: SwaggerDocsConfig | None = None) -> FormatterRegistry:
    """Registry holding the builtin formatter and gofmt."""
    registry = FormatterRegistry()
    registry.register(GoSourceFormatter())
    registry.register(GofmtFormatter(binary=config.gofmt_binary if config else "gofmt"))
    return registry


def formatter_for(config: SwaggerDocsConfig) -> SourceFormatter:
    """The formatter selected by ``config.formatter``."""
    formatter = default_registry(config).get(config.formatter)
    if formatter is None:
        raise KeyError(f"No formatter registered for '{config.formatter}'")
    return formatter
