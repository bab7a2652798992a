"""
Configuration loader — reads swaggerdocs.yml and documentation tables.

Reads YAML, validates against Pydantic schemas, and returns typed
domain objects.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from swaggerdocs.core.models.config import SwaggerDocsConfig
from swaggerdocs.core.models.records import DocumentationRecord

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "swaggerdocs.yml"


class ConfigError(Exception):
    """Raised when configuration or a documentation table is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for swaggerdocs.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to swaggerdocs.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def _read_yaml_mapping(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ConfigError(f"File not found: {path}")

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> SwaggerDocsConfig:
    """Load and validate swaggerdocs.yml.

    Args:
        path: Explicit path to the config. If None, searches upward.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigError(f"No {CONFIG_FILE} found. Specify one with --config.")

    logger.debug("Loading config from %s", path)
    data = _read_yaml_mapping(path)

    try:
        config = SwaggerDocsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}") from e

    logger.info("Loaded %d package(s) from %s", len(config.packages), path)
    return config


def load_records(path: Path) -> list[DocumentationRecord]:
    """Load a documentation table into records, preserving file order.

    The table is a mapping with a ``types`` list; each entry has
    ``name``, optional ``doc`` and an optional ``fields`` list of
    ``{name, doc, exempt}``.
    """
    data = _read_yaml_mapping(path)
    types = data.get("types", [])
    if not isinstance(types, list):
        raise ConfigError(f"'types' must be a list in {path}")

    records = []
    for i, entry in enumerate(types):
        try:
            records.append(DocumentationRecord.model_validate(entry))
        except ValidationError as e:
            raise ConfigError(f"Invalid type entry #{i} in {path}: {e}") from e

    logger.debug("Loaded %d documented type(s) from %s", len(records), path)
    return records


def config_root(config_path: Path) -> Path:
    """Get the directory package paths are relative to."""
    return config_path.parent.resolve()
