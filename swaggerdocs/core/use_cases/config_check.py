"""
Config check use case — validate swaggerdocs.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from swaggerdocs.adapters.registry import default_registry
from swaggerdocs.core.config.loader import (
    ConfigError,
    config_root,
    find_config_file,
    load_config,
    load_records,
)
from swaggerdocs.core.models.config import SwaggerDocsConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: SwaggerDocsConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    formatters: dict[str, dict] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "package_count": len(self.config.packages) if self.config else 0,
            "formatter": self.config.formatter if self.config else None,
            "enforce_comments": self.config.enforce_comments if self.config else None,
            "formatters": self.formatters,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate configuration and every documentation table it names."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append("No swaggerdocs.yml found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
        result.config = config
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    if not config.packages:
        result.warnings.append("No packages defined. There is nothing to generate.")

    paths = [p.path for p in config.packages]
    dupes = {p for p in paths if paths.count(p) > 1}
    if dupes:
        result.errors.append(f"Duplicate package paths: {', '.join(sorted(dupes))}")

    result.formatters = default_registry(config).formatter_status()
    selected = result.formatters.get(config.formatter)
    if selected is not None and not selected["available"]:
        result.warnings.append(
            f"Formatter '{config.formatter}' is not available ({config.gofmt_binary} not on PATH)."
        )

    root = config_root(config_path)
    for pkg in config.packages:
        if not (root / pkg.path).is_dir():
            result.warnings.append(f"Package '{pkg.name}' path does not exist: {pkg.path}")
            continue
        try:
            load_records(root / pkg.docs_path)
        except ConfigError as e:
            result.errors.append(f"Package '{pkg.path}': {e}")

    result.valid = len(result.errors) == 0
    return result
