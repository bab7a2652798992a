"""
Swagger doc use cases — generate, verify and check every configured package.

Each package is handled independently: a failure is recorded on that
package's result and the remaining packages still run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from swaggerdocs.adapters.base import SourceFormatter
from swaggerdocs.adapters.registry import formatter_for
from swaggerdocs.core.config.loader import (
    ConfigError,
    config_root,
    find_config_file,
    load_config,
    load_records,
)
from swaggerdocs.core.errors import MissingDocsError, SwaggerDocsError
from swaggerdocs.core.models.config import PackageTarget, SwaggerDocsConfig
from swaggerdocs.core.models.records import CompletenessReport
from swaggerdocs.core.models.template import GeneratedFile
from swaggerdocs.core.services.artifact_ops import write_generated_file
from swaggerdocs.core.services.completeness import check_docs_exist
from swaggerdocs.core.services.generators.swagger_doc import generate_swagger_docs
from swaggerdocs.core.services.verify import verify_swagger_docs

logger = logging.getLogger(__name__)


@dataclass
class PackageResult:
    """Outcome for a single package."""

    package: str
    path: str
    output: str = ""
    ok: bool = False
    error: str | None = None
    error_type: str | None = None
    written: bool = False
    changed: bool = False
    missing: CompletenessReport | None = None
    content: bytes | None = None

    def to_dict(self) -> dict:
        return {
            "package": self.package,
            "path": self.path,
            "output": self.output,
            "ok": self.ok,
            "error": self.error,
            "error_type": self.error_type,
            "written": self.written,
            "changed": self.changed,
            "missing": self.missing.to_dict() if self.missing else None,
        }


@dataclass
class RunResult:
    """Outcome of one generate/verify/check run across packages."""

    operation: str
    config_path: Path | None = None
    error: str | None = None
    packages: list[PackageResult] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and all(p.ok for p in self.packages)

    @property
    def failed(self) -> int:
        return sum(1 for p in self.packages if not p.ok)

    def to_dict(self) -> dict:
        return {
            "operation": self.operation,
            "ok": self.ok,
            "config_path": str(self.config_path) if self.config_path else None,
            "error": self.error,
            "packages": [p.to_dict() for p in self.packages],
            "summary": {"total": len(self.packages), "failed": self.failed},
        }


@dataclass
class _RunContext:
    config: SwaggerDocsConfig
    root: Path
    targets: list[PackageTarget]
    formatter: SourceFormatter


def _prepare(
    result: RunResult,
    config_path: Path | None,
    packages: list[str] | None,
) -> _RunContext | None:
    try:
        if config_path is None:
            config_path = find_config_file()
        config = load_config(config_path)
    except ConfigError as e:
        result.error = str(e)
        return None

    assert config_path is not None  # load_config raised otherwise
    result.config_path = config_path

    if packages:
        targets = []
        for name in packages:
            target = config.get_package(name)
            if target is None:
                result.packages.append(PackageResult(
                    package=name, path="", error=f"Unknown package: {name}",
                    error_type="ConfigError",
                ))
            else:
                targets.append(target)
    else:
        targets = list(config.packages)

    return _RunContext(
        config=config,
        root=config_root(config_path),
        targets=targets,
        formatter=formatter_for(config),
    )


def _fail(pkg_result: PackageResult, error: Exception) -> None:
    pkg_result.ok = False
    pkg_result.error = str(error)
    pkg_result.error_type = type(error).__name__
    logger.debug("%s failed: %s", pkg_result.path, error)


def run_generate(
    config_path: Path | None = None,
    packages: list[str] | None = None,
    write: bool = False,
) -> RunResult:
    """Generate swagger docs for configured packages.

    Generated content lands on each package result; with ``write`` it
    is also written to the package output file.
    """
    result = RunResult(operation="generate")
    ctx = _prepare(result, config_path, packages)
    if ctx is None:
        return result

    for target in ctx.targets:
        pkg_result = PackageResult(
            package=target.name, path=target.path, output=target.output_path,
        )
        result.packages.append(pkg_result)
        try:
            records = load_records(ctx.root / target.docs_path)
            content = generate_swagger_docs(target.name, records, formatter=ctx.formatter)
        except (ConfigError, SwaggerDocsError) as e:
            _fail(pkg_result, e)
            continue

        pkg_result.content = content
        pkg_result.ok = True

        if write:
            wr = write_generated_file(ctx.root, GeneratedFile(
                path=target.output_path,
                content=content.decode("utf-8"),
                overwrite=True,
                reason=f"Swagger docs for package {target.name}",
            ))
            if "error" in wr:
                pkg_result.ok = False
                pkg_result.error = wr["error"]
                pkg_result.error_type = "WriteError"
            else:
                pkg_result.written = True
                pkg_result.changed = wr["changed"]

    return result


def run_verify(
    config_path: Path | None = None,
    packages: list[str] | None = None,
    enforce_comments: bool | None = None,
) -> RunResult:
    """Verify every configured package's swagger doc file.

    Args:
        enforce_comments: Overrides the config's policy when not None.
    """
    result = RunResult(operation="verify")
    ctx = _prepare(result, config_path, packages)
    if ctx is None:
        return result

    enforce = ctx.config.enforce_comments if enforce_comments is None else enforce_comments

    for target in ctx.targets:
        pkg_result = PackageResult(
            package=target.name, path=target.path, output=target.output_path,
        )
        result.packages.append(pkg_result)
        try:
            records = load_records(ctx.root / target.docs_path)
            pkg_result.missing = verify_swagger_docs(
                target.name,
                ctx.root / target.output_path,
                records,
                enforce_comments=enforce,
                formatter=ctx.formatter,
            )
        except MissingDocsError as e:
            pkg_result.missing = e.report
            _fail(pkg_result, e)
            continue
        except (ConfigError, SwaggerDocsError) as e:
            _fail(pkg_result, e)
            continue
        pkg_result.ok = True

    return result


def run_check(
    config_path: Path | None = None,
    packages: list[str] | None = None,
) -> RunResult:
    """Report missing descriptions without generating anything.

    A package fails when any non-exempt entry lacks a description.
    """
    result = RunResult(operation="check")
    ctx = _prepare(result, config_path, packages)
    if ctx is None:
        return result

    for target in ctx.targets:
        pkg_result = PackageResult(package=target.name, path=target.path)
        result.packages.append(pkg_result)
        try:
            records = load_records(ctx.root / target.docs_path)
        except ConfigError as e:
            _fail(pkg_result, e)
            continue
        report = check_docs_exist(records)
        pkg_result.missing = report
        pkg_result.ok = report.count == 0
        if report.count:
            pkg_result.error = f"{report.count} missing doc(s)"
            pkg_result.error_type = "MissingDocsError"

    return result
