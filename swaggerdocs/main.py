"""
swaggerdocs — CLI entrypoint.

Usage:
    python -m swaggerdocs.main --help
    python -m swaggerdocs.main generate --write
    python -m swaggerdocs.main verify --enforce-comments
    python -m swaggerdocs.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from swaggerdocs import __version__
from swaggerdocs.core.observability.logging_config import (
    FILE_ENV,
    FILE_LEVEL_ENV,
    resolve_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="swaggerdocs")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to swaggerdocs.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """swaggerdocs — generate and verify Go swagger doc files."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV),
        log_file_level=os.environ.get(FILE_LEVEL_ENV),
    )


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate swaggerdocs.yml and the documentation tables it names."""
    from swaggerdocs.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Packages: {len(result.config.packages)}")
        click.echo(f"   Formatter: {result.config.formatter}")
        click.echo(f"   Enforce comments: {result.config.enforce_comments}")
        for name, status in result.formatters.items():
            mark = "✓" if status["available"] else "✗"
            click.echo(f"   {mark} {name} formatter")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


# ── Register swagger doc commands from swaggerdocs/ui/cli/ ────────

from swaggerdocs.ui.cli.docs import check, generate, verify  # noqa: E402

cli.add_command(generate)
cli.add_command(verify)
cli.add_command(check)


if __name__ == "__main__":
    cli()
