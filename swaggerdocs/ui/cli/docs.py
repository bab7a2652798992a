"""
CLI commands for swagger doc generation and verification.

Thin wrappers over ``swaggerdocs.core.use_cases.swagger_docs``.
"""

from __future__ import annotations

import json
import sys

import click

_package_option = click.option(
    "--package", "-p", "packages", multiple=True,
    help="Limit to a package (by path or name). Repeatable.",
)
_json_option = click.option(
    "--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.",
)


def _emit_run(result, as_json: bool, verbose: bool = False) -> None:
    """Print a RunResult and exit non-zero if anything failed."""
    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if not result.ok:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    for pkg in result.packages:
        label = f"{pkg.path or pkg.package}"
        if pkg.ok:
            click.secho(f"   ✓ {label}", fg="green", nl=False)
            if pkg.written:
                click.echo(f"  → {pkg.output}" + ("" if pkg.changed else " (unchanged)"))
            else:
                click.echo()
        else:
            click.secho(f"   ✗ {label}", fg="red", nl=False)
            click.echo(f"  [{pkg.error_type}]")
            for line in (pkg.error or "").splitlines()[:20]:
                click.echo(f"     │ {line}")

        if verbose and pkg.ok and pkg.missing and pkg.missing.count:
            click.secho(f"     ⚠️  {pkg.missing.count} missing doc(s)", fg="yellow")
            for line in pkg.missing.listing.splitlines()[:20]:
                click.echo(f"     │ {line}")

    click.echo()
    color = "green" if result.ok else "red"
    total = len(result.packages)
    click.secho(
        f"   Result: {total - result.failed}/{total} {result.operation} ok",
        fg=color,
        bold=True,
    )

    if not result.ok:
        click.echo()
        sys.exit(1)


@click.command("generate")
@_package_option
@click.option("--write", is_flag=True, help="Write to disk (default: preview only).")
@_json_option
@click.pass_context
def generate(ctx: click.Context, packages: tuple[str, ...], write: bool, as_json: bool) -> None:
    """Generate swagger doc files from documentation tables."""
    from swaggerdocs.core.use_cases.swagger_docs import run_generate

    result = run_generate(
        config_path=ctx.obj.get("config_path"),
        packages=list(packages) if packages else None,
        write=write,
    )

    if not write and not as_json and not result.error:
        for pkg in result.packages:
            if pkg.content is None:
                continue
            click.secho(f"📄 Preview: {pkg.output}", fg="cyan", bold=True)
            click.echo("─" * 60)
            lines = pkg.content.decode("utf-8").splitlines()
            for line in lines[:40]:
                click.echo(line)
            if len(lines) > 40:
                click.echo(f"... ({len(lines) - 40} more lines)")
            click.echo("─" * 60)
        click.secho("   (use --write to save to disk)", fg="yellow")

    _emit_run(result, as_json, verbose=ctx.obj.get("verbose", False))


@click.command("verify")
@_package_option
@click.option(
    "--enforce-comments/--no-enforce-comments",
    default=None,
    help="Fail on missing descriptions (default: from config).",
)
@_json_option
@click.pass_context
def verify(
    ctx: click.Context,
    packages: tuple[str, ...],
    enforce_comments: bool | None,
    as_json: bool,
) -> None:
    """Verify checked-in swagger doc files are up to date."""
    from swaggerdocs.core.use_cases.swagger_docs import run_verify

    result = run_verify(
        config_path=ctx.obj.get("config_path"),
        packages=list(packages) if packages else None,
        enforce_comments=enforce_comments,
    )
    _emit_run(result, as_json, verbose=ctx.obj.get("verbose", False))


@click.command("check")
@_package_option
@_json_option
@click.pass_context
def check(ctx: click.Context, packages: tuple[str, ...], as_json: bool) -> None:
    """List types and fields that have no description."""
    from swaggerdocs.core.use_cases.swagger_docs import run_check

    result = run_check(
        config_path=ctx.obj.get("config_path"),
        packages=list(packages) if packages else None,
    )

    if not as_json and not result.error:
        for pkg in result.packages:
            if pkg.missing and pkg.missing.count:
                click.secho(f"📝 {pkg.path}: {pkg.missing.count} missing", fg="yellow", bold=True)
                for line in pkg.missing.listing.splitlines():
                    click.echo(f"   • {line}")
                click.echo()

    _emit_run(result, as_json)
