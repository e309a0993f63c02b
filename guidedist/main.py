"""
guidedist — CLI entrypoint.

Usage:
    guidedist --help
    guidedist create              # new project: write CLAUDE.md
    guidedist append              # existing project: append to CLAUDE.md
    guidedist show                # print the guidelines
    guidedist config check
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from guidedist import __version__
from guidedist.core.models.guideline import InstallMode
from guidedist.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="guidedist")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to guidedist.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """guidedist — install coding guidelines into your assistant's instruction file."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(debug=debug, verbose=verbose, quiet=quiet)


# ── Install ─────────────────────────────────────────────────────


def _run_install(
    ctx: click.Context,
    mode: InstallMode,
    target: str | None,
    source: str | None,
    overwrite: bool,
    as_json: bool,
) -> None:
    """Shared body of ``create`` and ``append``."""
    from guidedist.core.use_cases.install import run_install

    result = run_install(
        mode,
        target=target,
        source=source,
        overwrite=overwrite,
        config_path=ctx.obj.get("config_path"),
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)
        return

    outcome = result.outcome
    if not result.ok or outcome is None:
        click.secho(f"❌ {result.error or 'Install did not complete'}", fg="red", err=True)
        sys.exit(1)

    if ctx.obj.get("quiet"):
        return

    if mode is InstallMode.APPEND:
        click.secho(f"✅ Appended guidelines to {outcome.path}", fg="green", bold=True)
    elif outcome.replaced:
        click.secho(f"✅ Replaced {outcome.path} with guidelines", fg="green", bold=True)
    else:
        click.secho(f"✅ Wrote guidelines to {outcome.path}", fg="green", bold=True)
    click.echo(f"   Source: {outcome.source_uri}")
    click.echo(f"   Bytes:  {outcome.bytes_written}")


@cli.command()
@click.argument("target", required=False)
@click.option("--source", "-s", default=None, help="Guideline source URI (http, https or file).")
@click.option("--force", "-f", is_flag=True, help="Overwrite the target if it already has content.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def create(
    ctx: click.Context,
    target: str | None,
    source: str | None,
    force: bool,
    as_json: bool,
) -> None:
    """Write the guidelines to TARGET (new project).

    Refuses to touch an existing non-empty TARGET unless --force is given.
    """
    _run_install(ctx, InstallMode.CREATE, target, source, force, as_json)


@cli.command()
@click.argument("target", required=False)
@click.option("--source", "-s", default=None, help="Guideline source URI (http, https or file).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def append(
    ctx: click.Context,
    target: str | None,
    source: str | None,
    as_json: bool,
) -> None:
    """Append the guidelines to TARGET after a blank line (existing project)."""
    _run_install(ctx, InstallMode.APPEND, target, source, False, as_json)


@cli.command()
@click.option("--source", "-s", default=None, help="Guideline source URI (http, https or file).")
@click.pass_context
def show(ctx: click.Context, source: str | None) -> None:
    """Print the guidelines to stdout without writing any file."""
    from guidedist.core.config.loader import ConfigError, load_settings
    from guidedist.core.errors import FetchError
    from guidedist.core.services.fetch import fetch_guideline

    try:
        settings = load_settings(ctx.obj.get("config_path"))
        doc = fetch_guideline(
            source or settings.source,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )
    except (ConfigError, FetchError) as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    click.echo(doc.text, nl=False)


# ── Config ──────────────────────────────────────────────────────


@cli.group()
def config() -> None:
    """Configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate guidedist.yml configuration."""
    from guidedist.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid and result.settings is not None:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File:    {result.config_path}")
        click.echo(f"   Source:  {result.settings.source}")
        click.echo(f"   Target:  {result.settings.target}")
        click.echo(f"   Timeout: {result.settings.timeout}s")
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


if __name__ == "__main__":
    cli()
