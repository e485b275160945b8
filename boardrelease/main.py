"""
boardrelease — CLI entrypoint.

Usage:
    python -m boardrelease.main --help
    python -m boardrelease.main release
    python -m boardrelease.main release --dry-run
    python -m boardrelease.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from boardrelease import __version__
from boardrelease.core.observability.logging_config import (
    settings_from_cli,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="boardrelease")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to release.yml (default: auto-detect, else built-in defaults).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """boardrelease — cut board-support package releases."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(settings_from_cli(debug, verbose, quiet, os.environ))


@cli.command()
@click.option("--dry-run", is_flag=True, help="Derive the next version only; write nothing.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def release(ctx: click.Context, dry_run: bool, as_json: bool) -> None:
    """Archive the board folder and publish it in the package index.

    Examples:

        boardrelease release

        boardrelease --config boards/release.yml release --dry-run
    """
    from boardrelease.core.use_cases.release import run_release

    result = run_release(config_path=ctx.obj.get("config_path"), dry_run=dry_run)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if dry_run:
        click.echo(f"would zip {result.archive_name}")
        click.echo(f"version {result.previous_version} -> {result.version}")
        return

    click.echo(f"zipped {result.archive_name}")
    click.echo(f"size {result.size}")
    click.echo(f"checksum {result.checksum}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def version(ctx: click.Context, as_json: bool) -> None:
    """Show the latest released version and the one that comes next."""
    from boardrelease.core.use_cases.release import run_release

    result = run_release(config_path=ctx.obj.get("config_path"), dry_run=True)

    if as_json:
        if result.error:
            click.echo(json.dumps({"error": result.error}, indent=2))
            sys.exit(1)
        click.echo(json.dumps({"latest": result.previous_version, "next": result.version}, indent=2))
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    click.echo(f"latest {result.previous_version}")
    click.echo(f"next   {result.version}")


@cli.group()
def config() -> None:
    """Release configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate release.yml configuration."""
    from boardrelease.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Platform: {result.config.platform.name}")
        click.echo(f"   Index:    {result.config.index_file}")
        click.echo(f"   Folder:   {result.config.folder}")
        click.echo(f"   Boards:   {len(result.config.platform.boards)}")
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
        sys.exit(1)


# ── Register sub-command groups from boardrelease/ui/cli/ ──────────

from boardrelease.ui.cli.index import index  # noqa: E402

cli.add_command(index)


if __name__ == "__main__":
    cli()
