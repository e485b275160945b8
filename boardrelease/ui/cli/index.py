"""
CLI commands for the package index.

Thin wrappers over ``boardrelease.core.services.index_file``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


def _resolve_index_path(ctx: click.Context) -> tuple[Path, int]:
    """Index path and package number from config, or exit with the error."""
    from boardrelease.core.config.loader import ConfigError
    from boardrelease.core.use_cases.release import resolve_config

    try:
        config, root = resolve_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    return root / config.index_file, config.package


@click.group()
def index() -> None:
    """Package index — inspect and recover the board-manager JSON."""


@index.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """List platform records in index order (first is the default)."""
    from boardrelease.core.services.errors import IndexFileError
    from boardrelease.core.services.index_file import get_platforms, read_index

    path, package = _resolve_index_path(ctx)
    try:
        platforms = get_platforms(read_index(path).data, package)
    except IndexFileError as e:
        if as_json:
            click.echo(json.dumps({"error": str(e)}, indent=2))
        else:
            click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    rows = [
        {
            "version": p.get("version", ""),
            "archiveFileName": p.get("archiveFileName", ""),
            "size": p.get("size", ""),
        }
        for p in platforms
    ]

    if as_json:
        click.echo(json.dumps({"index": str(path), "platforms": rows}, indent=2))
        return

    if not rows:
        click.secho(f"No platforms in {path.name}", fg="yellow")
        return

    click.secho(f"📦 {path.name} ({len(rows)} platforms):", fg="cyan", bold=True)
    for row in rows:
        click.echo(f"   {row['version']:<10} {row['archiveFileName']}  ({row['size']} bytes)")


@index.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_context
def restore(ctx: click.Context, yes: bool) -> None:
    """Overwrite the index with its .bak copy from the last release."""
    from boardrelease.core.services.errors import IndexFileError
    from boardrelease.core.services.index_file import backup_path_for, restore_index

    path, _ = _resolve_index_path(ctx)
    if not yes:
        click.confirm(f"Replace {path.name} with {backup_path_for(path).name}?", abort=True)

    try:
        bak = restore_index(path)
    except IndexFileError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ Restored {path.name} from {bak.name}", fg="green", bold=True)
