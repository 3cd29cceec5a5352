"""
podenv — CLI entrypoint.

Usage:
    python -m podenv.main --help
    python -m podenv.main generate
    python -m podenv.main check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from podenv import __version__
from podenv.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="podenv")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--manifest",
    "-m",
    "manifest_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to pods.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    manifest_path: str | None,
) -> None:
    """podenv — generate the compile-time pod environment header."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["manifest_path"] = Path(manifest_path) if manifest_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("PODENV_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("PODENV_LOG_FILE"),
        log_file_level=os.environ.get("PODENV_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Header to write (default: Pods-environment.h beside the manifest).",
)
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the header instead of writing it.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(ctx: click.Context, output_path: str | None, to_stdout: bool, as_json: bool) -> None:
    """Generate the environment header from the manifest."""
    from podenv.core.use_cases.generate import generate_header

    result = generate_header(
        manifest_path=ctx.obj.get("manifest_path"),
        output_path=Path(output_path) if output_path else None,
        write=not to_stdout,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    if to_stdout:
        click.echo(result.content, nl=False)
        return

    if not ctx.obj.get("quiet", False):
        click.secho(f"✅ Wrote {result.output_path}", fg="green", bold=True)
        click.echo(f"   Pods: {result.pod_count}")


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate pods.yml without writing anything."""
    from podenv.core.use_cases.check import check_manifest

    result = check_manifest(manifest_path=ctx.obj.get("manifest_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.manifest is not None  # guaranteed when valid
        click.secho("✅ Manifest is valid", fg="green", bold=True)
        click.echo(f"   Target definitions: {len(result.manifest.target_definitions)}")
        click.echo(f"   Pods: {len(result.manifest.pods)}")
        click.echo(f"   Configurations: {', '.join(result.manifest.build_configurations)}")
    else:
        click.secho("❌ Manifest errors:", fg="red", bold=True)
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
