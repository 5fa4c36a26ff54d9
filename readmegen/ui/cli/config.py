"""
CLI commands for configuration.

Thin wrappers over ``readmegen.core.use_cases.config_show`` and
``readmegen.core.services.env_template``.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click


@click.group("config")
def config() -> None:
    """Config — inspect settings and scaffold a .env file."""


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def show(ctx: click.Context, as_json: bool) -> None:
    """Show the effective configuration and where the API key comes from."""
    from readmegen.core.use_cases.config_show import show_config

    report = show_config(settings_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        if report.error:
            sys.exit(1)
        return

    if report.error:
        click.secho(f"❌ {report.error}", fg="red")
        sys.exit(1)

    cfg = report.config
    assert cfg is not None

    click.secho("\n⚙️  readmegen configuration", fg="cyan", bold=True)
    click.echo(f"   Settings file: {report.settings_path or 'none'}")
    click.echo()

    click.secho("   API key sources:", fg="white", bold=True)
    _source_line("settings file", report.settings_key)
    for name, masked in report.env_keys.items():
        _source_line(name, masked)
    click.echo(f"   → using: {report.api_key_source}")
    click.echo()

    click.secho("   Effective values:", fg="white", bold=True)
    click.echo(f"     • API key:   {cfg.masked_key()}")
    click.echo(f"     • Model:     {cfg.model}")
    click.echo(f"     • Auto open: {cfg.auto_open}")
    click.echo(f"     • Endpoint:  {cfg.endpoint}")
    click.echo()


@config.command("env-template")
@click.argument("path", required=False, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing .env file.")
def env_template(path: Path | None, force: bool) -> None:
    """Create a .env template in PATH (default: current directory)."""
    from readmegen.core.services.env_template import create_env_template

    workspace = (path or Path.cwd()).resolve()
    try:
        env_path = create_env_template(workspace, overwrite=force)
    except FileExistsError:
        click.secho(f"⚠️  {workspace / '.env'} already exists. Use --force to overwrite it.", fg="yellow")
        sys.exit(1)
    except OSError as e:
        click.secho(f"❌ Failed to create .env file: {e}", fg="red")
        sys.exit(1)

    click.secho(f"✅ .env template created: {env_path}", fg="green")
    click.echo("   Edit GROQ_API_KEY, then run 'readmegen generate'.")


def _source_line(label: str, masked: str | None) -> None:
    if masked:
        click.secho(f"     ✅ {label}: {masked}", fg="green")
    else:
        click.echo(f"     ❌ {label}: not set")
