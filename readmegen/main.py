"""
readmegen — CLI entrypoint.

Usage:
    python -m readmegen.main --help
    readmegen generate
    readmegen tree --ignore coverage,docs
    readmegen config show
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from readmegen import __version__
from readmegen.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    cli_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="readmegen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to readmegen.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """readmegen — generate a project README with AI."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=cli_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
        quiet_third_party=not debug,
    )


@cli.command()
@click.argument("path", required=False, type=click.Path(exists=True, path_type=Path))
@click.option("--overview", default=None, help="Project overview (skips step 1).")
@click.option("--repo", "repo_link", default=None, help="GitHub repository link (skips step 2).")
@click.option("--ignore", "extra_ignores", default=None, help="Comma-separated names to ignore (skips step 3).")
@click.option(
    "--on-conflict",
    type=click.Choice(["overwrite", "backup", "cancel"]),
    default=None,
    help="What to do if README.md exists (default: ask).",
)
@click.option("--yes", "-y", "non_interactive", is_flag=True, help="Never prompt; requires --repo.")
@click.option("--api-key", default=None, help="API key (overrides settings and environment).")
@click.option("--model", default=None, help="Model name (overrides settings and environment).")
@click.option("--open/--no-open", "auto_open", default=None, help="Open README.md after saving.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    path: Path | None,
    overview: str | None,
    repo_link: str | None,
    extra_ignores: str | None,
    on_conflict: str | None,
    non_interactive: bool,
    api_key: str | None,
    model: str | None,
    auto_open: bool | None,
    as_json: bool,
) -> None:
    """Generate README.md for PATH (default: current directory).

    Examples:

        readmegen generate

        readmegen generate ./my-app --repo https://github.com/me/my-app

        readmegen generate -y --repo https://github.com/me/app --on-conflict backup
    """
    from readmegen.adapters import PromptInputProvider, StaticInputProvider, resolve_workspace
    from readmegen.core.errors import ConfigError, ValidationError
    from readmegen.core.models.generation import ConflictDecision
    from readmegen.core.use_cases.generate import generate_readme, retry_persistence

    workspace = resolve_workspace(path)
    conflict = ConflictDecision(on_conflict) if on_conflict else None

    try:
        config = _resolve_config(ctx, workspace, api_key=api_key, model=model, auto_open=auto_open)
    except ConfigError as e:
        _fail(str(e), as_json)

    if non_interactive and config.has_api_key:
        try:
            provider = StaticInputProvider.from_values(
                workspace_root=workspace,
                repo_link=repo_link,
                overview=overview,
                extra_ignore_names=extra_ignores,
                conflict=conflict or ConflictDecision.CANCEL,
            )
        except ValidationError as e:
            _fail(str(e), as_json)
    elif non_interactive:
        # generate_readme fails on the missing key before reading any input
        provider = StaticInputProvider(None)
    else:
        provider = PromptInputProvider(
            workspace,
            overview=overview,
            repo_link=repo_link,
            extra_ignores=extra_ignores,
            conflict=conflict,
        )

    interactive = not non_interactive and not as_json

    while True:
        if not as_json and not ctx.obj.get("quiet"):
            click.secho(f"\n📝 Generating README for {workspace}", fg="cyan", bold=True)

        result = generate_readme(provider, config, opener=click.launch)

        while interactive and result.can_retry_save:
            _report_failure(result)
            if not click.confirm("Retry saving README.md?", default=False):
                sys.exit(1)
            result = retry_persistence(result, provider, config, opener=click.launch)

        if interactive and result.error:
            _report_failure(result)
            if result.error_kind not in ("configuration", "validation") and click.confirm(
                "Try again?", default=False,
            ):
                continue
            sys.exit(1)
        break

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        if result.error:
            sys.exit(1)
        return

    if result.cancelled:
        click.secho("⊘ Cancelled — README.md left untouched.", fg="yellow")
        return

    if result.error:
        _report_failure(result)
        sys.exit(1)

    assert result.outcome is not None
    for warning in result.warnings:
        click.secho(f"   ⚠️  {warning}", fg="yellow")
    if result.outcome.backup_path:
        click.secho(f"   💾 Backup created: {result.outcome.backup_path.name}", fg="cyan")
    click.secho(f"✅ README.md generated successfully: {result.outcome.written_path}", fg="green", bold=True)
    click.echo()


@cli.command()
@click.argument("path", required=False, type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.option("--ignore", "extra_ignores", default=None, help="Comma-separated names to ignore.")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Write the tree (as markdown) to a file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def tree(path: Path | None, extra_ignores: str | None, output: Path | None, as_json: bool) -> None:
    """Print the folder structure of PATH (default: current directory).

    Examples:

        readmegen tree

        readmegen tree src --ignore fixtures,docs

        readmegen tree -o FOLDER_STRUCTURE.md
    """
    from readmegen.core.errors import FileSystemError
    from readmegen.core.models.request import parse_ignore_names
    from readmegen.core.services.tree import render_folder_structure

    root = (path or Path.cwd()).resolve()
    try:
        result = render_folder_structure(root, parse_ignore_names(extra_ignores))
    except FileSystemError as e:
        _fail(str(e), as_json)

    if output is not None:
        try:
            output.write_text(result.to_markdown() + "\n", encoding="utf-8")
        except OSError as e:
            _fail(f"Cannot write {output}: {e.strerror or e}", as_json)

    if as_json:
        data = result.to_dict()
        if output is not None:
            data["output"] = str(output)
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    if output is not None:
        click.secho(f"✅ Folder structure written to {output}", fg="green")
    else:
        click.echo(result.to_text())

    for skipped in result.skipped:
        click.secho(f"⚠️  Skipped {skipped.path}: {skipped.reason}", fg="yellow", err=True)


def _resolve_config(
    ctx: click.Context,
    workspace: Path,
    **overrides: object,
):
    """Settings file + CLI overrides > environment (+ .env) > defaults."""
    from readmegen.core.config.loader import find_settings_file, load_environment, load_settings
    from readmegen.core.config.resolver import resolve_config

    settings_path: Path | None = ctx.obj.get("config_path") or find_settings_file(workspace)
    settings = load_settings(settings_path).as_source()
    settings.update({k: v for k, v in overrides.items() if v is not None})

    return resolve_config(settings, load_environment(workspace))


def _report_failure(result) -> None:
    click.secho(f"❌ Failed to generate README: {result.error}", fg="red")
    for warning in result.warnings:
        click.secho(f"   ⚠️  {warning}", fg="yellow")
    log_file = os.environ.get(ENV_LOG_FILE)
    if log_file:
        click.echo(f"   Details in {log_file}")
    else:
        click.echo("   Re-run with --debug for details.")


def _fail(message: str, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps({"status": "failed", "error": message}, indent=2))
    else:
        click.secho(f"❌ {message}", fg="red")
    sys.exit(1)


# ── Register sub-command groups from readmegen/ui/cli/ ───────────

from readmegen.ui.cli.config import config  # noqa: E402

cli.add_command(config)


if __name__ == "__main__":
    cli()
