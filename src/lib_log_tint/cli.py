"""Click command-line interface for lib_log_tint.

Purpose
-------
Offer shell access to the library: colorize existing ``key=value`` logs,
rotate a log file into a gzip archive, preview themes, and show metadata.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv``.
* Commands ``info``, ``colorize``, ``rotate``, ``logdemo``.
* :func:`main` - entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only; every command delegates to the runtime façade or
the application layer. Exit codes and traceback rendering are delegated to
``lib_cli_exit_tools``.
"""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import Sequence, TextIO

import click
import lib_cli_exit_tools
from click.core import ParameterSource

from . import __init__conf__
from . import config as config_module
from .application.pipeline import Pipeline
from .domain import THEMES, default_profile, resolve_theme
from .runtime import logdemo as _logdemo
from .runtime import rotate_and_compress_log, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_THEME_CHOICES = click.Choice(sorted(THEMES), case_sensitive=False)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show full Python tracebacks when a command fails.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load LOG_* settings from the nearest .env file (also enabled by {config_module.DOTENV_ENV_VAR}=1).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Colorize, route, and rotate key=value logs."""

    explicit_dotenv: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit_dotenv = use_dotenv
    if config_module.should_use_dotenv(explicit=explicit_dotenv, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()

    if ctx.get_parameter_source("traceback") is not ParameterSource.DEFAULT:
        lib_cli_exit_tools.config.traceback = traceback
        lib_cli_exit_tools.config.traceback_force_color = traceback

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("colorize", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("source", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@click.option("--theme", type=_THEME_CHOICES, default="default", show_default=True, help="Colour preset.")
@click.option("--compact/--no-compact", default=True, show_default=True, help="Hide keys of well-known fields.")
@click.option("--color/--no-color", "color", default=None, help="Force or suppress ANSI colour (default: auto-detect).")
def cli_colorize(source: TextIO, theme: str, compact: bool, color: bool | None) -> None:
    """Colorize key=value lines from SOURCE (default: stdin) to stdout."""

    pipeline = Pipeline(theme=resolve_theme(theme), profile=replace(default_profile(), compact_mode=compact))
    for line in source:
        click.echo(pipeline.colorize(line.rstrip("\r\n")), color=color)


@cli.command("rotate", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=Path("server.log"), show_default=True)
@click.option("--archive-dir", type=click.Path(file_okay=False, path_type=Path), default=Path("logs"), show_default=True)
def cli_rotate(log_file: Path, archive_dir: Path) -> None:
    """Gzip LOG_FILE into ARCHIVE_DIR and truncate it."""

    archive = rotate_and_compress_log(log_file, archive_dir)
    if archive is None:
        click.echo(f"nothing to rotate: {log_file} is missing or empty")
        return
    click.echo(str(archive))


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    type=click.Choice(["all", *sorted(THEMES)], case_sensitive=False),
    default="all",
    show_default=True,
    help="Preset to preview, or 'all'.",
)
@click.option("--log-file", type=click.Path(dir_okay=False, path_type=Path), default=Path("logdemo.log"), show_default=True)
@click.option("--archive-dir", type=click.Path(file_okay=False, path_type=Path), default=Path("logs"), show_default=True)
def cli_logdemo(theme: str, log_file: Path, archive_dir: Path) -> None:
    """Emit sample events through the console/file fan-out for each theme."""

    selected = sorted(THEMES) if theme.lower() == "all" else [theme.lower()]
    for name in selected:
        click.echo(f"=== Theme: {name} ===")
        result = _logdemo(theme=name, log_file_path=log_file, archive_dir=archive_dir)
        click.echo(f"emitted {len(result['events'])} events to {result['log_file']}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI through ``lib_cli_exit_tools`` and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    so embedding callers keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
