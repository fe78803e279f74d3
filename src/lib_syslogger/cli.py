"""Rich-click command line interface.

Purpose
-------
Offer a ``logger(1)``-style front end to the session orchestrator plus a
colour demo, wrapped by ``lib_cli_exit_tools`` for consistent exit codes and
traceback handling.

Contents
--------
* :func:`cli` - root group (``--traceback``, ``--use-dotenv``).
* ``info`` - metadata banner (also shown when no command is given).
* ``send`` - open a session with the requested options and log one record.
* ``logdemo`` - print one record per severity through the Rich console.
* :func:`main` - entry point used by ``python -m`` and the console script.
"""

from __future__ import annotations

import os
import sys
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click
from rich.console import Console

from . import __init__conf__, config
from .adapters.console.rich_console import RichConsoleAdapter
from .domain.errors import ConfigurationError
from .domain.mask import SeverityMask
from .domain.options import Option
from .domain.palettes import CONSOLE_STYLE_THEMES, resolve_theme
from .domain.priority import Facility, Priority, Severity
from .runtime import summary_info
from .runtime._composition import create_session

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_FACILITY_NAMES = [facility.name.lower() for facility in Facility]
_SEVERITY_NAMES = [severity.name.lower() for severity in Severity]


def _apply_traceback(traceback: bool | None) -> None:
    if traceback is None:
        return
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


def _apply_dotenv(use_dotenv: bool | None) -> None:
    if config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=None,
    help="Show the full Python traceback when a command fails.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load LOG_* variables from the nearest .env (default: ${config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool | None, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    _apply_traceback(traceback)
    _apply_dotenv(use_dotenv)
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""

    click.echo(summary_info(), nl=False)


@cli.command("send", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--ident", "-t", default=None, help="Tag for the record (default: $LOG_IDENT or the program name).")
@click.option(
    "--facility",
    "-f",
    type=click.Choice(_FACILITY_NAMES, case_sensitive=False),
    default=None,
    help="Facility (default: $LOG_FACILITY or user).",
)
@click.option(
    "--severity",
    "-p",
    type=click.Choice(_SEVERITY_NAMES, case_sensitive=False),
    default="notice",
    show_default=True,
    help="Severity of the record.",
)
@click.option("--pid", is_flag=True, help="Include the process id.")
@click.option("--cons", is_flag=True, help="Write to the system console if syslog is unreachable.")
@click.option("--perror", "-s", is_flag=True, help="Mirror the record to standard error.")
@click.option("--nofallback", is_flag=True, help="Fail instead of falling back to standard error.")
@click.option("--nowait", is_flag=True, help="Dispatch in the background.")
@click.option(
    "--upto",
    type=click.Choice(_SEVERITY_NAMES, case_sensitive=False),
    default=None,
    help="Drop records less urgent than this severity.",
)
@click.option(
    "--native",
    type=click.Choice([config.NATIVE_SYSLOG, config.NATIVE_JOURNALD], case_sensitive=False),
    default=None,
    help="Native transport (default: $LOG_NATIVE or syslog).",
)
@click.argument("message", nargs=-1, required=True)
def cli_send(
    *,
    ident: str | None,
    facility: str | None,
    severity: str,
    pid: bool,
    cons: bool,
    perror: bool,
    nofallback: bool,
    nowait: bool,
    upto: str | None,
    native: str | None,
    message: tuple[str, ...],
) -> None:
    """Log MESSAGE once, like logger(1)."""

    options = config.options_from_env()
    requested = (
        (pid, Option.PID),
        (cons, Option.CONS),
        (perror, Option.PERROR),
        (nofallback, Option.NOFALLBACK),
        (nowait, Option.NOWAIT),
    )
    for enabled, flag in requested:
        if enabled:
            options |= flag
    resolved_facility = Facility.from_name(facility) if facility else config.facility_from_env()
    resolved_ident = ident if ident is not None else config.ident_from_env()

    session = create_session(native=(native or config.native_from_env()).lower())
    try:
        session.openlog(resolved_ident, options, resolved_facility)
    except ConfigurationError as exc:
        raise click.UsageError(str(exc)) from exc
    try:
        mask = SeverityMask.up_to(Severity.from_name(upto)) if upto else config.mask_from_env()
        if mask.suppressed:
            session.set_severity_mask(mask)
        session.log(Priority(resolved_facility, Severity.from_name(severity)), " ".join(message))
    finally:
        session.closelog()


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--theme",
    type=click.Choice(["all", *sorted(CONSOLE_STYLE_THEMES)], case_sensitive=False),
    default="all",
    show_default=True,
    help="Palette to preview.",
)
@click.option("--ident", default="logdemo", show_default=True, help="Tag shown in the demo records.")
def cli_logdemo(*, theme: str, ident: str) -> None:
    """Print one record per severity in the chosen console theme(s)."""

    themes = sorted(CONSOLE_STYLE_THEMES) if theme.lower() == "all" else [theme.lower()]
    console = Console(file=sys.stdout, force_terminal=True, soft_wrap=True)
    for name in themes:
        click.echo(f"=== Theme: {name} ===")
        adapter = RichConsoleAdapter(console=console, styles=resolve_theme(name), ident=ident)
        for severity in Severity:
            adapter.log(Priority(Facility.USER, severity), f"{severity.name.lower()} sample record")
        click.echo(f"emitted {len(Severity)} records")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through ``lib_cli_exit_tools`` and return the exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = lib_cli_exit_tools.config.traceback
    previous_force_color = lib_cli_exit_tools.config.traceback_force_color
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else sys.argv[1:],
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
