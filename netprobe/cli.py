#!/usr/bin/env python3
"""netprobe CLI - Command-line interface for netprobe."""

import click

from netprobe.commands.report_cmd import run_check, run_interfaces, run_report
from netprobe.models.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    ENV_LOG_LEVEL,
    ENV_PROBE_TIMEOUT,
)
from netprobe.utils.env import EnvVarTypeError, get_env
from netprobe.utils.logger import Logger

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

timeout_option = click.option(
    "--timeout",
    "-t",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help=(
        "Reachability probe timeout in seconds "
        f"(default: ${ENV_PROBE_TIMEOUT} or {DEFAULT_PROBE_TIMEOUT_SECONDS})"
    ),
)


def _resolve_timeout(timeout: float | None) -> float:
    """Return the CLI timeout, else the environment value, else the default."""
    if timeout is not None:
        return timeout
    try:
        value = get_env(
            ENV_PROBE_TIMEOUT,
            default=DEFAULT_PROBE_TIMEOUT_SECONDS,
            as_type=float,
            log=True,
        )
    except EnvVarTypeError as e:
        raise click.UsageError(str(e)) from e
    if value <= 0:
        raise click.UsageError(f"{ENV_PROBE_TIMEOUT} must be greater than zero")
    return value


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help=f"Diagnostic verbosity (default: ${ENV_LOG_LEVEL} or {DEFAULT_LOG_LEVEL})",
)
@click.pass_context
def netprobe(ctx, log_level):
    """List network interfaces and check internet reachability."""
    level = log_level or get_env(ENV_LOG_LEVEL, default=DEFAULT_LOG_LEVEL)
    if level.upper() not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        raise click.UsageError(f"{ENV_LOG_LEVEL} must be one of {choices}")

    # Diagnostics go to stderr so the report on stdout stays clean
    Logger.configure(
        level=level,
        output="stderr",
        timestamps=True,
        include_location=True,
        color=True,
    )

    if ctx.invoked_subcommand is None:
        run_report(timeout_seconds=_resolve_timeout(None))


@netprobe.command()
@timeout_option
@click.option("--verbose", "-v", is_flag=True, help="Show debug diagnostics")
def report(timeout, verbose):
    """Show interfaces, then internet reachability."""
    if verbose:
        Logger.set_level("DEBUG")

    run_report(timeout_seconds=_resolve_timeout(timeout))


@netprobe.command()
@click.option("--name", "-n", default=None, help="Only show this interface")
def interfaces(name):
    """Show non-loopback interfaces with IPv4 and MAC addresses."""
    run_interfaces(name=name)


@netprobe.command()
@timeout_option
def check(timeout):
    """Check internet reachability only."""
    run_check(timeout_seconds=_resolve_timeout(timeout))


@netprobe.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display netprobe version information."""
    from netprobe.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    netprobe()
