"""
Command-line interface for depcycle.

Main Commands:
    check: Run a circular dependency pass over a stats JSON document

Exit codes:
    0: the pass recorded no errors
    1: the pass recorded errors (e.g. ``--fail-on-error`` and a cycle was found)
    2: the options or the stats document could not be used

Example Usage:
    $ depcycle check stats.json
    $ depcycle check stats.json --exclude node_modules --fail-on-error
    $ depcycle check stats.json --config depcycle.json --format json
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .. import __version__
from ..core.api import CircularDependencyPlugin
from ..core.config import DetectorOptions
from ..core.types import OutputFormat
from ..utils.error_handling import DepcycleError, describe_error
from ..utils.formatter import format_result, render_highlight_console
from ..utils.logging_config import LogFormat, LogLevel, configure_logging
from ..utils.stats_loader import load_stats

EXIT_CYCLE_ERRORS = 1
EXIT_USAGE = 2


@click.group()
@click.version_option(__version__, prog_name="depcycle")
def cli() -> None:
    """depcycle - Circular dependency detection for bundler module graphs"""
    pass


@cli.command("check")
@click.argument("stats_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--include", default=None, help="Only modules whose name matches this regex are checked")
@click.option("--exclude", default=None, help="Modules whose name matches this regex are ignored")
@click.option(
    "--fail-on-error",
    is_flag=True,
    default=False,
    help="Report cycles as errors instead of warnings",
)
@click.option(
    "--allow-async-cycles",
    is_flag=True,
    default=False,
    help="Ignore dynamic import edges when searching for cycles",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON options file",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Log level",
)
@click.option("--log-file", default=None, help="Log file path")
@click.option(
    "--log-format",
    type=click.Choice([e.value for e in LogFormat]),
    default=LogFormat.SIMPLE.value,
    help="Log format",
)
def check_cmd(
    stats_file: Path,
    include: str | None,
    exclude: str | None,
    fail_on_error: bool,
    allow_async_cycles: bool,
    config_file: Path | None,
    fmt: str,
    debug: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
) -> None:
    """Check a stats JSON document for circular dependencies."""
    if debug:
        log_level = "DEBUG"

    configure_logging(
        level=LogLevel(log_level),
        format_type=LogFormat(log_format),
        log_file=Path(log_file) if log_file else None,
        enable_file=bool(log_file),
        enable_console=True,
    )

    try:
        base = DetectorOptions.from_file(config_file) if config_file else DetectorOptions()
        options = base.merged(
            include=include,
            exclude=exclude,
            # unset flags keep the value from --config
            fail_on_error=fail_on_error or None,
            allow_async_cycles=allow_async_cycles or None,
        )
        compilation = load_stats(stats_file)
    except DepcycleError as e:
        click.echo(f"Error: {describe_error(e)}", err=True)
        sys.exit(EXIT_USAGE)

    CircularDependencyPlugin(options).run(compilation)

    output = OutputFormat(fmt)
    if output == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(compilation)
    else:
        sys.stdout.write(format_result(compilation, output))
        sys.stdout.write("\n")

    if compilation.has_errors:
        sys.exit(EXIT_CYCLE_ERRORS)


def main() -> None:
    cli(prog_name="depcycle")


if __name__ == "__main__":
    main()
