"""
Command-line interface for Proglist.

This module provides the command-line entry point: scan a directory, annotate
each executable with its package and manual-page summary, and print the table.
"""

import logging
import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from proglist_py import __version__
from proglist_py.config import ProglistConfig
from proglist_py.enricher import Enricher, build_config
from proglist_py.errors import (
    ConflictingMode,
    InvalidDirectory,
    ProglistError,
    UnsupportedDistribution,
)
from proglist_py.platform import default_program_dir
from proglist_py.render import OutputFormat, render
from proglist_py.scanner import scan_directory

# Diagnostics go to stderr, the table owns stdout
console = Console(stderr=True)
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=console, rich_tracebacks=True)],
)
logger = logging.getLogger("proglist")

# Exit status typer uses for command-line usage errors
USAGE_ERROR_STATUS = 2

app = typer.Typer(
    help="List the programs in a directory with their package and description.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def log_error(message: str) -> None:
    """Report an error on the console and in the debug log."""
    logger.debug(message)
    console.print(f"[red]{escape(message)}[/red]")
    return None


def fail(ctx: typer.Context, error: ProglistError) -> NoReturn:
    """Report a fatal error followed by the usage line, and exit 1."""
    log_error(str(error))
    typer.echo(ctx.get_usage(), err=True)
    raise typer.Exit(1)


def configure_logging(verbose: bool, json_logs: bool) -> None:
    if verbose:
        logger.setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    if json_logs:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        logging.basicConfig(
            level=logging.INFO if not verbose else logging.DEBUG,
            format='{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"message": "%(message)s"}',
            datefmt="%Y-%m-%dT%H:%M:%S",
            stream=sys.stderr,
        )
        logger.debug("JSON logging enabled")


def select_format(
    markdown: bool, tabs: bool, default: OutputFormat = OutputFormat.TEXT
) -> OutputFormat:
    """
    Pick the output format from the mode flags.

    Raises:
        ConflictingMode: if both flags are set
    """
    if markdown and tabs:
        raise ConflictingMode("Options --markdown and --tabs are mutually exclusive")
    if markdown:
        return OutputFormat.MARKDOWN
    if tabs:
        return OutputFormat.TSV
    return default


@app.command()
def program_list(
    ctx: typer.Context,
    directory: Annotated[
        Optional[str],
        typer.Argument(
            help="Directory to list. Defaults to the configured directory, "
            "then /usr/bin.",
            show_default=False,
        ),
    ] = None,
    markdown: Annotated[
        bool, typer.Option("--markdown", "-m", help="Output a Markdown table.")
    ] = False,
    tabs: Annotated[
        bool, typer.Option("--tabs", "-t", help="Output tab-separated values.")
    ] = False,
    width: Annotated[
        Optional[int],
        typer.Option("--width", min=1, help="Total output width in columns."),
    ] = None,
    config_file: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Path to the configuration file. "
            "Defaults to ~/.config/proglist/config.yaml.",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output.")
    ] = False,
    json_logs: Annotated[
        bool, typer.Option("--json", help="Output logs in JSON format.")
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show the application version and exit."),
    ] = False,
) -> None:
    """
    List the executables in DIRECTORY with their owning package and summary.
    """
    if version:
        typer.echo(f"Proglist version: {__version__}")
        raise typer.Exit()

    configure_logging(verbose, json_logs)

    config = ProglistConfig.load(config_file)

    # Mode conflicts abort before anything touches the filesystem.
    try:
        fmt = select_format(markdown, tabs, config.format)
    except ConflictingMode as e:
        fail(ctx, e)

    target = directory or config.directory or default_program_dir()
    logger.debug(f"Listing programs in {target}")

    enricher_config = build_config(whatis_command=config.whatis_command)
    if not enricher_config.supported:
        message = "No supported package manager found (looked for dpkg and rpm)"
        if config.require_package_backend:
            fail(ctx, UnsupportedDistribution(message))
        logger.warning(f"{message}; package names will be left empty.")

    try:
        names = scan_directory(target)
    except InvalidDirectory as e:
        fail(ctx, e)

    entries = Enricher(enricher_config).enrich_all(target, names)

    lines = render(
        entries,
        fmt=fmt,
        title=f"Programs in {target}",
        width=width or config.width,
    )
    for line in lines:
        typer.echo(line)


def main() -> None:
    """
    Console-script entry point.

    Usage errors (unknown options, bad values) exit with status 1 instead of
    the default 2. The command itself only ever exits 0 or 1.
    """
    try:
        app()
    except SystemExit as e:
        if e.code == USAGE_ERROR_STATUS:
            sys.exit(1)
        raise


if __name__ == "__main__":
    main()
