"""
Command-line interface for Gentoo Fetch.

Prints the Gentoo logo and a summary of the running host.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gentoo_fetch import __version__
from gentoo_fetch.collectors import CollectionError, get_collector, list_collectors
from gentoo_fetch.config import Config, ConfigError
from gentoo_fetch.core import FetchCore
from gentoo_fetch.render import Renderer

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def setup_logging(level: str) -> None:
    """Configure logging with rich handler."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gentoo-fetch")
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "-V",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Colorize the logo and labels (--color also colors piped output)",
)
@click.option(
    "--gcc",
    "show_gcc",
    is_flag=True,
    help="Also show the gcc version",
)
@click.pass_context
def main(
    ctx: click.Context,
    config: Path | None,
    verbose: bool,
    color: bool | None,
    show_gcc: bool,
) -> None:
    """
    Gentoo Fetch - System information display for Gentoo Linux.

    Without a subcommand, prints the logo followed by host information.
    """
    ctx.ensure_object(dict)

    try:
        cfg = Config.load(config) if config else Config.load()
    except (ConfigError, yaml.YAMLError) as e:
        raise click.UsageError(f"Invalid configuration: {e}") from e

    if color is not None:
        cfg.color = color
    if show_gcc:
        cfg.show_gcc = True

    log_level = "DEBUG" if verbose else cfg.log_level
    setup_logging(log_level)
    ctx.obj["config"] = cfg
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        fetch(cfg, force_color=color is True)


def fetch(config: Config, force_color: bool = False) -> None:
    """
    Render the logo, collect host information and render it.

    With force_color, styles are emitted even when stdout is not a terminal.
    """
    out, err = console, err_console
    if force_color:
        out = Console(force_terminal=True, highlight=False)
        err = Console(stderr=True, force_terminal=True, highlight=False)

    renderer = Renderer(
        console=out,
        error_console=err,
        color=config.color,
        show_gcc=config.show_gcc,
    )

    renderer.render_logo()
    try:
        record = FetchCore(config).collect()
    except CollectionError as e:
        renderer.render_error(str(e))
        sys.exit(1)
    renderer.render_fields(record)


@main.command("list")
def list_available() -> None:
    """List all available collectors."""
    table = Table(title="Available Collectors", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Fields")
    table.add_column("Description")

    for name in list_collectors():
        cls = get_collector(name)
        table.add_row(name, ", ".join(cls.fields), cls.description)

    console.print()
    console.print(table)


@main.command()
@click.argument("output_path", type=click.Path(path_type=Path))
def init_config(output_path: Path) -> None:
    """
    Generate a sample configuration file.

    Writes every option with its default value under a comment header.
    """
    Config().save(output_path)
    console.print(f"[green]✓ Configuration file created: {output_path}[/]")


if __name__ == "__main__":
    main()
