"""Click CLI for refdocs — serve and inspect reference documents."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from refdocs.config.hierarchy import load_config_hierarchy

if TYPE_CHECKING:
    from refdocs.service import RefDocs

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(default_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


@click.group()
@click.version_option(package_name="refdocs")
def cli() -> None:
    """refdocs — cached best-practice reference documents over MCP."""


@cli.command()
@click.option("--resources-dir", type=click.Path(exists=True, file_okay=False), help="Directory holding document files.")
@click.option("--catalog", type=click.Path(exists=True, dir_okay=False), help="Extra catalog YAML.")
@click.option("--ttl", type=float, default=None, help="Cache TTL in seconds.")
@click.option("--name", type=str, default=None, help="MCP server name.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def serve(
    resources_dir: str | None,
    catalog: str | None,
    ttl: float | None,
    name: str | None,
    verbose: int,
) -> None:
    """Run the MCP server over stdio."""
    config = load_config_hierarchy(
        resources_dir=resources_dir,
        catalog=catalog,
        ttl_seconds=ttl,
        server_name=name,
    )
    _setup_logging(verbose, config.get("log_level", "WARNING"))

    from refdocs.server import build_server
    from refdocs.service import RefDocs

    build_server(RefDocs(config=config)).run()


@cli.command("docs")
@click.option("--catalog", type=click.Path(exists=True, dir_okay=False), help="Extra catalog YAML.")
def list_docs(catalog: str | None) -> None:
    """List available documents."""
    from refdocs.service import RefDocs

    refdocs = RefDocs(config=load_config_hierarchy(catalog=catalog))

    table = Table(title="Available Documents", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Tool")
    table.add_column("Description")
    table.add_column("Builtin")

    for info in sorted(refdocs.list_documents(), key=lambda d: d.name):
        table.add_row(
            info.name,
            info.tool_name,
            info.description or "-",
            "yes" if info.builtin else "no",
        )

    console.print(table)


@cli.command()
@click.argument("name")
@click.option("--resources-dir", type=click.Path(exists=True, file_okay=False), help="Directory holding document files.")
@click.option("--catalog", type=click.Path(exists=True, dir_okay=False), help="Extra catalog YAML.")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
def show(name: str, resources_dir: str | None, catalog: str | None, verbose: int) -> None:
    """Print a document the way the MCP tool would serve it."""
    config = load_config_hierarchy(resources_dir=resources_dir, catalog=catalog)
    _setup_logging(verbose, config.get("log_level", "WARNING"))

    from refdocs.errors.exceptions import UnknownDocumentError
    from refdocs.service import RefDocs

    refdocs = RefDocs(config=config)
    try:
        text = refdocs.get(name)
    except UnknownDocumentError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(text, markup=False, highlight=False, soft_wrap=True)

    if verbose >= 1:
        _print_summary(refdocs, name)


def _print_summary(refdocs: RefDocs, name: str) -> None:
    """Print where the served text came from."""
    stats = refdocs.stats()
    snapshot = refdocs.cache.peek(name)

    error_console.print()
    table = Table(title="Cache Summary", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Document", name)
    table.add_row("Served", "[yellow]fallback[/yellow]" if stats.fallbacks else "source")
    if snapshot is not None:
        table.add_row("Source version", str(snapshot.source_version))
    table.add_row("TTL (s)", f"{refdocs.cache.ttl_seconds:.0f}")
    table.add_row("Source reads", str(stats.refreshes))
    error_console.print(table)


def main() -> None:
    """Entry point for the CLI."""
    cli()
