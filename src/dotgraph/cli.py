"""Command-line interface for dotgraph."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import graphviz
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .core import RendererConfig
from .visualization import GraphRenderer

# Setup rich console
console = Console()


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """Setup logging with rich handler."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(package_name="dotgraph")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """dotgraph - render GraphViz DOT files.

    \b
    Examples:
      dotgraph check                          # Is GraphViz installed?
      dotgraph render graph.dot               # Writes graph.png
      dotgraph render graph.dot -f svg -o out/graph.svg
      dotgraph render graph.dot --path /opt/graphviz/bin
    """
    setup_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument(
    "source",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file path (default: SOURCE with the format as extension)",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(sorted(graphviz.FORMATS)),
    default="png",
    help="Output format (default: png)",
)
@click.option(
    "--path",
    "renderer_path",
    type=click.Path(exists=True, file_okay=False),
    help="Directory containing the GraphViz executables, if not on the PATH",
)
@click.pass_context
def render(
    ctx: click.Context,
    source: Path,
    output: Path | None,
    output_format: str,
    renderer_path: str | None,
) -> None:
    """Render a DOT file to an image.

    \b
    Examples:
      dotgraph render graph.dot
      dotgraph render graph.dot --format pdf --output graph.pdf
    """
    try:
        renderer = GraphRenderer(RendererConfig(path=renderer_path))
        output_file = output or source.with_suffix(f".{output_format}")

        if ctx.obj.get("verbose", False):
            console.print(f"Rendering {source} with {renderer.config.executable}...", style="blue")

        output_path = renderer.render_file(source, output_file, output_format)
        console.print(f"{output_path}", style="green")

    except Exception as e:
        console.print(f"Error: {e}", style="red")
        if logging.getLogger().level == logging.DEBUG:
            console.print_exception()
        sys.exit(1)


@cli.command("check")
@click.option(
    "--path",
    "renderer_path",
    type=click.Path(exists=True, file_okay=False),
    help="Directory containing the GraphViz executables, if not on the PATH",
)
def check_installation(renderer_path: str | None) -> None:
    """Check that GraphViz can be executed."""
    renderer = GraphRenderer(RendererConfig(path=renderer_path))
    found = renderer.check_installation()

    table = Table(title="GraphViz Installation")
    table.add_column("Check", style="cyan")
    table.add_column("Status", style="green")

    table.add_row("Executable", renderer.config.executable)
    table.add_row("Found", "yes" if found else "[red]no[/red]")
    table.add_row("Engines", ", ".join(renderer.get_available_engines()) or "-")

    console.print(table)

    if not found:
        console.print("\nInstall Graphviz: https://graphviz.org/download/", style="yellow")
        sys.exit(1)


def main() -> None:
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
