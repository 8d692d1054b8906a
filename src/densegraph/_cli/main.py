import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from densegraph._graph import DenseGraph

from .config import ConfigError, get_config
from .render import render_graph_table, render_summary

app = typer.Typer()

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


class EdgeFormatError(ValueError):
    """An --edge argument is not of the form 'A,B'."""


@app.callback()
def callback(
    *,
    verbose: bool = typer.Option(default=False, help="Enable verbose output"),
) -> None:
    """Densegraph CLI."""
    log_level = logging.DEBUG if verbose else logging.INFO

    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=verbose,
                rich_tracebacks=True,
            ),
        ],
    )


def parse_edge(value: str) -> tuple[str, str]:
    """Split an edge argument 'A,B' into its two endpoints.

    Raises:
        EdgeFormatError: If the value does not hold exactly two non-empty names.

    """
    parts = [part.strip() for part in value.split(",")]
    if len(parts) != 2 or not all(parts):  # noqa: PLR2004
        msg = f"Invalid edge '{value}'. Expected format: 'A,B'"
        raise EdgeFormatError(msg)
    return parts[0], parts[1]


def build_graph(capacity: int, vertices: list[str], edges: list[tuple[str, str]]) -> DenseGraph[str]:
    """Build a graph, logging a warning for every rejected vertex or edge."""
    graph = DenseGraph[str](capacity)

    for vertex in vertices:
        if not graph.add_vertex(vertex):
            if graph.has_vertex(vertex):
                logger.warning(f"Skipped duplicate vertex '{vertex}'")
            else:
                logger.warning(f"Skipped vertex '{vertex}': capacity {capacity} reached")

    for first, second in edges:
        if not graph.add_edge(first, second):
            logger.warning(f"Skipped edge '{first},{second}'")

    logger.debug(f"Built graph with {graph.vertices_count} vertices and {graph.edges_count} edges")
    return graph


@app.command()
def show(
    *,
    capacity: Annotated[
        int | None,
        typer.Option("-c", "--capacity", min=0, help="Vertex capacity (defaults to [tool.densegraph] capacity)"),
    ] = None,
    vertex: Annotated[
        list[str] | None,
        typer.Option("-v", "--vertex", help="Vertex to add (repeatable)"),
    ] = None,
    edge: Annotated[
        list[str] | None,
        typer.Option("-e", "--edge", help="Edge to add as 'A,B' (repeatable)"),
    ] = None,
    readable: Annotated[
        bool,
        typer.Option("--readable", help="Print the plain text adjacency listing"),
    ] = False,
) -> None:
    """Build a graph from the given vertices and edges and display it."""
    try:
        if capacity is None:
            capacity = get_config().capacity
        edges = [parse_edge(value) for value in edge or []]
    except (ConfigError, EdgeFormatError) as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    graph = build_graph(capacity, vertex or [], edges)

    if readable:
        out_console.print(graph.to_readable(), markup=False, highlight=False)
    else:
        render_graph_table(graph, out_console)
    render_summary(graph, out_console)


def main() -> None:
    app()
