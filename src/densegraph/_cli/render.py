"""Rich rendering utilities for the show command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from densegraph._graph import DenseGraph


def render_graph_table(graph: DenseGraph[str], console: Console) -> None:
    """Render each vertex with its degree and neighbours as a Rich table.

    Args:
        graph: The graph to render.
        console: Rich Console to output to.

    """
    if not graph.vertices_count:
        console.print("[dim]Graph has no vertices[/dim]")
        return

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Vertex", style="bold")
    table.add_column("Degree", justify="right")
    table.add_column("Neighbours")

    for vertex in graph.vertices:
        neighbours = graph.neighbours(vertex)
        table.add_row(
            escape(vertex),
            str(len(neighbours)),
            escape(", ".join(neighbours)) if neighbours else "[dim]-[/dim]",
        )

    console.print(table)


def render_summary(graph: DenseGraph[str], console: Console) -> None:
    """Print the vertex and edge counts against the capacity."""
    console.print(
        f"[bold]{graph.vertices_count}[/bold] vertices, "
        f"[bold]{graph.edges_count}[/bold] edges "
        f"[dim](capacity {graph.capacity})[/dim]",
    )
