"""Tests for the densegraph CLI."""

import io
import logging
from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from densegraph import DenseGraph
from densegraph._cli import main as cli_main
from densegraph._cli.main import EdgeFormatError, app, build_graph, parse_edge
from densegraph._cli.render import render_graph_table, render_summary

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from a directory whose pyproject.toml sets no capacity."""
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def plain_consoles(monkeypatch: pytest.MonkeyPatch) -> None:
    """Print without colour so assertions see plain text."""
    monkeypatch.setattr(cli_main, "out_console", Console(color_system=None, width=120))
    monkeypatch.setattr(cli_main, "err_console", Console(stderr=True, color_system=None, width=120))


def _render(render: object, graph: DenseGraph[str]) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    render(graph, console)  # type: ignore[operator]
    return buffer.getvalue()


class TestParseEdge:
    def test_valid(self) -> None:
        assert parse_edge("a,b") == ("a", "b")

    def test_strips_whitespace(self) -> None:
        assert parse_edge(" a , b ") == ("a", "b")

    @pytest.mark.parametrize("value", ["a", "a,b,c", ",b", "a,"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(EdgeFormatError, match="Expected format"):
            parse_edge(value)


class TestBuildGraph:
    def test_builds_vertices_and_edges(self) -> None:
        graph = build_graph(3, ["a", "b", "c"], [("a", "b"), ("b", "c")])
        assert graph.vertices == ["a", "b", "c"]
        assert graph.edges_count == 2

    def test_warns_on_rejections(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            graph = build_graph(2, ["a", "a", "b", "c"], [("a", "b"), ("a", "c"), ("a", "a")])

        assert graph.vertices == ["a", "b"]
        assert graph.edges_count == 1
        assert "Skipped duplicate vertex 'a'" in caplog.text
        assert "Skipped vertex 'c': capacity 2 reached" in caplog.text
        assert "Skipped edge 'a,c'" in caplog.text
        assert "Skipped edge 'a,a'" in caplog.text


class TestRender:
    def test_table_lists_degree_and_neighbours(self) -> None:
        graph = build_graph(3, ["a", "b", "c"], [("a", "b"), ("a", "c")])
        output = _render(render_graph_table, graph)
        assert "Vertex" in output
        assert "b, c" in output

    def test_empty_graph(self) -> None:
        output = _render(render_graph_table, DenseGraph[str](2))
        assert "Graph has no vertices" in output

    def test_summary(self) -> None:
        graph = build_graph(4, ["a", "b"], [("a", "b")])
        output = _render(render_summary, graph)
        assert "2 vertices, 1 edges (capacity 4)" in output


class TestShowCommand:
    def test_readable_output(self) -> None:
        result = runner.invoke(app, ["show", "-v", "1", "-v", "2", "-v", "3", "-e", "1,2", "--readable"])
        assert result.exit_code == 0
        assert "1: [2]\n2: [1]\n3: []" in result.stdout
        assert "3 vertices, 1 edges (capacity 10)" in result.stdout

    def test_capacity_option(self) -> None:
        result = runner.invoke(app, ["show", "-c", "1", "-v", "a", "-v", "b", "--readable"])
        assert result.exit_code == 0
        assert "1 vertices, 0 edges (capacity 1)" in result.stdout

    def test_capacity_from_config(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "pyproject.toml").write_text("[tool.densegraph]\ncapacity = 2\n")
        result = runner.invoke(app, ["show", "-v", "a", "-v", "b", "-v", "c"])
        assert result.exit_code == 0
        assert "2 vertices, 0 edges (capacity 2)" in result.stdout

    def test_invalid_config_exits(self, isolated_cwd: Path) -> None:
        (isolated_cwd / "pyproject.toml").write_text("[tool.densegraph]\ncapacity = -3\n")
        result = runner.invoke(app, ["show", "-v", "a"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_invalid_edge_exits(self) -> None:
        result = runner.invoke(app, ["show", "-v", "a", "-e", "a"])
        assert result.exit_code == 1
        assert "Expected format" in result.output
