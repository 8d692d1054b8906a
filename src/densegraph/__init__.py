"""Undirected dense graph backed by a fixed-capacity adjacency matrix."""

__all__ = [
    "Comparable",
    "DenseGraph",
    "UndirectedGraph",
]

from ._graph import Comparable, DenseGraph, UndirectedGraph
