"""Graph module providing the dense graph representation.

This module contains:
- DenseGraph[T]: An undirected graph backed by a fixed-capacity adjacency matrix
- UndirectedGraph[T]: The structural protocol undirected graphs implement
"""

from ._dense_graph import DenseGraph
from ._protocols import Comparable, UndirectedGraph

__all__ = ["Comparable", "DenseGraph", "UndirectedGraph"]
