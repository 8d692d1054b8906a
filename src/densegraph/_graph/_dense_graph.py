"""Undirected graph backed by a fixed-capacity adjacency matrix."""

import logging
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from ._protocols import Comparable

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10

T = TypeVar("T", bound=Comparable)


class DenseGraph(Generic[T]):
    """An undirected graph stored as a square boolean adjacency matrix.

    A dense graph is a graph G = (V, E) in which |E| = O(|V|^2), so the
    O(capacity^2) matrix pays for itself with O(1) edge lookups.

    The matrix is allocated once with side ``capacity`` and never resized.
    Each active vertex owns one matrix slot in ``[0, capacity)`` for as long
    as it stays in the graph; slots of removed vertices are reused.

    The vertex list is the single source of truth: the slot of a vertex is
    looked up by its position in ``_vertices`` right before every matrix
    access, and removing a vertex shifts the positions of the ones after it.

    Mutations return ``False`` instead of raising when a vertex is missing,
    a vertex or edge already exists, or the capacity is exhausted. A rejected
    mutation leaves the graph untouched.

    Attributes:
        _capacity: Maximum number of vertices.
        _vertices: Active vertices in insertion order.
        _slots: Matrix slot of each vertex, parallel to ``_vertices``.
        _free_slots: Unowned slots, the next one to hand out last.
        _matrix: ``_matrix[i][j]`` is True if an edge was recorded from slot i to j.
        _edges_count: Number of undirected edges.

    Example:
        >>> graph = DenseGraph[str](capacity=3)
        >>> graph.add_vertices(["a", "b", "c"])
        3
        >>> graph.add_edge("a", "b")
        True
        >>> graph.neighbours("b")
        ['a']

    """

    __slots__ = ("_capacity", "_edges_count", "_free_slots", "_matrix", "_slots", "_vertices")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            msg = f"capacity must be an int, got {type(capacity).__name__}"
            raise TypeError(msg)
        if capacity < 0:
            msg = f"capacity must be non-negative, got {capacity}"
            raise ValueError(msg)

        self._capacity = capacity
        self._edges_count = 0
        self._vertices: list[T] = []
        self._slots: list[int] = []
        self._free_slots: list[int] = list(reversed(range(capacity)))
        self._matrix: list[list[bool]] = [[False] * capacity for _ in range(capacity)]

    def _index_of(self, vertex: T) -> int:
        """Return the position of a vertex in the vertex list, or -1."""
        for index, candidate in enumerate(self._vertices):
            if candidate == vertex:
                return index
        return -1

    def _slot_of(self, vertex: T) -> int:
        """Return the matrix slot owned by a vertex, or -1."""
        index = self._index_of(vertex)
        if index == -1:
            return -1
        return self._slots[index]

    def _edge_exists(self, slot1: int, slot2: int) -> bool:
        # Either direction counts as an edge.
        return self._matrix[slot1][slot2] or self._matrix[slot2][slot1]

    def _set_edge(self, slot1: int, slot2: int, *, value: bool) -> None:
        self._matrix[slot1][slot2] = value
        self._matrix[slot2][slot1] = value

    @property
    def capacity(self) -> int:
        """Maximum number of vertices the graph can hold."""
        return self._capacity

    @property
    def vertices_count(self) -> int:
        """Number of vertices in the graph."""
        return len(self._vertices)

    @property
    def edges_count(self) -> int:
        """Number of undirected edges in the graph."""
        return self._edges_count

    @property
    def vertices(self) -> list[T]:
        """Snapshot of the vertices in insertion order."""
        return list(self._vertices)

    def add_vertex(self, vertex: T) -> bool:
        """Add a vertex to the graph.

        Args:
            vertex: The vertex to add.

        Returns:
            True if added, False if the graph is full or the vertex exists.

        """
        if len(self._vertices) == self._capacity:
            logger.debug("Rejected vertex %r: capacity %d reached", vertex, self._capacity)
            return False
        if self._index_of(vertex) != -1:
            logger.debug("Rejected vertex %r: already present", vertex)
            return False

        slot = self._free_slots.pop()
        self._vertices.append(vertex)
        self._slots.append(slot)
        logger.debug("Added vertex %r at slot %d", vertex, slot)
        return True

    def add_vertices(self, vertices: Iterable[T]) -> int:
        """Add several vertices in order.

        Returns:
            The number of vertices actually added.

        """
        return sum(1 for vertex in vertices if self.add_vertex(vertex))

    def remove_vertex(self, vertex: T) -> bool:
        """Remove a vertex together with all of its edges.

        Positions of the vertices added after the removed one shift down by
        one. Their matrix slots do not move.

        Args:
            vertex: The vertex to remove.

        Returns:
            True if removed, False if the vertex is not in the graph.

        """
        index = self._index_of(vertex)
        if index == -1:
            logger.debug("Rejected removal of vertex %r: not found", vertex)
            return False

        slot = self._slots[index]
        for other in self._slots:
            if other != slot and self._edge_exists(slot, other):
                self._set_edge(slot, other, value=False)
                self._edges_count -= 1

        # Rows of unowned slots stay all False.
        row = self._matrix[slot]
        for i in range(self._capacity):
            row[i] = False
            self._matrix[i][slot] = False

        del self._vertices[index]
        del self._slots[index]
        self._free_slots.append(slot)
        logger.debug("Removed vertex %r, released slot %d", vertex, slot)
        return True

    def add_edge(self, first: T, second: T) -> bool:
        """Connect two vertices.

        Args:
            first: One endpoint.
            second: The other endpoint.

        Returns:
            True if the edge was added. False if either vertex is missing,
            both endpoints are the same vertex, or the edge already exists.

        """
        slot1 = self._slot_of(first)
        slot2 = self._slot_of(second)

        if slot1 == -1 or slot2 == -1:
            logger.debug("Rejected edge (%r, %r): vertex not found", first, second)
            return False
        if slot1 == slot2:
            logger.debug("Rejected edge (%r, %r): self-loop", first, second)
            return False
        if self._edge_exists(slot1, slot2):
            logger.debug("Rejected edge (%r, %r): already present", first, second)
            return False

        self._set_edge(slot1, slot2, value=True)
        self._edges_count += 1
        return True

    def remove_edge(self, first: T, second: T) -> bool:
        """Delete the edge between two vertices, if it exists.

        Returns:
            True if the edge was removed, False if either vertex or the edge is missing.

        """
        slot1 = self._slot_of(first)
        slot2 = self._slot_of(second)

        if slot1 == -1 or slot2 == -1:
            logger.debug("Rejected edge removal (%r, %r): vertex not found", first, second)
            return False
        if not self._edge_exists(slot1, slot2):
            logger.debug("Rejected edge removal (%r, %r): no such edge", first, second)
            return False

        self._set_edge(slot1, slot2, value=False)
        self._edges_count -= 1
        return True

    def has_vertex(self, vertex: T) -> bool:
        """Check whether the vertex is in the graph."""
        return self._index_of(vertex) != -1

    def are_connected(self, first: T, second: T) -> bool:
        """Check whether there is an edge between two vertices.

        Returns:
            True if both vertices exist and are connected, False otherwise.

        """
        slot1 = self._slot_of(first)
        slot2 = self._slot_of(second)

        if slot1 == -1 or slot2 == -1:
            return False
        return self._edge_exists(slot1, slot2)

    def neighbours(self, vertex: T) -> list[T]:
        """Get the vertices adjacent to a vertex.

        Args:
            vertex: The vertex to query.

        Returns:
            Adjacent vertices in insertion order. Empty if the vertex is missing.

        """
        slot = self._slot_of(vertex)
        if slot == -1:
            return []
        return [
            candidate
            for candidate, other in zip(self._vertices, self._slots, strict=True)
            if other != slot and self._edge_exists(slot, other)
        ]

    def degree(self, vertex: T) -> int:
        """Return the number of edges incident to a vertex, 0 if it is missing."""
        return len(self.neighbours(vertex))

    def edges(self) -> list[tuple[T, T]]:
        """Snapshot of all edges.

        Each edge appears once, as ``(a, b)`` with ``a`` added before ``b``.
        """
        result: list[tuple[T, T]] = []
        for i, (first, slot1) in enumerate(zip(self._vertices, self._slots, strict=True)):
            for second, slot2 in zip(self._vertices[i + 1 :], self._slots[i + 1 :], strict=True):
                if self._edge_exists(slot1, slot2):
                    result.append((first, second))
        return result

    def to_readable(self) -> str:
        """Render each vertex followed by its neighbours, one per line.

        Example:
            >>> graph = DenseGraph[int](capacity=3)
            >>> graph.add_vertices([1, 2, 3])
            3
            >>> graph.add_edge(1, 2)
            True
            >>> print(graph.to_readable())
            1: [2]
            2: [1]
            3: []

        """
        lines = []
        for vertex in self._vertices:
            adjacents = ", ".join(str(neighbour) for neighbour in self.neighbours(vertex))
            lines.append(f"{vertex}: [{adjacents}]")
        return "\n".join(lines)

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._vertices)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return any(candidate == vertex for candidate in self._vertices)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._vertices))

    def __str__(self) -> str:
        return self.to_readable()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(capacity={self._capacity}, "
            f"vertices={self._vertices!r}, edges={self._edges_count})"
        )
