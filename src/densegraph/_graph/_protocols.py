"""Structural protocols for undirected graphs."""

from collections.abc import Iterable
from typing import Any, Protocol, TypeVar, runtime_checkable


class Comparable(Protocol):
    """Vertex values must support equality and ordering."""

    def __eq__(self, other: object, /) -> bool: ...

    def __lt__(self, other: Any, /) -> bool: ...  # noqa: ANN401


T = TypeVar("T", bound=Comparable)


@runtime_checkable
class UndirectedGraph(Protocol[T]):
    """Operations shared by undirected graph representations.

    Mutations report rejection through their return value; none of them
    raise for a missing vertex, a duplicate, or an exhausted capacity.
    """

    @property
    def vertices_count(self) -> int: ...

    @property
    def edges_count(self) -> int: ...

    @property
    def vertices(self) -> list[T]: ...

    def add_vertex(self, vertex: T) -> bool: ...

    def add_vertices(self, vertices: Iterable[T]) -> int: ...

    def remove_vertex(self, vertex: T) -> bool: ...

    def add_edge(self, first: T, second: T) -> bool: ...

    def remove_edge(self, first: T, second: T) -> bool: ...

    def has_vertex(self, vertex: T) -> bool: ...

    def are_connected(self, first: T, second: T) -> bool: ...

    def neighbours(self, vertex: T) -> list[T]: ...

    def degree(self, vertex: T) -> int: ...

    def to_readable(self) -> str: ...
