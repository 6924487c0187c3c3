"""
Structural interface that graph types must satisfy to be used by the
shortest-path algorithms.

Vertices are addressed by dense integer indices ``0 .. vertex_count() - 1``.
The algorithms only read the graph: they enumerate out-neighbours and look
up edge weights, and keep every per-vertex result in their own tables.
Any object with these three methods works; it does not need to inherit
from anything.
"""

from __future__ import annotations

import numbers
from typing import Iterable, Protocol, runtime_checkable

from .exceptions import UnknownVertexError


@runtime_checkable
class WeightedDigraph(Protocol):
    """
    Protocol for weighted directed graphs with integer edge weights.

    Implementations are expected to hold at most one edge per ordered
    vertex pair; ``weight(u, v)`` reads that edge.
    """

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        ...

    def adjacent(self, vertex: int) -> Iterable[int]:
        """Return the heads of the out-edges of ``vertex`` in a stable order."""
        ...

    def weight(self, tail: int, head: int) -> int:
        """Return the weight of the edge ``tail -> head``."""
        ...


def vertex_index(vertex: object, n: int) -> int:
    """
    Normalize ``vertex`` to a plain int in ``range(n)``.

    Any integral type is accepted (``numpy.int64`` from ``argmax`` and
    friends included); ``bool`` is not.

    Raises:
        UnknownVertexError: If ``vertex`` is not an integer in range.
    """
    if isinstance(vertex, bool) or not isinstance(vertex, numbers.Integral):
        raise UnknownVertexError(f"Vertex must be an integer index, got {vertex!r}")
    index = int(vertex)
    if not 0 <= index < n:
        raise UnknownVertexError(f"Vertex {index} not in graph with {n} vertices")
    return index


def check_vertex(graph: WeightedDigraph, vertex: int) -> int:
    """
    Validate that ``vertex`` indexes a vertex of ``graph``.

    Args:
        graph: Graph satisfying :class:`WeightedDigraph`.
        vertex: Candidate vertex index.

    Returns:
        The vertex index as a plain int.

    Raises:
        UnknownVertexError: If ``vertex`` is not an integer in range.
    """
    return vertex_index(vertex, graph.vertex_count())


__all__ = ["WeightedDigraph", "check_vertex", "vertex_index"]
