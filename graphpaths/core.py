"""
Core graph data structure.

Provides DirectedGraph, a weighted directed graph stored as a dense arena
of vertices addressed by integer index, each owning an ordered adjacency
map ``head -> weight``. It satisfies the
:class:`~graphpaths.contract.WeightedDigraph` protocol and is the working
copy Johnson's algorithm re-weights.
"""

from __future__ import annotations

import numbers
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Tuple

from .contract import WeightedDigraph, check_vertex
from .exceptions import GraphError, UnknownEdgeError, UnknownVertexError
from .utils import iter_edges, node_index_map

DEFAULT_WEIGHT = 1


def _check_weight(weight: object) -> int:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise GraphError(f"Edge weights must be integers, got {type(weight).__name__}: {weight!r}")
    return int(weight)


class DirectedGraph:
    """
    Weighted directed graph with integer vertex indices.

    Vertices are numbered ``0 .. n-1`` in insertion order and may carry an
    optional label. Each vertex keeps its out-edges in insertion order, so
    ``adjacent()`` is deterministic. At most one edge exists per ordered
    pair; inserting an existing edge replaces its weight.

    Complexity:
        - insert_vertex: O(1) amortized
        - insert_edge / erase_edge / weight / change_weight: O(1)
        - erase_vertex: O(V + E) (later indices are renumbered)
        - adjacent: O(deg(v))
    """

    def __init__(self, labels: Iterable[Hashable] = ()):
        """
        Initialize a graph with one vertex per label.

        Args:
            labels: Optional vertex labels; vertex ``i`` gets the i-th label.
        """
        self._labels: List[Optional[Hashable]] = list(labels)
        self._adj: List[Dict[int, int]] = [{} for _ in self._labels]

    @classmethod
    def from_graph(cls, graph: WeightedDigraph) -> "DirectedGraph":
        """
        Copy any graph satisfying the contract into a new DirectedGraph.

        Vertex indices and edge order are preserved. Labels are only carried
        over when copying another DirectedGraph.
        """
        if isinstance(graph, DirectedGraph):
            return graph.copy()
        copy = cls()
        for _ in range(graph.vertex_count()):
            copy.insert_vertex()
        for u, v, w in iter_edges(graph):
            copy.insert_edge(u, v, w)
        return copy

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable, int]],
        nodes: Optional[Iterable[Hashable]] = None,
    ) -> "DirectedGraph":
        """
        Build a labelled graph from ``(tail, head, weight)`` triples.

        Labels are mapped to indices with :func:`~graphpaths.utils.node_index_map`,
        i.e. in sorted string order, so the numbering does not depend on the
        order edges are listed in.

        Args:
            edges: Iterable of (tail_label, head_label, weight).
            nodes: Extra labels to include even if they have no edges.

        Example:
            >>> g = DirectedGraph.from_edges([('a', 'b', 2), ('b', 'c', -1)])
            >>> g.find_vertex('c')
            2
        """
        edges = list(edges)
        labels = set(nodes or ())
        for u, v, _ in edges:
            labels.add(u)
            labels.add(v)
        node_to_idx, idx_to_node = node_index_map(labels)

        graph = cls(idx_to_node)
        for u, v, w in edges:
            graph.insert_edge(node_to_idx[u], node_to_idx[v], w)
        return graph

    def copy(self) -> "DirectedGraph":
        """Return an independent copy of this graph."""
        other = DirectedGraph(self._labels)
        other._adj = [dict(heads) for heads in self._adj]
        return other

    # Contract

    def vertex_count(self) -> int:
        return len(self._adj)

    def adjacent(self, vertex: int) -> List[int]:
        """
        Return heads of the out-edges of ``vertex`` in insertion order.

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        vertex = check_vertex(self, vertex)
        return list(self._adj[vertex])

    def weight(self, tail: int, head: int) -> int:
        """
        Return the weight of edge ``tail -> head``.

        Raises:
            UnknownVertexError: If either endpoint is not in graph.
            UnknownEdgeError: If there is no such edge.
        """
        tail = check_vertex(self, tail)
        head = check_vertex(self, head)
        try:
            return self._adj[tail][head]
        except KeyError:
            raise UnknownEdgeError(f"No edge ({tail}, {head}) in graph") from None

    # Vertices

    def insert_vertex(self, label: Optional[Hashable] = None) -> int:
        """
        Append a vertex and return its index.

        Args:
            label: Optional payload attached to the vertex.
        """
        self._labels.append(label)
        self._adj.append({})
        return len(self._adj) - 1

    def erase_vertex(self, vertex: int) -> None:
        """
        Remove ``vertex`` and every edge touching it.

        Vertices with a larger index move down by one; erasing the last
        vertex leaves every other index unchanged.
        """
        vertex = check_vertex(self, vertex)
        del self._labels[vertex]
        del self._adj[vertex]

        for i, heads in enumerate(self._adj):
            if vertex in heads or any(v > vertex for v in heads):
                self._adj[i] = {
                    (v - 1 if v > vertex else v): w for v, w in heads.items() if v != vertex
                }

    def label(self, vertex: int) -> Optional[Hashable]:
        """Return the label of ``vertex`` (None if it has none)."""
        vertex = check_vertex(self, vertex)
        return self._labels[vertex]

    def find_vertex(self, label: Hashable) -> int:
        """
        Return the index of the first vertex carrying ``label``.

        Raises:
            UnknownVertexError: If no vertex has this label.
        """
        for i, lbl in enumerate(self._labels):
            if lbl == label:
                return i
        raise UnknownVertexError(f"No vertex labelled {label!r}")

    # Edges

    def insert_edge(self, tail: int, head: int, weight: int = DEFAULT_WEIGHT) -> None:
        """
        Add (or re-weight) the edge ``tail -> head``.

        Raises:
            UnknownVertexError: If either endpoint is not in graph.
            GraphError: If weight is not an integer.
        """
        tail = check_vertex(self, tail)
        head = check_vertex(self, head)
        self._adj[tail][head] = _check_weight(weight)

    def insert_edges(self, edges: Iterable[Tuple[int, int, int]]) -> None:
        """Insert every ``(tail, head, weight)`` triple of ``edges``."""
        for tail, head, weight in edges:
            self.insert_edge(tail, head, weight)

    def erase_edge(self, tail: int, head: int) -> None:
        """
        Remove the edge ``tail -> head``.

        Raises:
            UnknownEdgeError: If there is no such edge.
        """
        tail, head = check_vertex(self, tail), check_vertex(self, head)
        self.weight(tail, head)
        del self._adj[tail][head]

    def change_weight(self, tail: int, head: int, weight: int) -> None:
        """
        Set the weight of an existing edge.

        Raises:
            UnknownEdgeError: If there is no such edge.
            GraphError: If weight is not an integer.
        """
        tail, head = check_vertex(self, tail), check_vertex(self, head)
        self.weight(tail, head)
        self._adj[tail][head] = _check_weight(weight)

    def are_adjacent(self, tail: int, head: int) -> bool:
        tail = check_vertex(self, tail)
        head = check_vertex(self, head)
        return head in self._adj[tail]

    def edge_count(self) -> int:
        return sum(len(heads) for heads in self._adj)

    def edges(self) -> List[Tuple[int, int, int]]:
        """Return all edges as ``(tail, head, weight)`` in deterministic order."""
        return list(iter_edges(self))

    # Degrees

    def out_degree(self, vertex: int) -> int:
        vertex = check_vertex(self, vertex)
        return len(self._adj[vertex])

    def in_degree(self, vertex: int) -> int:
        vertex = check_vertex(self, vertex)
        return sum(1 for heads in self._adj if vertex in heads)

    def degree(self, vertex: int) -> int:
        return self.in_degree(vertex) + self.out_degree(vertex)

    def __len__(self) -> int:
        return len(self._adj)

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._adj)))

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={self.vertex_count()}, edges={self.edge_count()})"


__all__ = ["DirectedGraph", "DEFAULT_WEIGHT"]
