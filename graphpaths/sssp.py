"""
Shared result table for single-source shortest-path algorithms.

Both Bellman-Ford and Dijkstra fill one ``Entry`` (distance, predecessor)
per vertex and answer the same queries through :class:`SSSPResult`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .contract import WeightedDigraph, check_vertex, vertex_index
from .distance import INF, Distance
from .exceptions import AlgorithmError, BadAccessError, UnknownVertexError
from .utils import reconstruct_path


@dataclass
class Entry:
    """
    Per-vertex shortest-path record.

    Attributes:
        distance: Tentative (then final) distance from the source.
        predecessor: Vertex before this one on the shortest path, None for
            the source and for unreachable vertices.
    """

    distance: Distance = INF
    predecessor: Optional[int] = None


class SSSPResult:
    """
    Distances and shortest-path tree from one source vertex.

    The table is created when the algorithm is constructed (every vertex at
    infinity except the source at 0) and is read-only once the constructor
    returns. It reflects the graph as it was at construction time.
    """

    def __init__(self, graph: WeightedDigraph, source: int):
        """
        Initialize one entry per vertex of ``graph``.

        Args:
            graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`.
            source: Source vertex index.

        Raises:
            UnknownVertexError: If source is not in graph.
        """
        self._source = check_vertex(graph, source)
        self._entries: Optional[List[Entry]] = [Entry() for _ in range(graph.vertex_count())]
        self._entries[self._source].distance = Distance(0)

    @property
    def source(self) -> int:
        return self._source

    def _table(self) -> List[Entry]:
        if self._entries is None:
            raise BadAccessError(
                "Shortest-path table was cleared because a negative-weight cycle is reachable from the source"
            )
        return self._entries

    def _entry(self, vertex: int) -> Entry:
        entries = self._table()
        return entries[vertex_index(vertex, len(entries))]

    def _clear(self) -> None:
        self._entries = None

    def _relax(self, tail: int, head: int, weight: int) -> bool:
        """Relax edge ``tail -> head``; return True if the head improved."""
        entries = self._entries
        candidate = entries[tail].distance + weight
        if candidate < entries[head].distance:
            entries[head].distance = candidate
            entries[head].predecessor = tail
            return True
        return False

    def _verify_tree(self, graph: WeightedDigraph) -> None:
        """
        Check that every predecessor link is a tight edge.

        Raises:
            AlgorithmError: If ``distance(v) != distance(pred) + weight(pred, v)``
                for some vertex, or the source distance is not 0.
        """
        entries = self._table()
        if entries[self._source].distance != 0:
            raise AlgorithmError(f"Source {self._source} has distance {entries[self._source].distance}")
        for v, entry in enumerate(entries):
            p = entry.predecessor
            if p is None:
                if v != self._source and entry.distance.is_finite():
                    raise AlgorithmError(f"Vertex {v} has finite distance but no predecessor")
                continue
            expected = entries[p].distance + graph.weight(p, v)
            if entry.distance != expected:
                raise AlgorithmError(
                    f"Edge ({p}, {v}) is not tight: distance {entry.distance} != {expected}"
                )

    def distance(self, vertex: int) -> Distance:
        """
        Return the shortest distance from the source to ``vertex``.

        Raises:
            UnknownVertexError: If vertex is not in the result.
            BadAccessError: If the table was cleared after a negative cycle.
        """
        return self._entry(vertex).distance

    def predecessor(self, vertex: int) -> Optional[int]:
        """Return the vertex before ``vertex`` on its shortest path (None for the source)."""
        return self._entry(vertex).predecessor

    def path_to(self, vertex: int) -> List[int]:
        """
        Return the vertices of a shortest path from the source to ``vertex``.

        Returns:
            ``[source, ..., vertex]``; ``[source]`` for the source itself and
            an empty list if vertex is unreachable.

        Example:
            >>> sssp.path_to(sssp.source) == [sssp.source]
            True
        """
        if self._entry(vertex).distance.is_infinite():
            return []
        return reconstruct_path([e.predecessor for e in self._table()], int(vertex))

    def distances(self) -> Dict[int, Distance]:
        """Return a ``vertex -> Distance`` dictionary."""
        return dict(self.items())

    def items(self) -> Iterator[Tuple[int, Distance]]:
        for v, entry in enumerate(self._table()):
            yield v, entry.distance

    def to_numpy(self) -> np.ndarray:
        """
        Return distances as a float vector indexed by vertex.

        Unreachable vertices hold ``np.inf``.
        """
        return np.array([float(e.distance) for e in self._table()], dtype=float)

    def __contains__(self, vertex: object) -> bool:
        if self._entries is None:
            return False
        try:
            vertex_index(vertex, len(self._entries))
        except UnknownVertexError:
            return False
        return True

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self)))

    def __len__(self) -> int:
        return 0 if self._entries is None else len(self._entries)

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={self._source}, vertices={len(self)})"


__all__ = ["Entry", "SSSPResult"]
