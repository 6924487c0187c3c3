"""
All-pairs shortest path algorithms: Johnson.

Computes shortest paths between all pairs of vertices in a graph that may
have negative edge weights but no negative cycles. One Bellman-Ford run
from a synthetic source yields vertex potentials ``h``; re-weighting every
edge to ``w + h(u) - h(v)`` makes all weights non-negative without changing
which paths are shortest, so Dijkstra can run from each vertex. The skew is
undone afterwards: ``dist(u, v) = dist'(u, v) + h(v) - h(u)``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.3 (Johnson's algorithm).
"""

from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from .contract import WeightedDigraph, vertex_index
from .core import DirectedGraph
from .debug_mode import resolve_verify
from .distance import Distance
from .exceptions import AlgorithmError, BadAccessError
from .logging import get_logger
from .shortest import BellmanFord, Dijkstra

logger = get_logger(__name__)


def _potentials(work: DirectedGraph) -> Optional[List[int]]:
    """
    Compute Johnson potentials on ``work``.

    A synthetic vertex with a zero-weight edge to every vertex is added for
    the Bellman-Ford run and removed again on every path out of this
    function, leaving ``work`` exactly as it was.

    Returns:
        ``h[v]`` for every vertex, or None if ``work`` has a negative cycle.
    """
    n = work.vertex_count()
    s = work.insert_vertex()
    try:
        for v in range(n):
            work.insert_edge(s, v, 0)
        bellman_ford = BellmanFord(work, s)
        if bellman_ford.has_negative_cycle():
            return None
        # Every vertex is reachable from s, so value() cannot hit infinity.
        return [bellman_ford.distance(v).value() for v in range(n)]
    finally:
        work.erase_vertex(s)


def _reweight(work: DirectedGraph, h: List[int], verify: bool) -> None:
    for u, v, weight in work.edges():
        reweighted = weight + h[u] - h[v]
        if verify and reweighted < 0:
            raise AlgorithmError(f"Re-weighted edge ({u}, {v}) is negative: {reweighted}")
        work.change_weight(u, v, reweighted)


class Johnson:
    """
    Johnson's algorithm for all-pairs shortest paths.

    The input graph is copied into a private working graph; the caller's
    graph is never modified. If the graph has a negative-weight cycle no
    distances are computed and every query raises
    :class:`~graphpaths.exceptions.BadAccessError`; check
    :meth:`has_negative_weight_cycles` (or ``bool(apsp)``) first.

    Complexity: O(VE log V) (one Bellman-Ford plus V Dijkstra runs).

    Example:
        >>> g = DirectedGraph.from_edges([('a', 'b', 2), ('a', 'c', -2), ('c', 'd', 1)])
        >>> apsp = Johnson(g)
        >>> apsp.distance(0, 3)
        Distance(-1)
    """

    def __init__(self, graph: WeightedDigraph, verify: Optional[bool] = None):
        """
        Compute all-pairs distances for ``graph``.

        Args:
            graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`.
            verify: Check that re-weighted edges are non-negative and that
                each Dijkstra tree is consistent. None follows the global
                debug mode.
        """
        verify = resolve_verify(verify)
        work = DirectedGraph.from_graph(graph)
        n = work.vertex_count()

        self._n = n
        self._negative_cycle = False
        self._storage: Dict[Tuple[int, int], Distance] = {}
        self._trees: List[Dijkstra] = []

        h = _potentials(work)
        if h is None:
            logger.info("Johnson: negative-weight cycle found, no distances computed")
            self._negative_cycle = True
            return

        _reweight(work, h, verify)

        for u in range(n):
            dijkstra = Dijkstra(work, u, verify=verify)
            self._trees.append(dijkstra)
            for v in range(n):
                self._storage[(u, v)] = dijkstra.distance(v) + (h[v] - h[u])

        logger.debug("johnson: vertices=%d edges=%d pairs=%d", n, work.edge_count(), len(self._storage))

    def has_negative_weight_cycles(self) -> bool:
        """Return True if the graph contains a negative-weight cycle."""
        return self._negative_cycle

    has_negative_cycle = has_negative_weight_cycles

    def __bool__(self) -> bool:
        return not self._negative_cycle

    @property
    def vertex_count(self) -> int:
        return self._n

    def _check_pair(self, source: int, target: int) -> Tuple[int, int]:
        if self._negative_cycle:
            raise BadAccessError("No distances: the graph contains a negative-weight cycle")
        return vertex_index(source, self._n), vertex_index(target, self._n)

    def distance(self, source: int, target: int) -> Distance:
        """
        Return the shortest distance from ``source`` to ``target``.

        Raises:
            UnknownVertexError: If either vertex is unknown.
            BadAccessError: If the graph has a negative-weight cycle.
        """
        source, target = self._check_pair(source, target)
        return self._storage[(source, target)]

    def path(self, source: int, target: int) -> List[int]:
        """
        Return the vertices of a shortest path from ``source`` to ``target``.

        Re-weighting preserves which paths are shortest, so the tree of the
        Dijkstra run from ``source`` on the re-weighted graph is used.

        Returns:
            ``[source, ..., target]``, or an empty list if there is no path.
        """
        source, target = self._check_pair(source, target)
        return self._trees[source].path_to(target)

    def items(self) -> Iterator[Tuple[Tuple[int, int], Distance]]:
        """Yield ``((source, target), Distance)`` for every ordered pair."""
        if self._negative_cycle:
            raise BadAccessError("No distances: the graph contains a negative-weight cycle")
        yield from self._storage.items()

    def to_numpy(self) -> np.ndarray:
        """
        Return the distance matrix ``D[u, v]`` as floats.

        Pairs with no path hold ``np.inf``.
        """
        matrix = np.full((self._n, self._n), np.inf, dtype=float)
        for (u, v), d in self.items():
            matrix[u, v] = float(d)
        return matrix

    def __repr__(self) -> str:
        return f"Johnson(vertices={self._n}, negative_cycle={self._negative_cycle})"


def johnson(graph: WeightedDigraph) -> Dict[Tuple[int, int], Distance]:
    """
    Johnson's algorithm returning the ``(u, v) -> Distance`` table.

    Args:
        graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`.

    Returns:
        Dictionary mapping every ordered vertex pair to its distance.

    Raises:
        BadAccessError: If the graph has a negative-weight cycle.

    Example:
        >>> dist = johnson(DirectedGraph.from_edges([('a', 'b', -1)]))
        >>> dist[(0, 1)]
        Distance(-1)
    """
    return dict(Johnson(graph).items())


__all__ = ["Johnson", "johnson"]
