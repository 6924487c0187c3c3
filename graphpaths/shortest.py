"""
Single-source shortest path algorithms: Bellman-Ford and Dijkstra.

Bellman-Ford algorithm for graphs with negative weights (detects negative cycles).
Dijkstra's algorithm for non-negative edge weights.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 24.1 (Bellman-Ford) and 24.3 (Dijkstra).
"""

from typing import Optional, Tuple

from .contract import WeightedDigraph
from .debug_mode import resolve_verify
from .exceptions import NegativeWeightsUnsupported
from .heap import IndexedHeap
from .logging import get_logger
from .sssp import SSSPResult
from .utils import iter_edges

logger = get_logger(__name__)


class BellmanFord(SSSPResult):
    """
    Bellman-Ford algorithm for single-source shortest paths.

    Computes shortest paths from source to all reachable vertices, allowing
    negative edge weights. Detects negative cycles reachable from source;
    when one is found the distance table is cleared and every query raises
    :class:`~graphpaths.exceptions.BadAccessError`, so check
    :meth:`has_negative_cycle` (or ``bool(result)``) first.

    Complexity: O(VE) where V is vertices and E is edges.

    Example:
        >>> g = DirectedGraph(range(3))
        >>> g.insert_edges([(0, 1, 1), (1, 2, -2)])
        >>> bf = BellmanFord(g, 0)
        >>> bf.has_negative_cycle()
        False
        >>> bf.distance(2)
        Distance(-1)
    """

    def __init__(self, graph: WeightedDigraph, source: int, verify: Optional[bool] = None):
        """
        Run Bellman-Ford from ``source``.

        Args:
            graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`
                (may have negative weights).
            source: Source vertex index.
            verify: Re-check the predecessor tree afterwards. None follows
                the global debug mode.

        Raises:
            UnknownVertexError: If source is not in graph.
        """
        super().__init__(graph, source)
        self._negative_cycle = False

        # Edges in deterministic order: tails by index, heads by adjacency order
        edges = list(iter_edges(graph))
        n = graph.vertex_count()
        entries = self._entries

        for _ in range(n - 1):
            for u, v, weight in edges:
                if entries[u].distance.is_finite():
                    self._relax(u, v, weight)

        for u, v, weight in edges:
            if entries[u].distance + weight < entries[v].distance:
                logger.info("Negative-weight cycle reachable from vertex %d via edge (%d, %d)", source, u, v)
                self._negative_cycle = True
                self._clear()
                break

        logger.debug(
            "bellman-ford: source=%d vertices=%d edges=%d rounds=%d negative_cycle=%s",
            source,
            n,
            len(edges),
            max(n - 1, 0),
            self._negative_cycle,
        )

        if not self._negative_cycle and resolve_verify(verify):
            self._verify_tree(graph)

    def has_negative_cycle(self) -> bool:
        """Return True if a negative-weight cycle is reachable from the source."""
        return self._negative_cycle

    has_negative_weight_cycles = has_negative_cycle

    def __bool__(self) -> bool:
        return not self._negative_cycle


class Dijkstra(SSSPResult):
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest paths from source in a graph with non-negative edge
    weights. Every vertex is queued up front keyed by its tentative
    distance; improvements lower keys with decrease-key. Ties are broken by
    vertex index (the smaller index is settled first).

    Complexity: O((V + E) log V) using an indexed binary heap.

    Example:
        >>> g = DirectedGraph(range(3))
        >>> g.insert_edges([(0, 1, 1), (1, 2, 2), (0, 2, 5)])
        >>> Dijkstra(g, 0).path_to(2)
        [0, 1, 2]
    """

    def __init__(self, graph: WeightedDigraph, source: int, verify: Optional[bool] = None):
        """
        Run Dijkstra from ``source``.

        Args:
            graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`
                with non-negative edge weights.
            source: Source vertex index.
            verify: Re-check the predecessor tree afterwards. None follows
                the global debug mode.

        Raises:
            NegativeWeightsUnsupported: If any edge of graph has a negative
                weight. Raised before any relaxation takes place.
            UnknownVertexError: If source is not in graph.
        """
        negative = self.find_negative_edge(graph)
        if negative is not None:
            u, v, weight = negative
            raise NegativeWeightsUnsupported(
                f"Dijkstra requires non-negative weights. "
                f"Found negative weight {weight} on edge ({u}, {v})"
            )

        super().__init__(graph, source)
        entries = self._entries

        queue = IndexedHeap(len(entries))
        for v, entry in enumerate(entries):
            queue.push(v, entry.distance)

        pops = 0
        while queue:
            u, _ = queue.pop()
            pops += 1

            for v in graph.adjacent(u):
                if v in queue and self._relax(u, v, graph.weight(u, v)):
                    queue.decrease_key(v, entries[v].distance)

        logger.debug("dijkstra: source=%d vertices=%d pops=%d", source, len(entries), pops)

        if resolve_verify(verify):
            self._verify_tree(graph)

    @staticmethod
    def find_negative_edge(graph: WeightedDigraph) -> Optional[Tuple[int, int, int]]:
        """Return the first ``(tail, head, weight)`` with a negative weight, or None."""
        for u, v, weight in iter_edges(graph):
            if weight < 0:
                return u, v, weight
        return None

    @staticmethod
    def has_negative_weights(graph: WeightedDigraph) -> bool:
        """Return True if any edge of ``graph`` has a negative weight."""
        return Dijkstra.find_negative_edge(graph) is not None


__all__ = ["BellmanFord", "Dijkstra"]
