"""
Utility functions for graph algorithms.

Provides helpers for node indexing, edge iteration, and path reconstruction.
"""

from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple

from .contract import WeightedDigraph
from .exceptions import AlgorithmError


def node_index_map(nodes: Iterable[Hashable]) -> Tuple[Dict[Hashable, int], List[Hashable]]:
    """
    Create deterministic mapping from nodes to indices 0..n-1.

    Nodes are sorted by string representation for deterministic ordering.

    Args:
        nodes: Iterable of hashable nodes.

    Returns:
        Tuple of (node_to_index dict, index_to_node list).
        The list provides the node ordering used for indexing.

    Example:
        >>> node_to_idx, idx_to_node = node_index_map(['c', 'a', 'b'])
        >>> node_to_idx
        {'a': 0, 'b': 1, 'c': 2}
        >>> idx_to_node
        ['a', 'b', 'c']
    """
    sorted_nodes = sorted(set(nodes), key=lambda x: str(x))
    node_to_index = {node: idx for idx, node in enumerate(sorted_nodes)}
    return node_to_index, sorted_nodes


def iter_edges(graph: WeightedDigraph) -> Iterator[Tuple[int, int, int]]:
    """
    Yield every edge of ``graph`` as ``(tail, head, weight)``.

    Tails are visited in index order and heads in ``adjacent()`` order, so
    the sequence is the same on every call for an unmodified graph.

    Args:
        graph: Graph satisfying :class:`~graphpaths.contract.WeightedDigraph`.

    Yields:
        (tail, head, weight) tuples.
    """
    for u in range(graph.vertex_count()):
        for v in graph.adjacent(u):
            yield u, v, graph.weight(u, v)


def reconstruct_path(predecessors: Sequence[Optional[int]], target: int) -> List[int]:
    """
    Reconstruct the path ending at ``target`` from a predecessor table.

    ``predecessors[v]`` is the vertex before ``v`` on its shortest path, or
    None for the source. The caller is responsible for only asking about
    reachable vertices; an unreachable vertex with no predecessor is
    indistinguishable from a source and yields ``[target]``.

    Args:
        predecessors: Predecessor of each vertex index.
        target: Vertex to reconstruct the path to.

    Returns:
        List of vertices from the source to ``target`` (inclusive).

    Raises:
        AlgorithmError: If the predecessor links contain a cycle.

    Example:
        >>> reconstruct_path([None, 0, 1], 2)
        [0, 1, 2]
    """
    path = [target]
    seen = {target}
    current = predecessors[target]
    while current is not None:
        if current in seen:
            raise AlgorithmError(f"Predecessor links loop back to vertex {current}")
        seen.add(current)
        path.append(current)
        current = predecessors[current]

    path.reverse()
    return path


__all__ = ["node_index_map", "iter_edges", "reconstruct_path"]
