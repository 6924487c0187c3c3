"""graphpaths - shortest paths over weighted directed graphs.

This package provides:
- A Distance type that is either a finite integer or infinity
- The WeightedDigraph protocol algorithms are written against, and a
  DirectedGraph implementation of it
- Single-source shortest paths (Bellman-Ford, Dijkstra)
- All-pairs shortest paths (Johnson)

All algorithms are deterministic: vertices are visited in index order and
Dijkstra breaks distance ties by the smaller vertex index.
"""

__version__ = "0.1.0"

from .allpairs import Johnson, johnson
from .contract import WeightedDigraph, check_vertex, vertex_index
from .core import DEFAULT_WEIGHT, DirectedGraph
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled
from .distance import INF, Distance
from .exceptions import (
    AlgorithmError,
    BadAccessError,
    GraphError,
    GraphPathsError,
    InfiniteValueAccess,
    NegativeWeightsUnsupported,
    UnknownEdgeError,
    UnknownVertexError,
)
from .heap import IndexedHeap
from .logging import configure_logging, get_logger, set_log_level
from .shortest import BellmanFord, Dijkstra
from .sssp import Entry, SSSPResult
from .utils import iter_edges, node_index_map, reconstruct_path

__all__ = [
    "__version__",
    "Distance",
    "INF",
    "WeightedDigraph",
    "check_vertex",
    "vertex_index",
    "DirectedGraph",
    "DEFAULT_WEIGHT",
    "IndexedHeap",
    "Entry",
    "SSSPResult",
    "BellmanFord",
    "Dijkstra",
    "Johnson",
    "johnson",
    "node_index_map",
    "iter_edges",
    "reconstruct_path",
    "GraphPathsError",
    "BadAccessError",
    "InfiniteValueAccess",
    "UnknownVertexError",
    "UnknownEdgeError",
    "NegativeWeightsUnsupported",
    "GraphError",
    "AlgorithmError",
    "get_logger",
    "set_log_level",
    "configure_logging",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]

# Example usage:
# from graphpaths import DirectedGraph, Johnson
#
# g = DirectedGraph.from_edges([('a', 'b', 2), ('b', 'c', -1)])
# apsp = Johnson(g)
# if apsp:
#     apsp.distance(g.find_vertex('a'), g.find_vertex('c'))  # Distance(1)
