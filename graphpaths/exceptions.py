"""Custom exception types used across :mod:`graphpaths`."""

from __future__ import annotations


class GraphPathsError(Exception):
    """Base class for all package-specific errors."""


class BadAccessError(GraphPathsError, LookupError):
    """Raised when a query is made that the result cannot answer."""


class InfiniteValueAccess(BadAccessError):
    """Raised when the numeric value of an infinite distance is requested."""


class UnknownVertexError(BadAccessError):
    """Raised for a vertex index that is not part of the graph or result."""


class UnknownEdgeError(BadAccessError):
    """Raised when looking up an edge that does not exist."""


class NegativeWeightsUnsupported(GraphPathsError, ValueError):
    """Raised when Dijkstra's algorithm is given a negative edge weight."""


class GraphError(GraphPathsError, ValueError):
    """Raised for invalid graph construction input such as non-integer weights."""


class AlgorithmError(GraphPathsError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "GraphPathsError",
    "BadAccessError",
    "InfiniteValueAccess",
    "UnknownVertexError",
    "UnknownEdgeError",
    "NegativeWeightsUnsupported",
    "GraphError",
    "AlgorithmError",
]
