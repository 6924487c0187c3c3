"""Pytest configuration and shared fixtures for graphpaths tests.

This module provides:
- A deterministic numpy RNG fixture
- A random graph factory for the cross-check property tests
- The CLRS Bellman-Ford example graph
"""

import os
from typing import Callable

import numpy as np
import pytest

from graphpaths import DirectedGraph
from graphpaths.debug_mode import set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Auto-use fixture so a test toggling debug mode cannot leak it."""
    yield
    set_debug_enabled(False)


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., DirectedGraph]:
    """Return a factory for random simple digraphs.

    The factory takes ``n_vertices``, ``n_edges`` and an inclusive weight
    range ``(low, high)`` and draws distinct ordered pairs without
    self-loops.
    """

    def make(n_vertices: int, n_edges: int, low: int = 0, high: int = 20) -> DirectedGraph:
        assert n_edges <= n_vertices * (n_vertices - 1), "Too many edges"
        graph = DirectedGraph(range(n_vertices))
        seen = set()
        while len(seen) < n_edges:
            u, v = (int(x) for x in rng.integers(0, n_vertices, size=2))
            if u == v or (u, v) in seen:
                continue
            seen.add((u, v))
            graph.insert_edge(u, v, int(rng.integers(low, high + 1)))
        return graph

    return make


@pytest.fixture
def clrs_graph() -> DirectedGraph:
    """Bellman-Ford example from "Introduction to Algorithms" (Figure 24.4)."""
    return DirectedGraph.from_edges(
        [
            ("s", "t", 6),
            ("s", "y", 7),
            ("t", "x", 5),
            ("t", "y", 8),
            ("t", "z", -4),
            ("x", "t", -2),
            ("y", "x", -3),
            ("y", "z", 9),
            ("z", "s", 2),
            ("z", "x", 7),
        ]
    )
