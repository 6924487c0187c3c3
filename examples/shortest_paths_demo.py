"""
Example: Shortest Paths with graphpaths

This example runs the three algorithms on the Bellman-Ford example graph
from "Introduction to Algorithms": single-source distances with negative
weights, the effect of introducing a negative-weight cycle, Dijkstra's
non-negative precondition, and an all-pairs table from Johnson's algorithm.
"""

from graphpaths import (
    BellmanFord,
    Dijkstra,
    DirectedGraph,
    Johnson,
    NegativeWeightsUnsupported,
)


def build_graph() -> DirectedGraph:
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


def example_bellman_ford(g: DirectedGraph) -> None:
    """Example: single-source distances with negative weights."""
    print("=" * 60)
    print("Example 1: Bellman-Ford from s")
    print("=" * 60)

    sssp = BellmanFord(g, g.find_vertex("s"))
    for v in sssp:
        path = " -> ".join(str(g.label(p)) for p in sssp.path_to(v))
        print(f"{g.label(v)}: distance {sssp.distance(v)}  path {path}")
    print()


def example_negative_cycle(g: DirectedGraph) -> None:
    """Example: a negative-weight cycle is reported, not raised."""
    print("=" * 60)
    print("Example 2: Negative-weight cycle")
    print("=" * 60)

    cyclic = g.copy()
    cyclic.change_weight(cyclic.find_vertex("x"), cyclic.find_vertex("t"), -6)
    sssp = BellmanFord(cyclic, cyclic.find_vertex("s"))
    print(f"has_negative_cycle: {sssp.has_negative_cycle()}")
    print()


def example_dijkstra(g: DirectedGraph) -> None:
    """Example: Dijkstra refuses negative weights."""
    print("=" * 60)
    print("Example 3: Dijkstra precondition")
    print("=" * 60)

    try:
        Dijkstra(g, g.find_vertex("s"))
    except NegativeWeightsUnsupported as exc:
        print(f"Dijkstra rejected the graph: {exc}")
    print()


def example_johnson(g: DirectedGraph) -> None:
    """Example: all-pairs distances via re-weighting."""
    print("=" * 60)
    print("Example 4: Johnson all-pairs distances")
    print("=" * 60)

    apsp = Johnson(g)
    labels = [str(g.label(v)) for v in g]
    print("     " + "".join(f"{lbl:>5}" for lbl in labels))
    for u in g:
        row = "".join(f"{str(apsp.distance(u, v)):>5}" for v in g)
        print(f"{labels[u]:>5}{row}")
    print()


if __name__ == "__main__":
    graph = build_graph()
    example_bellman_ford(graph)
    example_negative_cycle(graph)
    example_dijkstra(graph)
    example_johnson(graph)
    print("All shortest-path examples completed.")
