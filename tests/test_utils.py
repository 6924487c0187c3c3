"""Tests for graph utility functions."""

import pytest

from graphpaths import AlgorithmError, DirectedGraph, iter_edges, node_index_map, reconstruct_path


class TestNodeIndexMap:
    """Tests for node_index_map function."""

    def test_node_index_map_simple(self):
        """Test node index mapping on simple list."""
        node_to_idx, idx_to_node = node_index_map(["C", "A", "B"])

        assert node_to_idx == {"A": 0, "B": 1, "C": 2}
        assert idx_to_node == ["A", "B", "C"]

    def test_node_index_map_deterministic(self):
        """Test that node index mapping does not depend on input order."""
        assert node_index_map(["C", "A", "B"]) == node_index_map(["A", "B", "C"])

    def test_node_index_map_duplicates(self):
        """Test that duplicates are collapsed."""
        node_to_idx, idx_to_node = node_index_map(["A", "B", "A", "C"])
        assert len(node_to_idx) == 3
        assert idx_to_node == ["A", "B", "C"]


class TestIterEdges:
    """Tests for iter_edges function."""

    def test_iter_edges_order(self):
        """Test edges come out by tail index then adjacency order."""
        G = DirectedGraph(range(3))
        G.insert_edges([(2, 0, 1), (0, 2, 5), (0, 1, -1)])

        assert list(iter_edges(G)) == [(0, 2, 5), (0, 1, -1), (2, 0, 1)]

    def test_iter_edges_repeatable(self):
        """Test two passes give the same sequence."""
        G = DirectedGraph(range(3))
        G.insert_edges([(1, 0, 1), (0, 1, 2)])
        assert list(iter_edges(G)) == list(iter_edges(G))


class TestReconstructPath:
    """Tests for reconstruct_path function."""

    def test_reconstruct_path_simple(self):
        """Test simple path reconstruction."""
        assert reconstruct_path([None, 0, 1, 2], 3) == [0, 1, 2, 3]

    def test_reconstruct_path_source(self):
        """Test path to the source itself."""
        assert reconstruct_path([None, 0], 0) == [0]

    def test_reconstruct_path_cycle(self):
        """Test that a predecessor loop is reported."""
        with pytest.raises(AlgorithmError):
            reconstruct_path([None, 2, 1], 1)
