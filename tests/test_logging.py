"""Tests for logging utilities."""

import logging
from io import StringIO

from graphpaths import BellmanFord, DirectedGraph, Johnson
from graphpaths.logging import configure_logging, get_logger, set_log_level


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "graphpaths.test_module"


def test_get_logger_keeps_package_prefix():
    """Test module names already under the package are not prefixed twice."""
    assert get_logger("graphpaths.shortest").name == "graphpaths.shortest"
    assert get_logger().name == "graphpaths"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    assert get_logger("test_module") is get_logger("test_module")


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")
    try:
        set_log_level(logging.INFO)
        assert logger.level == logging.INFO
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
    finally:
        set_log_level(logging.WARNING)


def test_bellman_ford_logs_negative_cycle():
    """Test negative-cycle detection is logged at INFO."""
    captured = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=captured)
        G = DirectedGraph(range(2))
        G.insert_edges([(0, 1, -1), (1, 0, -1)])

        BellmanFord(G, 0)

        output = captured.getvalue()
        assert "Negative-weight cycle" in output
        assert "graphpaths.shortest" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_debug_run_summaries():
    """Test algorithms emit DEBUG run summaries."""
    captured = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=captured)
        G = DirectedGraph(range(2))
        G.insert_edge(0, 1, 3)

        Johnson(G)

        output = captured.getvalue()
        assert "bellman-ford:" in output
        assert "dijkstra:" in output
        assert "johnson:" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_quiet_by_default():
    """Test nothing is written at the default WARNING level."""
    captured = StringIO()
    try:
        configure_logging(level=logging.WARNING, stream=captured)
        G = DirectedGraph(range(2))
        G.insert_edges([(0, 1, -1), (1, 0, -1)])
        BellmanFord(G, 0)
        assert captured.getvalue() == ""
    finally:
        configure_logging(level=logging.WARNING)


def test_configuration_applies_to_later_loggers():
    """Test loggers created after configure_logging use its settings."""
    captured = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(levelname)s|%(message)s", stream=captured)
        logger = get_logger("created_after_configure")

        logger.info("late logger")

        assert logger.level == logging.INFO
        assert captured.getvalue() == "INFO|late logger\n"
    finally:
        configure_logging(level=logging.WARNING)
