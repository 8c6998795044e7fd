"""Tests for the package-wide logger hierarchy."""

import logging
from io import StringIO

import pytest

from graphkit.algorithms.spf import bellman_ford
from graphkit.graph.adjacency import Graph
from graphkit.logging import (
    ROOT_LOGGER_NAME,
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Start and finish every test with an unconfigured root logger."""
    reset_logging()
    yield
    reset_logging()


def test_debug_toggle():
    logger = get_logger("graphkit.test")
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.addHandler(handler)
    try:
        logger.debug("hidden")
        assert "hidden" not in capture.getvalue()

        enable_debug_logging()
        logger.debug("shown")
        assert "shown" in capture.getvalue()

        disable_debug_logging()
        logger.debug("hidden-again")
        assert "hidden-again" not in capture.getvalue()
    finally:
        logger.removeHandler(handler)


def test_children_follow_global_level():
    first = get_logger("graphkit.algorithms.one")
    assert first.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.ERROR)
    second = get_logger("graphkit.algorithms.two")
    assert first.getEffectiveLevel() == logging.ERROR
    assert second.getEffectiveLevel() == logging.ERROR


def test_setup_is_idempotent():
    setup_root_logger(level=logging.INFO, handler=logging.StreamHandler(StringIO()))
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_custom_format():
    capture = StringIO()
    setup_root_logger(
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("graphkit.fmt").warning("careful")
    assert "WARNING|graphkit.fmt|careful" in capture.getvalue()


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("GRAPHKIT_LOG_LEVEL", "debug")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.DEBUG


def test_unknown_environment_level_falls_back(monkeypatch):
    monkeypatch.setenv("GRAPHKIT_LOG_LEVEL", "loud")
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.INFO


def test_algorithm_debug_records(caplog):
    g = Graph(2, directed=True)
    g.add_edge(0, 1, 2)
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        bellman_ford(g, 0)
    assert any(
        r.name == "graphkit.algorithms.spf" and "Bellman-Ford" in r.getMessage()
        for r in caplog.records
    )
