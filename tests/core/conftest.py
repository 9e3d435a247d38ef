"""Pytest fixtures for core tests."""

import pytest


@pytest.fixture
def chain_graph():
    """Undirected chain 1 - 2 - 3."""
    from tests.core.graph_test_helpers import build_graph

    return build_graph([1, 2, 3], [(1, 2), (2, 3)])


@pytest.fixture
def directed_pair():
    """Directed graph with a single edge 1 -> 2."""
    from tgfgraph.graph import GraphMode
    from tests.core.graph_test_helpers import build_graph

    return build_graph([1, 2], [(1, 2)], mode=GraphMode.DIRECTED)


@pytest.fixture
def empty_graph():
    """Fresh undirected graph."""
    from tgfgraph.graph import Graph

    return Graph()
