"""
Shared fixtures: every contract test runs once per graph layout.
"""

import pytest

from graph import Graph, Representation


@pytest.fixture(params=list(Representation), ids=lambda r: r.value)
def graph(request) -> Graph:
    return Graph.empty(request.param, check_rep=True)
