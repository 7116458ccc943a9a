import pytest

from skeletongraph import SparseGraph, pyvertex, pyedge


@pytest.fixture
def graph() -> SparseGraph:
    return SparseGraph()


@pytest.fixture
def square(graph):
    """Four vertices on a unit square joined into a loop, plus one diagonal."""
    points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0), (0.0, 1.0, 0.0)]
    v = [graph.add_vertex(pyvertex(p)) for p in points]
    e = [graph.add_edge(pyedge(v[i], v[(i + 1) % 4])) for i in range(4)]
    e.append(graph.add_edge(pyedge(v[0], v[2])))
    return graph, v, e
