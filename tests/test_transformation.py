import numpy as np
import pytest

from skeletongraph import SparseGraph, pyvertex, pyedge, pytransformation, ConsistencyChecker


def _rotation_z(angle):
    return pytransformation.from_rotation_vector((0.0, 0.0, angle))


def test_identity_leaves_points_unchanged():
    point = np.array([1.0, -2.0, 3.5])

    np.testing.assert_allclose(pytransformation()(point), point)
    np.testing.assert_allclose(pytransformation.identity()(point), point)


def test_rotation_vector_quarter_turn():
    transform = pytransformation.from_rotation_vector((0.0, 0.0, np.pi / 2), (1.0, 0.0, 0.0))

    np.testing.assert_allclose(transform((1.0, 0.0, 0.0)), [1.0, 1.0, 0.0], atol=1e-12)


def test_quaternion_matches_rotation_vector():
    angle = 0.7
    from_quaternion = pytransformation.from_quaternion(np.cos(angle / 2), 0.0, 0.0, np.sin(angle / 2))

    np.testing.assert_allclose(from_quaternion.aRotation, _rotation_z(angle).aRotation, atol=1e-12)


def test_quaternion_is_normalized():
    transform = pytransformation.from_quaternion(2.0, 0.0, 0.0, 0.0)

    np.testing.assert_allclose(transform.aRotation, np.eye(3), atol=1e-12)


def test_invalid_rotations_are_rejected():
    with pytest.raises(ValueError):
        pytransformation(np.diag([2.0, 1.0, 1.0]))
    with pytest.raises(ValueError):
        pytransformation(np.diag([1.0, 1.0, -1.0]))
    with pytest.raises(ValueError):
        pytransformation(np.eye(2))
    with pytest.raises(ValueError):
        pytransformation.from_quaternion(0.0, 0.0, 0.0, 0.0)


def test_composition_and_inverse():
    t1 = pytransformation.from_rotation_vector((0.3, -0.2, 0.5), (1.0, 2.0, 3.0))
    t2 = pytransformation.from_rotation_vector((-0.1, 0.4, 0.0), (0.0, -1.0, 0.5))
    point = np.array([0.5, -1.5, 2.0])

    np.testing.assert_allclose((t2 * t1)(point), t2(t1(point)), atol=1e-12)
    np.testing.assert_allclose((t1.inverse() * t1)(point), point, atol=1e-12)
    np.testing.assert_allclose(t1.get_matrix() @ np.append(point, 1.0), np.append(t1(point), 1.0),
                               atol=1e-12)


def test_transform_points_matches_single_point_calls():
    transform = pytransformation.from_rotation_vector((0.1, 0.2, 0.3), (4.0, 5.0, 6.0))
    points = np.arange(12, dtype=float).reshape(4, 3)

    expected = np.array([transform(p) for p in points])

    np.testing.assert_allclose(transform.transform_points(points), expected, atol=1e-12)
    with pytest.raises(ValueError):
        transform.transform_points(np.zeros((4, 2)))


def _build_graph():
    graph = SparseGraph()
    v = [graph.add_vertex(pyvertex(p)) for p in [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 2.0, 3.0)]]
    graph.add_edge(pyedge(v[0], v[1]))
    graph.add_edge(pyedge(v[1], v[2]))
    graph.add_edge(pyedge(v[2], v[0]))
    return graph


def _coordinates(graph):
    vertices = np.array([graph.get_vertex(i).pPoint for i in graph.get_all_vertex_ids()])
    edges = np.array([np.concatenate([graph.get_edge(i).pPoint_start, graph.get_edge(i).pPoint_end])
                      for i in graph.get_all_edge_ids()])
    return vertices, edges


def test_transform_frame_is_compositional():
    t1 = pytransformation.from_rotation_vector((0.0, 0.5, 0.0), (1.0, 0.0, 0.0))
    t2 = pytransformation.from_rotation_vector((0.2, 0.0, -0.4), (0.0, 3.0, -1.0))

    stepwise = _build_graph()
    stepwise.transform_frame(t1)
    stepwise.transform_frame(t2)

    composed = _build_graph()
    composed.transform_frame(t2 * t1)

    for a, b in zip(_coordinates(stepwise), _coordinates(composed)):
        np.testing.assert_allclose(a, b, atol=1e-12)


def test_transform_frame_keeps_cached_points_in_step():
    graph = _build_graph()

    graph.transform_frame(pytransformation.from_rotation_vector((0.3, 0.3, 0.3), (5.0, 5.0, 5.0)))

    assert ConsistencyChecker(graph).check_cached_points(1e-12) == []
    np.testing.assert_allclose(graph.get_vertex(0).pPoint, [5.0, 5.0, 5.0], atol=1e-12)


def test_transform_frame_accepts_plain_callable():
    graph = _build_graph()

    graph.transform_frame(lambda p: p * 2.0)

    np.testing.assert_allclose(graph.get_vertex(2).pPoint, [2.0, 4.0, 6.0])
    np.testing.assert_allclose(graph.get_edge(1).pPoint_end, [2.0, 4.0, 6.0])


def test_transform_frame_carries_existing_desync():
    graph = _build_graph()
    graph.get_vertex(1).pPoint = np.array([10.0, 0.0, 0.0])

    graph.transform_frame(pytransformation(aTranslation=(1.0, 1.0, 1.0)))

    np.testing.assert_allclose(graph.get_vertex(1).pPoint, [11.0, 1.0, 1.0])
    np.testing.assert_allclose(graph.get_edge(0).pPoint_end, [2.0, 1.0, 1.0])
    assert ConsistencyChecker(graph).check_cached_points() == [0, 1]


def test_failing_transform_leaves_graph_unchanged():
    graph = _build_graph()
    before = _coordinates(graph)
    calls = []

    def flaky(point):
        calls.append(point)
        if len(calls) == 5:
            raise RuntimeError("transform failed")
        return point + 1.0

    with pytest.raises(RuntimeError):
        graph.transform_frame(flaky)

    for a, b in zip(before, _coordinates(graph)):
        np.testing.assert_array_equal(a, b)


def test_transform_returning_wrong_shape_leaves_graph_unchanged():
    graph = _build_graph()
    before = _coordinates(graph)

    with pytest.raises(ValueError):
        graph.transform_frame(lambda p: p[:2])

    for a, b in zip(before, _coordinates(graph)):
        np.testing.assert_array_equal(a, b)
