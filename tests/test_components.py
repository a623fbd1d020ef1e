import itertools

import numpy as np
import pytest

from arclens.components import are_identical, connected_components
from arclens.errors import ConfigurationError
from arclens.geometry import dist, pairwise_distances
from arclens.reactive import Point


def _as_sets(components):
    return {frozenset(id(p) for p in component) for component in components}


def test_distance_utility():
    assert dist(Point(0, 0), Point(3, 4)) == pytest.approx(5.0)
    assert dist(Point(2, 2), Point(2, 2)) == 0.0


def test_pairwise_distances_is_symmetric():
    points = [Point(0, 0), Point(3, 4), Point(-1, 1)]
    matrix = pairwise_distances(points)

    assert matrix.shape == (3, 3)
    assert np.allclose(matrix, matrix.T)
    assert matrix[0, 1] == pytest.approx(5.0)


def test_two_near_points_and_one_far_point():
    p1, p2, p3 = Point(0, 0), Point(50, 0), Point(1000, 1000)

    components = connected_components([p1, p2, p3], 100)

    assert _as_sets(components) == {frozenset({id(p1), id(p2)}), frozenset({id(p3)})}


def test_fill_order_is_reverse_of_input():
    p1, p2, p3 = Point(0, 0), Point(50, 0), Point(1000, 1000)

    components = connected_components([p1, p2, p3], 100)

    assert components[0] == [p3]
    assert components[1][0] is p2 and components[1][1] is p1


def test_membership_is_transitive():
    chain = [Point(0, 0), Point(90, 0), Point(180, 0), Point(270, 0)]

    components = connected_components(chain, 100)

    assert len(components) == 1
    assert len(components[0]) == 4


def test_threshold_is_inclusive():
    a, b = Point(0, 0), Point(100, 0)

    assert len(connected_components([a, b], 100)) == 1
    assert len(connected_components([a, b], 99.999)) == 2


def test_coincident_points_share_a_cluster():
    a, b = Point(5, 5), Point(5, 5)

    assert len(connected_components([a, b], 0)) == 1


def test_empty_input_gives_no_clusters():
    assert connected_components([], 100) == []


def test_negative_threshold_is_rejected():
    with pytest.raises(ConfigurationError):
        connected_components([Point()], -1)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_result_is_a_partition_without_close_cross_pairs(seed):
    rng = np.random.default_rng(seed)
    points = [Point(x, y) for x, y in rng.uniform(0, 500, size=(25, 2))]
    threshold = 60.0

    components = connected_components(points, threshold)

    flat = [id(p) for component in components for p in component]
    assert sorted(flat) == sorted(id(p) for p in points)
    assert len(flat) == len(set(flat))
    for first, second in itertools.combinations(components, 2):
        for a in first:
            for b in second:
                assert dist(a, b) > threshold


@pytest.mark.parametrize("seed", [5, 6])
def test_every_member_is_reachable_by_short_hops(seed):
    rng = np.random.default_rng(seed)
    points = [Point(x, y) for x, y in rng.uniform(0, 300, size=(20, 2))]
    threshold = 50.0

    for component in connected_components(points, threshold):
        reached = {id(component[0])}
        frontier = [component[0]]
        while frontier:
            current = frontier.pop()
            for other in component:
                if id(other) not in reached and dist(current, other) <= threshold:
                    reached.add(id(other))
                    frontier.append(other)
        assert reached == {id(p) for p in component}


def test_are_identical_is_order_sensitive():
    a, b, c = Point(), Point(), Point()

    assert are_identical([[a, b], [c]], [[a, b], [c]])
    assert not are_identical([[a, b], [c]], [[b, a], [c]])
    assert not are_identical([[a, b], [c]], [[c], [a, b]])
    assert not are_identical([[a, b]], [[a, b], [c]])
    assert not are_identical([[a, b], [c]], [[a], [b, c]])
