import numpy as np
import pytest

from tourbench.tasks.tsp import Instance, InvalidInstance, build_initial_tour
from tourbench.tasks.tsp.distance import DistanceModel


def test_square_perimeter(square):
    order, length = build_initial_tour(square.distance)
    assert order == [0, 1, 2, 3]
    assert length == 40


def test_lowest_index_wins_ties(crossed_square):
    order, length = build_initial_tour(crossed_square.distance)
    assert order == [0, 2, 1, 3]
    assert length == 40


def test_visits_every_node_once(random_instance):
    order, length = build_initial_tour(random_instance.distance)
    assert sorted(order) == list(range(random_instance.n))
    model = random_instance.distance
    expected = sum(model(order[i], order[(i + 1) % len(order)]) for i in range(len(order)))
    assert length == expected


def test_start_node(random_instance):
    order, _ = build_initial_tour(random_instance.distance, start=5)
    assert order[0] == 5
    assert len(set(order)) == random_instance.n


def test_single_node():
    assert build_initial_tour(Instance.from_points([(3, 4)]).distance) == ([0], 0.0)


def test_two_nodes():
    order, length = build_initial_tour(Instance.from_points([(0, 0), (3, 4)]).distance)
    assert order == [0, 1]
    assert length == 10


def test_empty_instance():
    with pytest.raises(InvalidInstance):
        build_initial_tour(DistanceModel(np.empty((0, 2))))


def test_start_out_of_range(square):
    with pytest.raises(InvalidInstance):
        build_initial_tour(square.distance, start=4)
