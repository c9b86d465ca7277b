import numpy as np
import pytest

from tourbench.tasks.tsp import AllocationError, Instance, InvalidInstance, build_candidates
from tourbench.tasks.tsp import candidates as candidates_mod


def test_matches_brute_force(random_instance):
    model = random_instance.distance
    cand = build_candidates(model, k=8)
    assert cand.k == 8
    for i in range(random_instance.n):
        expected = sorted((model(i, j), j) for j in range(random_instance.n) if j != i)[:8]
        assert list(zip(cand.length[i].tolist(), cand.to[i].tolist())) == expected


def test_list_properties(random_instance):
    cand = build_candidates(random_instance.distance, k=20)
    for i in range(random_instance.n):
        to = cand.to[i].tolist()
        assert len(to) == 20
        assert i not in to
        assert len(set(to)) == len(to)
        assert np.all(np.diff(cand.length[i]) >= 0)


def test_capacity_adapts_to_small_instances(square):
    cand = build_candidates(square.distance, k=20)
    assert cand.k == 3
    assert cand.to[0].tolist() == [1, 3, 2]
    assert cand.length[0].tolist() == [10, 10, 14]


def test_ties_broken_by_index():
    inst = Instance.from_points([(0, 0), (0, 10), (10, 0), (-10, 0), (0, -10)])
    cand = build_candidates(inst.distance, k=2)
    assert cand.to[0].tolist() == [1, 2]


def test_coincident_points():
    inst = Instance.from_points([(5, 5)] * 6)
    cand = build_candidates(inst.distance, k=3)
    assert cand.to[0].tolist() == [1, 2, 3]
    assert cand.to[4].tolist() == [0, 1, 2]


def test_edges_expose_reserved_alpha(square):
    cand = build_candidates(square.distance, k=2)
    edges = cand.edges(2)
    assert [e.to for e in edges] == [1, 3]
    assert all(e.alpha == 0 for e in edges)
    assert cand.neighbors(2) == [(1, 10.0), (3, 10.0)]


def test_lists_are_read_only(square):
    cand = build_candidates(square.distance)
    with pytest.raises(ValueError):
        cand.to[0, 0] = 2


@pytest.mark.parametrize("points,k", [([(0, 0)], 5), ([(0, 0), (1, 1)], 0)])
def test_invalid(points, k):
    with pytest.raises(InvalidInstance):
        build_candidates(Instance.from_points(points).distance, k=k)


def test_allocation_failure(monkeypatch, square):
    def no_memory(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(candidates_mod.np, "empty", no_memory)
    with pytest.raises(AllocationError):
        build_candidates(square.distance)
