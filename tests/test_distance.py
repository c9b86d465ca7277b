import numpy as np

from tourbench.tasks.tsp import Instance


def test_symmetric_and_zero_diagonal(random_instance):
    model = random_instance.distance
    for i in range(0, 120, 7):
        assert model(i, i) == 0
        for j in range(0, 120, 11):
            assert model(i, j) == model(j, i)


def test_rounds_half_away_from_zero():
    inst = Instance.from_points([(0, 0), (0.5, 0), (2.5, 0), (0, 3.49)])
    model = inst.distance
    assert model(0, 1) == 1
    assert model(0, 2) == 3
    assert model(0, 3) == 3


def test_tsplib_rounding():
    inst = Instance.from_points([(0, 0), (10, 10)])
    assert inst.distance(0, 1) == 14
    assert isinstance(inst.distance(0, 1), int)


def test_row_matches_scalar(random_instance):
    model = random_instance.distance
    for i in (0, 17, 119):
        row = model.row(i)
        assert row.shape == (120,)
        assert [int(v) for v in row] == [model(i, j) for j in range(120)]


def test_row_is_a_fresh_array(square):
    row = square.distance.row(0)
    row[1] = np.inf
    assert square.distance.row(0)[1] == 10
