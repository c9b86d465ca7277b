import numpy as np
import pytest

from tourbench.tasks.tsp import InvalidInstance, TourResult
from tourbench.tasks.tsp.instances import (
    CLASSIC, DISTRIBUTIONS, generate_classic_instance, generate_random_instance,
)
from tourbench.tasks.tsp import run_experiments


def test_format_report():
    result = TourResult(initial_length=48, optimized_length=40, order=[0, 2, 1, 3], passes=2, moves=1)
    assert result.format_report() == (
        "Initial tour length: 48.00\n"
        "Optimized tour length: 40.00\n"
        "0 2 1 3"
    )
    assert result.format_report(ids=[5, 6, 7, 8]).endswith("5 7 6 8")


def test_format_report_marks_unconverged():
    result = TourResult(initial_length=48, optimized_length=44, order=[0, 1], passes=3, converged=False)
    assert "stopped before convergence after 3 passes" in result.format_report()


def test_to_dict():
    result = TourResult(initial_length=48, optimized_length=40, order=[0, 2, 1, 3], moves=1, candidates=3)
    out = result.to_dict()
    assert out['solution'] == [0, 2, 1, 3]
    assert out['objective'] == 40
    assert out['meta']['initial_objective'] == 48
    assert out['meta']['2opt_moves'] == 1


@pytest.mark.parametrize("distribution", DISTRIBUTIONS)
def test_random_instances_are_seeded(distribution):
    first = generate_random_instance(30, seed=11, distribution=distribution)
    second = generate_random_instance(30, seed=11, distribution=distribution)
    assert first['coords'].shape == (30, 2)
    assert np.array_equal(first['coords'], second['coords'])


@pytest.mark.parametrize("name", CLASSIC)
def test_classic_instances(name):
    instance = generate_classic_instance(name)
    assert instance['coords'].shape == (instance['dimension'], 2)


def test_unknown_generators():
    with pytest.raises(InvalidInstance):
        generate_random_instance(10, seed=0, distribution='spiral')
    with pytest.raises(InvalidInstance):
        generate_classic_instance('hexagon')


def test_classic_experiment(capsys):
    results = run_experiments.run_classic_instances()
    assert results['square']['objective'] == 4000
    assert results['pentagon']['objective'] == 2940
    assert "SQUARE (4 cities)" in capsys.readouterr().out


def test_quick_experiments(capsys):
    run_experiments.main(["--quick"])
    assert "ALL EXPERIMENTS COMPLETED" in capsys.readouterr().out
