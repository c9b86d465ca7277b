#!/usr/bin/env python3
"""
TSP Baseline Experiment Runner

Runs nearest neighbor + candidate-list 2-opt on classic and random
instances and prints how much 2-opt improves on the construction.
"""

import argparse
import logging

import numpy as np

from .baseline import solve
from .instances import CLASSIC, DISTRIBUTIONS, generate_classic_instance, generate_random_instance


def run_classic_instances():
    """Run on classic geometric instances."""
    print("\n" + "=" * 70)
    print("CLASSIC INSTANCES: Known Geometric Configurations")
    print("=" * 70)

    results = {}
    for name in CLASSIC:
        instance = generate_classic_instance(name)
        result = solve(instance)
        results[name] = result

        print(f"\n--- {name.upper()} ({instance['dimension']} cities) ---")
        print(f"NN length:    {result['meta']['initial_objective']:.0f}")
        print(f"2-opt length: {result['objective']:.0f}")
        print(f"Moves:        {result['meta']['2opt_moves']}")
        print(f"Tour: {result['solution']}")

    return results


def run_scaling_experiment(sizes=(10, 20, 50, 100, 200, 500), candidates: int = 20):
    """Test how the algorithm scales with problem size."""
    print("\n" + "=" * 70)
    print("SCALING EXPERIMENT: Performance vs Problem Size")
    print("=" * 70)

    rows = []
    print(f"\n{'Size':>6} | {'NN Length':>12} | {'2-opt Length':>12} | {'Improvement':>10} | {'Time (ms)':>10} | {'Passes':>6}")
    print("-" * 76)

    for n in sizes:
        instance = generate_random_instance(n, seed=42, distribution='uniform')
        result = solve(instance, candidates=candidates)
        meta = result['meta']
        improvement = (meta['initial_objective'] - result['objective']) / meta['initial_objective'] * 100

        rows.append({
            'size': n,
            'nn_length': meta['initial_objective'],
            'opt_length': result['objective'],
            'improvement': improvement,
            'time_ms': meta['elapsed_ms'],
            'passes': meta['2opt_passes'],
        })
        print(f"{n:>6} | {meta['initial_objective']:>12.0f} | {result['objective']:>12.0f} | {improvement:>9.1f}% | {meta['elapsed_ms']:>10.1f} | {meta['2opt_passes']:>6}")

    return rows


def run_distribution_experiment(n: int = 50, seeds=(0, 1, 2, 3, 4)):
    """Test performance on different spatial distributions."""
    print("\n" + "=" * 70)
    print("DISTRIBUTION EXPERIMENT: Performance on Different City Layouts")
    print("=" * 70)

    print(f"\n{'Distribution':>12} | {'Avg Length':>12} | {'Std Dev':>10} | {'Avg Time (ms)':>12}")
    print("-" * 56)

    summary = {}
    for dist in DISTRIBUTIONS:
        results = [solve(generate_random_instance(n, seed=seed, distribution=dist)) for seed in seeds]
        lengths = [r['objective'] for r in results]
        times = [r['meta']['elapsed_ms'] for r in results]
        summary[dist] = float(np.mean(lengths))
        print(f"{dist:>12} | {np.mean(lengths):>12.1f} | {np.std(lengths):>10.1f} | {np.mean(times):>12.1f}")

    return summary


def run_time_limit_experiment(n: int = 200, time_limits=(0, 1, 5, 20, 100, 1000)):
    """Test impact of the 2-opt time budget on solution quality."""
    print("\n" + "=" * 70)
    print("TIME LIMIT EXPERIMENT: Solution Quality vs Computation Time")
    print("=" * 70)

    instance = generate_random_instance(n, seed=42, distribution='uniform')

    print(f"\nInstance: {n} cities, uniform distribution")
    print(f"\n{'Time Limit (ms)':>15} | {'Solution':>12} | {'Passes':>6} | {'Converged':>9}")
    print("-" * 52)

    rows = []
    for tl in time_limits:
        result = solve(instance, time_limit_ms=tl)
        meta = result['meta']
        rows.append((tl, result['objective'], meta['converged']))
        print(f"{tl:>15} | {result['objective']:>12.0f} | {meta['2opt_passes']:>6} | {str(meta['converged']):>9}")

    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(description="TSP baseline experiments")
    parser.add_argument('--quick', action='store_true', help="small sizes only")
    parser.add_argument('-v', '--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("=" * 70)
    print("TSP BASELINE EXPERIMENTS")
    print("Nearest Neighbor Construction + Candidate-List 2-opt")
    print("=" * 70)

    run_classic_instances()
    if args.quick:
        run_scaling_experiment(sizes=(10, 20, 50))
    else:
        run_scaling_experiment()
        run_distribution_experiment()
        run_time_limit_experiment()

    print("\n" + "=" * 70)
    print("ALL EXPERIMENTS COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
