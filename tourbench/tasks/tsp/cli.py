# tourbench/tasks/tsp/cli.py

import argparse
import json
import logging
import sys

from .baseline import solve_instance
from .config import SolverConfig
from .errors import InvariantViolation, TourError
from .instance import Instance
from .instances import DISTRIBUTIONS, generate_random_instance
from .tsplib import read_tsplib

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_INVARIANT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourbench",
        description="Nearest neighbor + candidate-list 2-opt for Euclidean TSP",
    )
    parser.add_argument('instance', nargs='?', help="TSPLIB .tsp file (EUC_2D)")
    parser.add_argument('time', nargs='?', type=float, default=None,
                        help="2-opt time budget in seconds (default: run to convergence)")
    parser.add_argument('-k', '--candidates', type=int, default=None,
                        help="candidate list size K (default 20, env TOURBENCH_CANDIDATES)")
    parser.add_argument('--max-passes', type=int, default=None,
                        help="stop 2-opt after this many passes")
    parser.add_argument('--random', type=int, metavar='N', default=None,
                        help="solve a generated instance with N nodes instead of a file")
    parser.add_argument('--distribution', choices=DISTRIBUTIONS, default='uniform')
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--ids', action='store_true', help="print TSPLIB node ids instead of indices")
    parser.add_argument('--json', action='store_true', help="print the result as JSON")
    parser.add_argument('-v', '--verbose', action='count', default=0)
    return parser


def _load(args) -> Instance:
    if args.random is not None:
        return Instance.from_dict(generate_random_instance(args.random, args.seed, args.distribution))
    return read_tsplib(args.instance)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.instance is None and args.random is None:
        parser.error("an instance file or --random N is required")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    step = "configuration"
    try:
        config = SolverConfig.from_env(
            candidates=args.candidates,
            time_limit_ms=None if args.time is None else args.time * 1000.0,
            max_passes=args.max_passes,
        )
        step = "loading instance"
        inst = _load(args)
        step = "solving"
        result = solve_instance(inst, config)
    except InvariantViolation as e:
        logger.error(f"Internal error while {step}: {e}")
        print(f"Error: {step} failed: {e}", file=sys.stderr)
        return EXIT_INVARIANT
    except TourError as e:
        logger.debug("Fatal error", exc_info=True)
        print(f"Error: {step} failed: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        out = result.to_dict()
        if args.ids:
            out['solution'] = [int(inst.ids[i]) for i in result.order]
        print(json.dumps(out, indent=2))
    else:
        print(result.format_report(inst.ids if args.ids else None))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
