"""
Demonstration Runner
====================
Command-line entry point for the course material.

Why is this file needed?
------------------------
It replaces the ad hoc "run this script and read the console" workflow:
1. Sets up logging (console + optional file).
2. Imports every lesson module so the complexity catalogue is complete.
3. Dispatches to the catalogue listing, the pattern lessons, the complexity
   walkthroughs and the growth plots.

Usage:
    $ python -m algopatterns list --pattern trie
    $ python -m algopatterns describe sliding_window
    $ python -m algopatterns optimize --sizes 10 100 1000
    $ python -m algopatterns plot --output growth.png
"""
from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import os
from typing import Iterable

from algopatterns import config, registry
from algopatterns.logging_config import setup_logging
from algopatterns.utils import timer
from algopatterns.patterns import PATTERN_MODULES
from algopatterns.complexity import walkthrough

logger = logging.getLogger(__name__)


@timer
def _emit(lines: Iterable[str]) -> int:
    for line in lines:
        print(line)
    return 0


def _print_entries(pattern: str | None) -> int:
    if pattern and pattern not in registry.list_patterns():
        raise SystemExit(f"unknown pattern: {pattern}")
    for entry in registry.list_entries(pattern):
        print(f"{entry.pattern:<20} {entry.name:<32} time {entry.time:<18} space {entry.space}")
    return 0


def _print_pattern(name: str) -> int:
    if name not in PATTERN_MODULES:
        raise SystemExit(f"unknown pattern: {name} (choose from {', '.join(sorted(PATTERN_MODULES))})")
    module = importlib.import_module(f"algopatterns.patterns.{name}")
    print(inspect.getdoc(module) or name)
    print()
    for entry in registry.list_entries(name):
        summary = f" - {entry.summary}" if entry.summary else ""
        print(f"{entry.name}: time {entry.time}, space {entry.space}{summary}")
    return 0


@timer
def _plot(max_n: int, output: str | None) -> int:
    from algopatterns.complexity.plotting import plot_growth_curves

    if output and not os.path.dirname(output):
        # bare file names land in the configured output directory
        output = config.get_output_path(output)
    plot_growth_curves(max_n=max_n, output=output)
    return 0


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algopatterns", description="Algorithmic patterns and Big-O lessons")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    parser.add_argument("--log-file", help="Also write logs to this file")
    sub = parser.add_subparsers(dest="command")

    list_parser = sub.add_parser("list", help="List catalogued examples with their complexity")
    list_parser.add_argument("--pattern", help="Filter to a specific pattern")

    desc_parser = sub.add_parser("describe", help="Print the lesson of a pattern")
    desc_parser.add_argument("name", help="Pattern name, e.g. two_pointers")

    ex_parser = sub.add_parser("examples", help="Walk through one example per complexity class")
    ex_parser.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Random seed for sample data")

    opt_parser = sub.add_parser("optimize", help="Time inefficient vs. optimized solutions")
    opt_parser.add_argument("--sizes", type=_positive_int, nargs="+", default=list(config.DEFAULT_INPUT_SIZES),
                            help="Input sizes to compare")
    opt_parser.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Random seed for test data")

    exc_parser = sub.add_parser("exercises", help="Walk through the exercise solutions")
    exc_parser.add_argument("--seed", type=int, default=config.RANDOM_SEED, help="Random seed for sample data")

    plot_parser = sub.add_parser("plot", help="Plot growth curves of the complexity classes")
    plot_parser.add_argument("--max-n", type=int, default=config.DEFAULT_PLOT_MAX_N, help="Largest input size")
    plot_parser.add_argument("--output", help="Save to this file instead of opening a window")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "plot" and args.max_n < 2:
        parser.error(f"--max-n must be at least 2, got {args.max_n}")

    setup_logging(level=logging.DEBUG if args.verbose else None, log_file=args.log_file)
    # the walkthrough import pulls in every complexity module, completing the catalogue
    logger.debug(f"Catalogue holds {len(registry.list_entries())} entries")

    if args.command == "list":
        return _print_entries(args.pattern)
    if args.command == "describe":
        return _print_pattern(args.name)
    if args.command == "examples":
        return _emit(walkthrough.complexity_examples(seed=args.seed))
    if args.command == "optimize":
        return _emit(walkthrough.optimization_examples(sizes=args.sizes, seed=args.seed))
    if args.command == "exercises":
        return _emit(walkthrough.exercise_solutions(seed=args.seed))
    if args.command == "plot":
        return _plot(args.max_n, args.output)

    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
