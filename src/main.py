"""
Main Entry Point - Handbook Exercises

Runs the whole exercise set on configured inputs, or a single exercise on
inputs given on the command line.
"""

import sys
import os
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.coreutils.logging import setup_logging
from pydantic import ValidationError
import polars as pl

from src.orchestration.handbook import EXERCISES, HandbookRunner, load_inputs_from_env
from src.transformation.aggregates import median, mode
from src.transformation.errors import InvalidArgumentError
from src.transformation.loops import bounded_decrement, inclusive_or_exclusive_range
from src.transformation.strings import pig_latin_text

logger = setup_logging()


def build_parser():
    """Build the command line parser"""
    import argparse

    parser = argparse.ArgumentParser(description="Handbook Exercises")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run exercises on configured inputs")
    run_parser.add_argument(
        "--exercise",
        choices=["all"] + EXERCISES,
        default="all",
        help="Exercise to run",
    )

    median_parser = subparsers.add_parser("median", help="Median of integers")
    median_parser.add_argument("values", nargs="*", type=int)
    median_parser.add_argument(
        "--average-even",
        action="store_true",
        help="Average the two central values on even length",
    )

    mode_parser = subparsers.add_parser("mode", help="Most frequent integer")
    mode_parser.add_argument("values", nargs="*", type=int)

    pig_parser = subparsers.add_parser("pig-latin", help="Convert words to pig latin")
    pig_parser.add_argument("words", nargs="*")

    decrement_parser = subparsers.add_parser("decrement", help="Decrement a value n times")
    decrement_parser.add_argument("value", type=int)
    decrement_parser.add_argument("count", type=int)

    range_parser = subparsers.add_parser("range", help="Print 0..end")
    range_parser.add_argument("end", type=int)
    range_parser.add_argument(
        "--exclusive",
        action="store_true",
        help="Stop one below end",
    )

    return parser


def format_results(results: pl.DataFrame) -> List[str]:
    """One untruncated line per result row"""
    lines = []
    for row in results.iter_rows(named=True):
        if row["succeeded"]:
            lines.append(f"{row['exercise']}: {row['input']} -> {row['output']}")
        else:
            lines.append(f"{row['exercise']}: {row['input']} -> error: {row['error']}")
    return lines


def run_command(args) -> object:
    """Run a one-shot exercise command and return its result"""
    if args.command == "median":
        return median(args.values, average_even=args.average_even)
    elif args.command == "mode":
        return mode(args.values)
    elif args.command == "pig-latin":
        return pig_latin_text(" ".join(args.words))
    elif args.command == "decrement":
        return bounded_decrement(args.value, args.count)
    elif args.command == "range":
        return list(inclusive_or_exclusive_range(args.end, not args.exclusive))
    else:
        raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    if args.command == "run":
        exercises = None if args.exercise == "all" else [args.exercise]
        try:
            inputs = load_inputs_from_env()
        except (ValidationError, ValueError) as e:
            logger.error(f"❌ Invalid HANDBOOK_* configuration: {e}")
            return 2

        results = HandbookRunner(inputs).run(exercises)
        for line in format_results(results):
            print(line)
        return 0

    try:
        result = run_command(args)
    except InvalidArgumentError as e:
        logger.error(f"❌ {args.command}: {e}")
        return 2

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
