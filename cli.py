#!/usr/bin/env python3
"""
Advent of Code 2023 CLI

Solves a day's puzzle from an input file and prints the answers in
various formats.
"""

import argparse
import sys
from pathlib import Path

from solvers import SOLVERS, get_solver, read_lines, PuzzleError
from solvers.games import CubeSet
from exporters import to_text, to_json, to_yaml


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="aoc",
        description="Solve an Advent of Code 2023 puzzle from an input file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  aoc 3 input.txt                    # Both parts of day 3, text output
  aoc 1 input.txt --part 2           # Only part 2 of day 1
  aoc 3 input.txt --ascii-style=ascii  # Pure ASCII (no Unicode)
  aoc 4 input.txt -f json -o out.json  # JSON output to file
  aoc 2 input.txt --bag 12 13 14     # Day 2 with an explicit bag
  cat input.txt | aoc 3 -            # Read the input from stdin
  aoc --list                         # Show the available days
        """,
    )

    # Positional arguments
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        help="Puzzle day to solve",
    )

    parser.add_argument(
        "input",
        nargs="?",
        help="Puzzle input file ('-' for stdin)",
    )

    # Output options
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=["tree", "ascii"],
        default="tree",
        help="Text output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    # Solving options
    parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        default=None,
        help="Only solve one part of the puzzle (default: both)",
    )

    parser.add_argument(
        "--bag",
        nargs=3,
        type=int,
        metavar=("RED", "GREEN", "BLUE"),
        default=None,
        help="Cube counts in the bag for day 2 (default: 12 13 14)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the available days and exit",
    )

    return parser.parse_args(args)


def list_days() -> str:
    """Return one line per registered day."""
    return "\n".join(
        f"Day {day}: {SOLVERS[day].TITLE}" for day in sorted(SOLVERS)
    )


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    if parsed.list:
        print(list_days())
        return 0

    if parsed.day is None or parsed.input is None:
        print("Error: a day and an input file are required", file=sys.stderr)
        return 1

    try:
        solver = get_solver(parsed.day)
    except PuzzleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Load the input
    try:
        lines = read_lines(parsed.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input '{parsed.input}': {e}", file=sys.stderr)
        return 1

    options = {"part": parsed.part}
    if parsed.bag is not None:
        options["bag"] = CubeSet(*parsed.bag)

    # Solve the puzzle
    try:
        sheet = solver.solve(lines, **options)
    except PuzzleError as e:
        print(f"Error solving day {parsed.day}: {e}", file=sys.stderr)
        return 1

    # Generate output
    if parsed.format == "json":
        output = to_json(sheet)
    elif parsed.format == "yaml":
        output = to_yaml(sheet)
    else:  # text (default)
        output = to_text(sheet, style=parsed.ascii_style)

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
