"""
Textbook Crypto - Main Entry Point

Runs the literal test tables for every function and reports the results.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .harness.cases import ALL_TEST_CASES
from .harness.suite import run_suite


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textbook-crypto",
        description="Run the textbook RSA / ECB / CBC test tables.",
    )
    parser.add_argument(
        "--only", metavar="NAME", action="append", default=[],
        help="run only the named table (repeatable)",
    )
    parser.add_argument(
        "--list", action="store_true",
        help="list table names and exit",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for textbook-crypto. Returns the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list:
        for test_case in ALL_TEST_CASES:
            print(f"{test_case.name} ({len(test_case)} cases)")
        return 0

    test_cases = ALL_TEST_CASES
    if args.only:
        known = {tc.name for tc in ALL_TEST_CASES}
        unknown = [name for name in args.only if name not in known]
        if unknown:
            print(f"Unknown table(s): {', '.join(unknown)}", file=sys.stderr)
            return 2
        test_cases = [tc for tc in ALL_TEST_CASES if tc.name in args.only]

    print("=" * 70)
    print("Textbook Crypto test tables")
    print("=" * 70)
    report = run_suite(test_cases)

    return 0 if report.all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
