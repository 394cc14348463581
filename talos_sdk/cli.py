"""talos-conformance: run a test vector corpus against this SDK.

Exit codes:
    0  all vectors passed
    1  one or more vectors failed
    2  the vector file could not be read or parsed
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from .errors import CorpusError
from .report import write_report
from .runner import DEFAULT_SUITE_NAME, ConformanceRunner, RunnerConfig
from .vectors import load_corpus

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="talos-conformance",
        description="Run Talos SDK conformance test vectors.",
    )
    parser.add_argument("--vectors", required=True, help="Path to test vector JSON file")
    parser.add_argument("--report", default=None, help="Path to write JUnit XML report")
    parser.add_argument(
        "--suite-name",
        default=os.environ.get("TALOS_SUITE_NAME", DEFAULT_SUITE_NAME),
        help="Suite name used in the report (env: TALOS_SUITE_NAME)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every vector")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        corpus = load_corpus(args.vectors)
    except CorpusError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    logger.debug(
        "Loaded %d positive and %d negative vectors from %s",
        len(corpus.vectors), len(corpus.negative_cases), args.vectors,
    )

    result = ConformanceRunner(RunnerConfig(suite_name=args.suite_name)).run(corpus)

    for outcome in result.outcomes:
        if not outcome.passed:
            print(f"[FAIL] {outcome.vector_id}: {outcome.failure_detail}")

    if args.report:
        write_report(result, args.report)
        print(f"Report written to {args.report}")

    print(f"Ran {result.total_count} tests in {result.total_duration_seconds:.4f}")
    print(result.summary())
    return EXIT_OK if result.ok else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
