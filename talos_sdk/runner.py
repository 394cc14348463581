"""Conformance runner: execute a vector corpus and collect a report."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from . import matcher, report
from .vectors import TestVector, VectorCorpus

logger = logging.getLogger(__name__)

DEFAULT_SUITE_NAME = "Conformance"


@dataclass(frozen=True)
class RunnerConfig:
    suite_name: str = DEFAULT_SUITE_NAME


@dataclass(frozen=True)
class TestOutcome:
    """Result of running one vector."""

    __test__ = False  # not a pytest test class

    vector_id: str
    passed: bool
    duration_seconds: float
    failure_detail: str | None = None


class ConformanceRunner:
    """Runs every vector of a corpus, in order, and reports per-vector results.

    Positive vectors run first, then negative vectors, each in file order.
    A failing vector never stops the run.
    """

    def __init__(self, config: RunnerConfig | None = None) -> None:
        self._config = config or RunnerConfig()

    @property
    def config(self) -> RunnerConfig:
        return self._config

    def run_vector(self, vector: TestVector, negative: bool) -> TestOutcome:
        """Evaluate and time a single vector."""
        started = time.perf_counter()
        error = matcher.evaluate(vector, negative)
        duration = time.perf_counter() - started

        if error is None:
            logger.debug("[PASS] %s (%.4fs)", vector.test_id, duration)
            return TestOutcome(vector.test_id, True, duration)

        logger.info("[FAIL] %s: %s", vector.test_id, error)
        return TestOutcome(vector.test_id, False, duration, str(error))

    def run(self, corpus: VectorCorpus) -> report.RunReport:
        """Run the whole corpus and return the aggregated report."""
        started = time.perf_counter()
        outcomes: list[TestOutcome] = []
        for vector in corpus.vectors:
            outcomes.append(self.run_vector(vector, negative=False))
        for vector in corpus.negative_cases:
            outcomes.append(self.run_vector(vector, negative=True))
        total = time.perf_counter() - started

        result = report.generate(outcomes, self._config.suite_name, total)
        logger.info(
            "Ran %d vectors in %.4fs: %s",
            result.total_count, total, result.summary(),
        )
        return result
