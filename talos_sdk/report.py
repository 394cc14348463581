"""Run reports and JUnit XML rendering."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from lxml import etree

if TYPE_CHECKING:
    from .runner import TestOutcome


@dataclass(frozen=True)
class RunReport:
    """Aggregated result of one conformance run.

    ``error_count`` is carried for the report format but every failing
    vector is counted as a failure, so it is always 0.
    """

    suite_name: str
    total_count: int
    failure_count: int
    error_count: int
    total_duration_seconds: float
    outcomes: tuple["TestOutcome", ...]

    @property
    def ok(self) -> bool:
        return self.failure_count == 0 and self.error_count == 0

    def summary(self) -> str:
        """One-line summary: ``OK`` or ``FAILED (failures=N)``."""
        if self.ok:
            return "OK"
        return f"FAILED (failures={self.failure_count})"


def generate(
    outcomes: Iterable["TestOutcome"],
    suite_name: str,
    total_duration: float,
) -> RunReport:
    """Build a RunReport from per-vector outcomes, preserving their order."""
    outcomes = tuple(outcomes)
    return RunReport(
        suite_name=suite_name,
        total_count=len(outcomes),
        failure_count=sum(1 for o in outcomes if not o.passed),
        error_count=0,
        total_duration_seconds=total_duration,
        outcomes=outcomes,
    )


def _seconds(value: float) -> str:
    return f"{value:.4f}"


# Code points outside the XML 1.0 Char production
_XML_INVALID_RE = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def _xml_text(value: str) -> str:
    """Replace characters XML cannot carry with U+FFFD."""
    return _XML_INVALID_RE.sub("\ufffd", value)


def to_junit_xml(report: RunReport) -> bytes:
    """Render a report as a JUnit XML document.

    Layout::

        <testsuites>
          <testsuite name tests failures errors time>
            <testcase name classname time>
              <failure message="...">...</failure>
            </testcase>
          </testsuite>
        </testsuites>
    """
    root = etree.Element("testsuites")
    suite = etree.SubElement(
        root,
        "testsuite",
        name=_xml_text(report.suite_name),
        tests=str(report.total_count),
        failures=str(report.failure_count),
        errors=str(report.error_count),
        time=_seconds(report.total_duration_seconds),
    )
    for outcome in report.outcomes:
        case = etree.SubElement(
            suite,
            "testcase",
            name=_xml_text(outcome.vector_id),
            classname=_xml_text(report.suite_name),
            time=_seconds(outcome.duration_seconds),
        )
        if not outcome.passed:
            detail = _xml_text(outcome.failure_detail or "")
            failure = etree.SubElement(case, "failure", message=detail)
            failure.text = detail
    return etree.tostring(
        root, pretty_print=True, xml_declaration=True, encoding="UTF-8"
    )


def write_report(report: RunReport, path: str | Path) -> None:
    """Write the JUnit XML rendering of ``report`` to ``path``."""
    Path(path).write_bytes(to_junit_xml(report))
