"""Tests for report generation and JUnit XML rendering."""

from lxml import etree

from talos_sdk.report import generate, to_junit_xml, write_report
from talos_sdk.runner import TestOutcome

OUTCOMES = [
    TestOutcome("sign_ok", True, 0.00123),
    TestOutcome("sign_bad", False, 0.5, "DID mismatch: want a, got b"),
    TestOutcome("verify_ok", True, 1.0),
]


def test_generate_counts() -> None:
    report = generate(OUTCOMES, "Conformance", 1.23456)
    assert report.suite_name == "Conformance"
    assert report.total_count == 3
    assert report.failure_count == 1
    assert report.error_count == 0
    assert report.total_duration_seconds == 1.23456
    assert report.outcomes == tuple(OUTCOMES)


def test_generate_accepts_iterators() -> None:
    report = generate(iter(OUTCOMES), "S", 0.0)
    assert report.total_count == 3


def test_error_count_always_zero() -> None:
    failing = [TestOutcome(f"sign_{i}", False, 0.0, "bad") for i in range(5)]
    report = generate(failing, "S", 0.0)
    assert report.failure_count == 5
    assert report.error_count == 0


def test_junit_xml_structure() -> None:
    xml = to_junit_xml(generate(OUTCOMES, "Conformance", 1.23456))
    assert xml.startswith(b"<?xml")

    root = etree.fromstring(xml)
    assert root.tag == "testsuites"
    suites = root.findall("testsuite")
    assert len(suites) == 1
    suite = suites[0]
    assert suite.get("name") == "Conformance"
    assert suite.get("tests") == "3"
    assert suite.get("failures") == "1"
    assert suite.get("errors") == "0"
    assert suite.get("time") == "1.2346"

    cases = suite.findall("testcase")
    assert [c.get("name") for c in cases] == ["sign_ok", "sign_bad", "verify_ok"]
    assert {c.get("classname") for c in cases} == {"Conformance"}
    assert [c.get("time") for c in cases] == ["0.0012", "0.5000", "1.0000"]

    assert cases[0].find("failure") is None
    failure = cases[1].find("failure")
    assert failure.get("message") == "DID mismatch: want a, got b"
    assert failure.text == "DID mismatch: want a, got b"


def test_junit_xml_escapes_text() -> None:
    outcomes = [TestOutcome("sign_<x>", False, 0.0, 'want "<a>" & got \'b\'')]
    root = etree.fromstring(to_junit_xml(generate(outcomes, "S&S", 0.0)))
    case = root.find("testsuite/testcase")
    assert root.find("testsuite").get("name") == "S&S"
    assert case.get("name") == "sign_<x>"
    assert case.find("failure").text == 'want "<a>" & got \'b\''



def test_junit_xml_replaces_control_characters() -> None:
    outcomes = [TestOutcome("sign_\x01", False, 0.0, "want did:key:z\x01bad, got \x00\x1b")]
    root = etree.fromstring(to_junit_xml(generate(outcomes, "S\x0b", 0.0)))
    case = root.find("testsuite/testcase")
    assert root.find("testsuite").get("name") == "S\ufffd"
    assert case.get("name") == "sign_\ufffd"
    assert case.get("classname") == "S\ufffd"
    failure = case.find("failure")
    assert failure.get("message") == "want did:key:z\ufffdbad, got \ufffd\ufffd"
    assert failure.text == "want did:key:z\ufffdbad, got \ufffd\ufffd"


def test_junit_xml_keeps_whitespace_and_astral_characters() -> None:
    detail = "line\none\ttab \U0001f600"
    root = etree.fromstring(to_junit_xml(generate([TestOutcome("sign", False, 0.0, detail)], "S", 0.0)))
    assert root.find("testsuite/testcase/failure").text == detail


def test_write_report(tmp_path) -> None:
    report = generate(OUTCOMES, "Conformance", 0.1)
    path = tmp_path / "report.xml"
    write_report(report, path)
    assert path.read_bytes() == to_junit_xml(report)
