"""Tests for RunReport and its rich summary."""

import logging

from rich.console import Console

from techies_site.pipeline.report import RunReport, print_report


def test_check_records_error_only_on_failure():
    report = RunReport("verify")
    assert report.check(True, "fine") is True
    assert report.check(False, "broken") is False
    assert report.errors == ["broken"]
    assert not report.ok


def test_warnings_do_not_fail_run(caplog):
    report = RunReport("build")
    with caplog.at_level(logging.WARNING):
        report.warn("favicon missing", logging.getLogger("t"))
    assert report.ok
    assert report.warning_count == 1
    assert "favicon missing" in caplog.text


def test_count_accumulates():
    report = RunReport("build")
    report.count("Pages")
    report.count("Pages")
    report.count("Person pages", 5)
    assert report.counts == {"Pages": 2, "Person pages": 5}


def test_print_report_lists_details():
    console = Console(record=True, width=120)
    report = RunReport("verify")
    report.count("HTML files", 3)
    report.error("Missing: about/index.html")
    report.warn("index.html references [/assets/x.png] but file not found in output")

    print_report(report, console)
    text = console.export_text()

    assert "verify summary" in text
    assert "HTML files" in text
    assert "ERROR: Missing: about/index.html" in text
    assert "[/assets/x.png]" in text


def test_print_report_without_details():
    console = Console(record=True, width=120)
    report = RunReport("extract")
    report.warn("hidden warning")
    print_report(report, console, show_details=False)
    assert "hidden warning" not in console.export_text()
