# topmark:header:start
#
#   project      : KissLint
#   file         : test_reporter.py
#   file_relpath : tests/diagnostic/test_reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Reporter` and `ConsoleSink`."""

from __future__ import annotations

import io

from kisslint.cli.console import ClickConsole
from kisslint.diagnostic import DiagnosticLog, Reporter
from kisslint.diagnostic.model import DiagnosticLevel
from kisslint.diagnostic.reporter import ConsoleSink
from kisslint.rules.codes import RuleCode


def test_fresh_reporter_passes() -> None:
    reporter = Reporter(DiagnosticLog())

    assert reporter.passed
    assert reporter.count == 0
    assert reporter.file == ""


def test_violation_uses_one_based_line() -> None:
    log = DiagnosticLog()
    reporter = Reporter(log)
    reporter.switch_file("build")
    reporter.line = 4

    reporter.violation(RuleCode.ECHO, "use printf instead of echo")

    (d,) = log.items
    assert (d.file, d.line, d.code) == ("build", 5, RuleCode.ECHO)
    assert d.level is DiagnosticLevel.ERROR


def test_pass_state_is_monotonic() -> None:
    reporter = Reporter(DiagnosticLog())
    reporter.switch_file("sources")
    reporter.violation(RuleCode.NON_HTTPS_SOURCE, "found non-https source")

    reporter.switch_file("depends")
    reporter.switch_file("build")

    assert not reporter.passed
    assert reporter.count == 1


def test_advisory_does_not_fail_the_run() -> None:
    log = DiagnosticLog()
    reporter = Reporter(log)
    reporter.switch_file("version")

    reporter.advisory(RuleCode.GIT_VERSION, "use git instead of 9999")

    assert reporter.passed
    assert reporter.count == 0
    assert log.warnings() == log.items
    assert str(log.items[0]) == "version: use git instead of 9999 (#1602)"


def test_separator_only_after_a_file_with_violations() -> None:
    log = DiagnosticLog()
    reporter = Reporter(log)

    reporter.switch_file("sources")
    reporter.switch_file("depends")
    assert log.groups == 0

    reporter.violation(RuleCode.EMPTY_DEPENDS, "empty depends file")
    reporter.switch_file("build")
    assert log.groups == 1

    reporter.switch_file("other")
    assert log.groups == 1


def test_switch_file_resets_line() -> None:
    reporter = Reporter(DiagnosticLog())
    reporter.line = 7

    reporter.switch_file("build")

    assert reporter.line == 0


def test_console_sink_plain_output() -> None:
    err = io.StringIO()
    console = ClickConsole(enable_color=False, err=err)
    reporter = Reporter(ConsoleSink(console))

    reporter.switch_file("depends")
    reporter.violation(RuleCode.EMPTY_DEPENDS, "empty depends file")
    reporter.switch_file("build")
    reporter.line = 2
    reporter.violation(RuleCode.ECHO, "use printf instead of echo")

    assert err.getvalue() == (
        "depends @ line 1: empty depends file (#1206)\n"
        "\n"
        "build @ line 3: use printf instead of echo (#0214)\n"
    )


def test_console_sink_colored_output_keeps_text() -> None:
    err = io.StringIO()
    console = ClickConsole(enable_color=True, err=err)
    reporter = Reporter(ConsoleSink(console))
    reporter.switch_file("build")

    reporter.violation(RuleCode.ECHO, "use printf instead of echo")

    text = err.getvalue()
    assert text.startswith("build @ line 1: use printf instead of echo ")
    assert "(#0214)" in text
