# topmark:header:start
#
#   project      : KissLint
#   file         : test_model.py
#   file_relpath : tests/diagnostic/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the diagnostic record and in-memory log."""

from __future__ import annotations

from kisslint.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
)
from kisslint.rules.codes import RuleCode


def test_rendering_with_and_without_line() -> None:
    located = Diagnostic("sources", 2, RuleCode.NON_CANONICAL_URL, "found www.")
    advisory = Diagnostic(
        "version", None, RuleCode.GIT_VERSION, "use git instead of 9999", DiagnosticLevel.WARNING
    )

    assert str(located) == "sources @ line 2: found www. (#1404)"
    assert str(advisory) == "version: use git instead of 9999 (#1602)"


def test_rule_codes_render_as_four_digits() -> None:
    assert str(RuleCode.INDENTATION) == "0202"
    assert all(len(code.value) == 4 and code.value.isdigit() for code in RuleCode)


def test_log_queries() -> None:
    log = DiagnosticLog()
    log.emit(Diagnostic("version", None, RuleCode.VERSION_FIELDS, "x", DiagnosticLevel.WARNING))
    log.emit(Diagnostic("build", 1, RuleCode.SHEBANG, "y"))
    log.emit(Diagnostic("build", 3, RuleCode.ECHO, "z"))

    assert len(log) == 3
    assert log.codes() == ["1603", "0204", "0214"]
    assert [d.code for d in log.errors()] == [RuleCode.SHEBANG, RuleCode.ECHO]
    assert [d.file for d in log.warnings()] == ["version"]
    assert len(log.for_file("build")) == 2

