# topmark:header:start
#
#   project      : KissLint
#   file         : test_sources.py
#   file_relpath : tests/rules/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``sources`` rule set."""

from __future__ import annotations

from tests.conftest import lines_and_codes, mark_rules, parametrize, run_rules
from kisslint.rules.sources import check_sources


@mark_rules
def test_clean_sources_pass() -> None:
    """Canonical https tarballs produce no findings."""
    log, reporter = run_rules(
        check_sources,
        "https://zlib.net/zlib-1.3.tar.gz\nhttps://example.org/x-1.0.tar.xz\n",
    )

    assert len(log) == 0
    assert reporter.passed


@mark_rules
def test_local_patch_is_flagged_as_non_https_only() -> None:
    """A relative patch path is not https but is not a *remote* patch."""
    log, _ = run_rules(check_sources, "patches/fix-musl.patch\n")

    assert lines_and_codes(log) == [(1, "1401")]


@mark_rules
@parametrize(
    "line, expected",
    [
        ("http://example.org/a.tar.gz", ["1401"]),
        ("https://example.org/fix.patch", ["1402"]),
        ("http://example.org/fix.patch", ["1401", "1402"]),
        ("git+https://github.com/a/b", ["1403"]),
        ("git+git://example.org/b", ["1401", "1403"]),
        ("https://www.example.org/a.tar.gz", ["1404"]),
        ("https://example.org/b.git", ["1404"]),
        ("git+https://www.example.org/b.git", ["1403", "1404", "1404"]),
    ],
)
def test_each_condition_is_reported(line: str, expected: list[str]) -> None:
    """Every matching condition is reported, in rule order, on the same line."""
    log, _ = run_rules(check_sources, line + "\n")

    assert log.codes() == expected
    assert all(d.line == 1 for d in log)


@mark_rules
def test_messages_and_line_numbers() -> None:
    """Diagnostics carry the 1-based line and the documented message."""
    log, _ = run_rules(
        check_sources,
        "https://example.org/a.tar.gz\nhttps://www.example.org/b.tar.gz\nhttps://e.org/c.git\n",
    )

    assert [str(d) for d in log] == [
        "sources @ line 2: found www. (#1404)",
        "sources @ line 3: found .git (#1404)",
    ]


@mark_rules
def test_empty_sources_file_has_no_findings() -> None:
    log, reporter = run_rules(check_sources, "")

    assert len(log) == 0
    assert reporter.file == "sources"
