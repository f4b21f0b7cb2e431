# topmark:header:start
#
#   project      : KissLint
#   file         : sources.py
#   file_relpath : src/kisslint/rules/sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules for the ``sources`` file (one source URI per line)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from kisslint.constants import SOURCES_FILE
from kisslint.rules.base import LineContext, run_line_rules, split_lines
from kisslint.rules.codes import RuleCode

if TYPE_CHECKING:
    from kisslint.config.tables import RuleTables
    from kisslint.diagnostic.reporter import Reporter
    from kisslint.rules.base import LineRule


def check_https(ctx: LineContext) -> None:
    """Sources must be fetched over a secure transport."""
    if not (ctx.line.startswith("https") or ctx.line.startswith("git+https")):
        ctx.report(RuleCode.NON_HTTPS_SOURCE, "found non-https source")


def check_remote_patch(ctx: LineContext) -> None:
    """Patches ship with the recipe; they are never downloaded."""
    line = ctx.line
    if (line.startswith("https") or line.startswith("http")) and line.endswith(".patch"):
        ctx.report(RuleCode.REMOTE_PATCH, "patches should not be remote")


def check_git_source(ctx: LineContext) -> None:
    """Release tarballs are preferred over VCS checkouts."""
    if ctx.line.startswith("git+"):
        ctx.report(RuleCode.GIT_SOURCE, "found git source; prefer release tarball if available")


def check_www(ctx: LineContext) -> None:
    if "://www." in ctx.line:
        ctx.report(RuleCode.NON_CANONICAL_URL, "found www.")


def check_git_suffix(ctx: LineContext) -> None:
    if ctx.line.endswith(".git"):
        ctx.report(RuleCode.NON_CANONICAL_URL, "found .git")


SOURCES_RULES: Final[tuple[LineRule, ...]] = (
    check_https,
    check_remote_patch,
    check_git_source,
    check_www,
    check_git_suffix,
)


def check_sources(text: str, reporter: Reporter, tables: RuleTables) -> None:
    """Check the text of a ``sources`` file.

    Args:
        text: Raw file text.
        reporter: Reporter of the current run.
        tables: Rule tables in effect.
    """
    reporter.switch_file(SOURCES_FILE)
    ctx = LineContext(reporter=reporter, tables=tables)
    run_line_rules(split_lines(text), SOURCES_RULES, ctx)
