# topmark:header:start
#
#   project      : KissLint
#   file         : depends.py
#   file_relpath : src/kisslint/rules/depends.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules for the ``depends`` file.

Each line names one dependency, optionally followed by `` make`` when it is
only needed at build time. Besides the per-line rules, the file as a whole
must be non-empty and sorted case-insensitively.

Matching is by prefix, so ``gitea`` is reported as the always-available
``git``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from kisslint.config.logging import get_logger
from kisslint.constants import BUILD_ONLY_MARKER, DEPENDS_FILE
from kisslint.rules.base import LineContext, run_line_rules, split_lines
from kisslint.rules.codes import RuleCode

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kisslint.config.logging import KisslintLogger
    from kisslint.config.tables import RuleTables
    from kisslint.diagnostic.reporter import Reporter
    from kisslint.rules.base import LineRule

logger: KisslintLogger = get_logger(__name__)


def check_always_available(ctx: LineContext) -> None:
    """Packages present on every system must not be listed."""
    for dep in ctx.tables.always_available:
        if ctx.line.startswith(dep):
            ctx.report(RuleCode.ALWAYS_AVAILABLE, f"dependency {dep} is always available")


def check_build_only(ctx: LineContext) -> None:
    """Build tooling must carry the build-time marker."""
    for dep in ctx.tables.build_only:
        if ctx.line.startswith(dep) and not ctx.line.endswith(BUILD_ONLY_MARKER):
            ctx.report(
                RuleCode.BUILD_DEP_AS_RUNTIME, f"build dependency {dep} is listed as runtime"
            )


DEPENDS_RULES: Final[tuple[LineRule, ...]] = (
    check_always_available,
    check_build_only,
)


def is_sorted(lines: Sequence[str]) -> bool:
    """Return True if ``lines`` is already in case-insensitive order.

    Lines that compare equal keep their relative order, so the check is a plain
    comparison with a stable sort.
    """
    return list(lines) == sorted(lines, key=str.lower)


def check_depends(text: str, reporter: Reporter, tables: RuleTables) -> None:
    """Check the text of a ``depends`` file.

    Args:
        text: Raw file text.
        reporter: Reporter of the current run.
        tables: Rule tables in effect.
    """
    reporter.switch_file(DEPENDS_FILE)

    if not text.strip():
        reporter.violation(RuleCode.EMPTY_DEPENDS, "empty depends file")
        return

    lines = split_lines(text)
    ctx = LineContext(reporter=reporter, tables=tables)
    run_line_rules(lines, DEPENDS_RULES, ctx)

    if not is_sorted(lines):
        logger.debug("depends is not sorted: %r", lines)
        reporter.line = 0
        reporter.violation(RuleCode.DEPENDS_NOT_SORTED, "depends file not sorted")
