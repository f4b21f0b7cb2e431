# topmark:header:start
#
#   project      : KissLint
#   file         : base.py
#   file_relpath : src/kisslint/rules/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line-rule pipeline shared by the file rule sets.

A rule set is an immutable, ordered tuple of *line rules*. Each rule is a
callable taking a `LineContext`; it inspects ``ctx.line`` and reports any
number of violations through ``ctx.report``. Rules are independent: every rule
runs on every line, and none can suppress another.

    for each line:
        ctx.index, ctx.line = i, line
        for rule in rules:
            rule(ctx)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from kisslint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from kisslint.config.logging import KisslintLogger
    from kisslint.config.tables import RuleTables
    from kisslint.diagnostic.reporter import Reporter
    from kisslint.rules.codes import RuleCode

logger: KisslintLogger = get_logger(__name__)


@dataclass
class LineContext:
    """Per-file scan context handed to each line rule.

    Attributes:
        reporter (Reporter): Reporter of the current run.
        tables (RuleTables): Rule tables in effect.
        index (int): 0-based index of the current line.
        line (str): Text of the current line, without its line terminator.
    """

    reporter: Reporter
    tables: RuleTables
    index: int = 0
    line: str = ""

    def report(self, code: RuleCode, message: str) -> None:
        """Report a violation at the current line."""
        self.reporter.line = self.index
        self.reporter.violation(code, message)


class LineRule(Protocol):
    """A check applied to one line of a recipe file."""

    def __call__(self, ctx: LineContext) -> None: ...


def split_lines(text: str) -> list[str]:
    r"""Split file text into lines without terminators.

    Only ``\n`` ends a line; one ``\r`` before it is dropped. A trailing
    newline does not yield an extra empty line. Other control characters such
    as form feeds stay inside the line.
    """
    *terminated, last = text.split("\n")
    lines = [line[:-1] if line.endswith("\r") else line for line in terminated]
    if last:
        lines.append(last)
    return lines


def run_line_rules(
    lines: Iterable[str],
    rules: Iterable[LineRule],
    ctx: LineContext,
) -> None:
    """Apply every rule to every line, in order.

    Args:
        lines: The lines of the file being checked.
        rules: Ordered line rules.
        ctx: The scan context; its cursor is advanced in place.
    """
    rule_list = tuple(rules)
    for index, line in enumerate(lines):
        ctx.index = index
        ctx.line = line
        ctx.reporter.line = index
        for rule in rule_list:
            logger.trace("%s:%d: %r", ctx.reporter.file, index + 1, rule)
            rule(ctx)
