# topmark:header:start
#
#   project      : KissLint
#   file         : build.py
#   file_relpath : src/kisslint/rules/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rules for the ``build`` script.

The script is scanned line by line with four groups of rules:

- indentation (stateful, see `kisslint.rules.indent`),
- structure: line length, shebang, blank line after the shebang,
- tokens: partially quoted variable expansions,
- commands: each ``;``/``&``-separated fragment is checked for direct compiler
  calls, ``mkdir`` without ``-p`` and ``echo``.

This is not a shell parser. Quoting, heredocs and continuation lines are not
understood; the rules work on prefixes, suffixes and whitespace-split tokens.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from kisslint.constants import BUILD_FILE, MAX_LINE_LENGTH, POSIX_SHEBANG
from kisslint.rules.base import LineContext, run_line_rules, split_lines
from kisslint.rules.codes import RuleCode
from kisslint.rules.indent import IndentationTracker

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kisslint.config.tables import RuleTables
    from kisslint.diagnostic.reporter import Reporter
    from kisslint.rules.base import LineRule


# --- structure ---


def check_line_length(ctx: LineContext) -> None:
    if len(ctx.line) > MAX_LINE_LENGTH:
        ctx.report(RuleCode.LINE_LENGTH, f"line exceeds {MAX_LINE_LENGTH} chars")


def check_shebang(ctx: LineContext) -> None:
    if ctx.index == 0 and not ctx.line.startswith(POSIX_SHEBANG):
        ctx.report(RuleCode.SHEBANG, "missing or incorrect POSIX shebang")


def check_blank_after_shebang(ctx: LineContext) -> None:
    if ctx.index == 1 and ctx.line != "":
        ctx.report(RuleCode.SHEBANG, "missing newline after shebang")


# --- tokens ---


def check_partial_quoting(ctx: LineContext) -> None:
    """Flag ``"$`` inside a token that is not itself fully double-quoted."""
    for tok in ctx.line.split():
        if '"$' in tok and not (tok.startswith('"') and tok.endswith('"')):
            ctx.report(RuleCode.PARTIAL_QUOTING, "quote entire string instead of variable")


# --- commands ---


def split_commands(line: str, separators: Sequence[str]) -> list[str]:
    """Split ``line`` on every separator character and strip each fragment."""
    if not separators:
        return [line.strip()]
    pattern = "[" + "".join(re.escape(sep) for sep in separators) + "]"
    return [fragment.strip() for fragment in re.split(pattern, line)]


def check_commands(ctx: LineContext) -> None:
    """Apply the command rules to each command fragment of the line."""
    for cmd in split_commands(ctx.line, ctx.tables.command_separators):
        for compiler in ctx.tables.compilers:
            if cmd.startswith(compiler):
                ctx.report(RuleCode.DIRECT_COMPILER, f"use $CC instead of {compiler}")

        if cmd.startswith("mkdir"):
            parts = cmd.split()
            if not (len(parts) > 1 and parts[1].startswith("-") and "p" in parts[1]):
                ctx.report(RuleCode.MKDIR_WITHOUT_P, "use mkdir with -p flag")

        if cmd.startswith("echo"):
            ctx.report(RuleCode.ECHO, "use printf instead of echo")


BUILD_LINE_RULES: Final[tuple[LineRule, ...]] = (
    check_line_length,
    check_shebang,
    check_blank_after_shebang,
    check_partial_quoting,
    check_commands,
)


def check_build(text: str, reporter: Reporter, tables: RuleTables) -> None:
    """Check the text of a ``build`` script.

    A fresh `IndentationTracker` runs first on every line, followed by
    `BUILD_LINE_RULES`; the tracker is discarded when the scan ends.

    Args:
        text: Raw file text.
        reporter: Reporter of the current run.
        tables: Rule tables in effect.
    """
    reporter.switch_file(BUILD_FILE)
    ctx = LineContext(reporter=reporter, tables=tables)
    run_line_rules(split_lines(text), (IndentationTracker(), *BUILD_LINE_RULES), ctx)
