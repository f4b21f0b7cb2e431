# topmark:header:start
#
#   project      : KissLint
#   file         : indent.py
#   file_relpath : src/kisslint/rules/indent.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation tracking for ``build`` scripts.

The tracker keeps the column offsets at which successive indented lines
started. Each aligned offset is compared with the one recorded before it: a
step other than 0 or one unit is a violation, and the recorded offset is pulled
back by the size of the step (``offset = column - step``) so that one bad line
does not also condemn its neighbours.

The correction arithmetic is deliberately the historical one and is relied upon
by existing reports; do not "fix" its rounding.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from kisslint.config.logging import get_logger
from kisslint.constants import INDENT_WIDTH
from kisslint.rules.codes import RuleCode

if TYPE_CHECKING:
    from kisslint.config.logging import KisslintLogger
    from kisslint.rules.base import LineContext

logger: KisslintLogger = get_logger(__name__)

MSG_UNALIGNED: Final[str] = "incorrect indentation; use four spaces"
MSG_BAD_STEP: Final[str] = "incorrect indentation: use four spaces"


class IndentationTracker:
    """Per-file indentation state machine.

    Create one tracker per ``build`` scan. Calling the tracker with a
    `LineContext` makes it usable as a line rule.

    Attributes:
        width (int): Unit indentation width.
        offsets (list[int]): Recorded indentation offsets, oldest first.
    """

    width: int
    offsets: list[int]

    def __init__(self, width: int = INDENT_WIDTH) -> None:
        self.width = width
        self.offsets = []

    def observe(self, line: str) -> list[str]:
        """Feed one line and return the indentation problems it exhibits.

        Lines made only of spaces (including empty lines) are ignored.

        Args:
            line: The line text.

        Returns:
            The violation messages for this line (possibly empty).
        """
        column = -1
        first = ""
        for j, c in enumerate(line):
            if c != " ":
                column, first = j, c
                break
        if column < 0:
            return []

        problems: list[str] = []
        if column % self.width != 0:
            problems.append(MSG_UNALIGNED)
            self.offsets.append(0)
            return problems

        if first.isspace():
            # e.g. a tab: never a valid indentation character
            problems.append(MSG_UNALIGNED)
        else:
            self.offsets.append(column)

        if len(self.offsets) >= 2 and column != 0:
            step = abs(self.offsets[-1] - self.offsets[-2])
            if step not in (0, self.width):
                problems.append(MSG_BAD_STEP)
                self.offsets[-1] = column - step
                logger.debug(
                    "Indentation step %d at column %d; recorded %d", step, column, column - step
                )
        return problems

    def __call__(self, ctx: LineContext) -> None:
        for message in self.observe(ctx.line):
            ctx.report(RuleCode.INDENTATION, message)
