# topmark:header:start
#
#   project      : KissLint
#   file         : reporter.py
#   file_relpath : src/kisslint/diagnostic/reporter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The diagnostic reporter shared by all rule sets.

The reporter owns the run's report state: the overall pass flag, the file
currently being checked and the index of the current line. Rule sets move the
cursor (`switch_file`, `line`) and call `violation` whenever a rule fails;
the reporter stamps the diagnostic with the cursor position and hands it to
its sink.

A reporter cannot fail. Once a violation has been recorded the run stays
failed for the rest of its lifetime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kisslint.config.logging import get_logger
from kisslint.diagnostic.model import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from kisslint.cli_shared.console_api import ConsoleLike
    from kisslint.config.logging import KisslintLogger
    from kisslint.diagnostic.model import DiagnosticSink
    from kisslint.rules.codes import RuleCode

logger: KisslintLogger = get_logger(__name__)


class Reporter:
    """Accumulate pass/fail state and emit line-tagged diagnostics.

    Attributes:
        sink (DiagnosticSink): Receiver of emitted diagnostics.
        file (str): Name of the recipe file currently being checked.
        line (int): 0-based index of the current line.
        count (int): Number of violations recorded so far.
    """

    sink: DiagnosticSink
    file: str
    line: int
    count: int

    def __init__(self, sink: DiagnosticSink) -> None:
        self.sink = sink
        self.file = ""
        self.line = 0
        self.count = 0
        self._passed = True
        self._file_clean = True

    @property
    def passed(self) -> bool:
        """True iff no violation was ever recorded."""
        return self._passed

    def switch_file(self, name: str) -> None:
        """Make ``name`` the current file.

        If the previous file had a violation, the sink is asked to separate the
        two groups of diagnostics.
        """
        logger.debug("Switching to recipe file %r", name)
        if not self._file_clean:
            self.sink.separate()
        self.file = name
        self.line = 0
        self._file_clean = True

    def violation(self, code: RuleCode, message: str) -> None:
        """Record a style violation at the current line."""
        self._passed = False
        self._file_clean = False
        self.count += 1
        self.sink.emit(Diagnostic(self.file, self.line + 1, code, message))

    def advisory(self, code: RuleCode, message: str) -> None:
        """Emit a whole-file advisory; it does not affect the pass state."""
        self.sink.emit(Diagnostic(self.file, None, code, message, DiagnosticLevel.WARNING))


class ConsoleSink:
    """Write diagnostics to the console's error stream.

    The rendered text is ``str(diagnostic)``; with color enabled only the rule
    code tag is colored.
    """

    def __init__(self, console: ConsoleLike) -> None:
        self.console = console

    def emit(self, diagnostic: Diagnostic) -> None:
        """Write one diagnostic line."""
        text = str(diagnostic)
        if self.console.enable_color:
            tag = f"(#{diagnostic.code.value})"
            text = text[: -len(tag)] + diagnostic.level.color(tag)
        self.console.note(text)

    def separate(self) -> None:
        """Write a blank line between groups."""
        self.console.note("")
