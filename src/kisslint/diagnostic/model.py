# topmark:header:start
#
#   project      : KissLint
#   file         : model.py
#   file_relpath : src/kisslint/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable record of one finding in one recipe file.
    * DiagnosticSink: where the reporter sends diagnostics.
    * DiagnosticLog: in-memory sink used by the API and by tests.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Protocol, cast

from yachalk import chalk

from kisslint.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from kisslint.config.logging import KisslintLogger
    from kisslint.rules.codes import RuleCode


logger: KisslintLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics.

    ``ERROR`` marks a style violation and fails the run; ``WARNING`` marks an
    advisory that is shown but never counted.
    """

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level.

        Returns:
            Callable[[str], str]: The `yachalk` color function for this level.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """One finding in a recipe file.

    Attributes:
        file: Recipe file name (``build``, ``depends``, ...).
        line: 1-based line number, or None for whole-file advisories.
        code: Rule code.
        message: Human-readable description.
        level: Severity.
    """

    file: str
    line: int | None
    code: RuleCode
    message: str
    level: DiagnosticLevel = DiagnosticLevel.ERROR

    def __str__(self) -> str:
        if self.line is None:
            return f"{self.file}: {self.message} (#{self.code.value})"
        return f"{self.file} @ line {self.line}: {self.message} (#{self.code.value})"


class DiagnosticSink(Protocol):
    """Receiver of diagnostics emitted by the reporter."""

    def emit(self, diagnostic: Diagnostic) -> None:
        """Handle a single diagnostic."""
        ...

    def separate(self) -> None:
        """Mark the end of a group of diagnostics belonging to one file."""
        ...


@dataclass
class DiagnosticLog:
    """In-memory diagnostic sink.

    Collects every diagnostic it receives in emission order and remembers how
    many file groups were closed by the reporter.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])
    groups: int = 0

    def emit(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the log."""
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %s", diagnostic.level.value, diagnostic)

    def separate(self) -> None:
        """Count a closed group of diagnostics."""
        self.groups += 1

    def errors(self) -> list[Diagnostic]:
        """Return the style violations, in emission order."""
        return [d for d in self.items if d.level == DiagnosticLevel.ERROR]

    def warnings(self) -> list[Diagnostic]:
        """Return the advisories, in emission order."""
        return [d for d in self.items if d.level == DiagnosticLevel.WARNING]

    def for_file(self, name: str) -> list[Diagnostic]:
        """Return the diagnostics reported against recipe file ``name``."""
        return [d for d in self.items if d.file == name]

    def codes(self) -> list[str]:
        """Return the rule codes of all diagnostics, in emission order."""
        return [d.code.value for d in self.items]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
