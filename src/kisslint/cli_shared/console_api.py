# topmark:header:start
#
#   project      : KissLint
#   file         : console_api.py
#   file_relpath : src/kisslint/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for program output.

This protocol defines the small surface used by the runner and the CLI to emit
user-facing output, separate from internal logging. KissLint writes all of its
report (diagnostics, advisories, summary) to the error stream.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a console used by the runner and CLI commands.

    Implementations may use Click, Rich, or plain stdlib streams.
    """

    enable_color: bool

    def note(self, text: str = "", *, nl: bool = True) -> None:
        """Write an unstyled message to stderr."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a ``WARNING``-tagged message to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an ``ERROR``-tagged message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
