# topmark:header:start
#
#   project      : KissLint
#   file         : console.py
#   file_relpath : src/kisslint/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for internals.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from kisslint.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        err (TextIO | None): Stream for error output. Defaults to `sys.stderr`.
    """

    enable_color: bool
    err: TextIO | None

    def __init__(
        self,
        *,
        enable_color: bool = True,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.err = err or sys.stderr

    def note(self, text: str = "", *, nl: bool = True) -> None:
        """Write an unstyled message to stderr.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr, prefixed with a yellow ``WARNING`` tag.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        self.note(f"{self.styled('WARNING', fg='yellow')} {text}", nl=nl)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr, prefixed with a red ``ERROR`` tag.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        self.note(f"{self.styled('ERROR', fg='red')} {text}", nl=nl)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Subset of keyword arguments supported by click.style.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
