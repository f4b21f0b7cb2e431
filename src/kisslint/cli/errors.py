# topmark:header:start
#
#   project      : KissLint
#   file         : errors.py
#   file_relpath : src/kisslint/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the KissLint CLI.

Usage:
    Core errors (`kisslint.errors`) are translated with `from_core_error` and
    raised from the command, so Click prints them and exits with the matching
    code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from kisslint.cli_shared.exit_codes import ExitCode
from kisslint.errors import (
    ConfigError,
    KisslintError,
    PrecheckFailedError,
    RecipeFileNotFoundError,
    RecipeFileReadError,
)

if TYPE_CHECKING:
    from kisslint.cli_shared.console_api import ConsoleLike


class KisslintCliError(click.ClickException):
    """Base class for all KissLint CLI errors.

    Attributes:
        console (ConsoleLike | None): Console to report through; when None the
            console is looked up on the current Click context.
    """

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, console: ConsoleLike | None = None) -> None:
        super().__init__(message)
        self.console = console

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        console = self.console
        ctx = click.get_current_context(silent=True)
        if console is None and ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is not None:
            console.error(self.format_message())
            return
        super().show(file)


class KisslintPrecheckError(KisslintCliError):
    """A pre-check command failed."""

    exit_code = ExitCode.FAILURE


class KisslintFileNotFoundError(KisslintCliError):
    """A required recipe file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class KisslintIOError(KisslintCliError):
    """A recipe file could not be read."""

    exit_code = ExitCode.IO_ERROR


class KisslintConfigError(KisslintCliError):
    """The rule-table configuration is invalid."""

    exit_code = ExitCode.CONFIG_ERROR


class KisslintUsageError(KisslintCliError):
    """Command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


_CLI_ERRORS: dict[type[KisslintError], type[KisslintCliError]] = {
    PrecheckFailedError: KisslintPrecheckError,
    RecipeFileNotFoundError: KisslintFileNotFoundError,
    RecipeFileReadError: KisslintIOError,
    ConfigError: KisslintConfigError,
}


def from_core_error(
    error: KisslintError, *, console: ConsoleLike | None = None
) -> KisslintCliError:
    """Return the CLI exception matching a core error."""
    cls = _CLI_ERRORS.get(type(error), KisslintCliError)
    return cls(str(error), console=console)
