# topmark:header:start
#
#   project      : KissLint
#   file         : errors.py
#   file_relpath : src/kisslint/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the KissLint core.

These errors describe broken preconditions of a run (a failing external check,
a missing or unreadable recipe file, an invalid configuration). Style
violations are never raised; they are reported through the
[`Reporter`][kisslint.diagnostic.reporter.Reporter].

The CLI maps each class onto a Click exception with a matching exit code (see
`kisslint.cli.errors`).
"""

from __future__ import annotations


class KisslintError(Exception):
    """Base class for all KissLint errors."""


class RecipeFileNotFoundError(KisslintError):
    """A required recipe file does not exist."""


class RecipeFileReadError(KisslintError):
    """A recipe file exists but cannot be read or decoded."""


class PrecheckFailedError(KisslintError):
    """An external pre-condition command failed or could not be started."""


class ConfigError(KisslintError):
    """The rule-table configuration is missing, malformed or invalid."""
