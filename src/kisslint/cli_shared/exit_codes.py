# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/kisslint/cli_shared/exit_codes.py
#   project      : KissLint
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the KissLint CLI.

Style violations never change the exit code: a run that found issues still
exits with `SUCCESS`. Non-zero codes signal a broken precondition. Values follow
the BSD `sysexits` convention where practical, so other tooling can interpret
failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the KissLint CLI.

    Attributes:
        SUCCESS: The run completed (with or without style violations).
        FAILURE: Generic failure, including a failing pre-check command.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: A required recipe file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: A recipe file could not be read or decoded. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid rule-table configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
