# topmark:header:start
#
#   project      : KissLint
#   file         : color.py
#   file_relpath : src/kisslint/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for KissLint.

This module provides the ColorMode enum and the color-mode resolution based on
CLI flags, environment and TTY status. KissLint reports on stderr, so the TTY
check looks at the error stream.
"""

from __future__ import annotations

import os
import sys
from enum import Enum


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (stderr is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stderr_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **CLI override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: return `stderr.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value from `--color`;
            `None` means “not provided”.
        stderr_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stderr.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    if stderr_isatty is None:
        try:
            stderr_isatty = sys.stderr.isatty()
        except (OSError, ValueError):
            stderr_isatty = False
    return bool(stderr_isatty)
