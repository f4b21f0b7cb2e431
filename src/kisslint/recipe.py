# topmark:header:start
#
#   project      : KissLint
#   file         : recipe.py
#   file_relpath : src/kisslint/recipe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reading recipe files from a package directory.

``build`` and ``version`` are required; ``sources`` and ``depends`` are
optional and read as None when absent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kisslint.config.logging import get_logger
from kisslint.errors import RecipeFileNotFoundError, RecipeFileReadError

if TYPE_CHECKING:
    from pathlib import Path

    from kisslint.config.logging import KisslintLogger

logger: KisslintLogger = get_logger(__name__)


def read_optional(directory: Path, name: str) -> str | None:
    """Return the text of recipe file ``name``, or None if it does not exist.

    Raises:
        RecipeFileReadError: If the file exists but cannot be read as UTF-8 text.
    """
    path: Path = directory / name
    if not path.exists():
        logger.debug("Recipe file %s not present", path)
        return None
    try:
        # newline="" keeps lone carriage returns inside their line
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeFileReadError(f"cannot read {name}: {e}") from e


def read_required(directory: Path, name: str) -> str:
    """Return the text of recipe file ``name``.

    Raises:
        RecipeFileNotFoundError: If the file does not exist.
        RecipeFileReadError: If the file cannot be read as UTF-8 text.
    """
    text = read_optional(directory, name)
    if text is None:
        raise RecipeFileNotFoundError(f"{name} file not found in {directory}")
    return text
