# topmark:header:start
#
#   project      : KissLint
#   file         : precheck.py
#   file_relpath : src/kisslint/precheck.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External pre-condition checks.

Before any style rule runs, the package manager's own consistency check
(``kiss c``) and ``shellcheck`` must pass on the recipe. Only their exit status
matters; their output goes straight to the terminal.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from kisslint.config.logging import get_logger
from kisslint.constants import BUILD_FILE
from kisslint.errors import PrecheckFailedError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from kisslint.config.logging import KisslintLogger

logger: KisslintLogger = get_logger(__name__)


@dataclass(frozen=True)
class Precheck:
    """An external command that must exit with status 0.

    Attributes:
        name: Name used in the failure message.
        argv: Command line to run in the recipe directory.
    """

    name: str
    argv: tuple[str, ...]


PRECHECKS: Final[tuple[Precheck, ...]] = (
    Precheck(name="kiss c", argv=("kiss", "c")),
    Precheck(name="shellcheck", argv=("shellcheck", BUILD_FILE)),
)


def run_precheck(check: Precheck, directory: Path) -> bool:
    """Run one pre-check and return whether it succeeded.

    Raises:
        PrecheckFailedError: If the command cannot be started at all.
    """
    logger.info("Running pre-check %s in %s", check.argv, directory)
    try:
        completed = subprocess.run(list(check.argv), cwd=directory, check=False)
    except OSError as e:
        raise PrecheckFailedError(f"{check.name} could not be run: {e}") from e
    logger.debug("Pre-check %s exited with %d", check.name, completed.returncode)
    return completed.returncode == 0


def run_prechecks(directory: Path, checks: Iterable[Precheck] = PRECHECKS) -> None:
    """Run the pre-checks in order, stopping at the first failure.

    Raises:
        PrecheckFailedError: If a pre-check fails or cannot be started.
    """
    for check in checks:
        if not run_precheck(check, directory):
            raise PrecheckFailedError(f"{check.name} failed. Fix issues then try again.")
