# topmark:header:start
#
#   project      : KissLint
#   file         : runner.py
#   file_relpath : src/kisslint/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Orchestration of a lint run.

Order of a run:

    pre-checks → version → sources → depends → build → summary

Each recipe file is loaded right before its rule set runs. A required file
that is missing aborts the run at that point; diagnostics already written for
earlier files stay written.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from kisslint.config.logging import get_logger
from kisslint.config.tables import DEFAULT_RULE_TABLES
from kisslint.constants import (
    BUILD_FILE,
    DEPENDS_FILE,
    SOURCES_FILE,
    STYLE_GUIDE_URL,
    VERSION_FILE,
)
from kisslint.diagnostic.reporter import ConsoleSink, Reporter
from kisslint.errors import RecipeFileNotFoundError
from kisslint.precheck import run_prechecks
from kisslint.recipe import read_optional, read_required
from kisslint.rules import check_build, check_depends, check_sources, check_version

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from kisslint.cli_shared.console_api import ConsoleLike
    from kisslint.config.logging import KisslintLogger
    from kisslint.config.tables import RuleTables

logger: KisslintLogger = get_logger(__name__)

MSG_PASSED: Final[str] = "All checks passed."
MSG_FAILED: Final[str] = f"Some issues found. See {STYLE_GUIDE_URL} for more information."
MSG_NO_SOURCES: Final[str] = "no sources file found."


class RecipeReader(Protocol):
    """Loads one recipe file by name.

    Returns None for an absent optional file and raises for an absent required
    one.
    """

    def __call__(self, name: str, *, required: bool) -> str | None: ...


@dataclass(frozen=True)
class LintResult:
    """Outcome of a lint run.

    Attributes:
        passed: True iff no style violation was found.
        violations: Number of style violations.
    """

    passed: bool
    violations: int


def directory_reader(directory: Path) -> RecipeReader:
    """Return a `RecipeReader` loading files from ``directory``."""

    def _read(name: str, *, required: bool) -> str | None:
        if required:
            return read_required(directory, name)
        return read_optional(directory, name)

    return _read


def _read_required(read: RecipeReader, name: str) -> str:
    text = read(name, required=True)
    if text is None:
        raise RecipeFileNotFoundError(f"{name} file not provided")
    return text


def check_recipe(
    read: RecipeReader,
    reporter: Reporter,
    tables: RuleTables = DEFAULT_RULE_TABLES,
    *,
    on_missing_sources: Callable[[str], None] | None = None,
) -> LintResult:
    """Run the rule sets over a recipe, in order.

    Args:
        read: Loads each recipe file when its turn comes.
        reporter: Reporter receiving the diagnostics.
        tables: Rule tables in effect.
        on_missing_sources: Called with an advisory text when ``sources`` is absent.

    Returns:
        The outcome of the run.

    Raises:
        RecipeFileNotFoundError: If ``version`` or ``build`` is missing.
        RecipeFileReadError: If a present file cannot be read.
    """
    version = _read_required(read, VERSION_FILE)
    check_version(version, reporter)

    sources = read(SOURCES_FILE, required=False)
    if sources is None:
        logger.info("No sources file; skipping source rules")
        if on_missing_sources is not None:
            on_missing_sources(MSG_NO_SOURCES)
    else:
        check_sources(sources, reporter, tables)

    depends = read(DEPENDS_FILE, required=False)
    if depends is not None:
        check_depends(depends, reporter, tables)

    build = _read_required(read, BUILD_FILE)
    check_build(build, reporter, tables)

    return LintResult(passed=reporter.passed, violations=reporter.count)


def lint_directory(
    directory: Path,
    console: ConsoleLike,
    tables: RuleTables = DEFAULT_RULE_TABLES,
    *,
    prechecks: bool = True,
) -> LintResult:
    """Lint the recipe in ``directory`` and write the report to ``console``.

    Args:
        directory: The recipe directory.
        console: Console receiving diagnostics, advisories and the summary.
        tables: Rule tables in effect.
        prechecks: Whether to run ``kiss c`` and ``shellcheck`` first.

    Returns:
        The outcome of the run.

    Raises:
        PrecheckFailedError: If a pre-check fails.
        RecipeFileNotFoundError: If a required recipe file is missing.
        RecipeFileReadError: If a recipe file cannot be read.
    """
    if prechecks:
        run_prechecks(directory)
    else:
        logger.info("Pre-checks disabled")

    reporter = Reporter(ConsoleSink(console))
    result = check_recipe(
        directory_reader(directory),
        reporter,
        tables,
        on_missing_sources=console.warn,
    )
    console.note(MSG_PASSED if result.passed else MSG_FAILED)
    return result
