# topmark:header:start
#
#   project      : KissLint
#   file         : api.py
#   file_relpath : src/kisslint/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for linting recipes held in memory.

`lint_texts` runs the same rule sets as the CLI but performs no I/O and no
pre-checks: the recipe files are passed as strings and the diagnostics come
back in a `DiagnosticLog`.

Example:
    ```python
    from kisslint.api import lint_texts

    report = lint_texts(build="#!/bin/sh -e\\n\\necho hi\\n", version="1.0 1\\n")
    for diagnostic in report.log:
        print(diagnostic)
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from kisslint.config.tables import DEFAULT_RULE_TABLES
from kisslint.constants import BUILD_FILE, DEPENDS_FILE, SOURCES_FILE, VERSION_FILE
from kisslint.diagnostic.model import DiagnosticLog
from kisslint.diagnostic.reporter import Reporter
from kisslint.errors import RecipeFileNotFoundError
from kisslint.runner import check_recipe

if TYPE_CHECKING:
    from kisslint.config.tables import RuleTables
    from kisslint.diagnostic.model import Diagnostic

DEFAULT_VERSION_TEXT = "0 1\n"


@dataclass(frozen=True)
class LintReport:
    """Result of `lint_texts`.

    Attributes:
        passed: True iff no style violation was found.
        log: Every diagnostic emitted, advisories included.
        notes: Non-diagnostic advisories (e.g. a missing ``sources`` file).
    """

    passed: bool
    log: DiagnosticLog
    notes: tuple[str, ...] = field(default=())

    @property
    def violations(self) -> list[Diagnostic]:
        """Style violations, in emission order."""
        return self.log.errors()


def lint_texts(
    build: str,
    *,
    sources: str | None = None,
    depends: str | None = None,
    version: str = DEFAULT_VERSION_TEXT,
    tables: RuleTables = DEFAULT_RULE_TABLES,
) -> LintReport:
    """Lint recipe files given as text.

    Args:
        build: Text of the ``build`` script.
        sources: Text of ``sources``, or None if the recipe has none.
        depends: Text of ``depends``, or None if the recipe has none.
        version: Text of ``version``; defaults to a well-formed placeholder.
        tables: Rule tables in effect.

    Returns:
        The collected diagnostics and the overall verdict.
    """
    texts: dict[str, str | None] = {
        VERSION_FILE: version,
        SOURCES_FILE: sources,
        DEPENDS_FILE: depends,
        BUILD_FILE: build,
    }

    def _read(name: str, *, required: bool) -> str | None:
        text = texts.get(name)
        if text is None and required:
            raise RecipeFileNotFoundError(f"{name} file not provided")
        return text

    log = DiagnosticLog()
    notes: list[str] = []
    result = check_recipe(_read, Reporter(log), tables, on_missing_sources=notes.append)
    return LintReport(passed=result.passed, log=log, notes=tuple(notes))
