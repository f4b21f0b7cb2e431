# topmark:header:start
#
#   project      : KissLint
#   file         : version.py
#   file_relpath : src/kisslint/rules/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Advisories for the ``version`` file.

The file holds two whitespace-separated fields: the upstream version and the
relative (package) revision. Problems are reported as advisories only; they
never fail the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kisslint.constants import GIT_VERSION_PLACEHOLDER, VERSION_FILE
from kisslint.rules.codes import RuleCode

if TYPE_CHECKING:
    from kisslint.diagnostic.reporter import Reporter


def check_version(text: str, reporter: Reporter) -> None:
    """Check the text of a ``version`` file.

    Args:
        text: Raw file text.
        reporter: Reporter of the current run.
    """
    reporter.switch_file(VERSION_FILE)
    fields = text.split()
    if len(fields) != 2:
        reporter.advisory(
            RuleCode.VERSION_FIELDS,
            "too many fields; expected upstream and relative version number",
        )
    elif fields[0] == GIT_VERSION_PLACEHOLDER:
        reporter.advisory(RuleCode.GIT_VERSION, f"use git instead of {GIT_VERSION_PLACEHOLDER}")
