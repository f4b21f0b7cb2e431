# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/rules/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule sets for the recipe files.

Each rule set is a function of (file text, reporter, rule tables). Rule sets
do not share state and do not know about each other.
"""

from __future__ import annotations

from kisslint.rules.build import check_build
from kisslint.rules.codes import RuleCode
from kisslint.rules.depends import check_depends
from kisslint.rules.indent import IndentationTracker
from kisslint.rules.sources import check_sources
from kisslint.rules.version import check_version

__all__ = [
    "IndentationTracker",
    "RuleCode",
    "check_build",
    "check_depends",
    "check_sources",
    "check_version",
]
