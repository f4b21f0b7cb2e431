# topmark:header:start
#
#   project      : KissLint
#   file         : codes.py
#   file_relpath : src/kisslint/rules/codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable rule codes.

Codes match the section numbers of the KISS community style guide, so
``#0202`` points at section 0202 of the guide. Additions are
source-compatible; renames are breaking.
"""

from __future__ import annotations

from enum import Enum


class RuleCode(str, Enum):
    """Rule codes, grouped by the recipe file they apply to."""

    # build
    INDENTATION = "0202"
    LINE_LENGTH = "0203"
    SHEBANG = "0204"
    PARTIAL_QUOTING = "0209"
    DIRECT_COMPILER = "0212"
    MKDIR_WITHOUT_P = "0213"
    ECHO = "0214"

    # depends
    ALWAYS_AVAILABLE = "1202"
    BUILD_DEP_AS_RUNTIME = "1203"
    DEPENDS_NOT_SORTED = "1205"
    EMPTY_DEPENDS = "1206"

    # sources
    NON_HTTPS_SOURCE = "1401"
    REMOTE_PATCH = "1402"
    GIT_SOURCE = "1403"
    NON_CANONICAL_URL = "1404"

    # version
    GIT_VERSION = "1602"
    VERSION_FIELDS = "1603"

    def __str__(self) -> str:
        return self.value
