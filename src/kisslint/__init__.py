# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KissLint package.

KissLint is a style linter for KISS Linux package recipes. It checks the
``sources``, ``depends`` and ``build`` files of a recipe directory against the
community style guide and reports every violation with file name and line
number.
"""

from __future__ import annotations
