# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for KissLint: rule tables, their TOML overrides, and logging."""

from __future__ import annotations

from kisslint.config.loaders import load_rule_tables
from kisslint.config.tables import DEFAULT_RULE_TABLES, RuleTables

__all__ = [
    "DEFAULT_RULE_TABLES",
    "RuleTables",
    "load_rule_tables",
]
