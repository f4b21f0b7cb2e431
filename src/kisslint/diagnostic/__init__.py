# topmark:header:start
#
#   project      : KissLint
#   file         : __init__.py
#   file_relpath : src/kisslint/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and the reporter.

Design:
    - Findings are represented by immutable `Diagnostic` instances.
    - Rule sets never hold diagnostics; they call the `Reporter`, which stamps
      file and line and forwards each diagnostic to a `DiagnosticSink`.
    - The CLI uses a `ConsoleSink`; the API and tests collect into a
      `DiagnosticLog`.
"""

from __future__ import annotations

from kisslint.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticSink,
)
from kisslint.diagnostic.reporter import ConsoleSink, Reporter

__all__ = [
    "ConsoleSink",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticSink",
    "Reporter",
]
