# topmark:header:start
#
#   project      : KissLint
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the environment-driven log level."""

from __future__ import annotations

import logging as std_logging

import pytest

from tests.conftest import parametrize
from kisslint.config.logging import TRACE_LEVEL, resolve_env_log_level
from kisslint.constants import LOG_LEVEL_ENV_VAR


@parametrize(
    "value, expected",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", std_logging.DEBUG),
        (" warn ", std_logging.WARNING),
        ("15", 15),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)

    assert resolve_env_log_level() == expected


def test_unset_env_gives_none() -> None:
    assert resolve_env_log_level() is None
