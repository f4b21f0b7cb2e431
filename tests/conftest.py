# topmark:header:start
#
#   project      : KissLint
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the KissLint test suite.

This file sets up global fixtures, typed mark helpers and the logging
configuration for test runs. Rule-set tests run a single rule set into a
`DiagnosticLog` through `run_rules`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from kisslint.config import logging
from kisslint.config.tables import DEFAULT_RULE_TABLES
from kisslint.constants import LOG_LEVEL_ENV_VAR
from kisslint.diagnostic import DiagnosticLog, Reporter

if TYPE_CHECKING:
    from kisslint.config.tables import RuleTables

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_rules: DecoratorType[Any] = as_typed_mark(pytest.mark.rules)

# Property tests run in every QA session; `--hypothesis-profile=thorough` digs deeper.
settings.register_profile("kisslint", max_examples=50)
settings.register_profile("thorough", max_examples=1000)
settings.load_profile("kisslint")


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_kisslint_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure KissLint's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so rule tracing is exercised by every test.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_rules(
    check: Callable[[str, Reporter, RuleTables], None],
    text: str,
    tables: RuleTables = DEFAULT_RULE_TABLES,
) -> tuple[DiagnosticLog, Reporter]:
    """Run one rule set over ``text`` and return the collected diagnostics.

    Args:
        check: A rule-set entry point such as `check_build`.
        text: The file text.
        tables: Rule tables in effect.

    Returns:
        tuple[DiagnosticLog, Reporter]: The log and the reporter used for the run.
    """
    log = DiagnosticLog()
    reporter = Reporter(log)
    check(text, reporter, tables)
    return log, reporter


def lines_and_codes(log: DiagnosticLog) -> list[tuple[int | None, str]]:
    """Return ``(line, code)`` pairs for every diagnostic in ``log``."""
    return [(d.line, d.code.value) for d in log]
