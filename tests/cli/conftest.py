# topmark:header:start
#
#   project      : KissLint
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running KissLint in a controlled working directory.

`run_cli_in()` changes the process working directory to the given recipe
directory before invoking the Click command, the way users run ``kisslint``
from inside a package directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from kisslint.cli.main import cli
from kisslint.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

CLEAN_RECIPE: dict[str, str] = {
    "version": "1.2.3 1\n",
    "sources": "https://example.org/pkg-1.2.3.tar.gz\n",
    "depends": "libffi\nmeson make\n",
    "build": '#!/bin/sh -e\n\nmeson setup output\nninja -C output\nmkdir -p "$1/usr"\n',
}


def write_recipe(directory: Path, files: dict[str, str]) -> Path:
    """Write recipe files into ``directory`` and return it.

    Args:
        directory (Path): Target recipe directory (created if needed).
        files (dict[str, str]): File name to text.

    Returns:
        Path: ``directory``.
    """
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (directory / name).write_text(text, "utf-8")
    return directory


def run_cli_in(tmp_path: Path, argv: Sequence[str] | None = None) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str] | None): CLI argument vector, e.g. ``["--skip-prechecks"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv or []))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["--help"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    return CliRunner().invoke(cli, list(argv))


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the command exited with ``code``, showing the output otherwise.

    Args:
        result (Result): The Result returned by `run_cli` or `run_cli_in`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output
