# topmark:header:start
#
#   project      : KissLint
#   file         : main.py
#   file_relpath : src/kisslint/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KissLint command-line entry point.

Run without arguments from inside a recipe directory:

    $ cd repo/extra/zlib && kisslint

Key ideas:
- Shared state (console, color, log level) is initialized once into ``ctx.obj``.
- Core errors are translated into CLI errors carrying the exit code.
- Style violations never change the exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from kisslint.cli.console import ClickConsole
from kisslint.cli.errors import from_core_error
from kisslint.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
)
from kisslint.cli_shared.color import ColorMode, resolve_color_mode
from kisslint.cli_shared.exit_codes import ExitCode
from kisslint.config.loaders import load_rule_tables
from kisslint.config.logging import get_logger, setup_logging
from kisslint.constants import KISSLINT_VERSION
from kisslint.errors import KisslintError
from kisslint.runner import lint_directory

if TYPE_CHECKING:
    from kisslint.cli_shared.console_api import ConsoleLike
    from kisslint.config.tables import RuleTables

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    mode = ColorMode.NEVER if no_color else (ColorMode(color_mode) if color_mode else None)
    enable_color = resolve_color_mode(color_mode_override=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    level = resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.command(
    name="kisslint",
    context_settings=CONTEXT_SETTINGS,
    help="Check a KISS package recipe against the community style guide.",
    epilog="""\
Diagnostics are written to stderr as '<file> @ line <N>: <message> (#<code>)'.
Style violations do not change the exit status; failing pre-checks and
missing recipe files do.
""",
)
@click.argument(
    "directory",
    required=False,
    default=".",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "--skip-prechecks",
    "skip_prechecks",
    is_flag=True,
    help="Do not run 'kiss c' and 'shellcheck build' before linting.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Rule-table overrides (kisslint.toml layout, or a pyproject.toml).",
)
@common_verbose_options
@common_color_options
@click.version_option(version=KISSLINT_VERSION, prog_name="kisslint")
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path,
    skip_prechecks: bool,
    config_path: Path | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Lint the recipe in DIRECTORY (default: the current directory)."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    try:
        tables: RuleTables = load_rule_tables(directory, config_path)
        result = lint_directory(directory, console, tables, prechecks=not skip_prechecks)
    except KisslintError as e:
        logger.debug("Aborting run: %s", e)
        raise from_core_error(e, console=console) from e

    logger.info("Lint finished: passed=%s violations=%d", result.passed, result.violations)
    ctx.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
