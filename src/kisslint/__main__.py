# topmark:header:start
#
#   project      : KissLint
#   file         : __main__.py
#   file_relpath : src/kisslint/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running KissLint via ``python -m kisslint``.

It delegates directly to :func:`kisslint.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how KissLint is launched.

Examples:
    Lint the recipe in the current directory::

        python -m kisslint
"""

from __future__ import annotations

from kisslint.cli.main import cli

if __name__ == "__main__":
    cli()
