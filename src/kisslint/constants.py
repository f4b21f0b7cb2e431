# topmark:header:start
#
#   project      : KissLint
#   file         : constants.py
#   file_relpath : src/kisslint/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KissLint Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

KISSLINT_VERSION: str = get_version("kisslint")

# Recipe file names (relative to the recipe directory):
BUILD_FILE: Final[str] = "build"
VERSION_FILE: Final[str] = "version"
SOURCES_FILE: Final[str] = "sources"
DEPENDS_FILE: Final[str] = "depends"

# Optional rule-table overrides next to the recipe:
CONFIG_FILE_NAME: Final[str] = "kisslint.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "kisslint"

STYLE_GUIDE_URL: Final[str] = "https://kisscommunity.bvnf.space/kiss/style-guide"

POSIX_SHEBANG: Final[str] = "#!/bin/sh -e"
MAX_LINE_LENGTH: Final[int] = 80
INDENT_WIDTH: Final[int] = 4

# Marker that flags a dependency as needed at build time only:
BUILD_ONLY_MARKER: Final[str] = " make"

# Placeholder upstream version used by git-tracking packages:
GIT_VERSION_PLACEHOLDER: Final[str] = "9999"

LOG_LEVEL_ENV_VAR: Final[str] = "KISSLINT_LOG_LEVEL"
