# topmark:header:start
#
#   project      : KissLint
#   file         : loaders.py
#   file_relpath : src/kisslint/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load rule-table overrides from TOML.

Sources, in order of precedence:
- an explicit file passed by the caller (``kisslint.toml`` layout, or a
  ``pyproject.toml`` whose ``[tool.kisslint]`` table is used), then
- ``kisslint.toml`` in the recipe directory.

Without either, the built-in defaults apply. Parsing is done with `tomlkit`
and the document is unwrapped into plain `dict` structures.

Example ``kisslint.toml``::

    extend-always-available = ["perl"]
    build-only = ["cmake", "meson"]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from kisslint.config.logging import get_logger
from kisslint.config.tables import DEFAULT_RULE_TABLES, RuleTables
from kisslint.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from kisslint.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from kisslint.config.logging import KisslintLogger

logger: KisslintLogger = get_logger(__name__)

TomlTable = dict[str, Any]

KEY_ALWAYS_AVAILABLE: Final[str] = "always-available"
KEY_BUILD_ONLY: Final[str] = "build-only"
KEY_COMPILERS: Final[str] = "compilers"
KEY_COMMAND_SEPARATORS: Final[str] = "command-separators"
KEY_EXTEND_ALWAYS_AVAILABLE: Final[str] = "extend-always-available"
KEY_EXTEND_BUILD_ONLY: Final[str] = "extend-build-only"

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {
        KEY_ALWAYS_AVAILABLE,
        KEY_BUILD_ONLY,
        KEY_COMPILERS,
        KEY_COMMAND_SEPARATORS,
        KEY_EXTEND_ALWAYS_AVAILABLE,
        KEY_EXTEND_BUILD_ONLY,
    }
)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, path: Path) -> TomlTable:
    """Return the KissLint table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.kisslint]`` (empty when absent); any
    other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get(PYPROJECT_SECTION, {}) if isinstance(tool, dict) else {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION}] must be a table")
    return cast("TomlTable", section)


def _string_list(table: TomlTable, key: str, source: Path) -> list[str] | None:
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{source}: '{key}' must be a list of strings")
    return cast("list[str]", value)


def tables_from_dict(
    table: TomlTable,
    source: Path,
    base: RuleTables = DEFAULT_RULE_TABLES,
) -> RuleTables:
    """Build `RuleTables` from a config table layered over ``base``.

    Args:
        table: The KissLint config table.
        source: Where the table came from (for error messages).
        base: Tables to start from.

    Returns:
        The resulting rule tables.

    Raises:
        ConfigError: On unknown keys, wrongly typed values or invalid names.
    """
    unknown = sorted(set(table) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source}: unknown key(s): {', '.join(unknown)}")

    always = _string_list(table, KEY_ALWAYS_AVAILABLE, source)
    build_only = _string_list(table, KEY_BUILD_ONLY, source)
    compilers = _string_list(table, KEY_COMPILERS, source)
    separators = _string_list(table, KEY_COMMAND_SEPARATORS, source)

    try:
        tables = RuleTables(
            always_available=base.always_available if always is None else tuple(always),
            build_only=base.build_only if build_only is None else tuple(build_only),
            compilers=base.compilers if compilers is None else tuple(compilers),
            command_separators=(
                base.command_separators if separators is None else tuple(separators)
            ),
        )
        return tables.extend(
            always_available=_string_list(table, KEY_EXTEND_ALWAYS_AVAILABLE, source) or (),
            build_only=_string_list(table, KEY_EXTEND_BUILD_ONLY, source) or (),
        )
    except ValueError as e:
        raise ConfigError(f"{source}: {e}") from e


def load_rule_tables(directory: Path, config_path: Path | None = None) -> RuleTables:
    """Resolve the rule tables for a recipe directory.

    Args:
        directory: The recipe directory.
        config_path: Explicit config file; must exist when given.

    Returns:
        The rule tables to lint with.

    Raises:
        ConfigError: If the explicit file is missing or any source is invalid.
    """
    if config_path is not None:
        if not config_path.is_file():
            raise ConfigError(f"config file not found: {config_path}")
        source: Path = config_path
    else:
        candidate: Path = directory / CONFIG_FILE_NAME
        if not candidate.is_file():
            logger.debug("No %s in %s; using default rule tables", CONFIG_FILE_NAME, directory)
            return DEFAULT_RULE_TABLES
        source = candidate

    logger.info("Loading rule tables from %s", source)
    return tables_from_dict(extract_section(load_toml_dict(source), source), source)
