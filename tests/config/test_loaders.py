# topmark:header:start
#
#   project      : KissLint
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for loading rule-table overrides from TOML files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kisslint.config.loaders import load_rule_tables, load_toml_dict, tables_from_dict
from kisslint.config.tables import ALWAYS_AVAILABLE, DEFAULT_RULE_TABLES
from kisslint.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_no_config_uses_defaults(tmp_path: Path) -> None:
    assert load_rule_tables(tmp_path) is DEFAULT_RULE_TABLES


def test_kisslint_toml_in_recipe_directory(tmp_path: Path) -> None:
    (tmp_path / "kisslint.toml").write_text(
        'extend-always-available = ["perl"]\nbuild-only = ["cmake"]\n', "utf-8"
    )

    tables = load_rule_tables(tmp_path)

    assert tables.always_available == (*ALWAYS_AVAILABLE, "perl")
    assert tables.build_only == ("cmake",)
    assert tables.compilers == DEFAULT_RULE_TABLES.compilers


def test_explicit_pyproject_uses_tool_table(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text(
        '[project]\nname = "x"\n\n[tool.kisslint]\ncompilers = ["gcc", "clang"]\n', "utf-8"
    )

    tables = load_rule_tables(tmp_path / "recipe", pyproject)

    assert tables.compilers == ("gcc", "clang")


def test_pyproject_without_tool_table_gives_defaults(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\n', "utf-8")

    assert load_rule_tables(tmp_path, pyproject) == DEFAULT_RULE_TABLES


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="config file not found"):
        load_rule_tables(tmp_path, tmp_path / "missing.toml")


def test_invalid_toml(tmp_path: Path) -> None:
    bad = tmp_path / "kisslint.toml"
    bad.write_text("compilers = [\n", "utf-8")

    with pytest.raises(ConfigError, match="invalid TOML"):
        load_toml_dict(bad)


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="unknown key"):
        tables_from_dict({"compiler": ["gcc"]}, tmp_path / "kisslint.toml")


def test_wrong_value_type(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="must be a list of strings"):
        tables_from_dict({"build-only": "cmake"}, tmp_path / "kisslint.toml")


def test_invalid_names_become_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="single characters"):
        tables_from_dict({"command-separators": ["&&"]}, tmp_path / "kisslint.toml")
