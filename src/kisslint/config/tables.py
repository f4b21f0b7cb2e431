# topmark:header:start
#
#   project      : KissLint
#   file         : tables.py
#   file_relpath : src/kisslint/config/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rule tables: the static reference data the rule sets consult.

The tables are immutable and built once per run. They are handed to each rule
set explicitly rather than read from module globals, so tests and the
configuration layer can substitute their own values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

# Packages every KISS system is guaranteed to have installed:
ALWAYS_AVAILABLE: Final[tuple[str, ...]] = (
    "b3sum",
    "baselayout",
    "binutils",
    "bison",
    "busybox",
    "bzip2",
    "certs",
    "curl",
    "flex",
    "gcc",
    "git",
    "gmp",
    "kiss",
    "libmpc",
    "linux-headers",
    "m4",
    "make",
    "mpfr",
    "musl",
    "openssl",
    "pigz",
    "xz",
    "zlib",
)

# Tooling only ever needed while building:
BUILD_ONLY: Final[tuple[str, ...]] = (
    "autoconf",
    "automake",
    "cmake",
    "meson",
    "nasm",
    "rust",
    "samurai",
)

COMMAND_SEPARATORS: Final[tuple[str, ...]] = (";", "&")

C_COMPILERS: Final[tuple[str, ...]] = ("gcc", "g++")


def _validate_names(field_name: str, names: Iterable[str]) -> tuple[str, ...]:
    """Return ``names`` as a tuple, rejecting empty or whitespace-bearing entries.

    Raises:
        ValueError: If an entry is not a non-empty string without whitespace.
    """
    out: list[str] = []
    for name in names:
        if not isinstance(name, str) or not name or any(c.isspace() for c in name):
            raise ValueError(f"{field_name}: invalid entry {name!r}")
        if name not in out:
            out.append(name)
    return tuple(out)


@dataclass(frozen=True)
class RuleTables:
    """Read-only reference data for the rule sets.

    Tables keep their declaration order so diagnostics for a line that matches
    several names come out in a stable order.

    Attributes:
        always_available: Packages that must never be listed in ``depends``.
        build_only: Packages that must carry the `` make`` marker in ``depends``.
        compilers: C compiler commands that should be replaced by ``$CC``.
        command_separators: Single characters that separate commands in ``build``.
    """

    always_available: tuple[str, ...] = ALWAYS_AVAILABLE
    build_only: tuple[str, ...] = BUILD_ONLY
    compilers: tuple[str, ...] = C_COMPILERS
    command_separators: tuple[str, ...] = COMMAND_SEPARATORS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "always_available", _validate_names("always_available", self.always_available)
        )
        object.__setattr__(self, "build_only", _validate_names("build_only", self.build_only))
        object.__setattr__(self, "compilers", _validate_names("compilers", self.compilers))
        separators = _validate_names("command_separators", self.command_separators)
        for sep in separators:
            if len(sep) != 1:
                raise ValueError(f"command_separators: expected single characters, got {sep!r}")
        object.__setattr__(self, "command_separators", separators)

    def extend(
        self,
        *,
        always_available: Iterable[str] = (),
        build_only: Iterable[str] = (),
    ) -> RuleTables:
        """Return a copy with extra names appended to the package tables."""
        return replace(
            self,
            always_available=(*self.always_available, *always_available),
            build_only=(*self.build_only, *build_only),
        )


DEFAULT_RULE_TABLES: Final[RuleTables] = RuleTables()
