"""Per-shell syntax for setting and removing environment variables."""

from dataclasses import dataclass
from enum import Enum


class Dialect(str, Enum):
    DEFAULT = ""
    FISH = "fish"
    POWERSHELL = "powershell"
    CMD = "cmd"

    @classmethod
    def from_id(cls, shell_id: str) -> "Dialect":
        """Map a shell id to its dialect; unknown ids use the default (bash-like) one."""
        try:
            return cls(shell_id)
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True)
class DialectSyntax:
    prefix: str
    delimiter: str
    suffix: str


_SET_SYNTAX = {
    Dialect.DEFAULT: DialectSyntax(prefix="export ", delimiter='="', suffix='"\n'),
    Dialect.FISH: DialectSyntax(prefix="set -gx ", delimiter=' "', suffix='";\n'),
    Dialect.POWERSHELL: DialectSyntax(prefix="$Env:", delimiter=' = "', suffix='"\n'),
    Dialect.CMD: DialectSyntax(prefix="SET ", delimiter="=", suffix="\n"),
}

# cmd has no removal statement; assigning an empty value clears the variable.
_UNSET_SYNTAX = {
    Dialect.DEFAULT: DialectSyntax(prefix="unset ", delimiter="", suffix="\n"),
    Dialect.FISH: DialectSyntax(prefix="set -e ", delimiter="", suffix=";\n"),
    Dialect.POWERSHELL: DialectSyntax(prefix="Remove-Item Env:\\\\", delimiter="", suffix="\n"),
    Dialect.CMD: DialectSyntax(prefix="SET ", delimiter="=", suffix="\n"),
}


def lookup(shell_id: str, unset: bool = False) -> DialectSyntax:
    """Return the assignment (or removal, with ``unset``) syntax for a shell id."""
    table = _UNSET_SYNTAX if unset else _SET_SYNTAX
    return table[Dialect.from_id(shell_id)]
