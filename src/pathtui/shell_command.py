from __future__ import annotations

import os
from collections.abc import Sequence
from enum import Enum

VARIABLE_NAME = "PATH"


class ShellKind(Enum):
    POSIX = "posix"
    FISH = "fish"


class JoinError(ValueError):
    def __init__(self, entry: str, separator: str) -> None:
        super().__init__(f"Path entry contains the separator {separator!r}: {entry}")
        self.entry = entry
        self.separator = separator


def quote_double(value: str) -> str:
    """Escape the characters that stay special inside POSIX double quotes."""
    for char in ("\\", "\"", "$", "`"):
        value = value.replace(char, f"\\{char}")
    return f'"{value}"'


def shell_kind_from_name(name: str | None) -> ShellKind:
    if name and name.strip().lower() == "fish":
        return ShellKind.FISH
    return ShellKind.POSIX


def join_paths(entries: Sequence[str], separator: str = os.pathsep) -> str:
    for entry in entries:
        if separator in entry:
            raise JoinError(entry, separator)
    return separator.join(entries)


def generate_shell_command(
    entries: Sequence[str],
    shell: ShellKind,
    separator: str = os.pathsep,
) -> str:
    joined = join_paths(entries, separator)
    if shell == ShellKind.FISH:
        return f"set -x {VARIABLE_NAME} {' '.join(entries)}".rstrip()
    return f"export {VARIABLE_NAME}={quote_double(joined)}"
