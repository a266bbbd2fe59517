"""Table of key bindings with case-insensitive regular-expression filtering."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

_HEADERS = ("Key", "Command", "Description")


@dataclass(frozen=True)
class Keybind:
    """A key sequence, the command it runs and a description."""

    key: str
    command: str
    desc: str = ""

    @property
    def columns(self) -> tuple[str, str, str]:
        return (self.key, self.command, self.desc)


class KeybindTable:
    """Three-column table of key bindings: key, command, description."""

    def __init__(self, keybinds: Iterable[Keybind] = ()) -> None:
        self._keybinds: list[Keybind] = list(keybinds)

    def set_keybinds(self, keybinds: Iterable[Keybind]) -> None:
        """Replace every row of the table."""
        self._keybinds = list(keybinds)

    def row_count(self) -> int:
        return len(self._keybinds)

    def column_count(self) -> int:
        return len(_HEADERS)

    def cell(self, row: int, column: int) -> str | None:
        """Text at a row and column, or None for a column outside the table."""
        keybind = self._keybinds[row]
        if 0 <= column < len(_HEADERS):
            return keybind.columns[column]
        return None

    def header(self, section: int) -> str | None:
        """Title of a column, or None for a section outside the table."""
        if 0 <= section < len(_HEADERS):
            return _HEADERS[section]
        return None

    def matches(self, keybind: Keybind, pattern: str) -> bool:
        """True if any column of the binding matches the pattern, ignoring case."""
        try:
            regex = re.compile(pattern, re.IGNORECASE)
        except re.error:
            return False
        return any(regex.search(text) for text in keybind.columns)

    def filter(self, pattern: str) -> list[Keybind]:
        """Rows whose key, command or description match the pattern."""
        return [kb for kb in self._keybinds if self.matches(kb, pattern)]

    def __iter__(self):
        return iter(self._keybinds)

    def __len__(self) -> int:
        return len(self._keybinds)