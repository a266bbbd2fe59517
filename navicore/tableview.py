"""Grid style names and cursor/selection logic of the file table."""

from __future__ import annotations

import enum
from collections.abc import Callable

_DEFAULT_FONT_SIZE = 20


class GridStyle(enum.Enum):
    SOLID = "solid"
    DOT = "dot"
    DASH = "dash"
    DASH_DOT = "dashdot"
    DASH_DOT_DOT = "dashdotdot"
    CUSTOM_DASH = "customdash"


_GRID_STYLES = {
    "solid": GridStyle.SOLID,
    "dotline": GridStyle.DOT,
    "dashline": GridStyle.DASH,
    "none": GridStyle.DASH,
    "dashdotline": GridStyle.DASH_DOT,
    "dashdotdotline": GridStyle.DASH_DOT_DOT,
}


def grid_style_for(name: str) -> GridStyle:
    """Pen style for a configured grid style name; unknown names give a custom dash."""
    return _GRID_STYLES.get(name, GridStyle.CUSTOM_DASH)


def middle_row(first_visible: int, last_visible: int, row_count: int) -> int | None:
    """Row halfway between the first and last visible rows, or None if there is none.

    A last row of -1 means the view extends past the final row.
    """
    if row_count == 0:
        return None
    if last_visible == -1:
        last_visible = row_count - 1
    if first_visible > last_visible:
        return None
    return first_visible + (last_visible - first_visible) // 2


class TableCursor:
    """Current row and row selection of a table with a fixed number of rows."""

    def __init__(self, row_count: int = 0, grid_style: str = "solid") -> None:
        self.row_count = row_count
        self.current_row: int | None = None
        self.selected: set[int] = set()
        self.font_size = _DEFAULT_FONT_SIZE
        self.grid_style_name = grid_style
        self.cursor_listeners: list[Callable[[int], None]] = []

    @property
    def grid_style(self) -> GridStyle:
        return grid_style_for(self.grid_style_name)

    @grid_style.setter
    def grid_style(self, name: str) -> None:
        self.grid_style_name = name

    def _valid(self, row: int | None) -> bool:
        return row is not None and 0 <= row < self.row_count

    def set_current_row(self, row: int | None) -> None:
        """Move the cursor; listeners hear of every move to a valid row."""
        if self._valid(row):
            self.current_row = row
            for listener in list(self.cursor_listeners):
                listener(row)
        else:
            self.current_row = None

    def scroll_to_middle(self, first_visible: int, last_visible: int) -> int | None:
        """Select only the middle visible row and put the cursor on it."""
        row = middle_row(first_visible, last_visible, self.row_count)
        if row is None:
            return None
        self.selected = {row}
        self.set_current_row(row)
        return row

    def toggle_selection(self, row: int) -> bool:
        """Flip whether a row is selected, as a control-click does; return the new state."""
        if not self._valid(row):
            raise IndexError(f"row {row} outside table of {self.row_count} rows")
        if row in self.selected:
            self.selected.discard(row)
            return False
        self.selected.add(row)
        return True