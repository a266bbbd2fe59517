"""Status bar state: file details, mode indicators, timed messages and custom modules."""

from __future__ import annotations

import enum
import os
import time
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime

from .utils import perm_string

_MODULE_SPACING = 10
_IEC_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


class MessageType(enum.Enum):
    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass
class _Label:
    text: str = ""
    visible: bool = True
    style: str = ""
    bold: bool = False
    italic: bool = False


@dataclass
class ModeLabel:
    """An indicator such as VISUAL or a macro-recording marker."""

    text: str = ""
    visible: bool = False
    background: str = "#000000"
    foreground: str = "#000000"
    padding: str = "2px"
    italic: bool = False
    bold: bool = False

    def style_sheet(self) -> str:
        return f"background: {self.background}; foreground: {self.foreground}; padding: {self.padding}; "


class _Stretch:
    """Marker for flexible space in the layout."""


_STRETCH = _Stretch()


def _formatted_data_size(nbytes: int) -> str:
    if nbytes < 1024:
        return f"{nbytes} bytes"
    size = float(nbytes)
    unit = ""
    for unit in _IEC_UNITS:
        size /= 1024
        if size < 1024:
            break
    return f"{size:.2f} {unit}"


def _text_date(timestamp: float) -> str:
    dt = datetime.fromtimestamp(timestamp)
    return f"{dt:%a %b} {dt.day} {dt:%H:%M:%S %Y}"


def _custom_style(background: str, foreground: str) -> str:
    return f"background: {background}; color: {foreground}; padding: 2px;"


class Statusbar:
    """Everything the status bar shows, arranged as an ordered list of modules."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.file_path = ""
        self.file_name = _Label()
        self.file_size = _Label()
        self.file_perm = _Label()
        self.file_modified = _Label()
        self.filter_label = _Label("FILTER", visible=False)
        self.num_items = _Label()
        self.search_match = _Label()
        self.visual_line_mode = ModeLabel("VISUAL")
        self.macro_mode = ModeLabel()
        self.search_total_count = -1
        self.search_current_index = -1
        self.info_fg = "#ffffff"
        self.warning_fg = "#ffff00"
        self.error_fg = "#ff0000"
        self.message_text = ""
        self.message_color = self.info_fg
        self._message_deadline: float | None = None
        self.log_listeners: list[Callable[[str, MessageType], None]] = []
        self.background_color = ""
        self.font_family = ""
        self.font_size = -1
        self._layout: list[object] = []
        self._custom: dict[str, _Label] = {}
        self._modules: list[object] = []

    # Messages

    def message(self, text: str, type: MessageType = MessageType.INFO, seconds: float = 2) -> None:
        """Show a coloured message for ``seconds`` and tell the log listeners."""
        colors = {
            MessageType.INFO: self.info_fg,
            MessageType.WARNING: self.warning_fg,
            MessageType.ERROR: self.error_fg,
        }
        self.message_color = colors[type]
        self.message_text = text
        self._message_deadline = self._clock() + seconds
        for listener in list(self.log_listeners):
            listener(text, type)

    @property
    def message_visible(self) -> bool:
        return self._message_deadline is not None and self._clock() < self._message_deadline

    # File details

    def set_file(self, path: str | os.PathLike) -> None:
        self.file_path = os.fspath(path)
        self.update_file()

    def update_file(self) -> None:
        """Refresh name, permissions, size and modification time of the current file."""
        path = self.file_path
        self.file_name.text = os.path.basename(path)
        self.file_perm.text = perm_string(path) if path else ""
        try:
            info = os.stat(path)
        except OSError:
            self.file_size.text = _formatted_data_size(0)
            self.file_modified.text = ""
            return
        self.file_size.text = _formatted_data_size(info.st_size)
        self.file_modified.text = _text_date(info.st_mtime)

    def set_num_items(self, count: int) -> None:
        self.num_items.text = str(count)

    def set_search_match_count(self, total: int) -> None:
        self.search_total_count = total

    def set_search_match_index(self, index: int) -> None:
        self.search_current_index = index + 1
        self.search_match.text = f"[{self.search_current_index}/{self.search_total_count}]"

    # Mode indicators

    def set_filter_mode(self, state: bool) -> None:
        self.filter_label.visible = state

    def set_visual_line_mode(self, state: bool) -> None:
        self.visual_line_mode.visible = state

    def set_macro_mode(self, state: bool) -> None:
        self.macro_mode.visible = state

    # Modules

    def _builtin(self, name: str) -> list[object] | None:
        table: dict[str, list[object]] = {
            "name": [self.file_name],
            "stretch": [_STRETCH],
            "size": [self.file_size],
            "permission": [self.file_perm],
            "count": [_Label("Items: "), self.num_items],
            "modified_date": [self.file_modified],
            "visual_line": [self.visual_line_mode],
            "macro": [self.macro_mode],
            "filter": [self.filter_label],
            "search": [self.search_match],
        }
        return table.get(name)

    def add_module(self, name: str) -> bool:
        """Append a built-in or previously created module by name; False if unknown."""
        items = self._builtin(name)
        if items is None:
            label = self._custom.get(name)
            if label is None:
                return False
            items = [label]
        self._layout.extend(items)
        return True

    @staticmethod
    def _make_label(options: Mapping, default_color: str) -> _Label:
        return _Label(
            text=str(options.get("text", "")),
            visible=bool(options.get("visible", True)),
            style=_custom_style(
                options.get("background", default_color),
                options.get("foreground", default_color),
            ),
            bold=bool(options.get("bold", False)),
            italic=bool(options.get("italic", False)),
        )

    def create_module(self, name: str, options: Mapping | None = None) -> None:
        """Create a custom text module and append it to the bar."""
        label = self._make_label(options or {}, "#000000")
        self._layout.append(label)
        self._custom[name] = label

    def insert_module(self, name: str, options: Mapping | None, index: int) -> None:
        """Create a custom text module at a position in the bar."""
        label = self._make_label(options or {}, "")
        self._layout.insert(index, label)
        self._custom[name] = label

    def set_modules(self, modules: Iterable[str | Mapping]) -> None:
        """Rebuild the bar from names and ``{"name": ..., **options}`` mappings."""
        modules = list(modules)
        self._layout.clear()
        for module in modules:
            if isinstance(module, str):
                self.add_module(module)
            elif isinstance(module, Mapping):
                options = {k: v for k, v in module.items() if k != "name"}
                self.create_module(str(module["name"]), options)
            else:
                raise TypeError(f"unsupported module: {module!r}")
        self._modules = modules

    @property
    def modules(self) -> list[object]:
        return list(self._modules)

    def update_module_text(self, name: str, value: str) -> bool:
        """Change the text of a custom module; False if there is none of that name."""
        label = self._custom.get(name)
        if label is None:
            return False
        label.text = value
        return True

    def custom_module_style(self, name: str) -> str:
        return self._custom[name].style

    def render(self) -> list[str]:
        """Texts of the visible modules in layout order."""
        return [
            item.text
            for item in self._layout
            if not isinstance(item, _Stretch) and item.visible
        ]