"""Core logic of a keyboard-driven file manager: utilities, previews, thumbnails, tasks and UI state."""

__version__ = "1.3.4"

__all__ = [
    "arguments",
    "keybinds",
    "notifications",
    "preview",
    "spinner",
    "statusbar",
    "tableview",
    "tasks",
    "thumbnailer",
    "update",
    "utils",
]