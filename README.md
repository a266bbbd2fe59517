# navicore

The non-graphical core of a keyboard-driven file manager, as a plain Python
library. It holds the parts of such an application that do real work without
a window on screen:

- **`navicore.utils`**: permission strings (`perm_string`), file sizes
  (`parse_file_size`, `bytes_to_string`), quote-aware splitting
  (`split_preserving_quotes`), folder size and file counts (`folder_info`),
  block-device listings through `lsblk` (`get_drives`, `parse_lsblk_output`),
  binary-file detection (`is_binary_file`), reading lines (`read_lines`),
  path joining (`join_paths`), flattening nested mappings into dotted names
  (`table_members`) and listing saved layouts (`saved_layouts`).
- **`navicore.keybinds`**: `Keybind` and `KeybindTable`, a three-column table
  (key, command, description) with case-insensitive regular-expression
  filtering.
- **`navicore.spinner`**: `Spinner`, the state and per-line opacity of a busy
  spinner, plus `line_count_distance` and `line_alpha`.
- **`navicore.tasks`**: `Task`, which runs an external command in the
  background and reports its output lines, and `TaskManager`, which tracks
  tasks by UUID and drops each one when it finishes.
- **`navicore.update`**: `update_message`, `fetch_latest_version` and
  `check_for_update`, comparing a published version string with the running
  one.
- **`navicore.thumbnailer`**: `Thumbnailer` and `thumbnail_path`, PNG
  thumbnails stored under the freedesktop cache (`~/.cache/thumbnails/large`,
  or `$XDG_CACHE_HOME`) and named by the MD5 of the file URI.
- **`navicore.preview`**: `classify` decides whether a file is previewed as
  text, an archive listing, an image or not at all; `PreviewPanel` produces
  that preview and caches images.
- **`navicore.tableview`**: `grid_style_for`, `middle_row` and `TableCursor`,
  the grid styles and cursor/selection logic of the file table.
- **`navicore.statusbar`**: `Statusbar` with built-in and custom modules,
  timed coloured messages and `ModeLabel` indicators.
- **`navicore.notifications`**: `NotificationManager`, stacking, positioning
  and expiry of pop-up notifications.
- **`navicore.arguments`**: `build_parser` and `parse_args` for the
  command-line options `--config/-c`, `--quick/-Q`, `--bookmark-file/-B`,
  `--version/-v` and trailing files, returned as an `Options` value.

Python 3.10 or later is required; Pillow is the only dependency.

## Examples

Sizes and strings:

```python
from navicore.utils import parse_file_size, bytes_to_string, split_preserving_quotes, join_paths

parse_file_size("10M")        # 10485760
parse_file_size("1.5K")       # 1536
bytes_to_string(1536)         # "1.50K"
split_preserving_quotes('open "my file.txt" now')
# ['open', 'my file.txt', 'now']
join_paths("/home/user/", "/docs", "notes.txt")
# '/home/user/docs/notes.txt'
```

Looking at a file:

```python
from navicore.utils import perm_string, folder_info, is_binary_file, read_lines

perm_string("/etc/hostname")   # e.g. '-rw-r--r--'
info = folder_info("/tmp")     # FolderInfo with total size and file count
is_binary_file("/bin/ls")      # True
read_lines("notes.txt", 5)     # first five lines, stripped
```

Filtering keybindings:

```python
from navicore.keybinds import Keybind, KeybindTable

table = KeybindTable()
table.set_keybinds([
    Keybind("j", "next-item", "Move the cursor down"),
    Keybind("k", "prev-item", "Move the cursor up"),
])
table.filter("down")   # only the "j" binding matches
```

Running a command as a task:

```python
from navicore.tasks import Task, TaskManager

manager = TaskManager()
task = Task()
task.set_command("ls", ["-l"])
task.stdout.connect(print)
manager.add_task(task)
task.wait(5)
```

Previewing a file:

```python
from navicore.preview import PreviewPanel, PreviewKind

panel = PreviewPanel()
if panel.on_file_selected("notes.txt") is PreviewKind.TEXT:
    print(panel.content)   # first 50 lines
```

Parsing the command line:

```python
from navicore.arguments import parse_args

options = parse_args(["--quick", "/home/user"])
options.quick   # True
options.files   # ['/home/user']
```

## What it does not do

- There is no window, no widget toolkit and no program to start: the package
  installs no command. `parse_args` only parses options; nothing here loads a
  configuration file or a bookmark file.
- PDF and video thumbnails need the external tools `pdftoppm` and
  `ffmpegthumbnailer`; without them those thumbnails are simply not made.
- Archive listings cover zip and tar archives (including compressed tar).
  Other archive formats are recognised by name but cannot be listed, and their
  preview stays empty.
- `check_for_update` has no built-in address; the caller passes the URL of the
  published version string.