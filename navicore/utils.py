"""File-system, text and size helpers used throughout the file manager."""

from __future__ import annotations

import glob
import itertools
import os
import re
import stat
import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_LSBLK_COMMAND = (
    "lsblk -o NAME,SIZE,TYPE,FSTYPE,MOUNTPOINT,LABEL -n -r"
    " | cut -d ' ' -f1- --output-delimiter=,"
)

_APPLICATION_DIRS = (
    "/usr/share/applications",
    os.path.expanduser("~/.local/share/applications"),
)

_QUOTED_OR_WORD = re.compile(r'"([^"]*)"|(\S+)')
_FILE_SIZE = re.compile(r"(\d+(?:\.\d*)?)\s*([KMGTP]?[B]?)?", re.IGNORECASE | re.ASCII)
_UNSIGNED = re.compile(r"\+?\d+", re.ASCII)

_KB = 1024
_SIZE_MULTIPLIERS = {
    "": 1,
    "B": 1,
    "K": _KB,
    "KB": _KB,
    "M": _KB**2,
    "MB": _KB**2,
    "G": _KB**3,
    "GB": _KB**3,
    "T": _KB**4,
    "TB": _KB**4,
    "P": _KB**5,
    "PB": _KB**5,
    "E": _KB**6,
    "EB": _KB**6,
}

_SIZE_SUFFIXES = ("B", "K", "M", "G", "T", "P")
_BINARY_CHECK_SIZE = 512
_PERMISSION_BITS = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


@dataclass(frozen=True)
class StorageDevice:
    """One block device as reported by lsblk."""

    name: str
    size: str
    type: str
    fstype: str
    mount_point: str
    label: str


@dataclass(frozen=True)
class FolderInfo:
    """Total size in bytes and number of files below a folder."""

    size: int
    count: int


def perm_string(path: str | os.PathLike) -> str:
    """Return an ``ls``-style permission string, or "" if the path does not exist."""
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return ""
    kind = "d" if stat.S_ISDIR(mode) else "-"
    return kind + "".join(ch if mode & bit else "-" for bit, ch in _PERMISSION_BITS)


def parse_number(text: str) -> int:
    """Parse an unsigned 32-bit decimal number; raise ValueError if it is not one."""
    stripped = text.strip()
    if not _UNSIGNED.fullmatch(stripped):
        raise ValueError(f"not an unsigned number: {text!r}")
    value = int(stripped)
    if value > 0xFFFFFFFF:
        raise ValueError(f"number out of range: {text!r}")
    return value


def is_valid_path(path: str | os.PathLike) -> bool:
    """True if the path exists and is readable."""
    return os.path.exists(path) and os.access(path, os.R_OK)


def split_preserving_quotes(text: str) -> list[str]:
    """Split on whitespace, keeping double-quoted runs together without their quotes."""
    return [m.group(1) or m.group(0) for m in _QUOTED_OR_WORD.finditer(text)]


def parse_file_size(text: str) -> int:
    """Parse a size such as "10M", "5 GB" or "512" into bytes."""
    match = _FILE_SIZE.search(text.strip())
    if match is None:
        raise ValueError(f"invalid file size: {text!r}")
    value = float(match.group(1))
    suffix = (match.group(2) or "").upper()
    try:
        multiplier = _SIZE_MULTIPLIERS[suffix]
    except KeyError:
        raise ValueError(f"unknown size suffix in {text!r}") from None
    return int(value * multiplier)


def parse_lsblk_output(text: str) -> list[StorageDevice]:
    """Parse comma-separated lsblk rows into storage devices."""
    devices = []
    for line in text.splitlines():
        if not line:
            continue
        fields = line.replace("\\x20", " ").split(",")
        if len(fields) < 6:
            raise ValueError(f"malformed lsblk line: {line!r}")
        devices.append(StorageDevice(*fields[:6]))
    return devices


def get_drives() -> list[StorageDevice]:
    """List the block devices of this machine using lsblk."""
    try:
        result = subprocess.run(
            _LSBLK_COMMAND, shell=True, capture_output=True, text=True, check=False
        )
    except OSError:
        return []
    return parse_lsblk_output(result.stdout)


def associated_applications(mime_type: str) -> list[str]:
    """Return the values of desktop-entry lines that mention the MIME type."""
    apps = []
    for directory in _APPLICATION_DIRS:
        for entry in sorted(glob.glob(os.path.join(directory, "*.desktop"))):
            try:
                with open(entry, encoding="utf-8", errors="replace") as handle:
                    lines = handle.read().splitlines()
            except OSError:
                continue
            for line in lines:
                if mime_type not in line:
                    continue
                parts = f"{entry}:{line}".split("=")
                apps.append(parts[1] if len(parts) > 1 else "")
    return apps


def folder_info(path: str | os.PathLike) -> FolderInfo:
    """Sum sizes and count files recursively, hidden ones included."""
    size = 0
    count = 0
    try:
        entries = list(os.scandir(path))
    except OSError:
        return FolderInfo(0, 0)
    for entry in entries:
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        if is_dir:
            child = folder_info(entry.path)
            size += child.size
            count += child.count
            continue
        try:
            size += entry.stat().st_size
        except OSError:
            pass
        count += 1
    return FolderInfo(size, count)


def read_lines(path: str | os.PathLike, nlines: int) -> list[str]:
    """Read up to ``nlines`` stripped lines; a negative count reads the whole file."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        stripped = (line.strip() for line in handle)
        if nlines > -1:
            return list(itertools.islice(stripped, nlines))
        return list(stripped)


def file_name(path: str | os.PathLike) -> str:
    """Return the last component of a path."""
    return os.path.basename(os.fspath(path))


def bytes_to_string(nbytes: int) -> str:
    """Format a byte count with two decimals and a B/K/M/G/T/P suffix."""
    size = float(nbytes)
    index = 0
    while size >= 1024 and index < len(_SIZE_SUFFIXES) - 1:
        size /= 1024
        index += 1
    return f"{size:.2f}{_SIZE_SUFFIXES[index]}"


def join_paths(first: str, *args: str) -> str:
    """Join path pieces with exactly one slash between neighbours."""
    if not args:
        return first
    rest = join_paths(*args)
    if first.endswith("/") and rest.startswith("/"):
        return first + rest[1:]
    if not first.endswith("/") and not rest.startswith("/"):
        return f"{first}/{rest}"
    return first + rest


def read_binary_file(path: str | os.PathLike) -> bytes:
    """Return the whole content of a file as bytes."""
    return Path(path).read_bytes()


def table_members(table: Mapping, prefix: str) -> list[str]:
    """Flatten a nested mapping into dotted names of its leaf entries."""
    results = []
    for key, value in table.items():
        full_name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            results.extend(table_members(value, full_name + "."))
        else:
            results.append(full_name)
    return results


def saved_layouts(config_dir: str | os.PathLike) -> list[str]:
    """Names of the layout files stored under ``<config_dir>/layouts``."""
    layouts_dir = join_paths(os.fspath(config_dir), "layouts")
    try:
        entries = list(os.scandir(layouts_dir))
    except OSError:
        return []
    names = [
        entry.name
        for entry in entries
        if not entry.name.startswith(".") and entry.is_file()
    ]
    return sorted(names, key=str.casefold)


def is_binary_file(path: str | os.PathLike) -> bool:
    """True if the first 512 bytes hold anything but printable ASCII and line breaks."""
    try:
        with open(path, "rb") as handle:
            head = handle.read(_BINARY_CHECK_SIZE)
    except OSError:
        return False
    return any(not (0x20 <= byte <= 0x7E) and byte not in b"\n\r\t" for byte in head)