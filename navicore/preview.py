"""Deciding how a selected file is previewed and producing the preview content."""

from __future__ import annotations

import enum
import mimetypes
import os
import tarfile
import zipfile
from collections import OrderedDict

from PIL import Image

from .thumbnailer import Thumbnailer
from .utils import bytes_to_string, is_binary_file, parse_file_size, read_lines

ARCHIVE_MIME_TYPES = frozenset(
    {
        "application/zip",
        "application/x-rar-compressed",
        "application/x-gtar",
        "application/x-tar",
        "application/x-bzip2",
        "application/gzip",
        "application/x-7z-compressed",
    }
)

_ARCHIVE_EXTENSIONS = {
    ".zip": "application/zip",
    ".rar": "application/x-rar-compressed",
    ".tgz": "application/x-gtar",
    ".tar": "application/x-tar",
    ".bz2": "application/x-bzip2",
    ".gz": "application/gzip",
    ".7z": "application/x-7z-compressed",
}

_DEFAULT_READ_LINES = 50
_DEFAULT_IMAGE_CACHE_SIZE = 100


class PreviewKind(enum.Enum):
    TEXT = "text"
    ARCHIVE = "archive"
    IMAGE = "image"
    EMPTY = "empty"


def _mime_type(path: str) -> str:
    suffix = os.path.splitext(path)[1].lower()
    if suffix in _ARCHIVE_EXTENSIONS:
        return _ARCHIVE_EXTENSIONS[suffix]
    return mimetypes.guess_type(path)[0] or ""


def _resolve(path: str) -> str:
    if os.path.islink(path) and os.path.exists(path):
        return os.path.realpath(path)
    return path


def classify(path: str | os.PathLike) -> PreviewKind:
    """How a file is previewed: as text, an archive listing, an image, or not at all."""
    path = os.fspath(path)
    if os.path.isdir(path):
        return PreviewKind.EMPTY
    path = _resolve(path)
    if not is_binary_file(path):
        return PreviewKind.TEXT
    mime = _mime_type(path)
    if mime in ARCHIVE_MIME_TYPES:
        return PreviewKind.ARCHIVE
    if mime == "application/pdf" or mime.startswith("video/"):
        return PreviewKind.IMAGE
    if mime.startswith("image/") and "gif" not in mime:
        return PreviewKind.IMAGE
    return PreviewKind.EMPTY


def list_archive(path: str | os.PathLike) -> list[str]:
    """Names of the entries in a zip or tar archive; ValueError if it cannot be read."""
    path = os.fspath(path)
    try:
        if zipfile.is_zipfile(path):
            with zipfile.ZipFile(path) as archive:
                return archive.namelist()
        with tarfile.open(path) as archive:
            return archive.getnames()
    except (tarfile.TarError, zipfile.BadZipFile, OSError, EOFError) as exc:
        raise ValueError(f"failed to open archive {path}: {exc}") from exc


def archive_preview_text(path: str | os.PathLike) -> str:
    """Entry names of an archive followed by a line naming it and counting its items."""
    names = list_archive(path)
    footer = f"File: {os.fspath(path)} (items: {len(names)})"
    if not names:
        return footer
    return "\n".join([*names, "\n\n" + footer])


class PreviewPanel:
    """Preview state for the currently selected file."""

    def __init__(
        self,
        thumbnailer: Thumbnailer | None = None,
        num_read_lines: int = _DEFAULT_READ_LINES,
        image_cache_size: int = _DEFAULT_IMAGE_CACHE_SIZE,
    ) -> None:
        self.thumbnailer = thumbnailer if thumbnailer is not None else Thumbnailer()
        self.num_read_lines = num_read_lines
        self.preview_threshold = parse_file_size("10M")
        self.filepath = ""
        self.kind = PreviewKind.EMPTY
        self.content: str | Image.Image | None = None
        self._image_cache: OrderedDict[str, Image.Image | None] = OrderedDict()
        self._image_cache_size = image_cache_size

    def on_file_selected(self, path: str | os.PathLike) -> PreviewKind:
        """Select a file, work out its preview and store it in ``kind`` and ``content``."""
        self.filepath = _resolve(os.fspath(path))
        kind = classify(self.filepath)
        content: str | Image.Image | None = None
        if kind is PreviewKind.TEXT:
            content = self.text_preview()
        elif kind is PreviewKind.ARCHIVE:
            try:
                content = self.archive_preview()
            except ValueError:
                kind = PreviewKind.EMPTY
        elif kind is PreviewKind.IMAGE:
            content = self.image_preview()
            if content is None:
                kind = PreviewKind.EMPTY
        self.kind = kind
        self.content = content
        return kind

    def text_preview(self) -> str:
        """The first lines of the selected file, or "" if it cannot be read."""
        try:
            lines = read_lines(self.filepath, self.num_read_lines)
        except OSError:
            return ""
        return "\n".join(lines)

    def archive_preview(self) -> str:
        return archive_preview_text(self.filepath)

    def image_preview(self) -> Image.Image | None:
        """Thumbnail of the selected file, remembered for later selections."""
        key = self.filepath
        if key in self._image_cache:
            self._image_cache.move_to_end(key)
            return self._image_cache[key]
        image = self.thumbnailer.cached_image(key)
        self._image_cache[key] = image
        while len(self._image_cache) > self._image_cache_size:
            self._image_cache.popitem(last=False)
        return image

    def clear_image_cache(self) -> None:
        self._image_cache.clear()

    def max_preview_threshold_text(self) -> str:
        return bytes_to_string(self.preview_threshold)