"""Thumbnail generation and lookup in the shared freedesktop thumbnail cache."""

from __future__ import annotations

import hashlib
import mimetypes
import os
import shutil
import subprocess
import tempfile
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from PIL import Image

from .utils import parse_file_size

THUMBNAIL_SIZE = 256
_PNG_MODES = frozenset({"1", "L", "LA", "I", "P", "RGB", "RGBA"})


def default_thumbnail_dir() -> Path:
    """The user's cache directory for large thumbnails."""
    base = os.environ.get("XDG_CACHE_HOME") or os.path.join(os.path.expanduser("~"), ".cache")
    return Path(base) / "thumbnails" / "large"


def _file_uri(path: str | os.PathLike) -> str:
    return Path(os.path.abspath(os.fspath(path))).as_uri()


def thumbnail_path(path: str | os.PathLike, thumbnail_dir: str | os.PathLike | None = None) -> Path:
    """Cache location of a file's thumbnail: the MD5 of its file URI plus ".png"."""
    directory = Path(thumbnail_dir) if thumbnail_dir is not None else default_thumbnail_dir()
    digest = hashlib.md5(_file_uri(path).encode("utf-8")).hexdigest()
    return directory / f"{digest}.png"


def _mime_type(path: str | os.PathLike) -> str:
    return mimetypes.guess_type(os.fspath(path))[0] or ""


class Thumbnailer:
    """Creates PNG thumbnails of images, PDF documents and videos."""

    def __init__(
        self,
        thumbnail_dir: str | os.PathLike | None = None,
        max_threshold: int | None = None,
    ) -> None:
        self.thumbnail_dir = Path(thumbnail_dir) if thumbnail_dir is not None else default_thumbnail_dir()
        self.max_thumbnail_threshold = (
            parse_file_size("10M") if max_threshold is None else max_threshold
        )

    def thumbnail_path(self, path: str | os.PathLike) -> Path:
        return thumbnail_path(path, self.thumbnail_dir)

    def generate_thumbnail(self, path: str | os.PathLike) -> Path | None:
        """Create the thumbnail of a file if it is missing; return its path, or None."""
        mime = _mime_type(path)
        if mime.startswith("image/"):
            generate = self._for_image
        elif mime == "application/pdf":
            generate = self._for_pdf
        elif mime.startswith("video/"):
            generate = self._for_video
        else:
            return None
        target = self.thumbnail_path(path)
        if target.exists():
            return target
        return generate(os.fspath(path), target)

    def generate_thumbnails(self, paths: Iterable[str | os.PathLike]) -> list[Path | None]:
        """Create thumbnails for many files concurrently, in the order given."""
        with ThreadPoolExecutor() as pool:
            return list(pool.map(self.generate_thumbnail, paths))

    def cached_image(self, path: str | os.PathLike) -> Image.Image | None:
        """Thumbnail of a file, regenerated when the file is newer than it."""
        target = self.thumbnail_path(path)
        try:
            if target.exists() and os.path.getmtime(path) > target.stat().st_mtime:
                target.unlink()
        except OSError:
            pass
        if not target.exists():
            self.generate_thumbnail(path)
        try:
            with Image.open(target) as image:
                image.load()
                return image.copy()
        except OSError:
            return None

    def _save_png(self, image: Image.Image, target: Path) -> Path:
        target.parent.mkdir(parents=True, exist_ok=True)
        if image.mode not in _PNG_MODES:
            image = image.convert("RGBA")
        handle, tmp_name = tempfile.mkstemp(suffix=".png", dir=target.parent)
        os.close(handle)
        try:
            image.save(tmp_name, "PNG")
            os.replace(tmp_name, target)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        return target

    def _for_image(self, path: str, target: Path) -> Path | None:
        try:
            if os.path.getsize(path) > self.max_thumbnail_threshold:
                return None
            with Image.open(path) as image:
                image.thumbnail((THUMBNAIL_SIZE, THUMBNAIL_SIZE))
                return self._save_png(image, target)
        except (OSError, Image.DecompressionBombError):
            return None

    def _for_pdf(self, path: str, target: Path) -> Path | None:
        target.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryDirectory(dir=target.parent) as workdir:
            prefix = os.path.join(workdir, "page")
            try:
                result = subprocess.run(
                    ["pdftoppm", "-png", "-singlefile", "-f", "1", "-l", "1",
                     "-scale-to", str(THUMBNAIL_SIZE), path, prefix],
                    capture_output=True,
                    check=False,
                )
            except OSError:
                return None
            rendered = prefix + ".png"
            if result.returncode != 0 or not os.path.exists(rendered):
                return None
            shutil.move(rendered, target)
        return target

    def _for_video(self, path: str, target: Path) -> Path | None:
        target.parent.mkdir(parents=True, exist_ok=True)
        try:
            result = subprocess.run(
                ["ffmpegthumbnailer", "-i", path, "-o", os.fspath(target), "-s", str(THUMBNAIL_SIZE)],
                capture_output=True,
                check=False,
            )
        except OSError:
            return None
        if result.returncode != 0 or not target.exists():
            return None
        return target