import os
import zipfile

import pytest
from PIL import Image

from navicore.preview import (
    PreviewKind,
    PreviewPanel,
    archive_preview_text,
    classify,
    list_archive,
)
from navicore.thumbnailer import Thumbnailer


@pytest.fixture
def panel(tmp_path):
    return PreviewPanel(Thumbnailer(tmp_path / "thumbs"))


def _zip(path, names):
    with zipfile.ZipFile(path, "w") as archive:
        for name in names:
            archive.writestr(name, "content")
    return path


def _png(path, size=(300, 200)):
    Image.new("RGB", size, (1, 2, 3)).save(path, "PNG")
    return path


def test_classify_directory_is_empty(tmp_path):
    assert classify(tmp_path) is PreviewKind.EMPTY


def test_classify_text(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello\nworld\n")
    assert classify(path) is PreviewKind.TEXT


def test_classify_zip_is_archive(tmp_path):
    assert classify(_zip(tmp_path / "a.zip", ["x.txt"])) is PreviewKind.ARCHIVE


def test_classify_png_is_image(tmp_path):
    assert classify(_png(tmp_path / "p.png")) is PreviewKind.IMAGE


def test_classify_gif_is_empty(tmp_path):
    path = tmp_path / "anim.gif"
    Image.new("P", (10, 10)).save(path, "GIF")
    assert classify(path) is PreviewKind.EMPTY


def test_classify_unknown_binary_is_empty(tmp_path):
    path = tmp_path / "blob.unknownext"
    path.write_bytes(b"\x00\x01\x02")
    assert classify(path) is PreviewKind.EMPTY


def test_classify_follows_symlink(tmp_path):
    target = _zip(tmp_path / "a.zip", ["x"])
    link = tmp_path / "link"
    os.symlink(target, link)
    assert classify(link) is PreviewKind.ARCHIVE


def test_list_archive_zip(tmp_path):
    assert list_archive(_zip(tmp_path / "a.zip", ["a.txt", "b.txt"])) == ["a.txt", "b.txt"]


def test_list_archive_tar(tmp_path):
    import tarfile

    member = tmp_path / "inner.txt"
    member.write_text("x")
    archive_path = tmp_path / "a.tar.gz"
    with tarfile.open(archive_path, "w:gz") as archive:
        archive.add(member, arcname="inner.txt")
    assert list_archive(archive_path) == ["inner.txt"]


def test_list_archive_rejects_non_archive(tmp_path):
    path = tmp_path / "plain.zip"
    path.write_bytes(b"\x00garbage\x01")
    with pytest.raises(ValueError):
        list_archive(path)


def test_list_archive_missing_file(tmp_path):
    with pytest.raises(ValueError):
        list_archive(tmp_path / "missing.zip")


def test_archive_preview_text_with_entries(tmp_path):
    path = _zip(tmp_path / "a.zip", ["a.txt", "b.txt"])
    assert archive_preview_text(path) == f"a.txt\nb.txt\n\n\nFile: {path} (items: 2)"


def test_archive_preview_text_empty(tmp_path):
    path = _zip(tmp_path / "e.zip", [])
    assert archive_preview_text(path) == f"File: {path} (items: 0)"


def test_panel_text_preview(panel, tmp_path):
    path = tmp_path / "n.txt"
    path.write_text("  one  \ntwo\n")
    assert panel.on_file_selected(path) is PreviewKind.TEXT
    assert panel.content == "one\ntwo"


def test_panel_text_preview_limits_lines(tmp_path):
    path = tmp_path / "n.txt"
    path.write_text("\n".join(str(n) for n in range(10)))
    panel = PreviewPanel(Thumbnailer(tmp_path / "thumbs"), num_read_lines=3)
    panel.on_file_selected(path)
    assert panel.content.split("\n") == ["0", "1", "2"]


def test_panel_archive(panel, tmp_path):
    path = _zip(tmp_path / "a.zip", ["x.txt"])
    assert panel.on_file_selected(path) is PreviewKind.ARCHIVE
    assert panel.content == archive_preview_text(path)


def test_panel_directory_clears(panel, tmp_path):
    assert panel.on_file_selected(tmp_path) is PreviewKind.EMPTY
    assert panel.content is None


def test_panel_image_is_cached(panel, tmp_path):
    path = _png(tmp_path / "p.png", (512, 256))
    assert panel.on_file_selected(path) is PreviewKind.IMAGE
    first = panel.content
    assert max(first.size) == 256
    assert panel.image_preview() is first
    panel.clear_image_cache()
    again = panel.image_preview()
    assert again is not first
    assert again.size == first.size


def test_panel_max_threshold_text(panel):
    assert panel.max_preview_threshold_text() == "10.00M"