import pytest

from navicore.keybinds import Keybind, KeybindTable

BINDINGS = [
    Keybind("yy", "copy", "Copy the selected files"),
    Keybind("dd", "cut", "Cut the selected files"),
    Keybind("p", "paste", "Paste files here"),
]


@pytest.fixture
def table():
    return KeybindTable(BINDINGS)


def test_row_and_column_count(table):
    assert table.row_count() == 3
    assert table.column_count() == 3


def test_set_keybinds_replaces_rows(table):
    table.set_keybinds(BINDINGS[:1])
    assert table.row_count() == 1
    assert table.cell(0, 1) == "copy"


def test_cells(table):
    assert table.cell(1, 0) == "dd"
    assert table.cell(1, 1) == "cut"
    assert table.cell(1, 2) == "Cut the selected files"
    assert table.cell(1, 3) is None


def test_cell_row_out_of_range(table):
    with pytest.raises(IndexError):
        table.cell(10, 0)


def test_headers(table):
    assert [table.header(i) for i in range(3)] == ["Key", "Command", "Description"]
    assert table.header(3) is None


def test_filter_case_insensitive(table):
    assert table.filter("COPY") == [BINDINGS[0]]


def test_filter_matches_any_column(table):
    assert table.filter("selected") == BINDINGS[:2]
    assert table.filter("^p$") == [BINDINGS[2]]


def test_filter_empty_pattern_keeps_all(table):
    assert table.filter("") == BINDINGS


def test_invalid_pattern_matches_nothing(table):
    assert table.filter("[") == []
    assert table.matches(BINDINGS[0], "(") is False


def test_matches_single_binding(table):
    assert table.matches(BINDINGS[2], "paste") is True
    assert table.matches(BINDINGS[2], "copy") is False