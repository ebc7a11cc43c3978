from __future__ import annotations

import pytest

from pathtui.path_list import Direction, PathList, Side


def _assert_selection_valid(paths: PathList) -> None:
    if len(paths) == 0:
        assert paths.selection is None
    else:
        assert paths.selection is not None
        assert 0 <= paths.selection < len(paths)


def test_new_list_selects_first_entry() -> None:
    paths = PathList(["/usr/bin", "/bin"])
    assert paths.selection == 0
    assert paths.selected_entry == "/usr/bin"


def test_empty_list_has_no_selection() -> None:
    paths = PathList()
    assert paths.selection is None
    assert paths.selected_entry is None
    paths.move_selection(Direction.DOWN)
    assert paths.selection is None
    assert paths.delete_selected() is None
    assert paths.entries == []


def test_move_selection_clamps_at_edges() -> None:
    paths = PathList(["/a", "/b", "/c"])
    paths.move_selection(Direction.UP)
    assert paths.selection == 0
    paths.move_selection(Direction.DOWN)
    paths.move_selection(Direction.DOWN)
    assert paths.selection == 2
    paths.move_selection(Direction.DOWN)
    assert paths.selection == 2


def test_insert_before_and_after_selection() -> None:
    paths = PathList(["/usr/bin", "/bin", "/usr/local/bin"])
    paths.select(1)

    paths.insert("/custom/bin", Side.BEFORE)
    assert paths.entries == ["/usr/bin", "/custom/bin", "/bin", "/usr/local/bin"]
    assert paths.selection == 1

    paths.insert("/another/bin", Side.AFTER)
    assert paths.entries == [
        "/usr/bin",
        "/custom/bin",
        "/another/bin",
        "/bin",
        "/usr/local/bin",
    ]
    assert paths.selection == 2


@pytest.mark.parametrize("side", [Side.BEFORE, Side.AFTER])
def test_insert_into_empty_list(side: Side) -> None:
    paths = PathList()
    index = paths.insert("/opt/bin", side)
    assert index == 0
    assert paths.entries == ["/opt/bin"]
    assert paths.selection == 0


def test_insert_after_last_entry_appends() -> None:
    paths = PathList(["/a", "/b"])
    paths.select(1)
    paths.insert("/c", Side.AFTER)
    assert paths.entries == ["/a", "/b", "/c"]
    assert paths.selection == 2


def test_delete_keeps_index_when_still_valid() -> None:
    paths = PathList(["/a", "/b", "/c"])
    paths.select(1)
    assert paths.delete_selected() == "/b"
    assert paths.entries == ["/a", "/c"]
    assert paths.selection == 1


def test_delete_last_entry_moves_selection_back() -> None:
    paths = PathList(["/a", "/b", "/c"])
    paths.select(2)
    paths.delete_selected()
    assert paths.entries == ["/a", "/b"]
    assert paths.selection == 1


def test_delete_only_entry_clears_selection() -> None:
    paths = PathList(["/a"])
    paths.delete_selected()
    assert paths.entries == []
    assert paths.selection is None


@pytest.mark.parametrize("index", [0, 1, 2])
@pytest.mark.parametrize("side", [Side.BEFORE, Side.AFTER])
def test_insert_then_delete_restores_list(index: int, side: Side) -> None:
    original = ["/usr/bin", "/bin", "/usr/local/bin"]
    paths = PathList(original)
    paths.select(index)
    paths.insert("/tmp/bin", side)
    assert paths.delete_selected() == "/tmp/bin"
    assert paths.entries == original


def test_selection_stays_valid_through_mixed_operations() -> None:
    paths = PathList(["/a", "/b"])
    operations = [
        lambda: paths.move_selection(Direction.DOWN),
        lambda: paths.insert("/c", Side.AFTER),
        paths.delete_selected,
        paths.delete_selected,
        lambda: paths.move_selection(Direction.UP),
        paths.delete_selected,
        paths.delete_selected,
        lambda: paths.insert("/d", Side.BEFORE),
        lambda: paths.move_selection(Direction.DOWN),
    ]
    for operation in operations:
        operation()
        _assert_selection_valid(paths)
    assert paths.entries == ["/d"]


def test_duplicates_are_kept() -> None:
    paths = PathList(["/bin", "/bin"])
    paths.insert("/bin", Side.AFTER)
    assert paths.entries == ["/bin", "/bin", "/bin"]


def test_entries_returns_a_copy() -> None:
    paths = PathList(["/a"])
    entries = paths.entries
    entries.append("/b")
    assert paths.entries == ["/a"]
