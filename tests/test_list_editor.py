"""Tests for EditPass — deferred removal during an index walk."""

from ui_board.core.list_editor import EditPass


def test_no_marks_is_not_structural():
    edit_pass = EditPass()
    entries = ["a", "b"]
    assert not edit_pass.structural
    assert edit_pass.apply(entries) == []
    assert entries == ["a", "b"]


def test_marks_collected_during_walk_apply_after():
    entries = ["a", "b", "c", "d", "e"]
    edit_pass = EditPass()
    for index, entry in enumerate(entries):
        if entry in ("b", "d"):
            edit_pass.mark_removed(index)
    # Nothing removed while walking.
    assert entries == ["a", "b", "c", "d", "e"]
    assert edit_pass.structural

    removed = edit_pass.apply(entries)
    assert removed == ["b", "d"]
    assert entries == ["a", "c", "e"]
    assert not edit_pass.structural


def test_duplicate_marks_remove_once():
    entries = ["a", "b", "c"]
    edit_pass = EditPass()
    edit_pass.mark_removed(1)
    edit_pass.mark_removed(1)
    assert edit_pass.apply(entries) == ["b"]
    assert entries == ["a", "c"]


def test_out_of_range_marks_are_dropped():
    entries = ["a"]
    edit_pass = EditPass()
    edit_pass.mark_removed(3)
    edit_pass.mark_removed(-1)
    assert edit_pass.apply(entries) == []
    assert entries == ["a"]
