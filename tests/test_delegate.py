"""Tests for the list row render delegate."""

from xcpick.config import PickerTheme
from xcpick.models import Task, TaskItem
from xcpick.picker.delegate import ItemDelegate


def test_regular_row_is_indented_name():
    delegate = ItemDelegate(PickerTheme())
    text = delegate.render(TaskItem(Task("build")), highlighted=False)
    assert text.plain == "    build"
    assert not text.style


def test_highlighted_row_has_marker_and_style():
    delegate = ItemDelegate(PickerTheme())
    text = delegate.render(TaskItem(Task("build")), highlighted=True)
    assert text.plain == "  > build"
    assert "orchid" in str(text.style)


def test_theme_controls_indent_marker_and_color():
    theme = PickerTheme(indent=1, selected_indent=0, marker="* ", highlight_color="green")
    delegate = ItemDelegate(theme)

    assert delegate.render(TaskItem(Task("lint")), highlighted=False).plain == " lint"
    highlighted = delegate.render(TaskItem(Task("lint")), highlighted=True)
    assert highlighted.plain == "* lint"
    assert "green" in str(highlighted.style)


def test_no_color_keeps_marker_without_style():
    delegate = ItemDelegate(PickerTheme(), no_color=True)
    text = delegate.render(TaskItem(Task("build")), highlighted=True)
    assert text.plain == "  > build"
    assert not text.style


def test_non_entry_renders_empty():
    delegate = ItemDelegate(PickerTheme())
    assert delegate.render(Task("build"), highlighted=True).plain == ""
    assert delegate.render(None, highlighted=False).plain == ""
    assert delegate.render("build", highlighted=False).plain == ""
