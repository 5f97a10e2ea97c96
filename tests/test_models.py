"""Tests for task and list entry models."""

from xcpick.models import ListEntry, Outcome, OutcomeKind, Task, TaskItem


def test_task_item_wraps_reference():
    task = Task("build", "make")
    item = TaskItem(task)
    assert item.task is task
    assert item.name == "build"
    assert item.filter_value() == "build"
    assert item.render_label() == "build"


def test_task_item_is_list_entry():
    assert isinstance(TaskItem(Task("build")), ListEntry)
    assert not isinstance(Task("build"), ListEntry)


def test_outcome_constructors():
    task = Task("build")
    assert Outcome.pending().kind == OutcomeKind.PENDING
    assert not Outcome.pending().is_terminal
    assert Outcome.chosen(task).task is task
    assert Outcome.chosen(task).is_terminal
    assert Outcome.cancelled().task is None
    assert Outcome.cancelled().is_terminal
