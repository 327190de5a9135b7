import pytest

from tasktrack.dates import current_date
from tasktrack.manager import TaskError, TaskManager


@pytest.fixture
def store(tmp_path):
    return tmp_path / "tasks.json"


def _descriptions(tasks):
    return [task.description for task in tasks]


def test_missing_file_starts_empty(store):
    manager = TaskManager(store)
    assert len(manager) == 0
    assert manager.all_tasks() == []
    assert not store.exists()


def test_add_assigns_sequential_ids(store):
    manager = TaskManager(store)
    first = manager.add_task("First")
    second = manager.add_task("Second", "high", "2025-06-15")
    assert [first.id, second.id] == [1, 2]
    assert first.priority == "medium"
    assert second.priority == "high"
    assert second.due_date == "2025-06-15"
    assert len(manager) == 2


def test_added_tasks_are_saved(store):
    manager = TaskManager(store)
    manager.add_task("Review code", "high", "2025-06-15")
    manager.add_task("Write report", "low")
    reloaded = TaskManager(store)
    assert _descriptions(reloaded.all_tasks()) == ["Review code", "Write report"]
    assert [t.priority for t in reloaded.all_tasks()] == ["high", "low"]
    assert reloaded.find(1).due_date == "2025-06-15"


def test_empty_description_raises(store):
    manager = TaskManager(store)
    with pytest.raises(TaskError):
        manager.add_task("")
    assert len(manager) == 0
    assert not store.exists()


def test_ids_continue_after_reload(store):
    manager = TaskManager(store)
    manager.add_task("a")
    manager.add_task("b")
    before = max(task.id for task in manager.all_tasks())
    reloaded = TaskManager(store)
    new = reloaded.add_task("c")
    assert new.id > before
    assert len({task.id for task in reloaded.all_tasks()}) == len(reloaded)


def test_ids_follow_highest_stored_id(store):
    store.write_text(
        '[\n  {"id": 3, "description": "three"},\n  {"id": 7, "description": "seven"}\n]',
        encoding="utf-8",
    )
    manager = TaskManager(store)
    assert manager.find(7).description == "seven"
    new = manager.add_task("next")
    assert new.id > 7


def test_update_changes_fields_and_saves(store):
    manager = TaskManager(store)
    manager.add_task("Original")
    changed = manager.update_task(
        1, description="Changed", status="done", priority="low", due_date="2025-12-31"
    )
    assert changed is True
    task = TaskManager(store).find(1)
    assert task.description == "Changed"
    assert task.status == "done"
    assert task.priority == "low"
    assert task.due_date == "2025-12-31"


def test_update_with_nothing_returns_false(store):
    manager = TaskManager(store)
    manager.add_task("Same")
    assert manager.update_task(1) is False
    assert manager.find(1).description == "Same"


def test_update_missing_task_raises(store):
    manager = TaskManager(store)
    with pytest.raises(TaskError, match="not found"):
        manager.update_task(42, status="done")


@pytest.mark.parametrize(
    "changes",
    [{"status": "finished"}, {"priority": "urgent"}, {"due_date": "2025-13-01"}],
)
def test_update_rejects_invalid_values(store, changes):
    manager = TaskManager(store)
    manager.add_task("Keep me")
    with pytest.raises(TaskError):
        manager.update_task(1, description="Other", **changes)
    task = manager.find(1)
    assert task.description == "Keep me"
    assert task.status == "pending"
    assert task.priority == "medium"
    assert task.due_date == ""


def test_delete_removes_and_saves(store):
    manager = TaskManager(store)
    manager.add_task("a")
    manager.add_task("b")
    removed = manager.delete_task(1)
    assert removed.description == "a"
    assert manager.find(1) is None
    assert _descriptions(TaskManager(store).all_tasks()) == ["b"]


def test_delete_missing_task_raises(store):
    manager = TaskManager(store)
    manager.add_task("a")
    with pytest.raises(TaskError):
        manager.delete_task(99)
    assert len(manager) == 1


def test_tasks_due_by(store):
    manager = TaskManager(store)
    manager.add_task("early", due_date="2025-06-10")
    manager.add_task("same", due_date="2025-06-15")
    manager.add_task("late", due_date="2025-06-20")
    manager.add_task("undated")
    assert _descriptions(manager.tasks_due_by("2025-06-15")) == ["early", "same"]


def test_overdue_and_due_today(store):
    manager = TaskManager(store)
    manager.add_task("past", due_date="2000-01-01")
    manager.add_task("now", due_date=current_date())
    manager.add_task("undated")
    assert _descriptions(manager.overdue_tasks()) == ["past"]
    assert _descriptions(manager.tasks_due_today()) == ["now"]


def test_listing_helpers(store):
    manager = TaskManager(store)
    manager.add_task("Buy groceries", "low")
    manager.add_task("Team meeting", "high")
    manager.update_task(2, status="in_progress")
    assert _descriptions(manager.tasks_by_status("in_progress")) == ["Team meeting"]
    assert _descriptions(manager.tasks_by_priority("low")) == ["Buy groceries"]
    assert _descriptions(manager.search("MEETING")) == ["Team meeting"]
    assert _descriptions(manager.filtered(keyword="buy", priority="low")) == ["Buy groceries"]


def test_sorting_helpers(store):
    manager = TaskManager(store)
    manager.add_task("low", "low")
    manager.add_task("high", "high")
    manager.add_task("medium", "medium")
    assert _descriptions(manager.sorted_tasks("priority", False)) == ["high", "medium", "low"]
    assert _descriptions(manager.sorted_tasks("id", False)) == ["medium", "high", "low"]
    assert _descriptions(manager.sorted_tasks("unknown")) == ["low", "high", "medium"]
    result = manager.filtered_and_sorted("priority", True, priority="")
    assert _descriptions(result) == ["low", "medium", "high"]


def test_returned_list_is_a_copy(store):
    manager = TaskManager(store)
    manager.add_task("a")
    tasks = manager.all_tasks()
    tasks.clear()
    assert len(manager) == 1


def test_save_failure_raises(tmp_path):
    manager = TaskManager(tmp_path)
    with pytest.raises(TaskError, match="Cannot save"):
        manager.add_task("unsaved")