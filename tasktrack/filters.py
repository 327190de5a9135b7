"""Filtering and sorting of task lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import cmp_to_key

from .dates import is_date_before, is_date_in_range
from .task import Task

_PRIORITY_VALUES = {"high": 3, "medium": 2, "low": 1}
_STATUS_VALUES = {"pending": 1, "in_progress": 2, "done": 3}
_SORT_FIELDS = frozenset({"priority", "due_date", "due", "status", "id", "created_date", "created"})


def priority_value(priority: str) -> int:
    """Rank of a priority: high 3, medium 2, low 1, anything else 0."""
    return _PRIORITY_VALUES.get(priority, 0)


def status_value(status: str) -> int:
    """Rank of a status: pending 1, in_progress 2, done 3, anything else 0."""
    return _STATUS_VALUES.get(status, 0)


def is_valid_sort_field(field: str) -> bool:
    """Return True for a field that tasks can be sorted by."""
    return field in _SORT_FIELDS


def filter_by_keyword(tasks: Iterable[Task], keyword: str) -> list[Task]:
    """Tasks whose description contains the keyword, ignoring case."""
    if not keyword:
        return list(tasks)
    return [task for task in tasks if task.matches_keyword(keyword)]


def filter_by_priority(tasks: Iterable[Task], priority: str) -> list[Task]:
    """Tasks with the given priority; all tasks when it is empty."""
    if not priority:
        return list(tasks)
    return [task for task in tasks if task.priority == priority]


def filter_by_status(tasks: Iterable[Task], status: str) -> list[Task]:
    """Tasks with the given status; all tasks when it is empty."""
    if not status:
        return list(tasks)
    return [task for task in tasks if task.status == status]


def filter_by_date_range(tasks: Iterable[Task], start_date: str, end_date: str) -> list[Task]:
    """Tasks due between the two dates, inclusive; all tasks if either bound is empty."""
    if not start_date or not end_date:
        return list(tasks)
    return [
        task
        for task in tasks
        if task.due_date and is_date_in_range(task.due_date, start_date, end_date)
    ]


def filter_by_due_date(tasks: Iterable[Task], due_date: str) -> list[Task]:
    """Tasks due on exactly the given date; all tasks when it is empty."""
    if not due_date:
        return list(tasks)
    return [task for task in tasks if task.due_date == due_date]


def filter_overdue(tasks: Iterable[Task]) -> list[Task]:
    """Tasks whose due date has passed."""
    return [task for task in tasks if task.is_overdue()]


def filter_due_today(tasks: Iterable[Task]) -> list[Task]:
    """Tasks due today."""
    return [task for task in tasks if task.is_due_today()]


def filter_by_criteria(
    tasks: Iterable[Task],
    keyword: str = "",
    priority: str = "",
    status: str = "",
    due_date: str = "",
    overdue_only: bool = False,
    due_today_only: bool = False,
) -> list[Task]:
    """Apply every given criterion in turn; empty criteria are ignored."""
    result = list(tasks)
    if keyword:
        result = filter_by_keyword(result, keyword)
    if priority:
        result = filter_by_priority(result, priority)
    if status:
        result = filter_by_status(result, status)
    if due_date:
        result = filter_by_due_date(result, due_date)
    if overdue_only:
        result = filter_overdue(result)
    if due_today_only:
        result = filter_due_today(result)
    return result


def _compare_dates(first: str, second: str) -> int:
    if is_date_before(first, second):
        return -1
    if is_date_before(second, first):
        return 1
    return 0


def sort_by_priority(tasks: Iterable[Task], ascending: bool = False) -> list[Task]:
    """Sort by priority rank; descending (high first) by default."""
    return sorted(tasks, key=lambda task: priority_value(task.priority), reverse=not ascending)


def sort_by_due_date(tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
    """Sort by due date; tasks without one always come last."""
    direction = 1 if ascending else -1

    def compare(a: Task, b: Task) -> int:
        if not a.due_date or not b.due_date:
            return (not a.due_date) - (not b.due_date)
        return direction * _compare_dates(a.due_date, b.due_date)

    return sorted(tasks, key=cmp_to_key(compare))


def sort_by_status(tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
    """Sort by status rank: pending, in_progress, done."""
    return sorted(tasks, key=lambda task: status_value(task.status), reverse=not ascending)


def sort_by_id(tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
    """Sort by id."""
    return sorted(tasks, key=lambda task: task.id, reverse=not ascending)


def sort_by_created_date(tasks: Iterable[Task], ascending: bool = True) -> list[Task]:
    """Sort by creation date."""
    direction = 1 if ascending else -1

    def compare(a: Task, b: Task) -> int:
        return direction * _compare_dates(a.created_date, b.created_date)

    return sorted(tasks, key=cmp_to_key(compare))


_SORTERS: dict[str, Callable[[Iterable[Task], bool], list[Task]]] = {
    "priority": sort_by_priority,
    "due_date": sort_by_due_date,
    "due": sort_by_due_date,
    "status": sort_by_status,
    "id": sort_by_id,
    "created_date": sort_by_created_date,
    "created": sort_by_created_date,
}


def filter_and_sort(
    tasks: Iterable[Task],
    sort_by: str = "",
    ascending: bool = True,
    keyword: str = "",
    priority: str = "",
    status: str = "",
    due_date: str = "",
    overdue_only: bool = False,
    due_today_only: bool = False,
) -> list[Task]:
    """Filter by the criteria, then sort by a known field; unknown fields leave the order."""
    result = filter_by_criteria(
        tasks, keyword, priority, status, due_date, overdue_only, due_today_only
    )
    sorter = _SORTERS.get(sort_by)
    if sorter is not None:
        result = sorter(result, ascending)
    return result