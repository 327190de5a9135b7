"""A task list kept in a JSON file."""

from __future__ import annotations

import os
from pathlib import Path

from . import filters
from .dates import is_date_before, is_date_equal, is_valid_date
from .jsonstore import parse_tasks, tasks_to_json
from .task import Task, is_valid_priority, is_valid_status


class TaskError(Exception):
    """Raised when a task operation cannot be carried out."""


class TaskManager:
    """Holds tasks in memory and writes them to its file after every change."""

    def __init__(self, filename: str | os.PathLike[str] = "tasks.json") -> None:
        self.filename = Path(filename)
        self._tasks: list[Task] = []
        self._next_id = 1
        self.load()

    def add_task(self, description: str, priority: str = "medium", due_date: str = "") -> Task:
        """Create a task with the next free id, save, and return it."""
        if not description:
            raise TaskError("Task description cannot be empty.")
        task = Task(self._next_id, description, priority, due_date)
        self._next_id += 1
        self._tasks.append(task)
        self.save()
        return task

    def update_task(
        self,
        id: int,
        description: str = "",
        status: str = "",
        priority: str = "",
        due_date: str = "",
    ) -> bool:
        """Change the given non-empty fields; return True if anything changed."""
        task = self.find(id)
        if task is None:
            raise TaskError(f"Task with ID {id} not found.")
        if status and not is_valid_status(status):
            raise TaskError(
                f"Invalid status '{status}'. Valid statuses are: pending, in_progress, done"
            )
        if priority and not is_valid_priority(priority):
            raise TaskError(
                f"Invalid priority '{priority}'. Valid priorities are: high, medium, low"
            )
        if due_date and not is_valid_date(due_date):
            raise TaskError(f"Invalid date format '{due_date}'. Please use YYYY-MM-DD format.")

        updated = False
        if description:
            task.description = description
            updated = True
        if status:
            task.status = status
            updated = True
        if priority:
            task.priority = priority
            updated = True
        if due_date:
            task.due_date = due_date
            updated = True

        if updated:
            self.save()
        return updated

    def delete_task(self, id: int) -> Task:
        """Remove the task with this id, save, and return it."""
        task = self.find(id)
        if task is None:
            raise TaskError(f"Task with ID {id} not found.")
        self._tasks.remove(task)
        self.save()
        return task

    def all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def tasks_by_status(self, status: str) -> list[Task]:
        return filters.filter_by_status(self._tasks, status)

    def tasks_by_priority(self, priority: str) -> list[Task]:
        return filters.filter_by_priority(self._tasks, priority)

    def search(self, keyword: str) -> list[Task]:
        return filters.filter_by_keyword(self._tasks, keyword)

    def tasks_due_by(self, date: str) -> list[Task]:
        """Tasks due on or before the given date."""
        return [
            task
            for task in self._tasks
            if task.due_date
            and (is_date_equal(task.due_date, date) or is_date_before(task.due_date, date))
        ]

    def overdue_tasks(self) -> list[Task]:
        return filters.filter_overdue(self._tasks)

    def tasks_due_today(self) -> list[Task]:
        return filters.filter_due_today(self._tasks)

    def filtered(
        self,
        keyword: str = "",
        priority: str = "",
        status: str = "",
        due_date: str = "",
        overdue_only: bool = False,
        due_today_only: bool = False,
    ) -> list[Task]:
        return filters.filter_by_criteria(
            self._tasks, keyword, priority, status, due_date, overdue_only, due_today_only
        )

    def sorted_tasks(self, sort_by: str = "id", ascending: bool = True) -> list[Task]:
        """All tasks sorted by a field; an unknown field keeps stored order."""
        return filters.filter_and_sort(self._tasks, sort_by, ascending)

    def filtered_and_sorted(
        self,
        sort_by: str = "",
        ascending: bool = True,
        keyword: str = "",
        priority: str = "",
        status: str = "",
        due_date: str = "",
        overdue_only: bool = False,
        due_today_only: bool = False,
    ) -> list[Task]:
        return filters.filter_and_sort(
            self._tasks,
            sort_by,
            ascending,
            keyword,
            priority,
            status,
            due_date,
            overdue_only,
            due_today_only,
        )

    def load(self) -> None:
        """Read tasks from the file; an unreadable file leaves the list as it is."""
        try:
            content = self.filename.read_text(encoding="utf-8")
        except OSError:
            return
        self._tasks = parse_tasks(content)
        for task in self._tasks:
            if task.id >= self._next_id:
                self._next_id = task.id + 1

    def save(self) -> None:
        """Write all tasks to the file."""
        try:
            self.filename.write_text(tasks_to_json(self._tasks), encoding="utf-8")
        except OSError as exc:
            raise TaskError(f"Cannot save tasks to file {self.filename}") from exc

    def find(self, id: int) -> Task | None:
        """The task with this id, or None."""
        return next((task for task in self._tasks if task.id == id), None)

    def __len__(self) -> int:
        return len(self._tasks)