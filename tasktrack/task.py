"""A single task with its status, priority and dates."""

from __future__ import annotations

import logging
from functools import total_ordering

from .dates import current_date, days_between, is_date_before, is_date_equal, is_valid_date

logger = logging.getLogger(__name__)

STATUSES = ("pending", "in_progress", "done")
PRIORITIES = ("high", "medium", "low")


def is_valid_status(status: str) -> bool:
    """Return True for one of pending, in_progress or done."""
    return status in STATUSES


def is_valid_priority(priority: str) -> bool:
    """Return True for one of high, medium or low."""
    return priority in PRIORITIES


@total_ordering
class Task:
    """A task; tasks compare and order by id."""

    def __init__(
        self,
        id: int = 0,
        description: str = "",
        priority: str = "medium",
        due_date: str = "",
        created_date: str = "",
    ) -> None:
        self.id = id
        self.description = description
        self._status = "pending"
        self._priority = priority if is_valid_priority(priority) else "medium"
        self._created_date = created_date or current_date()
        if due_date and not is_valid_date(due_date):
            logger.warning("Warning: Invalid due date format. Due date cleared.")
            due_date = ""
        self._due_date = due_date

    @property
    def status(self) -> str:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        if is_valid_status(value):
            self._status = value
        else:
            logger.warning("Invalid status: %s. Using 'pending' instead.", value)
            self._status = "pending"

    @property
    def priority(self) -> str:
        return self._priority

    @priority.setter
    def priority(self, value: str) -> None:
        if is_valid_priority(value):
            self._priority = value
        else:
            logger.warning("Invalid priority: %s. Using 'medium' instead.", value)
            self._priority = "medium"

    @property
    def due_date(self) -> str:
        return self._due_date

    @due_date.setter
    def due_date(self, value: str) -> None:
        if not value or is_valid_date(value):
            self._due_date = value
        else:
            logger.warning("Invalid due date format: %s. Expected YYYY-MM-DD.", value)

    @property
    def created_date(self) -> str:
        return self._created_date

    @created_date.setter
    def created_date(self, value: str) -> None:
        if is_valid_date(value):
            self._created_date = value

    def is_due_today(self) -> bool:
        """Return True when the task is due on today's date."""
        if not self._due_date:
            return False
        return is_date_equal(self._due_date, current_date())

    def is_overdue(self) -> bool:
        """Return True when the due date lies in the past."""
        if not self._due_date:
            return False
        return is_date_before(self._due_date, current_date())

    def days_until_due(self) -> int:
        """Days from today to the due date, or -1 when there is none."""
        if not self._due_date:
            return -1
        return days_between(current_date(), self._due_date)

    def matches_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring search in the description."""
        return keyword.lower() in self.description.lower()

    def __str__(self) -> str:
        text = (
            f"ID: {self.id}, Description: {self.description}, "
            f"Status: {self._status}, Priority: {self._priority}"
        )
        if self._due_date:
            text += f", Due: {self._due_date}"
        return text + f", Created: {self._created_date}"

    def __repr__(self) -> str:
        return (
            f"Task(id={self.id!r}, description={self.description!r}, "
            f"status={self._status!r}, priority={self._priority!r}, "
            f"due_date={self._due_date!r}, created_date={self._created_date!r})"
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id < other.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Task):
            return NotImplemented
        return self.id == other.id

    __hash__ = None  # type: ignore[assignment]