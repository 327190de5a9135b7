"""Command-line verbs that read and change a task list."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TextIO

from .dates import current_date, is_valid_date
from .filters import is_valid_sort_field
from .manager import TaskError, TaskManager
from .task import Task

_ID_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LEGACY_STATUSES = frozenset({"pending", "in_progress", "done"})
_PRIORITY_SYMBOLS = {"high": "[!]", "medium": "[>]", "low": "[-]"}
_STATUS_SYMBOLS = {"done": "[X]", "in_progress": "[>]"}
_INVALID_ID = "Error: Invalid task ID. Please provide a valid number."

HELP_TEXT = """\
Task Tracker - Command Line Task Management Tool (Phase 3)

USAGE:
  task_tracker <command> [arguments]

BASIC COMMANDS:
  add "description" [options]    Add a new task
  list [filters]                  List tasks with filters and sorting
  update <id> [options]           Update task attributes
  delete <id>                     Delete a task
  done <id>                       Mark task as done
  progress <id>                   Mark task as in progress

ADVANCED COMMANDS:
  search "keyword" [filters]      Search tasks by keyword with filters
  filter <type> <value>           Filter tasks by specific criteria
  sort <field> [asc|desc]         Sort all tasks by field
  due <date|today>                Show tasks due by date
  overdue                         Show overdue tasks
  today                           Show tasks due today
  interactive, -i                 Start interactive mode

OPTIONS:
  --priority, -p <high|medium|low>  Set/filter by task priority
  --due, -d <YYYY-MM-DD>            Set/filter by due date
  --status <pending|in_progress|done>  Filter by status
  --sort <field> [asc|desc]         Sort results
  --description "text"              Update description
  --due-today                       Filter tasks due today
  --overdue                         Filter overdue tasks

SORT FIELDS:
  priority, due_date, status, id, created_date

EXAMPLES:
  task_tracker add "Review code" --priority high --due 2025-06-15
  task_tracker list --priority high --sort due_date
  task_tracker search "meeting" --status pending --sort priority desc
  task_tracker sort priority desc
  task_tracker list --overdue --sort due_date
  task_tracker interactive
"""


def _parse_id(text: str) -> int:
    """Read a leading integer the way a lenient number parser does."""
    match = _ID_RE.match(text)
    if match is None:
        raise ValueError(f"not a task id: {text!r}")
    return int(match.group(1))


def _find_argument(args: Sequence[str], flag: str) -> str:
    """The value following the first occurrence of flag, or ''."""
    try:
        index = list(args).index(flag)
    except ValueError:
        return ""
    return args[index + 1] if index + 1 < len(args) else ""


def _first_argument(args: Sequence[str], *flags: str) -> str:
    for flag in flags:
        value = _find_argument(args, flag)
        if value:
            return value
    return ""


def _is_ascending(args: Sequence[str]) -> bool:
    return "desc" not in args and "descending" not in args


def _priority_symbol(priority: str) -> str:
    return _PRIORITY_SYMBOLS.get(priority, "[ ]")


def _status_symbol(status: str) -> str:
    return _STATUS_SYMBOLS.get(status, "[ ]")


def _days_left(task: Task) -> str:
    if not task.due_date:
        return "-"
    if task.is_overdue():
        return "OVERDUE"
    if task.is_due_today():
        return "TODAY"
    days = task.days_until_due()
    return f"{days} days" if days >= 0 else "-"


def _short_description(description: str) -> str:
    return description[:21] + "..." if len(description) > 24 else description


class CommandHandler:
    """Runs one command, given as a list of words, against a task manager."""

    def __init__(
        self,
        manager: TaskManager,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.manager = manager
        self._stdout = stdout
        self._stderr = stderr
        self._commands: dict[str, Callable[[Sequence[str]], None]] = {
            "add": self.handle_add,
            "list": self.handle_list,
            "update": self.handle_update,
            "delete": self.handle_delete,
            "done": self.handle_done,
            "progress": self.handle_progress,
            "search": self.handle_search,
            "filter": self.handle_filter,
            "sort": self.handle_sort,
            "due": self.handle_due,
            "overdue": lambda _args: self.handle_overdue(),
            "today": lambda _args: self.handle_today(),
            "help": lambda _args: self.display_help(),
            "--help": lambda _args: self.display_help(),
            "-h": lambda _args: self.display_help(),
        }

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def _say(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stdout)

    def _error(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.stderr)

    @contextmanager
    def _reporting(self) -> Iterator[None]:
        """Turn task errors and bad ids into messages on stderr."""
        try:
            yield
        except TaskError as exc:
            self._error(f"Error: {exc}")
        except ValueError:
            self._error(_INVALID_ID)

    def handle_add(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error(
                "Error: Please provide a task description.",
                'Usage: add "Task description" [--priority high|medium|low] [--due YYYY-MM-DD]',
            )
            return
        description = args[1]
        priority = _first_argument(args, "--priority", "-p") or "medium"
        due_date = _first_argument(args, "--due", "-d")

        with self._reporting():
            task = self.manager.add_task(description, priority, due_date)
            message = f"Task added successfully with ID: {task.id}"
            if priority != "medium":
                message += f" (Priority: {priority})"
            if due_date:
                message += f" (Due: {due_date})"
            self._say(message)

    def _update(self, task_id: int, **changes: str) -> None:
        if self.manager.update_task(task_id, **changes):
            self._say(f"Task {task_id} updated successfully.")

    def handle_update(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error(
                "Error: Please provide a task ID.",
                'Usage: update <id> [--description "New desc"] '
                "[--status pending|in_progress|done] [--priority high|medium|low] "
                "[--due YYYY-MM-DD]",
            )
            return
        with self._reporting():
            task_id = _parse_id(args[1])
            description = _find_argument(args, "--description")
            status = _find_argument(args, "--status")
            priority = _first_argument(args, "--priority", "-p")
            due_date = _first_argument(args, "--due", "-d")

            if len(args) >= 3 and not (description or status or priority or due_date):
                status = args[2]

            self._update(
                task_id,
                description=description,
                status=status,
                priority=priority,
                due_date=due_date,
            )

    def handle_delete(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error("Error: Please provide a task ID.", "Usage: delete <id>")
            return
        with self._reporting():
            task_id = _parse_id(args[1])
            self.manager.delete_task(task_id)
            self._say(f"Task {task_id} deleted successfully.")

    def _set_status(self, args: Sequence[str], verb: str, status: str) -> None:
        if len(args) < 2:
            self._error("Error: Please provide a task ID.", f"Usage: {verb} <id>")
            return
        with self._reporting():
            self._update(_parse_id(args[1]), status=status)

    def handle_done(self, args: Sequence[str]) -> None:
        self._set_status(args, "done", "done")

    def handle_progress(self, args: Sequence[str]) -> None:
        self._set_status(args, "progress", "in_progress")

    def handle_list(self, args: Sequence[str]) -> None:
        status_filter = _find_argument(args, "--status")
        priority_filter = _find_argument(args, "--priority")
        sort_by = _find_argument(args, "--sort")
        ascending = _is_ascending(args)

        if len(args) > 1 and not (status_filter or priority_filter or sort_by):
            if args[1] in _LEGACY_STATUSES:
                status_filter = args[1]

        due_today = "--due-today" in args
        overdue = "--overdue" in args

        tasks = self.manager.filtered_and_sorted(
            sort_by,
            ascending,
            "",
            priority_filter,
            status_filter,
            "",
            overdue,
            due_today,
        )

        title = f"{status_filter} Tasks" if status_filter else "All Tasks"
        if priority_filter:
            title += f" (Priority: {priority_filter})"
        if due_today:
            title = "Tasks Due Today"
        elif overdue:
            title = "Overdue Tasks"
        if sort_by:
            title += f" (Sorted by {sort_by} {'asc' if ascending else 'desc'})"

        self.display_tasks(tasks, title)

    def handle_search(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error(
                "Error: Please provide a search keyword.",
                'Usage: search "keyword" [--status pending|in_progress|done] '
                "[--priority high|medium|low] [--sort field]",
            )
            return
        keyword = args[1]
        status_filter = _find_argument(args, "--status")
        priority_filter = _find_argument(args, "--priority")
        sort_by = _find_argument(args, "--sort")
        ascending = _is_ascending(args)

        results = self.manager.filtered_and_sorted(
            sort_by, ascending, keyword, priority_filter, status_filter
        )
        title = f'Search Results for: "{keyword}"'
        if status_filter or priority_filter:
            title += " (Filtered)"
        self.display_tasks(results, title)

    def handle_filter(self, args: Sequence[str]) -> None:
        if len(args) < 3:
            self._error(
                "Error: Please provide filter criteria.",
                "Usage: filter priority high|medium|low",
                "       filter status pending|in_progress|done",
            )
            return
        filter_type, value = args[1], args[2]
        if filter_type == "priority":
            self.display_tasks(
                self.manager.tasks_by_priority(value), f"Tasks with Priority: {value}"
            )
        elif filter_type == "status":
            self.display_tasks(self.manager.tasks_by_status(value), f"Tasks with Status: {value}")
        else:
            self._error("Error: Invalid filter type. Use 'priority' or 'status'.")

    def handle_sort(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error(
                "Error: Please provide sort criteria.",
                "Usage: sort priority|due_date|status|id|created_date [asc|desc]",
            )
            return
        sort_by = args[1]
        ascending = not (len(args) > 2 and args[2] in ("desc", "descending"))

        if not is_valid_sort_field(sort_by):
            self._error(
                "Error: Invalid sort field. Valid fields: priority, due_date, status, id, created_date"
            )
            return

        results = self.manager.sorted_tasks(sort_by, ascending)
        order = "ascending" if ascending else "descending"
        self.display_tasks(results, f"All Tasks (Sorted by {sort_by} {order})")

    def handle_due(self, args: Sequence[str]) -> None:
        if len(args) < 2:
            self._error(
                "Error: Please provide a date or 'today'.",
                "Usage: due YYYY-MM-DD",
                "       due today",
            )
            return
        date_arg = args[1]
        if date_arg == "today":
            self.display_tasks(self.manager.tasks_due_today(), "Tasks Due Today")
            return
        if not is_valid_date(date_arg):
            self._error("Error: Invalid date format. Please use YYYY-MM-DD.")
            return
        self.display_tasks(self.manager.tasks_due_by(date_arg), f"Tasks Due By: {date_arg}")

    def handle_overdue(self) -> None:
        self.display_tasks(self.manager.overdue_tasks(), "Overdue Tasks")

    def handle_today(self) -> None:
        self.display_tasks(self.manager.tasks_due_today(), "Tasks Due Today")

    def display_help(self) -> None:
        self.stdout.write(HELP_TEXT)

    def display_tasks(self, tasks: Sequence[Task], title: str = "") -> None:
        """Print the tasks as a table under an underlined title."""
        if title:
            self._say("", f"{title}:", "=" * (len(title) + 1))

        if not tasks:
            self._say("No tasks found.")
            return

        header = (
            "ID".ljust(4)
            + " P ".ljust(3)
            + "Description".ljust(25)
            + "Status".ljust(15)
            + "Due Date".ljust(12)
            + "Days Left".ljust(10)
        )
        self._say(header, "-" * 70)

        for task in tasks:
            row = (
                str(task.id).ljust(4)
                + _priority_symbol(task.priority).ljust(3)
                + _short_description(task.description).ljust(25)
                + f"{_status_symbol(task.status)} {task.status}".ljust(15)
                + (task.due_date or "-").ljust(12)
                + _days_left(task).ljust(10)
            )
            self._say(row)

        self._say(
            "",
            "Legend: [!] High Priority, [>] Medium Priority, [-] Low Priority",
            "        [X] Done, [>] In Progress, [ ] Pending",
            "",
        )

    def process(self, args: Sequence[str]) -> None:
        """Run the command named by the first word; no words shows the help."""
        if not args:
            self.display_help()
            return
        command = args[0]
        handler = self._commands.get(command)
        if handler is None:
            self._error(
                f"Error: Unknown command '{command}'",
                "Run 'help' for usage information.",
            )
            return
        handler(args)


__all__ = ["CommandHandler", "HELP_TEXT", "current_date"]