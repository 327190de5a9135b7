# tasktrack

A small command-line task tracker. Each task has an id, a description, a
status (`pending`, `in_progress`, `done`), a priority (`high`, `medium`,
`low`), an optional due date (`YYYY-MM-DD`, years 1900 to 2100) and a
creation date. Tasks are kept in `tasks.json` in the current directory and
the file is rewritten after every change.

## Installation

    pip install .

This installs the `task_tracker` command. Run the tests with:

    pip install ".[test]"
    pytest

## Usage

    task_tracker <command> [arguments]

With no arguments, or with `help`, `--help` or `-h`, the help text is shown.

Basic commands:

    task_tracker add "Review code" --priority high --due 2025-06-15
    task_tracker list
    task_tracker list pending
    task_tracker list --priority high --sort due_date
    task_tracker update 1 --status in_progress --description "Review the code"
    task_tracker update 1 done
    task_tracker done 1
    task_tracker progress 2
    task_tracker delete 3

Searching, filtering and sorting:

    task_tracker search "meeting" --status pending --sort priority desc
    task_tracker filter priority high
    task_tracker filter status done
    task_tracker sort priority desc
    task_tracker due 2025-06-30
    task_tracker due today
    task_tracker overdue
    task_tracker today
    task_tracker list --overdue --sort due_date

Options:

- `--priority`, `-p` — set the priority when adding or updating; `--priority` also filters `list` and `search`
- `--due`, `-d` — set the due date when adding or updating
- `--status` — new status for `update`; filter for `list` and `search`
- `--sort <field>` — sort `list` or `search` results by `priority`, `due_date` (or `due`), `status`, `id` or `created_date` (or `created`); add `desc` or `descending` anywhere to reverse
- `--description` — new description for `update`
- `--due-today`, `--overdue` — date filters for `list`

Tasks are printed as a table with id, a priority marker (`[!]` high,
`[>]` medium, `[-]` low), description (cut to 24 characters), status,
due date and days left (`OVERDUE`, `TODAY` or a day count). Errors such as
an unknown id, an invalid status, priority or date are printed to standard
error.

## Interactive mode

    task_tracker interactive

(`-i` and `--interactive` work too.) This clears the screen, shows task
counts and alerts for overdue and due-today tasks, and opens a prompt where
the same commands can be typed, plus `stats`, `clear` (or `cls`), `help`
(or `h`) and `exit` (or `quit`, `q`). Words in double quotes, such as
`add "Buy groceries" -p low`, are kept together. The session ends on exit or
at end of input and reports how many commands were run.

## Using it from Python

```python
from tasktrack.manager import TaskManager, TaskError

manager = TaskManager("tasks.json")
task = manager.add_task("Write report", "high", "2025-06-15")
manager.update_task(task.id, status="in_progress")
for t in manager.sorted_tasks("priority", False):
    print(t)

try:
    manager.delete_task(999)
except TaskError as exc:
    print(exc)
```

`TaskManager` raises `TaskError` for a missing task, an empty description,
an invalid status, priority or date, or a file it cannot write. Filtering
and sorting helpers (`filter_and_sort`, `filter_by_criteria`,
`sort_by_due_date` and others) live in `tasktrack.filters`, date helpers in
`tasktrack.dates`, the `Task` class in `tasktrack.task`, and reading and
writing the JSON layout (`parse_tasks`, `tasks_to_json`) in
`tasktrack.jsonstore`. `tasktrack.commands.CommandHandler` and
`tasktrack.interactive.InteractiveMode` accept their own output streams.

## Limitations

- Date ordering and the "days left" count use a coarse day count in which
  every month has 30 days and every year 365, so counts across month ends
  are approximate.
- The JSON reader handles only the flat layout this package writes; a
  description containing `}` or an unescaped quote is not read back
  correctly.
- There is one task file, `tasks.json` in the current directory, for the
  command; there is no option to choose another.