"""Reading and writing task lists in the tasks.json layout."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .task import Task

logger = logging.getLogger(__name__)

_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_UNESCAPES = {'"': '"', "\\": "\\", "n": "\n", "r": "\r", "t": "\t"}
_SPACE = " \t\n\v\f\r"
_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def escape_json(text: str) -> str:
    """Escape quotes, backslashes, newlines, carriage returns and tabs."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def unescape_json(text: str) -> str:
    """Undo escape_json; unknown escapes keep their backslash."""
    out: list[str] = []
    chars = iter(enumerate(text))
    for index, char in chars:
        if char == "\\" and index + 1 < len(text) and text[index + 1] in _UNESCAPES:
            out.append(_UNESCAPES[text[index + 1]])
            next(chars)
        else:
            out.append(char)
    return "".join(out)


def _extract_string(obj: str, field: str) -> str:
    key = f'"{field}":'
    pos = obj.find(key)
    if pos < 0:
        return ""
    start = obj.find('"', pos + len(key))
    if start < 0:
        return ""
    end = obj.find('"', start + 1)
    if end < 0:
        return ""
    return unescape_json(obj[start + 1 : end])


def _extract_int(obj: str, field: str) -> int:
    key = f'"{field}":'
    pos = obj.find(key)
    if pos < 0:
        return 0
    start = pos + len(key)
    while start < len(obj) and obj[start] in " \t":
        start += 1
    if start >= len(obj):
        return 0
    ends = [i for i in (obj.find(",", start), obj.find("}", start)) if i >= 0]
    if not ends:
        return 0
    match = _INT_RE.match(obj[start : min(ends)])
    if match is None:
        return 0
    value = int(match.group(1))
    return value if _INT_MIN <= value <= _INT_MAX else 0


def _skip(content: str, pos: int, chars: str) -> int:
    while pos < len(content) and content[pos] in chars:
        pos += 1
    return pos


def parse_tasks(content: str) -> list[Task]:
    """Read tasks from stored JSON text; malformed parts end the read early."""
    tasks: list[Task] = []
    if not content or content == "[]":
        return tasks

    pos = content.find("[")
    if pos < 0:
        logger.error("Invalid JSON: No opening bracket found")
        return tasks
    pos += 1

    while pos < len(content):
        pos = _skip(content, pos, _SPACE)
        if pos >= len(content) or content[pos] == "]":
            break
        if content[pos] != "{":
            logger.error("Invalid JSON: Expected '{' at position %d", pos)
            break
        obj_end = content.find("}", pos)
        if obj_end < 0:
            logger.error("Invalid JSON: No closing brace found")
            break

        obj = content[pos + 1 : obj_end]
        task_id = _extract_int(obj, "id")
        description = _extract_string(obj, "description")
        status = _extract_string(obj, "status")
        priority = _extract_string(obj, "priority")
        due_date = _extract_string(obj, "due_date")
        created_date = _extract_string(obj, "created_date")

        if task_id > 0 and description:
            task = Task(task_id, description, priority or "medium", due_date, created_date)
            if status:
                task.status = status
            tasks.append(task)

        pos = _skip(content, obj_end + 1, _SPACE + ",")

    return tasks


def _task_to_json(task: Task) -> str:
    return (
        "  {\n"
        f'    "id": {task.id},\n'
        f'    "description": "{escape_json(task.description)}",\n'
        f'    "status": "{task.status}",\n'
        f'    "priority": "{task.priority}",\n'
        f'    "due_date": "{task.due_date}",\n'
        f'    "created_date": "{task.created_date}"\n'
        "  }"
    )


def tasks_to_json(tasks: Iterable[Task]) -> str:
    """Write tasks as an indented JSON array."""
    objects = [_task_to_json(task) for task in tasks]
    body = ",\n".join(objects)
    return "[\n" + body + ("\n" if objects else "") + "]"