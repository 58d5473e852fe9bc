"""Conversion between stored lines and tasks."""

from __future__ import annotations

import sys

from todoc.storage import Storage
from todoc.todo import Todo, TodoTask


def parse_task(line: str) -> TodoTask:
    """Parse an ``id<TAB>title<TAB>status`` line; runs of tabs count as one."""
    fields = [field for field in line.split("\t") if field]
    if len(fields) < 3:
        raise ValueError("Invalid task format")
    task_id, title, status = fields[:3]
    return TodoTask(id=task_id, title=title, is_done=status == "1")


def format_task(task: TodoTask) -> str:
    """Render a task as a storage line."""
    return f"{task.id}\t{task.title}\t{'1' if task.is_done else '0'}"


def storage_to_todo(storage: Storage, todo: Todo) -> None:
    """Add every well-formed stored line to ``todo``; bad lines are reported and skipped."""
    for line in storage.lines:
        try:
            task = parse_task(line)
        except ValueError as error:
            print(error, file=sys.stderr)
            continue
        todo.add(task)


def todo_to_storage(todo: Todo, storage: Storage) -> None:
    """Replace the storage's lines with the tasks of ``todo``."""
    storage.rewrite(format_task(task) for task in todo.tasks())