"""Tasks and the collection that holds them."""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from todoc.hashmap import Hashmap


@dataclass
class TodoTask:
    id: str
    title: str
    is_done: bool = False


class TaskNotFoundError(LookupError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with ID '{task_id}' not found")
        self.task_id = task_id


def _task_line(task: TodoTask) -> str:
    status = "[x]" if task.is_done else "[ ]"
    return f"{status} {task.title} (ID: {task.id})"


class Todo:
    """A set of tasks keyed by id."""

    def __init__(self) -> None:
        self._tasks = Hashmap()

    def _find(self, task_id: str) -> TodoTask:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def add(self, task: TodoTask) -> None:
        """Store a task, replacing one with the same id."""
        self._tasks.set(task.id, task)

    def create_item(self, title: str) -> TodoTask:
        """Create an open task with a fresh UUID and return it."""
        task = TodoTask(id=str(uuid.uuid4()), title=title)
        self.add(task)
        return task

    def update_item(self, task_id: str, title: str, is_done: bool) -> TodoTask:
        """Set a task's title and status."""
        task = self._find(task_id)
        task.title = title
        task.is_done = is_done
        return task

    def delete_item(self, task_id: str) -> None:
        """Remove a task."""
        self._find(task_id)
        self._tasks.delete(task_id)

    def mark_done(self, task_id: str) -> TodoTask:
        """Mark a task as done."""
        task = self._find(task_id)
        task.is_done = True
        return task

    def tasks(self) -> list[TodoTask]:
        """Return all tasks in storage order."""
        return list(self._tasks.values())

    def format_list(self) -> str:
        """Return the listing shown to the user."""
        tasks = self.tasks()
        if not tasks:
            return "No tasks found.\n"
        lines = ["Tasks:", *(_task_line(task) for task in tasks)]
        return "\n".join(lines) + "\n"

    def list_items(self) -> list[TodoTask]:
        """Print the listing and return the tasks that were listed."""
        tasks = self.tasks()
        if not tasks:
            print("No tasks found.")
            return tasks
        print("Tasks:")
        for task in tasks:
            print(_task_line(task))
        return tasks