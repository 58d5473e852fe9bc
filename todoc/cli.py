"""The todo command-line program."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from todoc.adapter import storage_to_todo, todo_to_storage
from todoc.command import CommandType, get_command_type, print_help
from todoc.storage import Storage
from todoc.todo import TaskNotFoundError, Todo

PROG = "todo-c"
STORAGE_PATH = "storage.txt"


def _usage(text: str) -> int:
    print(f"Usage: {PROG} {text}")
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command against the task file in the current directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    command = args[0] if args else "help"
    command_type = get_command_type(command)

    storage = Storage(STORAGE_PATH)
    storage.load()
    todo = Todo()
    storage_to_todo(storage, todo)

    try:
        if command_type is CommandType.HELP:
            print_help()
        elif command_type is CommandType.CREATE:
            if len(args) < 2:
                return _usage("add <title>")
            todo.create_item(args[1])
            print("Task created successfully")
        elif command_type is CommandType.LIST:
            todo.list_items()
        elif command_type is CommandType.DELETE:
            if len(args) < 2:
                return _usage("del <task_id>")
            _report_missing(todo.delete_item, args[1])
            print("Task deleted successfully")
        elif command_type is CommandType.UPDATE:
            if len(args) < 3:
                return _usage("upd <task_id> <new_title>")
            _report_missing(todo.update_item, args[1], args[2], False)
            print("Task updated successfully")
        elif command_type is CommandType.DONE:
            if len(args) < 2:
                return _usage("done <task_id>")
            _report_missing(todo.mark_done, args[1])
            print("Task marked as done")
        else:
            print(f"Command {command} not exists. Type -h to see help message")
            return 1
    finally:
        sys.stdout.flush()

    todo_to_storage(todo, storage)
    storage.write()
    return 0


def _report_missing(action, *args) -> None:
    try:
        action(*args)
    except TaskNotFoundError as error:
        print(error)


if __name__ == "__main__":
    sys.exit(main())