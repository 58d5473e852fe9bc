"""Recognition of command-line verbs and the help text."""

from __future__ import annotations

import sys
from enum import Enum


class CommandType(Enum):
    UNKNOWN = "unknown"
    HELP = "help"
    CREATE = "create"
    LIST = "list"
    UPDATE = "update"
    DONE = "done"
    DELETE = "delete"


# Checked in this order.
_VARIANTS: tuple[tuple[CommandType, frozenset[str]], ...] = (
    (CommandType.HELP, frozenset({"help", "h", "-h", "--help"})),
    (CommandType.DONE, frozenset({"done", "do", "--do", "--done"})),
    (CommandType.LIST, frozenset({"ls", "--list", "-l"})),
    (CommandType.CREATE, frozenset({"add", "a", "-a", "--add"})),
    (CommandType.DELETE, frozenset({"del", "d", "-d", "--del"})),
    (CommandType.UPDATE, frozenset({"upd", "u", "--update", "-u"})),
)

_HELP_LINES: tuple[str, ...] = (
    "Usage: todo-c [COMMAND] [ARGS]",
    "Commands:",
    "\thelp, h, -h, --help:\tPrints this help message",
    "\tadd, a, -a, --add:\tAdds a new task",
    "\tdel, d, -d, --del:\tDeletes a task",
    "\tls, --list, -l:\t\tLists all tasks",
    "\tupd, u, --update, -u:\tUpdates a task",
    "\tdone, do, --done:\tMarks a task as done",
)


def get_command_type(command: str) -> CommandType:
    """Return the kind of command a verb names."""
    for command_type, variants in _VARIANTS:
        if command in variants:
            return command_type
    return CommandType.UNKNOWN


def help_text() -> str:
    """Return the usage message."""
    return "".join(f"{line}\n" for line in _HELP_LINES)


def print_help() -> str:
    """Write the usage message to standard output and return it."""
    out = sys.stdout
    for line in _HELP_LINES:
        out.write(line)
        out.write("\n")
    out.flush()
    return help_text()