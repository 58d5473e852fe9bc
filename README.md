# todoc

A tiny command-line to-do list. Tasks are kept in `storage.txt` in the
current directory. Each task takes one line, made of three tab-separated
fields:

```
<id>	<title>	<done: 0 or 1>
```

If the file does not exist, the program prints
`Can't load the storage, so we're creating a new one` and creates an empty
file. Lines that do not have three fields are reported as
`Invalid task format` on standard error. They are dropped the next time the
file is saved. Runs of tabs count as a single separator, so an empty title
cannot be stored.

## Installation

```
pip install .
```

## Usage

```
todoc [COMMAND] [ARGS]
```

Running `todoc` with no command prints the help message.

| Command                     | Aliases                | What it does                               |
|-----------------------------|------------------------|--------------------------------------------|
| `help`                      | `h`, `-h`, `--help`    | Prints the help message                    |
| `add <title>`               | `a`, `-a`, `--add`     | Adds a new open task with a random UUID    |
| `ls`                        | `--list`, `-l`         | Lists all tasks                            |
| `upd <task_id> <new_title>` | `u`, `--update`, `-u`  | Sets a task's title and marks it not done  |
| `done <task_id>`            | `do`, `--do`, `--done` | Marks a task as done                       |
| `del <task_id>`             | `d`, `-d`, `--del`     | Deletes a task                             |

The usage lines printed by the program name it `todo-c`.

### Example

```
$ todoc add "Buy milk"
Task created successfully
$ todoc ls
Tasks:
[ ] Buy milk (ID: 3f0c9d7e-0000-4000-8000-000000000000)
$ todoc done 3f0c9d7e-0000-4000-8000-000000000000
Task marked as done
```

Tasks are listed in the order of their internal hash buckets. This order is
fixed by each task's id, not by when the task was added.

### Errors and exit status

An unknown command prints
`Command <name> not exists. Type -h to see help message` and exits with
status 1.

A command that is missing its arguments prints its usage line and exits with
status 1. The file is not rewritten in either case.

If `upd`, `done` or `del` is given an id that does not exist, it prints
`Task with ID '<id>' not found`. It still prints its usual success line,
leaves the tasks unchanged and exits with status 0.

## Using it from Python

```python
from todoc.todo import Todo, TaskNotFoundError

todo = Todo()
task = todo.create_item("Write report")
todo.mark_done(task.id)
print(todo.format_list())

try:
    todo.delete_item("no-such-id")
except TaskNotFoundError as error:
    print(error)  # Task with ID 'no-such-id' not found
```

- `todoc.todo`
  - `TodoTask` is a dataclass with the fields `id`, `title` and `is_done`.
  - `Todo` has the methods `add`, `create_item`, `update_item`, `delete_item`, `mark_done`, `tasks`, `format_list` and `list_items`.
  - These methods raise `TaskNotFoundError` (a `LookupError`) when an id is unknown.
- `todoc.storage.Storage(path)`
  - It holds the file's lines in `lines`.
  - `load()` reads the lines from the file.
  - `rewrite(lines)` replaces the held lines.
  - `write()` saves the held lines back to the file.
- `todoc.adapter`
  - `parse_task` turns a stored line into a `TodoTask`, and `format_task` does the reverse.
  - `storage_to_todo` moves tasks from a `Storage` into a `Todo`, and `todo_to_storage` moves them back.
- `todoc.command`
  - `get_command_type` maps a verb to a `CommandType`.
  - `help_text()` returns the help message, and `print_help()` prints it.
- `todoc.hashmap`
  - `Hashmap` is a string-keyed map with FNV-1a hashing (`fnv1a_hash`) over 255 chained buckets (`bucket_index`).
- `todoc.cli.main(argv=None)` is the entry point of the `todoc` command. It returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```