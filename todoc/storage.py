"""Line-oriented file storage."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

DEFAULT_PATH = "storage.txt"


class Storage:
    """Holds the lines of a text file and writes them back."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path if path is not None else DEFAULT_PATH)
        self.lines: list[str] = []

    def load(self) -> None:
        """Append the file's lines, creating an empty file if there is none."""
        if not self.path.exists():
            print("Can't load the storage, so we're creating a new one")
            self.path.touch()
            return
        with self.path.open(encoding="utf-8", newline="") as handle:
            for line in handle:
                self.lines.append(line[:-1] if line.endswith("\n") else line)

    def write(self) -> None:
        """Write every line to the file, each followed by a newline."""
        try:
            with self.path.open("w", encoding="utf-8", newline="") as handle:
                handle.writelines(f"{line}\n" for line in self.lines)
        except OSError:
            print("Error: Could not open file for writing")

    def rewrite(self, lines: Iterable[str]) -> None:
        """Replace the held lines."""
        self.lines = list(lines)