"""Query history backed by a file."""

from __future__ import annotations

import os


class HistoryError(Exception):
    """The history file cannot be read or created."""


def _write(path: str, content: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape", newline="") as handle:
        handle.write(content)


class History:
    """Input history with a cursor for navigating previous entries.

    The last line is always the entry being edited.  Entries can be
    overridden while navigating; such edits are not written to the file.
    """

    def __init__(self, path: str, max_size: int) -> None:
        self.path = path
        self.max_size = max_size
        try:
            with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
                data = handle.read()
        except FileNotFoundError:
            data = ""
            try:
                _write(path, data)
            except OSError as exc:
                raise self._error(exc) from exc
        except OSError as exc:
            raise self._error(exc) from exc

        lines = data.strip("\n").split("\n")
        if lines[-1]:
            lines.append("")
        self.lines: list[str] = lines
        self.modified: dict[int, str] = {}
        self.cursor = len(lines) - 1

    def _error(self, exc: OSError) -> HistoryError:
        if isinstance(exc, PermissionError):
            return HistoryError(f"permission denied: {self.path}")
        return HistoryError(f"invalid history file: {exc}")

    def append(self, line: str) -> None:
        """Add *line* to the history and save it; empty lines are ignored."""
        if not line:
            return
        lines = self.lines[:-1] + [line]
        if len(lines) > self.max_size:
            lines = lines[len(lines) - self.max_size:]
        self.lines = lines + [""]
        _write(self.path, "\n".join(self.lines))

    def override(self, text: str) -> None:
        """Replace the entry under the cursor in memory only."""
        last = len(self.lines) - 1
        if self.cursor == last:
            self.lines[self.cursor] = text
        elif self.cursor < last:
            self.modified[self.cursor] = text

    def current(self) -> str:
        """Return the entry under the cursor."""
        if self.cursor in self.modified:
            return self.modified[self.cursor]
        return self.lines[self.cursor]

    def previous(self) -> str:
        """Move the cursor back one entry and return it."""
        if self.cursor > 0:
            self.cursor -= 1
        return self.current()

    def next(self) -> str:
        """Move the cursor forward one entry and return it."""
        if self.cursor < len(self.lines) - 1:
            self.cursor += 1
        return self.current()