"""Temporary files for passing data to other programs."""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Iterable


def write_temporary_file(data: Iterable[str], separator: str) -> str | None:
    """Write each string of *data* followed by *separator* to a new temporary file.

    Returns the file's path, or None if the file could not be created.
    """
    try:
        fd, path = tempfile.mkstemp(prefix="fzf-temp-")
    except OSError:
        return None
    with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
        handle.write(separator.join(data))
        handle.write(separator)
    return path


def remove_files(files: Iterable[str]) -> None:
    """Delete the given files, ignoring any that cannot be removed."""
    for filename in files:
        with contextlib.suppress(OSError):
            os.remove(filename)