"""A single input line."""

from __future__ import annotations

from dataclasses import dataclass

from fzfcore.ansi import AnsiOffset, extract_color


@dataclass
class Item:
    """An input line: the text matched against and, optionally, its origin.

    *text* is what the matchers see.  *orig_text* holds the original line when
    the text was transformed, and *colors* the ANSI colour ranges of *text*.
    """

    text: str
    index: int = 0
    orig_text: str | None = None
    colors: list[AnsiOffset] | None = None

    def color_offsets(self) -> list[AnsiOffset]:
        """Return the colour ranges, an empty list if there are none."""
        return list(self.colors) if self.colors is not None else []

    def as_string(self, strip_ansi: bool) -> str:
        """Return the original line, without escape sequences if *strip_ansi*."""
        if self.orig_text is not None:
            if strip_ansi:
                trimmed, _, _ = extract_color(self.orig_text, None, None)
                return trimmed
            return self.orig_text
        return self.text