"""Character classes and bonus points used by the matching algorithms.

A scheme decides how much a match is worth at a word boundary.  The
"default" scheme favours boundaries after whitespace, "path" favours
boundaries after path separators, and "history" treats all boundaries alike.
"""

from __future__ import annotations

import os
import unicodedata
from enum import IntEnum

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

# The bonus is cancelled when the gap between acronyms grows over 8 characters.
BONUS_BOUNDARY = SCORE_MATCH // 2

# Needed for computing bonus points of consecutive chunks that start with a
# non-word character.
BONUS_NON_WORD = SCORE_MATCH // 2

# Edge-triggered bonus for camelCase words and letter-to-digit transitions.
BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION

# Minimum bonus given to characters in consecutive chunks.
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)

# Multiplier for the bonus of the first character of the pattern.
BONUS_FIRST_CHAR_MULTIPLIER = 2

_WHITE_CHARS = " \t\n\v\f\r\x85\xa0"
_DEFAULT_DELIMITERS = "/,:;|"
_SCHEME_NAMES = ("default", "path", "history")


class CharClass(IntEnum):
    """Classification of a character for bonus computation."""

    WHITE = 0
    NON_WORD = 1
    DELIMITER = 2
    LOWER = 3
    UPPER = 4
    LETTER = 5
    NUMBER = 6


class Scheme:
    """A scoring scheme: boundary bonuses and character classification."""

    def __init__(self, name: str) -> None:
        if name not in _SCHEME_NAMES:
            raise ValueError(f"unknown scoring scheme: {name!r}")
        self.name = name
        self.delimiter_chars = _DEFAULT_DELIMITERS
        self.initial_char_class = CharClass.WHITE
        if name == "default":
            self.bonus_boundary_white = BONUS_BOUNDARY + 2
            self.bonus_boundary_delimiter = BONUS_BOUNDARY + 1
        elif name == "path":
            self.bonus_boundary_white = BONUS_BOUNDARY
            self.bonus_boundary_delimiter = BONUS_BOUNDARY + 1
            if os.sep == "/":
                self.delimiter_chars = "/"
            else:
                self.delimiter_chars = os.sep + "/"
            self.initial_char_class = CharClass.DELIMITER
        else:
            self.bonus_boundary_white = BONUS_BOUNDARY
            self.bonus_boundary_delimiter = BONUS_BOUNDARY

        self.ascii_classes: tuple[CharClass, ...] = tuple(
            self._ascii_class(chr(code)) for code in range(128)
        )
        self.bonus_matrix: tuple[tuple[int, ...], ...] = tuple(
            tuple(self._compute_bonus(prev, cur) for cur in CharClass)
            for prev in CharClass
        )

    def __repr__(self) -> str:
        return f"Scheme({self.name!r})"

    def _ascii_class(self, char: str) -> CharClass:
        if "a" <= char <= "z":
            return CharClass.LOWER
        if "A" <= char <= "Z":
            return CharClass.UPPER
        if "0" <= char <= "9":
            return CharClass.NUMBER
        if char in _WHITE_CHARS:
            return CharClass.WHITE
        if char in self.delimiter_chars:
            return CharClass.DELIMITER
        return CharClass.NON_WORD

    def _non_ascii_class(self, char: str) -> CharClass:
        category = unicodedata.category(char)
        if category == "Ll":
            return CharClass.LOWER
        if category == "Lu":
            return CharClass.UPPER
        if category.startswith("N"):
            return CharClass.NUMBER
        if category.startswith("L"):
            return CharClass.LETTER
        if char.isspace():
            return CharClass.WHITE
        if char in self.delimiter_chars:
            return CharClass.DELIMITER
        return CharClass.NON_WORD

    def char_class_of(self, char: str) -> CharClass:
        """Return the class of a single character."""
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        code = ord(char)
        if code < 128:
            return self.ascii_classes[code]
        return self._non_ascii_class(char)

    def _compute_bonus(self, prev_class: CharClass, char_class: CharClass) -> int:
        if char_class > CharClass.NON_WORD:
            if prev_class == CharClass.WHITE:
                return self.bonus_boundary_white
            if prev_class == CharClass.DELIMITER:
                return self.bonus_boundary_delimiter
            if prev_class == CharClass.NON_WORD:
                return BONUS_BOUNDARY

        if (prev_class == CharClass.LOWER and char_class == CharClass.UPPER) or (
            prev_class != CharClass.NUMBER and char_class == CharClass.NUMBER
        ):
            return BONUS_CAMEL123

        if char_class in (CharClass.NON_WORD, CharClass.DELIMITER):
            return BONUS_NON_WORD
        if char_class == CharClass.WHITE:
            return self.bonus_boundary_white
        return 0

    def bonus_for(self, prev_class: CharClass, char_class: CharClass) -> int:
        """Return the bonus for a character of *char_class* after *prev_class*."""
        return self.bonus_matrix[prev_class][char_class]

    def bonus_at(self, text: str, index: int) -> int:
        """Return the bonus for the character of *text* at *index*."""
        if index < 0 or index >= len(text):
            raise IndexError(f"index {index} out of range for text of length {len(text)}")
        if index == 0:
            return self.bonus_boundary_white
        return self.bonus_for(
            self.char_class_of(text[index - 1]), self.char_class_of(text[index])
        )


_current = Scheme("default")


def set_scheme(name: str) -> Scheme:
    """Make the scheme called *name* the current one and return it."""
    global _current
    _current = Scheme(name)
    return _current


def current_scheme() -> Scheme:
    """Return the scheme in use."""
    return _current