"""Parsing of ANSI escape sequences embedded in input lines.

Colour and attribute codes are interpreted into :class:`AnsiState` values,
and :func:`extract_color` strips escape sequences from a line while
recording which character ranges carry which colours.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import IntFlag

_TRIGGERS = re.compile("[\x0e\x0f\x1b\x08]")
_CTRL_SEQ_START = "\\[()"
_CTRL_SEQ_BODY = "0123456789;:?"
_HYPERLINK_END = "\x1b]8;;\x1b"


class Attr(IntFlag):
    """Text attributes carried by an ANSI state."""

    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINE = 8
    BLINK = 16
    REVERSE = 32
    STRIKE_THROUGH = 64
    BOLD_FORCE = 128


@dataclass(frozen=True)
class Url:
    """Target of an OSC 8 hyperlink."""

    uri: str
    params: str


def _color_code(color: int, offset: int) -> str:
    if color == -1:
        code = str(offset + 9)
    elif color < 8:
        code = str(offset + color)
    elif color < 16:
        code = str(offset - 30 + 90 + color - 8)
    elif color < 256:
        code = f"{offset + 8};5;{color}"
    elif color >= 1 << 24:
        red = (color >> 16) & 0xFF
        green = (color >> 8) & 0xFF
        blue = color & 0xFF
        code = f"{offset + 8};2;{red};{green};{blue}"
    else:
        code = ""
    return code + ";"


_ATTR_CODES = (
    (Attr.BOLD | Attr.BOLD_FORCE, "1;"),
    (Attr.DIM, "2;"),
    (Attr.ITALIC, "3;"),
    (Attr.UNDERLINE, "4;"),
    (Attr.BLINK, "5;"),
    (Attr.REVERSE, "7;"),
    (Attr.STRIKE_THROUGH, "9;"),
)


@dataclass(frozen=True)
class AnsiState:
    """Colours, attributes and hyperlink in effect at some point of a line.

    A colour of -1 means the terminal default.  Colours of 1 << 24 and above
    are 24-bit RGB values offset by 1 << 24.
    """

    fg: int = -1
    bg: int = -1
    attr: Attr = Attr(0)
    lbg: int = -1
    url: Url | None = None

    def colored(self) -> bool:
        """True if this state differs from the plain terminal default."""
        return (
            self.fg != -1
            or self.bg != -1
            or self.attr > 0
            or self.lbg >= 0
            or self.url is not None
        )

    def to_ansi_string(self) -> str:
        """Return the escape sequence that reproduces this state."""
        if not self.colored():
            return ""
        parts = [code for flag, code in _ATTR_CODES if self.attr & flag]
        parts.append(_color_code(self.fg, 30))
        parts.append(_color_code(self.bg, 40))
        body = "".join(parts)
        if body.endswith(";"):
            body = body[:-1]
        result = f"\x1b[{body}m"
        if self.url is not None:
            result = (
                f"\x1b]8;{self.url.params};{self.url.uri}\x1b\\{result}\x1b]8;;\x1b"
            )
        return result


@dataclass
class AnsiOffset:
    """A character range [start, end) of a stripped line and its colour state."""

    start: int
    end: int
    color: AnsiState = field(default_factory=AnsiState)


def _is_print(char: str) -> bool:
    return "\x20" <= char <= "\x7e"


def _match_control_sequence(text: str, pos: int) -> int:
    for idx in range(pos, len(text)):
        char = text[idx]
        if char in _CTRL_SEQ_BODY:
            continue
        if (char.isascii() and char.isalpha()) or char == "@":
            return idx + 1
        return -1
    return -1


def _match_operating_system_command(text: str, base: int, start: int) -> int:
    size = len(text)
    i = start
    while i < size and _is_print(text[i]):
        i += 1
    if i < size:
        if text[i] == "\x07":
            return i + 1
        if text[i] == "\x1b" and i < size - 1 and text[i + 1] == "\\":
            return i + 2
    if i < size and text[base:i + 1] == _HYPERLINK_END:
        return i + 1
    return -1


def _find_sequence(text: str, pos: int) -> tuple[int, int] | None:
    size = len(text)
    for found in _TRIGGERS.finditer(text, pos):
        i = found.start()
        char = text[i]
        if char == "\x08":
            if i > pos and text[i - 1] != "\n":
                return i - 1, i + 1
        elif char == "\x1b":
            if i + 2 < size and text[i + 1] in _CTRL_SEQ_START:
                end = _match_control_sequence(text, i + 2)
                if end != -1:
                    return i, end
            if i + 5 < size and text[i + 1] == "]":
                j = i + 2
                while j < size and "0" <= text[j] <= "9":
                    j += 1
                if (
                    j > i + 2
                    and j + 1 < size
                    and text[j] in ";:"
                    and _is_print(text[j + 1])
                ):
                    end = _match_operating_system_command(text, i, j + 2)
                    if end != -1:
                        return i, end
            if i + 1 < size and text[i + 1] != "\n":
                return i, i + 2
        else:
            return i, i + 1
    return None


def next_ansi_escape_sequence(text: str) -> tuple[int, int] | None:
    """Return the (start, end) span of the first escape sequence, or None."""
    return _find_sequence(text, 0)


def parse_ansi_code(text: str) -> tuple[int, str]:
    """Split off the first numeric parameter of an SGR body.

    Returns the parameter (-1 if empty or not a plain number) and the rest.
    """
    remaining = ""
    sep = text.find(";")
    if sep < 0:
        sep = text.find(":")
    if sep >= 0:
        remaining = text[sep + 1:]
        text = text[:sep]
    if text and all("0" <= char <= "9" for char in text):
        return int(text), remaining
    return -1, remaining


def _interpret_non_sgr(code: str, prev_state: AnsiState | None, state: AnsiState) -> AnsiState:
    if prev_state is not None and code.endswith("0K"):
        return replace(state, lbg=prev_state.bg)
    if code.startswith("\x1b]8;") and (code.endswith("\x1b\\") or code.endswith("\a")):
        terminator = 1 if code.endswith("\a") else 2
        if len(code) == 5 + terminator and code[4] == ";":
            return replace(state, url=None)
        params_end = code.find(";", 4)
        if params_end >= 0:
            params = code[4:params_end]
            uri = code[params_end + 1:len(code) - terminator]
            return replace(state, url=Url(uri=uri, params=params))
    return state


def interpret_code(code: str, prev_state: AnsiState | None) -> AnsiState:
    """Return the state that results from applying *code* to *prev_state*."""
    state = prev_state if prev_state is not None else AnsiState()
    if code[:1] != "\x1b" or code[1:2] != "[" or code[-1:] != "m":
        return _interpret_non_sgr(code, prev_state, state)

    if len(code) <= 3:
        return replace(state, fg=-1, bg=-1, attr=Attr(0))

    colors = {"fg": state.fg, "bg": state.bg}
    attr = state.attr
    target = "fg"
    mode = 0
    count = 0
    body = code[2:-1]
    while body:
        num, body = parse_ansi_code(body)
        if num == -1:
            continue
        count += 1
        if mode == 0:
            if num == 38:
                target, mode = "fg", 1
            elif num == 48:
                target, mode = "bg", 1
            elif num == 39:
                colors["fg"] = -1
            elif num == 49:
                colors["bg"] = -1
            elif num == 1:
                attr |= Attr.BOLD
            elif num == 2:
                attr |= Attr.DIM
            elif num == 3:
                attr |= Attr.ITALIC
            elif num == 4:
                attr |= Attr.UNDERLINE
            elif num == 5:
                attr |= Attr.BLINK
            elif num == 7:
                attr |= Attr.REVERSE
            elif num == 9:
                attr |= Attr.STRIKE_THROUGH
            elif num == 22:
                attr &= ~(Attr.BOLD | Attr.DIM)
            elif num == 23:
                attr &= ~Attr.ITALIC
            elif num == 24:
                attr &= ~Attr.UNDERLINE
            elif num == 25:
                attr &= ~Attr.BLINK
            elif num == 27:
                attr &= ~Attr.REVERSE
            elif num == 29:
                attr &= ~Attr.STRIKE_THROUGH
            elif num == 0:
                colors["fg"] = colors["bg"] = -1
                attr = Attr(0)
            elif 30 <= num <= 37:
                colors["fg"] = num - 30
            elif 40 <= num <= 47:
                colors["bg"] = num - 40
            elif 90 <= num <= 97:
                colors["fg"] = num - 90 + 8
            elif 100 <= num <= 107:
                colors["bg"] = num - 100 + 8
        elif mode == 1:
            if num == 2:
                mode = 10
            elif num == 5:
                mode = 2
            else:
                mode = 0
        elif mode == 2:
            colors[target] = num
            mode = 0
        elif mode == 10:
            colors[target] = (1 << 24) | (num << 16)
            mode = 11
        elif mode == 11:
            colors[target] |= num << 8
            mode = 12
        elif mode == 12:
            colors[target] |= num
            mode = 0

    if count == 0:
        colors["fg"] = colors["bg"] = -1
        attr = Attr(0)
    if mode > 0:
        colors[target] = -1
    return replace(state, fg=colors["fg"], bg=colors["bg"], attr=Attr(attr))


def _same_state(new_state: AnsiState, state: AnsiState | None) -> bool:
    if state is None:
        return not new_state.colored()
    return new_state == state


def extract_color(
    text: str,
    state: AnsiState | None,
    proc: Callable[[str, AnsiState | None], bool] | None,
) -> tuple[str, list[AnsiOffset] | None, AnsiState | None]:
    """Strip escape sequences from *text* and record the coloured ranges.

    *state* is the state carried over from the previous line.  *proc*, if
    given, is called with each plain segment and the state in effect; if it
    returns False, processing stops and ("", None, None) is returned.

    Returns the stripped text, the colour offsets (None if there are none)
    and the state at the end of the line.
    """
    offsets: list[AnsiOffset] = []
    if state is not None:
        offsets.append(AnsiOffset(0, 0, state))

    parts: list[str] = []
    prev_idx = 0
    char_count = 0
    idx = 0
    while idx < len(text):
        span = _find_sequence(text, idx)
        if span is None:
            break
        start, idx = span

        prev = text[prev_idx:start]
        if proc is not None and not proc(prev, state):
            return "", None, None
        prev_idx = idx

        if prev:
            char_count += len(prev)
            parts.append(prev)

        new_state = interpret_code(text[start:idx], state)
        if not _same_state(new_state, state):
            if state is not None:
                offsets[-1].end = char_count
            if new_state.colored():
                state = new_state
                offsets.append(AnsiOffset(char_count, char_count, new_state))
            else:
                state = None

    if prev_idx == 0:
        rest = text
        trimmed = text
    else:
        rest = text[prev_idx:]
        parts.append(rest)
        trimmed = "".join(parts)
    if proc is not None:
        proc(rest, state)
    if offsets:
        if rest and state is not None:
            char_count += len(rest)
            offsets[-1].end = char_count
        return trimmed, offsets, state
    return trimmed, None, state