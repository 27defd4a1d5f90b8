"""Normalization of Latin-script letters to their plain ASCII base letters."""

from __future__ import annotations

from collections.abc import Iterable

from fzfcore.latin_lower import lower_base

# Only code points within this range can have a normalized form.
_RANGE_START = 0x00C0
_RANGE_END = 0x2184

_UPPER_VARIANTS: dict[str, tuple[int, ...]] = {
    "A": (
        0x00C1, 0x00C2, 0x00C4, 0x00C0, 0x00C5, 0x023A, 0x00C3, 0x1D00,
        0x1EAE, 0x1EA4, 0x1EB0, 0x1EA6, 0x1EB2, 0x1EA8, 0x1EB4, 0x1EAA,
        0x1EB6, 0x1EAC,
    ),
    "B": (0x0181, 0x0243, 0x0299, 0x1D03),
    "C": (0x00C7, 0x023B, 0x1D04),
    "D": (0x018A, 0x0189, 0x1D05),
    "E": (
        0x00C9, 0x00CA, 0x00CB, 0x00C8, 0x0246, 0x0190, 0x018E, 0x1D07,
        0x1EBE, 0x1EC0, 0x1EC2, 0x1EC4, 0x1EC6,
    ),
    "G": (0x0193, 0x029B, 0x0262),
    "H": (0x029C,),
    "I": (0x00CD, 0x00CE, 0x00CF, 0x0130, 0x00CC, 0x0197, 0x026A),
    "J": (0x0248, 0x1D0A),
    "K": (0x1D0B,),
    "L": (0x023D, 0x1D0C, 0x029F),
    "M": (0x019C, 0x1D0D),
    "N": (0x019D, 0x0220, 0x00D1, 0x0274, 0x1D0E),
    "O": (
        0x00D3, 0x00D4, 0x00D6, 0x00D2, 0x019F, 0x00D8, 0x00D5, 0x0186,
        0x1D0F, 0x1D10,
        0x1ED0, 0x1EDA, 0x1ED2, 0x1EDC, 0x1ED4, 0x1EDE, 0x1ED6, 0x1EE0,
        0x1ED8, 0x1EE2,
    ),
    "P": (0x1D18,),
    "Q": (0x024A,),
    "R": (0x024C, 0x0280, 0x0281, 0x1D19, 0x1D1A),
    "T": (0x023E, 0x01AE, 0x1D1B),
    "U": (
        0x0244, 0x00DA, 0x00DB, 0x00DC, 0x00D9, 0x1D1C,
        0x1EE8, 0x1EEA, 0x1EEC, 0x1EEE, 0x1EF0,
    ),
    "V": (0x01B2, 0x0245, 0x1D20),
    "W": (0x1D21,),
    "Y": (0x00DD, 0x0178, 0x024E, 0x028F),
    "Z": (0x1D22,),
}

_UPPER_TABLE: dict[str, str] = {
    chr(code): base
    for base, codes in _UPPER_VARIANTS.items()
    for code in codes
}


def normalize_rune(char: str) -> str:
    """Return the ASCII base letter of a Latin-script *char*, or *char* itself."""
    if not isinstance(char, str):
        raise TypeError(f"expected a str, got {type(char).__name__}")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if code < _RANGE_START or code > _RANGE_END:
        return char
    upper = _UPPER_TABLE.get(char)
    if upper is not None:
        return upper
    return lower_base(char)


def normalize_runes(text: Iterable[str]) -> str:
    """Return *text* with every Latin-script letter replaced by its base letter."""
    if isinstance(text, (bytes, bytearray)):
        raise TypeError("expected text, got bytes")
    return "".join(normalize_rune(char) for char in text)