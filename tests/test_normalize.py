import pytest

from fzfcore.latin_lower import lower_base
from fzfcore.normalize import normalize_rune, normalize_runes


def test_ascii_is_unchanged():
    text = "fooBarbaz1 /AutomatorDocument.icns"
    assert normalize_runes(text) == text


def test_source_example_sentence():
    assert normalize_runes("Só Danço Samba") == "So Danco Samba"


def test_danco_lowercased_matches_pattern():
    assert normalize_runes("Danço").lower() == "danco"


@pytest.mark.parametrize(
    "char, expected",
    [
        ("\u00c1", "A"),
        ("\u1eae", "A"),
        ("\u1ebe", "E"),
        ("\u1ee2", "O"),
        ("\u1ef0", "U"),
        ("\u1d22", "Z"),
        ("\u0130", "I"),
        ("\u0178", "Y"),
    ],
)
def test_uppercase_variants(char, expected):
    assert normalize_rune(char) == expected


@pytest.mark.parametrize("char", ["\u00e1", "\u00e7", "\u00df", "\u2184", "\u1ebf", "\u0251"])
def test_lowercase_variants_agree_with_lower_base(char):
    assert normalize_rune(char) == lower_base(char)
    assert normalize_rune(char).isascii()


def test_upper_bound_of_range_is_included():
    assert normalize_rune("\u2184") == "c"


@pytest.mark.parametrize("char", ["\u65e5", "\u00bf", "\u2185", "\U0001f600"])
def test_out_of_range_or_unknown_unchanged(char):
    assert normalize_rune(char) == char


def test_unlisted_in_range_character_unchanged():
    # U+1EA0 is not in the table even though its lowercase form is.
    assert normalize_rune("\u1ea0") == "\u1ea0"


def test_length_preserved_and_idempotent():
    text = "Ắấ Ếề Ốờ Ứự 日本 Minímal"
    once = normalize_runes(text)
    assert len(once) == len(text)
    assert normalize_runes(once) == once


def test_accepts_sequence_of_characters():
    assert normalize_runes(["\u00c9", "t", "\u00e9"]) == normalize_runes("\u00c9t\u00e9")


def test_empty_text():
    assert normalize_runes("") == ""


def test_rejects_multiple_characters():
    with pytest.raises(ValueError):
        normalize_rune("ab")


def test_rejects_empty_character():
    with pytest.raises(ValueError):
        normalize_rune("")


def test_rejects_non_string():
    with pytest.raises(TypeError):
        normalize_rune(65)


def test_rejects_bytes():
    with pytest.raises(TypeError):
        normalize_runes(b"abc")