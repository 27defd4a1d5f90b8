import string

import pytest

from fzfcore.latin_lower import lower_base


@pytest.mark.parametrize(
    "char, base",
    [
        ("\u00e1", "a"),
        ("\u00e7", "c"),
        ("\u00df", "s"),
        ("\u0131", "i"),
        ("\u2184", "c"),
        ("ậ", "a"),
        ("ợ", "o"),
        ("ự", "u"),
        ("ế", "e"),
    ],
)
def test_known_variants(char, base):
    assert lower_base(char) == base


@pytest.mark.parametrize("char", list(string.ascii_letters + string.digits + " /-_"))
def test_ascii_unchanged(char):
    assert lower_base(char) == char


def test_uppercase_variant_not_mapped():
    assert lower_base("\u00c1") == "\u00c1"
    assert lower_base("Ậ") == "Ậ"


def test_outside_range_unchanged():
    assert lower_base("\u00bf") == "\u00bf"
    assert lower_base("\u2185") == "\u2185"
    assert lower_base("椙") == "椙"


def test_results_are_identity_or_ascii_lowercase():
    mapped = 0
    for code in range(0x00C0, 0x2185):
        char = chr(code)
        result = lower_base(char)
        if result != char:
            mapped += 1
            assert result in string.ascii_lowercase
    assert mapped > 300


def test_idempotent():
    for code in range(0x00C0, 0x2185):
        once = lower_base(chr(code))
        assert lower_base(once) == once


def test_every_base_letter_has_variants():
    bases = {lower_base(chr(code)) for code in range(0x00C0, 0x2185)}
    assert set(string.ascii_lowercase) <= bases


@pytest.mark.parametrize("bad", ["", "ab", "\u00e1\u00e1"])
def test_rejects_non_single_char(bad):
    with pytest.raises(ValueError):
        lower_base(bad)


def test_rejects_non_string():
    with pytest.raises(TypeError):
        lower_base(0x00E1)