from string import ascii_lowercase

import pytest

from hsdemangle.types import LOWER_ESCAPES, UPPER_ESCAPES, lookup_escape


def test_lower_escapes__cover_every_lowercase_letter():
    assert set(LOWER_ESCAPES) == set(ascii_lowercase)


def test_upper_escapes__cover_c_to_z():
    assert set(UPPER_ESCAPES) == set("CDEFGHIJKLMNOPQRSTUVWXYZ")


@pytest.mark.parametrize(
    "letter,expected",
    [("a", "&"), ("i", "."), ("u", "_"), ("z", "z"), ("f", None), ("o", None)],
)
def test_lookup_escape__lower(letter: str, expected: str | None):
    assert lookup_escape(LOWER_ESCAPES, letter) == expected


@pytest.mark.parametrize(
    "letter,expected",
    [("C", ":"), ("L", "("), ("Z", "Z"), ("D", None), ("A", None), ("a", None)],
)
def test_lookup_escape__upper(letter: str, expected: str | None):
    assert lookup_escape(UPPER_ESCAPES, letter) == expected


@pytest.mark.parametrize("letter", ["f", "j", "k", "o", "w", "x", "y"])
def test_lower_escapes__unmapped_letters(letter: str):
    assert LOWER_ESCAPES[letter] is None
