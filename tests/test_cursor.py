import pytest

from hsdemangle.cursor import Cursor


def test_cursor__initial_peek():
    cursor = Cursor(b"abc")
    assert cursor.position == 0
    assert cursor.peek == ord("a")
    assert cursor.at_end is False


def test_cursor__empty_input_is_at_end():
    cursor = Cursor(b"")
    assert cursor.peek is None
    assert cursor.at_end is True


def test_cursor__advance_walks_to_end():
    cursor = Cursor(b"ab")
    assert cursor.advance() == ord("b")
    assert cursor.position == 1
    assert cursor.advance() is None
    assert cursor.position == 2
    assert cursor.at_end is True


def test_cursor__nul_terminates_input():
    cursor = Cursor(b"a\x00b")
    cursor.advance()
    assert cursor.at_end is True


def test_cursor__advance_past_end_raises():
    cursor = Cursor(b"")
    with pytest.raises(IndexError):
        cursor.advance()
