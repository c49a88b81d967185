import pytest

from lexscan.charclass import is_space, is_digit, is_alpha, is_alnum, is_word_start, is_word_part


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_space(ch):
    assert is_space(ch)


@pytest.mark.parametrize("ch", ["\x1c", "\x1f", "\x85", "\xa0", "\u2003", "a", "_", "\x00"])
def test_not_space(ch):
    assert not is_space(ch)


def test_digits_are_ascii_only():
    assert all(is_digit(c) for c in "0123456789")
    assert not is_digit("١")
    assert not is_digit("\xb2")
    assert not is_digit("a")


def test_letters_are_ascii_only():
    assert all(is_alpha(c) for c in "azAZmQ")
    for c in "@[`{\xe9\xc0_1":
        assert not is_alpha(c)


def test_word_classes():
    assert is_word_start("_") and is_word_start("q")
    assert not is_word_start("7")
    assert is_word_part("7") and is_word_part("_") and is_word_part("Z")
    assert not is_word_part("-")
    assert is_alnum("7") and is_alnum("k") and not is_alnum("_")
