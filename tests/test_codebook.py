import pytest

from cwave.codebook import ITU, MARKS, MORSE_CODE, Codebook, MorseTalkCodebook, get_codebook
from cwave.errors import ConfigurationError


def test_itu_patterns_use_known_marks():
    for char, pattern in MORSE_CODE.items():
        assert pattern, char
        assert set(pattern) <= set(MARKS), char


def test_itu_lookup():
    assert ITU.lookup('a') == '.-'
    assert ITU.lookup('A') == '.-'
    assert ITU.lookup('0') == '-----'
    assert ITU.lookup('+') == '.-.-.'
    assert ITU.lookup(' ') == ' '
    assert ITU.lookup('\n') == ' '
    assert ITU.lookup('#') is None
    assert 'q' in ITU
    assert '%' not in ITU


def test_itu_covers_letters_and_digits():
    for char in "abcdefghijklmnopqrstuvwxyz0123456789":
        assert char in ITU


def test_custom_table_is_folded_to_lower_case():
    book = Codebook({'X': '-..-'})
    assert book.lookup('x') == '-..-'
    assert len(book) == 1


def test_morse_talk_codebook():
    book = MorseTalkCodebook()
    assert book.lookup('a') == ITU.lookup('a')
    assert book.lookup('S') == '...'
    assert book.lookup(' ') == ' '
    assert book.lookup('\t') is None


def test_get_codebook():
    assert get_codebook("itu") is ITU
    assert get_codebook("ITU") is ITU
    assert isinstance(get_codebook("morse_talk"), MorseTalkCodebook)
    with pytest.raises(ConfigurationError):
        get_codebook("klingon")


def test_morse_talk_unknown_characters_have_no_pattern():
    book = MorseTalkCodebook()
    assert book.lookup('#') is None
    assert book.lookup('~') is None
    assert book.lookup('\xe9') is None

    for code in range(256):
        pattern = book.lookup(chr(code))
        assert pattern is None or set(pattern) <= set(MARKS), repr(chr(code))
