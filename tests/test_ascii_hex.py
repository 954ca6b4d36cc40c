import pytest

from pdfcore.errors import FilterError
from pdfcore.filters.ascii_hex import ascii_hex_decode


def test_hello_world():
    assert ascii_hex_decode(b"48656c6c6f20776f726c64>") == b"Hello world"


def test_uppercase_and_whitespace():
    assert ascii_hex_decode(b"48 65\n6C\t6C 6F>") == b"Hello"


def test_odd_digit_is_padded():
    assert ascii_hex_decode(b"4865f>") == b"He\xf0"


def test_without_end_marker():
    assert ascii_hex_decode(b"4142") == b"AB"


def test_stops_at_end_marker():
    assert ascii_hex_decode(b"41>zz") == b"A"


def test_invalid_character():
    with pytest.raises(FilterError) as info:
        ascii_hex_decode(b"4g>")
    assert "103" in str(info.value)


def test_empty():
    assert ascii_hex_decode(b">") == b""