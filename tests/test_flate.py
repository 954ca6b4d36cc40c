import zlib

import pytest

from pdfcore.errors import FilterError
from pdfcore.filters.flate import flate_decode


def test_flated_decode():
    encoded = bytes([0x78, 0x9C, 0x4B, 0xCB, 0xCF, 0x07, 0x00, 0x02, 0x82, 0x01, 0x45])
    assert flate_decode(encoded, None) == b"foo"


def test_round_trip_large_input():
    data = bytes(range(256)) * 500
    assert flate_decode(zlib.compress(data)) == data


def test_truncated_stream_gives_prefix():
    data = b"hello world, " * 1000
    encoded = zlib.compress(data)
    res = flate_decode(encoded[: len(encoded) // 2])
    assert len(res) > 0
    assert data.startswith(res)


def test_bad_checksum_keeps_decoded_data():
    data = b"some stream content"
    encoded = bytearray(zlib.compress(data))
    encoded[-1] ^= 0xFF
    assert flate_decode(bytes(encoded)) == data


def test_garbage_gives_empty():
    assert flate_decode(b"\x00\x01\x02\x03") == b""


def test_predictor_below_ten_returns_raw():
    raw = b"\x02\x01\x01\x01"
    assert flate_decode(zlib.compress(raw), {"Predictor": 2, "Columns": 3}) == raw


def test_png_none_and_up_rows():
    raw = b"\x00abc" + b"\x02\x01\x01\x01"
    res = flate_decode(zlib.compress(raw), {"Predictor": 12, "Columns": 3})
    assert res == b"abcbcd"


def test_png_sub_row():
    raw = b"\x01\x01\x01\x01"
    res = flate_decode(zlib.compress(raw), {"Predictor": 15, "Columns": 3})
    assert res == b"\x01\x02\x03"


def test_paeth_on_first_row_matches_sub():
    row = b"\x05\x07\x09\x0b\x0d\x0f"
    params = {"Predictor": 12, "Columns": 2, "Colors": 3}
    paeth = flate_decode(zlib.compress(b"\x04" + row), params)
    sub = flate_decode(zlib.compress(b"\x01" + row), params)
    assert paeth == sub
    assert len(paeth) == 6


def test_average_with_zero_previous_row():
    raw = b"\x03\x04\x04"
    res = flate_decode(zlib.compress(raw), {"Predictor": 12, "Columns": 2})
    assert res == b"\x04\x06"


def test_unknown_png_filter_type_raises():
    raw = b"\x05abc"
    with pytest.raises(FilterError):
        flate_decode(zlib.compress(raw), {"Predictor": 12, "Columns": 3})


def test_non_numeric_predictor_raises():
    with pytest.raises(FilterError):
        flate_decode(zlib.compress(b"abc"), {"Predictor": "Up"})