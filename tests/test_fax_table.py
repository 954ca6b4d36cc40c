import pytest

from pdfcore.filters.ccittfax.bitreader import BitReader
from pdfcore.filters.ccittfax.fax_table import (
    Color,
    Mode,
    ModeKind,
    decode_mode,
    decode_run_length,
)


def test_color_invert():
    assert Color.WHITE.invert() is Color.BLACK
    assert Color.BLACK.invert() is Color.WHITE
    assert Color.WHITE.invert().invert() is Color.WHITE


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x80", Mode(ModeKind.V)),
        (b"\x60", Mode(ModeKind.VR, 1)),
        (b"\x0c", Mode(ModeKind.VR, 2)),
        (b"\x06", Mode(ModeKind.VR, 3)),
        (b"\x40", Mode(ModeKind.VL, 1)),
        (b"\x10", Mode(ModeKind.PASS)),
        (b"\x20", Mode(ModeKind.HORIZONTAL)),
        (b"\x00\x10", Mode(ModeKind.END)),
    ],
)
def test_decode_mode(data, expected):
    assert decode_mode(BitReader(data)) == expected


def test_decode_mode_consumes_only_code_bits():
    reader = BitReader(b"\x60")
    decode_mode(reader)
    assert reader.position == 3


def test_decode_mode_end_of_data():
    assert decode_mode(BitReader(b"")) is None


def test_decode_mode_no_match():
    assert decode_mode(BitReader(b"\x00\x00")) is None


def test_white_terminating_code():
    assert decode_run_length(BitReader(b"\x70"), Color.WHITE) == 2


def test_black_terminating_code():
    assert decode_run_length(BitReader(b"\x80"), Color.BLACK) == 3


def test_white_makeup_followed_by_terminating_zero():
    assert decode_run_length(BitReader(b"\xd9\xa8"), Color.WHITE) == 64


def test_run_length_end_of_data():
    assert decode_run_length(BitReader(b""), Color.WHITE) is None
    assert decode_run_length(BitReader(b""), Color.BLACK) is None