import pytest

from pdfcore.errors import FilterError
from pdfcore.filters.ascii85 import ascii85_decode

LEVIATHAN = r"""9jqo^BlbD-BleB1DJ+*+F(f,q/0JhKF<GL>Cj@.4Gp$d7F!,L7@<6@)/0JDEF<G%<+EV:2F!,O<DJ+*.@<*K0@<6L(Df-\0Ec5e;DffZ(EZee.Bl.9pF"AGXBPCsi+DGm>@3BB/F*&OCAfu2/AKYi(DIb:@FD,*)+C]U=@3BN#EcYf8ATD3s@q?d$AftVqCh[NqF<G:8+EV:.+Cf>-FD5W8ARlolDIal(DId<j@<?3r@:F%a+D58'ATD4$Bl@l3De:,-DJs`8ARoFb/0JMK@qB4^F!,R<AKZ&-DfTqBG%G>uD.RTpAKYo'+CT/5+Cei#DII?(E,9)oF*2M7/c~>"""

LEVIATHAN_PLAIN = (
    "Man is distinguished, not only by his reason, but by this singular passion "
    "from other animals, which is a lust of the mind, that by a perseverance of "
    "delight in the continued and indefatigable generation of knowledge, exceeds "
    "the short vehemence of any carnal pleasure."
)


def test_hello_world():
    assert ascii85_decode(b"87cURD]j7BEbo80~>") == b"Hello world!"


def test_long_text():
    assert ascii85_decode(LEVIATHAN.encode("ascii")) == LEVIATHAN_PLAIN.encode("ascii")


def test_whitespace_is_ignored():
    assert ascii85_decode(b"87cUR D]j7\nBEbo\r\t80~>") == b"Hello world!"


def test_z_expands_to_zero_bytes():
    assert ascii85_decode(b"z~>") == b"\x00\x00\x00\x00"


def test_z_inside_group_is_rejected():
    with pytest.raises(FilterError):
        ascii85_decode(b"87z~>")


def test_bad_end_sequence():
    with pytest.raises(FilterError):
        ascii85_decode(b"87cUR~x")


def test_tilde_at_end_of_input():
    with pytest.raises(FilterError):
        ascii85_decode(b"87cUR~")


def test_invalid_character():
    with pytest.raises(FilterError):
        ascii85_decode(b"87cvR~>")


def test_data_after_end_marker_is_ignored():
    assert ascii85_decode(b"87cURD]j7BEbo80~>garbage{{") == b"Hello world!"


def test_empty_input():
    assert ascii85_decode(b"") == b""