from pdfcore.filters.ccittfax.bitreader import BitReader


def test_read_bits_from_source_case():
    reader = BitReader(bytes([72, 137]))
    assert reader.read_bits(4) == 4


def test_read_bit_sequence_matches_first_byte():
    reader = BitReader(bytes([72, 137]))
    bits = [reader.read_bit() for _ in range(8)]
    assert bits == [int(b) for b in format(72, "08b")]


def test_read_bits_whole_bytes_round_trip():
    reader = BitReader(bytes([72, 137]))
    assert reader.read_bits(8) == 72
    assert reader.read_bits(8) == 137


def test_remaining_bits_decreases():
    reader = BitReader(bytes([72, 137]))
    assert reader.remaining_bits() == 16
    reader.read_bits(4)
    assert reader.remaining_bits() == 12
    assert reader.position == 4


def test_eof_and_reads_past_end():
    reader = BitReader(b"\xff")
    assert not reader.eof()
    assert reader.read_bits(8) == 255
    assert reader.eof()
    assert reader.read_bit() is None
    assert reader.read_bits(3) is None
    assert reader.remaining_bits() == 0


def test_read_zero_bits():
    reader = BitReader(b"\x01")
    assert reader.read_bits(0) == 0
    assert reader.position == 0


def test_empty_data():
    reader = BitReader(b"")
    assert reader.eof()
    assert reader.read_bit() is None