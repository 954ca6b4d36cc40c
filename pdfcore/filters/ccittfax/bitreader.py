"""Most-significant-bit-first reader over a byte string."""

from __future__ import annotations


class BitReader:
    """Reads a byte string one bit at a time, high bit of each byte first."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of bits consumed so far."""
        return self._pos

    def read_bit(self) -> int | None:
        """Return the next bit, or None once the data is exhausted."""
        index = self._pos >> 3
        if index >= len(self._data):
            return None
        bit = (self._data[index] >> (7 - (self._pos & 7))) & 1
        self._pos += 1
        return bit

    def read_bits(self, count: int) -> int | None:
        """Read ``count`` bits as an unsigned integer, or None if data runs out."""
        value = 0
        for _ in range(count):
            bit = self.read_bit()
            if bit is None:
                return None
            value = (value << 1) | bit
        return value

    def remaining_bits(self) -> int:
        """Number of bits not yet read."""
        return max(len(self._data) * 8 - self._pos, 0)

    def eof(self) -> bool:
        """True when every bit has been read."""
        return self._pos >= len(self._data) * 8