"""ASCII hexadecimal stream decoding."""

from ..character import WHITE_SPACE
from ..errors import FilterError

_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def ascii_hex_decode(data: bytes) -> bytes:
    """Decode hex pairs up to '>', padding a trailing odd digit with 0."""
    out = bytearray()
    pending = ""
    for c in data:
        if c == 0x3E:  # '>'
            break
        if c in WHITE_SPACE:
            continue
        if c not in _HEX_DIGITS:
            raise FilterError(f"Invalid character in ASCIIHexDecode stream: '{c}'")
        pending += chr(c)
        if len(pending) == 2:
            out.append(int(pending, 16))
            pending = ""
    if pending:
        out.append(int(pending + "0", 16))
    return bytes(out)