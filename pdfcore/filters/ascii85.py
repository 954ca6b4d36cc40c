"""ASCII base-85 stream decoding."""

from ..character import WHITE_SPACE
from ..errors import FilterError

_MAX_U32 = 0xFFFF_FFFF


def _pack(group: list[int]) -> bytes:
    value = 0
    for digit in group:
        value = value * 85 + digit
    if value > _MAX_U32:
        raise FilterError("ASCII85 group value is out of range")
    return value.to_bytes(4, "big")


def ascii85_decode(data: bytes) -> bytes:
    """Decode ASCII85 data, stopping at the '~>' end marker."""
    result = bytearray()
    group: list[int] = []
    chars = iter(data)
    for c in chars:
        if c == 0x7E:  # '~'
            if next(chars, None) == 0x3E:  # '>'
                break
            raise FilterError("Invalid end sequence in ASCII85 stream")
        if c == 0x7A:  # 'z'
            if group:
                raise FilterError("`z` cannot appear inside a group")
            result.extend(b"\x00\x00\x00\x00")
            continue
        if c in WHITE_SPACE:
            continue
        if not 0x21 <= c <= 0x75:
            raise FilterError(f"Invalid character in ASCII85 stream: '{c}'")
        group.append(c - 33)
        if len(group) == 5:
            result.extend(_pack(group))
            group.clear()

    if group:
        padded = group + [84] * (5 - len(group))
        result.extend(_pack(padded)[: len(group) - 1])

    return bytes(result)