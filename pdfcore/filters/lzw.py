"""LZW stream decoding (LZWDecode)."""

from __future__ import annotations

from typing import Any, Mapping

from ..errors import FilterError

_CLEAR = 256
_EOD = 257
_FIRST_FREE = 258
_MIN_BITS = 9
_MAX_BITS = 12
_TABLE_LIMIT = 1 << _MAX_BITS


def _initial_table() -> list[bytes]:
    # Codes 256 and 257 are control codes and never looked up as strings.
    return [bytes([i]) for i in range(256)] + [b"", b""]


def _early_change(params: Mapping[str, Any] | None) -> int:
    if params is None or "EarlyChange" not in params:
        return 1
    value = params["EarlyChange"]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FilterError("LZWDecode EarlyChange is not a number")
    if int(value) not in (0, 1):
        raise FilterError(f"LZWDecode EarlyChange must be 0 or 1 got:{value}")
    return int(value)


def lzw_decode(data: bytes, params: Mapping[str, Any] | None = None) -> bytes:
    """Decode LZW data with 9 to 12 bit codes, stopping at the EOD code."""
    early = _early_change(params)
    table = _initial_table()
    code_size = _MIN_BITS
    previous: bytes | None = None
    out = bytearray()
    acc = 0
    nbits = 0

    for byte in data:
        acc = (acc << 8) | byte
        nbits += 8
        while nbits >= code_size:
            nbits -= code_size
            code = acc >> nbits
            acc &= (1 << nbits) - 1

            if code == _CLEAR:
                table = _initial_table()
                code_size = _MIN_BITS
                previous = None
                continue
            if code == _EOD:
                return bytes(out)

            if code < len(table):
                entry = table[code]
            elif code == len(table) and previous is not None:
                entry = previous + previous[:1]
            else:
                raise FilterError("Invalid LZW stream: unknown code")

            out.extend(entry)

            if previous is not None and len(table) < _TABLE_LIMIT:
                table.append(previous + entry[:1])
                if len(table) + early >= (1 << code_size) and code_size < _MAX_BITS:
                    code_size += 1

            previous = entry

    return bytes(out)