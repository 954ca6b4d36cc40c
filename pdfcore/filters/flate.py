"""Zlib/deflate stream decoding (FlateDecode) with PNG predictors."""

from __future__ import annotations

import logging
import zlib
from typing import Any, Callable, Mapping

from ..errors import FilterError

_log = logging.getLogger(__name__)
_CHUNK = 16384


def _inflate(data: bytes) -> bytes:
    """Inflate as much as possible, keeping the output produced before any error."""
    decomp = zlib.decompressobj()
    out = bytearray()
    for start in range(0, len(data), _CHUNK):
        chunk = data[start : start + _CHUNK]
        backup = decomp.copy()
        try:
            out.extend(decomp.decompress(chunk))
        except zlib.error:
            decomp = backup
            for pos in range(len(chunk)):
                try:
                    out.extend(decomp.decompress(chunk[pos : pos + 1]))
                except zlib.error as exc:
                    _log.warning("Flate decode error: %s", exc)
                    return bytes(out)
        if decomp.eof:
            break
    try:
        out.extend(decomp.flush())
    except zlib.error as exc:
        _log.warning("Flate decode error: %s", exc)
    return bytes(out)


def _integer(params: Mapping[str, Any], key: str, default: int) -> int:
    if key not in params:
        return default
    value = params[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FilterError(f"FlateDecode {key} is not a number")
    return int(value)


def _png_none(row: bytes, prev: bytes, bpp: int) -> bytes:
    return bytes(row)


def _png_sub(row: bytes, prev: bytes, bpp: int) -> bytes:
    result = bytearray(row)
    for i in range(bpp, len(result)):
        result[i] = (result[i] + result[i - bpp]) & 0xFF
    return bytes(result)


def _png_up(row: bytes, prev: bytes, bpp: int) -> bytes:
    return bytes((r + p) & 0xFF for r, p in zip(row, prev))


def _png_average(row: bytes, prev: bytes, bpp: int) -> bytes:
    result = bytearray(row)
    for i in range(len(result)):
        left = result[i - bpp] if i >= bpp else 0
        result[i] = (row[i] + (left + prev[i]) // 2) & 0xFF
    return bytes(result)


def _paeth_predictor(a: int, b: int, c: int) -> int:
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def _png_paeth(row: bytes, prev: bytes, bpp: int) -> bytes:
    result = bytearray(row)
    for i in range(len(result)):
        left = result[i - bpp] if i >= bpp else 0
        up_left = prev[i - bpp] if i >= bpp else 0
        result[i] = (row[i] + _paeth_predictor(left, prev[i], up_left)) & 0xFF
    return bytes(result)


_PNG_FILTERS: dict[int, Callable[[bytes, bytes, int], bytes]] = {
    0: _png_none,
    1: _png_sub,
    2: _png_up,
    3: _png_average,
    4: _png_paeth,
}


def _png_unpredict(data: bytes, row_size: int, bpp: int) -> bytes:
    out = bytearray()
    prev = bytes(row_size)
    pos = 0
    while pos < len(data):
        kind = data[pos]
        row = data[pos + 1 : pos + 1 + row_size]
        pos += 1 + row_size
        undo = _PNG_FILTERS.get(kind)
        if undo is None:
            raise FilterError(f"Unknown PNG predictor {kind}")
        decoded = undo(row, prev, bpp)
        out.extend(decoded)
        prev = decoded
    return bytes(out)


def flate_decode(data: bytes, params: Mapping[str, Any] | None = None) -> bytes:
    """Inflate zlib data and undo a PNG predictor (Predictor >= 10) if given."""
    decompressed = _inflate(data)
    if params is None or "Predictor" not in params:
        return decompressed

    predictor = _integer(params, "Predictor", 1)
    if predictor < 10:
        return decompressed

    columns = _integer(params, "Columns", 1)
    colors = _integer(params, "Colors", 1)
    bits_per_component = _integer(params, "BitsPerComponent", 8)
    if columns < 1 or colors < 1 or bits_per_component < 1:
        raise FilterError(
            "FlateDecode Columns, Colors and BitsPerComponent must be positive"
        )
    bits_per_pixel = colors * bits_per_component
    bytes_per_pixel = (bits_per_pixel + 7) // 8
    row_size = (columns * bits_per_pixel + 7) // 8
    return _png_unpredict(decompressed, row_size, bytes_per_pixel)