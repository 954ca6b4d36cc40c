"""Dispatch of stream filter names to their decoders."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from ..errors import FilterError
from .ascii85 import ascii85_decode
from .ascii_hex import ascii_hex_decode
from .ccittfax.decoder import ccittfax_decode
from .dct import dct_decode
from .flate import flate_decode
from .jbig2 import jbig2_decode
from .lzw import lzw_decode
from .run_length import run_length_decode

_Decoder = Callable[[bytes, "Mapping[str, Any] | None"], bytes]

_FILTERS: dict[str, _Decoder] = {
    "AHx": lambda data, params: ascii_hex_decode(data),
    "ASCIIHexDecode": lambda data, params: ascii_hex_decode(data),
    "A85": lambda data, params: ascii85_decode(data),
    "ASCII85Decode": lambda data, params: ascii85_decode(data),
    "LZW": lzw_decode,
    "LZWDecode": lzw_decode,
    "Fl": flate_decode,
    "FlateDecode": flate_decode,
    "RL": lambda data, params: run_length_decode(data),
    "RunLengthDecode": lambda data, params: run_length_decode(data),
    "DCT": dct_decode,
    "DCTDecode": dct_decode,
    "CCF": ccittfax_decode,
    "CCITTFaxDecode": ccittfax_decode,
    "JBIG2Decode": jbig2_decode,
}


def apply_filter(
    name: str, data: bytes, params: Mapping[str, Any] | None = None
) -> bytes:
    """Decode ``data`` with the filter called ``name`` (full or abbreviated)."""
    decoder = _FILTERS.get(name)
    if decoder is None:
        raise FilterError(f"unsupported filter:{name!r}")
    return decoder(data, params)