"""CCITTFaxDecode filter entry point and its decode parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ...errors import FilterError
from .group4 import decode_g4


def _integer(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise FilterError(f"ccittfax_decode {what} is not a number")
    return int(value)


@dataclass
class FaxParams:
    """Decode parameters of a CCITTFaxDecode stream."""

    k: int = 0
    columns: int = 1728
    rows: int = 0
    end_of_line: bool = False
    encoded_byte_align: bool = False
    end_of_block: bool = True
    black_is_1: bool = False
    damaged_rows_before_error: int = 0

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "FaxParams":
        """Build parameters from a DecodeParms dictionary."""
        result = cls()
        if "K" in params:
            result.k = _integer(params["K"], "k param")
        if "Columns" in params:
            result.columns = _integer(params["Columns"], "Columns")
            if result.columns < 1:
                raise FilterError(
                    f"ccittfax_decode Columns must be positive got:{result.columns}"
                )
        if "Rows" in params:
            result.rows = _integer(params["Rows"], "Rows")
            if result.rows < 0:
                raise FilterError(
                    f"ccittfax_decode Rows must not be negative got:{result.rows}"
                )
        if "BlackIs1" in params:
            black = params["BlackIs1"]
            if not isinstance(black, bool):
                raise FilterError("ccittfax_decode BlackIs1 is not a boolean")
            result.black_is_1 = black
        return result


def ccittfax_decode(data: bytes, params: Mapping[str, Any] | None = None) -> bytes:
    """Decode CCITT fax data to one byte per pixel (255 white, 0 black)."""
    fax = FaxParams.from_dict(params) if params is not None else FaxParams()
    if fax.k < 0:
        return decode_g4(data, fax)
    raise FilterError(
        f"ccittfax_decode group3 and mixed group3 coding (K={fax.k}) is not supported"
    )