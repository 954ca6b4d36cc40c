"""JBIG2 stream decoding (JBIG2Decode)."""

from __future__ import annotations

from typing import Any, Mapping

from ..errors import FilterError


def jbig2_decode(data: bytes, params: Mapping[str, Any] | None = None) -> bytes:
    """JBIG2 data cannot be decoded; always raises FilterError."""
    raise FilterError("JBIG2Decode is not supported")