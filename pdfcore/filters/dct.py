"""JPEG stream decoding (DCTDecode)."""

from __future__ import annotations

import io
from typing import Any, Mapping

from PIL import Image

from ..errors import FilterError

_PASS_THROUGH_MODES = frozenset({"L", "RGB", "CMYK"})


def dct_decode(data: bytes, params: Mapping[str, Any] | None = None) -> bytes:
    """Decode JPEG data to interleaved samples: gray, RGB or CMYK bytes."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except (OSError, SyntaxError, ValueError) as exc:
        raise FilterError(f"DCT create decoder error:{exc}") from exc
    with image:
        if image.mode not in _PASS_THROUGH_MODES:
            image = image.convert("RGB")
        return image.tobytes()