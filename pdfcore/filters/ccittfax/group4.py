"""CCITT Group 4 (T.6) two-dimensional fax decoding."""

from __future__ import annotations

from typing import Protocol, Sequence

from ...errors import FilterError
from .bitreader import BitReader
from .fax_table import Color, ModeKind, decode_mode, decode_run_length

_WHITE_PIXEL = 255
_BLACK_PIXEL = 0


class _Geometry(Protocol):
    columns: int
    rows: int


class RefState:
    """Cursor over the changing elements of the reference line.

    Even indices are changes to black, odd indices changes to white.
    """

    def __init__(self, changes: Sequence[int]) -> None:
        self.changes = list(changes)
        self.pos = 0

    def step_back(self, end: int) -> None:
        """Move the cursor back past changes at or beyond ``end``."""
        if not self.changes:
            return
        self.pos = min(self.pos, len(self.changes) - 1)
        while self.pos > 0 and self.changes[self.pos] >= end:
            self.pos -= 1

    def next_change(self, color: Color, start: int) -> int | None:
        """Return the first change to ``color`` strictly right of ``start``."""
        changes = self.changes
        if not changes:
            return None
        self.pos = min(self.pos, len(changes) - 1)
        while self.pos > 0 and changes[self.pos - 1] > start:
            self.pos -= 1
        while self.pos < len(changes) and changes[self.pos] <= start:
            self.pos += 1
        wanted_parity = 0 if color is Color.BLACK else 1
        if self.pos < len(changes) and self.pos % 2 != wanted_parity:
            self.pos += 1
        if self.pos >= len(changes):
            self.pos = len(changes)
            return None
        return changes[self.pos]

    def move_next(self) -> int | None:
        """Advance to the following change and return it, if there is one."""
        if self.pos + 1 < len(self.changes):
            self.pos += 1
            return self.changes[self.pos]
        return None


def _render(changes: list[int], width: int) -> bytes:
    line = bytearray()
    start = 0
    color = Color.WHITE
    for change in changes:
        end = min(change, width)
        if end > start:
            pixel = _WHITE_PIXEL if color is Color.WHITE else _BLACK_PIXEL
            line.extend(bytes([pixel]) * (end - start))
            start = end
        color = color.invert()
    if start < width:
        pixel = _WHITE_PIXEL if color is Color.WHITE else _BLACK_PIXEL
        line.extend(bytes([pixel]) * (width - start))
    return bytes(line)


class Group4Decoder:
    """Decodes successive lines, each coded against the previous one."""

    def __init__(self, reader: BitReader, width: int) -> None:
        if width < 1:
            raise FilterError(f"Ccittfax line width must be positive got:{width}")
        self.reader = reader
        self.width = width
        self.reference: list[int] = []

    def decode_line(self) -> bytes:
        """Decode one line into bytes (255 white, 0 black); b"" at end of data."""
        width = self.width
        ref = RefState(self.reference)
        current: list[int] = []
        a0 = -1
        color = Color.WHITE
        started = False
        while a0 < width:
            mode = decode_mode(self.reader)
            if mode is None:
                if not started and self.reader.eof():
                    return b""
                raise FilterError("Ccittfax Mode is not detected")
            started = True
            if mode.kind is ModeKind.END:
                return b""
            if mode.kind is ModeKind.PASS:
                b1 = ref.next_change(color.invert(), a0)
                b2 = ref.move_next() if b1 is not None else None
                a0 = width if b2 is None else b2
            elif mode.kind is ModeKind.HORIZONTAL:
                first = decode_run_length(self.reader, color)
                second = decode_run_length(self.reader, color.invert())
                if first is None or second is None:
                    raise FilterError("Ccittfax runlength decode error")
                a1 = max(a0, 0) + first
                a2 = a1 + second
                if a2 > width:
                    raise FilterError(
                        f"Ccittfax horizontal run ends at {a2} beyond width {width}"
                    )
                current.extend((a1, a2))
                a0 = a2
            else:
                b1 = ref.next_change(color.invert(), a0)
                if b1 is None:
                    b1 = width
                if mode.kind is ModeKind.VR:
                    a1 = b1 + mode.offset
                elif mode.kind is ModeKind.VL:
                    a1 = b1 - mode.offset
                else:
                    a1 = b1
                if a1 < max(a0, 0) or a1 > width:
                    raise FilterError(f"Ccittfax vertical mode position {a1} is invalid")
                current.append(a1)
                a0 = a1
                color = color.invert()
                if mode.kind is ModeKind.VL:
                    ref.step_back(a0)
        self.reference = current
        return _render(current, width)


def decode_g4(buffer: bytes, params: _Geometry) -> bytes:
    """Decode Group 4 data using ``params.columns`` and ``params.rows``."""
    decoder = Group4Decoder(BitReader(buffer), params.columns)
    limit = params.rows if params.rows > 0 else None
    out = bytearray()
    decoded = 0
    while limit is None or decoded < limit:
        line = decoder.decode_line()
        if not line:
            break
        out.extend(line)
        decoded += 1
    return bytes(out)