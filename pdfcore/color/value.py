"""Colour component values and the RGB triple they convert to."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class ColorValue:
    """Component values of a colour in some colour space."""

    values: tuple[float, ...] = field(default=(0.0,))

    def __init__(self, values: Iterable[float] = (0.0,)) -> None:
        object.__setattr__(self, "values", tuple(float(v) for v in values))

    def value_size(self) -> int:
        """Number of components held."""
        return len(self.values)


@dataclass(frozen=True)
class ColorRgb:
    """A colour as red, green and blue intensities."""

    r: float
    g: float
    b: float