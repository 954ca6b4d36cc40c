"""CIE-based calibrated colour spaces: CalGray and CalRGB."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..errors import ColorError
from .value import ColorRgb, ColorValue


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def _number(value: Any, message: str) -> float:
    if not _is_number(value):
        raise ColorError(message)
    return float(value)


def _number_array(value: Any, size: int, space: str, key: str) -> tuple[float, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ColorError(f"{space} {key} is not an array got:{value!r}")
    if len(value) != size:
        raise ColorError(f"{space} {key} need {size} elements :{list(value)!r}")
    return tuple(
        _number(v, f"{space} {key} {i} value is not an number:{v!r}")
        for i, v in enumerate(value)
    )


def _pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except (ValueError, OverflowError):
        return math.nan


def _xyz_to_rgb(x: float, y: float, z: float) -> ColorRgb:
    return ColorRgb(
        3.2406 * x - 1.5372 * y - 0.4986 * z,
        -0.9689 * x + 1.8758 * y + 0.0415 * z,
        0.0557 * x - 0.2040 * y + 1.0570 * z,
    )


def _require(value: ColorValue, count: int, space: str) -> tuple[float, ...]:
    if value.value_size() < count:
        raise ColorError(f"{space} need {count} element value got:{value.value_size()}")
    return value.values[:count]


@dataclass(frozen=True)
class CalGray:
    """Single-component CIE-based gray space."""

    gamma: float = 1.0
    white_point: tuple[float, float, float] = (1.0, 1.0, 1.0)
    black_point: tuple[float, float, float] = (0.0, 0.0, 0.0)

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "CalGray":
        """Build from a CalGray parameter dictionary; WhitePoint is required."""
        gamma = 1.0
        if "Gamma" in params:
            gamma = _number(params["Gamma"], f"CalGray Gamma is not a number:{params['Gamma']!r}")
        if "WhitePoint" not in params:
            raise ColorError("CalGray WhitePoint is required")
        white = _number_array(params["WhitePoint"], 3, "CalGray", "WhitePoint")
        black = (0.0, 0.0, 0.0)
        if "BlackPoint" in params:
            black = _number_array(params["BlackPoint"], 3, "CalGray", "BlackPoint")
        return cls(gamma, white, black)  # type: ignore[arg-type]

    def default_value(self) -> ColorValue:
        return ColorValue([0.0])

    def number_of_components(self) -> int:
        return 1

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Convert through CIE XYZ to linear sRGB."""
        (a,) = _require(value, 1, "CalGray")
        level = _pow(a, self.gamma)
        wx, wy, wz = self.white_point
        return _xyz_to_rgb(wx * level, wy * level, wz * level)


@dataclass(frozen=True)
class CalRgb:
    """Three-component CIE-based RGB space."""

    gamma: tuple[float, float, float] = (1.0, 1.0, 1.0)
    white_point: tuple[float, float, float] = (1.0, 1.0, 1.0)
    black_point: tuple[float, float, float] = (0.0, 0.0, 0.0)
    matrix: tuple[float, ...] = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "CalRgb":
        """Build from a CalRGB parameter dictionary; WhitePoint is required."""
        matrix = cls.matrix
        if "Matrix" in params:
            matrix = _number_array(params["Matrix"], 9, "CalRgb", "Matrix")
        gamma = (1.0, 1.0, 1.0)
        if "Gamma" in params:
            raw = params["Gamma"]
            if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
                raise ColorError(f"CalRgb color Gamma is not a array:{raw!r}")
            names = ("first", "second", "third")
            values = []
            for i, name in enumerate(names):
                if i >= len(raw):
                    raise ColorError(f"CalRgb Gamma {name} value is not exist")
                values.append(
                    _number(raw[i], f"CalRgb Gamma {name} value is not a number:{raw[i]!r}")
                )
            gamma = tuple(values)  # type: ignore[assignment]
        if "WhitePoint" not in params:
            raise ColorError("CalRgb WhitePoint is required")
        white = _number_array(params["WhitePoint"], 3, "CalRgb", "WhitePoint")
        black = (0.0, 0.0, 0.0)
        if "BlackPoint" in params:
            black = _number_array(params["BlackPoint"], 3, "CalRgb", "BlackPoint")
        return cls(gamma, white, black, matrix)  # type: ignore[arg-type]

    def default_value(self) -> ColorValue:
        return ColorValue([0.0, 0.0, 0.0])

    def number_of_components(self) -> int:
        return 3

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Apply gamma and the matrix to reach XYZ, then convert to linear sRGB."""
        a, b, c = _require(value, 3, "CalRgb")
        gr = _pow(a, self.gamma[0])
        gg = _pow(b, self.gamma[1])
        gb = _pow(c, self.gamma[2])
        m = self.matrix
        x = m[0] * gr + m[3] * gg + m[6] * gb
        y = m[1] * gr + m[4] * gg + m[7] * gb
        z = m[2] * gr + m[5] * gg + m[8] * gb
        return _xyz_to_rgb(x, y, z)