"""CIE L*a*b* colour space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from ..errors import ColorError
from .value import ColorRgb, ColorValue

_DELTA = 6.0 / 29.0


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def _as_array(value: Any, message: str) -> Sequence[Any]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ColorError(message)
    return value


def _point(value: Any, key: str) -> tuple[float, float, float]:
    items = _as_array(value, f"Lab {key} is not an array got:{value!r}")
    if len(items) != 3:
        raise ColorError(f"Lab {key} need 3 elements :{list(items)!r}")
    result = []
    for i, item in enumerate(items):
        if not _is_number(item):
            raise ColorError(f"Lab {key} {i} value is not an number:{item!r}")
        result.append(float(item))
    return (result[0], result[1], result[2])


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _finv(t: float) -> float:
    if t >= _DELTA:
        return t * t * t
    return 3.0 * _DELTA * _DELTA * (t - 4.0 / 29.0)


@dataclass(frozen=True)
class Lab:
    """Three-component CIE-based L*a*b* space."""

    white_point: tuple[float, float, float] = (1.0, 1.0, 1.0)
    black_point: tuple[float, float, float] = (0.0, 0.0, 0.0)
    range: tuple[float, float, float, float] = (-100.0, 100.0, -100.0, 100.0)

    @classmethod
    def from_dict(cls, params: Mapping[str, Any]) -> "Lab":
        """Build from a Lab parameter dictionary; WhitePoint is required."""
        value_range = cls.range
        if "Range" in params:
            raw = _as_array(params["Range"], f"Lab Range need an array got:{params['Range']!r}")
            if len(raw) != 4:
                raise ColorError(f"Lab Range need 4 elements :{list(raw)!r}")
            numbers = []
            for item in raw:
                if not _is_number(item):
                    raise ColorError(f"Lab Range element need number got:{item!r}")
                numbers.append(float(item))
            value_range = (numbers[0], numbers[1], numbers[2], numbers[3])
        if "WhitePoint" not in params:
            raise ColorError("Lab WhitePoint is required")
        white = _point(params["WhitePoint"], "WhitePoint")
        black = (0.0, 0.0, 0.0)
        if "BlackPoint" in params:
            black = _point(params["BlackPoint"], "BlackPoint")
        return cls(white, black, value_range)

    def default_value(self) -> ColorValue:
        """L* of 0 with a* and b* as close to 0 as the range allows."""
        default = [0.0, 0.0, 0.0]
        amin, amax, bmin, bmax = self.range
        if amin > 0.0:
            default[1] = amin
        elif amax < 0.0:
            default[1] = amax
        if bmin > 0.0:
            default[2] = bmin
        elif bmax < 0.0:
            default[2] = bmax
        return ColorValue(default)

    def number_of_components(self) -> int:
        return 3

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Convert L*a*b* through CIE XYZ (relative to the white point) to linear sRGB."""
        if value.value_size() < 3:
            raise ColorError(f"Lab need 3 element value got:{value.value_size()}")
        l_star, a_star, b_star = value.values[:3]
        amin, amax, bmin, bmax = self.range
        l_star = _clamp(l_star, 0.0, 100.0)
        a_star = _clamp(a_star, amin, amax)
        b_star = _clamp(b_star, bmin, bmax)
        m = (l_star + 16.0) / 116.0
        wx, wy, wz = self.white_point
        x = wx * _finv(m + a_star / 500.0)
        y = wy * _finv(m)
        z = wz * _finv(m - b_star / 200.0)
        return ColorRgb(
            3.2406 * x - 1.5372 * y - 0.4986 * z,
            -0.9689 * x + 1.8758 * y + 0.0415 * z,
            0.0557 * x - 0.2040 * y + 1.0570 * z,
        )