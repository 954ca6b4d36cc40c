"""Device-dependent colour spaces: DeviceGray, DeviceRGB and DeviceCMYK."""

from __future__ import annotations

from ..errors import ColorError
from .value import ColorRgb, ColorValue


def _components(value: ColorValue, count: int, space: str) -> tuple[float, ...]:
    if value.value_size() < count:
        raise ColorError(
            f"{space} need {count} element value got:{value.value_size()}"
        )
    return value.values[:count]


class DeviceGray:
    """Single-component gray colour space."""

    def default_value(self) -> ColorValue:
        """Black."""
        return ColorValue([0.0])

    def number_of_components(self) -> int:
        return 1

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Spread the gray level over all three channels."""
        (gray,) = _components(value, 1, "DeviceGray")
        return ColorRgb(gray, gray, gray)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DeviceGray)

    def __hash__(self) -> int:
        return hash(DeviceGray)

    def __repr__(self) -> str:
        return "DeviceGray()"


class DeviceRgb:
    """Three-component RGB colour space."""

    def default_value(self) -> ColorValue:
        """Black."""
        return ColorValue([0.0, 0.0, 0.0])

    def number_of_components(self) -> int:
        return 3

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Return the components unchanged; exactly three are required."""
        if value.value_size() != 3:
            raise ColorError("DeviceRgb need 3 element value")
        r, g, b = value.values
        return ColorRgb(r, g, b)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DeviceRgb)

    def __hash__(self) -> int:
        return hash(DeviceRgb)

    def __repr__(self) -> str:
        return "DeviceRgb()"


class DeviceCmyk:
    """Four-component CMYK colour space."""

    def default_value(self) -> ColorValue:
        """No ink: white."""
        return ColorValue([0.0, 0.0, 0.0, 0.0])

    def number_of_components(self) -> int:
        return 4

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Naive conversion: each channel is 1 - min(ink + black, 1)."""
        c, m, y, k = _components(value, 4, "DeviceCmyk")
        return ColorRgb(
            1.0 - min(c + k, 1.0),
            1.0 - min(m + k, 1.0),
            1.0 - min(y + k, 1.0),
        )

    def __eq__(self, other: object) -> bool:
        return isinstance(other, DeviceCmyk)

    def __hash__(self) -> int:
        return hash(DeviceCmyk)

    def __repr__(self) -> str:
        return "DeviceCmyk()"