"""Colour space parsing plus the ICCBased, Indexed and Pattern families.

PDF names are given as ``str``, arrays as lists or tuples, dictionaries
(including stream dictionaries) as mappings and byte strings as ``bytes``.
Any other object is handed to ``resolve``, which returns the object it refers
to (for example the target of an indirect reference).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence, Union

from ..errors import ColorError
from .calibrated import CalGray, CalRgb
from .device import DeviceCmyk, DeviceGray, DeviceRgb
from .lab import Lab
from .value import ColorRgb, ColorValue

Resolver = Callable[[Any], Any]


def _identity(obj: Any) -> Any:
    return obj


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(value, (int, float))


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(frozen=True)
class PatternColorSpace:
    """The Pattern colour space."""

    def default_value(self) -> ColorValue:
        return ColorValue()


@dataclass(frozen=True)
class IccBased:
    """ICC profile based space, rendered through its alternate space."""

    n: int = 1
    alternate: Any = field(default_factory=DeviceGray)
    range: tuple[float, ...] = ()

    @classmethod
    def from_stream_dict(
        cls, params: Mapping[str, Any], resolve: Resolver | None = None
    ) -> "IccBased":
        """Build from the dictionary of an ICC profile stream."""
        resolve = resolve or _identity
        if "N" not in params:
            raise ColorError("IccBased color need a N parameter")
        n = resolve(params["N"])
        if isinstance(n, bool) or not isinstance(n, int):
            raise ColorError(f"IccBased N is not a number:{n!r}")
        if n not in (1, 3, 4):
            raise ColorError(f"IccBased N is must 1,3,or 4 got: {n}")
        if "Alternate" in params:
            alternate = parse_colorspace(params["Alternate"], resolve)
        else:
            alternate = {1: DeviceGray, 3: DeviceRgb, 4: DeviceCmyk}[n]()
        if "Range" in params:
            raw = resolve(params["Range"])
            if not _is_array(raw):
                raise ColorError(f"IccBased Color need an array got :{raw!r}")
            if len(raw) != 2 * n:
                raise ColorError(
                    f"IccBased range array element is not valid got:{len(raw)}"
                )
            values = []
            for item in raw:
                item = resolve(item)
                if not _is_number(item):
                    raise ColorError(f"IccBased Range element is not a number:{item!r}")
                values.append(float(item))
            value_range = tuple(values)
        else:
            value_range = (0.0, 1.0) * n
        return cls(n, alternate, value_range)

    def default_value(self) -> ColorValue:
        return ColorValue([0.0] * self.n)

    def number_of_components(self) -> int:
        return self.n

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Convert using the alternate space."""
        return self.alternate.rgb(value)


@dataclass(frozen=True)
class Indexed:
    """Palette colour space: an index selects a colour in a lookup table."""

    base: Any
    hival: int
    lookup: bytes

    @classmethod
    def from_array(cls, array: Sequence[Any], resolve: Resolver | None = None) -> "Indexed":
        """Build from ``[/Indexed base hival lookup]``."""
        resolve = resolve or _identity
        if len(array) < 2:
            raise ColorError("Indexed Base is None")
        base = parse_colorspace(array[1], resolve)
        if len(array) < 3:
            raise ColorError("Indexed Color hival is None")
        hival = resolve(array[2])
        if not _is_number(hival):
            raise ColorError("Indexed Color hival is not a as_number")
        hival = int(hival)
        if not 0 <= hival <= 255:
            raise ColorError(f"Indexed Color hival must be between 0 and 255 got:{hival}")
        if len(array) < 4:
            raise ColorError("Indexed color lookup is None")
        lookup = resolve(array[3])
        if isinstance(lookup, (bytes, bytearray, memoryview)):
            table = bytes(lookup)
        elif isinstance(lookup, str):
            table = lookup.encode("latin-1")
        else:
            raise ColorError(
                f"Indexed lookup need an stream or bytes string got :{lookup!r}"
            )
        return cls(base, hival, table)

    def default_value(self) -> ColorValue:
        return self.base.default_value()

    def number_of_components(self) -> int:
        return 1

    def rgb(self, value: ColorValue) -> ColorRgb:
        """Look the index up and convert the entry in the base space."""
        if value.value_size() < 1:
            raise ColorError("Indexed need 1 element value")
        v = value.values[0]
        index = 0 if math.isnan(v) else math.ceil(v)
        index = min(max(index, 0), self.hival)
        count = self.base.number_of_components()
        start = index * count
        entry = self.lookup[start : start + count]
        if len(entry) != count:
            raise ColorError(f"Indexed lookup table has no entry for index {index}")
        return self.base.rgb(ColorValue(b / 255.0 for b in entry))


ColorSpace = Union[
    DeviceGray, DeviceRgb, DeviceCmyk, CalGray, CalRgb, Lab,
    IccBased, PatternColorSpace, Indexed,
]

_NAMED = {
    "G": DeviceGray,
    "DeviceGray": DeviceGray,
    "RGB": DeviceRgb,
    "DeviceRGB": DeviceRgb,
    "CMYK": DeviceCmyk,
    "DeviceCMYK": DeviceCmyk,
    "Pattern": PatternColorSpace,
}

_ARRAY_SIMPLE = {
    "DeviceGray": DeviceGray,
    "DeviceRGB": DeviceRgb,
    "DeviceCMYK": DeviceCmyk,
    "Pattern": PatternColorSpace,
}


def _parameter_dict(array: Sequence[Any], resolve: Resolver, family: str) -> Mapping[str, Any]:
    if len(array) < 2:
        raise ColorError(f"{family} Color array need 2 param at least")
    params = resolve(array[1])
    if not isinstance(params, Mapping):
        raise ColorError(f"{family} need dict got:{params!r}")
    return params


def parse_colorspace(obj: Any, resolve: Resolver | None = None) -> ColorSpace:
    """Build a colour space from a name, an array or a reference to either."""
    resolve = resolve or _identity
    if isinstance(obj, str):
        kind = _NAMED.get(obj)
        if kind is None:
            raise ColorError(f"Color name is error:{obj!r}")
        return kind()
    if _is_array(obj):
        if not obj:
            raise ColorError("ColorSpace array is empty")
        family = obj[0]
        if not isinstance(family, str):
            raise ColorError("ColorSpace new need an array")
        simple = _ARRAY_SIMPLE.get(family)
        if simple is not None:
            return simple()
        if family == "CalGray":
            return CalGray.from_dict(_parameter_dict(obj, resolve, "CalGray"))
        if family == "CalRGB":
            return CalRgb.from_dict(_parameter_dict(obj, resolve, "CalRGB"))
        if family == "Lab":
            return Lab.from_dict(_parameter_dict(obj, resolve, "Lab"))
        if family == "ICCBased":
            return IccBased.from_stream_dict(
                _parameter_dict(obj, resolve, "IccBased"), resolve
            )
        if family == "Indexed":
            return Indexed.from_array(obj, resolve)
        raise ColorError(f"unsupported ColorSpace family:{family!r}")
    target = resolve(obj)
    if target is obj:
        raise ColorError(
            f"Parse ColorSpace need an PdfArray or PdfName got :{obj!r}"
        )
    return parse_colorspace(target, resolve)


_DISPLAY_NAMES = {
    DeviceGray: "DeviceGray",
    DeviceRgb: "DeviceRGB",
    DeviceCmyk: "DeviceCMYK",
    Lab: "Lab",
    IccBased: "ICCBased",
    CalGray: "CalGray",
    CalRgb: "CalRGB",
    Indexed: "Indexed",
    PatternColorSpace: "Pattern",
}


def colorspace_name(space: ColorSpace) -> str:
    """The PDF family name of a colour space."""
    name = _DISPLAY_NAMES.get(type(space))
    if name is None:
        raise ColorError(f"not a colour space:{space!r}")
    return name