"""OKLCH / sRGB / hex conversions.

All palette synthesis and repair happens in OKLCH (Björn Ottosson's OKLab in
polar form) because distances there track perceived differences. Colors only
leave that space as ``#rrggbb`` strings.

Public API:
- oklch_to_srgb(color) -> Rgb        (raw, possibly out of [0,1])
- srgb_to_hex(rgb) -> str            (clamped, lowercase #rrggbb)
- hex_to_srgb(value) -> Rgb
- srgb_to_oklab(rgb) / srgb_to_oklch(rgb) / hex_to_oklch(value)
- oklch_to_hex(color) -> str

Channel values produced by ``oklch_to_srgb`` are NOT clamped so callers can
detect out-of-gamut colors (see ``palette.repair.map_to_gamut``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

__all__ = [
    "Oklch",
    "Rgb",
    "oklch_to_srgb",
    "srgb_to_hex",
    "hex_to_srgb",
    "srgb_to_oklab",
    "srgb_to_oklch",
    "hex_to_oklch",
    "oklch_to_hex",
    "normalize_hue",
    "clamp",
]

_HEX_ERR = "Color must be a #RRGGBB or #RGB hex string: {value}"


@dataclass(frozen=True)
class Oklch:
    """Color in the OKLCH model: lightness, chroma, hue (degrees)."""

    l: float  # noqa: E741
    c: float
    h: float


class Rgb(NamedTuple):
    """Gamma-encoded sRGB channels, nominally in [0, 1]."""

    r: float
    g: float
    b: float

    def in_gamut(self) -> bool:
        return all(0.0 <= ch <= 1.0 for ch in self)


def clamp(value: float, lo: float, hi: float) -> float:
    if math.isnan(value):
        return lo
    return max(lo, min(hi, value))


def normalize_hue(hue: float) -> float:
    h = hue % 360.0
    # float modulo of a tiny negative value rounds up to exactly 360
    return 0.0 if h >= 360.0 else h


def _encode(linear: float) -> float:
    if linear <= 0.0031308:
        return 12.92 * linear
    return 1.055 * linear ** (1 / 2.4) - 0.055


def _decode(channel: float) -> float:
    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _cbrt(value: float) -> float:
    return math.copysign(abs(value) ** (1 / 3), value)


def oklch_to_srgb(color: Oklch) -> Rgb:
    hue = math.radians(color.h)
    a = color.c * math.cos(hue)
    b = color.c * math.sin(hue)

    l_ = color.l + 0.3963377774 * a + 0.2158037573 * b
    m_ = color.l - 0.1055613458 * a - 0.0638541728 * b
    s_ = color.l - 0.0894841775 * a - 1.291485548 * b

    l3 = l_ ** 3
    m3 = m_ ** 3
    s3 = s_ ** 3

    r_lin = 4.0767416621 * l3 - 3.3077115913 * m3 + 0.2309699292 * s3
    g_lin = -1.2684380046 * l3 + 2.6097574011 * m3 - 0.3413193965 * s3
    b_lin = -0.0041960863 * l3 - 0.7034186147 * m3 + 1.707614701 * s3
    return Rgb(_encode(r_lin), _encode(g_lin), _encode(b_lin))


def srgb_to_hex(rgb: Rgb) -> str:
    # int(x + 0.5) rounds halves up, round() would round them to even
    return "#" + "".join(f"{int(clamp(ch, 0.0, 1.0) * 255 + 0.5):02x}" for ch in rgb)


def hex_to_srgb(value: str) -> Rgb:
    if not isinstance(value, str):
        raise ValueError(_HEX_ERR.format(value=value))
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        raise ValueError(_HEX_ERR.format(value=value))
    try:
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(_HEX_ERR.format(value=value)) from None
    return Rgb(r / 255.0, g / 255.0, b / 255.0)


def srgb_to_oklab(rgb: Rgb) -> tuple[float, float, float]:
    r, g, b = (_decode(ch) for ch in rgb)

    lms_l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    lms_m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    lms_s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_ = _cbrt(lms_l)
    m_ = _cbrt(lms_m)
    s_ = _cbrt(lms_s)

    return (
        0.2104542553 * l_ + 0.793617785 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.428592205 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.808675766 * s_,
    )


def srgb_to_oklch(rgb: Rgb) -> Oklch:
    lightness, a, b = srgb_to_oklab(rgb)
    chroma = math.hypot(a, b)
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return Oklch(lightness, chroma, hue)


def hex_to_oklch(value: str) -> Oklch:
    return srgb_to_oklch(hex_to_srgb(value))


def oklch_to_hex(color: Oklch) -> str:
    return srgb_to_hex(oklch_to_srgb(color))
