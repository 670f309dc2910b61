"""Accessibility repair primitives.

Two bounded, best-effort repairs used by every palette role:

 - ``map_to_gamut``: shrink chroma by 10% per attempt (max 16 attempts) until
   the OKLCH color maps inside sRGB; hard-clamp the channels if it never does.
 - ``ensure_accessible_background``: nudge lightness in 0.01 steps (max 24
   attempts) until the chosen text color (#111111 or #ffffff) reaches 4.5:1
   against the background.

Neither function raises. Running out of attempts returns the last candidate,
which callers (and the test-suite) must verify themselves if they need a hard
guarantee. Contrast is always measured on the quantized ``#rrggbb`` color that
will actually be emitted, and the returned ``oklch`` is re-derived from it so
later distinctness checks see the same value a consumer would.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from config import settings

from .color_space import (
    Oklch,
    Rgb,
    clamp,
    hex_to_srgb,
    oklch_to_srgb,
    srgb_to_hex,
    srgb_to_oklch,
)
from .contrast import contrast_ratio

_logger = logging.getLogger(__name__)

__all__ = [
    "AccessibleToken",
    "TextPreference",
    "map_to_gamut",
    "ensure_accessible_background",
    "build_border_token",
]

TextPreference = str  # "dark" | "light" | "auto"

_LIGHTNESS_STEP = 0.01
_MIN_LIGHTNESS = 0.02
_MAX_LIGHTNESS = 0.98
# Below this chroma the hue of a quantized color is rounding noise
_ACHROMATIC_CHROMA = 1e-3


@dataclass(frozen=True)
class AccessibleToken:
    background: str
    text: str
    oklch: Oklch


def map_to_gamut(color: Oklch) -> Tuple[Oklch, Rgb]:
    """Return ``(color, rgb)`` with ``rgb`` inside the sRGB cube.

    The returned OKLCH value is the (possibly chroma-reduced) color that
    produced ``rgb``.
    """
    candidate = color
    for _ in range(settings.GAMUT_MAX_ATTEMPTS):
        rgb = oklch_to_srgb(candidate)
        if rgb.in_gamut():
            return candidate, rgb
        candidate = replace(candidate, c=max(0.0, candidate.c * 0.9))
    rgb = oklch_to_srgb(candidate)
    return candidate, Rgb(*(clamp(ch, 0.0, 1.0) for ch in rgb))


def _quantize(rgb: Rgb) -> Tuple[str, Rgb]:
    value = srgb_to_hex(rgb)
    return value, hex_to_srgb(value)


def _token(background: str, display: Rgb, text: str, source: Oklch) -> AccessibleToken:
    oklch = srgb_to_oklch(display)
    if oklch.c < _ACHROMATIC_CHROMA:
        oklch = replace(oklch, h=source.h)
    return AccessibleToken(background=background, text=text, oklch=oklch)


def ensure_accessible_background(base: Oklch, preference: TextPreference) -> AccessibleToken:
    """Repair ``base`` until its paired text color is readable.

    Parameters
    ----------
    base : Oklch
        Candidate background color (may be out of gamut).
    preference : str
        ``"dark"`` always pairs with dark text, ``"light"`` with white text and
        ``"auto"`` picks whichever currently yields the higher contrast.
    """
    dark_rgb = hex_to_srgb(settings.DARK_TEXT)
    light_rgb = hex_to_srgb(settings.LIGHT_TEXT)

    mapped, rgb = map_to_gamut(base)
    background, display = _quantize(rgb)

    for _ in range(settings.REPAIR_MAX_ATTEMPTS):
        dark_contrast = contrast_ratio(display, dark_rgb)
        light_contrast = contrast_ratio(display, light_rgb)
        pick_dark = preference == "dark" or (
            preference == "auto" and dark_contrast >= light_contrast
        )
        contrast = dark_contrast if pick_dark else light_contrast
        if contrast >= settings.MIN_TEXT_CONTRAST:
            text = settings.DARK_TEXT if pick_dark else settings.LIGHT_TEXT
            return _token(background, display, text, mapped)

        # Dark text needs a lighter background, light text a darker one
        direction = 1 if pick_dark else -1
        nudged = replace(
            mapped,
            l=clamp(mapped.l + _LIGHTNESS_STEP * direction, _MIN_LIGHTNESS, _MAX_LIGHTNESS),
        )
        mapped, rgb = map_to_gamut(nudged)
        background, display = _quantize(rgb)

    dark_contrast = contrast_ratio(display, dark_rgb)
    light_contrast = contrast_ratio(display, light_rgb)
    use_dark = preference == "dark" or dark_contrast >= light_contrast
    _logger.debug(
        "contrast repair exhausted for %s (%s): dark=%.2f light=%.2f",
        background,
        preference,
        dark_contrast,
        light_contrast,
    )
    return _token(
        background, display, settings.DARK_TEXT if use_dark else settings.LIGHT_TEXT, mapped
    )


def build_border_token(base_hue: float) -> str:
    """Near-neutral border color readable against the base background.

    One darker resynthesis is attempted when the first gray is too faint; no
    further loop.
    """
    border = ensure_accessible_background(Oklch(0.86, 0.01, base_hue), "dark")
    if contrast_ratio(settings.BACKGROUND_BASE, border.background) < settings.MIN_BORDER_CONTRAST:
        border = ensure_accessible_background(Oklch(0.78, 0.02, base_hue), "dark")
    return border.background
