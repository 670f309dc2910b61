"""Stable color assignment for select-field options.

Existing assignments are preserved verbatim; only labels without a color draw
from a freshly generated palette. Colors are compared case-insensitively and
ignoring surrounding whitespace, so ``"#FF0000 "`` and ``"#ff0000"`` count as
the same color. When the palette runs out, hues are stepped by the golden
angle to produce ``hsl(...)`` fallbacks.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence, Set

from config import settings

from .tokens import generate_palette

__all__ = ["assign_select_option_colors", "normalize_color_key"]

GOLDEN_ANGLE = 137.508
FALLBACK_GRAY = "#cccccc"


def normalize_color_key(color: str) -> str:
    return color.strip().lower()


def _fallback_color(used: Set[str]) -> str:
    for attempt in range(settings.FALLBACK_MAX_ATTEMPTS):
        # int(x + 0.5) keeps JS-style half-up rounding of the hue
        hue = int(((len(used) + attempt) * GOLDEN_ANGLE) % 360 + 0.5)
        candidate = f"hsl({hue}, 70%, 60%)"
        if normalize_color_key(candidate) not in used:
            return candidate
    return FALLBACK_GRAY


def assign_select_option_colors(
    options: Sequence[str],
    existing_colors: Optional[Mapping[str, str]] = None,
    *,
    preset: object = settings.DEFAULT_PRESET,
    seed_hue: object = None,
) -> Dict[str, str]:
    """Assign a color to every option label.

    Parameters
    ----------
    options : Sequence[str]
        Ordered option labels.
    existing_colors : Mapping[str, str], optional
        Colors already chosen, keyed by exact label. Never mutated.
    preset, seed_hue
        Palette configuration for newly drawn colors.

    Returns
    -------
    dict[str, str]
        New mapping label -> color covering every label in ``options``.
    """
    if not options:
        return {}
    existing = existing_colors or {}

    available: List[str] = generate_palette(len(options), preset, seed_hue)
    used: Set[str] = set()
    next_colors: Dict[str, str] = {}

    for option in options:
        color = existing.get(option)
        if not color:
            continue
        next_colors[option] = color
        used.add(normalize_color_key(color))

    def take_from_palette() -> Optional[str]:
        for idx, candidate in enumerate(available):
            if normalize_color_key(candidate) in used:
                continue
            del available[idx]
            return candidate
        return None

    for option in options:
        if next_colors.get(option):
            continue
        color = take_from_palette() or _fallback_color(used)
        next_colors[option] = color
        used.add(normalize_color_key(color))

    return next_colors
