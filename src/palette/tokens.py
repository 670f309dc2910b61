"""Palette token assembly.

Derives the flat token map consumed by the styling layer from
``(preset, option_count, seed_hue)``:

    preset builder -> pre-repair delta pass -> accessibility repair
    -> post-repair delta pass -> token assembly

The function is pure; callers may cache results keyed by the normalized input
triple. Malformed input never raises: unknown presets resolve to
``clear-categories``, non-finite hues to 210 degrees and option counts are
floored to a non-negative integer.

Token keys (see ``palette.keys``)::

    --bg-base, --text-default, --border-muted,
    --active-cell, --active-cell-text, --toggle-on, --toggle-on-text,
    --option-N, --option-N-text   (N = 1..option_count)
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Tuple

from config import settings

from . import keys
from .distinctness import enforce_minimum_delta, enforce_token_delta
from .presets import (
    PRESET_MIN_DELTA,
    PresetId,
    allows_hue_shift,
    build_definition,
    resolve_preset_id,
)
from .repair import build_border_token, ensure_accessible_background

__all__ = [
    "PaletteTokens",
    "as_real",
    "build_palette_preset",
    "generate_option_palette",
    "generate_palette",
    "normalize_option_count",
    "normalize_seed_hue",
    "option_tokens",
]

PaletteTokens = Dict[str, str]


def as_real(value: object) -> Optional[float]:
    """Return ``value`` as a float if it is a real number, else ``None``.

    Any ``numbers.Real`` (``Fraction`` included) and ``Decimal`` qualify;
    booleans do not. Magnitudes too large for a float become infinities.
    """
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return None
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except ValueError:  # signaling NaN
        return math.nan


def _as_finite(value: object) -> Optional[float]:
    number = as_real(value)
    if number is None:
        return None
    return number if math.isfinite(number) else None


def normalize_seed_hue(value: object) -> float:
    number = _as_finite(value)
    if number is None:
        return settings.DEFAULT_SEED_HUE
    hue = number % 360.0
    return 0.0 if hue >= 360.0 else hue


def normalize_option_count(value: object) -> int:
    if value is None:
        return settings.DEFAULT_OPTION_COUNT
    number = _as_finite(value)
    if number is None:
        return 0
    return max(0, math.floor(number))


def build_palette_preset(
    preset: object = settings.DEFAULT_PRESET,
    option_count: object = settings.DEFAULT_OPTION_COUNT,
    seed_hue: object = None,
) -> PaletteTokens:
    """Build the full accessible token map for a preset.

    Parameters
    ----------
    preset : str
        One of the four preset ids; anything else resolves to the default.
    option_count : int, default 6
        Number of categorical option colors. Negative / fractional values are
        floored to a non-negative integer.
    seed_hue : float, optional
        Base hue in degrees; ``None`` or non-finite values use 210.
    """
    preset_id: PresetId = resolve_preset_id(preset)
    count = normalize_option_count(option_count)
    hue = normalize_seed_hue(seed_hue)

    definition = build_definition(preset_id, count, hue)
    min_delta = PRESET_MIN_DELTA[preset_id]

    adjusted_options = enforce_minimum_delta(definition.option_colors, min_delta)

    cell_active = ensure_accessible_background(definition.cell_active, "dark")
    checkbox_on = ensure_accessible_background(definition.checkbox_on, "auto")
    option_repaired = enforce_token_delta(
        [ensure_accessible_background(color, "auto") for color in adjusted_options],
        min_delta,
        allows_hue_shift(preset_id),
    )

    tokens: PaletteTokens = {
        keys.BG_BASE: settings.BACKGROUND_BASE,
        keys.TEXT_DEFAULT: settings.DARK_TEXT,
        keys.BORDER_MUTED: build_border_token(definition.base_hue),
        keys.ACTIVE_CELL: cell_active.background,
        keys.text_key(keys.ACTIVE_CELL): cell_active.text,
        keys.TOGGLE_ON: checkbox_on.background,
        keys.text_key(keys.TOGGLE_ON): checkbox_on.text,
    }
    for idx, token in enumerate(option_repaired, start=1):
        tokens[keys.option_key(idx)] = token.background
        tokens[keys.text_key(keys.option_key(idx))] = token.text
    return tokens


def option_tokens(tokens: Mapping[str, str]) -> List[Tuple[int, str, str]]:
    """Return ``(index, background, text)`` for every complete option pair.

    Ordered by numeric index (``--option-10`` sorts after ``--option-9``).
    """
    out: List[Tuple[int, str, str]] = []
    indices = sorted(idx for idx in (keys.parse_option_index(k) for k in tokens) if idx is not None)
    for idx in indices:
        key = keys.option_key(idx)
        background = tokens.get(key)
        text = tokens.get(keys.text_key(key))
        if background and text:
            out.append((idx, background, text))
    return out


def generate_option_palette(
    count: object,
    preset: object = settings.DEFAULT_PRESET,
    seed_hue: object = None,
) -> List[str]:
    """Ordered option background colors for ``count`` categories."""
    tokens = build_palette_preset(preset, option_count=count, seed_hue=seed_hue)
    values: List[str] = []
    for idx in range(1, normalize_option_count(count) + 1):
        value = tokens.get(keys.option_key(idx))
        if value:
            values.append(value)
    return values


# Entry point used by simple list consumers such as select-option coloring
generate_palette = generate_option_palette
