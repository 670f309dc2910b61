"""Palette presets.

Each preset is a pure builder of ``(option_count, seed_hue)`` returning an
unrepaired ``PaletteDefinition``: OKLCH seeds for the active cell, the toggle-on
state and one color per categorical option. Accessibility and distinctness
repair happen later (``palette.repair`` / ``palette.distinctness``); the
builders only decide how option hues, chromas and lightnesses are spread.

Presets:
 - ``pastel-neutral``: wide even hue spacing (at least 4 slots), low chroma
 - ``soft-monochrome``: single hue, lightness/chroma ramp
 - ``clear-categories``: even spacing (at least 6 slots), medium chroma (default)
 - ``high-distinction``: even spacing, slightly darker and more saturated
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from config import settings

from .color_space import Oklch

__all__ = [
    "PresetId",
    "PaletteDefinition",
    "PresetInfo",
    "PRESET_IDS",
    "PRESET_MIN_DELTA",
    "PRESET_CATALOG",
    "build_definition",
    "list_presets",
    "resolve_preset_id",
    "allows_hue_shift",
]

PresetId = str

PASTEL_NEUTRAL: PresetId = "pastel-neutral"
SOFT_MONOCHROME: PresetId = "soft-monochrome"
CLEAR_CATEGORIES: PresetId = "clear-categories"
HIGH_DISTINCTION: PresetId = "high-distinction"

PRESET_IDS: Tuple[PresetId, ...] = (
    PASTEL_NEUTRAL,
    SOFT_MONOCHROME,
    CLEAR_CATEGORIES,
    HIGH_DISTINCTION,
)

# Minimum OKLab delta between adjacent option colors
PRESET_MIN_DELTA: Dict[PresetId, float] = {
    PASTEL_NEUTRAL: 0.07,
    SOFT_MONOCHROME: 0.06,
    CLEAR_CATEGORIES: 0.08,
    HIGH_DISTINCTION: 0.08,
}


@dataclass(frozen=True)
class PaletteDefinition:
    base_hue: float
    cell_active: Oklch
    checkbox_on: Oklch
    option_colors: Tuple[Oklch, ...]


@dataclass(frozen=True)
class PresetInfo:
    id: PresetId
    label: str
    description: str


PRESET_CATALOG: Tuple[PresetInfo, ...] = (
    PresetInfo(PASTEL_NEUTRAL, "Pastel neutral", "Light and versatile for general projects."),
    PresetInfo(SOFT_MONOCHROME, "Soft monochrome", "A single hue with controlled variations."),
    PresetInfo(CLEAR_CATEGORIES, "Clear categories", "Well differentiated options across the grid."),
    PresetInfo(HIGH_DISTINCTION, "High distinction", "Stronger contrast to make categories stand out."),
)


def list_presets() -> Tuple[PresetInfo, ...]:
    return PRESET_CATALOG


def resolve_preset_id(value: object) -> PresetId:
    """Map loosely typed input to a known preset id.

    Anything that is not one of the four ids (None, numbers, unknown or empty
    strings) resolves to the default preset.
    """
    if isinstance(value, str):
        candidate = value.strip()
        if candidate in PRESET_MIN_DELTA:
            return candidate
    return settings.DEFAULT_PRESET


def allows_hue_shift(preset: PresetId) -> bool:
    return preset != SOFT_MONOCHROME


def _build_pastel_neutral(option_count: int, seed_hue: float) -> PaletteDefinition:
    spacing = 360 / max(option_count, 4)
    return PaletteDefinition(
        base_hue=seed_hue,
        cell_active=Oklch(0.95, 0.045, seed_hue),
        checkbox_on=Oklch(0.75, 0.14, seed_hue),
        option_colors=tuple(
            Oklch(0.91, 0.09, (seed_hue + idx * spacing) % 360) for idx in range(option_count)
        ),
    )


def _build_soft_monochrome(option_count: int, seed_hue: float) -> PaletteDefinition:
    step = 0.0 if option_count <= 1 else 0.12 / (option_count - 1)
    return PaletteDefinition(
        base_hue=seed_hue,
        cell_active=Oklch(0.955, 0.035, seed_hue),
        checkbox_on=Oklch(0.72, 0.11, seed_hue),
        option_colors=tuple(
            Oklch(0.82 - idx * 0.05, 0.12 + idx * step, seed_hue) for idx in range(option_count)
        ),
    )


def _build_clear_categories(option_count: int, seed_hue: float) -> PaletteDefinition:
    spacing = 360 / max(option_count, 6)
    return PaletteDefinition(
        base_hue=seed_hue,
        cell_active=Oklch(0.952, 0.05, seed_hue),
        checkbox_on=Oklch(0.74, 0.15, (seed_hue + 30) % 360),
        option_colors=tuple(
            Oklch(0.9, 0.11, (seed_hue + idx * spacing) % 360) for idx in range(option_count)
        ),
    )


def _build_high_distinction(option_count: int, seed_hue: float) -> PaletteDefinition:
    spacing = 360 / max(option_count, 6)
    return PaletteDefinition(
        base_hue=seed_hue,
        cell_active=Oklch(0.948, 0.055, seed_hue),
        checkbox_on=Oklch(0.7, 0.17, (seed_hue + 12) % 360),
        option_colors=tuple(
            Oklch(0.88, 0.12, (seed_hue + idx * spacing) % 360) for idx in range(option_count)
        ),
    )


_BUILDERS: Dict[PresetId, Callable[[int, float], PaletteDefinition]] = {
    PASTEL_NEUTRAL: _build_pastel_neutral,
    SOFT_MONOCHROME: _build_soft_monochrome,
    CLEAR_CATEGORIES: _build_clear_categories,
    HIGH_DISTINCTION: _build_high_distinction,
}


def build_definition(preset: PresetId, option_count: int, seed_hue: float) -> PaletteDefinition:
    builder = _BUILDERS.get(preset, _build_clear_categories)
    return builder(option_count, seed_hue)
