"""Accessible palette engine.

Derives readable, mutually distinct color tokens (active cell, toggle-on and
categorical options) from a preset id, a seed hue and an option count.
"""

from .color_space import (  # noqa: F401
    Oklch,
    Rgb,
    hex_to_oklch,
    hex_to_srgb,
    oklch_to_hex,
    oklch_to_srgb,
    srgb_to_hex,
    srgb_to_oklch,
)
from .contrast import (  # noqa: F401
    ContrastCheck,
    check_palette_contrast,
    contrast_ratio,
    relative_luminance,
    validate_contrast,
)
from .delta import oklch_delta_e, validate_option_deltas, DeltaReport  # noqa: F401
from .presets import (  # noqa: F401
    PRESET_CATALOG,
    PRESET_IDS,
    PRESET_MIN_DELTA,
    PaletteDefinition,
    PresetInfo,
    build_definition,
    list_presets,
    resolve_preset_id,
)
from .repair import AccessibleToken, ensure_accessible_background, map_to_gamut  # noqa: F401
from .distinctness import enforce_minimum_delta, enforce_token_delta  # noqa: F401
from .tokens import (  # noqa: F401
    build_palette_preset,
    generate_option_palette,
    generate_palette,
    normalize_option_count,
    normalize_seed_hue,
    option_tokens,
)
from .select_colors import assign_select_option_colors  # noqa: F401
from .project_theme import (  # noqa: F401
    ProjectTheme,
    ProjectThemeError,
    apply_palette,
    build_theme_stylesheet,
    normalize_project_theme,
    regenerate_tokens,
)
