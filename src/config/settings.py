"""Global configuration and constants for the palette engine."""

from __future__ import annotations

import os
from typing import Final

# Fixed surface / text colors shared by every preset
BACKGROUND_BASE: Final = "#ffffff"
DARK_TEXT: Final = "#111111"
LIGHT_TEXT: Final = "#ffffff"

# Minimum WCAG contrast ratios
MIN_TEXT_CONTRAST: Final = 4.5
MIN_BORDER_CONTRAST: Final = 1.8

DEFAULT_PRESET: Final = "clear-categories"
DEFAULT_SEED_HUE: Final = 210.0
DEFAULT_OPTION_COUNT: Final = 6

# Range offered by the palette picker; the engine itself accepts any count >= 0
MIN_UI_OPTIONS: Final = 3
MAX_UI_OPTIONS: Final = 8

# Iteration caps for the bounded repair loops
GAMUT_MAX_ATTEMPTS: Final = 16
REPAIR_MAX_ATTEMPTS: Final = 24
FALLBACK_MAX_ATTEMPTS: Final = 720

LOG_LEVEL: Final = os.environ.get("PALETTE_LOG_LEVEL", "WARNING").upper()
