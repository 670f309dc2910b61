"""Project theme document helpers.

A project stores its palette as a small document fragment::

    {
      "paletteId": "clear-categories",
      "params": {"seedHue": 32, "optionCount": 5},
      "tokens": {"--bg-base": "#ffffff", ...}
    }

Only ``paletteId`` plus the ``seedHue`` / ``optionCount`` params are
authoritative; ``tokens`` is a disposable cache that ``regenerate_tokens``
can always rebuild. Normalization is lenient: unknown or ill-typed fields are
dropped instead of rejected. Only unparsable JSON raises ``ProjectThemeError``.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from config import settings

from . import keys
from .presets import resolve_preset_id
from .tokens import as_real, build_palette_preset, normalize_seed_hue

_logger = logging.getLogger(__name__)

__all__ = [
    "ProjectTheme",
    "ProjectThemeError",
    "apply_palette",
    "build_theme_stylesheet",
    "clamp_hue",
    "clamp_option_count",
    "create_default_project_theme",
    "extract_option_count",
    "filter_theme_token_entries",
    "normalize_project_theme",
    "parse_project_theme_json",
    "regenerate_tokens",
]

ParamValue = Union[str, int, float, bool, None]

THEME_SELECTOR = '[data-theme="project"]'
_TOKEN_KEY_RE = re.compile(r"^--[a-zA-Z0-9\-_]+$")


class ProjectThemeError(RuntimeError):
    pass


@dataclass(frozen=True)
class ProjectTheme:
    palette_id: Optional[str] = None
    params: Optional[Dict[str, ParamValue]] = None
    tokens: Dict[str, str] = field(default_factory=dict)

    def to_mapping(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"paletteId": self.palette_id, "tokens": dict(self.tokens)}
        if self.params:
            data["params"] = dict(self.params)
        return data


def create_default_project_theme() -> ProjectTheme:
    return ProjectTheme()


def _normalize_params(raw: object) -> Optional[Dict[str, ParamValue]]:
    if not isinstance(raw, Mapping):
        return None
    params = {
        str(k): v for k, v in raw.items() if v is None or isinstance(v, (str, int, float, bool))
    }
    return params or None


def _normalize_tokens(raw: object) -> Dict[str, str]:
    if not isinstance(raw, Mapping):
        return {}
    return {str(k): v for k, v in raw.items() if isinstance(v, str)}


def normalize_project_theme(raw: object) -> ProjectTheme:
    """Coerce decoded JSON (or anything else) into a ``ProjectTheme``."""
    if not isinstance(raw, Mapping):
        return create_default_project_theme()
    palette_id = raw.get("paletteId")
    if isinstance(palette_id, str):
        palette_id = palette_id.strip() or None
    else:
        palette_id = None
    return ProjectTheme(
        palette_id=palette_id,
        params=_normalize_params(raw.get("params")),
        tokens=_normalize_tokens(raw.get("tokens")),
    )


def parse_project_theme_json(text: str) -> ProjectTheme:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectThemeError(f"Invalid JSON: {e}") from e
    return normalize_project_theme(data)


def clamp_hue(value: object) -> float:
    return normalize_seed_hue(value)


def clamp_option_count(value: object) -> int:
    """Clamp to the picker range [3, 8], rounding halves up."""
    number = as_real(value)
    if number is None or math.isnan(number):
        return settings.MIN_UI_OPTIONS
    if math.isinf(number):
        return settings.MAX_UI_OPTIONS if number > 0 else settings.MIN_UI_OPTIONS
    rounded = math.floor(number + 0.5)
    return min(settings.MAX_UI_OPTIONS, max(settings.MIN_UI_OPTIONS, rounded))


def extract_option_count(tokens: Optional[Mapping[str, str]], fallback: int) -> int:
    """Infer the option count from the highest ``--option-N`` key."""
    indices = [idx for idx in (keys.parse_option_index(k) for k in (tokens or {})) if idx is not None]
    if not indices:
        return clamp_option_count(fallback)
    return clamp_option_count(max(indices))


def apply_palette(
    theme: ProjectTheme,
    preset: object,
    *,
    seed_hue: object = None,
    option_count: object = None,
) -> ProjectTheme:
    """Return a new theme using ``preset`` with freshly generated tokens.

    Existing params are kept; ``seedHue`` and ``optionCount`` are overwritten
    with the clamped values actually used.
    """
    preset_id = resolve_preset_id(preset)
    hue = clamp_hue(seed_hue if seed_hue is not None else settings.DEFAULT_SEED_HUE)
    if option_count is None:
        count = extract_option_count(theme.tokens, settings.DEFAULT_OPTION_COUNT)
    else:
        count = clamp_option_count(option_count)
    params: Dict[str, ParamValue] = dict(theme.params or {})
    params.update({"seedHue": hue, "optionCount": count})
    tokens = build_palette_preset(preset_id, option_count=count, seed_hue=hue)
    return ProjectTheme(palette_id=preset_id, params=params, tokens=tokens)


def regenerate_tokens(theme: ProjectTheme) -> ProjectTheme:
    """Rebuild the token cache from the stored palette parameters.

    A theme without a palette id carries no generated tokens.
    """
    if theme.palette_id is None:
        return replace(theme, tokens={})
    params = theme.params or {}
    hue = clamp_hue(params.get("seedHue", settings.DEFAULT_SEED_HUE))
    raw_count = params.get("optionCount")
    if as_real(raw_count) is not None:
        count = clamp_option_count(raw_count)
    else:
        count = extract_option_count(theme.tokens, settings.DEFAULT_OPTION_COUNT)
    if resolve_preset_id(theme.palette_id) != theme.palette_id:
        _logger.debug("unknown palette id %r, using default preset", theme.palette_id)
    tokens = build_palette_preset(theme.palette_id, option_count=count, seed_hue=hue)
    return replace(theme, tokens=tokens)


def filter_theme_token_entries(tokens: Optional[Mapping[str, str]]) -> List[Tuple[str, str]]:
    """CSS custom property entries with non-blank values, in insertion order."""
    if not tokens:
        return []
    return [
        (key, value.strip())
        for key, value in tokens.items()
        if _TOKEN_KEY_RE.match(key) and isinstance(value, str) and value.strip()
    ]


def build_theme_stylesheet(
    tokens: Optional[Mapping[str, str]], selector: str = THEME_SELECTOR
) -> str:
    entries = filter_theme_token_entries(tokens)
    if not entries:
        return ""
    lines = "\n".join(f"  {key}: {value};" for key, value in entries)
    return f"{selector} {{\n{lines}\n}}"
