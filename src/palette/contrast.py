"""Contrast utilities for validating palette token accessibility.

Implements WCAG 2.1 relative luminance and contrast ratio calculations.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(fg, bg) -> float
- validate_contrast(tokens, pairs, threshold=4.5) -> list[str]
- check_palette_contrast(tokens) -> list[ContrastCheck]

Colors may be given as ``#rrggbb`` strings or as ``Rgb`` channel tuples.
The ``pairs`` parameter of ``validate_contrast`` uses tuples of
(foreground_key, background_key, label) referencing keys of a flat token map.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Tuple, Union

from config import settings

from . import keys
from .color_space import Rgb, hex_to_srgb

__all__ = [
    "ContrastCheck",
    "check_palette_contrast",
    "contrast_ratio",
    "relative_luminance",
    "validate_contrast",
]

ColorLike = Union[str, Rgb]


def _as_rgb(color: ColorLike) -> Rgb:
    if isinstance(color, str):
        return hex_to_srgb(color)
    return Rgb(*color)


def _linear_channel(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    r, g, b = _as_rgb(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio(fg: ColorLike, bg: ColorLike) -> float:
    l1 = relative_luminance(fg)
    l2 = relative_luminance(bg)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def validate_contrast(
    tokens: Mapping[str, str], pairs: Iterable[Tuple[str, str, str]], threshold: float = 4.5
) -> List[str]:
    """Validate a collection of foreground/background token pairs.

    Parameters
    ----------
    tokens : Mapping[str, str]
        Flat token map (key -> #rrggbb).
    pairs : Iterable[Tuple[str,str,str]]
        Each tuple is (foreground_key, background_key, label)
    threshold : float
        Minimum acceptable contrast ratio.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    failures: List[str] = []
    for fg_key, bg_key, label in pairs:
        try:
            fg = tokens[fg_key]
            bg = tokens[bg_key]
            ratio = contrast_ratio(fg, bg)
        except (KeyError, ValueError) as exc:
            failures.append(f"[resolve-error] {label}: {exc}")
            continue
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    return failures


@dataclass(frozen=True)
class ContrastCheck:
    id: str
    label: str
    background: str
    text: str
    minimum: float
    contrast: float
    ok: bool


def check_palette_contrast(tokens: Mapping[str, str]) -> List[ContrastCheck]:
    """Measure every readability pairing of a palette token map.

    Covers the active cell, toggle-on and each option against their paired text
    tokens (4.5:1) and the muted border against the base background (1.8:1).
    Pairs with a missing side are skipped.
    """
    pairs: List[Tuple[str, str, str, str, float]] = [
        ("active-cell", "Active cell", keys.ACTIVE_CELL, keys.text_key(keys.ACTIVE_CELL), settings.MIN_TEXT_CONTRAST),
        ("toggle-on", "Toggle on", keys.TOGGLE_ON, keys.text_key(keys.TOGGLE_ON), settings.MIN_TEXT_CONTRAST),
        ("border-muted", "Muted border", keys.BG_BASE, keys.BORDER_MUTED, settings.MIN_BORDER_CONTRAST),
    ]
    option_indices = sorted(
        idx for idx in (keys.parse_option_index(k) for k in tokens) if idx is not None
    )
    for idx in option_indices:
        key = keys.option_key(idx)
        pairs.append((f"option-{idx}", f"Option {idx}", key, keys.text_key(key), settings.MIN_TEXT_CONTRAST))

    checks: List[ContrastCheck] = []
    for check_id, label, bg_key, fg_key, minimum in pairs:
        background = tokens.get(bg_key)
        text = tokens.get(fg_key)
        if not background or not text:
            continue
        ratio = contrast_ratio(text, background)
        checks.append(
            ContrastCheck(
                id=check_id,
                label=label,
                background=background,
                text=text,
                minimum=minimum,
                contrast=ratio,
                ok=ratio >= minimum,
            )
        )
    return checks
