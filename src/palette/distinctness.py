"""Adjacent-pair distinctness enforcement for option colors.

Two passes share the same scan (pairs ``i-1, i`` only):

 - ``enforce_minimum_delta`` runs on raw OKLCH seeds before repair.
 - ``enforce_token_delta`` runs on repaired tokens and re-repairs every
   candidate it produces, so contrast is preserved.

Both are capped at 24 attempts per pair. When the post-repair pass still
cannot separate a pair it jumps once from the previous token (lightness -0.1,
chroma +0.1, hue +72 where allowed) and accepts the result unverified.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

from config import settings

from .color_space import Oklch, clamp
from .delta import oklch_delta_e
from .repair import AccessibleToken, ensure_accessible_background

_logger = logging.getLogger(__name__)

__all__ = ["enforce_minimum_delta", "enforce_token_delta"]


def enforce_minimum_delta(colors: Sequence[Oklch], minimum: float) -> List[Oklch]:
    adjusted = list(colors)
    if len(adjusted) < 2:
        return adjusted

    for idx in range(1, len(adjusted)):
        for _ in range(settings.REPAIR_MAX_ATTEMPTS):
            if oklch_delta_e(adjusted[idx - 1], adjusted[idx]) >= minimum:
                break
            current = adjusted[idx]
            adjusted[idx] = Oklch(
                l=clamp(current.l - 0.012, 0.2, 0.98),
                c=clamp(current.c + 0.02, 0.0, 0.25),
                h=(current.h + 10) % 360,
            )
    return adjusted


def enforce_token_delta(
    tokens: Sequence[AccessibleToken], minimum: float, allow_hue_shift: bool
) -> List[AccessibleToken]:
    corrected = list(tokens)
    if len(corrected) < 2:
        return corrected

    for idx in range(1, len(corrected)):
        for _ in range(settings.REPAIR_MAX_ATTEMPTS):
            if oklch_delta_e(corrected[idx - 1].oklch, corrected[idx].oklch) >= minimum:
                break
            current = corrected[idx].oklch
            candidate = Oklch(
                l=clamp(current.l - 0.02, 0.2, 0.98),
                c=clamp(current.c + 0.02, 0.0, 0.3),
                h=(current.h + 12) % 360 if allow_hue_shift else current.h,
            )
            corrected[idx] = ensure_accessible_background(candidate, "dark")

        if oklch_delta_e(corrected[idx - 1].oklch, corrected[idx].oklch) < minimum:
            pivot = corrected[idx - 1].oklch
            jump = replace(
                pivot,
                l=clamp(pivot.l - 0.1, 0.2, 0.98),
                c=clamp(pivot.c + 0.1, 0.0, 0.35),
                h=(pivot.h + 72) % 360 if allow_hue_shift else pivot.h,
            )
            corrected[idx] = ensure_accessible_background(jump, "auto")
            _logger.debug(
                "option %d still below delta %.3f; jumped to %s",
                idx + 1,
                minimum,
                corrected[idx].background,
            )
    return corrected
