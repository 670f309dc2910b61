"""Token key names shared by the assembler, reports and theme helpers.

Keys are CSS custom property names so the styling layer can apply a token map
verbatim. Every background role ``X`` has a paired readable text color under
``X-text``.
"""

from __future__ import annotations

import re
from typing import Optional

BG_BASE = "--bg-base"
TEXT_DEFAULT = "--text-default"
BORDER_MUTED = "--border-muted"
ACTIVE_CELL = "--active-cell"
TOGGLE_ON = "--toggle-on"

_OPTION_RE = re.compile(r"^--option-(\d+)$")


def text_key(key: str) -> str:
    return f"{key}-text"


def option_key(index: int) -> str:
    """Key of the 1-based option background token."""
    return f"--option-{index}"


def parse_option_index(key: str) -> Optional[int]:
    match = _OPTION_RE.match(key)
    return int(match.group(1)) if match else None


__all__ = [
    "BG_BASE",
    "TEXT_DEFAULT",
    "BORDER_MUTED",
    "ACTIVE_CELL",
    "TOGGLE_ON",
    "text_key",
    "option_key",
    "parse_option_index",
]
