"""Perceptual delta between palette colors.

Distinctness is judged with the Euclidean distance in OKLab (lightness plus the
cartesian a/b offsets of chroma and hue), not by hue angle alone. Only
*adjacent* option colors are compared; the palette never promises that
non-neighbouring options differ by the minimum.

API:
    oklch_delta_e(a, b) -> float
    report = validate_option_deltas(["#ffc9be", "#f4d576", ...], minimum=0.08)
    if not report.ok:
        for issue in report.issues: ...
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .color_space import Oklch, hex_to_oklch

__all__ = [
    "DeltaIssue",
    "DeltaReport",
    "oklch_delta_e",
    "validate_option_deltas",
]


def oklch_delta_e(a: Oklch, b: Oklch) -> float:
    ha = math.radians(a.h)
    hb = math.radians(b.h)
    dl = a.l - b.l
    da = a.c * math.cos(ha) - b.c * math.cos(hb)
    db = a.c * math.sin(ha) - b.c * math.sin(hb)
    return math.sqrt(dl * dl + da * da + db * db)


@dataclass(frozen=True)
class DeltaIssue:
    index: int  # position of the *second* color in the pair
    delta: float
    kind: str  # "too_small" | "invalid_hex"
    message: str


@dataclass(frozen=True)
class DeltaReport:
    ok: bool
    issues: List[DeltaIssue]
    deltas: List[float]

    def summary(self) -> str:
        if self.ok:
            if not self.deltas:
                return "Option deltas OK (nothing to compare)"
            return f"Option deltas OK ({len(self.deltas)} pairs, min={min(self.deltas):.3f})"
        return "Option delta issues: " + ", ".join(
            f"#{iss.index}:{iss.kind}({iss.delta:.3f})" for iss in self.issues
        )


def validate_option_deltas(colors: Sequence[str], minimum: float) -> DeltaReport:
    """Check adjacent hex colors against a minimum OKLab delta.

    Invalid entries are reported and break the chain: the color after an
    invalid one is not compared.
    """
    issues: List[DeltaIssue] = []
    deltas: List[float] = []
    previous: Optional[Oklch] = None
    for idx, value in enumerate(colors):
        try:
            current = hex_to_oklch(value)
        except ValueError:
            issues.append(
                DeltaIssue(
                    index=idx,
                    delta=0.0,
                    kind="invalid_hex",
                    message=f"Invalid hex at position {idx}: {value}",
                )
            )
            previous = None
            continue
        if previous is not None:
            d = oklch_delta_e(previous, current)
            deltas.append(d)
            if d < minimum:
                issues.append(
                    DeltaIssue(
                        index=idx,
                        delta=d,
                        kind="too_small",
                        message=f"Delta {d:.3f} below minimum {minimum}",
                    )
                )
        previous = current
    return DeltaReport(ok=not issues, issues=issues, deltas=deltas)
