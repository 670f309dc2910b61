"""Palette dump CLI.

Prints the token map derived for a preset so designers can inspect or paste
it, optionally followed by the contrast and adjacent-delta report.

Usage examples:
  python -m cli.palette_dump --preset high-distinction --count 5 --hue 32
  python -m cli.palette_dump --format css --report
  python -m cli.palette_dump --list-presets

Exit code 0 on success; 1 when ``--strict`` is given and any contrast or
delta check fails.
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Dict

from config import settings
from palette import (
    PRESET_IDS,
    PRESET_MIN_DELTA,
    build_palette_preset,
    check_palette_contrast,
    list_presets,
    option_tokens,
    resolve_preset_id,
    validate_option_deltas,
)
from palette.project_theme import build_theme_stylesheet


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="palette-dump", description="Print accessible palette tokens")
    p.add_argument("--preset", default=settings.DEFAULT_PRESET, choices=PRESET_IDS, help="Palette preset id")
    p.add_argument("--count", type=int, default=settings.DEFAULT_OPTION_COUNT, help="Number of option colors")
    p.add_argument("--hue", type=float, default=settings.DEFAULT_SEED_HUE, help="Seed hue in degrees")
    p.add_argument("--format", choices=("json", "css"), default="json", help="Output format")
    p.add_argument("--report", action="store_true", help="Append contrast / delta report")
    p.add_argument("--strict", action="store_true", help="Exit 1 when any check fails")
    p.add_argument("--list-presets", action="store_true", help="List presets and exit")
    return p


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL, logging.WARNING))
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.list_presets:
        for info in list_presets():
            print(f"{info.id:<18} {info.label}: {info.description}")
        return 0
    if args.count < 0:
        ap.error("--count must be >= 0")

    tokens = build_palette_preset(args.preset, option_count=args.count, seed_hue=args.hue)
    if args.format == "css":
        print(build_theme_stylesheet(tokens))
    else:
        print(json.dumps(tokens, indent=2))

    if not (args.report or args.strict):
        return 0

    checks = check_palette_contrast(tokens)
    minimum = PRESET_MIN_DELTA[resolve_preset_id(args.preset)]
    deltas = validate_option_deltas([bg for _, bg, _ in option_tokens(tokens)], minimum)
    if args.report:
        summary: Dict[str, Any] = {
            "contrast": [
                {"id": c.id, "ratio": round(c.contrast, 2), "minimum": c.minimum, "ok": c.ok}
                for c in checks
            ],
            "delta": deltas.summary(),
        }
        print(json.dumps(summary, indent=2))
    failed = not deltas.ok or not all(c.ok for c in checks)
    return 1 if (args.strict and failed) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
