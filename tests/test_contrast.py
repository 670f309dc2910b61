from palette.contrast import (
    check_palette_contrast,
    contrast_ratio,
    relative_luminance,
    validate_contrast,
)
from palette.color_space import Rgb
from palette.tokens import build_palette_preset


def test_relative_luminance_monotonic():
    # White > Gray > Black
    white = "#ffffff"
    gray = "#777777"
    black = "#000000"
    assert relative_luminance(white) > relative_luminance(gray) > relative_luminance(black)


def test_contrast_ratio_basic():
    ratio = contrast_ratio("#ffffff", "#000000")
    assert abs(ratio - 21.0) < 0.1


def test_contrast_ratio_symmetric_and_accepts_rgb():
    a = contrast_ratio("#111111", "#ffffff")
    b = contrast_ratio(Rgb(1.0, 1.0, 1.0), "#111111")
    assert a == b
    assert a > 18.0
    assert contrast_ratio("#777777", "#777777") == 1.0


def test_validate_contrast_flat_tokens():
    tokens = {"--fg": "#111111", "--bg": "#ffffff", "--muted": "#dddddd"}
    failures = validate_contrast(
        tokens,
        [
            ("--fg", "--bg", "Dark on white"),
            ("--muted", "--bg", "Muted on white"),
            ("--missing", "--bg", "Missing"),
        ],
    )
    assert not any("Dark on white" in f for f in failures)
    assert any(f.startswith("[contrast-fail] Muted on white") for f in failures)
    assert any(f.startswith("[resolve-error] Missing") for f in failures)


def test_check_palette_contrast_covers_all_roles():
    tokens = build_palette_preset("clear-categories", option_count=4, seed_hue=120)
    checks = check_palette_contrast(tokens)
    ids = [c.id for c in checks]
    assert ids[:3] == ["active-cell", "toggle-on", "border-muted"]
    assert ids[3:] == ["option-1", "option-2", "option-3", "option-4"]
    assert all(c.ok for c in checks), [c for c in checks if not c.ok]
    border = next(c for c in checks if c.id == "border-muted")
    assert border.minimum == 1.8


def test_check_palette_contrast_skips_incomplete_pairs():
    checks = check_palette_contrast({"--active-cell": "#eeeeee", "--option-1": "#ffffff"})
    assert checks == []
