import re

from palette import select_colors
from palette.select_colors import assign_select_option_colors, normalize_color_key
from palette.tokens import generate_palette


def test_empty_options_yield_empty_mapping():
    assert assign_select_option_colors([]) == {}
    assert assign_select_option_colors([], {"A": "#ff0000"}) == {}


def test_preserves_existing_and_assigns_distinct():
    result = assign_select_option_colors(["A", "B"], {"A": "#ff0000"})
    assert result["A"] == "#ff0000"
    assert normalize_color_key(result["B"]) != normalize_color_key(result["A"])
    assert result["B"] == generate_palette(2)[0]


def test_idempotent_when_all_labels_colored():
    first = assign_select_option_colors(["A", "B", "C"])
    second = assign_select_option_colors(["A", "B", "C"], first)
    assert second == first
    assert all(second[k] is first[k] for k in first)


def test_does_not_mutate_input():
    existing = {"A": "#ff0000"}
    assign_select_option_colors(["A", "B"], existing)
    assert existing == {"A": "#ff0000"}


def test_labels_match_exactly():
    result = assign_select_option_colors(["a"], {"A": "#ff0000"})
    assert result["a"] != "#ff0000"


def test_skips_palette_colors_already_in_use():
    palette = generate_palette(3)
    # existing color matches the first palette entry modulo case/whitespace
    existing = {"B": " " + palette[0].upper() + " "}
    result = assign_select_option_colors(["A", "B", "C"], existing)
    assert result["B"] == existing["B"]
    assert result["A"] == palette[1]
    assert result["C"] == palette[2]


def test_only_listed_labels_seed_used_colors():
    palette = generate_palette(2)
    result = assign_select_option_colors(["A", "B"], {"B": palette[0], "Z": palette[1]})
    assert result == {"B": palette[0], "A": palette[1]}


def test_palette_configuration_is_forwarded():
    result = assign_select_option_colors(["A", "B"], preset="soft-monochrome", seed_hue=20)
    assert list(result.values()) == generate_palette(2, "soft-monochrome", 20)


def test_golden_angle_fallback_when_palette_exhausted(monkeypatch):
    monkeypatch.setattr(select_colors, "generate_palette", lambda count, preset, hue: ["#aaaaaa"])
    result = assign_select_option_colors(["A", "B", "C"])
    assert result == {
        "A": "#aaaaaa",
        "B": "hsl(138, 70%, 60%)",
        "C": "hsl(275, 70%, 60%)",
    }


def test_fallback_skips_used_hsl_values(monkeypatch):
    monkeypatch.setattr(select_colors, "generate_palette", lambda count, preset, hue: [])
    result = assign_select_option_colors(["A", "B"], {"A": "HSL(138, 70%, 60%)"})
    # used has one entry so the first candidate (hue 138) collides and is skipped
    assert result["B"] == "hsl(275, 70%, 60%)"
    assert re.match(r"^hsl\(\d{1,3}, 70%, 60%\)$", result["B"])


def test_fallback_gray_when_every_hue_is_taken():
    used = {f"hsl({h}, 70%, 60%)" for h in range(361)}
    assert select_colors._fallback_color(used) == "#cccccc"
