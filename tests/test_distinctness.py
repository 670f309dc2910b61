import pytest

from palette.color_space import Oklch
from palette.delta import oklch_delta_e
from palette.distinctness import enforce_minimum_delta, enforce_token_delta
from palette.repair import ensure_accessible_background


def test_minimum_delta_adjusts_later_color_of_each_pair():
    seed = Oklch(0.8, 0.1, 40)
    colors = [seed, seed, seed]
    adjusted = enforce_minimum_delta(colors, 0.08)
    assert adjusted[0] == seed
    assert oklch_delta_e(adjusted[0], adjusted[1]) >= 0.08
    assert oklch_delta_e(adjusted[1], adjusted[2]) >= 0.08
    # only adjacent pairs are compared: the third color can equal the first
    assert adjusted[2] == seed
    # input left intact
    assert colors == [seed, seed, seed]


def test_minimum_delta_step_sizes():
    seed = Oklch(0.8, 0.1, 40)
    adjusted = enforce_minimum_delta([seed, seed], 0.05)
    second = adjusted[1]
    steps = round((second.h - 40) / 10)
    assert steps >= 1
    assert second.l == pytest.approx(0.8 - 0.012 * steps)
    assert second.c == pytest.approx(0.1 + 0.02 * steps)


def test_minimum_delta_is_bounded():
    # an unreachable threshold stops after 24 attempts with clamped values
    seed = Oklch(0.5, 0.2, 0)
    adjusted = enforce_minimum_delta([seed, seed], 10.0)
    second = adjusted[1]
    assert second.c == pytest.approx(0.25)
    assert second.l == pytest.approx(0.5 - 0.012 * 24)
    assert second.h == pytest.approx((24 * 10) % 360)


def test_short_sequences_pass_through():
    assert enforce_minimum_delta([], 0.1) == []
    one = [Oklch(0.5, 0.1, 10)]
    assert enforce_minimum_delta(one, 0.1) == one
    token = ensure_accessible_background(Oklch(0.85, 0.1, 40), "auto")
    assert enforce_token_delta([token], 0.08, True) == [token]


@pytest.mark.parametrize("allow_hue_shift", [True, False])
def test_token_delta_separates_identical_tokens(allow_hue_shift):
    token = ensure_accessible_background(Oklch(0.85, 0.1, 40), "auto")
    corrected = enforce_token_delta([token, token], 0.08, allow_hue_shift)
    assert corrected[0] == token
    assert oklch_delta_e(corrected[0].oklch, corrected[1].oklch) >= 0.08
    if not allow_hue_shift:
        assert corrected[1].oklch.h == pytest.approx(token.oklch.h, abs=1.0)


def test_token_delta_keeps_hue_of_gray_tokens_without_hue_shift():
    gray = ensure_accessible_background(Oklch(0.95, 0.0, 123.0), "dark")
    corrected = enforce_token_delta([gray, gray], 0.06, False)
    assert corrected[1].background == "#d3e2b6"
    assert corrected[1].oklch.h == pytest.approx(123.0, abs=0.5)
    assert oklch_delta_e(corrected[0].oklch, corrected[1].oklch) >= 0.06


def test_token_delta_falls_back_to_single_jump(caplog):
    token = ensure_accessible_background(Oklch(0.85, 0.1, 40), "auto")
    with caplog.at_level("DEBUG", logger="palette.distinctness"):
        corrected = enforce_token_delta([token, token], 5.0, True)
    # unreachable threshold: accepted best effort, still readable
    assert len(corrected) == 2
    assert corrected[1] != token
    assert any("jumped" in rec.getMessage() for rec in caplog.records)
