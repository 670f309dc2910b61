# Shared fixtures for palette tests.

import pytest

from palette import PRESET_IDS, contrast_ratio, hex_to_oklch, oklch_delta_e, option_tokens


@pytest.fixture(params=PRESET_IDS)
def preset_id(request):
    return request.param


@pytest.fixture
def adjacent_deltas():
    def _deltas(colors):
        return [
            oklch_delta_e(hex_to_oklch(prev), hex_to_oklch(cur))
            for prev, cur in zip(colors, colors[1:])
        ]

    return _deltas


@pytest.fixture
def option_contrasts():
    def _contrasts(tokens):
        return [contrast_ratio(text, bg) for _, bg, text in option_tokens(tokens)]

    return _contrasts
