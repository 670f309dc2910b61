"""Tests for the palette_dump developer CLI."""
from __future__ import annotations

import json

import pytest

from cli import palette_dump as pd
from palette import build_palette_preset


def test_json_output(capsys):
    code = pd.main(["--preset", "high-distinction", "--count", "5", "--hue", "32"])
    assert code == 0
    out = capsys.readouterr().out
    assert json.loads(out) == build_palette_preset("high-distinction", 5, 32)


def test_css_output(capsys):
    code = pd.main(["--format", "css", "--count", "3"])
    assert code == 0
    out = capsys.readouterr().out
    assert out.startswith('[data-theme="project"] {')
    assert "--option-3:" in out


def test_report_and_strict(capsys):
    code = pd.main(["--count", "4", "--report", "--strict"])
    assert code == 0
    out = capsys.readouterr().out
    report = json.loads(out[out.index("}\n{") + 2 :])
    assert all(entry["ok"] for entry in report["contrast"])
    assert report["delta"].startswith("Option deltas OK")


def test_list_presets(capsys):
    assert pd.main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    assert "soft-monochrome" in out and "high-distinction" in out


def test_rejects_negative_count():
    with pytest.raises(SystemExit) as exc:
        pd.main(["--count", "-1"])
    assert exc.value.code == 2


def test_rejects_unknown_preset():
    with pytest.raises(SystemExit):
        pd.main(["--preset", "neon"])
