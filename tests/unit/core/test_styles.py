"""Unit tests for core/styles.py"""

import pytest
import yaml

from mdrender.core.styles import DEFAULT_STYLES, dump_styles, load_styles, pick


def test_pick_skips_unknown_names():
    styles = {"a": {"x": 1}, "b": {"y": 2}}
    assert pick(styles, "a", "missing", "b") == [{"x": 1}, {"y": 2}]


def test_load_styles_defaults():
    assert load_styles() == DEFAULT_STYLES


def test_load_styles_overlays_file(tmp_path):
    f = tmp_path / "styles.yaml"
    f.write_text("text:\n  color: red\ncustom:\n  flex: 2\n")
    styles = load_styles(f)
    assert styles["text"] == {"color": "red"}
    assert styles["custom"] == {"flex": 2}
    assert styles["heading1"] == DEFAULT_STYLES["heading1"]


def test_load_styles_invalid_yaml(tmp_path):
    f = tmp_path / "styles.yaml"
    f.write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid style file"):
        load_styles(f)


def test_load_styles_not_a_mapping(tmp_path):
    f = tmp_path / "styles.yaml"
    f.write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_styles(f)


def test_dump_styles_round_trips():
    assert yaml.safe_load(dump_styles(DEFAULT_STYLES)) == DEFAULT_STYLES
