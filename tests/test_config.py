"""Tests for configuration loading, saving and validation."""
from __future__ import annotations

import json

import pytest

from dashboard_charts.config import Config, get_default_config
from dashboard_charts.constants import DEFAULT_DONUT_PALETTE, DEFAULT_PIE_PALETTE


def test_defaults_are_valid() -> None:
    config = get_default_config()

    assert config.validate() is True
    assert config.device_scale == 1.0
    assert config.pie_palette == list(DEFAULT_PIE_PALETTE)
    assert config.donut_palette == list(DEFAULT_DONUT_PALETTE)
    assert config.pie_size == 200
    assert config.donut_size == 180


def test_yaml_round_trip(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    saved = Config(device_scale=2.0, bar_color="#7928ca", pie_palette=["#111111", "#222222"])

    saved.save_to_file(path)
    loaded = Config.load_from_file(path)

    assert loaded == saved


def test_json_round_trip(tmp_path) -> None:
    path = tmp_path / "config.json"
    Config(max_line_labels=4, output_dir=tmp_path / "out").save_to_file(path)

    loaded = Config.load_from_file(path)

    assert loaded.max_line_labels == 4
    assert loaded.output_dir == tmp_path / "out"
    assert json.loads(path.read_text())["output_dir"] == str(tmp_path / "out")


def test_empty_yaml_gives_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert Config.load_from_file(path) == Config()


def test_missing_file(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        Config.load_from_file(tmp_path / "nope.yaml")


def test_unsupported_format(tmp_path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("device_scale = 2")

    with pytest.raises(ValueError, match="Unsupported"):
        Config.load_from_file(path)


def test_unknown_key(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("bar_colour: '#fff'\n")

    with pytest.raises(ValueError, match="bar_colour"):
        Config.load_from_file(path)


def test_malformed_yaml(tmp_path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("pie_palette: [unclosed\n")

    with pytest.raises(ValueError):
        Config.load_from_file(path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"device_scale": 0},
        {"bar_color": ""},
        {"pie_palette": []},
        {"donut_palette": []},
        {"pie_size": -5},
        {"default_width": 0},
        {"label_max_length": 0},
        {"max_line_labels": 2.5},
        {"gridline_count": 0},
    ],
)
def test_validate_rejects(overrides) -> None:
    with pytest.raises(ValueError):
        Config(**overrides).validate()


def test_ensure_directories(tmp_path) -> None:
    config = Config(output_dir=str(tmp_path / "charts" / "out"))
    config.ensure_directories()

    assert (tmp_path / "charts" / "out").is_dir()
