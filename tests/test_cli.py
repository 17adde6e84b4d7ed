"""Tests for the command-line interface."""
from __future__ import annotations

import json

import pytest

from dashboard_charts.cli import main, parse_palette
from dashboard_charts.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # main() binds the console handler to the captured stdout
    setup_logging()


@pytest.fixture
def data_file(tmp_path, company_data):
    path = tmp_path / "companies.json"
    path.write_text(json.dumps(company_data))
    return path


def test_render_writes_image(tmp_path, data_file, capsys) -> None:
    output = tmp_path / "companies.png"

    code = main(["render", "--kind", "bar", "--data", str(data_file), "--output", str(output)])

    assert code == 0
    assert output.exists()
    assert "Success! Chart saved to" in capsys.readouterr().out


def test_render_silent_prints_path(tmp_path, data_file, capsys) -> None:
    output = tmp_path / "companies.png"

    code = main([
        "render", "--kind", "pie", "--data", str(data_file),
        "--output", str(output), "--scale", "2", "--silent",
    ])

    assert code == 0
    assert capsys.readouterr().out.strip() == str(output)


def test_render_legend_json(tmp_path, data_file) -> None:
    legend_path = tmp_path / "legend.json"

    code = main([
        "-q", "render", "--kind", "pie", "--data", str(data_file),
        "--output", str(tmp_path / "pie.png"),
        "--palette", "#111111,#222222", "--legend-json", str(legend_path),
    ])

    legend = json.loads(legend_path.read_text())
    assert code == 0
    assert [e["label"] for e in legend] == ["Acme", "Globex", "Initech"]
    assert [e["color"] for e in legend] == ["#111111", "#222222", "#111111"]


def test_render_missing_data_file(tmp_path, capsys) -> None:
    code = main([
        "render", "--kind", "bar", "--data", str(tmp_path / "missing.json"),
        "--output", str(tmp_path / "out.png"),
    ])

    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_render_bad_config(tmp_path, data_file, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("device_scale: -1\n")

    code = main([
        "render", "--kind", "bar", "--data", str(data_file),
        "--output", str(tmp_path / "out.png"), "--config", str(config_path),
    ])

    assert code == 1
    assert "Error loading config" in capsys.readouterr().err


def test_legend_prints_json(tmp_path, capsys) -> None:
    path = tmp_path / "sponsored.yaml"
    path.write_text("- {key: true, value: 30}\n- {key: false, value: 70}\n")

    code = main(["legend", "--kind", "donut", "--data", str(path), "-q"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert [e["label"] for e in payload["legend"]] == ["Yes", "No"]
    assert payload["summary"]["main_percentage"] == 30


def test_legend_bad_bucket(tmp_path, capsys) -> None:
    """A line dataset with an unparseable bucket exits 1 with an error line."""
    path = tmp_path / "timeline.json"
    path.write_text(json.dumps([{"bucket": "not-a-date", "count": 1}]))

    code = main(["legend", "--kind", "line", "--data", str(path), "-q"])

    assert code == 1
    assert "Error:" in capsys.readouterr().err


def test_no_subcommand_prints_help(capsys) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_unknown_kind_rejected_by_parser(data_file) -> None:
    with pytest.raises(SystemExit):
        main(["legend", "--kind", "radar", "--data", str(data_file)])


def test_parse_palette() -> None:
    assert parse_palette("#a, #b,,#c") == ["#a", "#b", "#c"]
