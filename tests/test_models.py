"""Tests for dataset records and dataset file loading."""
from __future__ import annotations

import json

import pytest

from dashboard_charts.exceptions import DatasetError
from dashboard_charts.models import (
    CategoricalPoint,
    ChartSummary,
    LegendEntry,
    TimePoint,
    load_dataset,
    parse_categorical,
)


def test_categorical_from_dict() -> None:
    point = CategoricalPoint.from_dict({"key": "Acme", "value": "12"})

    assert point == CategoricalPoint(value=12.0, key="Acme")


def test_categorical_positional_order() -> None:
    """Positional construction follows the {key, value} record order."""
    point = CategoricalPoint("Acme", 5.0)

    assert (point.key, point.value) == ("Acme", 5.0)
    assert CategoricalPoint.from_dict({"value": 1}) == CategoricalPoint(None, 1.0)


def test_boolean_keys_keep_wire_spelling() -> None:
    """JSON booleans are read back as the "true"/"false" strings."""
    assert CategoricalPoint.from_dict({"key": True, "value": 1}).key == "true"
    assert CategoricalPoint.from_dict({"key": False, "value": 1}).key == "false"
    assert CategoricalPoint.from_dict({"value": 1}).key is None


def test_categorical_missing_value() -> None:
    with pytest.raises(DatasetError):
        CategoricalPoint.from_dict({"key": "Acme"})


def test_categorical_non_numeric_value() -> None:
    with pytest.raises(DatasetError):
        CategoricalPoint.from_dict({"key": "Acme", "value": "lots"})


def test_time_point_accepts_value_or_count() -> None:
    assert TimePoint.from_dict({"bucket": "2024-01-01", "count": 3}).count == 3
    assert TimePoint.from_dict({"bucket": "2024-01-01", "value": 4}).count == 4


def test_time_point_missing_fields() -> None:
    with pytest.raises(DatasetError):
        TimePoint.from_dict({"count": 3})
    with pytest.raises(DatasetError):
        TimePoint.from_dict({"bucket": "2024-01-01"})


def test_time_point_rejects_unparseable_bucket() -> None:
    with pytest.raises(DatasetError, match="Unparseable bucket"):
        TimePoint.from_dict({"bucket": "not-a-date", "count": 1})


def test_parse_passes_points_through() -> None:
    point = CategoricalPoint(value=1.0, key="a")

    assert parse_categorical([point, {"key": "b", "value": 2}])[0] is point


def test_legend_and_summary_to_dict() -> None:
    entry = LegendEntry(label="Yes", value=30.0, color="#0070f3", percentage=30)
    summary = ChartSummary(total=100.0, max_value=70.0, main_percentage=30, main_label="Yes")

    assert entry.to_dict() == {"label": "Yes", "value": 30.0, "color": "#0070f3", "percentage": 30}
    assert summary.to_dict()["main_label"] == "Yes"


def test_load_json_list(tmp_path) -> None:
    path = tmp_path / "companies.json"
    path.write_text(json.dumps([{"key": "Acme", "value": 3}]))

    assert load_dataset(path, "bar") == [CategoricalPoint(value=3.0, key="Acme")]


def test_load_yaml_mapping(tmp_path) -> None:
    path = tmp_path / "timeline.yaml"
    path.write_text("data:\n  - bucket: '2024-01-01'\n    count: 2\n")

    assert load_dataset(path, "line") == [TimePoint(bucket="2024-01-01", count=2.0)]


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(DatasetError, match="not found"):
        load_dataset(tmp_path / "missing.json", "bar")


def test_load_unsupported_suffix(tmp_path) -> None:
    path = tmp_path / "data.csv"
    path.write_text("key,value\n")

    with pytest.raises(DatasetError):
        load_dataset(path, "bar")


def test_load_malformed_json(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text("[{")

    with pytest.raises(DatasetError):
        load_dataset(path, "bar")


def test_load_wrong_shape(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"rows": []}))

    with pytest.raises(DatasetError):
        load_dataset(path, "pie")
