"""Tests for the time series line chart renderer."""
from __future__ import annotations

import pytest

from dashboard_charts.config import Config
from dashboard_charts.constants import AREA_GRADIENT_START_ALPHA
from dashboard_charts.rendering import LineRenderer, build_line_chart
from dashboard_charts.rendering.commands import Area, Circle, Clear, Polyline, Text
from dashboard_charts.rendering.line import label_indices


def _date_labels(result) -> list:
    return [op for op in result.ops_of(Text) if op.ha == "center"]


def test_two_point_positions() -> None:
    """Points span the plot width; y follows count over the maximum."""
    result = build_line_chart(
        [{"bucket": "2024-01-01", "count": 10}, {"bucket": "2024-01-02", "count": 20}],
        size=(400, 300),
    )
    polyline = result.ops_of(Polyline)[0]

    assert polyline.points[0] == pytest.approx((60.0, 135.0))
    assert polyline.points[1] == pytest.approx((380.0, 20.0))


def test_single_point_at_plot_center() -> None:
    """One sample is centered horizontally without dividing by zero."""
    result = build_line_chart([{"bucket": "2024-01-01", "count": 5}], size=(400, 300))
    polyline = result.ops_of(Polyline)[0]

    assert polyline.points == ((220.0, 20.0),)
    assert len(result.ops_of(Circle)) == 1


def test_single_zero_point_on_baseline() -> None:
    result = build_line_chart([{"bucket": "2024-01-01", "count": 0}], size=(400, 300))

    assert result.ops_of(Polyline)[0].points == ((220.0, 250.0),)


def test_all_zero_counts_on_baseline(timeline_data) -> None:
    data = [dict(record, count=0) for record in timeline_data]
    result = build_line_chart(data, size=(400, 300))

    assert all(y == result.geometry.baseline for _x, y in result.ops_of(Polyline)[0].points)


def test_empty_series_returns_none() -> None:
    assert build_line_chart([], size=(400, 300)) is None


def test_area_closed_at_baseline(timeline_data) -> None:
    result = build_line_chart(timeline_data, size=(400, 300))
    area = result.ops_of(Area)[0]
    line = result.ops_of(Polyline)[0]

    assert area.points[0] == (line.points[0][0], 250.0)
    assert area.points[-1] == (line.points[-1][0], 250.0)
    assert area.points[1:-1] == line.points


def test_area_gradient_fades_out(timeline_data) -> None:
    area = build_line_chart(timeline_data, color="#7928ca", size=(400, 300)).ops_of(Area)[0]

    assert area.fill.start[3] == pytest.approx(AREA_GRADIENT_START_ALPHA)
    assert area.fill.end[3] == 0.0
    assert (area.fill.y0, area.fill.y1) == (20.0, 250.0)


def test_paint_order(timeline_data) -> None:
    """Area under the stroke, markers on top, labels last."""
    ops = build_line_chart(timeline_data, size=(400, 300)).ops
    kinds = [type(op) for op in ops]

    assert kinds[0] is Clear
    assert kinds.index(Area) < kinds.index(Polyline) < kinds.index(Circle)
    assert isinstance(ops[-1], Text)


def test_markers(timeline_data) -> None:
    result = build_line_chart(timeline_data, color="#50e3c2", size=(400, 300))
    markers = result.ops_of(Circle)

    assert len(markers) == 3
    assert all(m.radius == 5 for m in markers)
    assert all(m.fill == "#000000" and m.stroke == "#50e3c2" for m in markers)
    assert result.ops_of(Polyline)[0].width == 2.5


def test_date_labels(timeline_data) -> None:
    result = build_line_chart(timeline_data, size=(400, 300))

    assert [op.text for op in _date_labels(result)] == ["Jan 1", "Jan 2", "Jan 3"]
    assert all(op.y == 260.0 for op in _date_labels(result))


def test_label_indices_thinning() -> None:
    assert label_indices(20, 8) == [0, 3, 6, 9, 12, 15, 18, 19]
    assert label_indices(5, 8) == [0, 1, 2, 3, 4]
    assert label_indices(1, 8) == [0]
    assert label_indices(0, 8) == []


def test_long_series_label_count() -> None:
    data = [{"bucket": f"2024-02-{day:02d}", "count": day} for day in range(1, 29)]
    result = build_line_chart(data, size=(800, 300))
    labels = _date_labels(result)

    assert labels[0].text == "Feb 1"
    assert labels[-1].text == "Feb 28"
    assert len(labels) <= 9


def test_max_line_labels_from_config(timeline_data) -> None:
    result = build_line_chart(timeline_data, size=(400, 300), config=Config(max_line_labels=1))

    assert [op.text for op in _date_labels(result)] == ["Jan 1", "Jan 3"]


def test_value_field_accepted_for_counts() -> None:
    result = build_line_chart([{"bucket": "2024-01-01", "value": 3}], size=(400, 300))

    assert result.summary.total == 3


def test_no_legend_and_summary(timeline_data) -> None:
    result = build_line_chart(timeline_data, size=(400, 300))

    assert result.legend == []
    assert result.summary.total == 21
    assert result.summary.max_value == 10


def test_render_on_surface(surface, timeline_data) -> None:
    result = LineRenderer().render(timeline_data, surface, (500, 250))

    assert result is not None
    assert surface.size == (500, 250)


def test_points_scaled_against_maximum() -> None:
    """[5, 15]: the first point sits a third of the way up, the second at the top."""
    result = build_line_chart(
        [{"bucket": "2024-01-01", "count": 5}, {"bucket": "2024-01-02", "count": 15}],
        size=(400, 300),
    )
    geometry = result.geometry
    (_x0, y0), (_x1, y1) = result.ops_of(Polyline)[0].points

    assert result.summary.max_value == 15
    assert y0 == pytest.approx(geometry.baseline - (5 / 15) * geometry.plot_height)
    assert y1 == pytest.approx(geometry.plot_top)
