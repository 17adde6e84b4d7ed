"""Shared fixtures for the DashboardCharts test suite."""
from __future__ import annotations

import pytest

from dashboard_charts.rendering import Surface


@pytest.fixture
def surface():
    """Attached 400x300 surface, closed after the test."""
    s = Surface.create(400, 300)
    yield s
    s.close()


@pytest.fixture
def company_data() -> list:
    return [
        {"key": "Acme", "value": 50},
        {"key": "Globex", "value": 100},
        {"key": "Initech", "value": 25},
    ]


@pytest.fixture
def timeline_data() -> list:
    return [
        {"bucket": "2024-01-01", "count": 4},
        {"bucket": "2024-01-02", "count": 10},
        {"bucket": "2024-01-03", "count": 7},
    ]


@pytest.fixture
def sponsored_data() -> list:
    return [{"key": "true", "value": 30}, {"key": "false", "value": 70}]
