"""
Dataset and legend records for DashboardCharts.

Datasets arrive pre-aggregated from the dashboard's query layer as lists of
small records. Categorical charts (bar, pie, donut) take ``CategoricalPoint``
sequences; the line chart takes chronologically sorted ``TimePoint``
sequences. Legend entries and summaries are derived on every render and never
stored by the engine.
"""

import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from .exceptions import DatasetError
from .formatting import parse_bucket

logger = logging.getLogger(__name__)


def _key_to_text(key: Any) -> Optional[str]:
    # JSON booleans come back as Python bools; keep the wire spelling.
    if key is None:
        return None
    if isinstance(key, bool):
        return "true" if key else "false"
    return str(key)


@dataclass(frozen=True)
class CategoricalPoint:
    """
    One bar, pie slice, or donut segment.

    Fields follow the wire record, so ``CategoricalPoint("Acme", 12.0)``
    reads like ``{"key": "Acme", "value": 12}``. ``key`` may be None.
    """

    key: Optional[str]
    value: float

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "CategoricalPoint":
        if "value" not in record:
            raise DatasetError(f"Categorical record is missing 'value': {record!r}")
        try:
            value = float(record["value"])
        except (TypeError, ValueError) as e:
            raise DatasetError(f"Non-numeric value in record {record!r}") from e
        return cls(key=_key_to_text(record.get("key")), value=value)


@dataclass(frozen=True)
class TimePoint:
    """One line chart sample; ``bucket`` is an ISO-like date string."""

    bucket: str
    count: float

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "TimePoint":
        # The query layer reports time buckets as {bucket, value}; the chart
        # itself speaks {bucket, count}.
        if "bucket" not in record:
            raise DatasetError(f"Time record is missing 'bucket': {record!r}")
        raw = record.get("count", record.get("value"))
        if raw is None:
            raise DatasetError(f"Time record is missing 'count': {record!r}")
        try:
            count = float(raw)
        except (TypeError, ValueError) as e:
            raise DatasetError(f"Non-numeric count in record {record!r}") from e
        bucket = str(record["bucket"])
        try:
            parse_bucket(bucket)
        except ValueError as e:
            raise DatasetError(f"Unparseable bucket in record {record!r}") from e
        return cls(bucket=bucket, count=count)


@dataclass(frozen=True)
class LegendEntry:
    """Legend row derived from the current dataset."""

    label: str
    value: float
    color: str
    percentage: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ChartSummary:
    """
    Values a caller displays next to a chart.

    Attributes:
        total: Sum of all values (or counts for the line chart)
        max_value: Largest value in the dataset
        main_percentage: Share of the first entry (donut only)
        main_label: Formatted key of the first entry (donut only)
    """

    total: float
    max_value: float
    main_percentage: Optional[int] = None
    main_label: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


Dataset = Union[Sequence[CategoricalPoint], Sequence[TimePoint]]


def parse_categorical(records: Sequence[Any]) -> List[CategoricalPoint]:
    """Convert dicts (or already-built points) to CategoricalPoints."""
    return [
        r if isinstance(r, CategoricalPoint) else CategoricalPoint.from_dict(r)
        for r in records
    ]


def parse_timeseries(records: Sequence[Any]) -> List[TimePoint]:
    """Convert dicts (or already-built points) to TimePoints."""
    return [
        r if isinstance(r, TimePoint) else TimePoint.from_dict(r)
        for r in records
    ]


def load_dataset(path: Union[str, Path], kind: str) -> Dataset:
    """
    Load a dataset file for a chart kind.

    The file holds either a list of records or a mapping with a ``data``
    list. JSON and YAML are accepted.

    Args:
        path: Path to a .json, .yaml, or .yml file
        kind: Chart kind; "line" parses TimePoints, anything else
              CategoricalPoints

    Returns:
        List of parsed points

    Raises:
        DatasetError: If the file is missing, unreadable, or malformed
    """
    path = Path(path)
    if not path.exists():
        raise DatasetError(f"Dataset file not found: {path}")

    try:
        with open(path, 'r') as f:
            if path.suffix in ['.yaml', '.yml']:
                payload = yaml.safe_load(f)
            elif path.suffix == '.json':
                payload = json.load(f)
            else:
                raise DatasetError(
                    f"Unsupported dataset format: {path.suffix}. Use .json, .yaml, or .yml"
                )
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DatasetError(f"Could not parse dataset {path}: {e}") from e

    if isinstance(payload, dict):
        payload = payload.get("data")
    if not isinstance(payload, list):
        raise DatasetError(f"Dataset {path} must be a list of records or contain a 'data' list")

    records = parse_timeseries(payload) if kind == "line" else parse_categorical(payload)
    logger.debug(f"Loaded {len(records)} {kind} records from {path}")
    return records
