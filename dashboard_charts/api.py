"""
Main API module for DashboardCharts package.

This module provides simplified user-facing functions that hide the
renderer/surface plumbing. The primary function `create_chart()` handles the
complete workflow from dataset parsing to a saved image in a single call.

Example:
    >>> from dashboard_charts import create_chart
    >>>
    >>> # Save a donut chart with its center readout and legend
    >>> create_chart(
    ...     kind="donut",
    ...     data=[{"key": "true", "value": 30}, {"key": "false", "value": 70}],
    ...     output_path="sponsored.png"
    ... )

    >>> # Keep the surface for further use
    >>> surface, result = create_chart("bar", "companies.json")
    >>> png = surface.to_png_bytes()
    >>> surface.close()
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .config import Config
from .constants import CHART_KINDS
from .exceptions import DashboardChartsError, DatasetError, InvalidParameterError, RenderError
from .models import ChartSummary, Dataset, LegendEntry, load_dataset, parse_categorical, parse_timeseries
from .rendering import DashboardChart, RenderResult, Surface, get_renderer

logger = logging.getLogger(__name__)

DataSource = Union[str, Path, Sequence]


def _validate_kind(kind: str) -> None:
    if kind not in CHART_KINDS:
        available = ", ".join(CHART_KINDS)
        raise InvalidParameterError(
            f"Unknown chart kind '{kind}'. Available kinds: {available}"
        )


def _resolve_config(config: Optional[Config]) -> Config:
    if config is None:
        logger.debug("Using default configuration")
        return Config()
    try:
        config.validate()
    except ValueError as e:
        raise InvalidParameterError(f"Invalid configuration: {e}") from e
    return config


def resolve_dataset(kind: str, data: DataSource) -> Dataset:
    """
    Turn a dataset argument into parsed points.

    Args:
        kind: Chart kind; decides between time series and categorical records
        data: Path to a JSON/YAML dataset file, or a sequence of records

    Returns:
        List of CategoricalPoints or TimePoints

    Raises:
        DatasetError: If the file or the records are malformed
    """
    if isinstance(data, (str, Path)):
        return load_dataset(data, kind)
    if kind == "line":
        return parse_timeseries(data)
    return parse_categorical(data)


def create_chart(
    kind: str,
    data: DataSource,
    output_path: Optional[Union[str, Path]] = None,
    color: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    size: Optional[Tuple[float, float]] = None,
    config: Optional[Config] = None,
    annotate: bool = True
) -> Union[str, Tuple[Surface, RenderResult]]:
    """
    Render a standalone chart image.

    This is the primary API function that handles the complete workflow:
    1. Validate the chart kind and configuration
    2. Parse (or load) the dataset
    3. Render onto a new surface at ``config.device_scale``
    4. Save to file or return the surface for further use

    Args:
        kind: One of "bar", "line", "pie", "donut"
        data: Records, or a path to a JSON/YAML dataset file
        output_path: Output image path; if None, returns (surface, result)
        color: Base color for bar/line charts
        palette: Palette for pie/donut charts
        size: Logical (width, height) for bar/line charts
        config: Optional Config object; if None, uses default configuration
        annotate: Paint the legend (and donut readout) onto pie/donut images

    Returns:
        If output_path provided: path to saved image file
        If output_path is None: tuple of (surface, render result)

    Raises:
        InvalidParameterError: If kind, palette, or configuration is invalid
        DatasetError: If the dataset is malformed or empty
        RenderError: If chart rendering or saving fails

    Example:
        >>> path = create_chart("line", "applications.json", "timeline.png",
        ...                     size=(800, 300))
        >>> print(f"Chart saved to {path}")
    """
    logger.info(f"Creating {kind} chart")

    _validate_kind(kind)
    config = _resolve_config(config)
    points = resolve_dataset(kind, data)

    if not points:
        raise DatasetError(f"No data to render for {kind} chart")

    try:
        chart = DashboardChart(kind, config=config, color=color, palette=palette, annotate=annotate)
    except DashboardChartsError:
        raise
    except Exception as e:
        raise InvalidParameterError(f"Failed to initialize chart renderer: {e}") from e

    logger.info(f"Rendering {len(points)} points")
    try:
        result = chart.render_chart(points, size)
    except DashboardChartsError:
        chart.close()
        raise
    except ValueError as e:
        chart.close()
        raise DatasetError(f"Malformed {kind} dataset: {e}") from e
    except Exception as e:
        chart.close()
        raise RenderError(f"Failed to render {kind} chart: {e}") from e

    if result is None:
        chart.close()
        raise RenderError(f"Surface unavailable, {kind} chart was not rendered")

    logger.info("Chart rendering complete")

    if output_path is None:
        logger.info("Returning surface and render result")
        return chart.surface, result

    output_path = Path(output_path)
    logger.info(f"Saving chart to {output_path}")
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        saved_path = chart.save_chart(str(output_path))
    except DashboardChartsError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to save chart to {output_path}: {e}") from e
    finally:
        chart.close()

    logger.info(f"Chart saved successfully to {saved_path}")
    return saved_path


def build_chart(
    kind: str,
    data: DataSource,
    color: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    size: Optional[Tuple[float, float]] = None,
    config: Optional[Config] = None,
    annotate: bool = False
) -> Optional[RenderResult]:
    """
    Lay out a chart without any surface.

    Returns:
        RenderResult with draw operations, legend and summary, or None when
        the dataset is empty

    Raises:
        InvalidParameterError: If kind, palette, or configuration is invalid
        DatasetError: If the dataset is malformed
    """
    _validate_kind(kind)
    config = _resolve_config(config)
    points = resolve_dataset(kind, data)
    renderer = get_renderer(kind, color, palette, config, annotate)
    try:
        return renderer.build(points, size)
    except ValueError as e:
        raise DatasetError(f"Malformed {kind} dataset: {e}") from e


def get_legend(
    kind: str,
    data: DataSource,
    color: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    config: Optional[Config] = None
) -> List[LegendEntry]:
    """
    Legend entries a chart of ``kind`` would show for ``data``.

    The line chart has no legend; an empty dataset gives an empty list.

    Example:
        >>> [e.label for e in get_legend("donut", [{"key": "true", "value": 1}])]
        ['Yes']
    """
    result = build_chart(kind, data, color=color, palette=palette, config=config)
    return list(result.legend) if result is not None else []


def get_summary(
    kind: str,
    data: DataSource,
    config: Optional[Config] = None
) -> Optional[ChartSummary]:
    """Summary values (total, max, donut readout) for ``data``."""
    result = build_chart(kind, data, config=config)
    return result.summary if result is not None else None
