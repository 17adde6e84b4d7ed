"""
Orchestration module for dashboard chart rendering.

This module dispatches a chart kind to its renderer and provides the
DashboardChart class, which pairs a renderer with a drawing surface the way
a dashboard panel does: every time the panel receives a new dataset or a new
container size it calls ``render_chart`` again, and each call redraws the
surface from scratch.
"""

import logging
from typing import List, Optional, Protocol, Sequence, Tuple

from ..config import Config
from ..constants import CHART_KINDS
from ..exceptions import InvalidParameterError
from ..models import ChartSummary, LegendEntry
from .bar import BarRenderer
from .commands import RenderResult
from .donut import DonutRenderer
from .line import LineRenderer
from .pie import PieRenderer
from .surface import Surface

logger = logging.getLogger("dashboard_charts.rendering.chart")


class ChartRenderer(Protocol):
    """Capability shared by the four chart renderers."""

    kind: str

    def build(self, dataset: Sequence, size: Optional[Tuple[float, float]] = None) -> Optional[RenderResult]:
        ...

    def render(
        self,
        dataset: Sequence,
        surface: Optional[Surface],
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        ...


def get_renderer(
    kind: str,
    color: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    annotate: bool = False
) -> ChartRenderer:
    """
    Create the renderer for a chart kind.

    Args:
        kind: One of "bar", "line", "pie", "donut"
        color: Base color for bar/line charts
        palette: Palette for pie/donut charts
        config: Configuration object (default: new Config)
        annotate: For pie/donut, also paint the legend (and donut readout)

    Raises:
        InvalidParameterError: If ``kind`` is unknown
    """
    config = config if config is not None else Config()
    if kind == "bar":
        return BarRenderer(color, config)
    if kind == "line":
        return LineRenderer(color, config)
    if kind == "pie":
        return PieRenderer(palette, config, annotate)
    if kind == "donut":
        return DonutRenderer(palette, config, annotate)

    available = ", ".join(CHART_KINDS)
    raise InvalidParameterError(f"Unknown chart kind '{kind}'. Available kinds: {available}")


def render_chart(
    kind: str,
    dataset: Sequence,
    surface: Optional[Surface],
    size: Optional[Tuple[float, float]] = None,
    color: Optional[str] = None,
    palette: Optional[Sequence[str]] = None,
    config: Optional[Config] = None,
    annotate: bool = False
) -> Optional[RenderResult]:
    """One-shot render of ``dataset`` as ``kind`` onto ``surface``."""
    renderer = get_renderer(kind, color, palette, config, annotate)
    return renderer.render(dataset, surface, size)


class DashboardChart:
    """
    One dashboard panel: a renderer bound to a drawing surface.

    Attributes:
        kind: Chart kind
        config: Configuration object
        renderer: Renderer for ``kind``
        surface: Drawing surface (created on first render if not supplied)

    Example:
        >>> chart = DashboardChart("donut", annotate=True)
        >>> result = chart.render_chart([{"key": "true", "value": 30},
        ...                              {"key": "false", "value": 70}])
        >>> chart.get_summary().main_percentage
        30
        >>> chart.save_chart("sponsored.png")
    """

    def __init__(
        self,
        kind: str,
        config: Optional[Config] = None,
        surface: Optional[Surface] = None,
        color: Optional[str] = None,
        palette: Optional[Sequence[str]] = None,
        annotate: bool = False
    ):
        self.kind = kind
        self.config = config if config is not None else Config()
        self.renderer = get_renderer(kind, color, palette, self.config, annotate)
        self.surface = surface
        self._result: Optional[RenderResult] = None

        logger.info(f"Initialized DashboardChart for kind '{kind}'")

    def _ensure_surface(self, size: Optional[Tuple[float, float]]) -> Surface:
        if self.surface is None:
            width, height = size if size is not None else (
                self.config.default_width, self.config.default_height
            )
            self.surface = Surface.create(
                width, height,
                device_scale=self.config.device_scale,
                background_color=self.config.background_color
            )
        return self.surface

    def render_chart(
        self,
        dataset: Sequence,
        size: Optional[Tuple[float, float]] = None
    ) -> Optional[RenderResult]:
        """
        Redraw the panel for ``dataset``.

        Args:
            dataset: Points for this chart kind
            size: Container box for bar/line charts

        Returns:
            RenderResult, or None when nothing was drawn (empty dataset or
            unavailable surface); the previous result is kept in that case
        """
        surface = self._ensure_surface(size)
        logger.info(f"Rendering {self.kind} chart with {len(dataset)} points")

        result = self.renderer.render(dataset, surface, size)
        if result is None:
            logger.info(f"Skipped {self.kind} render")
            return None

        self._result = result
        logger.info(
            f"{self.kind.capitalize()} chart rendered: "
            f"{len(result.ops)} ops, surface {result.width:g}x{result.height:g}"
        )
        return result

    def get_legend(self) -> List[LegendEntry]:
        """Legend entries from the most recent render."""
        return list(self._result.legend) if self._result is not None else []

    def get_summary(self) -> Optional[ChartSummary]:
        """Summary from the most recent render."""
        return self._result.summary if self._result is not None else None

    def save_chart(self, output_path: str) -> str:
        """
        Save the rendered surface to file.

        Raises:
            ValueError: If chart has not been rendered yet
        """
        if self._result is None or self.surface is None:
            raise ValueError("Chart has not been rendered yet. Call render_chart() first.")
        return self.surface.save(output_path)

    def close(self) -> None:
        if self.surface is not None:
            self.surface.close()