"""
Matplotlib drawing surface.

A ``Surface`` wraps one Agg-backed matplotlib figure whose single axes spans
the whole figure and is scaled so that one data unit is one logical pixel,
with the origin at the top-left corner and y growing downward. The
device-scale factor only changes the figure DPI, so the backing image has
``width * scale`` by ``height * scale`` pixels while every draw command keeps
using logical coordinates.

The surface knows nothing about charts. It replays the draw commands a
renderer produced, in order, and every replay starts with a ``Clear``.
"""

import base64
import logging
import math
import os
from io import BytesIO
from typing import Callable, Dict, Iterable, Optional, Tuple, Union

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.lines import Line2D
from matplotlib.patches import Circle as CirclePatch
from matplotlib.patches import FancyBboxPatch, Patch, PathPatch, Polygon, Rectangle, Wedge
from matplotlib.path import Path as MplPath

from ..constants import BACKGROUND_COLOR, DEFAULT_HEIGHT, DEFAULT_WIDTH, FONT_FAMILY
from ..exceptions import InvalidParameterError, RenderError
from .commands import (
    Area,
    Bar,
    Circle,
    Clear,
    DrawOp,
    LinearGradient,
    Line,
    Polyline,
    Rect,
    RenderResult,
    Sector,
    Text,
)
from .geometry import backing_size, effective_scale

# Use non-interactive backend for server environments
matplotlib.use("Agg")

logger = logging.getLogger("dashboard_charts.rendering.surface")

# Figure DPI at device scale 1; one logical pixel is 1/BASE_DPI inch.
BASE_DPI = 100.0
PX_TO_PT = 72.0 / BASE_DPI

GRADIENT_STEPS = 256

_VA = {"top": "top", "middle": "center", "center": "center", "bottom": "bottom", "baseline": "baseline"}


class Surface:
    """
    Addressable 2D pixel target backed by a matplotlib figure.

    A surface starts detached; renderers treat a detached or closed surface
    as unavailable and skip the render. ``attach()`` creates the figure.

    Attributes:
        width: Logical width in pixels
        height: Logical height in pixels
        device_scale: Oversampling ratio of the backing pixels
        background_color: Color painted by ``Clear`` when it names none
        fig: Matplotlib Figure (None while detached)
        ax: Matplotlib Axes spanning the figure (None while detached)

    Example:
        >>> surface = Surface.create(640, 320, device_scale=2)
        >>> surface.backing_size
        (1280, 640)
        >>> BarRenderer().render(data, surface)
        >>> surface.save("bar.png")
        >>> surface.close()
    """

    def __init__(
        self,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        device_scale: Optional[float] = None,
        background_color: str = BACKGROUND_COLOR
    ):
        self._check_size(width, height)
        self.width = float(width)
        self.height = float(height)
        self.device_scale = effective_scale(device_scale)
        self.background_color = background_color
        self.fig = None
        self.ax = None

        self._handlers: Dict[type, Callable[[DrawOp, int], None]] = {
            Clear: self._draw_clear,
            Line: self._draw_line,
            Text: self._draw_text,
            Bar: self._draw_bar,
            Area: self._draw_area,
            Polyline: self._draw_polyline,
            Circle: self._draw_circle,
            Sector: self._draw_sector,
            Rect: self._draw_rect,
        }

    @classmethod
    def create(
        cls,
        width: float = DEFAULT_WIDTH,
        height: float = DEFAULT_HEIGHT,
        device_scale: Optional[float] = None,
        background_color: str = BACKGROUND_COLOR
    ) -> "Surface":
        """Create and attach a surface in one step."""
        return cls(width, height, device_scale, background_color).attach()

    @staticmethod
    def _check_size(width: float, height: float) -> None:
        if not (width > 0 and height > 0) or not (math.isfinite(width) and math.isfinite(height)):
            raise InvalidParameterError(
                f"Surface dimensions must be positive, got {width}x{height}"
            )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def attach(self) -> "Surface":
        """Create the backing figure if the surface is not attached yet."""
        if self.is_available:
            return self

        self.fig = plt.figure(
            figsize=(self.width / BASE_DPI, self.height / BASE_DPI),
            dpi=BASE_DPI * self.device_scale
        )
        self.fig.patch.set_facecolor(self.background_color)
        self.ax = self.fig.add_axes((0.0, 0.0, 1.0, 1.0))
        self._reset_axes()

        logger.debug(
            f"Surface attached: {self.width:g}x{self.height:g} "
            f"scale={self.device_scale:g} backing={self.backing_size}"
        )
        return self

    @property
    def is_available(self) -> bool:
        """True while the backing figure exists and has not been closed."""
        return self.fig is not None and plt.fignum_exists(self.fig.number)

    @property
    def size(self) -> Tuple[float, float]:
        return self.width, self.height

    @property
    def backing_size(self) -> Tuple[int, int]:
        """Device pixel dimensions of the backing image."""
        return backing_size(self.width, self.height, self.device_scale)

    def resize(self, width: float, height: float, device_scale: Optional[float] = None) -> None:
        """
        Change the logical size (and optionally the device scale).

        Existing contents are not preserved in any meaningful way; callers
        re-render after resizing.
        """
        self._check_size(width, height)
        self.width = float(width)
        self.height = float(height)
        if device_scale is not None:
            self.device_scale = effective_scale(device_scale)

        if self.fig is not None:
            self.fig.set_dpi(BASE_DPI * self.device_scale)
            self.fig.set_size_inches(self.width / BASE_DPI, self.height / BASE_DPI, forward=False)
            self._reset_axes()

    def close(self) -> None:
        """Release the backing figure; the surface becomes unavailable."""
        if self.fig is not None:
            plt.close(self.fig)
        self.fig = None
        self.ax = None

    def __enter__(self) -> "Surface":
        return self.attach()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def save(self, output_path: Union[str, os.PathLike], format: Optional[str] = None) -> str:
        """
        Write the surface to an image file at its backing resolution.

        Returns:
            Path to saved file

        Raises:
            RenderError: If the surface is unavailable or saving fails
        """
        self._require_available()
        output_path = str(output_path)
        logger.info(f"Saving surface to {output_path} (backing={self.backing_size})")
        try:
            self.fig.savefig(
                output_path,
                dpi=self.fig.dpi,
                format=format,
                facecolor=self.fig.get_facecolor()
            )
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to save surface to {output_path}: {e}") from e

        try:
            file_size = os.path.getsize(output_path)
            logger.info(f"Surface saved: {output_path} ({file_size / 1024:.1f} KB)")
        except OSError:
            logger.info(f"Surface saved: {output_path}")

        return output_path

    def to_png_bytes(self) -> bytes:
        """Encode the surface as PNG bytes."""
        self._require_available()
        buffer = BytesIO()
        try:
            self.fig.savefig(buffer, dpi=self.fig.dpi, format="png", facecolor=self.fig.get_facecolor())
            return buffer.getvalue()
        except (OSError, ValueError) as e:
            raise RenderError(f"Failed to encode surface as PNG: {e}") from e
        finally:
            buffer.close()

    def to_base64(self) -> str:
        """PNG bytes as base64 text, for embedding in HTML."""
        return base64.b64encode(self.to_png_bytes()).decode("utf-8")

    # ------------------------------------------------------------------
    # Command replay
    # ------------------------------------------------------------------

    def execute(self, ops: Iterable[DrawOp]) -> int:
        """
        Replay draw operations in order.

        Returns:
            Number of operations executed

        Raises:
            RenderError: If the surface is unavailable or an op is unknown
        """
        self._require_available()
        count = 0
        for zorder, op in enumerate(ops, start=1):
            handler = self._handlers.get(type(op))
            if handler is None:
                raise RenderError(f"Unsupported draw operation: {type(op).__name__}")
            handler(op, zorder)
            count += 1
        return count

    def _require_available(self) -> None:
        if not self.is_available:
            raise RenderError("Surface is not attached")

    def _reset_axes(self) -> None:
        ax = self.ax
        if ax is None:
            return
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_autoscale_on(False)
        ax.set_axis_off()

    def _draw_clear(self, op: Clear, zorder: int) -> None:
        self.ax.cla()
        self.fig.patch.set_facecolor(op.color or self.background_color)
        self._reset_axes()

    def _draw_line(self, op: Line, zorder: int) -> None:
        self.ax.add_line(Line2D(
            [op.x0, op.x1], [op.y0, op.y1],
            color=op.color,
            linewidth=op.width * PX_TO_PT,
            solid_capstyle="butt",
            zorder=zorder
        ))

    def _draw_text(self, op: Text, zorder: int) -> None:
        self.ax.text(
            op.x, op.y, op.text,
            color=op.color,
            fontsize=op.size * PX_TO_PT,
            fontweight=op.weight,
            family=FONT_FAMILY,
            ha=op.ha,
            va=_VA.get(op.va, op.va),
            # matplotlib rotates counter-clockwise on screen
            rotation=-op.rotation,
            rotation_mode="anchor",
            clip_on=False,
            # labels are data, never mathtext ("$50k-$100k")
            parse_math=False,
            zorder=zorder
        )

    def _draw_bar(self, op: Bar, zorder: int) -> None:
        if op.width <= 0 or op.height <= 0:
            return
        patch = PathPatch(
            _rounded_top_path(op.x, op.y, op.width, op.height, op.radius),
            facecolor="none",
            edgecolor="none",
            zorder=zorder
        )
        self.ax.add_patch(patch)
        self._fill_gradient(patch, op.fill, op.x, op.x + op.width, zorder)

    def _draw_area(self, op: Area, zorder: int) -> None:
        if len(op.points) < 2 or op.fill.y1 <= op.fill.y0:
            return
        patch = Polygon(op.points, closed=True, facecolor="none", edgecolor="none", zorder=zorder)
        self.ax.add_patch(patch)
        xs = [p[0] for p in op.points]
        x0, x1 = min(xs), max(xs)
        if x1 <= x0:
            return
        self._fill_gradient(patch, op.fill, x0, x1, zorder)

    def _draw_polyline(self, op: Polyline, zorder: int) -> None:
        xs = [p[0] for p in op.points]
        ys = [p[1] for p in op.points]
        self.ax.add_line(Line2D(
            xs, ys,
            color=op.color,
            linewidth=op.width * PX_TO_PT,
            solid_joinstyle=op.join,
            solid_capstyle=op.cap,
            zorder=zorder
        ))

    def _draw_circle(self, op: Circle, zorder: int) -> None:
        self.ax.add_patch(CirclePatch(
            (op.cx, op.cy), op.radius,
            facecolor=op.fill or "none",
            edgecolor=op.stroke or "none",
            linewidth=op.stroke_width * PX_TO_PT,
            zorder=zorder
        ))

    def _draw_sector(self, op: Sector, zorder: int) -> None:
        if op.sweep <= 0 or op.radius <= 0:
            return
        # Data space is y-down, so matplotlib's counter-clockwise angles land
        # clockwise on screen, matching the command convention.
        width = op.radius - op.inner_radius if op.inner_radius > 0 else None
        self.ax.add_patch(Wedge(
            (op.cx, op.cy), op.radius,
            math.degrees(op.start), math.degrees(op.end),
            width=width,
            facecolor=op.fill,
            edgecolor=op.stroke or "none",
            linewidth=op.stroke_width * PX_TO_PT,
            zorder=zorder
        ))

    def _draw_rect(self, op: Rect, zorder: int) -> None:
        if op.radius > 0:
            patch: Patch = FancyBboxPatch(
                (op.x, op.y), op.width, op.height,
                boxstyle=f"round,pad=0,rounding_size={op.radius}",
                facecolor=op.fill,
                edgecolor="none",
                zorder=zorder
            )
        else:
            patch = Rectangle((op.x, op.y), op.width, op.height, facecolor=op.fill, edgecolor="none", zorder=zorder)
        self.ax.add_patch(patch)

    def _fill_gradient(self, clip: Patch, gradient: LinearGradient, x0: float, x1: float, zorder: int) -> None:
        """Paint a vertical gradient image clipped to ``clip``."""
        t = np.linspace(0.0, 1.0, GRADIENT_STEPS)[:, None]
        start = np.asarray(gradient.start, dtype=float)
        end = np.asarray(gradient.end, dtype=float)
        rgba = (start + (end - start) * t)[:, None, :]

        image = self.ax.imshow(
            rgba,
            extent=(x0, x1, gradient.y1, gradient.y0),
            origin="upper",
            aspect="auto",
            interpolation="bilinear",
            zorder=zorder
        )
        image.set_clip_path(clip)


def _rounded_top_path(x: float, y: float, width: float, height: float, radius: float) -> MplPath:
    """Rectangle outline with quadratic rounded top corners."""
    r = max(0.0, min(radius, width / 2, height))
    vertices = [
        (x + r, y),
        (x + width - r, y),
        (x + width, y), (x + width, y + r),
        (x + width, y + height),
        (x, y + height),
        (x, y + r),
        (x, y), (x + r, y),
        (x + r, y),
    ]
    codes = [
        MplPath.MOVETO,
        MplPath.LINETO,
        MplPath.CURVE3, MplPath.CURVE3,
        MplPath.LINETO,
        MplPath.LINETO,
        MplPath.LINETO,
        MplPath.CURVE3, MplPath.CURVE3,
        MplPath.CLOSEPOLY,
    ]
    return MplPath(vertices, codes)


def surface_ready(surface: Optional[Surface], kind: str) -> bool:
    """True when ``surface`` can be drawn on; logs the skip otherwise."""
    if surface is None or not surface.is_available:
        logger.debug(f"Surface unavailable, skipping {kind} render")
        return False
    return True


def draw_result(surface: Surface, result: Optional[RenderResult]) -> Optional[RenderResult]:
    """
    Size the surface for ``result`` and replay its operations.

    A ``None`` result (empty dataset) leaves the surface untouched.

    Raises:
        RenderError: If matplotlib fails while drawing
    """
    if result is None:
        logger.debug("Nothing to draw, surface left as is")
        return None

    surface.resize(result.width, result.height)
    try:
        count = surface.execute(result.ops)
    except RenderError:
        raise
    except (ValueError, TypeError, RuntimeError) as e:
        logger.error(f"Error while drawing {result.kind} chart: {e}", exc_info=True)
        raise RenderError(f"Failed to draw {result.kind} chart: {e}") from e

    logger.debug(f"Executed {count} draw operations for {result.kind} chart")
    return result
