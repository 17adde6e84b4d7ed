"""
Configuration management for DashboardCharts package.

This module provides configuration options for chart rendering including
device scaling, colors, palettes, radial chart sizes, and label density.
"""

import json
import yaml
from dataclasses import dataclass, asdict, field, fields
from pathlib import Path
from typing import List

from .constants import (
    BACKGROUND_COLOR,
    DEFAULT_BAR_COLOR,
    DEFAULT_LINE_COLOR,
    DEFAULT_PIE_PALETTE,
    DEFAULT_DONUT_PALETTE,
    PIE_SIZE,
    DONUT_SIZE,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    LABEL_MAX_LENGTH,
    MAX_LINE_LABELS,
    GRIDLINE_COUNT,
)


@dataclass
class Config:
    """Configuration for dashboard chart rendering.

    Attributes:
        device_scale: Oversampling ratio applied to the backing pixels of the
            drawing surface. Drawing coordinates stay in logical pixels.
        background_color: Surface color used when the surface is cleared.
        bar_color: Base color of the bar chart.
        line_color: Base color of the line chart.
        pie_palette: Cyclic palette for pie sectors.
        donut_palette: Cyclic palette for donut ring segments.
        pie_size: Side of the square pie surface in logical pixels.
        donut_size: Side of the square donut surface in logical pixels.
        default_width: Container width used for bar/line charts when the
            caller does not supply a box.
        default_height: Container height used for bar/line charts when the
            caller does not supply a box.
        label_max_length: Category labels longer than this are truncated.
        max_line_labels: Upper bound on the number of line chart date labels.
        gridline_count: Number of equal horizontal gridline divisions.
        output_dir: Directory for saving rendered charts.
    """

    device_scale: float = 1.0
    background_color: str = BACKGROUND_COLOR
    bar_color: str = DEFAULT_BAR_COLOR
    line_color: str = DEFAULT_LINE_COLOR
    pie_palette: List[str] = field(default_factory=lambda: list(DEFAULT_PIE_PALETTE))
    donut_palette: List[str] = field(default_factory=lambda: list(DEFAULT_DONUT_PALETTE))
    pie_size: float = PIE_SIZE
    donut_size: float = DONUT_SIZE
    default_width: float = DEFAULT_WIDTH
    default_height: float = DEFAULT_HEIGHT
    label_max_length: int = LABEL_MAX_LENGTH
    max_line_labels: int = MAX_LINE_LABELS
    gridline_count: int = GRIDLINE_COUNT
    output_dir: Path = field(default_factory=lambda: Path("./output"))

    def __post_init__(self):
        """Normalize paths and palettes loaded from plain data."""
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        self.pie_palette = list(self.pie_palette)
        self.donut_palette = list(self.donut_palette)

    @classmethod
    def load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a YAML or JSON file.

        Args:
            path: Path to configuration file (.yaml, .yml, or .json).

        Returns:
            Config instance with loaded settings.

        Raises:
            ValueError: If the file format is not supported, the file cannot be
                parsed, or it names unknown keys.
            FileNotFoundError: If file does not exist.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r') as f:
                if path.suffix in ['.yaml', '.yml']:
                    data = yaml.safe_load(f)
                elif path.suffix == '.json':
                    data = json.load(f)
                else:
                    raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")
        except yaml.YAMLError as e:
            raise ValueError(f"Could not parse configuration file {path}: {e}") from e

        data = data or {}
        unknown = sorted(set(data) - {fld.name for fld in fields(cls)})
        if unknown:
            raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")
        if 'output_dir' in data:
            data['output_dir'] = Path(data['output_dir'])

        return cls(**data)

    def save_to_file(self, path: Path) -> None:
        """Save configuration to a YAML or JSON file.

        Args:
            path: Path where configuration should be saved.

        Raises:
            ValueError: If file format is not supported.
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = asdict(self)
        data['output_dir'] = str(data['output_dir'])

        with open(path, 'w') as f:
            if path.suffix in ['.yaml', '.yml']:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False)
            elif path.suffix == '.json':
                json.dump(data, f, indent=2)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .yaml, .yml, or .json")

    def validate(self) -> bool:
        """Validate configuration parameters.

        Returns:
            True if configuration is valid.

        Raises:
            ValueError: If any configuration parameter is invalid.
        """
        if self.device_scale <= 0:
            raise ValueError("device_scale must be positive")

        for name in ("background_color", "bar_color", "line_color"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ValueError(f"{name} must be a non-empty string")

        if not self.pie_palette:
            raise ValueError("pie_palette must contain at least one color")

        if not self.donut_palette:
            raise ValueError("donut_palette must contain at least one color")

        if self.pie_size <= 0 or self.donut_size <= 0:
            raise ValueError("Radial chart sizes must be positive")

        if self.default_width <= 0 or self.default_height <= 0:
            raise ValueError("Default surface dimensions must be positive")

        if not isinstance(self.label_max_length, int) or self.label_max_length < 1:
            raise ValueError("label_max_length must be an integer >= 1")

        if not isinstance(self.max_line_labels, int) or self.max_line_labels < 1:
            raise ValueError("max_line_labels must be an integer >= 1")

        if not isinstance(self.gridline_count, int) or self.gridline_count < 1:
            raise ValueError("gridline_count must be an integer >= 1")

        return True

    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get a Config instance with default settings.

    Returns:
        Config instance initialized with default values.
    """
    return Config()
