"""
Command-line interface for DashboardCharts package.

Provides an argparse-based CLI with subcommands for rendering a chart image
from a dataset file and for printing the legend a chart would show.

Usage:
    dashboard-charts render --kind bar --data companies.json --output companies.png
    dashboard-charts render --kind donut --data sponsored.yaml --output sponsored.png --scale 2
    dashboard-charts legend --kind pie --data sources.json
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import List, Optional

from .api import build_chart, create_chart
from .config import Config
from .constants import CHART_KINDS
from .exceptions import DashboardChartsError
from .logging_config import setup_logging
from .models import load_dataset


def setup_logging_from_args(args: argparse.Namespace) -> None:
    """
    Configure logging based on command-line arguments.

    Args:
        args: Parsed command-line arguments with verbose, quiet, log_file
    """
    if getattr(args, 'silent', False):
        verbosity = -2  # ERROR
    elif getattr(args, 'quiet', False):
        verbosity = -1  # WARNING
    elif getattr(args, 'verbose', False):
        verbosity = 1  # DEBUG
    else:
        verbosity = 0  # INFO

    log_file = getattr(args, 'log_file', None)
    setup_logging(verbosity=verbosity, log_file=log_file)


def parse_palette(palette_str: str) -> List[str]:
    """
    Parse a comma-separated palette.

    Raises:
        argparse.ArgumentTypeError: If no color is given
    """
    colors = [c.strip() for c in palette_str.split(",") if c.strip()]
    if not colors:
        raise argparse.ArgumentTypeError("Palette must contain at least one color")
    return colors


def load_config(config_path: Optional[str]) -> Config:
    """
    Load configuration from file, or the defaults when no path is given.

    Raises:
        DashboardChartsError: If the file cannot be loaded or is invalid
    """
    if config_path is None:
        return Config()

    try:
        config = Config.load_from_file(config_path)
        config.validate()
    except (OSError, ValueError) as e:
        raise DashboardChartsError(f"Error loading config from {config_path}: {e}") from e
    return config


def _cli_print(args: argparse.Namespace, *values: object, **kwargs) -> None:
    """Print unless --silent was provided."""
    if getattr(args, "silent", False):
        return
    print(*values, **kwargs)


def cmd_render(args: argparse.Namespace) -> int:
    """Handle 'render' subcommand."""
    _cli_print(args, f"Rendering {args.kind} chart from {args.data}")

    try:
        config = load_config(args.config)
        if args.scale is not None:
            config = replace(config, device_scale=args.scale)

        size = None
        if args.width is not None or args.height is not None:
            size = (
                args.width if args.width is not None else config.default_width,
                args.height if args.height is not None else config.default_height,
            )

        data = load_dataset(args.data, args.kind)
        output_path = create_chart(
            kind=args.kind,
            data=data,
            output_path=args.output,
            color=args.color,
            palette=args.palette,
            size=size,
            config=config,
            annotate=not args.no_annotate
        )

        if args.legend_json:
            result = build_chart(
                args.kind, data,
                color=args.color, palette=args.palette, size=size, config=config
            )
            with open(args.legend_json, "w") as f:
                json.dump(result.legend_dicts(), f, indent=2)
            _cli_print(args, f"  Legend: {args.legend_json}")

        if getattr(args, "silent", False):
            print(str(output_path))
        else:
            print(f"Success! Chart saved to: {output_path}")
        return 0

    except DashboardChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_legend(args: argparse.Namespace) -> int:
    """Handle 'legend' subcommand."""
    try:
        config = load_config(args.config)
        result = build_chart(
            args.kind, args.data,
            color=args.color, palette=args.palette, config=config
        )
    except DashboardChartsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    payload = {
        "kind": args.kind,
        "legend": result.legend_dicts() if result is not None else [],
        "summary": result.summary.to_dict() if result is not None and result.summary else None,
    }
    print(json.dumps(payload, indent=2))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="dashboard-charts",
        description="Render dashboard bar, line, pie and donut charts",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    def _add_common_args(p: argparse.ArgumentParser) -> None:
        """Logging options, accepted both before and after the subcommand."""
        p.add_argument(
            "-v", "--verbose",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Enable DEBUG logging"
        )
        p.add_argument(
            "-q", "--quiet",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Suppress INFO logging (WARNING+ only)"
        )
        p.add_argument(
            "--silent",
            action="store_true",
            default=argparse.SUPPRESS,
            help="Suppress most console output (prints only the output path)"
        )
        p.add_argument(
            "--log-file",
            type=str,
            default=argparse.SUPPRESS,
            help="Write logs to file"
        )

    def _add_chart_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--kind",
            choices=CHART_KINDS,
            required=True,
            help="Chart kind"
        )
        p.add_argument(
            "--data",
            type=str,
            required=True,
            help="Dataset file (JSON/YAML list of records)"
        )
        p.add_argument(
            "--color",
            type=str,
            help="Base color for bar/line charts (e.g. '#0070f3')"
        )
        p.add_argument(
            "--palette",
            type=parse_palette,
            help="Comma-separated colors for pie/donut charts"
        )
        p.add_argument(
            "--config",
            type=str,
            help="Config file path (YAML/JSON)"
        )

    _add_common_args(parser)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========================================================================
    # render subcommand
    # ========================================================================
    parser_render = subparsers.add_parser(
        "render",
        help="Render a chart image"
    )
    _add_common_args(parser_render)
    _add_chart_args(parser_render)
    parser_render.add_argument(
        "--output",
        type=str,
        required=True,
        help="Output image path (.png, .svg, .pdf)"
    )
    parser_render.add_argument(
        "--width",
        type=float,
        help="Logical width for bar/line charts"
    )
    parser_render.add_argument(
        "--height",
        type=float,
        help="Logical height for bar/line charts"
    )
    parser_render.add_argument(
        "--scale",
        type=float,
        help="Device scale factor (backing pixels per logical pixel)"
    )
    parser_render.add_argument(
        "--no-annotate",
        action="store_true",
        help="Do not paint legends or the donut readout onto pie/donut images"
    )
    parser_render.add_argument(
        "--legend-json",
        type=str,
        help="Also write the legend entries to this JSON file"
    )
    parser_render.set_defaults(func=cmd_render)

    # ========================================================================
    # legend subcommand
    # ========================================================================
    parser_legend = subparsers.add_parser(
        "legend",
        help="Print legend entries and summary as JSON"
    )
    _add_common_args(parser_legend)
    _add_chart_args(parser_legend)
    parser_legend.set_defaults(func=cmd_legend)

    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    setup_logging_from_args(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
