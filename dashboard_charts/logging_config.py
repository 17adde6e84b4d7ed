"""
Logging setup for the chart engine.

Everything the package logs goes through the ``dashboard_charts`` logger:
builders report degenerate datasets at DEBUG, the API and CLI report each
create/save step at INFO. The CLI maps -v/-q/--silent onto ``verbosity``;
library users get INFO on stdout from the import-time call in
``dashboard_charts/__init__.py``.
"""

import logging
import os
import sys
from typing import Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

LOGGER_NAME = "dashboard_charts"
LOG_LEVEL_ENV = "DASHBOARD_CHARTS_LOG_LEVEL"

# -v, default, -q, --silent
_VERBOSITY_LEVELS = {
    1: logging.DEBUG,
    0: logging.INFO,
    -1: logging.WARNING,
    -2: logging.ERROR,
}

# matplotlib logs font lookups at DEBUG/INFO on every new surface
_NOISY_LOGGERS = ("matplotlib", "matplotlib.font_manager", "PIL")


def level_for_verbosity(verbosity: int) -> int:
    """
    Log level for a CLI verbosity, honoring DASHBOARD_CHARTS_LOG_LEVEL.

    Verbosity is clamped to [-2, 1]; a recognized level name in the
    environment wins over it.
    """
    level = _VERBOSITY_LEVELS[max(-2, min(1, verbosity))]
    env_level = os.environ.get(LOG_LEVEL_ENV, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)
    return level


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> None:
    """
    Install the chart engine's handlers, replacing any from a previous call.

    Args:
        verbosity: 1 for DEBUG, 0 for INFO, -1 for WARNING, -2 for ERROR
        log_file: Also append everything (DEBUG and up) to this file
        format_string: Console format; defaults to timestamps at INFO and
            above, bare "LEVEL: message" when quieter

    Example:
        >>> setup_logging(verbosity=1)
        >>> setup_logging(log_file="charts.log")
    """
    level = level_for_verbosity(verbosity)
    if format_string is None:
        format_string = DEFAULT_FORMAT if verbosity >= 0 else SIMPLE_FORMAT

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # resolved per call so a rebound sys.stdout is picked up
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a')
        except OSError as e:
            logger.warning(f"Cannot write chart log to {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(file_handler)
            logger.info(f"Logging to file: {log_file}")

    logger.debug(f"Chart logging at {logging.getLevelName(level)}")


def get_logger(name: str) -> logging.Logger:
    """
    Logger under the ``dashboard_charts`` hierarchy.

    Names outside the package (plugins, example scripts) are nested under
    it so they share the configured handlers.

    Example:
        >>> get_logger("examples.basic_chart").name
        'dashboard_charts.examples.basic_chart'
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
