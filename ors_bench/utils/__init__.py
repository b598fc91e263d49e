"""Utility modules for the isochrone load test."""

from .logging import get_logger, setup_logging
from .naming import format_scenario_name, get_file_name_without_extension

__all__ = [
    "setup_logging",
    "get_logger",
    "format_scenario_name",
    "get_file_name_without_extension",
]
