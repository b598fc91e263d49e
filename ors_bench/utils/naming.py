"""Helpers for deriving display names from source paths."""

from pathlib import PurePath


def get_file_name_without_extension(path: str) -> str:
    """Return the final path component with its last extension removed.

    ``"data/points.ors.csv"`` becomes ``"points.ors"``; names without an
    extension are returned unchanged.
    """
    return PurePath(path).stem


def format_scenario_name(source_file: str, batch_size: int) -> str:
    """Scenario name shown by the harness for one matrix cell."""
    return f"Locations ({batch_size}) | {get_file_name_without_extension(source_file)}"
