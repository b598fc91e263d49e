"""Data models for scenario descriptors and injection profiles."""

from dataclasses import dataclass
from typing import Sequence

from ..utils.naming import get_file_name_without_extension
from .enums import ConcurrencyMode, RangeType


@dataclass(frozen=True)
class InjectionProfile:
    """Open workload: every user starts at time zero, no ramp-up."""

    concurrent_user_count: int

    @property
    def spawn_rate(self) -> float:
        """Users started per second; equal to the user count so all start at once."""
        return float(max(self.concurrent_user_count, 1))


@dataclass(frozen=True)
class ScenarioDescriptor:
    """One cell of the test matrix."""

    name: str
    source_file: str
    batch_size: int
    range_type: RangeType
    concurrency_mode: ConcurrencyMode

    @property
    def source_name(self) -> str:
        return get_file_name_without_extension(self.source_file)

    def group_name(self, num_concurrent_users: int, ranges: Sequence[float]) -> str:
        """Reporting group shared by scenarios with the same mode, unit and source."""
        return (
            f"Isochrones {self.concurrency_mode.label} {self.range_type.wire_value} - "
            f"{self.source_name} - Users {num_concurrent_users} - Ranges {list(ranges)}"
        )
