"""Closed variants for range types, test units and execution modes."""

from enum import Enum
from typing import List


class RangeType(str, Enum):
    """Unit of the isochrone reachability bound."""

    DISTANCE = "distance"
    TIME = "time"

    @property
    def wire_value(self) -> str:
        """Canonical string sent as ``range_type`` in request bodies."""
        return self.value


class TestUnit(str, Enum):
    """Which kind of isochrones a benchmark run exercises."""

    # Keep pytest from collecting this enum as a test class
    __test__ = False

    DISTANCE = "distance"
    TIME = "time"

    def range_types(self) -> List[RangeType]:
        """Range types covered by this test unit."""
        if self is TestUnit.DISTANCE:
            return [RangeType.DISTANCE]
        return [RangeType.TIME]


class ConcurrencyMode(str, Enum):
    """Whether the scenarios of a run are executed in parallel or one after another."""

    PARALLEL = "parallel"
    SEQUENTIAL = "sequential"

    @classmethod
    def from_flag(cls, parallel: bool) -> "ConcurrencyMode":
        return cls.PARALLEL if parallel else cls.SEQUENTIAL

    @property
    def label(self) -> str:
        return self.value


class FeedExhaustionPolicy(str, Enum):
    """What a data feed does once every record has been handed out.

    ``FAIL`` hands out a final short batch and then raises on the next draw.
    ``CYCLE`` wraps around to the first record so every batch is full.
    """

    FAIL = "fail"
    CYCLE = "cycle"
