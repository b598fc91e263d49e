"""Request payload models for the isochrones endpoint."""

from dataclasses import dataclass, field
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

Coordinate = Tuple[float, float]


@dataclass(frozen=True)
class LocationBatch:
    """Parsed ``[lon, lat]`` pairs of one iteration, in source order.

    ``skipped`` lists the draw indices dropped because a value was missing.
    """

    locations: Tuple[Coordinate, ...] = ()
    skipped: Tuple[int, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self):
        return iter(self.locations)

    def as_lists(self) -> List[List[float]]:
        return [[lon, lat] for lon, lat in self.locations]


class RequestBody(BaseModel):
    """Body of ``POST /v2/isochrones/{profile}``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    locations: List[Tuple[float, float]] = Field(default_factory=list)
    range_type: str = Field(..., description="Canonical range type string")
    range_values: List[float] = Field(default_factory=list, alias="range")
