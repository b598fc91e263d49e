"""Resolved benchmark configuration consumed by the scenario core."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models.enums import ConcurrencyMode, FeedExhaustionPolicy, TestUnit


class BenchmarkConfig(BaseModel):
    """Immutable view of the isochrone range benchmark settings."""

    model_config = ConfigDict(frozen=True)

    source_files: List[str] = Field(default_factory=list)
    target_profile: str = Field(default="driving-car", min_length=1)
    num_concurrent_users: int = Field(default=1, ge=1)
    query_sizes: List[int] = Field(default_factory=lambda: [1])
    ranges: List[float] = Field(default_factory=lambda: [300.0])
    test_unit: TestUnit = Field(default=TestUnit.DISTANCE)
    base_url: str = Field(default="http://localhost:8082/ors")
    parallel_execution: bool = Field(default=False)
    field_lon: str = Field(default="longitude")
    field_lat: str = Field(default="latitude")
    field_profile: str = Field(default="profile")
    feed_exhaustion_policy: FeedExhaustionPolicy = Field(default=FeedExhaustionPolicy.FAIL)

    @field_validator("query_sizes")
    @classmethod
    def validate_query_sizes(cls, v):
        """Batch sizes must be positive."""
        if any(size < 1 for size in v):
            raise ValueError("query sizes must be positive integers")
        return v

    @field_validator("test_unit", "feed_exhaustion_policy", mode="before")
    @classmethod
    def normalize_case(cls, v):
        """Accept ``TIME`` as well as ``time``."""
        return v.lower() if isinstance(v, str) else v

    @property
    def concurrency_mode(self) -> ConcurrencyMode:
        return ConcurrencyMode.from_flag(self.parallel_execution)

    @property
    def isochrones_path(self) -> str:
        return f"/v2/isochrones/{self.target_profile}"
