"""Configuration management for the isochrone range load test.

Settings are read from environment variables (or a ``.env`` file) and
resolved into an immutable :class:`BenchmarkConfig` for the scenario core.

Usage:
    from ors_bench.config import get_settings

    settings = get_settings()
    config = settings.to_benchmark_config()

    # Grouped access
    settings.logging.level
"""

from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.enums import FeedExhaustionPolicy, TestUnit
from .benchmark import BenchmarkConfig
from .logging import LoggingConfig


def _split_csv(value: str | None) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()] if value else []


class Settings(BaseSettings):
    """Benchmark settings with environment variable support.

    List-valued settings are comma-separated strings, e.g.
    ``QUERY_SIZES=1,5,10``.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    # Test dimensions
    source_files: str = Field(default="", description="Comma-separated CSV source files")
    query_sizes: str = Field(default="1", description="Comma-separated locations per request")
    ranges: str = Field(default="300", description="Comma-separated range values")
    test_unit: TestUnit = Field(default=TestUnit.DISTANCE)
    parallel_execution: bool = Field(default=False)

    # Target
    base_url: str = Field(default="http://localhost:8082/ors")
    target_profile: str = Field(default="driving-car", min_length=1)
    num_concurrent_users: int = Field(default=1, ge=1)

    # Source fields
    field_lon: str = Field(default="longitude")
    field_lat: str = Field(default="latitude")
    field_profile: str = Field(default="profile")
    feed_exhaustion_policy: FeedExhaustionPolicy = Field(
        default=FeedExhaustionPolicy.FAIL,
        description="What a feed does once all records are used: 'fail' or 'cycle'",
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_file: str | None = Field(default=None)
    log_max_size_mb: int = Field(default=100, ge=1)
    log_backup_count: int = Field(default=5, ge=1)

    @field_validator("test_unit", "feed_exhaustion_policy", mode="before")
    @classmethod
    def normalize_case(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        """Ensure the base URL names a protocol."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip("/")

    def get_source_files(self) -> List[str]:
        return _split_csv(self.source_files)

    def get_query_sizes(self) -> List[int]:
        return [int(size) for size in _split_csv(self.query_sizes)]

    def get_ranges(self) -> List[float]:
        return [float(value) for value in _split_csv(self.ranges)]

    @property
    def logging(self) -> LoggingConfig:
        return LoggingConfig(
            log_level=self.log_level,
            log_format=self.log_format,
            log_file=self.log_file,
            log_max_size_mb=self.log_max_size_mb,
            log_backup_count=self.log_backup_count,
        )

    def to_benchmark_config(self) -> BenchmarkConfig:
        """Resolve the settings into the configuration consumed by the core."""
        return BenchmarkConfig(
            source_files=self.get_source_files(),
            target_profile=self.target_profile,
            num_concurrent_users=self.num_concurrent_users,
            query_sizes=self.get_query_sizes(),
            ranges=self.get_ranges(),
            test_unit=self.test_unit,
            base_url=self.base_url,
            parallel_execution=self.parallel_execution,
            field_lon=self.field_lon,
            field_lat=self.field_lat,
            field_profile=self.field_profile,
            feed_exhaustion_policy=self.feed_exhaustion_policy,
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, created on first use.

    Call ``get_settings.cache_clear()`` to re-read the environment.
    """
    return Settings()


__all__ = [
    "Settings",
    "get_settings",
    "BenchmarkConfig",
    "LoggingConfig",
]
