"""Data models for the isochrone load test."""

from .enums import ConcurrencyMode, FeedExhaustionPolicy, RangeType, TestUnit
from .errors import (
    BenchmarkException,
    CoordinateParseError,
    ErrorDetail,
    ErrorResponse,
    ErrorType,
    FeedExhaustedError,
    RequestBodyCreationError,
    SourceLoadError,
)
from .request import Coordinate, LocationBatch, RequestBody
from .scenario import InjectionProfile, ScenarioDescriptor

__all__ = [
    # Enums
    "ConcurrencyMode",
    "FeedExhaustionPolicy",
    "RangeType",
    "TestUnit",
    # Errors
    "BenchmarkException",
    "CoordinateParseError",
    "ErrorDetail",
    "ErrorResponse",
    "ErrorType",
    "FeedExhaustedError",
    "RequestBodyCreationError",
    "SourceLoadError",
    # Payloads
    "Coordinate",
    "LocationBatch",
    "RequestBody",
    # Scenarios
    "InjectionProfile",
    "ScenarioDescriptor",
]
