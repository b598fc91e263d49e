"""Error models and exception classes for the isochrone load test core."""

import time
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorType(str, Enum):
    """Error type enumeration."""

    LOAD = "load"
    MISSING_DATA = "missing_data"
    CORRUPT_DATA = "corrupt_data"
    ASSEMBLY = "assembly"
    FEED_EXHAUSTED = "feed_exhausted"


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: Optional[str] = Field(None, description="Field name the error relates to")
    message: str = Field(..., description="Human-readable error message")
    code: Optional[str] = Field(None, description="Machine-readable error code")


class ErrorResponse(BaseModel):
    """Standardized error report model."""

    model_config = ConfigDict(use_enum_values=True)

    error: str = Field(..., description="Main error message")
    error_type: ErrorType = Field(..., description="Error category")
    details: Optional[List[ErrorDetail]] = Field(None, description="Additional error details")
    scenario: Optional[str] = Field(None, description="Scenario the error occurred in")
    timestamp: float = Field(default_factory=time.time, description="Error timestamp")


# Custom Exception Classes


class BenchmarkException(Exception):
    """Base exception for the load test core."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.LOAD,
        details: Optional[List[ErrorDetail]] = None,
        scenario: Optional[str] = None,
    ):
        self.message = message
        self.error_type = error_type
        self.details = details or []
        self.scenario = scenario
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert exception to error report model."""
        return ErrorResponse(
            error=self.message,
            error_type=self.error_type,
            details=self.details if self.details else None,
            scenario=self.scenario,
        )


class SourceLoadError(BenchmarkException):
    """A source file could not be read or parsed."""

    def __init__(self, source: str, reason: str, **kwargs):
        self.source = source
        super().__init__(
            message=f"Failed to load source file {source}: {reason}",
            error_type=ErrorType.LOAD,
            **kwargs,
        )


class CoordinateParseError(BenchmarkException):
    """A coordinate value is present but is not a number."""

    def __init__(self, message: str = "Failed to parse coordinate values", **kwargs):
        super().__init__(message=message, error_type=ErrorType.CORRUPT_DATA, **kwargs)


class RequestBodyCreationError(BenchmarkException):
    """The request body could not be built or serialized."""

    def __init__(self, message: str = "Failed to create request body", **kwargs):
        super().__init__(message=message, error_type=ErrorType.ASSEMBLY, **kwargs)


class FeedExhaustedError(BenchmarkException):
    """The data feed has no records left to hand out."""

    def __init__(self, source: str, **kwargs):
        self.source = source
        super().__init__(
            message=f"Feed for {source} is exhausted",
            error_type=ErrorType.FEED_EXHAUSTED,
            **kwargs,
        )
