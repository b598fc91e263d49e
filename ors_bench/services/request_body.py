"""Request body assembly for the isochrones endpoint."""

import json
from typing import Optional, Sequence

import structlog
from pydantic import ValidationError

from ..models.enums import RangeType
from ..models.errors import RequestBodyCreationError
from ..models.request import LocationBatch, RequestBody
from ..utils.logging import get_logger

logger = get_logger(__name__)


def build_request_body(
    batch: LocationBatch,
    range_type: RangeType,
    ranges: Sequence[float],
) -> RequestBody:
    """Create the request body value for one iteration."""
    try:
        return RequestBody(
            locations=list(batch.locations),
            range_type=range_type.wire_value,
            range=list(ranges),
        )
    except ValidationError as e:
        raise RequestBodyCreationError(f"Invalid request body values: {e.error_count()} error(s)") from e


def serialize_request_body(body: RequestBody) -> str:
    """Serialize to the wire JSON; NaN and infinity are rejected."""
    payload = {
        "locations": [[lon, lat] for lon, lat in body.locations],
        "range_type": body.range_type,
        "range": list(body.range_values),
    }
    try:
        return json.dumps(payload, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise RequestBodyCreationError("Failed to serialize request body") from e


def create_request_body(
    batch: LocationBatch,
    range_type: RangeType,
    ranges: Sequence[float],
    log: Optional[structlog.BoundLogger] = None,
) -> str:
    """Build and serialize the request body for one iteration."""
    log = log or logger
    body = serialize_request_body(build_request_body(batch, range_type, ranges))
    log.debug("Created request body", body=body)
    return body


def parse_request_body(data: str) -> RequestBody:
    """Read a serialized request body back into its model."""
    return RequestBody.model_validate_json(data)
