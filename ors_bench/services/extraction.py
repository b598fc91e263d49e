"""Coordinate extraction from per-iteration feed values."""

import re
from typing import Any, List, Mapping, Optional, Sequence

import structlog

from ..models.errors import CoordinateParseError, ErrorDetail
from ..models.request import Coordinate, LocationBatch
from ..utils.logging import get_logger

logger = get_logger(__name__)

# Plain ASCII decimal or scientific notation, no digit group separators.
NUMBER_PATTERN = re.compile(
    r"[+-]?(?:nan|inf|infinity|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.ASCII | re.IGNORECASE,
)


def _parse_double(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    text = str(value).strip()
    if not NUMBER_PATTERN.fullmatch(text):
        raise ValueError(f"not a number: {value!r}")
    return float(text)


def process_coordinates(
    lons: Sequence[Any],
    lats: Sequence[Any],
    batch_size: int,
    log: Optional[structlog.BoundLogger] = None,
) -> LocationBatch:
    """Pair up longitude and latitude values into parsed coordinates.

    Only the first ``min(batch_size, len(lons), len(lats))`` indices are
    read. An index where either value is ``None`` is skipped with a warning.
    A value that is present but not numeric raises
    :class:`CoordinateParseError` and nothing is returned.
    """
    log = log or logger
    size = max(min(batch_size, len(lons), len(lats)), 0)

    locations: List[Coordinate] = []
    skipped: List[int] = []
    for i in range(size):
        lon = lons[i]
        lat = lats[i]

        if lon is None or lat is None:
            log.warning("Null coordinate", index=i, lon=lon, lat=lat)
            skipped.append(i)
            continue

        parsed = []
        for axis, value in (("lon", lon), ("lat", lat)):
            try:
                parsed.append(_parse_double(value))
            except (TypeError, ValueError) as e:
                raise CoordinateParseError(
                    f"Failed to parse coordinate values at index {i}: lon={lon!r}, lat={lat!r}",
                    details=[ErrorDetail(field=axis, message=f"not a number: {value!r}", code=str(i))],
                ) from e
        locations.append((parsed[0], parsed[1]))

    return LocationBatch(locations=tuple(locations), skipped=tuple(skipped))


def extract_locations(
    values: Mapping[str, Sequence[Any]],
    batch_size: int,
    field_lon: str,
    field_lat: str,
    log: Optional[structlog.BoundLogger] = None,
) -> LocationBatch:
    """Build the location batch for one iteration from drawn feed values.

    ``values`` maps field names to the values of every record in the draw.
    Missing longitude or latitude fields are logged as an error and yield an
    empty batch; the request built from it is left to fail its own check.
    """
    log = log or logger
    log.debug("Creating locations list", batch_size=batch_size, field_lon=field_lon, field_lat=field_lat)

    lons = values.get(field_lon)
    lats = values.get(field_lat)
    if lons is None or lats is None:
        log.error(
            "Feed values are missing",
            field_lon=field_lon,
            field_lat=field_lat,
            lon_present=lons is not None,
            lat_present=lats is not None,
        )
        return LocationBatch()

    log.debug("Feed values", lon_size=len(lons), lat_size=len(lats))
    batch = process_coordinates(lons, lats, batch_size, log=log)

    log.debug("Created location list", pairs=len(batch), skipped=len(batch.skipped))
    if batch.locations:
        log.debug("Sample coordinate", coordinate=list(batch.locations[0]))
    return batch
