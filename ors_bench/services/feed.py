"""CSV-backed data feeds that hand out fixed-size record batches."""

import csv
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from ..models.enums import FeedExhaustionPolicy
from ..models.errors import FeedExhaustedError, SourceLoadError
from ..utils.logging import get_logger

logger = get_logger(__name__)

SourceRecord = Dict[str, Any]


def load_records(source_file: str) -> List[SourceRecord]:
    """Read every row of a CSV file with a header row.

    Empty cells and cells missing from short rows are stored as ``None``.
    """
    path = Path(source_file)
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle)
            if not reader.fieldnames:
                raise SourceLoadError(source_file, "no header row")
            records = []
            for row in reader:
                row.pop(None, None)  # surplus cells have no column name
                records.append({key: (value if value != "" else None) for key, value in row.items()})
    except OSError as e:
        raise SourceLoadError(source_file, str(e)) from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise SourceLoadError(source_file, f"malformed CSV: {e}") from e
    return records


def filter_records_by_profile(
    records: Sequence[SourceRecord],
    target_profile: str,
    field_profile: str = "profile",
) -> List[SourceRecord]:
    """Keep records of the target profile; all records if there is no profile column."""
    if not records or field_profile not in records[0]:
        return list(records)
    return [record for record in records if record.get(field_profile) == target_profile]


class DataFeedPartitioner:
    """Hands out consecutive, disjoint batches of source records.

    The records are loaded and filtered once at construction. Each call to
    :meth:`next_batch` takes the next ``n`` records under a lock, so
    concurrent iterations of the same scenario never share a record.
    """

    def __init__(
        self,
        source_file: str,
        target_profile: str,
        field_profile: str = "profile",
        exhaustion_policy: FeedExhaustionPolicy = FeedExhaustionPolicy.FAIL,
        records: Optional[Sequence[SourceRecord]] = None,
    ):
        self.source_file = source_file
        self.target_profile = target_profile
        self.exhaustion_policy = exhaustion_policy
        if records is None:
            records = load_records(source_file)
        self._records: Tuple[SourceRecord, ...] = tuple(
            filter_records_by_profile(records, target_profile, field_profile)
        )
        self._position = 0
        self._lock = threading.Lock()
        logger.info(
            "Processing coordinates for profile",
            source_file=source_file,
            profile=target_profile,
            count=len(self._records),
        )

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> Tuple[SourceRecord, ...]:
        return self._records

    @property
    def remaining(self) -> int:
        """Records left before the feed is exhausted; always the full size when cycling."""
        if self.exhaustion_policy is FeedExhaustionPolicy.CYCLE:
            return len(self._records)
        with self._lock:
            return len(self._records) - self._position

    def next_records(self, n: int) -> List[SourceRecord]:
        """Take the next ``n`` records.

        Raises:
            FeedExhaustedError: the feed is empty, or every record has been
                handed out and the policy is ``FAIL``.
        """
        if n < 1:
            raise ValueError("batch size must be positive")
        with self._lock:
            total = len(self._records)
            if total == 0:
                raise FeedExhaustedError(self.source_file)

            if self.exhaustion_policy is FeedExhaustionPolicy.CYCLE:
                start = self._position
                batch = [self._records[(start + i) % total] for i in range(n)]
                self._position = (start + n) % total
                return batch

            if self._position >= total:
                raise FeedExhaustedError(self.source_file)
            batch = list(self._records[self._position:self._position + n])
            self._position += len(batch)
            return batch

    def next_batch(self, n: int) -> Dict[str, List[Any]]:
        """Take the next ``n`` records as per-field value lists.

        A field missing from a record contributes ``None`` at that position.
        """
        batch = self.next_records(n)
        fields: List[str] = []
        for record in batch:
            for key in record:
                if key not in fields:
                    fields.append(key)
        return {key: [record.get(key) for record in batch] for key in fields}
