"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from ors_bench.config import BenchmarkConfig
from ors_bench.models import TestUnit


CSV_WITH_PROFILES = """longitude,latitude,profile
8.681495,49.41461,driving-car
8.687872,49.420318,cycling-regular
8.692353,49.408293,driving-car
8.675193,49.418763,driving-car
8.699157,49.411941,driving-car
"""

CSV_WITHOUT_PROFILES = """longitude,latitude
8.681495,49.41461
8.687872,49.420318
8.692353,49.408293
"""


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV text to a file under tmp_path and return its path."""

    def _write(content: str, name: str = "points.csv") -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def profile_csv(write_csv):
    return write_csv(CSV_WITH_PROFILES, "heidelberg.csv")


@pytest.fixture
def plain_csv(write_csv):
    return write_csv(CSV_WITHOUT_PROFILES, "berlin.csv")


@pytest.fixture
def benchmark_config(profile_csv):
    """Single-file configuration pointing at the profile CSV."""
    return BenchmarkConfig(
        source_files=[profile_csv],
        target_profile="driving-car",
        num_concurrent_users=2,
        query_sizes=[2],
        ranges=[300, 600],
        test_unit=TestUnit.DISTANCE,
        base_url="http://localhost:8082/ors",
    )


@pytest.fixture
def mock_client():
    """Harness client whose ``post`` is usable as a context manager."""
    client = MagicMock()
    response = MagicMock()
    response.status_code = 200
    client.post.return_value.__enter__.return_value = response
    client.post.return_value.__exit__.return_value = False
    client.response = response
    return client
