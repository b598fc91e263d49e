"""Unit tests for scenario composition and iteration steps."""

import json

import pytest

from ors_bench.config import BenchmarkConfig
from ors_bench.models import (
    CoordinateParseError,
    FeedExhaustedError,
    FeedExhaustionPolicy,
    TestUnit,
)
from ors_bench.services.scenario import JSON_HEADERS, ScenarioComposer, compose_scenarios


class TestScenarioComposer:
    """Tests for binding descriptors to feeds."""

    def test_one_scenario_per_cell(self, benchmark_config, plain_csv):
        config = benchmark_config.model_copy(
            update={"source_files": [benchmark_config.source_files[0], plain_csv], "query_sizes": [1, 2]}
        )
        scenarios = compose_scenarios(config)
        assert len(scenarios) == 4
        assert all(not scenario.is_inert for scenario in scenarios)

    def test_each_scenario_owns_its_feed(self, benchmark_config):
        config = benchmark_config.model_copy(update={"query_sizes": [1, 2]})
        first, second = compose_scenarios(config)
        assert first.feed is not second.feed

    def test_unreadable_source_gives_inert_scenario(self, benchmark_config, tmp_path):
        """Test that a load failure does not escape the composer."""
        missing = str(tmp_path / "missing.csv")
        config = benchmark_config.model_copy(update={"source_files": [missing] + benchmark_config.source_files})
        scenarios = compose_scenarios(config)
        assert len(scenarios) == 2
        inert, loaded = scenarios
        assert inert.is_inert
        assert inert.steps == ()
        assert inert.feed is None
        assert not loaded.is_inert

    def test_inert_scenario_runs_nothing(self, benchmark_config, tmp_path, mock_client):
        config = benchmark_config.model_copy(update={"source_files": [str(tmp_path / "missing.csv")]})
        (scenario,) = compose_scenarios(config)
        scenario.run_iteration(mock_client)
        mock_client.post.assert_not_called()

    def test_group_name(self, benchmark_config):
        config = benchmark_config.model_copy(update={"parallel_execution": True})
        (scenario,) = compose_scenarios(config)
        assert scenario.group_name == "Isochrones parallel distance - heidelberg - Users 2 - Ranges [300.0, 600.0]"

    def test_injection_profile(self, benchmark_config):
        (scenario,) = ScenarioComposer(benchmark_config).compose_all()
        assert scenario.injection.concurrent_user_count == 2
        assert scenario.injection.spawn_rate == 2.0


class TestIsochroneRequestStep:
    """Tests for one simulated-user iteration."""

    def test_posts_body_to_profile_endpoint(self, benchmark_config, mock_client):
        (scenario,) = compose_scenarios(benchmark_config)
        scenario.run_iteration(mock_client)

        args, kwargs = mock_client.post.call_args
        assert args == ("/v2/isochrones/driving-car",)
        assert kwargs["headers"] == JSON_HEADERS
        assert kwargs["name"] == scenario.name
        assert kwargs["catch_response"] is True
        assert json.loads(kwargs["data"]) == {
            "locations": [[8.681495, 49.41461], [8.692353, 49.408293]],
            "range_type": "distance",
            "range": [300.0, 600.0],
        }
        mock_client.response.success.assert_called_once()

    def test_successive_iterations_use_next_batch(self, benchmark_config, mock_client):
        (scenario,) = compose_scenarios(benchmark_config)
        scenario.run_iteration(mock_client)
        scenario.run_iteration(mock_client)
        second = json.loads(mock_client.post.call_args.kwargs["data"])
        assert second["locations"] == [[8.675193, 49.418763], [8.699157, 49.411941]]

    def test_non_200_marks_failure(self, benchmark_config, mock_client):
        mock_client.response.status_code = 500
        (scenario,) = compose_scenarios(benchmark_config)
        scenario.run_iteration(mock_client)
        mock_client.response.failure.assert_called_once()
        mock_client.response.success.assert_not_called()

    def test_time_unit_body(self, benchmark_config, mock_client):
        config = benchmark_config.model_copy(update={"test_unit": TestUnit.TIME})
        (scenario,) = compose_scenarios(config)
        scenario.run_iteration(mock_client)
        assert json.loads(mock_client.post.call_args.kwargs["data"])["range_type"] == "time"

    def test_corrupt_coordinate_propagates(self, benchmark_config, write_csv, mock_client):
        path = write_csv("longitude,latitude\nabc,49.1\n", "corrupt.csv")
        config = benchmark_config.model_copy(update={"source_files": [path], "query_sizes": [1]})
        (scenario,) = compose_scenarios(config)
        with pytest.raises(CoordinateParseError):
            scenario.run_iteration(mock_client)
        mock_client.post.assert_not_called()

    def test_null_coordinate_is_skipped(self, benchmark_config, write_csv, mock_client):
        path = write_csv("longitude,latitude\n8.1,\n8.2,49.2\n", "gaps.csv")
        config = benchmark_config.model_copy(update={"source_files": [path]})
        (scenario,) = compose_scenarios(config)
        scenario.run_iteration(mock_client)
        assert json.loads(mock_client.post.call_args.kwargs["data"])["locations"] == [[8.2, 49.2]]

    def test_missing_coordinate_columns_send_empty_locations(self, benchmark_config, write_csv, mock_client):
        path = write_csv("x,y\n8.1,49.1\n", "other.csv")
        config = benchmark_config.model_copy(update={"source_files": [path], "query_sizes": [1]})
        (scenario,) = compose_scenarios(config)
        scenario.run_iteration(mock_client)
        assert json.loads(mock_client.post.call_args.kwargs["data"])["locations"] == []

    def test_exhausted_feed_raises(self, benchmark_config, mock_client):
        (scenario,) = compose_scenarios(benchmark_config)
        scenario.run_iteration(mock_client)
        scenario.run_iteration(mock_client)
        with pytest.raises(FeedExhaustedError):
            scenario.run_iteration(mock_client)

    def test_cycling_feed_keeps_running(self, benchmark_config, mock_client):
        config = benchmark_config.model_copy(update={"feed_exhaustion_policy": FeedExhaustionPolicy.CYCLE})
        (scenario,) = compose_scenarios(config)
        for _ in range(5):
            scenario.run_iteration(mock_client)
        assert mock_client.post.call_count == 5

    def test_locations_never_exceed_batch_size(self, benchmark_config, mock_client):
        config = benchmark_config.model_copy(
            update={"feed_exhaustion_policy": FeedExhaustionPolicy.CYCLE, "query_sizes": [3]}
        )
        (scenario,) = compose_scenarios(config)
        for _ in range(4):
            scenario.run_iteration(mock_client)
            body = json.loads(mock_client.post.call_args.kwargs["data"])
            assert len(body["locations"]) <= 3
