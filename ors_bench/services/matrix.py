"""Expansion of benchmark settings into the scenario matrix."""

from typing import List

from ..config.benchmark import BenchmarkConfig
from ..models.scenario import ScenarioDescriptor
from ..utils.logging import get_logger
from ..utils.naming import format_scenario_name

logger = get_logger(__name__)


def log_config_info(config: BenchmarkConfig) -> None:
    """Log the resolved configuration before scenarios are built."""
    logger.info(
        "Initializing isochrones range load test",
        source_files=config.source_files,
        target_profile=config.target_profile,
        concurrent_users=config.num_concurrent_users,
        query_sizes=config.query_sizes,
        ranges=config.ranges,
        test_unit=config.test_unit.value,
        base_url=config.base_url,
        execution_mode=config.concurrency_mode.label,
    )
    logger.info(f"Testing {config.test_unit.value} isochrones")


def build_test_matrix(config: BenchmarkConfig) -> List[ScenarioDescriptor]:
    """One descriptor per range type × source file × query size.

    Range types vary slowest and query sizes fastest.
    """
    mode = config.concurrency_mode
    descriptors = [
        ScenarioDescriptor(
            name=format_scenario_name(source_file, batch_size),
            source_file=source_file,
            batch_size=batch_size,
            range_type=range_type,
            concurrency_mode=mode,
        )
        for range_type in config.test_unit.range_types()
        for source_file in config.source_files
        for batch_size in config.query_sizes
    ]
    logger.info("Built test matrix", scenarios=len(descriptors), execution_mode=mode.label)
    return descriptors
