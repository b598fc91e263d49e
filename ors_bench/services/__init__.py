"""Scenario core services: extraction, assembly, feeds, matrix and composition."""

from .extraction import extract_locations, process_coordinates
from .feed import DataFeedPartitioner, filter_records_by_profile, load_records
from .matrix import build_test_matrix, log_config_info
from .request_body import (
    build_request_body,
    create_request_body,
    parse_request_body,
    serialize_request_body,
)
from .scenario import IsochroneRequestStep, Scenario, ScenarioComposer, compose_scenarios

__all__ = [
    "extract_locations",
    "process_coordinates",
    "DataFeedPartitioner",
    "filter_records_by_profile",
    "load_records",
    "build_test_matrix",
    "log_config_info",
    "build_request_body",
    "create_request_body",
    "parse_request_body",
    "serialize_request_body",
    "IsochroneRequestStep",
    "Scenario",
    "ScenarioComposer",
    "compose_scenarios",
]
