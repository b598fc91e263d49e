"""Composition of executable isochrone scenarios for the load harness."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..config.benchmark import BenchmarkConfig
from ..models.errors import SourceLoadError
from ..models.scenario import InjectionProfile, ScenarioDescriptor
from ..utils.logging import get_logger
from .extraction import extract_locations
from .feed import DataFeedPartitioner
from .matrix import build_test_matrix, log_config_info
from .request_body import create_request_body

logger = get_logger(__name__)

EXPECTED_STATUS = 200
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass(frozen=True)
class IsochroneRequestStep:
    """One isochrones request per simulated-user iteration."""

    descriptor: ScenarioDescriptor
    feed: DataFeedPartitioner
    config: BenchmarkConfig

    @property
    def path(self) -> str:
        return self.config.isochrones_path

    def build_body(self) -> str:
        """Draw the next batch and turn it into a serialized request body.

        Raises:
            FeedExhaustedError: no records are left to draw.
            CoordinateParseError: a drawn coordinate is not numeric.
            RequestBodyCreationError: the body could not be serialized.
        """
        values = self.feed.next_batch(self.descriptor.batch_size)
        batch = extract_locations(
            values,
            self.descriptor.batch_size,
            self.config.field_lon,
            self.config.field_lat,
        )
        return create_request_body(batch, self.descriptor.range_type, self.config.ranges)

    def run(self, client: Any) -> Any:
        """Submit one request through the harness client and check its status.

        ``client`` is a Locust ``HttpSession`` or anything with the same
        ``post(..., catch_response=True)`` context manager.
        """
        body = self.build_body()
        with client.post(
            self.path,
            data=body,
            headers=JSON_HEADERS,
            name=self.descriptor.name,
            catch_response=True,
        ) as response:
            if response.status_code == EXPECTED_STATUS:
                response.success()
            else:
                response.failure(f"Expected status {EXPECTED_STATUS}, got {response.status_code}")
        return response


@dataclass(frozen=True)
class Scenario:
    """A scenario descriptor bound to its feed and request steps."""

    descriptor: ScenarioDescriptor
    group_name: str
    injection: InjectionProfile
    feed: Optional[DataFeedPartitioner] = None
    steps: Tuple[IsochroneRequestStep, ...] = field(default=())

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def is_inert(self) -> bool:
        """True when the source failed to load and nothing will be executed."""
        return not self.steps

    def run_iteration(self, client: Any) -> None:
        for step in self.steps:
            step.run(client)


class ScenarioComposer:
    """Builds executable scenarios from the test matrix."""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.injection = InjectionProfile(concurrent_user_count=config.num_concurrent_users)

    def compose(self, descriptor: ScenarioDescriptor) -> Scenario:
        """Bind a descriptor to a freshly loaded feed.

        A source that cannot be loaded produces an inert scenario instead of
        an error, so the remaining scenarios can still run.
        """
        group_name = descriptor.group_name(self.config.num_concurrent_users, self.config.ranges)
        logger.info(
            "Creating scenario",
            name=descriptor.name,
            location_count=descriptor.batch_size,
            source_file=descriptor.source_file,
            profile=self.config.target_profile,
            range_type=descriptor.range_type.wire_value,
            execution_mode=descriptor.concurrency_mode.label,
        )

        try:
            feed = DataFeedPartitioner(
                descriptor.source_file,
                self.config.target_profile,
                field_profile=self.config.field_profile,
                exhaustion_policy=self.config.feed_exhaustion_policy,
            )
        except SourceLoadError as e:
            logger.error("Source could not be loaded, scenario is inert", name=descriptor.name, error=e.message)
            return Scenario(descriptor=descriptor, group_name=group_name, injection=self.injection)

        step = IsochroneRequestStep(descriptor=descriptor, feed=feed, config=self.config)
        return Scenario(
            descriptor=descriptor,
            group_name=group_name,
            injection=self.injection,
            feed=feed,
            steps=(step,),
        )

    def compose_all(self) -> List[Scenario]:
        log_config_info(self.config)
        return [self.compose(descriptor) for descriptor in build_test_matrix(self.config)]


def compose_scenarios(config: BenchmarkConfig) -> List[Scenario]:
    """Build every scenario of the test matrix for ``config``."""
    return ScenarioComposer(config).compose_all()
