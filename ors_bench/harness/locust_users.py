"""Locust user classes and load shape for composed isochrone scenarios.

Each simulated user runs its scenario exactly once and stops. The load shape
starts every user at time zero (open injection, no ramp-up) and ends the run
when all of them are done. Sequential runs start the scenarios one at a
time, in matrix order.
"""

import re
import threading
from typing import List, Optional, Sequence, Type

from locust import HttpUser, LoadTestShape, constant, task
from locust.exception import StopUser

from ..config.benchmark import BenchmarkConfig
from ..models.errors import BenchmarkException
from ..services.scenario import Scenario
from ..utils.logging import get_logger

logger = get_logger(__name__)


class IsochroneUser(HttpUser):
    """Simulated user that runs its scenario once and stops."""

    abstract = True
    wait_time = constant(0)
    scenario: Optional[Scenario] = None

    @task
    def run_scenario(self):
        scenario = self.scenario
        try:
            if scenario is not None and not scenario.is_inert:
                self._run_iteration(scenario)
        finally:
            shape = getattr(self.environment, "shape_class", None)
            if isinstance(shape, OpenInjectionShape):
                shape.record_completion(type(self))
        raise StopUser()

    def _run_iteration(self, scenario: Scenario) -> None:
        try:
            scenario.run_iteration(self.client)
        except BenchmarkException as e:
            if e.scenario is None:
                e.scenario = scenario.name
            logger.error("Iteration failed", **e.to_response().model_dump(exclude={"timestamp"}, exclude_none=True))
            self._report_failure(scenario, e)
        except Exception as e:
            logger.exception("Iteration failed unexpectedly", scenario=scenario.name)
            self._report_failure(scenario, e)

    def _report_failure(self, scenario: Scenario, exception: Exception) -> None:
        self.environment.events.request.fire(
            request_type="POST",
            name=scenario.name,
            response_time=0,
            response_length=0,
            response=None,
            context={},
            exception=exception,
        )


def user_class_name(index: int, scenario: Scenario) -> str:
    """Identifier-safe class name, unique per matrix cell."""
    descriptor = scenario.descriptor
    label = re.sub(r"\W+", "_", f"{descriptor.range_type.wire_value}_{descriptor.source_name}").strip("_")
    return f"Isochrones{index:03d}_{label}_{descriptor.batch_size}"


def build_user_class(scenario: Scenario, config: BenchmarkConfig, index: int = 0) -> Type[IsochroneUser]:
    """Create the Locust user class that runs ``scenario``."""
    return type(
        user_class_name(index, scenario),
        (IsochroneUser,),
        {
            "abstract": False,
            "scenario": scenario,
            "host": config.base_url,
            "fixed_count": scenario.injection.concurrent_user_count,
        },
    )


def build_user_classes(scenarios: Sequence[Scenario], config: BenchmarkConfig) -> List[Type[IsochroneUser]]:
    return [build_user_class(scenario, config, index) for index, scenario in enumerate(scenarios)]


class OpenInjectionShape(LoadTestShape):
    """Starts all users of a stage at once and stops when every user has finished.

    Subclasses set ``user_classes``, ``users_per_class`` and ``sequential``.
    """

    abstract = True
    user_classes: Sequence[Type[IsochroneUser]] = ()
    users_per_class: int = 1
    sequential: bool = False

    def __init__(self):
        super().__init__()
        self._lock = threading.Lock()
        self._completed = {}

    def record_completion(self, user_class: type) -> None:
        with self._lock:
            self._completed[user_class] = self._completed.get(user_class, 0) + 1

    def _finished(self, user_class: type) -> bool:
        with self._lock:
            return self._completed.get(user_class, 0) >= self.users_per_class

    def stages(self) -> List[List[Type[IsochroneUser]]]:
        if self.sequential:
            return [[user_class] for user_class in self.user_classes]
        return [list(self.user_classes)] if self.user_classes else []

    def tick(self):
        for stage in self.stages():
            if all(self._finished(user_class) for user_class in stage):
                continue
            user_count = self.users_per_class * len(stage)
            return user_count, float(user_count), stage
        return None
