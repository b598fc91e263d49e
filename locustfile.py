"""Locust entry point for the isochrones range load test.

Run with:
    export SOURCE_FILES="data/points_heidelberg.csv,data/points_berlin.csv"
    export QUERY_SIZES="1,5,10"
    export RANGES="300,600"
    export TEST_UNIT=time
    export NUM_CONCURRENT_USERS=10
    locust -f locustfile.py --headless

Every scenario of the test matrix becomes one user class. All users of a
scenario start at once and each sends a single isochrones request.
"""

import ors_bench.harness as harness
from ors_bench.config import get_settings
from ors_bench.services import compose_scenarios
from ors_bench.utils import setup_logging

settings = get_settings()
setup_logging(settings.logging)
config = settings.to_benchmark_config()

USER_CLASSES = harness.build_user_classes(compose_scenarios(config), config)

# Locust discovers user classes from module attributes
globals().update({user_class.__name__: user_class for user_class in USER_CLASSES})


class IsochronesRangeShape(harness.OpenInjectionShape):
    user_classes = USER_CLASSES
    users_per_class = config.num_concurrent_users
    sequential = not config.parallel_execution
