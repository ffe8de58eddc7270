"""Command runner: one civo invocation against a built environment."""

import time

from civo_cluster.any.logger import get_logger
from civo_cluster.any.protocols import ContainerRuntime
from civo_cluster.config.schemas import CivoSettings
from civo_cluster.environment.models import CivoEnvironment

LOGGER = get_logger("civo_cluster.environment.runner")


def cache_buster() -> str:
    """Time-of-call marker. Nanosecond resolution keeps back-to-back calls distinct."""
    return str(time.time_ns())


class CommandRunner:
    """Runs a single argument vector in an environment and returns its stdout."""

    def __init__(self, runtime: ContainerRuntime, settings: CivoSettings):
        self._runtime = runtime
        self._settings = settings

    def run(self, environment: CivoEnvironment, args: list[str], timeout: float | None = None) -> str:
        """
        Run args with a fresh cache-defeat marker.

        Raises
        ------
            CivoExecutionError: If the tool exits non-zero or times out

        """
        environment = environment.with_env_variable(self._settings.cache_buster_variable, cache_buster())
        LOGGER.info(f"Running civo {' '.join(args)}")
        return self._runtime.run(environment, list(args), timeout=timeout or self._settings.timeout)
