"""Pytest configuration and fixtures for civo-cluster tests."""

import shutil
import subprocess
import sys

import pytest
from loguru import logger
from pydantic import SecretStr

from civo_cluster.any.exceptions import CivoExecutionError
from civo_cluster.cluster import CivoCluster
from civo_cluster.config.schemas import CivoSettings
from civo_cluster.environment.builder import EnvironmentBuilder
from civo_cluster.environment.runner import CommandRunner
from civo_cluster.types import Platform


class FakeRuntime:
    """In-memory ContainerRuntime that records what would have been built and run."""

    def __init__(self, platform: Platform | None = None, stdout: str = "", returncode: int = 0, stderr: str = ""):
        self.platform = platform or Platform(os="linux", arch="amd64")
        self.stdout = stdout
        self.returncode = returncode
        self.stderr = stderr
        self.builds: list[tuple[str, str]] = []
        self.runs: list[tuple] = []

    def detect_platform(self) -> Platform:
        return self.platform

    def build_image(self, tag: str, dockerfile: str, timeout: float | None = None) -> str:
        self.builds.append((tag, dockerfile))
        return tag

    def run(self, environment, args: list[str], timeout: float | None = None) -> str:
        self.runs.append((environment, list(args), timeout))
        if self.returncode != 0:
            raise CivoExecutionError(args, returncode=self.returncode, stderr=self.stderr)
        return self.stdout


def is_docker_available() -> bool:
    """Check if a docker engine is reachable."""
    if shutil.which("docker") is None:
        return False
    try:
        result = subprocess.run(["docker", "info"], capture_output=True, timeout=10)
        return result.returncode == 0
    except subprocess.TimeoutExpired:
        return False


@pytest.fixture
def settings() -> CivoSettings:
    return CivoSettings()


@pytest.fixture
def runtime_factory():
    """The FakeRuntime class, for tests that need custom platforms or exit codes."""
    return FakeRuntime


@pytest.fixture
def fake_runtime() -> FakeRuntime:
    return FakeRuntime(stdout="+----+------+\n| ID | Name |\n+----+------+\n")


@pytest.fixture
def api_token() -> SecretStr:
    return SecretStr("test-token-123")


@pytest.fixture
def civo(fake_runtime, settings) -> CivoCluster:
    """CivoCluster wired to the fake runtime."""
    return CivoCluster(
        builder=EnvironmentBuilder(fake_runtime, settings),
        runner=CommandRunner(fake_runtime, settings),
    )


@pytest.fixture(scope="session")
def docker_engine() -> None:
    """Skip tests that need a real docker engine when none is reachable."""
    if not is_docker_available():
        pytest.skip("Docker not available - skipping integration tests")


@pytest.fixture(autouse=True)
def quiet_package_logging():
    """Restore library-mode logging (package disabled, default sink) after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("civo_cluster")


@pytest.fixture
def log_messages() -> list[str]:
    """Collect every loguru record emitted while the test runs."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(str(m)), level="DEBUG")
    yield messages
    logger.remove(sink_id)
