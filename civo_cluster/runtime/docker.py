"""
Docker runtime for the civo CLI container.

Implements the ContainerRuntime protocol by shelling out to the docker CLI
(any docker-compatible CLI such as podman works through ``docker_binary``).
"""

import subprocess
import uuid

from civo_cluster.any.exceptions import CivoExecutionError, CivoPlatformError, CivoSetupError
from civo_cluster.any.logger import get_logger
from civo_cluster.any.utils import run_command
from civo_cluster.environment.models import CivoEnvironment
from civo_cluster.types import Platform

LOGGER = get_logger("civo_cluster.runtime.docker")

PLATFORM_FORMAT = "{{.Server.Os}}/{{.Server.Arch}}"
CONTAINER_PREFIX = "civo-cluster-"


class DockerRuntime:
    """
    Builds and runs images through the docker CLI.

    Example:
    -------
        ```python
        runtime = DockerRuntime()
        platform = runtime.detect_platform()
        runtime.build_image("civo-cli:1.0.75-linux-amd64", dockerfile)
        print(runtime.run(environment, ["k3s", "list", "--region", "NYC1"]))
        ```

    """

    def __init__(self, binary: str = "docker"):
        self._binary = binary

    def detect_platform(self) -> Platform:
        """
        Ask the engine server for its os/arch.

        Raises
        ------
            CivoPlatformError: If the engine is unreachable or the answer cannot be parsed

        """
        cmd = [self._binary, "version", "--format", PLATFORM_FORMAT]
        try:
            result = run_command(cmd, check=False)
        except FileNotFoundError as e:
            raise CivoPlatformError(f"Container engine CLI not found: {self._binary}") from e

        if result.returncode != 0:
            LOGGER.error(f"Platform detection failed: {result.stderr.strip()}")
            raise CivoPlatformError("Could not query container engine platform", stderr=result.stderr)

        try:
            platform = Platform.from_string(result.stdout)
        except ValueError as e:
            raise CivoPlatformError(str(e), stderr=result.stderr) from e

        LOGGER.debug(f"Detected engine platform: {platform}")
        return platform

    def build_image(self, tag: str, dockerfile: str, timeout: float | None = None) -> str:
        """
        Build an image from Dockerfile text piped on stdin.

        No build context is sent, so nothing on the host filesystem is read or written.

        Raises
        ------
            CivoSetupError: If the build fails, times out, or the engine is missing

        """
        cmd = [self._binary, "build", "--tag", tag, "-"]
        LOGGER.info(f"Building image {tag}")
        try:
            result = run_command(cmd, check=False, timeout=timeout, input=dockerfile)
        except FileNotFoundError as e:
            raise CivoSetupError(f"Container engine CLI not found: {self._binary}", stage="build") from e
        except subprocess.TimeoutExpired as e:
            raise CivoSetupError(f"Image build for {tag} timed out after {timeout}s", stage="build") from e

        if result.returncode != 0:
            LOGGER.error(f"Image build failed for {tag}:\n{result.stderr}")
            raise CivoSetupError(f"Failed to build image {tag}", stage="build", stderr=result.stderr)

        LOGGER.debug(f"Docker build output:\n{result.stdout}")
        return tag

    def run_command_line(self, environment: CivoEnvironment, args: list[str], name: str) -> list[str]:
        """
        Build the docker run command line for an environment.

        The container is named so it can be removed if the client is killed.

        Secret variables are forwarded by name only; their values travel in
        the child process environment and never appear on the command line.
        """
        cmd = [self._binary, "run", "--rm", "--name", name]
        for variable, value in environment.variables.items():
            cmd += ["-e", f"{variable}={value}"]
        for variable in environment.secret_variables:
            cmd += ["-e", variable]
        cmd.append(environment.image)
        return cmd + list(args)

    def run(self, environment: CivoEnvironment, args: list[str], timeout: float | None = None) -> str:
        """
        Run the image entry point with args in a --rm container.

        Returns
        -------
            Captured stdout, untouched

        Raises
        ------
            CivoExecutionError: If the tool exits non-zero or times out
            CivoSetupError: If the engine CLI is missing

        """
        name = f"{CONTAINER_PREFIX}{uuid.uuid4().hex}"
        cmd = self.run_command_line(environment, args, name)
        secret_env = {variable: value.get_secret_value() for variable, value in environment.secret_variables.items()}

        try:
            result = run_command(cmd, check=False, env=secret_env, timeout=timeout)
        except FileNotFoundError as e:
            raise CivoSetupError(f"Container engine CLI not found: {self._binary}", stage="run") from e
        except subprocess.TimeoutExpired as e:
            # killing the client leaves the container (and its token) running
            LOGGER.error(f"civo {' '.join(args)} timed out after {timeout}s, removing container {name}")
            run_command([self._binary, "rm", "-f", name], check=False)
            raise CivoExecutionError(args, returncode=-1, stderr=f"timed out after {timeout}s") from e

        if result.returncode != 0:
            LOGGER.error(f"civo {' '.join(args)} failed with exit code {result.returncode}")
            raise CivoExecutionError(args, returncode=result.returncode, stderr=result.stderr)

        return result.stdout
