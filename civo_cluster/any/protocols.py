"""
Protocol definitions for civo-cluster.

These protocols define the contracts that adapters must implement.
Protocols enable dependency injection and test doubles for the container engine.

All protocols follow PEP 544 (Structural Subtyping / Protocol).
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import SecretStr

from civo_cluster.types import Platform

if TYPE_CHECKING:
    from civo_cluster.environment.models import CivoEnvironment


@runtime_checkable
class ContainerRuntime(Protocol):
    """
    Protocol for the container engine that builds and runs the civo CLI image.

    Implementations:
    - runtime/docker.py - Shells out to the docker (or podman) CLI
    """

    def detect_platform(self) -> Platform:
        """
        Get the os/arch pair of the engine host.

        Returns
        -------
            Platform used to pick the release archive

        Raises
        ------
            CivoPlatformError: If the engine cannot be queried or reports garbage

        """
        ...

    def build_image(self, tag: str, dockerfile: str, timeout: float | None = None) -> str:
        """
        Build an image from Dockerfile text.

        Args:
        ----
            tag: Image reference to tag the result with
            dockerfile: Dockerfile contents (no build context is sent)
            timeout: Optional timeout in seconds

        Returns:
        -------
            The image reference that was built

        Raises:
        ------
            CivoSetupError: If any build step fails

        """
        ...

    def run(self, environment: "CivoEnvironment", args: list[str], timeout: float | None = None) -> str:
        """
        Run the environment's entry point with args in a disposable container.

        Returns
        -------
            Captured stdout

        Raises
        ------
            CivoExecutionError: If the process exits non-zero or times out

        """
        ...


@runtime_checkable
class SecretsProvider(Protocol):
    """
    Protocol for resolving secret references into secret values.

    Implementations:
    - security/secrets.py - Resolves env:, file: and cmd: references
    """

    def get_secret(self, reference: str) -> SecretStr:
        """
        Resolve a secret reference.

        Args:
        ----
            reference: Reference such as "env:CIVO_TOKEN" or "file:~/.civo-token"

        Returns:
        -------
            Secret value, masked when printed

        Raises:
        ------
            CivoSecretNotFoundError: If the reference cannot be resolved

        """
        ...
