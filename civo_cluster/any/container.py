"""
Dependency injection container for civo-cluster.

Wires settings, the container runtime, the secrets provider and the
operations facade. Uses dependency-injector for clean DI with singletons.
"""

from dependency_injector import containers, providers

from civo_cluster.any.protocols import ContainerRuntime, SecretsProvider
from civo_cluster.cluster import CivoCluster
from civo_cluster.config.loaders import load_settings
from civo_cluster.config.schemas import CivoSettings
from civo_cluster.environment.builder import EnvironmentBuilder
from civo_cluster.environment.runner import CommandRunner
from civo_cluster.runtime.docker import DockerRuntime
from civo_cluster.security.secrets import ReferenceSecretsProvider


class CivoIoCContainer(containers.DeclarativeContainer):
    """
    Inversion of Control (IoC) container for civo-cluster.

    Example:
    -------
        ```python
        from civo_cluster.any.container import CivoIoCContainer

        container = CivoIoCContainer()
        container.runtime.override(FakeRuntime())  # tests

        civo = container.civo_cluster()
        print(civo.version())
        ```

    """

    settings_path = providers.Object(None)

    # Singleton: settings from .civo-cluster.yaml and CIVO_CLUSTER_* variables
    settings = providers.Singleton(load_settings, path=settings_path)

    runtime = providers.Singleton(DockerRuntime, binary=settings.provided.docker_binary)

    secrets_provider = providers.Singleton(ReferenceSecretsProvider)

    environment_builder = providers.Singleton(EnvironmentBuilder, runtime=runtime, settings=settings)

    command_runner = providers.Singleton(CommandRunner, runtime=runtime, settings=settings)

    civo_cluster = providers.Singleton(CivoCluster, builder=environment_builder, runner=command_runner)


# Global singleton container instance
container = CivoIoCContainer()


def get_settings() -> CivoSettings:
    """Get settings (singleton)."""
    return container.settings()


def get_runtime() -> ContainerRuntime:
    """Get the container runtime (singleton)."""
    return container.runtime()


def get_secrets_provider() -> SecretsProvider:
    """
    Get secrets provider (singleton).

    Example:
    -------
        ```python
        from civo_cluster.any.container import get_secrets_provider

        token = get_secrets_provider().get_secret("env:CIVO_TOKEN")
        ```

    """
    return container.secrets_provider()


def get_civo_cluster() -> CivoCluster:
    """Get the operations facade (singleton)."""
    return container.civo_cluster()
