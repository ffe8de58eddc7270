"""
Any - shared building blocks for civo-cluster.

Exceptions, protocols, logging, the DI container and command utilities.
"""

from civo_cluster.any.container import (
    CivoIoCContainer,
    container,
    get_civo_cluster,
    get_runtime,
    get_secrets_provider,
    get_settings,
)
from civo_cluster.any.exceptions import (
    CivoClusterError,
    CivoConfigurationError,
    CivoExecutionError,
    CivoPlatformError,
    CivoSecretNotFoundError,
    CivoSetupError,
)
from civo_cluster.any.logger import configure_logging, get_logger
from civo_cluster.any.protocols import ContainerRuntime, SecretsProvider
from civo_cluster.any.utils import run_command

__all__ = [
    # Exceptions
    "CivoClusterError",
    "CivoSetupError",
    "CivoPlatformError",
    "CivoExecutionError",
    "CivoConfigurationError",
    "CivoSecretNotFoundError",
    # Protocols
    "ContainerRuntime",
    "SecretsProvider",
    # Logging
    "get_logger",
    "configure_logging",
    # Utils
    "run_command",
    # DI Container
    "CivoIoCContainer",
    "container",
    "get_settings",
    "get_runtime",
    "get_secrets_provider",
    "get_civo_cluster",
]
