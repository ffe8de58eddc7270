"""
civo-cluster - run the Civo CLI in a disposable container.

Four pass-through operations on Civo k3s clusters:
- cluster_list: list clusters in a region
- cluster_show: show one cluster
- cluster_create: create a cluster and wait for it
- version: report the civo CLI version

Each call builds a fresh container environment with the pinned civo release,
runs one command and returns its stdout.
"""

from loguru import logger
from pydantic import SecretStr

from civo_cluster.any.container import get_civo_cluster
from civo_cluster.any.exceptions import (
    CivoClusterError,
    CivoConfigurationError,
    CivoExecutionError,
    CivoPlatformError,
    CivoSecretNotFoundError,
    CivoSetupError,
)
from civo_cluster.any.logger import PACKAGE
from civo_cluster.cluster import CivoCluster

# silent as a library; configure_logging() turns records on
logger.disable(PACKAGE)

try:
    from civo_cluster._version import __version__
except ImportError:
    __version__ = "0.0.0.dev0"


def cluster_list(api_token: SecretStr | str, region: str, timeout: float | None = None) -> str:
    """List clusters in a region."""
    return get_civo_cluster().cluster_list(api_token, region, timeout=timeout)


def cluster_show(api_token: SecretStr | str, region: str, name: str, timeout: float | None = None) -> str:
    """Show one cluster."""
    return get_civo_cluster().cluster_show(api_token, region, name, timeout=timeout)


def cluster_create(
    api_token: SecretStr | str,
    region: str,
    name: str,
    node_count: str = "3",
    node_size: str = "g4s.kube.medium",
    version: str = "latest",
    timeout: float | None = None,
) -> str:
    """Create a cluster and wait until it is ready."""
    return get_civo_cluster().cluster_create(
        api_token,
        region,
        name,
        node_count=node_count,
        node_size=node_size,
        version=version,
        timeout=timeout,
    )


def version(timeout: float | None = None) -> str:
    """Report the civo CLI version."""
    return get_civo_cluster().version(timeout=timeout)


__all__ = [
    # Operations
    "CivoCluster",
    "cluster_list",
    "cluster_show",
    "cluster_create",
    "version",
    # Exceptions
    "CivoClusterError",
    "CivoSetupError",
    "CivoPlatformError",
    "CivoExecutionError",
    "CivoConfigurationError",
    "CivoSecretNotFoundError",
    # Version
    "__version__",
]
