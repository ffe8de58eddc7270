"""
Argument vectors for the civo CLI.

Pure functions of their inputs: the same region/name/options always give the
same vector, and nothing here touches the container engine.
"""

from civo_cluster.types import (
    DEFAULT_KUBERNETES_VERSION,
    DEFAULT_NODE_COUNT,
    DEFAULT_NODE_SIZE,
)

K3S = "k3s"


def cluster_list_args(region: str) -> list[str]:
    """
    Build the list vector.

    Example:
    -------
        >>> cluster_list_args("NYC1")
        ['k3s', 'list', '--region', 'NYC1']

    """
    return [K3S, "list", "--region", region]


def cluster_show_args(region: str, name: str) -> list[str]:
    return [K3S, "get", name, "--region", region]


def cluster_create_args(
    region: str,
    name: str,
    node_count: str = DEFAULT_NODE_COUNT,
    node_size: str = DEFAULT_NODE_SIZE,
    version: str = DEFAULT_KUBERNETES_VERSION,
) -> list[str]:
    """
    Build the create vector. ``--wait`` blocks until the cluster is ready.

    Example:
    -------
        >>> cluster_create_args("NYC1", "mycluster")
        ['k3s', 'create', 'mycluster', '--region', 'NYC1', '--nodes', '3', '--size', 'g4s.kube.medium', '--version', 'latest', '--wait']

    """
    return [
        K3S,
        "create",
        name,
        "--region",
        region,
        "--nodes",
        node_count,
        "--size",
        node_size,
        "--version",
        version,
        "--wait",
    ]


def version_args() -> list[str]:
    # Runs under the k3s command group like the other operations, not bare
    # `civo version`. No token is attached, so civo may answer with an error.
    return [K3S, "version"]
