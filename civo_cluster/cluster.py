"""
Civo cluster operations.

Every operation builds a fresh environment, runs exactly one civo command in
it and returns the captured stdout. Nothing is retained between calls.
"""

from pydantic import SecretStr

from civo_cluster.any.logger import get_logger
from civo_cluster.commands import (
    cluster_create_args,
    cluster_list_args,
    cluster_show_args,
    version_args,
)
from civo_cluster.environment.builder import EnvironmentBuilder
from civo_cluster.environment.runner import CommandRunner
from civo_cluster.types import ClusterCreateOptions, ClusterReference

LOGGER = get_logger("civo_cluster.cluster")


def _as_secret(api_token: SecretStr | str) -> SecretStr:
    return api_token if isinstance(api_token, SecretStr) else SecretStr(api_token)


class CivoCluster:
    """
    Functions for working with k3s clusters in Civo.

    Example:
    -------
        ```python
        from civo_cluster.any.container import get_civo_cluster

        civo = get_civo_cluster()
        print(civo.cluster_list(token, "NYC1"))
        print(civo.cluster_create(token, "NYC1", "mycluster", node_count="1"))
        ```

    """

    def __init__(self, builder: EnvironmentBuilder, runner: CommandRunner):
        self._builder = builder
        self._runner = runner

    def _execute(self, args: list[str], api_token: SecretStr | str | None, timeout: float | None) -> str:
        token = _as_secret(api_token) if api_token is not None else None
        environment = self._builder.build(token, timeout=timeout)
        return self._runner.run(environment, args, timeout=timeout)

    def cluster_list(self, api_token: SecretStr | str, region: str, timeout: float | None = None) -> str:
        """
        List clusters in a region.

        Args:
        ----
            api_token: Civo API token, found at https://dashboard.civo.com/account/api
            region: The region to list clusters in
            timeout: Optional deadline in seconds for each stage

        """
        return self._execute(cluster_list_args(region), api_token, timeout)

    def cluster_show(self, api_token: SecretStr | str, region: str, name: str, timeout: float | None = None) -> str:
        """Show details of one cluster (name as reported by cluster_list)."""
        ref = ClusterReference(name=name, region=region)
        return self._execute(cluster_show_args(ref.region, ref.name), api_token, timeout)

    def cluster_create(
        self,
        api_token: SecretStr | str,
        region: str,
        name: str,
        node_count: str | None = None,
        node_size: str | None = None,
        version: str | None = None,
        timeout: float | None = None,
    ) -> str:
        """
        Create a cluster and wait for it to become ready.

        Options left as None take the ClusterCreateOptions defaults
        ("3", "g4s.kube.medium", "latest"). Creating the same name twice is
        whatever civo does with it; no idempotence is added here.
        """
        overrides = {"node_count": node_count, "node_size": node_size, "version": version}
        options = ClusterCreateOptions(**{k: v for k, v in overrides.items() if v is not None})
        LOGGER.info(f"Creating cluster {name} in {region} ({options.node_count} x {options.node_size})")
        args = cluster_create_args(region, name, options.node_count, options.node_size, options.version)
        return self._execute(args, api_token, timeout)

    def version(self, timeout: float | None = None) -> str:
        """Report the civo CLI version. Runs without credentials."""
        return self._execute(version_args(), None, timeout)
