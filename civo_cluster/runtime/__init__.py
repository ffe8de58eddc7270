"""Container runtimes for civo-cluster."""

from civo_cluster.runtime.docker import DockerRuntime

__all__ = ["DockerRuntime"]
