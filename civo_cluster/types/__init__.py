"""Civo cluster type definitions."""

from civo_cluster.types.clusters import (
    DEFAULT_KUBERNETES_VERSION,
    DEFAULT_NODE_COUNT,
    DEFAULT_NODE_SIZE,
    ClusterCreateOptions,
    ClusterReference,
)
from civo_cluster.types.platforms import Platform

__all__ = [
    "ClusterReference",
    "ClusterCreateOptions",
    "Platform",
    "DEFAULT_NODE_COUNT",
    "DEFAULT_NODE_SIZE",
    "DEFAULT_KUBERNETES_VERSION",
]
