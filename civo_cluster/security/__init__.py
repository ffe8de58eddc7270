"""Secret handling for civo-cluster."""

from civo_cluster.security.secrets import ReferenceSecretsProvider

__all__ = ["ReferenceSecretsProvider"]
