"""Cluster reference and creation option types."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_NODE_COUNT = "3"
DEFAULT_NODE_SIZE = "g4s.kube.medium"
DEFAULT_KUBERNETES_VERSION = "latest"


class ClusterReference(BaseModel):
    """
    A cluster name and the region it lives in.

    Values are passed to the civo CLI untouched; malformed names or regions
    surface as the tool's own error output.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    region: str


class ClusterCreateOptions(BaseModel):
    """Optional settings for a new cluster. All values are strings handed to civo as-is."""

    model_config = ConfigDict(frozen=True)

    node_count: str = Field(default=DEFAULT_NODE_COUNT, description="Number of nodes (the master also acts as a node)")
    node_size: str = Field(
        default=DEFAULT_NODE_SIZE,
        description="Node size. List available sizes with 'civo size list -s kubernetes'",
    )
    version: str = Field(
        default=DEFAULT_KUBERNETES_VERSION,
        description="k3s version for the cluster, e.g. '1.21.2+k3s1'",
    )
