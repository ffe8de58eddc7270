"""
Example: list Civo clusters and show the first one named on the command line.

Usage:
    CIVO_TOKEN=... python examples/list_clusters.py NYC1 [cluster-name]
"""

import sys

from civo_cluster import CivoClusterError, cluster_list, cluster_show
from civo_cluster.any.container import get_secrets_provider


def main() -> int:
    region = sys.argv[1] if len(sys.argv) > 1 else "NYC1"
    token = get_secrets_provider().get_secret("env:CIVO_TOKEN")

    try:
        print(cluster_list(token, region))
        if len(sys.argv) > 2:
            print(cluster_show(token, region, sys.argv[2]))
    except CivoClusterError as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
