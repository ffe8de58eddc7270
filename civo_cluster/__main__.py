"""Allow ``python -m civo_cluster``."""

from civo_cluster.cli import app

if __name__ == "__main__":
    app(prog_name="civo-cluster")
