"""
Command-line interface for civo-cluster.

Usage:
    civo-cluster cluster-list --api-token env:CIVO_TOKEN --region NYC1
    civo-cluster cluster-show --api-token env:CIVO_TOKEN --region NYC1 --name mycluster
    civo-cluster cluster-create --api-token env:CIVO_TOKEN --region NYC1 --name mycluster --node-count 1
    civo-cluster version
"""

import sys
from collections.abc import Callable
from enum import Enum
from typing import Optional

import typer

from civo_cluster.any.container import CivoIoCContainer
from civo_cluster.any.exceptions import (
    CivoConfigurationError,
    CivoExecutionError,
    CivoSecretNotFoundError,
    CivoSetupError,
)
from civo_cluster.any.logger import configure_logging, get_logger
from civo_cluster.cluster import CivoCluster
from civo_cluster.types import DEFAULT_KUBERNETES_VERSION, DEFAULT_NODE_COUNT, DEFAULT_NODE_SIZE

LOGGER = get_logger("civo_cluster.cli")

TOKEN_HELP = "API token reference: env:NAME, file:PATH or cmd:COMMAND"

app = typer.Typer(help="Work with k3s clusters in Civo", no_args_is_help=True)


class LogLevel(str, Enum):
    """Log levels accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", help="Settings file (default: .civo-cluster.yaml)"),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False, help="Log level for stderr output"
    ),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Timeout in seconds for build and command"),
):
    """Set up logging and the container for the chosen command."""
    configure_logging(log_level.value)

    # tests hand in a pre-wired container through obj
    ioc = ctx.obj if isinstance(ctx.obj, CivoIoCContainer) else CivoIoCContainer()
    if config:
        ioc.settings_path.override(config)
    ctx.obj = {"ioc": ioc, "timeout": timeout}


def _execute(ctx: typer.Context, operation: Callable[[CivoCluster, Optional[float]], str]) -> None:
    """
    Run an operation and map failures to exit codes.

    Exit codes: 0 success, 1 setup failure, 2 usage or configuration error,
    otherwise the civo CLI's own exit code.
    """
    ioc: CivoIoCContainer = ctx.obj["ioc"]
    try:
        output = operation(ioc.civo_cluster(), ctx.obj["timeout"])
    except (CivoConfigurationError, CivoSecretNotFoundError) as e:
        LOGGER.error(str(e))
        raise typer.Exit(code=2)
    except CivoSetupError as e:
        LOGGER.error(f"Could not prepare civo environment: {e}")
        if e.stderr:
            sys.stderr.write(e.stderr)
        raise typer.Exit(code=1)
    except CivoExecutionError as e:
        LOGGER.error(str(e))
        raise typer.Exit(code=e.returncode if e.returncode > 0 else 1)

    sys.stdout.write(output)


def _token(ctx: typer.Context, reference: str):
    return ctx.obj["ioc"].secrets_provider().get_secret(reference)


@app.command("cluster-list")
def cluster_list_command(
    ctx: typer.Context,
    api_token: str = typer.Option(..., "--api-token", help=TOKEN_HELP),
    region: str = typer.Option(..., "--region", help="The region to list clusters in"),
):
    """List clusters in a region."""
    _execute(ctx, lambda civo, timeout: civo.cluster_list(_token(ctx, api_token), region, timeout=timeout))


@app.command("cluster-show")
def cluster_show_command(
    ctx: typer.Context,
    api_token: str = typer.Option(..., "--api-token", help=TOKEN_HELP),
    region: str = typer.Option(..., "--region"),
    name: str = typer.Option(..., "--name", help="Cluster name from cluster-list"),
):
    """Show one cluster."""
    _execute(ctx, lambda civo, timeout: civo.cluster_show(_token(ctx, api_token), region, name, timeout=timeout))


@app.command("cluster-create")
def cluster_create_command(
    ctx: typer.Context,
    api_token: str = typer.Option(..., "--api-token", help=TOKEN_HELP),
    region: str = typer.Option(..., "--region", help="The region in which the new cluster should reside"),
    name: str = typer.Option(..., "--name", help="The name of the cluster"),
    node_count: str = typer.Option(DEFAULT_NODE_COUNT, "--node-count", help="Number of nodes to create"),
    node_size: str = typer.Option(DEFAULT_NODE_SIZE, "--node-size", help="Size of nodes to create"),
    version: str = typer.Option(DEFAULT_KUBERNETES_VERSION, "--version", help="k3s version to use"),
):
    """Create a cluster and wait for it."""
    _execute(
        ctx,
        lambda civo, timeout: civo.cluster_create(
            _token(ctx, api_token),
            region,
            name,
            node_count=node_count,
            node_size=node_size,
            version=version,
            timeout=timeout,
        ),
    )


@app.command("version")
def version_command(ctx: typer.Context):
    """Report the civo CLI version."""
    _execute(ctx, lambda civo, timeout: civo.version(timeout=timeout))
