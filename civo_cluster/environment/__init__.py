"""Execution environment for the civo CLI."""

from civo_cluster.environment.builder import EnvironmentBuilder, render_dockerfile
from civo_cluster.environment.models import CivoEnvironment
from civo_cluster.environment.runner import CommandRunner, cache_buster

__all__ = [
    "CivoEnvironment",
    "CommandRunner",
    "EnvironmentBuilder",
    "cache_buster",
    "render_dockerfile",
]
