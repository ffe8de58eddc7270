"""
Configuration schema for civo-cluster.

A single settings model covers everything the wrapper needs:
- the pinned civo CLI release and where to download it
- the base image and tag used for the execution environment
- the container engine binary
- variable names injected into the container
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from civo_cluster.types import Platform

DEFAULT_CIVO_VERSION = "1.0.75"
DEFAULT_RELEASE_URL_TEMPLATE = (
    "https://github.com/civo/cli/releases/download/v{version}/civo-{version}-{os}-{arch}.tar.gz"
)


class CivoSettings(BaseModel):
    """
    Settings for building and running the civo CLI container.

    Examples
    --------
        .civo-cluster.yaml:
            civo_version: "1.0.75"
            base_image: alpine:3.20
            docker_binary: podman
            timeout: 900

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    civo_version: Annotated[str, Field(default=DEFAULT_CIVO_VERSION, description="Pinned civo CLI release")]
    base_image: Annotated[str, Field(default="alpine:latest", description="Base image (must provide apk)")]
    release_url_template: Annotated[
        str,
        Field(
            default=DEFAULT_RELEASE_URL_TEMPLATE,
            description="Release archive URL. Placeholders: {version}, {os}, {arch}",
        ),
    ]
    image_repository: Annotated[str, Field(default="civo-cli", description="Repository name for built images")]
    docker_binary: Annotated[str, Field(default="docker", description="Container engine CLI")]
    token_variable: Annotated[str, Field(default="CIVO_TOKEN", description="Variable holding the API token")]
    cache_buster_variable: Annotated[
        str, Field(default="CACHE_BUSTER", description="Variable set to a fresh timestamp on every call")
    ]
    timeout: Annotated[
        float | None, Field(default=None, gt=0, description="Default per-command timeout in seconds")
    ]

    @field_validator("release_url_template")
    @classmethod
    def validate_url_placeholders(cls, value: str) -> str:
        """Validate that the template addresses version, os and arch."""
        missing = [name for name in ("version", "os", "arch") if f"{{{name}}}" not in value]
        if missing:
            raise ValueError(f"release_url_template is missing placeholders: {', '.join(missing)}")
        return value

    def release_url(self, platform: Platform) -> str:
        """
        Build the release archive URL for a platform.

        Example:
        -------
            >>> CivoSettings().release_url(Platform(os="linux", arch="amd64"))
            'https://github.com/civo/cli/releases/download/v1.0.75/civo-1.0.75-linux-amd64.tar.gz'

        """
        return self.release_url_template.format(version=self.civo_version, os=platform.os, arch=platform.arch)

    def image_tag(self, platform: Platform) -> str:
        """Deterministic image reference for a platform, e.g. ``civo-cli:1.0.75-linux-amd64``."""
        return f"{self.image_repository}:{self.civo_version}-{platform.os}-{platform.arch}"
