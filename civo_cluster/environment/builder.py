"""
Environment builder for the civo CLI container.

Produces a CivoEnvironment whose image carries the pinned civo release for the
engine's platform, with the API token attached when one is given.
"""

import json

from pydantic import SecretStr

from civo_cluster.any.logger import get_logger
from civo_cluster.any.protocols import ContainerRuntime
from civo_cluster.config.schemas import CivoSettings
from civo_cluster.environment.models import CivoEnvironment
from civo_cluster.types import Platform

LOGGER = get_logger("civo_cluster.environment.builder")

ARCHIVE_PATH = "/tmp/civo.tar.gz"
BINARY_PATH = "/usr/local/bin/civo"
ENTRYPOINT = ("civo",)


def render_dockerfile(settings: CivoSettings, platform: Platform) -> str:
    """
    Render the Dockerfile that installs the civo CLI.

    Each step is its own layer so a failed step is named in the build output.
    ``curl -f`` turns HTTP errors into a failed step instead of a bad archive.
    """
    steps = [
        f"FROM {settings.base_image}",
        "RUN apk add --no-cache curl",
        f"RUN curl -fsSL -o {ARCHIVE_PATH} {settings.release_url(platform)}",
        f"RUN tar -xzf {ARCHIVE_PATH} -C /tmp",
        f"RUN mv /tmp/civo {BINARY_PATH}",
        f"RUN chmod +x {BINARY_PATH}",
        f"ENTRYPOINT {json.dumps(list(ENTRYPOINT))}",
    ]
    return "\n".join(steps) + "\n"


class EnvironmentBuilder:
    """
    Builds a fresh civo CLI environment per call.

    Example:
    -------
        ```python
        builder = EnvironmentBuilder(DockerRuntime(), CivoSettings())
        environment = builder.build(SecretStr(token))
        ```

    """

    def __init__(self, runtime: ContainerRuntime, settings: CivoSettings):
        self._runtime = runtime
        self._settings = settings

    @property
    def settings(self) -> CivoSettings:
        return self._settings

    def build(self, api_token: SecretStr | None = None, timeout: float | None = None) -> CivoEnvironment:
        """
        Build the image and return an environment for it.

        Args:
        ----
            api_token: Optional Civo API token, attached as a secret variable
            timeout: Optional build timeout in seconds (defaults to settings.timeout)

        Returns:
        -------
            Ready-to-run CivoEnvironment

        Raises:
        ------
            CivoPlatformError: If the engine platform cannot be detected
            CivoSetupError: If any build step fails

        """
        platform = self._runtime.detect_platform()
        tag = self._settings.image_tag(platform)
        dockerfile = render_dockerfile(self._settings, platform)

        image = self._runtime.build_image(tag, dockerfile, timeout=timeout or self._settings.timeout)
        environment = CivoEnvironment(image=image, entrypoint=ENTRYPOINT)

        if api_token is not None:
            environment = environment.with_secret_variable(self._settings.token_variable, api_token)

        LOGGER.debug(f"Built environment {image} (secrets: {sorted(environment.secret_variables)})")
        return environment
