"""Tests for the environment builder."""

import pytest
from pydantic import SecretStr

from civo_cluster.any.exceptions import CivoPlatformError, CivoSetupError
from civo_cluster.config.schemas import CivoSettings
from civo_cluster.environment.builder import EnvironmentBuilder, render_dockerfile
from civo_cluster.types import Platform


class TestRenderDockerfile:
    """Test Dockerfile rendering."""

    def test_steps_in_order(self):
        """Test that every install step is present and ordered."""
        dockerfile = render_dockerfile(CivoSettings(), Platform(os="linux", arch="amd64"))

        assert dockerfile.splitlines() == [
            "FROM alpine:latest",
            "RUN apk add --no-cache curl",
            "RUN curl -fsSL -o /tmp/civo.tar.gz "
            "https://github.com/civo/cli/releases/download/v1.0.75/civo-1.0.75-linux-amd64.tar.gz",
            "RUN tar -xzf /tmp/civo.tar.gz -C /tmp",
            "RUN mv /tmp/civo /usr/local/bin/civo",
            "RUN chmod +x /usr/local/bin/civo",
            'ENTRYPOINT ["civo"]',
        ]

    def test_base_image_and_platform(self):
        """Test that settings and platform flow into the Dockerfile."""
        dockerfile = render_dockerfile(CivoSettings(base_image="alpine:3.20"), Platform(os="linux", arch="arm64"))

        assert dockerfile.startswith("FROM alpine:3.20\n")
        assert "civo-1.0.75-linux-arm64.tar.gz" in dockerfile


class TestEnvironmentBuilder:
    """Test EnvironmentBuilder.build."""

    def test_build_with_token(self, fake_runtime, settings):
        """Test that a supplied token is attached as a secret variable."""
        environment = EnvironmentBuilder(fake_runtime, settings).build(SecretStr("abc"))

        assert environment.image == "civo-cli:1.0.75-linux-amd64"
        assert environment.entrypoint == ("civo",)
        assert environment.has_secret("CIVO_TOKEN")
        assert environment.secret_variables["CIVO_TOKEN"].get_secret_value() == "abc"
        assert "CIVO_TOKEN" not in environment.variables

    def test_build_without_token(self, fake_runtime, settings):
        """Test that no credential variable is set when none is given."""
        environment = EnvironmentBuilder(fake_runtime, settings).build()

        assert environment.secret_variables == {}

    def test_one_build_per_call(self, fake_runtime, settings):
        """Test that every build call builds an image."""
        builder = EnvironmentBuilder(fake_runtime, settings)

        builder.build()
        builder.build(SecretStr("abc"))

        assert len(fake_runtime.builds) == 2

    def test_tag_follows_platform(self, runtime_factory, settings):
        """Test that the detected platform picks the image tag and archive."""
        runtime = runtime_factory(platform=Platform(os="linux", arch="arm64"))

        environment = EnvironmentBuilder(runtime, settings).build()

        tag, dockerfile = runtime.builds[0]
        assert environment.image == tag == "civo-cli:1.0.75-linux-arm64"
        assert "linux-arm64.tar.gz" in dockerfile

    def test_custom_token_variable(self, fake_runtime):
        """Test that the token variable name comes from settings."""
        settings = CivoSettings(token_variable="CIVO_API_KEY")

        environment = EnvironmentBuilder(fake_runtime, settings).build(SecretStr("abc"))

        assert environment.has_secret("CIVO_API_KEY")

    def test_platform_failure_propagates(self, fake_runtime, settings):
        """Test that platform errors surface before any build."""
        def failing_detect():
            raise CivoPlatformError("engine down")

        fake_runtime.detect_platform = failing_detect

        with pytest.raises(CivoPlatformError):
            EnvironmentBuilder(fake_runtime, settings).build(SecretStr("abc"))

        assert fake_runtime.builds == []

    def test_build_failure_propagates(self, fake_runtime, settings):
        """Test that a failed image build is not turned into a broken environment."""

        def failing_build(tag, dockerfile, timeout=None):
            raise CivoSetupError("Failed to build image", stage="build", stderr="404")

        fake_runtime.build_image = failing_build

        with pytest.raises(CivoSetupError) as exc_info:
            EnvironmentBuilder(fake_runtime, settings).build()

        assert exc_info.value.stage == "build"

    def test_timeout_defaults_to_settings(self, fake_runtime):
        """Test that settings.timeout is used when no timeout is given."""
        calls = []
        runtime = fake_runtime
        runtime.build_image = lambda tag, dockerfile, timeout=None: calls.append(timeout) or tag

        EnvironmentBuilder(runtime, CivoSettings(timeout=120)).build()
        EnvironmentBuilder(runtime, CivoSettings(timeout=120)).build(timeout=5)

        assert calls == [120, 5]
